"""
Lexical feature detectors for resume text.

Each detector is a pure function over the full text. `extract_features`
runs all of them once and packs the results into a read-only `FeatureSet`
that the scorer, the roaster and the improvement generator all consume.

Matching rules differ per dictionary on purpose: the tech stack, verbs,
ownership and adaptability keywords are matched on word boundaries, while
buzzwords, scale words, vague phrases and routine-role keywords are plain
substring checks (so "pivot" also fires inside "pivotal").
"""

import re
from dataclasses import dataclass, field

from resumeroast.services.dictionaries import (
    ADAPTABILITY_KEYWORDS,
    BUZZWORDS,
    IMPACT_VERBS,
    OWNERSHIP_KEYWORDS,
    ROUTINE_ROLE_KEYWORDS,
    SCALE_WORDS,
    SHIPPING_VERBS,
    TECH_STACK,
    VAGUE_PHRASES,
)
from resumeroast.services.text_processing import extract_bullets, extract_sections

METRIC_PATTERNS = (
    re.compile(r"\d+%"),
    re.compile(r"\$[\d,]+"),
    re.compile(r"\d+(?:ms|s|sec|mins?|hours?|days?)\b"),
    re.compile(r"\d+(?:k|m|b)\b", re.IGNORECASE),
    re.compile(r"\d+x\b", re.IGNORECASE),
    re.compile(
        r"\d[\d,]*\+?\s*(?:users?|customers?|clients?|transactions?|requests?|downloads?)",
        re.IGNORECASE,
    ),
    re.compile(
        r"(?:reduced|increased|improved|boosted|grew|saved|generated|optimized)\s+\w+\s+(?:by\s+)?\d",
        re.IGNORECASE,
    ),
)

# Percentages, dollar amounts and multipliers only
QUICK_METRIC_PATTERNS = (
    re.compile(r"\d+%"),
    re.compile(r"\$[\d,]+"),
    re.compile(r"\d+x\b", re.IGNORECASE),
)

URL_PATTERN = re.compile(r"https?://[^\s)]+", re.IGNORECASE)
GITHUB_PATTERN = re.compile(r"github\.com", re.IGNORECASE)
WEBSITE_PATTERN = re.compile(r"(?:portfolio|\.dev|\.io|\.com/~|personal\s*website)", re.IGNORECASE)

# Whole-text keyword mentions, independent of heading detection
MENTION_PATTERNS = {
    "projects": re.compile(r"\b(?:projects|personal projects|side projects|portfolio)\b", re.IGNORECASE),
    "experience": re.compile(r"\b(?:experience|employment|work history)\b", re.IGNORECASE),
    "skills": re.compile(r"\b(?:skills|technical skills|technologies)\b", re.IGNORECASE),
    "summary": re.compile(r"\b(?:summary|objective|profile|about)\b", re.IGNORECASE),
    "education": re.compile(r"\b(?:education|academic|degree|university)\b", re.IGNORECASE),
}

LONG_BULLET_WORDS = 35
SHORT_BULLET_WORDS = 6


def _word_patterns(terms):
    return tuple((term, re.compile(rf"\b{re.escape(term)}\b", re.IGNORECASE)) for term in terms)


_TECH_PATTERNS = _word_patterns(TECH_STACK)
_IMPACT_PATTERNS = _word_patterns(IMPACT_VERBS)
_SHIPPING_PATTERNS = _word_patterns(SHIPPING_VERBS)
_OWNERSHIP_PATTERNS = _word_patterns(OWNERSHIP_KEYWORDS)
_ADAPTABILITY_PATTERNS = _word_patterns(ADAPTABILITY_KEYWORDS)


@dataclass(frozen=True)
class FeatureSet:
    """Lexical signals extracted once from a resume text."""
    word_count: int
    bullets: tuple[str, ...]
    metric_count: int
    quick_metric_count: int
    link_count: int
    buzzwords: tuple[str, ...]
    tech_stack: tuple[str, ...]
    scale_words: tuple[str, ...]
    vague_phrases: tuple[str, ...]
    impact_verbs: tuple[str, ...]
    has_routine_role: bool
    has_ownership: bool
    has_adaptability: bool
    has_shipping_verbs: bool
    has_github_link: bool
    has_website_link: bool
    # Sections found by the heading segmenter
    sections: frozenset[str] = field(default_factory=frozenset)
    # Keywords mentioned anywhere in the text
    mentions: frozenset[str] = field(default_factory=frozenset)

    @property
    def bullet_count(self) -> int:
        return len(self.bullets)

    @property
    def buzzword_count(self) -> int:
        return len(self.buzzwords)

    @property
    def buzzword_density(self) -> float:
        return self.buzzword_count / self.word_count if self.word_count > 0 else 0.0

    @property
    def long_bullet_count(self) -> int:
        return sum(1 for b in self.bullets if len(b.split()) > LONG_BULLET_WORDS)

    @property
    def short_bullet_count(self) -> int:
        return sum(1 for b in self.bullets if len(b.split()) < SHORT_BULLET_WORDS)

    def has_section(self, name: str) -> bool:
        return name in self.sections

    def mentions_section(self, name: str) -> bool:
        return name in self.mentions


def count_metrics(text: str) -> int:
    """Count quantified results. Overlapping pattern classes are counted once each."""
    return sum(len(p.findall(text)) for p in METRIC_PATTERNS)


def count_quick_metrics(text: str) -> int:
    return sum(len(p.findall(text)) for p in QUICK_METRIC_PATTERNS)


def count_links(text: str) -> int:
    return len(URL_PATTERN.findall(text))


def _substring_matches(text: str, terms) -> tuple[str, ...]:
    lower = text.lower()
    return tuple(dict.fromkeys(t for t in terms if t in lower))


def _word_matches(text: str, patterns) -> tuple[str, ...]:
    return tuple(dict.fromkeys(term for term, pattern in patterns if pattern.search(text)))


def detect_buzzwords(text: str) -> tuple[str, ...]:
    return _substring_matches(text, BUZZWORDS)


def detect_tech_stack(text: str) -> tuple[str, ...]:
    return _word_matches(text, _TECH_PATTERNS)


def detect_scale_words(text: str) -> tuple[str, ...]:
    return _substring_matches(text, SCALE_WORDS)


def detect_vague_phrases(text: str) -> tuple[str, ...]:
    return _substring_matches(text, VAGUE_PHRASES)


def detect_impact_verbs(text: str) -> tuple[str, ...]:
    return _word_matches(text, _IMPACT_PATTERNS)


def detect_mentions(text: str) -> frozenset[str]:
    return frozenset(name for name, pattern in MENTION_PATTERNS.items() if pattern.search(text))


def extract_features(text: str) -> FeatureSet:
    """Run every detector over `text` and return the combined feature set."""
    sections = extract_sections(text)
    lower = text.lower()

    return FeatureSet(
        word_count=len(text.split()),
        bullets=tuple(extract_bullets(text)),
        metric_count=count_metrics(text),
        quick_metric_count=count_quick_metrics(text),
        link_count=count_links(text),
        buzzwords=detect_buzzwords(text),
        tech_stack=detect_tech_stack(text),
        scale_words=detect_scale_words(text),
        vague_phrases=detect_vague_phrases(text),
        impact_verbs=detect_impact_verbs(text),
        has_routine_role=any(k in lower for k in ROUTINE_ROLE_KEYWORDS),
        has_ownership=bool(_word_matches(text, _OWNERSHIP_PATTERNS)),
        has_adaptability=bool(_word_matches(text, _ADAPTABILITY_PATTERNS)),
        has_shipping_verbs=bool(_word_matches(text, _SHIPPING_PATTERNS)),
        has_github_link=bool(GITHUB_PATTERN.search(text)),
        has_website_link=bool(WEBSITE_PATTERN.search(text)),
        sections=frozenset(name for name, body in sections.items() if body),
        mentions=detect_mentions(text),
    )
