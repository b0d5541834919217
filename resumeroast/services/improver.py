"""
Improvement plan generation.

Produces prioritized fixes, before/after rewrites of the weakest bullets,
a synthesized summary and ATS formatting tips from the same lexical
features the scorer and roaster use.
"""

import logging
import re
from dataclasses import dataclass

from resumeroast.services.dictionaries import REWRITE_VERBS, ROLE_PATTERNS
from resumeroast.services.features import FeatureSet, extract_features

logger = logging.getLogger(__name__)

MIN_FIXES = 3
MAX_FIXES = 7
MAX_REWRITES = 3
MAX_CORE_LENGTH = 100

GENERIC_FIX = (
    "Review each bullet for the pattern: [Action Verb] + [What You Did] + [Technology Used] + "
    "[Measurable Result]. Rewrite any that don't match."
)

BASE_ATS_TIPS = (
    "Use a single-column layout to ensure ATS can parse your resume correctly.",
    "Avoid tables, text boxes, headers/footers, and multi-column formats.",
    "Use standard section headings: Experience, Education, Skills, Projects.",
    "Save as PDF to preserve formatting across devices.",
)

VAGUE_BULLET_PATTERNS = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"responsible for", r"helped with", r"assisted in", r"worked on", r"involved in",
        r"participated in", r"tasked with", r"various", r"miscellaneous",
    )
)
BULLET_METRIC_PATTERN = re.compile(r"\d+%|\$[\d,]+|\d+x\b", re.IGNORECASE)

VAGUE_PREFIX = re.compile(
    r"^(?:responsible for|helped with|assisted in|worked on|involved in|participated in|tasked with)\s*",
    re.IGNORECASE,
)
VERB_PREFIX = re.compile(
    r"^(?:built|created|developed|designed|implemented|managed|led|established|launched|deployed|"
    r"maintained|wrote|authored|handled|conducted|performed|executed|coordinated|organized|"
    r"facilitated|supported|contributed to)\s+",
    re.IGNORECASE,
)

YEARS_PATTERN = re.compile(r"(\d+)\+?\s*years?\s*(?:of\s*)?(?:experience|exp)", re.IGNORECASE)
MONTH_DATE_PATTERN = re.compile(
    r"\b(?:jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec|january|february|march|april|june|"
    r"july|august|september|october|november|december)\b\s*\d{4}",
    re.IGNORECASE,
)
RANGE_DATE_PATTERN = re.compile(r"\d{4}\s*[-–]\s*(?:\d{4}|present|current)", re.IGNORECASE)

_ROLE_PATTERNS = tuple((re.compile(p, re.IGNORECASE), label) for p, label in ROLE_PATTERNS)
DEFAULT_ROLE = "software professional"


@dataclass
class BulletRewrite:
    before: str
    after: str


@dataclass
class ImprovementResult:
    priority_fixes: list[str]
    rewritten_bullets: list[BulletRewrite]
    improved_summary: str
    ats_tips: list[str]


def priority_fixes(f: FeatureSet) -> list[str]:
    """Ordered fixes for the most damaging gaps, padded to at least three."""
    fixes = []

    if f.quick_metric_count == 0:
        fixes.append(
            "Add quantified metrics to every bullet point. Use numbers like percentages, dollar amounts, "
            "time saved, users impacted. Even estimates with (~X%) are better than nothing."
        )
    elif f.quick_metric_count < 3:
        fixes.append(
            "You have a few metrics, but aim for at least one quantified result per role. "
            "Replace vague claims with specific numbers."
        )

    if f.vague_phrases:
        fixes.append(
            f'Replace vague phrases like "{f.vague_phrases[0]}" with specific action verbs followed by '
            f'measurable outcomes. Use verbs like "Engineered," "Delivered," or "Optimized."'
        )

    if not f.mentions_section("summary"):
        fixes.append(
            "Add a professional summary section (2-3 sentences) at the top that positions you for your "
            "target role and highlights your strongest differentiators."
        )

    if not f.mentions_section("projects"):
        fixes.append(
            "Add a Projects section showcasing 2-3 things you've built, with tech stack, what you did, "
            "and a link if possible. This proves you ship."
        )

    if f.link_count == 0:
        fixes.append(
            "Add links to your GitHub, portfolio, or LinkedIn profile. Recruiters want to see evidence "
            "of your work online."
        )

    if f.buzzword_count > 3:
        fixes.append(
            f"Cut the buzzwords ({', '.join(f.buzzwords[:3])}). Replace each with a concrete example of "
            f"what you actually did."
        )

    if f.word_count > 1000:
        fixes.append(
            "Your resume is too long. Cut it to one page by removing the weakest bullets and keeping only "
            "your top achievements per role."
        )

    if not f.mentions_section("skills"):
        fixes.append(
            "Add a dedicated Skills/Technologies section grouped by category (Languages, Frameworks, "
            "Tools, Cloud, etc.)."
        )

    if len(f.tech_stack) < 3:
        fixes.append(
            "Name specific technologies throughout your bullets instead of being vague. 'Built a REST API' "
            "becomes 'Built a REST API using Node.js, Express, and PostgreSQL.'"
        )

    while len(fixes) < MIN_FIXES:
        fixes.append(GENERIC_FIX)

    return fixes[:MAX_FIXES]


def _needs_rewrite(bullet: str) -> bool:
    is_vague = any(p.search(bullet) for p in VAGUE_BULLET_PATTERNS)
    return is_vague or not BULLET_METRIC_PATTERN.search(bullet)


def rewrite_bullet(bullet: str, verb: str, tech_stack) -> str:
    """Rewrite one bullet as Verb + what + tech + result placeholder."""
    core = VAGUE_PREFIX.sub("", bullet, count=1)
    core = VERB_PREFIX.sub("", core, count=1)
    core = re.sub(r"\.$", "", core).strip()
    if len(core) > MAX_CORE_LENGTH:
        core = core[:MAX_CORE_LENGTH - 3] + "..."

    lower = bullet.lower()
    new_tech = [t for t in tech_stack if t.lower() not in lower]
    tech_mention = f" leveraging {' and '.join(new_tech[:2])}" if new_tech else ""

    return f"{verb} {core[:1].lower()}{core[1:]}{tech_mention}, resulting in (~X%) improvement in [key metric]"


def rewrite_bullets(f: FeatureSet) -> list[BulletRewrite]:
    """Rewrite up to three vague or metric-free bullets (the first bullets if none qualify)."""
    targets = [b for b in f.bullets if _needs_rewrite(b)][:MAX_REWRITES]
    if not targets:
        targets = list(f.bullets[:MAX_REWRITES])

    return [
        BulletRewrite(before=bullet, after=rewrite_bullet(bullet, REWRITE_VERBS[i % len(REWRITE_VERBS)], f.tech_stack))
        for i, bullet in enumerate(targets)
    ]


def detect_role(text: str) -> str:
    for pattern, label in _ROLE_PATTERNS:
        if pattern.search(text):
            return label
    return DEFAULT_ROLE


def improved_summary(text: str, tech_stack) -> str:
    role = detect_role(text)

    top_tech = ", ".join(tech_stack[:4])
    tech_phrase = f" specializing in {top_tech}" if top_tech else ""

    years = YEARS_PATTERN.search(text)
    years_phrase = f" with {years.group(1)}+ years of experience" if years else ""

    return (
        f"Results-driven {role}{years_phrase}{tech_phrase}. Proven track record of delivering scalable "
        f"solutions and driving measurable business impact. Seeking to leverage technical expertise and "
        f"leadership skills to [target goal/company mission]."
    )


def ats_tips(text: str, f: FeatureSet) -> list[str]:
    tips = list(BASE_ATS_TIPS)
    if f.word_count < 200:
        tips.append("Your resume seems very sparse - expand with more detail and achievements.")
    if not MONTH_DATE_PATTERN.search(text) and not RANGE_DATE_PATTERN.search(text):
        tips.append("Use consistent date formats throughout (e.g., 'Jan 2022 - Present' or '2022 - Present').")
    return tips


def improve(text: str) -> ImprovementResult:
    """Build the improvement plan for raw resume text."""
    features = extract_features(text)
    result = ImprovementResult(
        priority_fixes=priority_fixes(features),
        rewritten_bullets=rewrite_bullets(features),
        improved_summary=improved_summary(text, features.tech_stack),
        ats_tips=ats_tips(text, features),
    )
    logger.debug(
        f"Improvement plan: fixes={len(result.priority_fixes)} rewrites={len(result.rewritten_bullets)}"
    )
    return result
