"""
Rule-based resume risk scoring.

Six category scores are built from fixed additive rules over the extracted
features, each starting at a base value and clamped to 0-100:

1. Role Susceptibility - routine vs. ownership signals
2. Proof of Impact - metrics per bullet and impact verbs
3. Differentiation - tech depth, scale and certifications
4. Portfolio & Shipping Signals - links, projects, shipping verbs
5. Clarity & Structure - key sections, buzzword density, bullet shape
6. Adaptability Signals - learning signals and breadth of stack

The final score is a weighted average turned into a 1-10 scale where higher
is healthier. Every number is a pure function of the text.
"""

import logging
import math
import re
from dataclasses import dataclass, field
from typing import Optional

from resumeroast.services.features import FeatureSet, extract_features
from resumeroast.services.text_processing import normalize_text

logger = logging.getLogger(__name__)


CATEGORY_WEIGHTS = (0.20, 0.25, 0.15, 0.15, 0.15, 0.10)

KEY_SECTIONS = ("experience", "skills", "education", "summary")

DISCLAIMERS = (
    "This analysis is rule-based and does not use any AI/LLM.",
    "Scores are computed from heuristic pattern matching and may not capture all nuances.",
    "A high risk score does not mean you'll be replaced - it highlights areas to strengthen.",
)

FALLBACK_STRENGTH = "Resume text was provided for analysis"


@dataclass
class CategoryScore:
    """Score for one rubric category (0-100, as computed by its rules)."""
    name: str
    score: float
    note: str

    @property
    def display_score(self) -> int:
        return _round_half_up(100 - self.score)


@dataclass
class DetectedInfo:
    """Counts and section flags reported back to the caller."""
    word_count: int
    bullet_count: int
    metric_count: int
    link_count: int
    has_projects: bool
    has_experience: bool
    has_skills: bool
    has_education: bool


@dataclass
class AnalysisResult:
    """Complete analysis result."""
    score: int  # 1-10, higher is healthier
    label: str
    summary: str
    breakdown: list[CategoryScore]
    strengths: list[str]
    red_flags: list[str]
    detected: DetectedInfo
    disclaimers: list[str] = field(default_factory=lambda: list(DISCLAIMERS))


def _clamp(value: float, low: float = 0, high: float = 100) -> float:
    return max(low, min(high, value))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _band(score: float, low: float, high: float, notes: tuple[str, str, str]) -> str:
    if score < low:
        return notes[0]
    if score < high:
        return notes[1]
    return notes[2]


def risk_label(score: int) -> str:
    """Map the 1-10 health score to its risk band."""
    if score <= 3:
        return "High Risk"
    elif score <= 6:
        return "Medium Risk"
    return "Low Risk"


class RiskScorer:
    """
    Rule-based scoring engine.

    Turns a `FeatureSet` into category scores, a final 1-10 score, and the
    strengths / red flags lists used to build the summary sentence.
    """

    def analyze(self, text: str) -> AnalysisResult:
        """
        Analyze resume text.

        Args:
            text: Raw resume text. Any string is accepted.

        Returns:
            AnalysisResult with the final score, breakdown and findings
        """
        features = extract_features(normalize_text(text))
        return self.score(features)

    def score(self, features: FeatureSet) -> AnalysisResult:
        """Score an already extracted feature set."""
        breakdown = [
            self._score_role_susceptibility(features),
            self._score_proof_of_impact(features),
            self._score_differentiation(features),
            self._score_portfolio(features),
            self._score_clarity(features),
            self._score_adaptability(features),
        ]

        final_score = self._final_score(breakdown)
        label = risk_label(final_score)

        strengths = self._strengths(features)
        red_flags = self._red_flags(features)
        summary = self._summary(strengths, red_flags)

        logger.debug(
            f"Scored resume: score={final_score} words={features.word_count} "
            f"bullets={features.bullet_count} metrics={features.metric_count}"
        )

        return AnalysisResult(
            score=final_score,
            label=label,
            summary=summary,
            breakdown=breakdown,
            strengths=strengths,
            red_flags=red_flags,
            detected=DetectedInfo(
                word_count=features.word_count,
                bullet_count=features.bullet_count,
                metric_count=features.metric_count,
                link_count=features.link_count,
                has_projects=features.has_section("projects"),
                has_experience=features.has_section("experience"),
                has_skills=features.has_section("skills"),
                has_education=features.has_section("education"),
            ),
        )

    def _final_score(self, breakdown: list[CategoryScore]) -> int:
        # Risk is averaged over the displayed (inverted) category values
        weighted = sum(c.display_score * w for c, w in zip(breakdown, CATEGORY_WEIGHTS))
        risk = int(_clamp(math.ceil(round(weighted, 6) / 10), 1, 10))
        return 11 - risk

    def _score_role_susceptibility(self, f: FeatureSet) -> CategoryScore:
        score = 50
        if f.has_routine_role:
            score += 20
        if f.has_ownership:
            score -= 15
        if len(f.vague_phrases) > 3:
            score += 10
        if len(f.impact_verbs) > 5:
            score -= 10
        score = _clamp(score)

        if score > 60:
            note = "Your role description suggests tasks that could be automated"
        elif score > 40:
            note = "Mixed signals - some unique ownership, some routine tasks"
        else:
            note = "Strong ownership and leadership signals detected"

        return CategoryScore(name="Role Susceptibility", score=score, note=note)

    def _score_proof_of_impact(self, f: FeatureSet) -> CategoryScore:
        score = 20
        if f.bullet_count > 0:
            score += min(40, (f.metric_count / f.bullet_count) * 50)
        if len(f.impact_verbs) > 3:
            score += 15
        if len(f.impact_verbs) > 7:
            score += 10
        if f.metric_count > 5:
            score += 10
        score = _clamp(score)

        note = _band(score, 30, 60, (
            "Very few quantified achievements - add numbers!",
            "Some metrics found, but more data-backed results would help",
            "Good use of quantified impact and action verbs",
        ))
        return CategoryScore(name="Proof of Impact", score=score, note=note)

    def _score_differentiation(self, f: FeatureSet) -> CategoryScore:
        tech_count = len(f.tech_stack)
        score = 15
        score += min(35, tech_count * 3)
        if f.scale_words:
            score += 15
        if len(f.scale_words) > 3:
            score += 10
        if tech_count > 10:
            score += 10
        if f.has_section("certifications"):
            score += 5
        score = _clamp(score)

        note = _band(score, 30, 60, (
            "Generic skill set - needs more specialized or advanced tech",
            f"{tech_count} technologies detected - consider highlighting advanced skills",
            f"Strong tech depth with {tech_count} technologies and scale indicators",
        ))
        return CategoryScore(name="Differentiation", score=score, note=note)

    def _score_portfolio(self, f: FeatureSet) -> CategoryScore:
        score = 10
        if f.has_github_link:
            score += 20
        if f.has_website_link:
            score += 15
        if f.has_section("projects"):
            score += 20
        if f.has_shipping_verbs:
            score += 15
        if f.link_count > 2:
            score += 10
        score = _clamp(score)

        note = _band(score, 30, 60, (
            "No links, projects, or evidence of shipping found",
            "Some signals but missing GitHub/portfolio links or projects section",
            "Good evidence of building and shipping real work",
        ))
        return CategoryScore(name="Portfolio & Shipping Signals", score=score, note=note)

    def _score_clarity(self, f: FeatureSet) -> CategoryScore:
        score = 40
        score += 8 * sum(1 for s in KEY_SECTIONS if f.has_section(s))
        if f.buzzword_density > 0.02:
            score -= 15
        if f.buzzword_density > 0.04:
            score -= 10
        if f.long_bullet_count > 3:
            score -= 10
        if f.short_bullet_count > f.bullet_count * 0.5 and f.bullet_count > 3:
            score -= 10
        if len(f.vague_phrases) > 2:
            score -= 10
        if not f.vague_phrases and f.bullet_count > 3:
            score += 10
        score = _clamp(score)

        note = _band(score, 40, 70, (
            "Missing key sections, high buzzword density, or unclear formatting",
            "Decent structure with room for improvement in conciseness",
            "Well-organized with clear, readable sections",
        ))
        return CategoryScore(name="Clarity & Structure", score=score, note=note)

    def _score_adaptability(self, f: FeatureSet) -> CategoryScore:
        tech_count = len(f.tech_stack)
        score = 20
        if f.has_adaptability:
            score += 25
        if tech_count > 5:
            score += 20
        if tech_count > 10:
            score += 10
        if f.scale_words:
            score += 10
        score = _clamp(score)

        note = _band(score, 30, 60, (
            "No signals of learning new tech or cross-functional work",
            "Some adaptability signals detected",
            "Strong signals of continuous learning and adaptation",
        ))
        return CategoryScore(name="Adaptability Signals", score=score, note=note)

    def _strengths(self, f: FeatureSet) -> list[str]:
        strengths = []
        if f.metric_count > 3:
            strengths.append("Quantified achievements with specific metrics")
        if len(f.tech_stack) > 8:
            strengths.append(f"Diverse tech stack ({len(f.tech_stack)} technologies)")
        if f.has_section("projects"):
            strengths.append("Dedicated projects section showing initiative")
        if f.has_github_link or f.has_website_link:
            strengths.append("Links to portfolio or code samples")
        if len(f.impact_verbs) > 5:
            strengths.append("Strong action verbs throughout")
        if f.has_ownership:
            strengths.append("Evidence of leadership and ownership")
        if f.has_adaptability:
            strengths.append("Signals of adaptability and growth")
        if all(f.has_section(s) for s in KEY_SECTIONS):
            strengths.append("Complete resume structure with all key sections")
        if f.has_section("certifications"):
            strengths.append("Professional certifications listed")
        if f.scale_words:
            strengths.append("Experience at scale mentioned")
        if not strengths:
            strengths.append(FALLBACK_STRENGTH)
        return strengths

    def _red_flags(self, f: FeatureSet) -> list[str]:
        red_flags = []
        if f.metric_count == 0:
            red_flags.append("Zero quantified metrics - every bullet should have numbers")
        if not f.has_section("projects") and not f.has_github_link:
            red_flags.append("No projects or code portfolio visible")
        if f.buzzword_count > 3:
            red_flags.append(f"High buzzword density ({', '.join(f.buzzwords[:3])}...)")
        if f.vague_phrases:
            red_flags.append(f'Vague phrases detected: "{f.vague_phrases[0]}"')
        if not f.has_section("experience"):
            red_flags.append("No experience section found")
        if not f.has_section("skills"):
            red_flags.append("No dedicated skills section")
        if not f.has_section("summary"):
            red_flags.append("Missing summary/profile section")
        if f.long_bullet_count > 2:
            red_flags.append("Several overly long bullet points")
        if f.short_bullet_count > 3:
            red_flags.append("Too many short, unsubstantial bullet points")
        if f.link_count == 0:
            red_flags.append("No URLs or links found anywhere")
        if f.word_count < 150:
            red_flags.append("Resume seems very short - too few details")
        if f.word_count > 1200:
            red_flags.append("Resume may be too long - consider trimming")
        return red_flags

    def _summary(self, strengths: list[str], red_flags: list[str]) -> str:
        """Build the one-sentence verdict from the top strengths and red flag."""
        strength_text = strengths[0].lower()
        if len(strengths) > 1:
            strength_text += f" and {strengths[1].lower()}"

        weakness = red_flags[0] if red_flags else "minor formatting issues"
        top_fix = _fix_phrase(red_flags[0]) if red_flags else "minor polishing"

        return (
            f"Your resume shows {strength_text}, but it's held back by {weakness.lower()}. "
            f"Fixing {top_fix} will immediately improve your score."
        )


def _fix_phrase(red_flag: str) -> str:
    """Turn a red flag into the thing to add ("no skills..." -> "adding skills...")."""
    phrase = red_flag.lower()
    for prefix, replacement in (("no", "adding "), ("zero", "adding "), ("missing", "adding a ")):
        phrase = re.sub(rf"^{prefix}\s+", replacement, phrase)
    return phrase


# Singleton instance
_risk_scorer: Optional[RiskScorer] = None


def get_risk_scorer() -> RiskScorer:
    """Get or create the risk scorer singleton."""
    global _risk_scorer
    if _risk_scorer is None:
        _risk_scorer = RiskScorer()
    return _risk_scorer


def analyze(text: str) -> AnalysisResult:
    """Score resume text. Total over any string input."""
    return get_risk_scorer().analyze(text)
