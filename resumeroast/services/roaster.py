"""
Roast generation.

Lines are drawn from the template bank in four phases, every choice made
with `SeededRandom` keyed by the raw text:

1. up to 2 "overall" openers
2. one line per distinct triggered category, up to 12 lines
3. random fill from the triggered templates up to 10 lines, stopping at
   the first repeated line
4. up to 2 finishers, never past 14 lines
"""

import logging
from dataclasses import dataclass, field

from resumeroast.services.features import FeatureSet, extract_features
from resumeroast.services.roast_templates import (
    BOUNDARIES,
    FINISHER,
    LEVEL_ORDER,
    OVERALL,
    REDEMPTIONS,
    TEMPLATES,
    TITLES,
    RoastLevel,
    RoastTemplate,
)
from resumeroast.services.seeded_random import seeded_pick, seeded_shuffle, text_seed

logger = logging.getLogger(__name__)

MAX_OVERALL_LINES = 2
MAX_TRIGGERED_LINES = 12
MIN_LINES = 10
MAX_FINISHERS = 2
MAX_LINES = 14

FALLBACK_BEST_LINE = "Your resume needs work."
FALLBACK_BUZZWORDS = ("dynamic", "synergy")


@dataclass
class RoastResult:
    title: str
    roast_lines: list[str]
    best_line: str
    redemption: list[str]
    boundaries: list[str] = field(default_factory=lambda: list(BOUNDARIES))


def eligible_templates(features: FeatureSet, level: RoastLevel) -> list[RoastTemplate]:
    """Templates allowed at `level` whose trigger fires for `features`."""
    limit = LEVEL_ORDER[level]
    return [t for t in TEMPLATES if LEVEL_ORDER[t.min_level] <= limit and t.trigger(features)]


def fill_placeholders(line: str, features: FeatureSet) -> str:
    """Replace the first {BW1} / {BW2} with detected buzzwords or fixed fallbacks."""
    found = list(features.buzzwords[:2])
    first, second = (found + list(FALLBACK_BUZZWORDS[len(found):]))[:2]
    return line.replace("{BW1}", first, 1).replace("{BW2}", second, 1)


def pick_best_line(lines: list[str], seed: int) -> str:
    if not lines:
        return FALLBACK_BEST_LINE
    index = seed % max(1, min(len(lines) - 2, 8)) + 1
    return lines[index] if index < len(lines) else lines[0]


def select_lines(features: FeatureSet, level: RoastLevel, seed: int) -> list[str]:
    """Run the four selection phases and return the ordered roast lines."""
    eligible = eligible_templates(features, level)
    overall = [t for t in eligible if t.category == OVERALL]
    triggered = [t for t in eligible if t.category not in (OVERALL, FINISHER)]
    finishers = [t for t in eligible if t.category == FINISHER]

    lines: list[str] = []

    for i, template in enumerate(seeded_shuffle(overall, seed)[:MAX_OVERALL_LINES]):
        lines.append(fill_placeholders(seeded_pick(template.lines, seed + i * 7), features))

    used_categories = set()
    for template in seeded_shuffle(triggered, seed + 100):
        if len(lines) >= MAX_TRIGGERED_LINES:
            break
        if template.category in used_categories:
            continue
        used_categories.add(template.category)
        line = seeded_pick(template.lines, seed + len(lines) * 13)
        lines.append(fill_placeholders(line, features))

    while len(lines) < MIN_LINES and triggered:
        template = seeded_pick(triggered, seed + len(lines) * 19)
        line = fill_placeholders(seeded_pick(template.lines, seed + len(lines) * 23), features)
        if line in lines:
            break
        lines.append(line)

    for i, template in enumerate(seeded_shuffle(finishers, seed + 200)[:MAX_FINISHERS]):
        if len(lines) >= MAX_LINES:
            break
        lines.append(fill_placeholders(seeded_pick(template.lines, seed + 300 + i), features))

    return lines


def roast(text: str, level: RoastLevel) -> RoastResult:
    """Build a reproducible roast of `text` at the given intensity."""
    seed = text_seed(text)
    features = extract_features(text)
    lines = select_lines(features, level, seed)

    logger.debug(f"Roast generated: level={level} seed={seed} lines={len(lines)}")

    return RoastResult(
        title=seeded_pick(TITLES[level], seed),
        roast_lines=lines,
        best_line=pick_best_line(lines, seed),
        redemption=seeded_shuffle(REDEMPTIONS, seed + 500)[:3],
    )
