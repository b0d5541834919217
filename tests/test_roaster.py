import pytest

import resumeroast.services.roaster as roaster
from resumeroast.services.features import extract_features
from resumeroast.services.roast_templates import (
    BOUNDARIES,
    FINISHER,
    OVERALL,
    REDEMPTIONS,
    TEMPLATES,
    TITLES,
    RoastTemplate,
    always,
    no_links,
)
from resumeroast.services.roaster import (
    FALLBACK_BEST_LINE,
    MAX_LINES,
    eligible_templates,
    fill_placeholders,
    pick_best_line,
    roast,
    select_lines,
)

LEVELS = ("light", "medium", "spicy")


def _lines_for(category=None, min_level=None):
    return {
        line
        for t in TEMPLATES
        if (category is None or t.category == category) and (min_level is None or t.min_level == min_level)
        for line in t.lines
    }


@pytest.mark.parametrize("level", LEVELS)
def test_roast_is_deterministic(weak_resume, level):
    assert roast(weak_resume, level) == roast(weak_resume, level)


@pytest.mark.parametrize("level", LEVELS)
def test_roast_shape(weak_resume, level):
    result = roast(weak_resume, level)
    assert result.title in TITLES[level]
    assert 0 < len(result.roast_lines) <= MAX_LINES
    assert result.best_line in result.roast_lines
    assert len(result.redemption) == 3
    assert len(set(result.redemption)) == 3
    assert set(result.redemption) <= set(REDEMPTIONS)
    assert result.boundaries == list(BOUNDARIES)


@pytest.mark.parametrize("level", LEVELS)
def test_metric_free_resume_always_gets_metrics_line(weak_resume, level):
    lines = roast(weak_resume, level).roast_lines
    assert set(lines) & _lines_for("no_metrics")


def test_light_roast_uses_only_light_lines(weak_resume):
    lines = roast(weak_resume, "light").roast_lines
    assert set(lines) <= _lines_for(min_level="light")


def test_one_line_per_triggered_category(weak_resume):
    lines = set(roast(weak_resume, "spicy").roast_lines)
    for category in ("no_metrics", "vague", "weak_bullets", "no_projects", "generic_skills", "no_links", "too_short"):
        assert lines & _lines_for(category), category


def test_eligible_templates_respect_level_and_trigger(weak_resume, strong_resume):
    weak = extract_features(weak_resume)
    assert all(t.min_level == "light" for t in eligible_templates(weak, "light"))
    assert any(t.min_level == "spicy" for t in eligible_templates(weak, "spicy"))

    strong_categories = {t.category for t in eligible_templates(extract_features(strong_resume), "spicy")}
    assert "no_metrics" not in strong_categories
    assert "no_links" not in strong_categories
    assert "no_projects" not in strong_categories


def test_fill_placeholders_uses_detected_buzzwords():
    features = extract_features("A synergy-loving rockstar")
    line = '"{BW1}" and "{BW2}" walk into a bar'
    assert fill_placeholders(line, features) == '"synergy" and "rockstar" walk into a bar'


def test_fill_placeholders_fallbacks():
    line = "{BW1} / {BW2}"
    assert fill_placeholders(line, extract_features("plain text")) == "dynamic / synergy"
    assert fill_placeholders(line, extract_features("a real ninja")) == "ninja / synergy"


def test_fill_placeholders_replaces_first_occurrence_only():
    assert fill_placeholders("{BW1} {BW1}", extract_features("plain")) == "dynamic {BW1}"


def test_pick_best_line():
    assert pick_best_line([], 5) == FALLBACK_BEST_LINE
    assert pick_best_line(["only"], 5) == "only"
    assert pick_best_line(["a", "b", "c", "d", "e"], 0) == "b"
    assert pick_best_line(["a", "b", "c", "d", "e"], 2) == "d"


def test_different_text_can_change_roast(weak_resume):
    results = {tuple(roast(weak_resume + "\n" * n + "x", "medium").roast_lines) for n in range(1, 6)}
    assert len(results) > 1


def _template(category, *lines, level="light", trigger=always):
    return RoastTemplate(level, trigger, category, tuple(lines))


def test_fill_phase_stops_at_first_repeated_line(monkeypatch):
    monkeypatch.setattr(roaster, "TEMPLATES", (_template("solo", "only line"),))
    assert select_lines(extract_features("plain"), "light", 12345) == ["only line"]


def test_fill_phase_never_repeats_a_line(monkeypatch):
    monkeypatch.setattr(roaster, "TEMPLATES", (
        _template("first", *[f"first {i}" for i in range(20)]),
        _template("second", *[f"second {i}" for i in range(20)]),
    ))
    lines = select_lines(extract_features("plain"), "light", 987)
    assert 2 <= len(lines) <= 10
    assert len(set(lines)) == len(lines)


def test_line_caps_per_phase(monkeypatch):
    monkeypatch.setattr(roaster, "TEMPLATES", (
        *[_template(OVERALL, f"overall {i}") for i in range(3)],
        *[_template(f"category {i}", f"line {i}") for i in range(15)],
        *[_template(FINISHER, f"finisher {i}") for i in range(3)],
    ))
    lines = select_lines(extract_features("plain"), "light", 42)

    assert len(lines) == MAX_LINES
    assert all(line.startswith("overall") for line in lines[:2])
    assert all(line.startswith("line") for line in lines[2:12])
    assert all(line.startswith("finisher") for line in lines[12:])
    assert len(set(lines)) == len(lines)


def test_level_and_trigger_filtering(monkeypatch):
    monkeypatch.setattr(roaster, "TEMPLATES", (
        _template("kept", "kept"),
        _template("hot", "too hot", level="spicy"),
        _template("links", "no links", trigger=no_links),
    ))
    assert select_lines(extract_features("see https://x.io"), "light", 7) == ["kept"]


GOLDEN_ROASTS = {
    "light": (
        "The Warm-Up Act",
        [
            "This resume is the 'we have a candidate at home' of resumes.",
            "'Assisted in various tasks' - please, tell me less.",
            "Is this your resume or your Tinder bio? Either way, swipe left.",
            "Your skills section is so generic, it could belong to literally anyone.",
            "Zero URLs. In 2024. Are you in witness protection?",
            "You have fewer bullet points than a grocery list for a college student.",
            "Show me the numbers! Where are the damn numbers?!",
            "No projects section? Do you even build things?",
            "On the bright side, the only direction from here is up. WAY up.",
        ],
        1,
    ),
    "medium": (
        "No Mercy, Some Restraint",
        [
            "This resume is the 'we have a candidate at home' of resumes.",
            "This resume needs less buzzwords and more 'I actually did something.'",
            "Zero links. Either you don't have an internet presence or you're actively hiding from it.",
            "Not a single number in sight. Did you think this was a poetry reading?",
            "These bullets are so vague, a psychic couldn't tell what you actually did.",
            "Your skill list reads like the default settings on a new laptop.",
            "Is this your resume or your Tinder bio? Either way, swipe left.",
            "No projects section at all. What do you do outside of work, just stare at the ceiling?",
            "Did you run out of things to say or did you just give up?",
            "Not a single link? No GitHub, no LinkedIn, no portfolio. Mystery candidate.",
            "On the bright side, the only direction from here is up. WAY up.",
            "I've seen worse resumes. But I had to really think about it.",
        ],
        5,
    ),
    "spicy": (
        "The Full Scorched Earth",
        [
            "I showed this resume to a recruiter and they asked for combat pay.",
            "This resume has the energy of a participation trophy.",
            "'Responsible for' is doing a lot of heavy lifting here. Unfortunately, your resume isn't.",
            "You have fewer bullet points than a grocery list for a college student.",
            "Zero URLs. In 2024. Are you in witness protection?",
            "Your skill list reads like the default settings on a new laptop.",
            "Show me the numbers! Where are the damn numbers?!",
            "No projects? No GitHub? No portfolio? What the hell have you been doing with your life?",
            "Is this your resume or your Tinder bio? Either way, swipe left.",
            "I've seen worse resumes. But I had to really think about it.",
            "Holy hell, what a ride. Go rewrite this entire damn thing and come back when you're serious.",
        ],
        5,
    ),
}


@pytest.mark.parametrize("level", LEVELS)
def test_golden_roast(weak_resume, level):
    title, lines, best_index = GOLDEN_ROASTS[level]
    result = roast(weak_resume, level)

    assert result.title == title
    assert result.roast_lines == lines
    assert result.best_line == lines[best_index]
    assert result.redemption == [
        "Cut the buzzwords and replace with specific technologies and outcomes",
        "Trim your resume to one page with only your strongest achievements",
        "Replace every 'responsible for' with a strong action verb + measurable result",
    ]
