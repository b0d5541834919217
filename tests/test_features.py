from resumeroast.services.features import (
    count_links,
    count_metrics,
    count_quick_metrics,
    detect_buzzwords,
    detect_impact_verbs,
    detect_scale_words,
    detect_tech_stack,
    detect_vague_phrases,
    extract_features,
)


def test_detect_buzzwords():
    found = detect_buzzwords("We need a rockstar ninja who is a team player")
    assert {"rockstar", "ninja", "team player"} <= set(found)


def test_buzzwords_match_inside_words():
    assert "pivot" in detect_buzzwords("Played a pivotal role")


def test_tech_stack_word_boundaries():
    assert "go" not in detect_tech_stack("Good communication skills")
    assert {"go", "rust"} <= set(detect_tech_stack("Wrote services in Go and Rust"))


def test_tech_stack_escapes_metacharacters():
    assert "node.js" in detect_tech_stack("Used Node.js daily")
    assert "node.js" not in detect_tech_stack("Used nodexjs daily")
    assert "ci/cd" in detect_tech_stack("Owned the CI/CD setup")


def test_tech_stack_deduplicated():
    assert detect_tech_stack("React, react and REACT") == ("react",)


def test_count_metrics_overlapping_patterns():
    # "20%" and "increased revenue by 2" both count
    assert count_metrics("Increased revenue by 20%") == 2


def test_count_metrics_money_multiplier_and_users():
    assert count_metrics("Saved $5,000 for 1,200+ users in 3x less time") == 3


def test_count_metrics_none():
    assert count_metrics("Answered phones and greeted visitors") == 0


def test_count_quick_metrics():
    assert count_quick_metrics("Grew 40% and saved $300 with 2x speed, 5k users") == 3


def test_count_links():
    assert count_links("https://github.com/jane and http://jane.dev (https://x.io)") == 3
    assert count_links("github.com/jane") == 0


def test_vague_scale_and_impact_detection():
    text = "Responsible for day-to-day ops of a distributed, real-time system. Reduced costs."
    assert detect_vague_phrases(text) == ("responsible for", "day-to-day")
    assert set(detect_scale_words(text)) == {"distributed", "real-time"}
    assert detect_impact_verbs(text) == ("reduced",)


def test_impact_verbs_need_whole_words():
    assert detect_impact_verbs("Ledger reconciliation") == ()


def test_extract_features_strong(strong_resume):
    features = extract_features(strong_resume)
    assert features.bullet_count == 7
    assert features.metric_count == 5
    assert features.link_count == 4
    assert features.has_github_link
    assert features.has_website_link
    assert features.has_ownership
    assert features.has_shipping_verbs
    for section in ("summary", "experience", "projects", "skills", "education", "certifications"):
        assert features.has_section(section)
    assert not features.vague_phrases


def test_extract_features_weak(weak_resume):
    features = extract_features(weak_resume)
    assert features.metric_count == 0
    assert features.quick_metric_count == 0
    assert features.link_count == 0
    assert features.has_routine_role
    assert features.has_section("experience")
    assert not features.has_section("projects")
    assert not features.mentions_section("projects")
    assert features.mentions_section("experience")


def test_extract_features_degenerate():
    features = extract_features("   ")
    assert features.word_count == 0
    assert features.bullet_count == 0
    assert features.buzzword_density == 0.0
    assert features.sections == frozenset()
