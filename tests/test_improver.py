from resumeroast.services.features import extract_features
from resumeroast.services.improver import (
    BASE_ATS_TIPS,
    GENERIC_FIX,
    ats_tips,
    detect_role,
    improve,
    improved_summary,
    rewrite_bullet,
    rewrite_bullets,
)

RESULT_SUFFIX = ", resulting in (~X%) improvement in [key metric]"
DATE_TIP = "Use consistent date formats throughout (e.g., 'Jan 2022 - Present' or '2022 - Present')."


def test_bad_resume_gets_full_fix_list():
    fixes = improve("Experience\nResponsible for various tasks.\nEducation\nState University").priority_fixes
    assert len(fixes) == 7
    assert fixes[0].startswith("Add quantified metrics")
    assert fixes[1].startswith('Replace vague phrases like "responsible for"')


def test_strong_resume_padded_with_generic_fix(strong_resume):
    assert improve(strong_resume).priority_fixes == [GENERIC_FIX] * 3


def test_few_metrics_fix(weak_resume):
    fixes = improve(weak_resume + "\n- Cut costs by 10%").priority_fixes
    assert fixes[0].startswith("You have a few metrics")


def test_buzzword_fix():
    text = "Passionate, dynamic, innovative rockstar ninja who loves synergy"
    fixes = improve(text).priority_fixes
    assert any(f.startswith("Cut the buzzwords (synergy, passionate, dynamic)") for f in fixes)
    assert len(fixes) <= 7


def test_rewrite_strips_vague_prefix():
    after = rewrite_bullet("Responsible for the billing service.", "Spearheaded", ())
    assert after == "Spearheaded the billing service" + RESULT_SUFFIX


def test_rewrite_strips_verb_prefix_and_adds_tech():
    after = rewrite_bullet("Built an internal tool", "Engineered", ("docker", "python"))
    assert after == "Engineered an internal tool leveraging docker and python" + RESULT_SUFFIX


def test_rewrite_skips_tech_already_in_bullet():
    after = rewrite_bullet("Built a Python CLI", "Delivered", ("python", "docker", "redis"))
    assert after == "Delivered a Python CLI leveraging docker and redis" + RESULT_SUFFIX


def test_rewrite_lowercases_first_letter():
    after = rewrite_bullet("Wrote Terraform modules", "Optimized", ())
    assert after.startswith("Optimized terraform modules")


def test_rewrite_truncates_long_core():
    after = rewrite_bullet("Worked on " + "a" * 150, "Streamlined", ())
    core = after[len("Streamlined "):-len(RESULT_SUFFIX)]
    assert core == "a" * 97 + "..."


def test_rewrite_targets_weak_bullets(weak_resume):
    rewrites = rewrite_bullets(extract_features(weak_resume))
    assert [r.before for r in rewrites] == [
        "Responsible for various tasks around the office",
        "Helped with filing and data entry for the team",
        "Answered phones and greeted visitors",
    ]
    assert rewrites[0].after.startswith("Spearheaded various tasks")
    assert rewrites[1].after.startswith("Engineered filing and data entry")
    assert rewrites[2].after.startswith("Delivered answered phones")


def test_rewrite_falls_back_to_first_bullets():
    features = extract_features("- Cut costs by 20% in a quarter\n- Grew revenue 3x over two years")
    rewrites = rewrite_bullets(features)
    assert [r.before for r in rewrites] == ["Cut costs by 20% in a quarter", "Grew revenue 3x over two years"]
    assert rewrites[0].after.startswith("Spearheaded ")
    assert rewrites[1].after.startswith("Engineered ")


def test_no_bullets_no_rewrites():
    assert rewrite_bullets(extract_features("Just a paragraph of text")) == []


def test_improved_summary_role_years_and_tech():
    text = "Senior Software Engineer with 8 years of experience in Python and Docker"
    summary = improved_summary(text, extract_features(text).tech_stack)
    assert summary.startswith(
        "Results-driven Senior Software Engineer with 8+ years of experience specializing in python, docker."
    )
    assert summary.endswith("[target goal/company mission].")


def test_improved_summary_defaults():
    summary = improved_summary("Accountant at a regional firm", ())
    assert summary.startswith("Results-driven software professional. Proven track record")


def test_detect_role_order():
    assert detect_role("Sr. Backend Developer") == "Senior Software Engineer"
    assert detect_role("Frontend engineer at a startup") == "Software Engineer"
    assert detect_role("Data Scientist") == "Data Professional"
    assert detect_role("Product Manager") == "Product/Program Manager"


def test_ats_tips_date_formats():
    sparse = extract_features("short")
    assert DATE_TIP not in ats_tips("Acme, Jan 2020", sparse)
    assert DATE_TIP not in ats_tips("Acme, 2019 – Present", sparse)
    assert DATE_TIP not in ats_tips("Acme, 2019-2021", sparse)
    assert DATE_TIP in ats_tips("Acme, since forever", sparse)


def test_ats_tips_base_and_sparse(weak_resume):
    tips = ats_tips(weak_resume, extract_features(weak_resume))
    assert tips[:4] == list(BASE_ATS_TIPS)
    assert "Your resume seems very sparse - expand with more detail and achievements." in tips
