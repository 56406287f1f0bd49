import pytest

from models.schemas.ai_result import AiResult, ContentQuality, KeywordAnalysis
from services.ats_constants import DOCX_MIME_TYPE, PDF_MIME_TYPE
from services.parseability_checker import analyze_document
from services.score_validator import (
    AI_UNAVAILABLE_WARNING,
    content_score,
    dedupe,
    keyword_score,
    validate,
)


def _ai(overall: int = 85, **overrides) -> AiResult:
    data = {
        "format_analysis": {"score": 80, "has_appropriate_structure": True},
        "keyword_analysis": {
            "total_unique_keywords": 12,
            "industry_alignment": "medium",
            "keyword_density": "optimal",
        },
        "contact_information": {
            "email_found": True,
            "email_location": "top",
            "phone_found": True,
            "phone_location": "top",
        },
        "content_quality": {
            "score": 80,
            "estimated_word_count": 420,
            "quantifiable_achievements": True,
            "achievement_examples": ["cut errors by 30%", "saved $50K", "saved 10 hours"],
            "uses_action_verbs": True,
            "action_verb_examples": ["Built", "Led", "Reduced", "Designed", "Automated"],
            "appropriate_length": True,
            "has_bullet_points": True,
        },
        "ats_red_flags": [],
        "critical_fixes_required": [],
        "recommended_improvements": ["Add a short summary at the top"],
        "overall_assessment": {"ats_compatibility_score": overall},
    }
    data.update(overrides)
    return AiResult.model_validate(data)


@pytest.fixture
def strong_result(strong_resume, two_pages):
    return analyze_document(strong_resume, PDF_MIME_TYPE, two_pages)


class TestWithoutAi:
    def test_basic_analysis(self, strong_result):
        final = validate(strong_result)
        assert final.ai_unavailable
        assert final.ai_error_message
        assert final.overall_score == 100
        assert final.parseability_score == 80
        assert final.keyword_score == 0
        assert final.contact_score == 80
        assert final.format_score == 90
        assert final.content_score == 80
        assert final.estimated_cost == 0.0
        assert final.confidence == "medium"
        assert AI_UNAVAILABLE_WARNING in final.warnings

    def test_unparseable_stays_zero(self):
        final = validate(analyze_document("", PDF_MIME_TYPE, lambda: 1))
        assert final.overall_score == 0

    def test_basic_suggestions(self):
        final = validate(analyze_document("", DOCX_MIME_TYPE))
        assert any("real start and end dates" in s for s in final.suggestions)
        assert any("full name" in s for s in final.suggestions)


class TestWithAi:
    def test_balanced_blend_when_both_scores_good(self, strong_result):
        final = validate(strong_result, _ai(overall=85))
        # (80 + 85) / 2 * 0.92
        assert final.overall_score == 76
        assert not final.ai_unavailable
        assert final.estimated_cost > 0

    def test_weighted_average_for_mixed_scores(self, strong_result):
        final = validate(strong_result, _ai(overall=60))
        assert final.format_score == 70
        assert final.keyword_score == 60
        assert final.contact_score == 80
        assert final.content_score == 75
        # (80*.25 + 70*.25 + 60*.25 + 80*.10 + 75*.15) * 0.92
        assert final.overall_score == 66

    def test_hard_override_for_unparseable_document(self):
        result = analyze_document("", PDF_MIME_TYPE, lambda: 1)
        final = validate(result, _ai(overall=95))
        assert final.overall_score == 0

    def test_scanned_image_caps_categories(self):
        result = analyze_document("", PDF_MIME_TYPE, lambda: 1)
        final = validate(result, _ai(overall=95))
        assert final.format_score <= 20
        assert final.keyword_score <= 20
        assert final.content_score <= 20

    def test_low_scores_without_critical_issues_are_normalised(self, strong_result):
        weak_ai = AiResult.model_validate({"overall_score": 30})
        final = validate(strong_result, weak_ai)
        assert final.overall_score == 52

    def test_thin_resume_is_capped(self):
        text = (
            "Jane Doe\njane@example.com | (555) 123-4567\n"
            "Experience\nAcme Corp, Jan 2019 - Mar 2023\n"
            "• Built billing APIs for merchants\n"
        )
        result = analyze_document(text, DOCX_MIME_TYPE)
        assert result.critical_issues == []
        ai = _ai(overall=90, content_quality={"score": 90, "achievement_examples": []})
        assert validate(result, ai).overall_score == 40

    def test_missing_contact_scales_contact_score(self, strong_resume, two_pages):
        lines = strong_resume.split("\n")
        del lines[1]
        result = analyze_document("\n".join(lines), PDF_MIME_TYPE, two_pages)
        final = validate(result, _ai())
        assert final.contact_score == 24

    def test_long_resume_scales_content_score(self, strong_resume):
        result = analyze_document(strong_resume, PDF_MIME_TYPE, lambda: 3)
        final = validate(result, _ai())
        assert final.content_score == 60

    def test_issues_merged_and_deduplicated(self):
        result = analyze_document("", DOCX_MIME_TYPE)
        first_issue = result.critical_issues[0]
        ai = _ai(
            ats_red_flags=["Uses a table layout", first_issue],
            critical_fixes_required=["Uses a table layout", "Add dates"],
            recommended_improvements=["Add metrics", "Add metrics"],
        )
        final = validate(result, ai)
        assert final.critical_issues[0] == first_issue
        assert final.critical_issues.count(first_issue) == 1
        assert final.critical_issues.count("Uses a table layout") == 1
        assert "Add dates" in final.critical_issues
        assert final.suggestions == ["Add metrics"]

    def test_ai_findings_become_warnings(self, strong_result):
        ai = _ai(
            format_analysis={"score": 80, "has_appropriate_structure": False},
            keyword_analysis={"total_unique_keywords": 3, "keyword_density": "too_sparse"},
        )
        warnings = validate(strong_result, ai).warnings
        assert any("structure" in w for w in warnings)
        assert any("too sparse" in w for w in warnings)

    def test_confidence(self, strong_result):
        assert validate(strong_result, _ai()).confidence == "medium"
        empty = analyze_document("", DOCX_MIME_TYPE)
        assert validate(empty, _ai()).confidence == "low"


def test_keyword_score_tiers():
    assert keyword_score(KeywordAnalysis(total_unique_keywords=25, industry_alignment="high")) == 85
    assert keyword_score(KeywordAnalysis(total_unique_keywords=3)) == 25
    assert keyword_score(KeywordAnalysis(total_unique_keywords=15, industry_alignment="MEDIUM")) == 70


def test_content_score_without_ai_score():
    content = ContentQuality(uses_action_verbs=True, action_verb_examples=["Built", "Led", "Ran"])
    assert content_score(content) == 30


def test_dedupe_keeps_first_occurrence():
    assert dedupe(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]
