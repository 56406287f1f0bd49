import pytest

from services.ats_constants import DOCX_MIME_TYPE, PDF_MIME_TYPE, ParseabilityThresholds
from services.parseability_checker import analyze_document, bullet_warning
from services.detectors.bullet_detector import count_bullets


class TestWellFormattedResume:
    def test_scores_80_without_critical_issues(self, strong_resume, two_pages):
        result = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages)
        assert result.score == 80
        assert result.critical_issues == []
        assert result.confidence == "medium"

    def test_details_are_populated(self, strong_resume, two_pages):
        details = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages).details
        assert not details.text_extractability.is_scanned_image
        assert details.text_extractability.page_count == 2
        assert not details.table_detection.has_tables
        assert not details.multi_column.has_multi_column
        assert details.document_length.is_optimal
        assert details.contact_location.email_in_first_300
        assert details.date_detection.has_valid_dates
        assert details.name_detection.name == "Jane Doe"
        assert not details.summary_detection.has_summary
        assert details.bullet_point_count.count == 6
        assert details.bullet_point_count.by_section["experience"] == 6
        assert details.metrics_detection.has_metrics

    def test_only_soft_warnings(self, strong_resume, two_pages):
        result = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages)
        assert len(result.warnings) == 2
        assert any("summary" in w for w in result.warnings)
        assert any("6 total bullet points" in w for w in result.warnings)

    def test_is_deterministic(self, strong_resume, two_pages):
        first = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages)
        second = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages)
        assert first == second


def test_page_count_source_called_once(strong_resume):
    calls = []

    def pages():
        calls.append(1)
        return 2

    analyze_document(strong_resume, PDF_MIME_TYPE, pages)
    assert len(calls) == 1


def test_page_count_failure_degrades(strong_resume):
    def broken():
        raise RuntimeError("bad xref")

    result = analyze_document(strong_resume, PDF_MIME_TYPE, broken)
    assert result.details.text_extractability.message == "Could not verify text extractability"
    assert result.details.document_length.page_count == 2
    assert result.score == 80


def test_empty_text_scores_zero():
    result = analyze_document("", PDF_MIME_TYPE, lambda: 1)
    assert result.score == 0
    assert result.confidence == "low"
    assert result.details.document_length.word_count == 0
    assert not result.details.name_detection.has_name
    assert result.details.date_detection.date_count == 0
    assert any("scanned image" in issue for issue in result.critical_issues)
    assert any("No contact information" in issue for issue in result.critical_issues)
    assert any("No dates found" in issue for issue in result.critical_issues)
    assert any("No name found" in issue for issue in result.critical_issues)


def test_empty_docx_is_not_scanned():
    result = analyze_document("", DOCX_MIME_TYPE)
    assert result.score == 0
    assert not any("scanned image" in issue for issue in result.critical_issues)


def test_placeholder_dates_are_critical(weak_resume):
    result = analyze_document(weak_resume, DOCX_MIME_TYPE)
    assert result.details.date_detection.has_placeholders
    assert any("20XX" in issue for issue in result.critical_issues)
    assert result.score < 50


def test_contact_far_from_top_is_a_warning(strong_resume, two_pages):
    lines = strong_resume.split("\n")
    contact = lines.pop(1)
    text = "\n".join(lines + [contact])
    result = analyze_document(text, PDF_MIME_TYPE, two_pages)
    assert not any("contact" in issue.lower() for issue in result.critical_issues)
    assert any("Contact information not found" in w for w in result.warnings)
    assert result.score == 65


def test_tables_are_penalised(strong_resume, two_pages):
    table = "\n".join(["Skill        Level        Years"] * 3)
    result = analyze_document(strong_resume + table, PDF_MIME_TYPE, two_pages)
    assert result.details.table_detection.has_tables
    assert result.score == 50


def test_experienced_short_resume_extra_penalty():
    text = (
        "Jane Doe\njane@example.com | (555) 123-4567\n"
        "Backend engineer with 8 years of experience\n"
        "Experience\nAcme Corp Jan 2019 - Mar 2023\n"
    )
    result = analyze_document(text, DOCX_MIME_TYPE)
    assert result.details.experience_level.is_experienced
    assert any("too short for your experience level" in w for w in result.warnings)


@pytest.mark.parametrize("text", ["", "x", "\n\n\n", "•\n•\n•", "20XX " * 50, "a   b   c\n" * 20])
def test_score_always_in_range(text):
    result = analyze_document(text, PDF_MIME_TYPE, lambda: 1)
    assert 0 <= result.score <= 100


def test_custom_thresholds(strong_resume, two_pages):
    lenient = ParseabilityThresholds(penalty_no_summary=0, penalty_few_bullets=0)
    result = analyze_document(strong_resume, PDF_MIME_TYPE, two_pages, thresholds=lenient)
    assert result.score == 90


def test_bullet_warning_mentions_projects_without_bullets():
    text = "\n".join(
        ["EXPERIENCE"]
        + [f"• Delivered feature number {i} on schedule" for i in range(9)]
        + ["PROJECTS", "Link checker for static sites written in Go"]
    )
    warning = bullet_warning(count_bullets(text), ParseabilityThresholds())
    assert "9 in Experience" in warning
    assert "0 in Projects" in warning
    assert "Projects section has no bullet points" in warning
