"""Rule-based ATS parseability score.

Runs every detector once, starts from a fixed baseline and subtracts a
fixed penalty per defect. Findings are split into critical issues (the
ATS cannot read or identify the candidate) and warnings (softer
structural or content problems).
"""

import functools
import logging

from models.schemas.reports import (
    BulletReport,
    ContactReport,
    ParseabilityDetails,
    ParseabilityResult,
)
from services.ats_constants import DEFAULT_THRESHOLDS, ParseabilityThresholds
from services.detectors.bullet_detector import count_bullets
from services.detectors.content_detector import (
    NO_DATES_MESSAGE,
    check_contact_location,
    check_dates,
    check_name,
    check_summary,
)
from services.detectors.experience_analyzer import analyze_experience
from services.detectors.format_detector import analyze_format
from services.detectors.length_analyzer import PageCountSource, analyze_length
from services.detectors.metrics_detector import detect_metrics

logger = logging.getLogger(__name__)


def _contact_findings(
    contact: ContactReport, t: ParseabilityThresholds
) -> tuple[int, list[str], list[str]]:
    """(penalty, critical, warnings) for contact placement."""
    email_near_top = contact.email_near_top
    phone_near_top = contact.phone_near_top
    window = f"first {t.contact_check_chars} characters"

    if not email_near_top and not phone_near_top:
        if contact.email_exists or contact.phone_exists:
            return t.penalty_contact_bad_location, [], [
                f"Contact information not found in {window} or top {t.contact_check_lines} lines. "
                "ATS systems may miss this information if it's in a header/footer."
            ]
        return t.penalty_no_contact, [
            "No contact information (email or phone) found in the resume. "
            "This is critical for ATS systems."
        ], []

    if contact.may_be_in_pdf_header:
        return 0, [], [
            "Contact information may be in PDF header/footer. ATS systems may miss "
            "headers/footers - consider moving to main body text."
        ]
    if not email_near_top and contact.email_exists:
        return 0, [], [
            f"Email not found in {window}. Consider moving it to the top of the resume "
            "for better ATS compatibility."
        ]
    if not phone_near_top and contact.phone_exists:
        return 0, [], [
            f"Phone number not found in {window}. Consider moving it to the top of the resume "
            "for better ATS compatibility."
        ]
    return 0, [], []


def _bullet_penalty(bullets: BulletReport, t: ParseabilityThresholds) -> int:
    if bullets.count < t.bullets_very_few:
        penalty = t.penalty_very_few_bullets
    elif bullets.count < t.bullets_few:
        penalty = t.penalty_few_bullets
    else:
        penalty = t.penalty_insufficient_bullets

    experience = bullets.by_section["experience"]
    if experience < t.bullets_experience_very_few:
        penalty += t.penalty_very_few_experience_bullets
    elif experience < t.bullets_experience_few:
        penalty += t.penalty_few_experience_bullets
    return penalty


def bullet_warning(bullets: BulletReport, t: ParseabilityThresholds) -> str:
    """Warning text with per-section breakdown and a targeted recommendation."""
    experience = bullets.by_section["experience"]
    projects = bullets.by_section["projects"]
    other = bullets.by_section["other"]
    has_projects_section = "projects" in bullets.sections_found

    parts = [
        f"Resume has {bullets.count} total bullet points "
        f"(recommended: {t.bullets_min_optimal}-{t.bullets_max_optimal})."
    ]

    if bullets.sections_found or experience or projects or other:
        breakdown = [f"{experience} in Experience"]
        if has_projects_section or projects:
            breakdown.append(f"{projects} in Projects")
        if other:
            breakdown.append(f"{other} in other sections")
        parts.append(f"Breakdown: {', '.join(breakdown)}.")

    non_standard = bullets.non_standard_by_section
    if (
        bullets.non_standard_count
        and bullets.count < t.bullets_min_optimal
        and (non_standard["projects"] or non_standard["experience"])
    ):
        parts.append(
            f"Note: {bullets.non_standard_count} potential bullet point(s) detected but not recognized "
            "(likely due to non-standard bullet characters). Consider normalizing bullet characters "
            "to standard format (•, -, or *) for better ATS compatibility."
        )

    if experience < t.bullets_experience_min:
        parts.append(
            "Focus on adding more bullet points in your Experience section "
            f"(aim for {t.bullets_experience_min}-{t.bullets_min_optimal} bullets)."
        )
    elif bullets.count < t.bullets_min_optimal:
        if has_projects_section and projects == 0:
            parts.append(
                "Your Projects section has no bullet points - consider adding bullet points "
                "to showcase your work."
            )
        elif has_projects_section and 0 < projects < t.bullets_implicit_min:
            parts.append(
                f"Consider adding more bullet points to your Projects section (currently has {projects})."
            )
        else:
            parts.append("Consider adding more bullet points to highlight achievements and metrics.")
    else:
        parts.append(
            "More bullet points with specific achievements and metrics will improve "
            "ATS compatibility and readability."
        )

    return " ".join(parts)


def _confidence(issue_count: int, t: ParseabilityThresholds) -> str:
    if issue_count <= t.confidence_high_max_issues:
        return "high"
    if issue_count <= t.confidence_medium_max_issues:
        return "medium"
    return "low"


def analyze_document(
    text: str,
    mime_type: str,
    page_count_source: PageCountSource | None = None,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> ParseabilityResult:
    """Score extracted resume text for ATS parseability.

    ``page_count_source`` is called lazily (at most once) for PDFs; if it
    raises, the scanned-image check reports "could not verify" and the
    page count is estimated from the word count.
    """
    t = thresholds
    if page_count_source is not None:
        page_count_source = functools.cache(page_count_source)

    score = t.starting_score
    critical: list[str] = []
    warnings: list[str] = []

    # --- Layout ---
    layout = analyze_format(text, mime_type, page_count_source, t)
    if layout.is_scanned_image:
        score -= t.penalty_scanned_image
        critical.append(layout.text_extractability.message)
    if layout.has_tables:
        score -= t.penalty_tables
        warnings.append(layout.tables.message)
    if layout.has_multi_column:
        score -= t.penalty_multi_column
        warnings.append(layout.multi_column.message)

    # --- Length ---
    length = analyze_length(text, mime_type, page_count_source, t)
    if not length.is_optimal:
        if length.word_count < t.word_count_min:
            score -= t.penalty_short_resume
        elif length.word_count > t.word_count_max:
            score -= t.penalty_long_resume
        else:
            score -= t.penalty_page_count
        warnings.append(length.message)

    # --- Contact ---
    contact = check_contact_location(text, t)
    penalty, contact_critical, contact_warnings = _contact_findings(contact, t)
    score -= penalty
    critical.extend(contact_critical)
    warnings.extend(contact_warnings)

    # --- Dates ---
    dates = check_dates(text, t)
    if dates.has_placeholders:
        score -= t.penalty_date_placeholders
        critical.append(dates.message)
    elif not dates.has_valid_dates:
        score -= t.penalty_no_dates
        critical.append(NO_DATES_MESSAGE)

    # --- Experience level ---
    experience = analyze_experience(text, t)
    if not length.is_optimal and experience.is_experienced and length.word_count < t.word_count_min:
        score -= t.penalty_experienced_short_resume
        warnings.append(
            f"Resume is too short for your experience level. With {experience.years}+ years of "
            "experience, you should have more content to showcase your achievements."
        )

    # --- Name / summary ---
    name = check_name(text, t)
    if not name.has_name:
        score -= t.penalty_no_name
        critical.append(
            "No name found in the resume. ATS systems require a candidate name for proper "
            "identification and tracking."
        )

    summary = check_summary(text, t)
    if not summary.has_summary:
        score -= t.penalty_no_summary
        warnings.append(
            "No summary or professional profile section found. A summary section helps ATS "
            "systems and recruiters quickly understand your background and career goals."
        )

    # --- Bullets ---
    bullets = count_bullets(text, t)
    if not bullets.is_optimal:
        score -= _bullet_penalty(bullets, t)
        warnings.append(bullet_warning(bullets, t))

    # --- Metrics ---
    metrics = detect_metrics(text, t)
    if not metrics.has_metrics:
        score -= t.penalty_no_metrics
        warnings.append(
            "Resume lacks quantifiable metrics and specific numbers. ATS systems and recruiters "
            'value resumes with measurable achievements (e.g., "increased sales by 30%", '
            '"managed team of 5", "reduced costs by $50K").'
        )

    score = max(t.min_score, min(t.max_score, score))
    confidence = _confidence(len(critical) + len(warnings), t)

    logger.info(
        "Parseability score %d (%d critical, %d warnings, confidence %s)",
        score, len(critical), len(warnings), confidence,
    )

    return ParseabilityResult(
        score=score,
        confidence=confidence,
        critical_issues=critical,
        warnings=warnings,
        details=ParseabilityDetails(
            text_extractability=layout.text_extractability,
            table_detection=layout.tables,
            multi_column=layout.multi_column,
            document_length=length,
            contact_location=contact,
            date_detection=dates,
            experience_level=experience,
            name_detection=name,
            summary_detection=summary,
            bullet_point_count=bullets,
            metrics_detection=metrics,
        ),
    )
