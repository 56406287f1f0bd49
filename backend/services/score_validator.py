"""Merge the rule-based parseability result with an optional AI assessment.

Category scores come from the AI sub-objects when an AI result is
present and from rule-based proxies otherwise; in both cases the hard
checks of the parseability details then adjust them. The overall score
is a weighted average of the five categories, with a balanced blend
when both sides agree the resume is good. A document the ATS cannot
read (parseability 0) always ends at 0.
"""

import logging

from models.schemas.ai_result import AiResult, ContactInformation, ContentQuality, KeywordAnalysis
from models.schemas.final_analysis import FinalAnalysis
from models.schemas.reports import ContactReport, ParseabilityDetails, ParseabilityResult
from services.ats_constants import (
    DEFAULT_THRESHOLDS,
    DEFAULT_VALIDATOR_THRESHOLDS,
    ParseabilityThresholds,
    ValidatorThresholds,
)

logger = logging.getLogger(__name__)

AI_UNAVAILABLE_WARNING = "AI analysis is not available. Some insights may be limited."
AI_UNAVAILABLE_MESSAGE = "AI analysis is temporarily unavailable. Please try again later."


def _clamp(value: float, v: ValidatorThresholds) -> int:
    return int(max(v.min_score, min(v.max_score, round(value))))


def dedupe(items: list[str]) -> list[str]:
    """Drop repeats, keeping the first occurrence of each item."""
    return list(dict.fromkeys(items))


# ---------------------------------------------------------------------------
# AI category scores
# ---------------------------------------------------------------------------

def keyword_score(keywords: KeywordAnalysis, v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS) -> int:
    total = keywords.total_unique_keywords
    if total >= 20:
        score = v.keyword_score_20_plus
    elif total >= 15:
        score = v.keyword_score_15_plus
    elif total >= 10:
        score = v.keyword_score_10_plus
    elif total >= 5:
        score = v.keyword_score_5_plus
    else:
        score = v.keyword_score_default

    alignment = keywords.industry_alignment.lower()
    if alignment == "high":
        score += v.keyword_bonus_high_alignment
    elif alignment == "medium":
        score += v.keyword_bonus_medium_alignment
    return _clamp(score, v)


def contact_score(contact: ContactInformation, v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS) -> int:
    score = 0
    if contact.email_found:
        score += v.contact_email_points
        if contact.email_location == "top":
            score += v.contact_email_top_bonus
        elif contact.email_location == "middle":
            score += v.contact_email_middle_bonus
    if contact.phone_found:
        score += v.contact_phone_points
        if contact.phone_location == "top":
            score += v.contact_phone_top_bonus
        elif contact.phone_location == "middle":
            score += v.contact_phone_middle_bonus
    if contact.linkedin_found:
        score += v.contact_linkedin_points
        if not contact.linkedin_format_correct:
            score -= v.contact_linkedin_format_deduction
    if contact.github_found:
        score += v.contact_github_points
    if contact.location_found:
        score += v.contact_location_points
    return _clamp(score, v)


def content_score(
    content: ContentQuality,
    v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS,
    t: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> int:
    """Points for verbs, achievements, length and bullets, averaged with the AI's own score."""
    points = 0

    if content.uses_action_verbs:
        points += v.content_action_verbs_points
        verbs = len(content.action_verb_examples)
        if verbs >= 5:
            points += v.content_action_verbs_5_plus_bonus
        elif verbs >= 3:
            points += v.content_action_verbs_3_plus_bonus

    achievements = len(content.achievement_examples)
    if content.quantifiable_achievements or achievements:
        points += v.content_achievements_points
        if achievements >= 3:
            points += v.content_achievements_3_plus_bonus
        elif achievements >= 2:
            points += v.content_achievements_2_plus_bonus

    words = content.estimated_word_count
    if content.appropriate_length:
        points += v.content_length_points
    elif words > t.word_count_max:
        points += v.content_length_long_partial
    elif words >= t.word_count_min * v.content_length_close_ratio:
        points += v.content_length_close_partial

    if content.has_bullet_points:
        points += v.content_bullets_points

    if content.score is not None:
        return _clamp((points + content.score) / 2, v)
    return _clamp(points, v)


# ---------------------------------------------------------------------------
# Rule-based proxies (AI absent)
# ---------------------------------------------------------------------------

def basic_contact_score(contact: ContactReport, v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS) -> int:
    """Contact score from placement alone; misplaced details earn partial credit."""
    score = 0.0
    email_full = v.contact_email_points + v.contact_email_top_bonus
    phone_full = v.contact_phone_points + v.contact_phone_top_bonus
    if contact.email_near_top:
        score += email_full
    elif contact.email_exists:
        score += email_full * v.contact_misplaced_points_ratio
    if contact.phone_near_top:
        score += phone_full
    elif contact.phone_exists:
        score += phone_full * v.contact_misplaced_points_ratio
    return _clamp(score, v)


def basic_suggestions(details: ParseabilityDetails, t: ParseabilityThresholds = DEFAULT_THRESHOLDS) -> list[str]:
    suggestions = []
    ideal = f"ideal: {t.word_count_min}-{t.word_count_max} words"

    if details.text_extractability.is_scanned_image:
        suggestions.append("Convert scanned PDF to text-based format for better ATS compatibility")
    if details.table_detection.has_tables:
        suggestions.append("Replace tables with simple bullet points for better ATS parsing")
    if details.multi_column.has_multi_column:
        suggestions.append("Use single-column layout for better ATS compatibility")

    length = details.document_length
    if not length.is_optimal:
        if length.word_count < t.word_count_min:
            suggestions.append(f"Resume is too short. Consider adding more detail ({ideal})")
        elif length.word_count > t.word_count_max:
            suggestions.append(
                f"Resume is too long. Consider condensing to {t.page_count_min}-{t.page_count_max} pages ({ideal})"
            )

    contact = details.contact_location
    window = f"first {t.contact_check_chars} characters"
    if not contact.email_near_top and contact.email_exists:
        suggestions.append(f"Move email address to the top of the resume ({window})")
    if not contact.phone_near_top and contact.phone_exists:
        suggestions.append(f"Move phone number to the top of the resume ({window})")

    if not details.date_detection.has_valid_dates or details.date_detection.has_placeholders:
        suggestions.append("Add real start and end dates (e.g., \"Jan 2023\") to every position")
    if not details.name_detection.has_name:
        suggestions.append("Put your full name on the first line of the resume")
    if not details.metrics_detection.has_metrics:
        suggestions.append("Quantify achievements with numbers, percentages or amounts")

    return suggestions


# ---------------------------------------------------------------------------
# Hard checks
# ---------------------------------------------------------------------------

def apply_hard_checks(
    details: ParseabilityDetails,
    scores: dict[str, float],
    achievement_count: int,
    v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS,
    t: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> dict[str, int]:
    """Adjust category scores with what the rule-based detectors know for certain."""
    s = dict(scores)

    if details.text_extractability.is_scanned_image:
        for category in ("format", "keyword", "content"):
            s[category] = min(v.scanned_image_score_cap, s[category])

    # Format
    if details.table_detection.has_tables:
        s["format"] -= v.penalty_tables
    if details.multi_column.has_multi_column:
        s["format"] -= v.penalty_multi_column
    if details.date_detection.has_placeholders:
        s["format"] -= v.penalty_date_placeholders
    elif not details.date_detection.has_valid_dates:
        s["format"] -= v.penalty_no_dates
    if not details.name_detection.has_name:
        s["format"] -= v.penalty_no_name
    if not details.summary_detection.has_summary:
        s["format"] -= v.penalty_no_summary

    # Content
    bullets = details.bullet_point_count.count
    if bullets < t.bullets_very_few:
        s["content"] -= v.penalty_very_few_bullets
    elif bullets < t.bullets_few:
        s["content"] -= v.penalty_few_bullets
    elif bullets < t.bullets_min_optimal:
        s["content"] -= v.penalty_insufficient_bullets
    if not details.metrics_detection.has_metrics:
        s["content"] -= v.penalty_no_metrics
    if _is_thin(details, achievement_count, v):
        s["content"] -= v.penalty_thin_content
    if details.document_length.page_count > v.long_resume_pages:
        s["content"] *= v.content_long_resume_multiplier

    # Contact
    contact = details.contact_location
    if not contact.email_exists and not contact.phone_exists:
        s["contact"] *= v.contact_no_exists_multiplier

    return {category: _clamp(value, v) for category, value in s.items()}


def _is_thin(details: ParseabilityDetails, achievement_count: int, v: ValidatorThresholds) -> bool:
    return (
        details.document_length.word_count < v.thin_resume_word_count
        and achievement_count < v.thin_resume_achievement_count
    )


# ---------------------------------------------------------------------------
# Overall score
# ---------------------------------------------------------------------------

def weighted_score(parseability: int, scores: dict[str, int], v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS) -> float:
    return (
        parseability * v.weight_parseability
        + scores["format"] * v.weight_format
        + scores["keyword"] * v.weight_keyword
        + scores["contact"] * v.weight_contact
        + scores["content"] * v.weight_content
    )


def alignment_multiplier(critical_count: int, v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS) -> float:
    if critical_count == 0:
        return v.base_alignment_multiplier
    if critical_count == 1:
        return v.alignment_one_critical
    return v.alignment_multiple_critical


def overall_score(
    result: ParseabilityResult,
    scores: dict[str, int],
    ai_overall: int | None,
    achievement_count: int,
    v: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS,
) -> int:
    parseability = result.score
    if ai_overall is not None and parseability >= v.good_score_threshold and ai_overall >= v.good_score_threshold:
        raw = parseability * v.weight_parseability_when_good + ai_overall * v.weight_ai_when_good
    else:
        raw = weighted_score(parseability, scores, v)

    critical_count = len(result.critical_issues)
    raw *= alignment_multiplier(critical_count, v)

    if raw < v.normalization_threshold and critical_count == 0:
        raw = v.normalized_min_score
    if _is_thin(result.details, achievement_count, v):
        raw = min(raw, v.entry_level_cap_score)

    score = _clamp(raw, v)
    # An unreadable document cannot be rescued by any blend
    if parseability == v.unparseable_score:
        score = v.unparseable_score
    return score


def final_confidence(result: ParseabilityResult, has_ai: bool) -> str:
    if not has_ai:
        return "medium"
    issues = len(result.critical_issues) + len(result.warnings)
    if result.confidence == "high" and issues == 0:
        return "high"
    if result.confidence in ("high", "medium"):
        return "medium"
    return "low"


def _ai_warnings(ai: AiResult) -> list[str]:
    warnings = []
    if not ai.format_analysis.has_appropriate_structure:
        warnings.append("Resume structure may not be optimal for ATS parsing.")
    if ai.keyword_analysis.keyword_density == "too_sparse":
        warnings.append("Keyword density is too sparse. Consider adding more relevant technical keywords.")
    return warnings


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def validate(
    result: ParseabilityResult,
    ai_result: AiResult | None = None,
    thresholds: ValidatorThresholds = DEFAULT_VALIDATOR_THRESHOLDS,
    parseability_thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> FinalAnalysis:
    if ai_result is None:
        return _basic_analysis(result, thresholds, parseability_thresholds)

    v, t = thresholds, parseability_thresholds
    details = result.details
    achievements = ai_result.achievement_count

    scores = apply_hard_checks(
        details,
        {
            "format": ai_result.format_analysis.score,
            "keyword": keyword_score(ai_result.keyword_analysis, v),
            "contact": contact_score(ai_result.contact_information, v),
            "content": content_score(ai_result.content_quality, v, t),
        },
        achievements,
        v,
        t,
    )
    overall = overall_score(result, scores, ai_result.overall_score, achievements, v)

    return FinalAnalysis(
        overall_score=overall,
        confidence=final_confidence(result, has_ai=True),
        parseability_score=result.score,
        format_score=scores["format"],
        keyword_score=scores["keyword"],
        contact_score=scores["contact"],
        content_score=scores["content"],
        critical_issues=dedupe(
            result.critical_issues + ai_result.ats_red_flags + ai_result.critical_fixes_required
        ),
        warnings=dedupe(result.warnings + _ai_warnings(ai_result)),
        suggestions=dedupe(list(ai_result.recommended_improvements)),
        estimated_cost=v.estimated_cost_per_ai_call,
        ai_unavailable=False,
        ai_error_message=None,
        details=details,
    )


def _basic_analysis(
    result: ParseabilityResult,
    v: ValidatorThresholds,
    t: ParseabilityThresholds,
) -> FinalAnalysis:
    """Rule-based-only analysis used when no AI result is available."""
    details = result.details
    logger.warning("Building rule-based analysis without AI result")

    scores = apply_hard_checks(
        details,
        {
            "format": v.max_score,
            "keyword": 0,
            "contact": basic_contact_score(details.contact_location, v),
            "content": v.max_score,
        },
        achievement_count=details.metrics_detection.metric_count,
        v=v,
        t=t,
    )

    if result.score == v.unparseable_score:
        overall = v.unparseable_score
    else:
        overall = _clamp(result.score + v.basic_analysis_bonus, v)

    return FinalAnalysis(
        overall_score=overall,
        confidence=final_confidence(result, has_ai=False),
        parseability_score=result.score,
        format_score=scores["format"],
        keyword_score=0,
        contact_score=scores["contact"],
        content_score=scores["content"],
        critical_issues=dedupe(list(result.critical_issues)),
        warnings=dedupe(result.warnings + [AI_UNAVAILABLE_WARNING]),
        suggestions=dedupe(basic_suggestions(details, t)),
        estimated_cost=0.0,
        ai_unavailable=True,
        ai_error_message=AI_UNAVAILABLE_MESSAGE,
        details=details,
    )
