"""Tunable thresholds and penalties for the ATS parseability engine.

Every number the detectors, the parseability checker and the score
validator compare against lives here. The defaults were calibrated by
hand against real resumes; callers that want different behaviour pass
their own instance instead of editing detector code.
"""

from pydantic import BaseModel, ConfigDict

PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


class ParseabilityThresholds(BaseModel):
    """Detector thresholds and parseability penalties."""

    model_config = ConfigDict(frozen=True)

    # --- Scoring ---
    starting_score: int = 90
    min_score: int = 0
    max_score: int = 100

    # --- Penalties ---
    penalty_scanned_image: int = 30
    penalty_tables: int = 30
    penalty_multi_column: int = 25
    penalty_no_contact: int = 25
    penalty_contact_bad_location: int = 15
    penalty_date_placeholders: int = 20
    penalty_no_dates: int = 25
    penalty_no_name: int = 20
    penalty_no_summary: int = 5
    penalty_no_metrics: int = 15
    penalty_short_resume: int = 15
    penalty_long_resume: int = 12
    penalty_page_count: int = 10
    penalty_experienced_short_resume: int = 10
    penalty_very_few_bullets: int = 20
    penalty_few_bullets: int = 5
    penalty_insufficient_bullets: int = 5
    penalty_very_few_experience_bullets: int = 10
    penalty_few_experience_bullets: int = 5

    # --- Length ---
    word_count_min: int = 400
    word_count_max: int = 800
    words_per_page: int = 400
    page_count_min: int = 1
    page_count_max: int = 2

    # --- Scanned image ---
    text_length_min_single_page: int = 20
    text_length_min_multi_page: int = 50

    # --- Contact / name / summary windows ---
    contact_check_chars: int = 300
    contact_check_lines: int = 10
    name_check_chars: int = 200
    name_fallback_chars: int = 100
    name_max_line_length: int = 50
    name_min_words: int = 2
    name_max_words: int = 4
    name_max_length: int = 30
    name_check_lines: int = 5
    summary_check_chars: int = 300
    summary_min_words: int = 20

    # --- Dates ---
    min_date_count: int = 2

    # --- Experience ---
    experienced_years: int = 5
    estimated_years_many_positions: int = 5
    estimated_years_few_positions: int = 3
    min_positions_for_many: int = 3
    min_positions_for_few: int = 2

    # --- Bullets: counts ---
    bullets_min_optimal: int = 12
    bullets_max_optimal: int = 20
    bullets_experience_min: int = 8
    bullets_very_few: int = 5
    bullets_few: int = 8
    bullets_experience_very_few: int = 3
    bullets_experience_few: int = 5
    bullets_fallback_threshold: int = 5
    bullets_implicit_min: int = 3
    bullets_experience_implicit_threshold: int = 5

    # --- Bullets: line shapes ---
    bullet_line_max_length: int = 3
    bullet_content_min_length: int = 10
    bullet_lookahead_lines: int = 3
    bullet_max_position: int = 5
    bullet_implicit_min_length: int = 20
    bullet_implicit_max_length: int = 300
    bullet_short_item_min_length: int = 10
    bullet_short_item_max_length: int = 60
    bullet_short_item_min_words: int = 2
    bullet_short_item_max_words: int = 4
    bullet_short_item_title_case_ratio: float = 0.5
    job_title_max_length: int = 80

    # --- Tables ---
    table_min_patterns: int = 3
    table_min_columns: int = 3

    # --- Multi-column ---
    multi_column_check_lines: int = 50
    multi_column_short_line: int = 30
    multi_column_long_line: int = 80
    multi_column_length_diff: int = 60
    multi_column_min_patterns: int = 10
    multi_column_high_confidence: int = 20

    # --- Metrics ---
    min_metrics_count: int = 3

    # --- Confidence ---
    confidence_high_max_issues: int = 0
    confidence_medium_max_issues: int = 2


class ValidatorThresholds(BaseModel):
    """Weights, caps and penalties used when merging rule-based and AI scores."""

    model_config = ConfigDict(frozen=True)

    max_score: int = 100
    min_score: int = 0

    # Score bands
    good_score_threshold: int = 70
    normalization_threshold: int = 50
    normalized_min_score: int = 52
    entry_level_cap_score: int = 40
    unparseable_score: int = 0

    # Weighted average (sums to 1.0)
    weight_parseability: float = 0.25
    weight_format: float = 0.25
    weight_keyword: float = 0.25
    weight_contact: float = 0.10
    weight_content: float = 0.15

    # Balanced blend when both sides are good
    weight_ai_when_good: float = 0.5
    weight_parseability_when_good: float = 0.5

    # Alignment multipliers by critical issue count
    base_alignment_multiplier: float = 0.92
    alignment_one_critical: float = 0.90
    alignment_multiple_critical: float = 0.88

    contact_no_exists_multiplier: float = 0.3
    content_long_resume_multiplier: float = 0.8
    long_resume_pages: int = 2

    # Hard-check penalties on AI category scores
    scanned_image_score_cap: int = 20
    penalty_date_placeholders: int = 25
    penalty_no_dates: int = 30
    penalty_no_name: int = 20
    penalty_no_summary: int = 10
    penalty_very_few_bullets: int = 25
    penalty_few_bullets: int = 20
    penalty_insufficient_bullets: int = 15
    penalty_no_metrics: int = 20
    penalty_tables: int = 20
    penalty_multi_column: int = 15
    penalty_thin_content: int = 10

    # Keyword scoring
    keyword_score_20_plus: int = 75
    keyword_score_15_plus: int = 65
    keyword_score_10_plus: int = 55
    keyword_score_5_plus: int = 45
    keyword_score_default: int = 25
    keyword_bonus_high_alignment: int = 10
    keyword_bonus_medium_alignment: int = 5

    # Contact scoring
    contact_email_points: int = 30
    contact_email_top_bonus: int = 20
    contact_email_middle_bonus: int = 10
    contact_phone_points: int = 20
    contact_phone_top_bonus: int = 10
    contact_phone_middle_bonus: int = 5
    contact_linkedin_points: int = 15
    contact_linkedin_format_deduction: int = 2
    contact_github_points: int = 10
    contact_location_points: int = 5
    contact_misplaced_points_ratio: float = 0.4

    # Content scoring
    content_action_verbs_points: int = 25
    content_action_verbs_5_plus_bonus: int = 10
    content_action_verbs_3_plus_bonus: int = 5
    content_achievements_points: int = 25
    content_achievements_3_plus_bonus: int = 10
    content_achievements_2_plus_bonus: int = 5
    content_length_points: int = 20
    content_length_close_partial: int = 10
    content_length_long_partial: int = 10
    content_length_close_ratio: float = 0.75  # of the minimum word count
    content_bullets_points: int = 20

    # Thin resume
    thin_resume_word_count: int = 400
    thin_resume_achievement_count: int = 3

    # Rule-based proxies (AI absent)
    basic_analysis_bonus: int = 20

    # Cost reporting
    estimated_cost_per_ai_call: float = 0.001


DEFAULT_THRESHOLDS = ParseabilityThresholds()
DEFAULT_VALIDATOR_THRESHOLDS = ValidatorThresholds()
