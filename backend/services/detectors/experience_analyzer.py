"""Years-of-experience inference."""

from models.schemas.reports import ExperienceReport
from services.ats_constants import DEFAULT_THRESHOLDS, ParseabilityThresholds
from services.ats_patterns import (
    EXPERIENCE_YEARS_PATTERNS,
    POSITION_KEYWORD_RE,
    WORK_SECTION_RE,
)


def extract_stated_years(text: str) -> int:
    """Largest N in "N years of experience"-style phrases, 0 when none."""
    years = [
        int(match.group(1))
        for pattern in EXPERIENCE_YEARS_PATTERNS
        for match in pattern.finditer(text)
    ]
    return max(years, default=0)


def estimate_years_from_positions(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> int:
    """Rough estimate from the number of role keywords under a work history section."""
    if not WORK_SECTION_RE.search(text):
        return 0
    positions = len(POSITION_KEYWORD_RE.findall(text))
    if positions >= thresholds.min_positions_for_many:
        return thresholds.estimated_years_many_positions
    if positions >= thresholds.min_positions_for_few:
        return thresholds.estimated_years_few_positions
    return 0


def analyze_experience(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> ExperienceReport:
    years = extract_stated_years(text) or estimate_years_from_positions(text, thresholds)
    return ExperienceReport(
        years=years,
        is_experienced=years >= thresholds.experienced_years,
    )
