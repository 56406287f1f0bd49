"""Contact placement, date validity, name and summary presence."""

import re

from models.schemas.reports import ContactReport, DateReport, NameReport, SummaryReport
from services.ats_constants import DEFAULT_THRESHOLDS, ParseabilityThresholds
from services.ats_patterns import (
    COMMON_HEADER_WORDS,
    DATE_PATTERNS,
    EMAIL_RE,
    LITERAL_PLACEHOLDER_RE,
    NAME_FALLBACK_CAPS_RE,
    NAME_FALLBACK_TITLE_RE,
    NAME_TITLE_CASE_RE,
    PHONE_PATTERNS,
    PLACEHOLDER_PATTERNS,
    SUMMARY_HEADER_RE,
)
from services.detectors.length_analyzer import count_words

PLACEHOLDER_DATES_MESSAGE = (
    'Resume contains date placeholders (e.g., "20XX") instead of actual dates. '
    "ATS systems cannot parse placeholder dates - you must include real dates "
    '(e.g., "2023", "Jan 2023", "2023-2024").'
)
NO_DATES_MESSAGE = (
    "No dates found in work experience or education sections. ATS systems require "
    "dates to verify employment history and education timeline."
)
VALID_DATES_MESSAGE = "Dates found and appear to be valid"


# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

def _find_phone(text: str) -> re.Match | None:
    for pattern in PHONE_PATTERNS:
        match = pattern.search(text)
        if match:
            return match
    return None


def check_contact_location(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> ContactReport:
    """Look for email/phone in the first N characters and, independently, the first N lines.

    PDF extraction sometimes moves header text behind the body, so a hit in
    the line window without a hit in the character window is reported as
    "may be in PDF header" rather than as missing.
    """
    head_chars = text[: thresholds.contact_check_chars]
    head_lines = "\n".join(text.split("\n")[: thresholds.contact_check_lines])

    email_match = EMAIL_RE.search(head_chars)
    phone_match = _find_phone(head_chars)

    email_in_first_300 = email_match is not None
    phone_in_first_300 = phone_match is not None
    email_in_first_10_lines = EMAIL_RE.search(head_lines) is not None
    phone_in_first_10_lines = _find_phone(head_lines) is not None

    return ContactReport(
        email_in_first_300=email_in_first_300,
        phone_in_first_300=phone_in_first_300,
        email_in_first_10_lines=email_in_first_10_lines,
        phone_in_first_10_lines=phone_in_first_10_lines,
        email_position=email_match.start() if email_match else None,
        phone_position=phone_match.start() if phone_match else None,
        email_exists=EMAIL_RE.search(text) is not None,
        phone_exists=_find_phone(text) is not None,
        may_be_in_pdf_header=(
            (email_in_first_10_lines or phone_in_first_10_lines)
            and not (email_in_first_300 or phone_in_first_300)
        ),
    )


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def check_dates(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> DateReport:
    """Count dates and placeholders; a literal 20XX wins over every other outcome."""
    date_count = sum(len(p.findall(text)) for p in DATE_PATTERNS)
    placeholder_count = sum(len(p.findall(text)) for p in PLACEHOLDER_PATTERNS)
    has_valid_dates = date_count >= thresholds.min_date_count

    if LITERAL_PLACEHOLDER_RE.search(text):
        return DateReport(
            has_valid_dates=has_valid_dates,
            has_placeholders=True,
            date_count=date_count,
            placeholder_count=placeholder_count,
            message=PLACEHOLDER_DATES_MESSAGE,
        )

    return DateReport(
        has_valid_dates=has_valid_dates,
        has_placeholders=False,
        date_count=date_count,
        placeholder_count=placeholder_count,
        message=VALID_DATES_MESSAGE if has_valid_dates else NO_DATES_MESSAGE,
    )


# ---------------------------------------------------------------------------
# Name
# ---------------------------------------------------------------------------

def _contains_header_word(line: str) -> bool:
    lower = line.lower()
    return any(word in lower for word in COMMON_HEADER_WORDS)


def _is_all_caps(line: str) -> bool:
    letters = [c for c in line if c.isalpha()]
    return bool(letters) and all(c.isupper() for c in letters)


def check_name(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> NameReport:
    t = thresholds
    head = text[: t.name_check_chars]
    candidates = [line for line in head.split("\n") if line][: t.name_check_lines]

    for raw in candidates:
        line = raw.strip()
        if not line or len(line) > t.name_max_line_length:
            continue
        if not (_is_all_caps(line) or NAME_TITLE_CASE_RE.match(line)):
            continue
        word_count = len(line.split(" "))
        if not _contains_header_word(line) and t.name_min_words <= word_count <= t.name_max_words:
            return NameReport(has_name=True, name=line)

    # Fallback: two capitalised words right at the start of the document
    head = text[: t.name_fallback_chars]
    match = NAME_FALLBACK_TITLE_RE.match(head)
    if match:
        return NameReport(has_name=True, name=match.group(0))

    match = NAME_FALLBACK_CAPS_RE.match(head)
    if match:
        name = match.group(0).strip()
        if not _contains_header_word(name) and len(name) <= t.name_max_length:
            return NameReport(has_name=True, name=name)

    return NameReport(has_name=False, name=None)


# ---------------------------------------------------------------------------
# Summary
# ---------------------------------------------------------------------------

def check_summary(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> SummaryReport:
    """A summary header only counts when enough words follow it."""
    match = SUMMARY_HEADER_RE.search(text)
    if match is None:
        return SummaryReport(has_summary=False)
    following = text[match.start(): match.start() + thresholds.summary_check_chars]
    return SummaryReport(has_summary=count_words(following) >= thresholds.summary_min_words)
