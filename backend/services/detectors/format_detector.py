"""Scanned-image, table and multi-column layout detection."""

import logging

from models.schemas.reports import (
    FormatReport,
    MultiColumnReport,
    TableReport,
    TextExtractabilityReport,
)
from services.ats_constants import DEFAULT_THRESHOLDS, PDF_MIME_TYPE, ParseabilityThresholds
from services.ats_patterns import LEFT_RIGHT_ALIGNED_RE, TABLE_GAP_RE, TABLE_SPLIT_RE
from services.detectors.length_analyzer import PageCountSource

logger = logging.getLogger(__name__)


def check_text_extractability(
    text: str,
    mime_type: str,
    page_count_source: PageCountSource | None = None,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> TextExtractabilityReport:
    """Flag PDFs whose extracted text is too short for their page count."""
    if mime_type != PDF_MIME_TYPE:
        return TextExtractabilityReport(is_scanned_image=False, message="Not a PDF file")

    unverified = TextExtractabilityReport(
        is_scanned_image=False,
        message="Could not verify text extractability",
    )
    if page_count_source is None:
        return unverified
    try:
        page_count = page_count_source()
    except Exception as e:
        logger.warning("PDF parseability check failed: %s", e)
        return unverified

    text_length = len(text.strip())

    if text_length < thresholds.text_length_min_multi_page and page_count > 1:
        message = (
            "PDF appears to be a scanned image. ATS systems cannot extract text from images. "
            "Consider using OCR or recreating as a text-based PDF."
        )
        is_scanned = True
    elif text_length < thresholds.text_length_min_single_page:
        message = (
            "PDF appears to be a scanned image with minimal text extraction. "
            "ATS systems may struggle to parse this document."
        )
        is_scanned = True
    else:
        message = "Text extraction successful"
        is_scanned = False

    return TextExtractabilityReport(
        is_scanned_image=is_scanned,
        message=message,
        page_count=page_count,
        text_length=text_length,
    )


def detect_tables(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> TableReport:
    """Lines split into 3+ columns by wide gaps or tabs look like table rows."""
    table_lines = []
    for line_num, line in enumerate(text.split("\n"), start=1):
        if not (TABLE_GAP_RE.search(line) or "\t" in line):
            continue
        columns = [col for col in TABLE_SPLIT_RE.split(line.strip()) if col.strip()]
        if len(columns) >= thresholds.table_min_columns:
            table_lines.append(line_num)

    has_tables = len(table_lines) >= thresholds.table_min_patterns
    return TableReport(
        has_tables=has_tables,
        message=(
            "Table-like structure detected. ATS systems often fail to parse tables correctly, "
            "causing text to be scrambled or lost. Consider using simple bullet points instead."
            if has_tables
            else "No table structure detected"
        ),
        table_line_count=len(table_lines),
        approximate_lines=table_lines[:5] if has_tables else [],
    )


def detect_multi_column(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> MultiColumnReport:
    """Score adjacent-line shapes that appear when two columns are read as one."""
    t = thresholds
    lines = text.split("\n")
    suspicious = 0

    for i in range(min(t.multi_column_check_lines, len(lines) - 1)):
        current = lines[i].strip()
        following = lines[i + 1].strip()
        if not current or not following:
            continue

        # Short line followed by a long one: text jumping between columns
        if len(current) < t.multi_column_short_line and len(following) > t.multi_column_long_line:
            suspicious += 1

        # Text pinned to both edges with a wide gap between
        if LEFT_RIGHT_ALIGNED_RE.match(current):
            suspicious += 1

        if i > 0:
            previous = len(lines[i - 1].strip())
            if (
                abs(len(current) - previous) > t.multi_column_length_diff
                and abs(len(current) - len(following)) > t.multi_column_length_diff
            ):
                suspicious += 1

    has_multi_column = suspicious >= t.multi_column_min_patterns
    if suspicious >= t.multi_column_high_confidence:
        confidence = "high"
    elif suspicious >= t.multi_column_min_patterns:
        confidence = "medium"
    else:
        confidence = "low"

    return MultiColumnReport(
        has_multi_column=has_multi_column,
        message=(
            "Multi-column layout detected. ATS systems read text left-to-right, top-to-bottom. "
            "Multi-column layouts can cause text to be read in the wrong order."
            if has_multi_column
            else "No multi-column layout detected"
        ),
        confidence=confidence,
        suspicious_patterns=suspicious,
    )


def analyze_format(
    text: str,
    mime_type: str,
    page_count_source: PageCountSource | None = None,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> FormatReport:
    return FormatReport(
        text_extractability=check_text_extractability(text, mime_type, page_count_source, thresholds),
        tables=detect_tables(text, thresholds),
        multi_column=detect_multi_column(text, thresholds),
    )
