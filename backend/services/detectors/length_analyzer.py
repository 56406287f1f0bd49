"""Word/page count policy."""

import logging
import math
from typing import Callable

from models.schemas.reports import LengthReport
from services.ats_constants import DEFAULT_THRESHOLDS, PDF_MIME_TYPE, ParseabilityThresholds
from services.ats_patterns import CONTROL_CHARS_RE, NON_WORD_CHARS_RE

logger = logging.getLogger(__name__)

PageCountSource = Callable[[], int]


def count_words(text: str) -> int:
    """Count tokens that keep a word character, hyphen, dot, @ or / after stripping punctuation.

    Emails, URLs and hyphenated words count as one word; lone bullet
    glyphs and separators count as none.
    """
    text = " ".join(text.split())
    text = CONTROL_CHARS_RE.sub("", text)
    return sum(1 for token in text.split() if NON_WORD_CHARS_RE.sub("", token).strip())


def resolve_page_count(
    mime_type: str,
    page_count_source: PageCountSource | None,
    word_count: int,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> int:
    """Page count from the document when it is a PDF, estimated from words otherwise."""
    if mime_type != PDF_MIME_TYPE:
        return thresholds.page_count_min

    estimated = max(thresholds.page_count_min, math.ceil(word_count / thresholds.words_per_page))
    if page_count_source is None:
        return estimated
    try:
        return page_count_source()
    except Exception as e:
        logger.warning("Page count unavailable, estimating from %d words: %s", word_count, e)
        return estimated


def analyze_length(
    text: str,
    mime_type: str = PDF_MIME_TYPE,
    page_count_source: PageCountSource | None = None,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> LengthReport:
    t = thresholds
    word_count = count_words(text)
    page_count = resolve_page_count(mime_type, page_count_source, word_count, t)

    optimal_words = t.word_count_min <= word_count <= t.word_count_max
    optimal_pages = t.page_count_min <= page_count <= t.page_count_max
    is_optimal = optimal_words and optimal_pages

    ideal_words = f"ideal: {t.word_count_min}-{t.word_count_max}"
    if is_optimal:
        message = "Document length is optimal"
    elif word_count < t.word_count_min:
        message = (
            f"Resume is too short ({word_count} words, {ideal_words}). "
            "Consider adding more detail about your experience and achievements."
        )
    elif word_count > t.word_count_max:
        message = (
            f"Resume is too long ({word_count} words, {ideal_words}). "
            f"Consider condensing to {t.page_count_min}-{t.page_count_max} pages."
        )
    elif page_count > t.page_count_max:
        message = (
            f"Resume is too long ({page_count} pages, ideal: {t.page_count_min}-{t.page_count_max} pages). "
            "ATS systems and recruiters prefer concise resumes."
        )
    else:
        message = "Document length is optimal"

    return LengthReport(
        word_count=word_count,
        page_count=page_count,
        is_optimal=is_optimal,
        message=message,
    )
