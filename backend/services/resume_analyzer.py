"""Orchestrator: rule-based parseability, optional AI assessment, final scoring.

Pipeline:
1. Parseability check (detectors + penalty aggregation)
2. Gemini ATS assessment (optional, skipped for unparseable documents)
3. Score validation: blend, hard checks and overrides into one FinalAnalysis
"""

import logging

from models.schemas.final_analysis import FinalAnalysis
from services import ai_analyzer, parseability_checker, score_validator
from services.ats_constants import PDF_MIME_TYPE
from services.detectors.length_analyzer import PageCountSource

logger = logging.getLogger(__name__)


async def analyze(
    resume_text: str,
    mime_type: str = PDF_MIME_TYPE,
    page_count_source: PageCountSource | None = None,
) -> FinalAnalysis:
    """Run the full ATS analysis on extracted resume text."""
    # --- Layer 1: Rule-based parseability ---
    parseability = parseability_checker.analyze_document(resume_text, mime_type, page_count_source)

    # --- Layer 2: AI assessment ---
    ai_result = None
    if parseability.score == 0:
        logger.info("Skipping AI analysis: document is not parseable")
    else:
        ai_result = await ai_analyzer.analyze_resume(resume_text)
        if ai_result is None:
            logger.warning("AI analysis unavailable, using rule-based scoring only")

    # --- Layer 3: Validation ---
    final = score_validator.validate(parseability, ai_result)
    logger.info(
        "Final ATS score %d (parseability %d, ai %s)",
        final.overall_score, final.parseability_score,
        "unavailable" if final.ai_unavailable else "used",
    )
    return final
