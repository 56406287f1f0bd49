"""Optional LLM assessment of a resume, validated into an AiResult."""

import logging

from pydantic import ValidationError

from config import settings
from models.schemas.ai_result import AiResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)


async def analyze_resume(resume_text: str) -> AiResult | None:
    """Ask Gemini for an ATS assessment. Returns None when AI is unavailable or the answer is unusable."""
    if len(resume_text) > settings.ai_max_resume_chars:
        logger.info(
            "Resume text truncated for AI analysis (%d > %d chars)",
            len(resume_text), settings.ai_max_resume_chars,
        )
    prompt = prompt_builder.build_ats_prompt(resume_text, settings.ai_max_resume_chars)

    data = await gemini_client.generate_json(prompt)
    if data is None:
        return None

    try:
        return AiResult.model_validate(data)
    except (ValidationError, TypeError, ValueError, OverflowError) as e:
        logger.error("Gemini response did not match the expected schema: %s", e)
        return None
