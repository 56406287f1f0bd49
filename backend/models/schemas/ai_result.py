"""Structured output of the LLM ATS assessment.

Every field is optional: the model is asked for a fixed JSON shape but
routinely omits keys, so missing values fall back to neutral defaults.
Scores are coerced and clamped into 0-100 on load.
"""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


def _clamp_score(value: Any) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"score must be a number, got {type(value).__name__}")
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(f"score must be finite, got {value!r}")
    return max(0, min(100, round(number)))


class FormatAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int = 0
    has_appropriate_structure: bool = True

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int:
        return _clamp_score(value) or 0


class KeywordAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_unique_keywords: int = 0
    industry_alignment: str = "low"  # "high" | "medium" | "low"
    keyword_density: str = ""  # "too_sparse" | "optimal" | "too_dense"


class ContactInformation(BaseModel):
    model_config = ConfigDict(frozen=True)

    email_found: bool = False
    email_location: str = ""  # "top" | "middle" | "bottom"
    phone_found: bool = False
    phone_location: str = ""
    linkedin_found: bool = False
    linkedin_format_correct: bool = True
    github_found: bool = False
    location_found: bool = False


class ContentQuality(BaseModel):
    model_config = ConfigDict(frozen=True)

    score: int | None = None
    estimated_word_count: int = 0
    quantifiable_achievements: bool = False
    achievement_examples: list[str] = []
    uses_action_verbs: bool = False
    action_verb_examples: list[str] = []
    appropriate_length: bool = False
    has_bullet_points: bool = False

    @field_validator("score", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int | None:
        return _clamp_score(value)

    @field_validator("achievement_examples", mode="before")
    @classmethod
    def flatten_examples(cls, value: Any) -> list[str]:
        # The model sometimes answers [{"example": "..."}] instead of plain strings
        if not value:
            return []
        if not isinstance(value, list):
            raise ValueError(f"achievement_examples must be a list, got {type(value).__name__}")
        return [
            str(item.get("example", "")) if isinstance(item, dict) else str(item)
            for item in value
        ]


class AiResult(BaseModel):
    """LLM assessment as consumed by the score validator."""
    model_config = ConfigDict(frozen=True)

    overall_score: int | None = None
    format_analysis: FormatAnalysis = FormatAnalysis()
    keyword_analysis: KeywordAnalysis = KeywordAnalysis()
    contact_information: ContactInformation = ContactInformation()
    content_quality: ContentQuality = ContentQuality()
    ats_red_flags: list[str] = []
    critical_fixes_required: list[str] = []
    recommended_improvements: list[str] = []

    @field_validator("overall_score", mode="before")
    @classmethod
    def clamp_score(cls, value: Any) -> int | None:
        return _clamp_score(value)

    @model_validator(mode="before")
    @classmethod
    def lift_overall_assessment(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("overall_score") is not None:
            return data
        assessment = data.get("overall_assessment")
        if isinstance(assessment, dict) and "ats_compatibility_score" in assessment:
            data = {**data, "overall_score": assessment["ats_compatibility_score"]}
        return data

    @property
    def achievement_count(self) -> int:
        return len(self.content_quality.achievement_examples)
