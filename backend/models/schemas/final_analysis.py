"""Terminal artifact of an analysis: the merged rule-based + AI score."""

from pydantic import BaseModel, ConfigDict, Field

from models.schemas.reports import Confidence, ParseabilityDetails


class FinalAnalysis(BaseModel):
    model_config = ConfigDict(frozen=True)

    overall_score: int = Field(default=0, ge=0, le=100)
    confidence: Confidence = "medium"
    parseability_score: int = Field(default=0, ge=0, le=100)
    format_score: int = Field(default=0, ge=0, le=100)
    keyword_score: int = Field(default=0, ge=0, le=100)
    contact_score: int = Field(default=0, ge=0, le=100)
    content_score: int = Field(default=0, ge=0, le=100)
    critical_issues: list[str] = []
    warnings: list[str] = []
    suggestions: list[str] = []
    estimated_cost: float = 0.0  # USD
    ai_unavailable: bool = False
    ai_error_message: str | None = None
    details: ParseabilityDetails = ParseabilityDetails()
