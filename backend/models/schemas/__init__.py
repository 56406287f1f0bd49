"""Pydantic contracts shared by the detectors, the validator and the API."""

from models.schemas.reports import (
    BulletReport,
    ContactReport,
    DateReport,
    ExperienceReport,
    FormatReport,
    LengthReport,
    MetricsReport,
    MultiColumnReport,
    NameReport,
    ParseabilityDetails,
    ParseabilityResult,
    SectionCounts,
    SummaryReport,
    TableReport,
    TextExtractabilityReport,
)
from models.schemas.ai_result import AiResult
from models.schemas.final_analysis import FinalAnalysis

__all__ = [
    "AiResult",
    "BulletReport",
    "ContactReport",
    "DateReport",
    "ExperienceReport",
    "FinalAnalysis",
    "FormatReport",
    "LengthReport",
    "MetricsReport",
    "MultiColumnReport",
    "NameReport",
    "ParseabilityDetails",
    "ParseabilityResult",
    "SectionCounts",
    "SummaryReport",
    "TableReport",
    "TextExtractabilityReport",
]
