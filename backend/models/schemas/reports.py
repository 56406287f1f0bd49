"""Detector reports and the aggregated parseability result."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Section = Literal["experience", "projects", "other"]
Confidence = Literal["high", "medium", "low"]

SECTIONS: tuple[Section, ...] = ("experience", "projects", "other")


def empty_section_counts() -> dict[str, int]:
    return {section: 0 for section in SECTIONS}


class _Report(BaseModel):
    model_config = ConfigDict(frozen=True)


class SectionCounts(_Report):
    """Per-section tally. Supports ``counts["experience"]`` lookups."""
    experience: int = 0
    projects: int = 0
    other: int = 0

    def __getitem__(self, section: Section) -> int:
        return getattr(self, section)


class BulletReport(_Report):
    """Bullet/list-item count with per-section attribution."""
    count: int = 0
    is_optimal: bool = False
    by_section: SectionCounts = SectionCounts()
    sections_found: tuple[Section, ...] = ()
    non_standard_count: int = 0
    non_standard_by_section: SectionCounts = SectionCounts()


class ContactReport(_Report):
    email_in_first_300: bool = False
    phone_in_first_300: bool = False
    email_in_first_10_lines: bool = False
    phone_in_first_10_lines: bool = False
    email_position: int | None = None
    phone_position: int | None = None
    email_exists: bool = False
    phone_exists: bool = False
    may_be_in_pdf_header: bool = False

    @property
    def email_near_top(self) -> bool:
        return self.email_in_first_300 or self.email_in_first_10_lines

    @property
    def phone_near_top(self) -> bool:
        return self.phone_in_first_300 or self.phone_in_first_10_lines


class DateReport(_Report):
    has_valid_dates: bool = False
    has_placeholders: bool = False
    date_count: int = 0
    placeholder_count: int = 0
    message: str = ""


class NameReport(_Report):
    has_name: bool = False
    name: str | None = None


class SummaryReport(_Report):
    has_summary: bool = False


class MetricsReport(_Report):
    has_metrics: bool = False
    metric_count: int = 0


class TextExtractabilityReport(_Report):
    """Scanned-image check. page_count/text_length are None when unverified."""
    is_scanned_image: bool = False
    message: str = ""
    page_count: int | None = None
    text_length: int | None = None


class TableReport(_Report):
    has_tables: bool = False
    message: str = ""
    table_line_count: int = 0
    approximate_lines: list[int] = []  # 1-based, first five only


class MultiColumnReport(_Report):
    has_multi_column: bool = False
    message: str = ""
    confidence: Confidence = "low"
    suspicious_patterns: int = 0


class FormatReport(_Report):
    """The three layout checks bundled together."""
    text_extractability: TextExtractabilityReport = TextExtractabilityReport()
    tables: TableReport = TableReport()
    multi_column: MultiColumnReport = MultiColumnReport()

    @property
    def is_scanned_image(self) -> bool:
        return self.text_extractability.is_scanned_image

    @property
    def has_tables(self) -> bool:
        return self.tables.has_tables

    @property
    def has_multi_column(self) -> bool:
        return self.multi_column.has_multi_column


class LengthReport(_Report):
    word_count: int = 0
    page_count: int = 1
    is_optimal: bool = False
    message: str = ""


class ExperienceReport(_Report):
    years: int = 0
    is_experienced: bool = False


class ParseabilityDetails(_Report):
    """Every sub-report, keyed the way the presentation layer reads them."""
    text_extractability: TextExtractabilityReport = TextExtractabilityReport()
    table_detection: TableReport = TableReport()
    multi_column: MultiColumnReport = MultiColumnReport()
    document_length: LengthReport = LengthReport()
    contact_location: ContactReport = ContactReport()
    date_detection: DateReport = DateReport()
    experience_level: ExperienceReport = ExperienceReport()
    name_detection: NameReport = NameReport()
    summary_detection: SummaryReport = SummaryReport()
    bullet_point_count: BulletReport = BulletReport()
    metrics_detection: MetricsReport = MetricsReport()


class ParseabilityResult(_Report):
    """Rule-based score with categorised findings."""
    score: int = Field(default=0, ge=0, le=100)
    confidence: Confidence = "low"
    critical_issues: list[str] = []
    warnings: list[str] = []
    details: ParseabilityDetails = ParseabilityDetails()
