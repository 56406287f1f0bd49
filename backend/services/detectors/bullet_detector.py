"""Multi-pass bullet/list-item counter with section attribution.

Passes run in a fixed order, each more permissive than the last. Every
pass is a pure function ``(lines, tally, thresholds) -> tally``; the
tally carries the lines already counted so later passes never count a
line twice. Reordering the passes changes the counts.

Section attribution is a small state machine restarted at "other" by
every pass: a line matching an experience header switches to
"experience", otherwise a projects header switches to "projects", and
the state sticks until the next header.
"""

from dataclasses import dataclass, field, replace
from typing import Callable, Sequence

from models.schemas.reports import BulletReport, Section, SectionCounts, empty_section_counts
from services.ats_constants import DEFAULT_THRESHOLDS, ParseabilityThresholds
from services.ats_patterns import (
    BULLET_CHARACTERS,
    BULLET_PREFIX_PATTERNS,
    EXPERIENCE_HEADER_PATTERNS,
    EXTENDED_ACTION_VERBS,
    HEADER_DATE_OR_COMPANY_PATTERNS,
    HEADER_OR_DATE_PATTERNS,
    JOB_TITLE_RE,
    NUMBERED_LIST_RE,
    PROJECTS_HEADER_PATTERNS,
    STANDARD_BULLET_CHARACTERS,
)


@dataclass(frozen=True)
class BulletTally:
    """Accumulator threaded through the passes. Never mutated in place."""
    count: int = 0
    by_section: dict[str, int] = field(default_factory=empty_section_counts)
    counted: frozenset[str] = frozenset()
    sections_found: tuple[Section, ...] = ()
    # Lines surfaced by the implicit pass: in the total, not yet in a section
    implicit_lines: frozenset[str] = frozenset()
    non_standard_count: int = 0
    non_standard_by_section: dict[str, int] = field(default_factory=empty_section_counts)


BulletPass = Callable[[Sequence[str], BulletTally, ParseabilityThresholds], BulletTally]


# ---------------------------------------------------------------------------
# Line classification
# ---------------------------------------------------------------------------

def header_section(line: str) -> Section | None:
    """Section a header line opens, experience taking precedence over projects."""
    if any(p.search(line) for p in EXPERIENCE_HEADER_PATTERNS):
        return "experience"
    if any(p.search(line) for p in PROJECTS_HEADER_PATTERNS):
        return "projects"
    return None


def _track(line: str, section: Section, found: list[Section]) -> Section:
    opened = header_section(line)
    if opened is None:
        return section
    if opened not in found:
        found.append(opened)
    return opened


def is_header_or_date(line: str) -> bool:
    return any(p.search(line) for p in HEADER_OR_DATE_PATTERNS)


def is_header_date_or_company(line: str) -> bool:
    return any(p.search(line) for p in HEADER_DATE_OR_COMPANY_PATTERNS)


def bullet_text(line: str) -> str | None:
    """Text following a line-start bullet prefix, or None when there is no prefix."""
    for pattern in BULLET_PREFIX_PATTERNS:
        match = pattern.search(line)
        if match:
            return line[match.end():].strip()
    return None


def _has_content_ahead(lines: Sequence[str], index: int, t: ParseabilityThresholds) -> bool:
    for ahead in lines[index + 1: index + 1 + t.bullet_lookahead_lines]:
        if len(ahead.strip()) >= t.bullet_content_min_length:
            return True
    return False


def is_bullet_marker_line(line: str, lines: Sequence[str], index: int, t: ParseabilityThresholds) -> bool:
    """A stripped line that holds only a bullet glyph (or a glyph-like stub)."""
    if len(line) > t.bullet_line_max_length:
        return False
    if any(char in line for char in BULLET_CHARACTERS):
        return True
    # Unknown one-to-three character marker followed by real content
    return _has_content_ahead(lines, index, t) and not is_header_or_date(line)


def find_next_content_line(
    lines: Sequence[str], index: int, counted: set[str] | frozenset[str], t: ParseabilityThresholds
) -> str | None:
    for ahead in lines[index + 1:]:
        candidate = ahead.strip()
        if len(candidate) >= t.bullet_content_min_length and candidate not in counted:
            return candidate
    return None


def _first_word(line: str) -> str:
    return line.split(" ", 1)[0]


def _is_title_case(word: str) -> bool:
    letters = "".join(c for c in word if c.isascii() and c.isalpha())
    return bool(letters) and (letters == letters.capitalize() or letters.isupper())


def is_short_list_item(line: str, t: ParseabilityThresholds) -> bool:
    """Short, mostly title-cased line such as a skill or award entry."""
    if not t.bullet_short_item_min_length <= len(line) <= t.bullet_short_item_max_length:
        return False
    words = line.split(" ")
    if not t.bullet_short_item_min_words <= len(words) <= t.bullet_short_item_max_words:
        return False
    titled = sum(1 for word in words if _is_title_case(word))
    return titled >= len(words) * t.bullet_short_item_title_case_ratio


def verb_variants(word: str) -> set[str]:
    """The word plus its stem with a trailing -s or -es removed."""
    word = "".join(c for c in word.lower() if "a" <= c <= "z")
    variants = {word}
    if word.endswith("es"):
        variants.add(word[:-2])
    if word.endswith("s"):
        variants.add(word[:-1])
    return variants


def starts_with_action_verb(line: str, verbs: frozenset[str]) -> bool:
    return not verb_variants(_first_word(line)).isdisjoint(verbs)


def _is_job_title(line: str, t: ParseabilityThresholds) -> bool:
    return bool(JOB_TITLE_RE.match(line)) and len(line) < t.job_title_max_length


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------

class _Scan:
    """Mutable working copy of a tally for the duration of one pass."""

    def __init__(self, tally: BulletTally):
        self.tally = tally
        self.added = 0
        self.by_section = dict(tally.by_section)
        self.counted = set(tally.counted)
        self.found = list(tally.sections_found)

    def credit(self, line: str, section: Section) -> None:
        self.added += 1
        self.counted.add(line)
        self.by_section[section] += 1

    def result(self) -> BulletTally:
        return replace(
            self.tally,
            count=self.tally.count + self.added,
            by_section=self.by_section,
            counted=frozenset(self.counted),
            sections_found=tuple(self.found),
        )


def separate_line_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Glyph alone on its line: the next content line is the bullet."""
    scan = _Scan(tally)
    section: Section = "other"
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        section = _track(line, section, scan.found)
        if not is_bullet_marker_line(line, lines, index, t):
            continue
        content = find_next_content_line(lines, index, scan.counted, t)
        if content is not None:
            scan.credit(content, section)
    return scan.result()


def inline_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Bullet prefix and its text on the same line."""
    scan = _Scan(tally)
    section: Section = "other"
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        section = _track(line, section, scan.found)
        if line in scan.counted:
            continue
        # Bare markers are left to the separate-line pass
        if bullet_text(line):
            scan.credit(line, section)
    return scan.result()


def fallback_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Standard glyph anywhere in the first few characters of a line."""
    scan = _Scan(tally)
    section: Section = "other"
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        section = _track(line, section, scan.found)
        if line in scan.counted:
            continue

        positions = [line.find(char) for char in STANDARD_BULLET_CHARACTERS if char in line]
        if not positions or min(positions) >= t.bullet_max_position:
            continue

        if len(line) >= t.bullet_content_min_length:
            scan.credit(line, section)
            continue
        for ahead in lines[index + 1: index + 1 + t.bullet_lookahead_lines]:
            content = ahead.strip()
            if len(content) >= t.bullet_content_min_length:
                if content not in scan.counted:
                    scan.credit(content, section)
                break
    return scan.result()


def numbered_list_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Lines starting with ``N.``, ``N)`` or ``N-``."""
    scan = _Scan(tally)
    section: Section = "other"
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        section = _track(line, section, scan.found)
        if len(line) < t.bullet_content_min_length or line in scan.counted:
            continue
        if NUMBERED_LIST_RE.match(line):
            scan.credit(line, section)
    return scan.result()


def implicit_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Unmarked list items: short, mostly title-cased lines.

    Contributes only when at least ``bullets_implicit_min`` such items are
    found. Unmarked action-verb lines are left to the experience pass so
    they can be attributed to a section. Surfaced lines are not credited to
    any section here.
    """
    short_items: list[str] = []
    for raw in lines:
        line = raw.strip()
        if not line or line in tally.counted:
            continue
        if is_short_list_item(line, t):
            short_items.append(line)

    if len(short_items) < t.bullets_implicit_min:
        return tally

    surfaced = frozenset(short_items) - tally.implicit_lines
    return replace(
        tally,
        count=tally.count + len(surfaced),
        implicit_lines=tally.implicit_lines | surfaced,
    )


def experience_implicit_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Unmarked action-verb lines inside the experience section."""
    scan = _Scan(tally)
    section: Section = "other"
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        section = _track(line, section, scan.found)
        if section != "experience":
            continue
        if not t.bullet_implicit_min_length <= len(line) <= t.bullet_implicit_max_length:
            continue
        if line in scan.counted or is_header_date_or_company(line):
            continue
        if not starts_with_action_verb(line, EXTENDED_ACTION_VERBS) or _is_job_title(line, t):
            continue

        if line in tally.implicit_lines:
            # Already in the total from the implicit pass; attribute it only
            scan.counted.add(line)
            scan.by_section["experience"] += 1
        else:
            scan.credit(line, "experience")
    return scan.result()


def non_standard_pass(
    lines: Sequence[str], tally: BulletTally, t: ParseabilityThresholds = DEFAULT_THRESHOLDS
) -> BulletTally:
    """Flag short stubs followed by uncounted content. Diagnostic only."""
    flagged = dict(tally.non_standard_by_section)
    flagged_count = 0
    section: Section = "other"
    for index, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        section = header_section(line) or section
        if len(line) > t.bullet_line_max_length or line in tally.counted:
            continue

        following = [
            ahead.strip()
            for ahead in lines[index + 1: index + 1 + t.bullet_lookahead_lines]
            if len(ahead.strip()) >= t.bullet_content_min_length
        ]
        if not following or any(content in tally.counted for content in following):
            continue
        if is_header_or_date(line):
            continue
        flagged_count += 1
        flagged[section] += 1

    return replace(
        tally,
        non_standard_count=tally.non_standard_count + flagged_count,
        non_standard_by_section=flagged,
    )


# ---------------------------------------------------------------------------
# Orchestration
# ---------------------------------------------------------------------------

def _below_fallback_threshold(tally: BulletTally, t: ParseabilityThresholds) -> bool:
    return tally.count < t.bullets_fallback_threshold


def _experience_needs_rescan(tally: BulletTally, t: ParseabilityThresholds) -> bool:
    return (
        "experience" in tally.sections_found
        and tally.by_section["experience"] < t.bullets_experience_implicit_threshold
    )


def _always(tally: BulletTally, t: ParseabilityThresholds) -> bool:
    return True


# (pass, guard) in execution order; a guard is evaluated on the tally as it
# stands when the pass is reached.
BULLET_PASSES: tuple[tuple[BulletPass, Callable[[BulletTally, ParseabilityThresholds], bool]], ...] = (
    (separate_line_pass, _always),
    (inline_pass, _always),
    (fallback_pass, _below_fallback_threshold),
    (numbered_list_pass, _below_fallback_threshold),
    (implicit_pass, _below_fallback_threshold),
    (experience_implicit_pass, _experience_needs_rescan),
    (non_standard_pass, _always),
)


def run_passes(
    lines: Sequence[str],
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> BulletTally:
    tally = BulletTally()
    for bullet_pass, guard in BULLET_PASSES:
        if guard(tally, thresholds):
            tally = bullet_pass(lines, tally, thresholds)
    return tally


def count_bullets(
    text: str,
    thresholds: ParseabilityThresholds = DEFAULT_THRESHOLDS,
) -> BulletReport:
    tally = run_passes(text.split("\n"), thresholds)
    return BulletReport(
        count=tally.count,
        is_optimal=(
            tally.count >= thresholds.bullets_min_optimal
            and tally.by_section["experience"] >= thresholds.bullets_experience_min
        ),
        by_section=SectionCounts(**tally.by_section),
        sections_found=tally.sections_found,
        non_standard_count=tally.non_standard_count,
        non_standard_by_section=SectionCounts(**tally.non_standard_by_section),
    )
