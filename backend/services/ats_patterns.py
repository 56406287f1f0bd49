"""Regex and keyword tables shared by the ATS detectors.

Compiled once at import time and never mutated. Order inside the tuples
matters wherever a detector stops at the first match.
"""

import re

# ---------------------------------------------------------------------------
# Bullets
# ---------------------------------------------------------------------------

# Private-use glyph that PDF extractors emit for Symbol-font bullets (U+F0B7)
PDF_ARTIFACT_BULLET = ""

STANDARD_BULLET_CHARACTERS: tuple[str, ...] = (
    "•", "◦", "▪", "▫", "◘", "◙", "◉", "○", "●",
    "✓", "✔", "☑", "✅",
    "→", "⇒", "➜", "➤",
    "□", "■",
)

BULLET_CHARACTERS: tuple[str, ...] = STANDARD_BULLET_CHARACTERS + ("-", "*", PDF_ARTIFACT_BULLET)

# Line-start markers with the bullet text on the same line
BULLET_PREFIX_PATTERNS: tuple[re.Pattern, ...] = tuple(
    re.compile(p)
    for p in (
        r"^\s*[•◦▪▫◘◙◉○●]",
        r"^\s*\d+[.)-]\s+",
        r"^\s*[✓✔☑✅]",
        r"^\s*[-*]\s+",
        r"^\s*o\s+",
        r"^\s*[→⇒➜➤]",
        r"^\s*[□■]",
        r"^\s*[a-zA-Z][.)]\s+(?=\S)",
    )
)

NUMBERED_LIST_RE = re.compile(r"^\d+[.)-]\s+")

# ---------------------------------------------------------------------------
# Section headers
# ---------------------------------------------------------------------------

EXPERIENCE_HEADER_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        r"^(professional\s+)?experience|work\s+experience|work\s+history|employment|career\s+history",
        re.IGNORECASE,
    ),
)

PROJECTS_HEADER_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"^projects?", re.IGNORECASE),
    re.compile(r"^portfolio", re.IGNORECASE),
    re.compile(r"^personal\s+projects", re.IGNORECASE),
)

_HEADER_WORDS = (
    r"PROFESSIONAL|EXPERIENCE|EDUCATION|PROJECTS|SKILLS|SUMMARY|LANGUAGES|"
    r"CERTIFICATIONS|LEADERSHIP|WORK\s+HISTORY"
)

HEADER_OR_DATE_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(rf"^(?:{_HEADER_WORDS})", re.IGNORECASE),
    re.compile(r"\d{4}"),
    re.compile(r"^(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)", re.IGNORECASE),
)

HEADER_DATE_OR_COMPANY_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(
        rf"^(?:{_HEADER_WORDS}|Highlights|Lead|Senior|Staff|Accountant|Branch|Cashier)\s+"
        r"(?:Accountant|Developer|Engineer|Manager|Analyst|Specialist|Coordinator|Director|"
        r"VP|President|CEO|CTO|Service)",
        re.IGNORECASE,
    ),
    re.compile(r"\d{4}\s+to\s+(?:Current|Present|\d{4})", re.IGNORECASE),
    re.compile(r"^(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)\.?\s+\d{4}", re.IGNORECASE),
    re.compile(
        r"^(?:January|February|March|April|May|June|July|August|September|October|"
        r"November|December)\s+\d{4}",
        re.IGNORECASE,
    ),
    re.compile(r"^\d{2}/\d{4}"),
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+\s+\|", re.IGNORECASE),
    re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+\s+\d{4}", re.IGNORECASE),
    re.compile(r"^Company\s+Name", re.IGNORECASE),
)

JOB_TITLE_RE = re.compile(
    r"^(?:Senior|Junior|Lead|Manager|Developer|Engineer|Analyst|Specialist|Coordinator|"
    r"Director|VP|President|CEO|CTO|Full Stack|Software|Web|Accountant)\s+",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Action verbs
# ---------------------------------------------------------------------------

ACTION_VERBS: frozenset[str] = frozenset({
    "managed", "developed", "led", "created", "built", "implemented", "designed", "improved",
    "launched", "optimized", "delivered", "achieved", "increased", "reduced", "established",
    "coordinated", "executed", "transformed", "enhanced", "streamlined", "automated",
    "architected", "deployed", "integrated", "migrated", "scaled", "maintained", "collaborated",
    "mentored", "trained", "supervised", "analyzed", "researched", "evaluated",
    "performed", "prepared", "monitored", "reviewed", "provided", "compiled",
    "filed", "reconciled", "posted", "verified", "acted", "tracked", "identified", "stayed",
})

# Wider list for unmarked experience lines; includes present-tense stems
# so "Prepares", "Executes" and "Processes" resolve after inflection stripping.
EXTENDED_ACTION_VERBS: frozenset[str] = ACTION_VERBS | frozenset({
    "develop", "execute", "prepare", "process", "manage", "lead", "build", "create",
    "design", "implement", "maintain", "monitor", "review", "support", "coordinate",
    "tested", "strengthened", "overlooked", "assessed", "ensured", "organized", "completed",
    "handled", "assisted", "supported", "expanded", "initiated", "facilitated", "generated",
    "produced", "administered", "directed", "guided", "influenced", "negotiated", "persuaded",
    "presented", "promoted", "recommended", "resolved", "secured", "solved", "standardized",
    "structured", "synthesized", "systematized", "validated", "wrote", "authored", "composed",
    "constructed", "cultivated", "demonstrated", "documented", "educated", "examined",
    "explored", "formulated", "fostered", "innovated", "inspired", "instructed", "introduced",
    "investigated", "leveraged", "maximized", "minimized", "modernized", "motivated",
    "navigated", "orchestrated", "overhauled", "pioneered", "planned", "positioned",
    "prioritized", "programmed", "projected", "proposed", "qualified", "quantified",
    "rationalized", "realized", "rebuilt", "recruited", "redesigned", "refined", "regulated",
    "reinforced", "reorganized", "repaired", "replaced", "reported", "represented",
    "restored", "restructured", "retained", "revamped", "revised", "saved", "scheduled",
    "selected", "separated", "served", "simplified", "sorted", "spearheaded", "specialized",
    "specified", "started", "studied", "submitted", "substituted", "succeeded", "suggested",
    "summarized", "supplied", "sustained", "targeted", "taught", "teamed", "transferred",
    "translated", "troubleshot", "turned", "unified", "united", "updated", "upgraded",
    "utilized", "valued", "volunteered", "won",
})

# ---------------------------------------------------------------------------
# Contact
# ---------------------------------------------------------------------------

EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")

PHONE_PATTERNS: tuple[re.Pattern, ...] = (
    # US/CA
    re.compile(r"\+?1?\s*\(?\d{3}\)?[\s.-]?\d{3}[\s.-]?\d{4}"),
    # International (country code, 2-digit area, 4+4)
    re.compile(r"\+?52\s*\(?\d{2}\)?[\s.-]?\d{4}[\s.-]?\d{4}"),
)

# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

DATE_PATTERNS: tuple[re.Pattern, ...] = (
    # YYYY-MM-DD, YYYY/MM/DD, YYYY.MM.DD
    re.compile(r"\b(?:19|20)\d{2}[-./](?:0[1-9]|1[0-2])[-./](?:0[1-9]|[12][0-9]|3[01])\b"),
    # MM/YYYY, MM-YYYY, MM.YYYY
    re.compile(r"\b(?:0[1-9]|1[0-2])[-./](?:19|20)\d{2}\b"),
    # Month YYYY
    re.compile(
        r"\b(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec|January|February|March|April|"
        r"June|July|August|September|October|November|December)\s+(?:19|20)\d{2}\b",
        re.IGNORECASE,
    ),
    # Bare year
    re.compile(r"\b(?:19|20)\d{2}\b"),
)

PLACEHOLDER_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b20XX\b", re.IGNORECASE),
    re.compile(r"\b20XX-20XX\b", re.IGNORECASE),
    re.compile(r"\b(?:19|20)XX\b", re.IGNORECASE),
    re.compile(r"\bPresent\b", re.IGNORECASE),
    re.compile(r"\bCurrent\b", re.IGNORECASE),
)

LITERAL_PLACEHOLDER_RE = re.compile(r"\b20XX\b", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Name / summary
# ---------------------------------------------------------------------------

NAME_TITLE_CASE_RE = re.compile(
    r"^[A-Z][a-z]+(?:\s+[A-Z]\.?)?\s+[A-Z][a-z]+(?:\s+[A-Z][a-z]+)?$"
)
NAME_FALLBACK_TITLE_RE = re.compile(r"^[A-Z][a-z]+\s+[A-Z][a-z]+")
NAME_FALLBACK_CAPS_RE = re.compile(r"^[A-Z]+\s+[A-Z]+")

COMMON_HEADER_WORDS: tuple[str, ...] = (
    "experience", "education", "skills", "summary", "profile",
    "objective", "contact", "professional", "technical",
)

SUMMARY_HEADER_RE = re.compile(
    r"\b(?:summary|profile|professional\s+summary|executive\s+summary|career\s+summary|"
    r"objective|career\s+objective)\b",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Metrics
# ---------------------------------------------------------------------------

METRIC_PATTERNS: tuple[re.Pattern, ...] = (
    # 30%, 25 %
    re.compile(r"\d+\s*%"),
    # $50K, $1M, $500,000
    re.compile(r"\$[\d,]+[KM]?", re.IGNORECASE),
    # 5 years, 10 team members, 100+ users
    re.compile(
        r"\d+\+?\s*(?:years?|months?|team\s+members?|users?|customers?|clients?|projects?|"
        r"employees?|people|hours?|days?)",
        re.IGNORECASE,
    ),
    # from 40 to 8, by 3
    re.compile(r"\d+\s+(?:to|from|by)\s+\d+", re.IGNORECASE),
    # 2x, 10x
    re.compile(r"\d+x\b", re.IGNORECASE),
)

# ---------------------------------------------------------------------------
# Experience level
# ---------------------------------------------------------------------------

EXPERIENCE_YEARS_PATTERNS: tuple[re.Pattern, ...] = (
    re.compile(r"\b(\d+)\+?\s*years?\s+of\s+experience\b", re.IGNORECASE),
    re.compile(r"\b(\d+)\+?\s*years?\s+experience\b", re.IGNORECASE),
    re.compile(r"\b(\d+)\+?\s*years?\s+in\b", re.IGNORECASE),
    re.compile(r"\b(\d+)\+?\s*years?\s+(?:of\s+)?(?:professional|work|industry|relevant)\b", re.IGNORECASE),
)

WORK_SECTION_RE = re.compile(
    r"\b(?:work\s+)?experience|employment|professional\s+experience|career\s+history\b",
    re.IGNORECASE,
)

POSITION_KEYWORD_RE = re.compile(
    r"\b(?:Senior|Junior|Lead|Manager|Developer|Engineer|Analyst|Specialist|Coordinator|"
    r"Director|VP|President|CEO|CTO|Founder|Co-founder)\b",
    re.IGNORECASE,
)

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

TABLE_GAP_RE = re.compile(r"\s{3,}")
TABLE_SPLIT_RE = re.compile(r"\s{3,}|\t+")
LEFT_RIGHT_ALIGNED_RE = re.compile(r"^.{1,20}.*\s{10,}.*.{1,20}$")

# Characters stripped before counting a token as a word
NON_WORD_CHARS_RE = re.compile(r"[^\w\-.@/]")
CONTROL_CHARS_RE = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")
