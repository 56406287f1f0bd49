"""Text extraction from uploaded PDF and DOCX resumes."""

import io
import logging
import re

import pdfplumber
from docx import Document

from services.ats_constants import DOCX_MIME_TYPE, PDF_MIME_TYPE
from services.ats_patterns import CONTROL_CHARS_RE

logger = logging.getLogger(__name__)

_BLANK_RUN_RE = re.compile(r"\n{3,}")
_TRAILING_SPACE_RE = re.compile(r"[ \t]+\n")


class DocumentParseError(ValueError):
    """Raised when an upload cannot be turned into resume text."""


def extract_text(pdf_bytes: bytes) -> str:
    """Extract all text from a PDF file."""
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        pages = [page.extract_text() or "" for page in pdf.pages]
    return "\n".join(pages).strip()


def extract_text_docx(docx_bytes: bytes) -> str:
    """Extract all paragraph text from a DOCX file."""
    doc = Document(io.BytesIO(docx_bytes))
    return "\n".join(p.text for p in doc.paragraphs).strip()


def count_pdf_pages(pdf_bytes: bytes) -> int:
    with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
        return len(pdf.pages)


def clean_text(text: str) -> str:
    """Normalise extracted text before analysis.

    Control characters are dropped, line endings unified and runs of blank
    lines squeezed. Spacing inside a line is kept: the layout detectors
    read wide gaps and tabs as column separators.
    """
    text = text.encode("utf-8", errors="ignore").decode("utf-8")
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = CONTROL_CHARS_RE.sub("", text)
    text = _TRAILING_SPACE_RE.sub("\n", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()


def detect_mime_type(filename: str, mime_type: str | None = None) -> str:
    """Resolve the document type from the declared MIME type, then the extension."""
    name = (filename or "").lower()
    declared = (mime_type or "").lower()
    if declared == PDF_MIME_TYPE or name.endswith(".pdf"):
        return PDF_MIME_TYPE
    if "wordprocessingml" in declared or "officedocument" in declared or name.endswith(".docx"):
        return DOCX_MIME_TYPE
    raise DocumentParseError(
        f"Unsupported file type: {mime_type or filename}. Only PDF and DOCX files are supported."
    )


def extract_document(content: bytes, filename: str, mime_type: str | None = None) -> str:
    """Extract and clean text from a PDF or DOCX upload.

    Raises DocumentParseError for unsupported types, unreadable files and
    DOCX files with no text. An empty PDF is returned as "" so the
    scanned-image check can report it.
    """
    resolved = detect_mime_type(filename, mime_type)
    kind = "PDF" if resolved == PDF_MIME_TYPE else "DOCX"
    try:
        raw = extract_text(content) if resolved == PDF_MIME_TYPE else extract_text_docx(content)
    except Exception as e:
        logger.error("%s parsing failed for %s: %s", kind, filename, e)
        raise DocumentParseError(
            f"Failed to parse {kind} file. Please ensure the file is not corrupted."
        ) from e

    text = clean_text(raw)
    if not text and resolved != PDF_MIME_TYPE:
        raise DocumentParseError(
            f"Unable to extract text from {kind}. The file may be corrupted or empty."
        )
    return text
