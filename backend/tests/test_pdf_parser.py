import io
from unittest.mock import patch

import pytest
from docx import Document

from services.ats_constants import DOCX_MIME_TYPE, PDF_MIME_TYPE
from services.pdf_parser import (
    DocumentParseError,
    clean_text,
    detect_mime_type,
    extract_document,
    extract_text_docx,
)


def _docx_bytes(*paragraphs: str) -> bytes:
    doc = Document()
    for text in paragraphs:
        doc.add_paragraph(text)
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


# --- clean_text ---


def test_clean_text_normalises_line_endings():
    assert clean_text("Jane Doe\r\nEngineer\rAustin") == "Jane Doe\nEngineer\nAustin"


def test_clean_text_drops_control_characters():
    assert clean_text("Jane\x00 Doe\x0c") == "Jane Doe"


def test_clean_text_squeezes_blank_runs():
    assert clean_text("Jane Doe\n\n\n\n\nExperience") == "Jane Doe\n\nExperience"


def test_clean_text_keeps_column_gaps():
    # Wide gaps and tabs are what the table detector looks for
    assert clean_text("Python     Expert\t8   \n") == "Python     Expert\t8"


def test_clean_text_empty():
    assert clean_text("") == ""


# --- detect_mime_type ---


def test_detect_pdf():
    assert detect_mime_type("resume.PDF") == PDF_MIME_TYPE
    assert detect_mime_type("upload", "application/pdf") == PDF_MIME_TYPE


def test_detect_docx():
    assert detect_mime_type("resume.docx") == DOCX_MIME_TYPE
    assert detect_mime_type("upload", DOCX_MIME_TYPE) == DOCX_MIME_TYPE


def test_detect_rejects_other_types():
    with pytest.raises(DocumentParseError, match="Only PDF and DOCX"):
        detect_mime_type("resume.txt", "text/plain")


# --- extraction ---


def test_extract_text_docx():
    content = _docx_bytes("Jane Doe", "jane@example.com", "Experience")
    assert extract_text_docx(content) == "Jane Doe\njane@example.com\nExperience"


def test_extract_document_docx():
    content = _docx_bytes("Jane Doe", "", "", "", "Experience")
    assert extract_document(content, "resume.docx") == "Jane Doe\n\nExperience"


def test_extract_document_empty_docx_raises():
    with pytest.raises(DocumentParseError, match="Unable to extract text"):
        extract_document(_docx_bytes(), "resume.docx")


def test_extract_document_corrupt_docx_raises():
    with pytest.raises(DocumentParseError, match="Failed to parse DOCX"):
        extract_document(b"not a zip file", "resume.docx")


@patch("services.pdf_parser.extract_text")
def test_extract_document_pdf(mock_extract):
    mock_extract.return_value = "Jane Doe\r\n\r\n\r\n\r\nExperience"
    assert extract_document(b"%PDF-1.7", "resume.pdf") == "Jane Doe\n\nExperience"


@patch("services.pdf_parser.extract_text")
def test_extract_document_empty_pdf_returns_empty(mock_extract):
    mock_extract.return_value = ""
    assert extract_document(b"%PDF-1.7", "scan.pdf") == ""


@patch("services.pdf_parser.extract_text")
def test_extract_document_pdf_failure(mock_extract):
    mock_extract.side_effect = Exception("No /Root object")
    with pytest.raises(DocumentParseError, match="Failed to parse PDF"):
        extract_document(b"garbage", "resume.pdf")
