from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

from main import app

client = TestClient(app)

pytestmark = pytest.mark.integration


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert "gemini_configured" in data


@patch("services.resume_analyzer.ai_analyzer.analyze_resume", new_callable=AsyncMock)
def test_analyze_text(mock_ai, strong_resume):
    mock_ai.return_value = None
    response = client.post("/analyze/text", json={"resume_text": strong_resume})
    assert response.status_code == 200
    data = response.json()
    assert 0 <= data["overall_score"] <= 100
    assert data["ai_unavailable"] is True
    assert data["details"]["bullet_point_count"]["count"] == 6
    assert data["details"]["text_extractability"]["message"] == "Not a PDF file"
    for key in ("parseability_score", "format_score", "keyword_score", "contact_score", "content_score"):
        assert key in data


def test_analyze_text_rejects_unknown_mime_type():
    response = client.post("/analyze/text", json={"resume_text": "Jane Doe", "mime_type": "image/png"})
    assert response.status_code == 422


def test_analyze_rejects_unsupported_file():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.txt", b"not a pdf", "text/plain")},
    )
    assert response.status_code == 400
    assert "Only PDF and DOCX" in response.json()["detail"]


def test_analyze_rejects_large_file():
    content = b"%PDF-1.7" + b"0" * (6 * 1024 * 1024)
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.pdf", content, "application/pdf")},
    )
    assert response.status_code == 400
    assert "File too large" in response.json()["detail"]


def test_analyze_rejects_corrupt_pdf():
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.pdf", b"definitely not a pdf", "application/pdf")},
    )
    assert response.status_code == 400
    assert "Failed to parse PDF" in response.json()["detail"]


@patch("services.resume_analyzer.ai_analyzer.analyze_resume", new_callable=AsyncMock)
@patch("api.router.pdf_parser.count_pdf_pages", return_value=2)
@patch("api.router.pdf_parser.extract_text")
def test_analyze_pdf_upload(mock_extract, mock_pages, mock_ai, strong_resume):
    mock_extract.return_value = strong_resume
    mock_ai.return_value = None
    response = client.post(
        "/analyze",
        files={"resume_file": ("resume.pdf", b"%PDF-1.7 fake", "application/pdf")},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["parseability_score"] == 80
    assert data["details"]["text_extractability"]["page_count"] == 2
    mock_pages.assert_called_once()
