import logging

from fastapi import APIRouter, File, HTTPException, Request, UploadFile
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import AnalyzeTextRequest
from models.responses import AnalysisResponse, HealthResponse
from services import pdf_parser, resume_analyzer
from services.ats_constants import PDF_MIME_TYPE

logger = logging.getLogger(__name__)

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health", response_model=HealthResponse)
async def health():
    return HealthResponse(status="ok", gemini_configured=bool(settings.gemini_api_key))


@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze(request: Request, resume_file: UploadFile = File(...)):
    if not resume_file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    # Validate file type before reading the body
    try:
        mime_type = pdf_parser.detect_mime_type(resume_file.filename, resume_file.content_type)
    except pdf_parser.DocumentParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    # Read and validate size
    content = await resume_file.read()
    max_bytes = settings.max_upload_size_mb * 1024 * 1024
    if len(content) > max_bytes:
        raise HTTPException(
            status_code=400,
            detail=f"File too large. Max size: {settings.max_upload_size_mb}MB",
        )
    if not content:
        raise HTTPException(status_code=400, detail="Uploaded file is empty")

    try:
        resume_text = pdf_parser.extract_document(content, resume_file.filename, mime_type)
    except pdf_parser.DocumentParseError as e:
        raise HTTPException(status_code=400, detail=str(e))

    page_count_source = None
    if mime_type == PDF_MIME_TYPE:
        page_count_source = lambda: pdf_parser.count_pdf_pages(content)  # noqa: E731

    logger.info(
        "Analyzing %s (%d bytes, %d chars extracted)",
        resume_file.filename, len(content), len(resume_text),
    )
    return await resume_analyzer.analyze(resume_text, mime_type, page_count_source)


@router.post("/analyze/text", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_text(request: Request, body: AnalyzeTextRequest):
    resume_text = pdf_parser.clean_text(body.resume_text)
    return await resume_analyzer.analyze(resume_text, body.mime_type)
