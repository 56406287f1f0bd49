from typing import Literal

from pydantic import BaseModel, Field

from services.ats_constants import DOCX_MIME_TYPE, PDF_MIME_TYPE


class AnalyzeTextRequest(BaseModel):
    resume_text: str = Field(..., max_length=50000, description="Already-extracted resume text")
    mime_type: Literal["text/plain", PDF_MIME_TYPE, DOCX_MIME_TYPE] = Field(
        "text/plain", description="Type of the document the text came from"
    )
