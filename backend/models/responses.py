from pydantic import BaseModel

from models.schemas.final_analysis import FinalAnalysis


class HealthResponse(BaseModel):
    status: str = "ok"
    gemini_configured: bool = False


AnalysisResponse = FinalAnalysis
