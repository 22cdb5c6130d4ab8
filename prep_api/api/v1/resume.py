from fastapi import APIRouter, Header, Request

from prep_api.core.rate_limit import rate_limit
from prep_api.core.security import check_api_key
from prep_api.features.resume_scorer import analyze_resume
from prep_api.schemas.analysis import ResumeAnalysis, ResumeAnalysisRequest

router = APIRouter()


@router.post("/resume/analysis", response_model=ResumeAnalysis)
@rate_limit()
async def resume_analysis(
    request: Request,
    payload: ResumeAnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    return analyze_resume(payload.resume_content, payload.target_role)
