from fastapi import APIRouter, Header, Request

from prep_api.core.rate_limit import rate_limit
from prep_api.core.security import check_api_key
from prep_api.schemas.mcq import MCQGenerationRequest, MCQGenerationResponse
from prep_api.services.mcq_service import generate_mcqs

router = APIRouter()


@router.post("/mcq/generate", response_model=MCQGenerationResponse)
@rate_limit()
async def mcq_generate(
    request: Request,
    payload: MCQGenerationRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    questions = await generate_mcqs(payload.resume_content, payload.question_count)
    return MCQGenerationResponse(questions=questions)
