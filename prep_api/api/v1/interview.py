from fastapi import APIRouter, Header, Request

from prep_api.core.rate_limit import rate_limit
from prep_api.core.security import check_api_key
from prep_api.schemas.interview import (
    InterviewAnalysisRequest,
    InterviewAnalysisResponse,
    InterviewQuestionsRequest,
    InterviewQuestionsResponse,
)
from prep_api.services.interview_service import analyze_interview, generate_interview_questions

router = APIRouter()


@router.post("/interview/questions", response_model=InterviewQuestionsResponse)
@rate_limit()
async def interview_questions(
    request: Request,
    payload: InterviewQuestionsRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    questions = await generate_interview_questions(
        payload.role,
        payload.interests,
        question_count=payload.question_count,
    )
    return InterviewQuestionsResponse(questions=questions)


@router.post("/interview/analysis", response_model=InterviewAnalysisResponse)
@rate_limit()
async def interview_analysis(
    request: Request,
    payload: InterviewAnalysisRequest,
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
):
    _ = request
    check_api_key(x_api_key)
    analysis = await analyze_interview(payload.transcript, payload.responses)
    return InterviewAnalysisResponse(analysis=analysis)
