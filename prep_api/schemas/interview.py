from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

QuestionCategory = Literal["technical", "behavioral", "situational"]
Difficulty = Literal["beginner", "intermediate", "advanced"]
ResponseQuality = Literal["good", "average", "poor"]


def _clamp_score(value: object) -> int:
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 0
    return max(0, min(100, round(number)))


class InterviewQuestion(BaseModel):
    question: str = Field(min_length=1)
    category: QuestionCategory = "technical"
    difficulty: Difficulty = "intermediate"

    @field_validator("category", "difficulty", mode="before")
    @classmethod
    def _lowercase(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class QuestionAnalysis(BaseModel):
    question: str = ""
    response_quality: ResponseQuality = "average"
    feedback: str = ""

    @field_validator("response_quality", mode="before")
    @classmethod
    def _lowercase(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


class InterviewAnalysis(BaseModel):
    overall_score: int = 0
    technical_score: int = 0
    communication_score: int = 0
    sentiment_score: int = 0
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    detailed_feedback: str = ""
    question_analysis: list[QuestionAnalysis] = Field(default_factory=list)

    @field_validator(
        "overall_score", "technical_score", "communication_score", "sentiment_score", mode="before"
    )
    @classmethod
    def _clamp(cls, value: object) -> int:
        return _clamp_score(value)


class InterviewQuestionsRequest(BaseModel):
    role: str = Field(min_length=1, max_length=200)
    interests: list[str] = Field(default_factory=list, max_length=20)
    question_count: int = Field(default=5, alias="questionCount", ge=1, le=20)

    model_config = ConfigDict(populate_by_name=True)


class InterviewQuestionsResponse(BaseModel):
    questions: list[InterviewQuestion]


class InterviewAnalysisRequest(BaseModel):
    transcript: str = Field(min_length=1, max_length=100000)
    responses: list[Any] = Field(default_factory=list, max_length=50)


class InterviewAnalysisResponse(BaseModel):
    analysis: InterviewAnalysis
