from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

AnswerKey = Literal["A", "B", "C", "D"]


class MCQItem(BaseModel):
    question: str = Field(min_length=1)
    option_a: str
    option_b: str
    option_c: str
    option_d: str
    correct_answer: AnswerKey

    @field_validator("correct_answer", mode="before")
    @classmethod
    def _normalize_answer(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("option_a", "option_b", "option_c", "option_d", mode="before")
    @classmethod
    def _stringify_option(cls, value: object) -> object:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class MCQGenerationRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    resume_content: str = Field(alias="resumeContent", min_length=1, max_length=50000)
    question_count: int = Field(alias="questionCount", ge=1)


class MCQGenerationResponse(BaseModel):
    questions: list[MCQItem]
