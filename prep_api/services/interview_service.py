from __future__ import annotations

import json
import logging
from typing import Any, Sequence

from pydantic import ValidationError

from prep_api.ai.factory import get_completion_client
from prep_api.ai.types import CompletionClient
from prep_api.core.errors import InvalidInput, MalformedResponse
from prep_api.schemas.interview import InterviewAnalysis, InterviewQuestion
from prep_api.services.completion_parsing import extract_json_array, extract_json_object

logger = logging.getLogger(__name__)


def build_questions_prompt(role: str, interests: Sequence[str], question_count: int = 5) -> str:
    focus = ", ".join(item.strip() for item in interests if item and item.strip()) or "general fundamentals"
    return f"""
Generate {question_count} professional interview questions for a {role} position.
Focus on these areas of interest: {focus}.

Format the response as a JSON array of objects with this structure:
[
  {{
    "question": "Your question here",
    "category": "technical|behavioral|situational",
    "difficulty": "beginner|intermediate|advanced"
  }}
]

Make questions progressive in difficulty and relevant to the role.
""".strip()


def build_analysis_prompt(transcript: str, responses: Sequence[Any]) -> str:
    rendered = json.dumps(list(responses), indent=2, ensure_ascii=False, default=str)
    return f"""
Analyze this voice interview transcript and provide detailed feedback:

TRANSCRIPT:
{transcript}

RESPONSES:
{rendered}

Please provide analysis in the following JSON format:
{{
  "overall_score": 85,
  "technical_score": 80,
  "communication_score": 90,
  "sentiment_score": 85,
  "strengths": ["Clear communication", "Good technical knowledge"],
  "improvements": ["Could provide more specific examples"],
  "detailed_feedback": "Comprehensive feedback paragraph here",
  "question_analysis": [
    {{
      "question": "Question text",
      "response_quality": "good|average|poor",
      "feedback": "Specific feedback for this question"
    }}
  ]
}}

Score each category from 0-100. Be constructive and specific in feedback.
""".strip()


async def generate_interview_questions(
    role: str,
    interests: Sequence[str],
    *,
    question_count: int = 5,
    client: CompletionClient | None = None,
) -> list[InterviewQuestion]:
    if not role or not role.strip():
        raise InvalidInput("role must be a non-empty string.")
    client = client or get_completion_client()
    text = await client.complete(
        build_questions_prompt(role.strip(), interests, question_count), temperature=0.7
    )

    questions: list[InterviewQuestion] = []
    for raw in extract_json_array(text):
        if not isinstance(raw, dict):
            continue
        try:
            questions.append(InterviewQuestion.model_validate(raw))
        except ValidationError:
            logger.debug("interview_question_rejected role_len=%s", len(role))
    logger.info("interview_questions_generated requested=%s kept=%s", question_count, len(questions))
    return questions[:question_count]


async def analyze_interview(
    transcript: str,
    responses: Sequence[Any],
    *,
    client: CompletionClient | None = None,
) -> InterviewAnalysis:
    if not transcript or not transcript.strip():
        raise InvalidInput("transcript must be a non-empty string.")
    client = client or get_completion_client()
    text = await client.complete(build_analysis_prompt(transcript, responses), temperature=0.3)
    payload = extract_json_object(text)
    try:
        analysis = InterviewAnalysis.model_validate(payload)
    except ValidationError as exc:
        raise MalformedResponse(f"Interview analysis did not match the expected shape ({exc.error_count()} errors).") from exc
    logger.info(
        "interview_analysis_done transcript_len=%s responses=%s overall=%s",
        len(transcript),
        len(responses),
        analysis.overall_score,
    )
    return analysis
