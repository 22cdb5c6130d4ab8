from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from prep_api.ai.factory import get_completion_client
from prep_api.ai.types import CompletionClient
from prep_api.core.config import settings
from prep_api.core.errors import InsufficientContent, InvalidInput, MalformedResponse
from prep_api.features.matcher import Matcher, get_default_matcher
from prep_api.features.sanitizer import sanitize_resume
from prep_api.schemas.mcq import MCQItem
from prep_api.services.completion_parsing import extract_json_array
from prep_api.services.retry import with_retry

logger = logging.getLogger(__name__)

_STRICT_SUFFIX = (
    "Return ONLY raw JSON (no prose, no code fences). "
    "Do not mention names, job titles, company names, dates, or durations."
)
_DEFAULT_SUFFIX = "Return ONLY raw JSON (no prose, no code fences)."

# First call plus a single strict retry.
MAX_GENERATION_ATTEMPTS = 2


def over_ask_target(question_count: int) -> int:
    return max(question_count * 2, question_count + 6)


def build_mcq_prompt(resume_content: str, question_count: int, *, strict: bool = False) -> str:
    extra = _STRICT_SUFFIX if strict else _DEFAULT_SUFFIX
    return f"""
Create {question_count} **technical, project-specific** multiple-choice questions from the resume.

Rules:
- Every question MUST be about the tech stack, frameworks, libraries, databases, APIs, cloud, patterns, tooling, or architecture used **in a specific project described in the resume**.
- Include the **project's exact name** in the question text (e.g., "In the <Project Name> project, ...").
- DO NOT ask about personal details (name, email, phone, location), employment dates, durations/tenure, job titles, total years of experience, education, or company names.
- If an item would be personal/HR-style, SKIP it (do not invent facts).

Output format (JSON array only):
[
  {{
    "question": "In the <Project Name> project, which database was used for <X>?",
    "option_a": "string",
    "option_b": "string",
    "option_c": "string",
    "option_d": "string",
    "correct_answer": "A"
  }}
  // ... {question_count} items
]

{extra}

Resume (tech-only view may be sanitized):
{resume_content}
""".strip()


def parse_mcq_items(raw_items: list[Any]) -> list[MCQItem]:
    items: list[MCQItem] = []
    for raw in raw_items:
        if not isinstance(raw, dict):
            continue
        try:
            items.append(MCQItem.model_validate(raw))
        except ValidationError as exc:
            logger.debug("mcq_item_rejected reason=schema errors=%s", exc.error_count())
    return items


def passes_question_filter(item: MCQItem, matcher: Matcher | None = None) -> bool:
    matcher = matcher or get_default_matcher()
    if matcher.looks_personal_or_hr(item.question):
        return False
    return matcher.contains_tech_token(item.question)


def filter_questions(items: list[MCQItem], matcher: Matcher | None = None) -> list[MCQItem]:
    matcher = matcher or get_default_matcher()
    return [item for item in items if passes_question_filter(item, matcher)]


def validate_question_count(question_count: Any) -> int:
    if isinstance(question_count, bool) or not isinstance(question_count, int):
        raise InvalidInput("questionCount must be a whole number.")
    if question_count < 1:
        raise InvalidInput("questionCount must be at least 1.")
    if question_count > settings.mcq_max_questions:
        raise InvalidInput(f"questionCount must not exceed {settings.mcq_max_questions}.")
    return question_count


async def generate_mcqs(
    resume_content: str,
    question_count: int,
    *,
    client: CompletionClient | None = None,
    matcher: Matcher | None = None,
) -> list[MCQItem]:
    """Generate up to ``question_count`` technical MCQs grounded in a resume.

    Over-asks the model, filters out personal/HR-flavoured or non-technical
    questions, and retries once with a stricter prompt when too few survive.
    """
    if not isinstance(resume_content, str) or not resume_content.strip():
        raise InvalidInput("resumeContent must be a non-empty string.")
    question_count = validate_question_count(question_count)

    matcher = matcher or get_default_matcher()
    client = client or get_completion_client()
    sanitized = sanitize_resume(resume_content, matcher)
    target = over_ask_target(question_count)
    logger.info(
        "mcq_generation_start requested=%s target=%s resume_len=%s sanitized_len=%s",
        question_count,
        target,
        len(resume_content),
        len(sanitized),
    )

    def log_strict_retry(attempt_index: int, reason: str) -> None:
        logger.info(
            "mcq_generation_strict_retry attempt=%s requested=%s reason=%s",
            attempt_index + 1,
            question_count,
            reason,
        )

    async def attempt(index: int) -> list[MCQItem]:
        prompt = build_mcq_prompt(sanitized, target, strict=index > 0)
        text = await client.complete(prompt)
        parsed = parse_mcq_items(extract_json_array(text))
        kept = filter_questions(parsed, matcher)
        logger.info(
            "mcq_generation_attempt attempt=%s strict=%s parsed=%s kept=%s",
            index + 1,
            index > 0,
            len(parsed),
            len(kept),
        )
        return kept

    items = await with_retry(
        attempt,
        max_attempts=MAX_GENERATION_ATTEMPTS,
        should_retry=lambda kept: len(kept) < question_count,
        retry_on=(MalformedResponse,),
        on_retry=log_strict_retry,
    )

    if not items:
        raise InsufficientContent(
            "No technical questions generated after filtering. "
            "Check resume content for clear project/stack details."
        )
    return items[:question_count]
