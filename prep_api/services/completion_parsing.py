from __future__ import annotations

import json
import re
from typing import Any

from prep_api.core.errors import MalformedResponse

_FENCE_RE = re.compile(r"```(?:json)?\s*([\s\S]*?)\s*```", re.IGNORECASE)


def _unfence(text: str) -> str:
    match = _FENCE_RE.search(text or "")
    return (match.group(1) if match else text or "").strip()


def _slice_between(candidate: str, opener: str, closer: str) -> str:
    start = candidate.find(opener)
    end = candidate.rfind(closer)
    if start != -1 and end != -1 and end > start:
        return candidate[start : end + 1]
    return candidate


def _loads(candidate: str) -> Any:
    try:
        return json.loads(candidate)
    except json.JSONDecodeError as exc:
        raise MalformedResponse(f"Model output is not valid JSON: {exc.msg}") from exc
    except (RecursionError, ValueError) as exc:
        raise MalformedResponse(f"Model output could not be parsed as JSON: {type(exc).__name__}") from exc


def extract_json_array(text: str) -> list[Any]:
    """Pull a JSON array out of model output that may carry prose or code fences."""
    parsed = _loads(_slice_between(_unfence(text), "[", "]"))
    if not isinstance(parsed, list):
        raise MalformedResponse("Model did not return a JSON array.")
    return parsed


def extract_json_object(text: str) -> dict[str, Any]:
    parsed = _loads(_slice_between(_unfence(text), "{", "}"))
    if not isinstance(parsed, dict):
        raise MalformedResponse("Model did not return a JSON object.")
    return parsed
