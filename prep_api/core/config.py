from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

def _get_env(name: str, default: str | None = None) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    return value


def _get_env_bool(name: str, default: bool) -> bool:
    raw = _get_env(name, None)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _get_env_int(name: str, default: int) -> int:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _get_env_float(name: str, default: float) -> float:
    raw = _get_env(name, None)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _get_env_list(name: str, default: list[str]) -> tuple[str, ...]:
    raw = _get_env(name, None)
    if raw is None:
        return tuple(default)
    values = [item.strip() for item in raw.split(",")]
    clean = [item for item in values if item]
    return tuple(clean) if clean else tuple(default)


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    rate_limit: str
    rate_limit_enabled: bool
    log_level: str
    sentry_dsn: str | None
    cors_allowed_origins: tuple[str, ...]
    ai_provider: str
    ai_model: str
    gemini_api_key: str | None
    gemini_base_url: str
    openai_api_key: str | None
    openai_base_url: str | None
    completion_timeout_s: float
    completion_temperature: float
    mcq_max_questions: int
    personal_name_patterns: tuple[str, ...]


settings = Settings(
    api_key=_get_env("API_KEY"),
    rate_limit=_get_env("RATE_LIMIT", "30/minute") or "30/minute",
    rate_limit_enabled=_get_env_bool("RATE_LIMIT_ENABLED", True),
    log_level=_get_env("LOG_LEVEL", "INFO") or "INFO",
    sentry_dsn=_get_env("SENTRY_DSN"),
    cors_allowed_origins=_get_env_list(
        "CORS_ALLOWED_ORIGINS",
        [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://localhost:3000",
        ],
    ),
    ai_provider=(_get_env("AI_PROVIDER", "gemini") or "gemini").strip().lower(),
    ai_model=(_get_env("AI_MODEL", "gemini-2.5-flash") or "gemini-2.5-flash").strip(),
    gemini_api_key=_get_env("GEMINI_API_KEY"),
    gemini_base_url=_get_env(
        "GEMINI_BASE_URL", "https://generativelanguage.googleapis.com/v1beta/openai/"
    ) or "https://generativelanguage.googleapis.com/v1beta/openai/",
    openai_api_key=_get_env("OPENAI_API_KEY"),
    openai_base_url=_get_env("OPENAI_BASE_URL"),
    completion_timeout_s=_get_env_float("COMPLETION_TIMEOUT_S", 45.0),
    completion_temperature=_get_env_float("COMPLETION_TEMPERATURE", 0.4),
    mcq_max_questions=_get_env_int("MCQ_MAX_QUESTIONS", 50),
    personal_name_patterns=_get_env_list("PERSONAL_NAME_PATTERNS", []),
)

if settings.ai_provider not in {"gemini", "openai"}:
    raise RuntimeError("AI_PROVIDER must be either 'gemini' or 'openai'.")

if settings.completion_timeout_s <= 0:
    raise RuntimeError("COMPLETION_TIMEOUT_S must be a positive number of seconds.")
