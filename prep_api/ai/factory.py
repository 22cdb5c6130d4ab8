from functools import lru_cache

from prep_api.ai.config import load_ai_config
from prep_api.ai.types import CompletionClient

from prep_api.ai.providers.openai_provider import OpenAIProvider
from prep_api.ai.providers.gemini_provider import GeminiProvider


@lru_cache(maxsize=1)
def get_completion_client() -> CompletionClient:
    cfg = load_ai_config()

    if cfg.provider == "openai":
        return OpenAIProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            temperature=cfg.temperature,
        )

    if cfg.provider == "gemini":
        return GeminiProvider(
            model=cfg.model,
            api_key=cfg.api_key,
            base_url=cfg.base_url,
            timeout_s=cfg.timeout_s,
            temperature=cfg.temperature,
        )

    raise ValueError(f"Unsupported AI_PROVIDER='{cfg.provider}'")
