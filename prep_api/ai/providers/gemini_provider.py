from typing import Optional

from prep_api.ai.providers.openai_provider import OpenAIProvider

GEMINI_OPENAI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta/openai/"


class GeminiProvider(OpenAIProvider):
    """Gemini through its OpenAI-compatible chat-completions endpoint."""

    api_key_env = "GEMINI_API_KEY"
    label = "gemini"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 45.0,
        temperature: float = 0.4,
        max_output_tokens: int = 4096,
    ):
        super().__init__(
            model=model,
            api_key=api_key,
            base_url=base_url or GEMINI_OPENAI_BASE_URL,
            timeout_s=timeout_s,
            temperature=temperature,
            max_output_tokens=max_output_tokens,
        )
