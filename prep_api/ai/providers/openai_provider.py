from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import Optional

from openai import APIError, APITimeoutError, AsyncOpenAI

from prep_api.core.errors import UpstreamCallFailure, UpstreamTimeout

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Chat-completions client used as a plain prompt-in, text-out capability."""

    api_key_env = "OPENAI_API_KEY"
    label = "openai"

    def __init__(
        self,
        model: str,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: float = 45.0,
        temperature: float = 0.4,
        max_output_tokens: int = 4096,
    ):
        self._model = model
        self._temperature = temperature
        self._timeout_s = timeout_s
        self._max_output_tokens = max_output_tokens
        key = (api_key or os.getenv(self.api_key_env) or "").strip()
        if not key:
            raise UpstreamCallFailure(
                f"{self.api_key_env} is missing", code="llm_disabled", status_code=503
            )

        # Network failures are surfaced, not retried.
        self._client = AsyncOpenAI(
            api_key=key,
            base_url=base_url or None,
            timeout=timeout_s,
            max_retries=0,
        )

    @property
    def model(self) -> str:
        return self._model

    async def _create(self, prompt: str, temperature: float, max_output_tokens: int) -> str:
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=[{"role": "user", "content": prompt}],
            temperature=temperature,
            max_tokens=max_output_tokens,
        )
        content = response.choices[0].message.content if response.choices else ""
        return str(content or "")

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> str:
        started = time.perf_counter()
        try:
            text = await asyncio.wait_for(
                self._create(
                    prompt,
                    self._temperature if temperature is None else temperature,
                    max_output_tokens or self._max_output_tokens,
                ),
                timeout=self._timeout_s,
            )
        except (asyncio.TimeoutError, APITimeoutError) as exc:
            logger.warning(
                "completion_timeout provider=%s model=%s timeout_s=%s", self.label, self._model, self._timeout_s
            )
            raise UpstreamTimeout(
                f"{self.label} completion did not finish within {self._timeout_s:g}s."
            ) from exc
        except APIError as exc:
            status = getattr(exc, "status_code", None)
            logger.warning(
                "completion_failed provider=%s model=%s status=%s: %s", self.label, self._model, status, exc
            )
            raise UpstreamCallFailure(f"{self.label} API error ({status or 'transport'}): {exc}") from exc

        latency_ms = int((time.perf_counter() - started) * 1000)
        logger.info(
            "completion_done provider=%s model=%s prompt_len=%s response_len=%s latency_ms=%s",
            self.label,
            self._model,
            len(prompt),
            len(text),
            latency_ms,
        )
        if not text.strip():
            raise UpstreamCallFailure("Empty response text.", code="empty_response")
        return text
