from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Attempt = Callable[[int], Awaitable[T]]
RetryHook = Callable[[int, str], None]


async def with_retry(
    fn: Attempt[T],
    *,
    max_attempts: int = 2,
    should_retry: Callable[[T], bool] | None = None,
    retry_on: tuple[type[BaseException], ...] = (),
    on_retry: RetryHook | None = None,
) -> T:
    """Run ``fn(attempt)`` until it succeeds or ``max_attempts`` is spent.

    ``fn`` receives the zero-based attempt index so it can pick a stricter
    variant on later attempts. A result accepted by ``should_retry`` or an
    exception listed in ``retry_on`` triggers the next attempt; on the final
    attempt the result is returned as is and the exception propagates.
    """
    if max_attempts < 1:
        raise ValueError("max_attempts must be at least 1")

    attempt = 0
    while True:
        last_attempt = attempt + 1 >= max_attempts
        try:
            result = await fn(attempt)
        except retry_on as exc:
            if last_attempt:
                raise
            reason = f"{type(exc).__name__}: {exc}"
        else:
            if last_attempt or should_retry is None or not should_retry(result):
                return result
            reason = "result_rejected"

        attempt += 1
        logger.info("retrying attempt=%s max_attempts=%s reason=%s", attempt + 1, max_attempts, reason)
        if on_retry is not None:
            on_retry(attempt, reason)
