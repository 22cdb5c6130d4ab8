from __future__ import annotations

from slowapi import Limiter
from slowapi.util import get_remote_address

from prep_api.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)


def rate_limit(limit: str | None = None):
    """Per-client limit for routes that reach the completion provider or the scorer."""
    return limiter.limit(limit or settings.rate_limit)
