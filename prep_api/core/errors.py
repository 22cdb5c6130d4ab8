from __future__ import annotations


class PrepError(RuntimeError):
    status_code = 500
    default_code = "internal_error"

    def __init__(self, message: str, *, code: str | None = None, status_code: int | None = None):
        super().__init__(message)
        self.code = code or self.default_code
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(PrepError):
    status_code = 400
    default_code = "invalid_input"


class UpstreamCallFailure(PrepError):
    status_code = 502
    default_code = "upstream_failure"


class UpstreamTimeout(UpstreamCallFailure):
    status_code = 504
    default_code = "upstream_timeout"


class MalformedResponse(PrepError):
    status_code = 502
    default_code = "malformed_response"


class InsufficientContent(PrepError):
    status_code = 422
    default_code = "insufficient_content"
