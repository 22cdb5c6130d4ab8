from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prep_api.core.errors import InvalidInput, PrepError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe_validation_error(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for error in exc.errors()[:3]:
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "Invalid request. " + "; ".join(parts) if parts else "Invalid request body."


async def prep_error_handler(request: Request, exc: PrepError) -> JSONResponse:
    logger.warning(
        "request_failed path=%s code=%s status=%s: %s", request.url.path, exc.code, exc.status_code, exc
    )
    return _error_response(exc.status_code, str(exc))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    message = _describe_validation_error(exc)
    logger.info("request_invalid path=%s code=%s", request.url.path, InvalidInput.default_code)
    return _error_response(InvalidInput.status_code, message)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    _ = request
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("request_crashed path=%s: %s", request.url.path, type(exc).__name__)
    return _error_response(500, "Internal server error.")


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(PrepError, prep_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
