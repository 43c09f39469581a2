"""Centralized error responder for the API."""

from __future__ import annotations

import structlog
from acme_talent.domain.errors import StoreError
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

logger = structlog.get_logger()

MALFORMED_TOKEN_DETAIL = "Authorization token malformed"


def error_response(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})


def invalid_token_response() -> JSONResponse:
    """Response for a request whose token did not resolve to a user."""
    return error_response(status.HTTP_401_UNAUTHORIZED, MALFORMED_TOKEN_DETAIL)


async def _handle_store_error(_: Request, exc: Exception) -> JSONResponse:
    # Uniqueness and reference failures are reported as generic server errors
    logger.warning("store_error", error_type=type(exc).__name__, error=str(exc))
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))


async def _handle_unexpected(_: Request, exc: Exception) -> JSONResponse:
    logger.exception("unhandled_error", error_type=type(exc).__name__)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """Attach the shared exception handlers to the application."""
    app.add_exception_handler(StoreError, _handle_store_error)
    app.add_exception_handler(Exception, _handle_unexpected)
