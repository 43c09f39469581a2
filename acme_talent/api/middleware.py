"""Request-level middleware: correlation ids, access log, token resolution."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

import structlog
from acme_talent.api.deps import current_identity
from acme_talent.api.errors import invalid_token_response
from acme_talent.core.auth import InvalidToken, verify_token
from acme_talent.domain import Identity
from acme_talent.domain.services import CredentialStore
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp
from structlog.contextvars import bind_contextvars, clear_contextvars

logger = structlog.get_logger()

_BEARER_PREFIX = "bearer "


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Bind a request id to the log context and log every completed request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        request_id = request.headers.get("x-request-id", str(uuid4()))
        clear_contextvars()
        bind_contextvars(
            request_id=request_id,
            path=str(request.url.path),
            method=request.method,
        )
        started = time.perf_counter()
        try:
            response = await call_next(request)
            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            return response
        finally:
            clear_contextvars()


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Resolve the Authorization header to an Identity before routing.

    Requests without the header pass through anonymously. A header that does
    not resolve to an existing user ends the request with 401 here, so no
    handler runs for it. Enforcing that a route needs a caller is left to the
    ``require_identity`` dependency.
    """

    def __init__(self, app: ASGIApp, session_factory: async_sessionmaker[AsyncSession]) -> None:
        super().__init__(app)
        self.session_factory = session_factory

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        token = request.headers.get("authorization")
        if not token:
            return await call_next(request)

        identity = await self._resolve(_strip_scheme(token))
        if identity is None:
            return invalid_token_response()

        bind_contextvars(user_id=identity.user_id)
        reset_token = current_identity.set(identity)
        try:
            return await call_next(request)
        finally:
            current_identity.reset(reset_token)

    async def _resolve(self, token: str) -> Identity | None:
        try:
            user_id = verify_token(token)
        except InvalidToken as exc:
            logger.warning("token_rejected", reason=str(exc))
            return None

        async with self.session_factory() as session:
            user = await CredentialStore(session).get_user(user_id)

        if user is None:
            logger.warning("token_rejected", reason="Unknown user", user_id=user_id)
            return None
        return Identity(user_id=user.id, name=user.name)


def _strip_scheme(value: str) -> str:
    if value.lower().startswith(_BEARER_PREFIX):
        return value[len(_BEARER_PREFIX) :].strip()
    return value.strip()
