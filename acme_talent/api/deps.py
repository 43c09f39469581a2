from __future__ import annotations

from collections.abc import AsyncIterator
from contextvars import ContextVar

from acme_talent.domain import Identity
from fastapi import HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

# Set by AuthenticationMiddleware for the lifetime of one request
current_identity: ContextVar[Identity | None] = ContextVar("current_identity", default=None)


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Provide an async SQLAlchemy session from the app's session factory."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session


async def require_identity() -> Identity:
    """Resolve the authenticated caller or reject the request with 401."""
    identity = current_identity.get()
    if identity is None:
        raise _unauthorized("You must be logged in to do that")
    return identity


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)
