"""Authentication routes - register and login."""

from __future__ import annotations

import structlog
from acme_talent.api.deps import get_db_session
from acme_talent.api.schemas.auth import CredentialsRequest, TokenResponse
from acme_talent.core.auth import sign_token
from acme_talent.domain.services import CredentialStore
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()
router = APIRouter(prefix="/api/auth", tags=["authentication"])


@router.post(
    "/register",
    response_model=TokenResponse,
    summary="Register new user",
    description="Create a user from a name and password and return a bearer token for it.",
)
async def register(
    payload: CredentialsRequest,
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> TokenResponse:
    """Register a new user."""
    # A duplicate name raises ConstraintViolation, answered by the error responder
    user = await CredentialStore(session).create_user(payload.name, payload.password)
    return TokenResponse(token=sign_token(user.id))


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="User login",
    description="Exchange a name and password for a bearer token.",
)
async def login(
    payload: CredentialsRequest,
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> TokenResponse:
    """Authenticate user and return a token."""
    token = await CredentialStore(session).authenticate(payload.name, payload.password)
    if token is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
        )
    return TokenResponse(token=token)
