"""Credential store: user registration, lookup and password verification."""

from __future__ import annotations

import asyncio
from functools import lru_cache

import structlog
from acme_talent.core.auth import sign_token
from acme_talent.core.config import get_settings
from acme_talent.domain.errors import classify_integrity_error
from acme_talent.infrastructure.db.models import UserModel
from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


@lru_cache
def _pwd_context() -> CryptContext:
    # Work factor comes from BCRYPT_ROUNDS; tests lower it to the bcrypt minimum
    return CryptContext(
        schemes=["bcrypt"],
        deprecated="auto",
        bcrypt__rounds=get_settings().bcrypt_rounds,
    )


async def hash_password(password: str) -> str:
    """Hash a password using bcrypt in a worker thread."""
    return await asyncio.to_thread(_pwd_context().hash, password)


async def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify a password against its hash; a missing hash never matches."""
    context = _pwd_context()
    if hashed_password is None:
        # Burn comparable time so unknown names are not distinguishable
        await asyncio.to_thread(context.dummy_verify)
        return False
    return await asyncio.to_thread(context.verify, plain_password, hashed_password)


class CredentialStore:
    """Persistence and verification of user credentials."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_user(self, name: str, password: str) -> UserModel:
        """Store a new user with a bcrypt-hashed password.

        Raises:
            ConstraintViolation: a user with this name already exists.
        """
        user = UserModel(name=name, hashed_password=await hash_password(password))

        try:
            self.session.add(user)
            await self.session.commit()
            await self.session.refresh(user)
        except IntegrityError as exc:
            await self.session.rollback()
            await logger.awarning("user_create_duplicate", name=name)
            raise classify_integrity_error(
                exc, duplicate=f"User with name {name} already exists"
            ) from exc

        await logger.ainfo("user_created", user_id=user.id, name=name)
        return user

    async def fetch_users(self) -> list[UserModel]:
        result = await self.session.execute(select(UserModel).order_by(UserModel.name))
        return list(result.scalars().all())

    async def get_user(self, user_id: str) -> UserModel | None:
        return await self.session.get(UserModel, user_id)

    async def authenticate(self, name: str, password: str) -> str | None:
        """Return a signed token when the credentials match, otherwise None."""
        stmt = select(UserModel.id, UserModel.hashed_password).where(UserModel.name == name)
        row = (await self.session.execute(stmt)).one_or_none()

        if not await verify_password(password, row.hashed_password if row else None):
            await logger.awarning("authenticate_failed", name=name, user_found=row is not None)
            return None

        await logger.ainfo("authenticate_success", user_id=row.id)
        return sign_token(row.id)
