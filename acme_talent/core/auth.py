from __future__ import annotations

import jwt
from acme_talent.core.config import get_settings


class InvalidToken(Exception):
    """Raised when a token cannot be decoded or validated."""


def sign_token(user_id: str) -> str:
    """Generate a signed JWT whose only claim is the user id.

    No ``exp`` claim is set: a token stays valid until the secret changes.
    """
    settings = get_settings()
    return jwt.encode({"sub": user_id}, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str) -> str:
    """Decode a token and return the user id it was issued for."""
    settings = get_settings()

    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub"]},
        )
    except jwt.PyJWTError as exc:
        raise InvalidToken("Invalid token") from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise InvalidToken("Token missing subject")
    return user_id
