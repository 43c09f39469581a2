from __future__ import annotations

import jwt
import pytest
from acme_talent.core.auth import InvalidToken, sign_token, verify_token

from tests.utils import tamper_signature


def test_sign_and_verify_recovers_user_id() -> None:
    token = sign_token("user-123")

    assert verify_token(token) == "user-123"


def test_token_carries_only_the_subject_claim() -> None:
    token = sign_token("user-123")

    payload = jwt.decode(token, options={"verify_signature": False})

    assert payload == {"sub": "user-123"}


def test_tampered_signature_is_rejected() -> None:
    token = tamper_signature(sign_token("user-123"))

    with pytest.raises(InvalidToken):
        verify_token(token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    token = jwt.encode(
        {"sub": "user-123"}, "some-other-secret-key-for-hs256-signing", algorithm="HS256"
    )

    with pytest.raises(InvalidToken):
        verify_token(token)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_is_rejected(token: str) -> None:
    with pytest.raises(InvalidToken):
        verify_token(token)


def test_token_without_subject_is_rejected() -> None:
    token = jwt.encode(
        {"id": "user-123"}, "test-secret-key-for-hs256-signing-0001", algorithm="HS256"
    )

    with pytest.raises(InvalidToken):
        verify_token(token)
