"""Integration tests for authentication endpoints."""

from __future__ import annotations

import asyncio
import time

import pytest
from acme_talent.core.auth import verify_token
from acme_talent.domain.services import credential_store
from fastapi import status
from httpx import AsyncClient
from passlib.context import CryptContext


class TestRegisterEndpoint:
    """Tests for POST /api/auth/register."""

    async def test_register_success(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/auth/register", json={"name": "student", "password": "somePassword"}
        )

        assert response.status_code == status.HTTP_200_OK
        token = response.json()["token"]

        users = (await async_client.get("/api/users")).json()
        assert len(users) == 1
        assert users[0]["name"] == "student"
        assert verify_token(token) == users[0]["id"]

    async def test_register_duplicate_name(self, async_client: AsyncClient) -> None:
        """Registering an existing name is a server error with a message."""
        payload = {"name": "student", "password": "somePassword"}
        first = await async_client.post("/api/auth/register", json=payload)
        second = await async_client.post("/api/auth/register", json=payload)

        assert first.status_code == status.HTTP_200_OK
        assert second.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "already exists" in second.json()["detail"]

    async def test_register_missing_fields(self, async_client: AsyncClient) -> None:
        response = await async_client.post("/api/auth/register", json={"name": "student"})

        assert response.status_code == 422


class TestLoginEndpoint:
    """Tests for POST /api/auth/login."""

    async def test_login_success(self, async_client: AsyncClient) -> None:
        credentials = {"name": "admin", "password": "admin"}
        await async_client.post("/api/auth/register", json=credentials)

        response = await async_client.post("/api/auth/login", json=credentials)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["token"]

    async def test_login_wrong_password(self, async_client: AsyncClient) -> None:
        await async_client.post("/api/auth/register", json={"name": "admin", "password": "admin"})

        response = await async_client.post(
            "/api/auth/login", json={"name": "admin", "password": "guess"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["detail"] == "Invalid credentials"

    async def test_login_unknown_user(self, async_client: AsyncClient) -> None:
        response = await async_client.post(
            "/api/auth/login", json={"name": "nouser", "password": "x"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


class _SlowHashContext:
    """Password context whose hashing blocks its thread for a fixed time."""

    def __init__(self, context: CryptContext, delay: float) -> None:
        self._context = context
        self._delay = delay

    def hash(self, password: str) -> str:
        time.sleep(self._delay)
        return self._context.hash(password)


async def test_register_hashing_does_not_block_event_loop(
    async_client: AsyncClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Other coroutines keep running while a registration is hashing."""
    hash_delay = 0.5
    slow_context = _SlowHashContext(credential_store._pwd_context(), hash_delay)
    monkeypatch.setattr(credential_store, "_pwd_context", lambda: slow_context)

    worst_gap = 0.0
    done = asyncio.Event()

    async def ticker() -> None:
        nonlocal worst_gap
        while not done.is_set():
            started = time.perf_counter()
            await asyncio.sleep(0.01)
            worst_gap = max(worst_gap, time.perf_counter() - started)

    async def register() -> int:
        try:
            response = await async_client.post(
                "/api/auth/register", json={"name": "slow", "password": "pw"}
            )
            return response.status_code
        finally:
            done.set()

    status_code, _ = await asyncio.gather(register(), ticker())

    assert status_code == status.HTTP_200_OK
    assert worst_gap < hash_delay / 2
