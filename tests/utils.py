from __future__ import annotations

from httpx import AsyncClient


async def register(client: AsyncClient, name: str, password: str = "s3cret-pass") -> str:
    """Register a user over HTTP and return the issued token."""
    response = await client.post("/api/auth/register", json={"name": name, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


def auth_headers(token: str) -> dict[str, str]:
    return {"Authorization": token}


def tamper_signature(token: str) -> str:
    header, payload, signature = token.split(".")
    first = "A" if signature[0] != "A" else "B"
    return ".".join([header, payload, first + signature[1:]])
