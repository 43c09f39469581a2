"""Pydantic schemas for authentication endpoints."""

from __future__ import annotations

from pydantic import BaseModel, Field


class CredentialsRequest(BaseModel):
    """Request schema for registration and login."""

    name: str = Field(..., description="User name")
    password: str = Field(..., description="User password")


class TokenResponse(BaseModel):
    """Response schema carrying a signed bearer token."""

    token: str = Field(..., description="JWT bearer token")
