"""Pydantic schemas for user and assignment endpoints."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """A stored user, hash included."""

    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., description="User ID")
    name: str = Field(..., description="Unique display name")
    hashed_password: str = Field(..., description="bcrypt hash of the password")


class UserSkillCreate(BaseModel):
    """Request schema for assigning a skill to the caller."""

    skill_id: str = Field(..., description="ID of the skill to assign")


class UserSkillRead(BaseModel):
    """Response schema for one user-skill assignment."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    skill_id: str
