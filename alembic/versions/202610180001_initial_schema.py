"""Create users, skills and user_skills tables

Revision ID: 202610180001
Revises:
Create Date: 2026-10-18 00:01:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "202610180001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "skills",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False, unique=True),
    )

    op.create_table(
        "users",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False, unique=True),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
    )

    op.create_table(
        "user_skills",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("user_id", sa.String(length=36), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("skill_id", sa.String(length=36), sa.ForeignKey("skills.id"), nullable=False),
        sa.UniqueConstraint("user_id", "skill_id", name="unique_user_skill"),
    )

    # Assignments are always listed per user
    op.create_index("ix_user_skills_user_id", "user_skills", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_user_skills_user_id", "user_skills")
    op.drop_table("user_skills")
    op.drop_table("users")
    op.drop_table("skills")
