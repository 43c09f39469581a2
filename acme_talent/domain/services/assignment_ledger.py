"""Assignment ledger: the user/skill join table."""

from __future__ import annotations

import structlog
from acme_talent.domain.errors import classify_integrity_error
from acme_talent.infrastructure.db.models import UserSkillModel
from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


class AssignmentLedger:
    """Records which skills each user holds, one row per (user, skill) pair."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_assignment(self, user_id: str, skill_id: str) -> UserSkillModel:
        """Assign a skill to a user.

        Raises:
            ConstraintViolation: the user already holds this skill.
            ReferenceViolation: the user or the skill does not exist.
        """
        assignment = UserSkillModel(user_id=user_id, skill_id=skill_id)

        try:
            self.session.add(assignment)
            await self.session.commit()
            await self.session.refresh(assignment)
        except IntegrityError as exc:
            await self.session.rollback()
            error = classify_integrity_error(
                exc,
                duplicate=f"Skill {skill_id} is already assigned to user {user_id}",
                missing=f"User {user_id} or skill {skill_id} does not exist",
            )
            await logger.awarning(
                "assignment_create_rejected",
                user_id=user_id,
                skill_id=skill_id,
                reason=type(error).__name__,
            )
            raise error from exc

        await logger.ainfo(
            "assignment_created",
            assignment_id=assignment.id,
            user_id=user_id,
            skill_id=skill_id,
        )
        return assignment

    async def fetch_assignments(self, user_id: str) -> list[UserSkillModel]:
        stmt = select(UserSkillModel).where(UserSkillModel.user_id == user_id)
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def delete_assignment(self, assignment_id: str, user_id: str) -> None:
        """Delete an assignment owned by ``user_id``.

        A row owned by someone else, or no row at all, is left alone without
        raising: callers cannot tell the cases apart.
        """
        stmt = delete(UserSkillModel).where(
            UserSkillModel.id == assignment_id,
            UserSkillModel.user_id == user_id,
        )
        result = await self.session.execute(stmt)
        await self.session.commit()

        await logger.ainfo(
            "assignment_deleted",
            assignment_id=assignment_id,
            user_id=user_id,
            deleted=result.rowcount,
        )
