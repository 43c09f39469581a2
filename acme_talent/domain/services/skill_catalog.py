from __future__ import annotations

import structlog
from acme_talent.domain.errors import classify_integrity_error
from acme_talent.infrastructure.db.models import SkillModel
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()


class SkillCatalog:
    """Set of uniquely named skills."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def create_skill(self, name: str) -> SkillModel:
        skill = SkillModel(name=name)

        try:
            self.session.add(skill)
            await self.session.commit()
            await self.session.refresh(skill)
        except IntegrityError as exc:
            await self.session.rollback()
            await logger.awarning("skill_create_duplicate", name=name)
            raise classify_integrity_error(
                exc, duplicate=f"Skill with name {name} already exists"
            ) from exc

        await logger.ainfo("skill_created", skill_id=skill.id, name=name)
        return skill

    async def fetch_skills(self) -> list[SkillModel]:
        result = await self.session.execute(select(SkillModel).order_by(SkillModel.name))
        return list(result.scalars().all())
