from __future__ import annotations

import pytest
from acme_talent.domain.services import SkillCatalog
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker


@pytest.fixture()
async def skill_ids(session_factory: async_sessionmaker[AsyncSession]) -> dict[str, str]:
    """Seed the catalog and return skill ids by name."""
    async with session_factory() as session:
        catalog = SkillCatalog(session)
        skills = [await catalog.create_skill(name) for name in ("writing", "reading", "hacking")]
        return {skill.name: skill.id for skill in skills}
