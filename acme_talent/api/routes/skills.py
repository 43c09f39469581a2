from __future__ import annotations

from acme_talent.api.deps import get_db_session
from acme_talent.api.schemas.skills import SkillRead
from acme_talent.domain.services import SkillCatalog
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api/skills", tags=["Skills"])


@router.get("", response_model=list[SkillRead])
async def list_skills(
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> list[SkillRead]:
    """Return every skill in the catalog."""
    skills = await SkillCatalog(session).fetch_skills()
    return [SkillRead.model_validate(skill) for skill in skills]
