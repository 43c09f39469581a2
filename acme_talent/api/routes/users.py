"""User listing and per-user skill assignment routes."""

from __future__ import annotations

from acme_talent.api.deps import get_db_session, require_identity
from acme_talent.api.schemas.users import UserRead, UserSkillCreate, UserSkillRead
from acme_talent.domain import Identity
from acme_talent.domain.services import AssignmentLedger, CredentialStore
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

router = APIRouter(prefix="/api/users", tags=["Users"])


@router.get("", response_model=list[UserRead])
async def list_users(
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> list[UserRead]:
    """Return all users, password hashes included."""
    users = await CredentialStore(session).fetch_users()
    return [UserRead.model_validate(user) for user in users]


@router.get("/userSkills", response_model=list[UserSkillRead])
async def list_user_skills(
    identity: Identity = Depends(require_identity),  # noqa: B008
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> list[UserSkillRead]:
    """Return the caller's skill assignments."""
    assignments = await AssignmentLedger(session).fetch_assignments(identity.user_id)
    return [UserSkillRead.model_validate(assignment) for assignment in assignments]


@router.post("/userSkills", response_model=UserSkillRead)
async def create_user_skill(
    payload: UserSkillCreate,
    identity: Identity = Depends(require_identity),  # noqa: B008
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> UserSkillRead:
    """Assign a skill to the caller."""
    assignment = await AssignmentLedger(session).create_assignment(
        identity.user_id, payload.skill_id
    )
    return UserSkillRead.model_validate(assignment)


@router.delete(
    "/userSkills/{assignment_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_user_skill(
    assignment_id: str,
    identity: Identity = Depends(require_identity),  # noqa: B008
    session: AsyncSession = Depends(get_db_session),  # noqa: B008
) -> Response:
    """Remove one of the caller's assignments; unknown or foreign ids are ignored."""
    await AssignmentLedger(session).delete_assignment(assignment_id, identity.user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
