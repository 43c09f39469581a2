"""Recreate the schema and load demo users, skills and assignments."""

from __future__ import annotations

import asyncio

import structlog
from acme_talent.core.config import get_settings
from acme_talent.core.logging import setup_logging
from acme_talent.domain.services import AssignmentLedger, CredentialStore, SkillCatalog
from acme_talent.infrastructure.db import Base
from acme_talent.infrastructure.db.session import create_engine
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker

logger = structlog.get_logger()

DEMO_USERS = (("user", "abc123"), ("student", "somePassword"), ("admin", "admin"))
DEMO_SKILLS = ("writing", "reading", "hacking")


async def create_tables(engine: AsyncEngine) -> None:
    """Drop and recreate every table."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


async def seed(engine: AsyncEngine) -> None:
    await create_tables(engine)
    logger.info("seed_tables_created")

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as session:
        credentials = CredentialStore(session)
        catalog = SkillCatalog(session)
        ledger = AssignmentLedger(session)

        users = {
            name: await credentials.create_user(name, password) for name, password in DEMO_USERS
        }
        logger.info("seed_users_created", users=[user.name for user in users.values()])

        skills = {name: await catalog.create_skill(name) for name in DEMO_SKILLS}
        logger.info("seed_skills_created", skills=list(skills))

        student_skill = await ledger.create_assignment(users["student"].id, skills["hacking"].id)
        await ledger.create_assignment(users["user"].id, skills["writing"].id)
        await ledger.create_assignment(users["admin"].id, skills["reading"].id)
        logger.info(
            "seed_user_skills_created",
            student_skills=len(await ledger.fetch_assignments(users["student"].id)),
        )

        await ledger.delete_assignment(student_skill.id, users["student"].id)
        logger.info(
            "seed_user_skill_deleted",
            student_skills=len(await ledger.fetch_assignments(users["student"].id)),
        )


async def _main() -> None:
    engine = create_engine(get_settings().async_database_url)
    try:
        await seed(engine)
    finally:
        await engine.dispose()


def main() -> None:
    setup_logging(get_settings().log_level)
    asyncio.run(_main())


if __name__ == "__main__":
    main()
