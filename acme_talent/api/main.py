from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
import uvicorn
from acme_talent.api.errors import register_exception_handlers
from acme_talent.api.middleware import AuthenticationMiddleware, RequestContextMiddleware
from acme_talent.api.routes import register_routes
from acme_talent.core.config import get_settings
from acme_talent.core.logging import setup_logging
from acme_talent.infrastructure.db.session import get_session_factory
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = structlog.get_logger()


def create_app(session_factory: async_sessionmaker[AsyncSession] | None = None) -> FastAPI:
    """Application factory for the public API."""
    settings = get_settings()
    setup_logging(settings.log_level)
    session_factory = session_factory or get_session_factory()

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "service_startup",
            service=settings.app_name,
            environment=settings.environment,
            version=settings.version,
            port=settings.port,
        )
        if settings.uses_default_secret:
            logger.warning("jwt_secret_default_in_use", environment=settings.environment)
        yield
        logger.info("service_shutdown", service=settings.app_name)

    app = FastAPI(title=settings.app_name, version=settings.version, lifespan=lifespan)
    app.state.session_factory = session_factory

    # Starlette runs middleware in reverse order of registration:
    # RequestContext -> CORS -> Authentication -> router
    app.add_middleware(AuthenticationMiddleware, session_factory=session_factory)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestContextMiddleware)

    register_exception_handlers(app)
    register_routes(app)

    return app


def run() -> None:
    """Serve the API with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "acme_talent.api.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        log_config=None,
    )


if __name__ == "__main__":
    run()
