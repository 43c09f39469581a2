from fastapi import FastAPI

from . import auth, skills, users


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the FastAPI application."""
    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(skills.router)
