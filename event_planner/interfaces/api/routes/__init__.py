from fastapi import FastAPI

from .activity import router as activity_router
from .auth import router as auth_router
from .events import router as events_router
from .members import router as members_router
from .realtime import router as realtime_router
from .subtasks import router as subtasks_router
from .tasks import router as tasks_router
from .users import router as users_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(events_router)
    app.include_router(members_router)
    app.include_router(tasks_router)
    app.include_router(subtasks_router)
    app.include_router(activity_router)
    app.include_router(realtime_router)
