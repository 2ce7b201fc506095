from fastapi import APIRouter, FastAPI

from .activity import router as activity_router
from .config import router as config_router
from .labels import router as labels_router
from .notifications import router as notifications_router
from .projects import public_router as public_project_router
from .projects import router as projects_router
from .search import router as search_router
from .tasks import router as tasks_router

API_PREFIX = "/api"


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application under ``/api``."""

    api = APIRouter(prefix=API_PREFIX)
    api.include_router(config_router)
    api.include_router(tasks_router)
    api.include_router(activity_router)
    api.include_router(notifications_router)
    api.include_router(projects_router)
    api.include_router(public_project_router)
    api.include_router(labels_router)
    api.include_router(search_router)
    app.include_router(api)
