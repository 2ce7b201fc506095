"""Health check and public configuration endpoints."""

from fastapi import APIRouter

from app.config import get_public_settings
from app.interfaces.api.schemas import HealthRead, PublicConfigRead

router = APIRouter(tags=["config"])


@router.get("/health", response_model=HealthRead)
def health() -> HealthRead:
    return HealthRead(status="ok")


@router.get("/config", response_model=PublicConfigRead)
def read_public_config() -> PublicConfigRead:
    """Return the feature flags the client needs before signing in."""

    return PublicConfigRead.model_validate(get_public_settings())


__all__ = ["router"]
