"""Meta endpoints (root info and health)."""

from fastapi import APIRouter

from ..schemas import HealthResponse, RootResponse
from ..version import get_application_version

router = APIRouter(tags=["meta"])


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Simple health endpoint for uptime checks."""
    return HealthResponse()


@router.get("/", response_model=RootResponse)
async def root() -> RootResponse:
    return RootResponse(version=get_application_version())
