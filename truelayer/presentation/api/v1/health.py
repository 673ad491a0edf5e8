"""Health check endpoint."""

from fastapi import APIRouter
from pydantic import BaseModel

from truelayer import __version__
from truelayer.core.config import settings

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str
    sandbox: bool


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status and selected TrueLayer environment.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="healthy", version=__version__, sandbox=settings.sandbox)
