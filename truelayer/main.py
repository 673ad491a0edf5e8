"""
TrueLayer Client - Demo Application Entry Point

A small FastAPI app that walks through the authentication flow, proxies
data API calls and receives async webhooks using TrueLayerClient.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Response

from truelayer import __version__
from truelayer.core.config import settings
from truelayer.core.logging import setup_logging
from truelayer.core.metrics import get_metrics, get_metrics_content_type
from truelayer.presentation.api import api_router
from truelayer.presentation.middleware import error_handler_middleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Set up logging on startup."""
    setup_logging()

    logger = structlog.get_logger(__name__)
    logger.info(
        "application_started",
        version=__version__,
        sandbox=settings.sandbox,
    )

    yield

    logger.info("application_stopped")


app = FastAPI(
    title="TrueLayer Client Demo",
    description="Authentication flow and data API walkthrough for TrueLayer",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

error_handler_middleware(app)

app.include_router(api_router)


@app.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus metrics endpoint."""
    return Response(
        content=get_metrics(),
        media_type=get_metrics_content_type(),
    )


if __name__ == "__main__":
    import uvicorn
    from urllib.parse import urlsplit

    # Listen on the port of the configured host so the redirect URI resolves.
    uvicorn.run(app, host="0.0.0.0", port=urlsplit(settings.host).port or 80)
