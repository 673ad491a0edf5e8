"""Exception handlers mapping client errors to HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from truelayer.domain.exceptions import (
    APIError,
    EmptyResult,
    InvalidDateRange,
    MalformedResponse,
    TransportError,
    TrueLayerException,
)

logger = structlog.get_logger(__name__)


def _error_body(exc: TrueLayerException, **extra) -> dict:
    return {"error": exc.code, "message": exc.message, **extra}


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Client-side TrueLayer errors keep their status, upstream failures
    become 502/503.
    """

    @app.exception_handler(InvalidDateRange)
    async def invalid_date_range_handler(
        request: Request,
        exc: InvalidDateRange,
    ) -> JSONResponse:
        return JSONResponse(status_code=400, content=_error_body(exc))

    @app.exception_handler(EmptyResult)
    async def empty_result_handler(
        request: Request,
        exc: EmptyResult,
    ) -> JSONResponse:
        return JSONResponse(status_code=404, content=_error_body(exc))

    @app.exception_handler(APIError)
    async def api_error_handler(
        request: Request,
        exc: APIError,
    ) -> JSONResponse:
        """Pass 4xx through, report anything else as a bad gateway."""
        status_code = exc.status_code or 502
        if not 400 <= status_code < 500:
            status_code = 502
        return JSONResponse(
            status_code=status_code,
            content=_error_body(exc, details=exc.details or None),
        )

    @app.exception_handler(MalformedResponse)
    async def malformed_response_handler(
        request: Request,
        exc: MalformedResponse,
    ) -> JSONResponse:
        return JSONResponse(status_code=502, content=_error_body(exc))

    @app.exception_handler(TransportError)
    async def transport_error_handler(
        request: Request,
        exc: TransportError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=503,
            content={
                "error": exc.code,
                "message": "TrueLayer is temporarily unavailable. Please try again.",
            },
        )

    @app.exception_handler(TrueLayerException)
    async def truelayer_exception_handler(
        request: Request,
        exc: TrueLayerException,
    ) -> JSONResponse:
        logger.error(
            "truelayer_exception",
            code=exc.code,
            message=exc.message,
        )
        return JSONResponse(status_code=500, content=_error_body(exc))

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
            },
        )
