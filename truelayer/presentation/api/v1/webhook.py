"""Receiver for async task completion notifications."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from truelayer.core.dependencies import get_truelayer_client
from truelayer.domain.entities import WebhookRequest
from truelayer.domain.exceptions import MalformedResponse, WebhookFailedError
from truelayer.infrastructure.clients import TrueLayerClient
from truelayer.presentation.schemas import ErrorResponseSchema

logger = structlog.get_logger(__name__)

webhook_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Malformed notification"},
    },
)


@webhook_router.post(
    "/webhook",
    response_model=WebhookRequest,
    summary="Async Webhook",
    description="Accepts a TrueLayer async completion notification.",
)
async def handle_webhook(
    request: Request,
    client: Annotated[TrueLayerClient, Depends(get_truelayer_client)],
) -> WebhookRequest | JSONResponse:
    """
    Decode the notification and acknowledge it.

    A failed task is still acknowledged; the failure is logged by the client.
    A body that is not a notification is rejected as a bad request.
    """
    body = await request.body()

    try:
        return client.handle_async_webhook_request_body(body)
    except WebhookFailedError as e:
        return e.request
    except MalformedResponse as e:
        logger.warning("webhook_rejected", error_code=e.code)
        return JSONResponse(
            status_code=400,
            content=ErrorResponseSchema(error=e.code, message=e.message).model_dump(),
        )
