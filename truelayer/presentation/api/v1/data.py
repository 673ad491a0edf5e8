"""Data API passthrough endpoint."""

from datetime import datetime
from typing import Annotated, Any

from fastapi import APIRouter, Depends, HTTPException, Query

from truelayer.core.dependencies import get_truelayer_client
from truelayer.infrastructure.clients import TrueLayerClient
from truelayer.presentation.schemas import ErrorResponseSchema

data_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        404: {"model": ErrorResponseSchema, "description": "Empty result"},
        502: {"model": ErrorResponseSchema, "description": "Bad TrueLayer response"},
        503: {"model": ErrorResponseSchema, "description": "TrueLayer unavailable"},
    },
)

ACCOUNT_ACTIONS = {
    "account",
    "balance",
    "transactions",
    "pending_transactions",
    "standing_orders",
    "direct_debits",
}


@data_router.get(
    "/get",
    summary="Fetch Data",
    description="""Fetch accounts or a per-account resource with a user access token.

`option` is the account ID and is required for every action except `accounts`.""",
)
async def handle_get(
    client: Annotated[TrueLayerClient, Depends(get_truelayer_client)],
    action: Annotated[str | None, Query()] = None,
    token: Annotated[str | None, Query()] = None,
    option: Annotated[str | None, Query()] = None,
    from_date: Annotated[datetime | None, Query(alias="from")] = None,
    to_date: Annotated[datetime | None, Query(alias="to")] = None,
) -> Any:
    if not action:
        raise HTTPException(status_code=400, detail="No action")
    if not token:
        raise HTTPException(status_code=400, detail="No token")

    if action == "accounts":
        return await client.get_accounts(token)

    if action not in ACCOUNT_ACTIONS:
        raise HTTPException(status_code=400, detail=f"Unknown action: {action}")
    if not option:
        raise HTTPException(status_code=400, detail="No option")

    if action == "account":
        return await client.get_account(token, option)
    if action == "balance":
        return await client.get_account_balance(token, option)
    if action == "transactions":
        return await client.get_account_transactions(
            token, option, from_date=from_date, to_date=to_date
        )
    if action == "pending_transactions":
        return await client.get_account_pending_transactions(
            token, option, from_date=from_date, to_date=to_date
        )
    if action == "standing_orders":
        return await client.get_account_standing_orders(token, option)
    return await client.get_account_direct_debits(token, option)
