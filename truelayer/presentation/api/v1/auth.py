"""Authentication flow endpoints: link redirect, code callback, refresh."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import RedirectResponse

from truelayer.core.config import settings
from truelayer.core.dependencies import get_truelayer_client
from truelayer.domain.entities import ALL_PERMISSIONS, AccessToken, Provider
from truelayer.infrastructure.clients import TrueLayerClient
from truelayer.infrastructure.http import build_url
from truelayer.presentation.schemas import ErrorResponseSchema

auth_router = APIRouter(
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid request"},
        503: {"model": ErrorResponseSchema, "description": "TrueLayer unavailable"},
    },
)

DEMO_PROVIDERS = (
    Provider.UK_MOCK,
    Provider.UK_OAUTH_ALL,
    Provider.UK_OPEN_BANKING_ALL,
)


def get_redirect_uri() -> str:
    """Absolute URI of the code callback."""
    return build_url(settings.host, settings.redirect_path)


@auth_router.get(
    "/",
    status_code=301,
    summary="Start Authentication",
    description="Redirects to a TrueLayer authentication link for every permission.",
)
async def start_authentication(
    client: Annotated[TrueLayerClient, Depends(get_truelayer_client)],
) -> RedirectResponse:
    link = client.get_authentication_link(
        DEMO_PROVIDERS,
        ALL_PERMISSIONS,
        get_redirect_uri(),
        post_code=False,
    )
    return RedirectResponse(url=link, status_code=301)


@auth_router.get(
    settings.redirect_path,
    response_model=AccessToken,
    summary="Authentication Callback",
    description="Exchanges the authorization code for an access token.",
)
async def handle_callback(
    client: Annotated[TrueLayerClient, Depends(get_truelayer_client)],
    code: Annotated[str | None, Query()] = None,
) -> AccessToken:
    if not code:
        raise HTTPException(status_code=400, detail="No code")

    return await client.get_access_token(code, get_redirect_uri())


@auth_router.get(
    "/refresh",
    response_model=AccessToken,
    summary="Refresh Access Token",
)
async def handle_refresh(
    client: Annotated[TrueLayerClient, Depends(get_truelayer_client)],
    refresh: Annotated[str | None, Query()] = None,
) -> AccessToken:
    if not refresh:
        raise HTTPException(status_code=400, detail="No refresh token")

    return await client.refresh_access_token(refresh)
