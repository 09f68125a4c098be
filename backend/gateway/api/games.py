from typing import AsyncIterator

import httpx, logging
from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from ..core.config import Settings, get_settings
from ..core.errors import GatewayError
from ..services.providers.igdb import IGDBCatalogClient
from ..services.providers.twitch import TwitchTokenProvider
from ..utils.providers_helpers import encode_game_records

router = APIRouter()
logger = logging.getLogger(__name__)


async def get_http_client() -> AsyncIterator[httpx.AsyncClient]:
    """One outbound client per inbound request, closed when the request ends."""
    async with httpx.AsyncClient() as client:
        yield client


@router.get("/search", summary="Search IGDB games by name")
async def search_games(
        request: Request,
        settings: Settings = Depends(get_settings),
        client: httpx.AsyncClient = Depends(get_http_client)):
    """
    Fetch a fresh Twitch OAuth token, then search IGDB with it.
    Takes the first `q` query parameter as the search text.
    Errors come back as text/plain: 400 when `q` is missing, 500 for any upstream failure.
    """
    values = request.query_params.getlist("q")
    q = values[0] if values else ""
    if not q:
        return PlainTextResponse("Query parameter 'q' is required", status_code=400)

    logger.info("Game search: '%s'", q)

    try:
        access_token = await TwitchTokenProvider(settings, client).fetch_token()
    except GatewayError as e:
        logger.warning("OAuth token fetch failed: %s", e)
        return PlainTextResponse(f"Error fetching OAuth token: {e}", status_code=500)

    try:
        games = await IGDBCatalogClient(settings, client).search_games(q, access_token)
    except GatewayError as e:
        logger.warning("IGDB search failed for '%s': %s", q, e)
        return PlainTextResponse(f"Error fetching games: {e}", status_code=500)

    # Encode up front so a failure can still become a clean 500
    try:
        body = encode_game_records(games)
    except (TypeError, ValueError) as e:
        logger.warning("Encoding %d games failed: %s", len(games), e)
        return PlainTextResponse(f"Error encoding response: {e}", status_code=500)

    return Response(content=body, media_type="application/json")
