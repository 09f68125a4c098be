import httpx, logging

from ...core.config import Settings
from ...core.errors import ConfigurationError
from ...models.game_record import GameRecord
from ...utils.providers_helpers import build_search_body, decode_game_records, send_post

logger = logging.getLogger(__name__)

class IGDBCatalogClient:
    BASE_GAMES_URL = "https://api.igdb.com/v4/games"

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def search_games(self, query: str, access_token: str) -> list[GameRecord]:
        """Search IGDB games by free text, returning records in the order IGDB sent them."""
        client_id = self.settings.IGDB_CLIENT_ID
        if not client_id or not access_token:
            raise ConfigurationError("IGDB Client ID or Access Token is not set")

        headers = {
            "Client-ID": client_id,
            "Authorization": f"Bearer {access_token}",
        }
        body = build_search_body(query)
        logger.debug("IGDB request body: %s", body)

        resp = await send_post(self.client, self.BASE_GAMES_URL, content=body, headers=headers)

        games = decode_game_records(resp)
        logger.debug("IGDB returned %d games for '%s'", len(games), query)
        return games
