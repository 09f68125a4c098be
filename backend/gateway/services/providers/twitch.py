import httpx, logging

from ...core.config import Settings
from ...core.errors import ConfigurationError
from ...models.access_token import AccessToken
from ...utils.providers_helpers import decode_model, send_post

logger = logging.getLogger(__name__)

class TwitchTokenProvider:
    """Exchanges the IGDB client credentials for a Twitch app access token."""
    OAUTH_URL = "https://id.twitch.tv/oauth2/token"

    def __init__(self, settings: Settings, client: httpx.AsyncClient):
        self.settings = settings
        self.client = client

    async def fetch_token(self) -> str:
        """
        Run one client-credentials exchange and return the access token string.
        No caching: every call is a fresh round trip.
        """
        client_id = self.settings.IGDB_CLIENT_ID
        client_secret = self.settings.IGDB_CLIENT_SECRET.get_secret_value()
        if not client_id or not client_secret:
            raise ConfigurationError("IGDB Client ID or Client Secret is not set in environment variables")

        form = {
            "client_id": client_id,
            "client_secret": client_secret,
            "grant_type": "client_credentials",
        }
        headers = {"Content-Type": "application/x-www-form-urlencoded"}

        resp = await send_post(self.client, self.OAUTH_URL, data=form, headers=headers)

        token = decode_model(resp, AccessToken, "OAuth token")
        logger.debug("Obtained %s token, expires in %d seconds", token.token_type or "unknown", token.expires_in)
        return token.access_token
