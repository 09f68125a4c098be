from typing import Callable

import httpx
import pytest

from backend.gateway.core.config import Settings

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def settings() -> Settings:
    return Settings(IGDB_CLIENT_ID="client-id", IGDB_CLIENT_SECRET="client-secret", _env_file=None)


class Upstream:
    """Fake Twitch + IGDB pair recording every request it sees."""

    def __init__(self, token: Handler | None = None, games: Handler | None = None):
        self.requests: list[httpx.Request] = []
        self.token = token or (lambda r: httpx.Response(
            200, json={"access_token": "abc", "token_type": "bearer", "expires_in": 3600}))
        self.games = games or (lambda r: httpx.Response(200, json=[]))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.host == "id.twitch.tv":
            return self.token(request)
        if request.url.host == "api.igdb.com":
            return self.games(request)
        return httpx.Response(404)

    @property
    def hosts(self) -> list[str]:
        return [r.url.host for r in self.requests]
