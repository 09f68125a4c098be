import httpx
import pytest

from backend.gateway.core.errors import DecodeError, TransportError
from backend.gateway.models.access_token import AccessToken
from backend.gateway.utils.providers_helpers import (
    build_search_body,
    decode_game_records,
    decode_model,
    send_post,
)


def test_build_search_body():
    assert build_search_body("Zelda") == 'search "Zelda"; fields name, first_release_date, summary;'


def test_build_search_body_keeps_quotes_verbatim():
    assert build_search_body('a"b') == 'search "a"b"; fields name, first_release_date, summary;'


def test_decode_model_ignores_extra_keys():
    resp = httpx.Response(200, json={"access_token": "abc", "token_type": "bearer", "expires_in": 10, "scope": []})
    token = decode_model(resp, AccessToken, "OAuth token")
    assert token == AccessToken(access_token="abc", token_type="bearer", expires_in=10)


def test_decode_model_rejects_empty_body():
    with pytest.raises(DecodeError, match="invalid OAuth token JSON"):
        decode_model(httpx.Response(502, content=b""), AccessToken, "OAuth token")


def test_decode_game_records_rejects_error_object():
    resp = httpx.Response(401, json={"message": "Authorization Failure"})
    with pytest.raises(DecodeError, match="HTTP 401"):
        decode_game_records(resp)


def test_decode_game_records_missing_optional_fields():
    games = decode_game_records(httpx.Response(200, json=[{"id": 7}]))
    assert games[0].id == 7
    assert games[0].name == ""
    assert games[0].summary == ""
    assert games[0].first_release_date == 0


@pytest.mark.asyncio
async def test_send_post_wraps_transport_failures():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
        with pytest.raises(TransportError) as exc_info:
            await send_post(client, "https://example.test/x")

    assert str(exc_info.value) == 'POST "https://example.test/x": timed out'
    assert isinstance(exc_info.value.__cause__, httpx.ReadTimeout)
