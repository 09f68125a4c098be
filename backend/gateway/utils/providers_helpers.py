from typing import Type, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from ..core.errors import DecodeError, TransportError
from ..models.game_record import GameRecord

M = TypeVar("M", bound=BaseModel)

SEARCH_FIELDS = ("name", "first_release_date", "summary")

_game_list_adapter = TypeAdapter(list[GameRecord])


def build_search_body(query: str) -> str:
    """
    Build the IGDB query-language body for a free-text search.
    The query is interpolated verbatim: embedded double quotes are not escaped.
    """
    return f'search "{query}"; fields {", ".join(SEARCH_FIELDS)};'


async def send_post(client: httpx.AsyncClient, url: str, **kwargs) -> httpx.Response:
    """POST with `client`, turning any httpx failure into a TransportError."""
    try:
        return await client.post(url, **kwargs)
    except httpx.HTTPError as e:
        raise TransportError(f'POST "{url}": {e}') from e


def _read_json(resp: httpx.Response, what: str):
    try:
        return resp.json()
    except ValueError as e:
        raise DecodeError(f"invalid {what} JSON (HTTP {resp.status_code}): {e}") from e


def decode_model(resp: httpx.Response, model: Type[M], what: str) -> M:
    """Decode a JSON object response body into `model`."""
    data = _read_json(resp, what)
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"unexpected {what} JSON (HTTP {resp.status_code}): {e}") from e


def decode_game_records(resp: httpx.Response) -> list[GameRecord]:
    """Decode an IGDB games response body, which must be a JSON array."""
    data = _read_json(resp, "games")
    try:
        return _game_list_adapter.validate_python(data)
    except ValidationError as e:
        raise DecodeError(f"unexpected games JSON (HTTP {resp.status_code}): {e}") from e


def encode_game_records(games: list[GameRecord]) -> bytes:
    return _game_list_adapter.dump_json(games)
