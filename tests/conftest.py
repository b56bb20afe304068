"""Root pytest configuration for Pokemon MCP server tests."""

import json
from typing import Any
from unittest.mock import MagicMock

import pytest
import requests

from pokemon_server.mcp.pokeapi import PokeAPIClient
from pokemon_server.mcp.pokemon import PokemonServer


def pytest_addoption(parser):
    """Add --run-integration option to pytest."""
    parser.addoption(
        "--run-integration",
        action="store_true",
        default=False,
        help="run integration tests against the real PokeAPI",
    )


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires --run-integration)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip integration tests unless --run-integration is provided."""
    if config.getoption("--run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="need --run-integration option to run")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


# ---------------------------------------------------------------------------
# PokeAPI payloads
# ---------------------------------------------------------------------------

STAT_NAMES = ["hp", "attack", "defense", "special-attack", "special-defense", "speed"]


def make_payload(
    name: str,
    height: int,
    weight: int,
    types: list[str],
    stats: list[int],
    stat_names: list[str] | None = None,
) -> dict[str, Any]:
    """Build a trimmed PokeAPI /pokemon response."""
    stat_names = stat_names or STAT_NAMES
    return {
        "id": 1,
        "name": name,
        "height": height,
        "weight": weight,
        "base_experience": 100,
        "types": [
            {"slot": i + 1, "type": {"name": t, "url": f"https://pokeapi.co/api/v2/type/{t}/"}}
            for i, t in enumerate(types)
        ],
        "stats": [
            {
                "base_stat": value,
                "effort": 0,
                "stat": {"name": stat_name, "url": "https://pokeapi.co/api/v2/stat/1/"},
            }
            for stat_name, value in zip(stat_names, stats)
        ],
    }


PAYLOADS = {
    "ditto": make_payload("ditto", 3, 40, ["normal"], [48, 48, 48, 48, 48, 48]),
    "pikachu": make_payload("pikachu", 4, 60, ["electric"], [35, 55, 40, 50, 50, 90]),
    "bulbasaur": make_payload("bulbasaur", 7, 69, ["grass", "poison"], [45, 49, 49, 65, 65, 45]),
    "mr-mime": make_payload("mr-mime", 13, 545, ["psychic", "fairy"], [40, 45, 65, 100, 120, 90]),
}


def make_response(status_code: int = 200, body: Any = None) -> MagicMock:
    """Build a fake requests.Response."""
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    if isinstance(body, (bytes, str)):
        response.content = body if isinstance(body, bytes) else body.encode()
    else:
        response.content = json.dumps(body if body is not None else {}).encode()
    return response


class FakeSession:
    """Stand-in for requests.Session that serves canned PokeAPI responses."""

    def __init__(self, payloads: dict[str, dict] | None = None):
        self.payloads = PAYLOADS if payloads is None else payloads
        self.urls: list[str] = []
        self.closed = False

    def get(self, url: str, timeout: float | None = None) -> MagicMock:
        self.urls.append(url)
        name = url.rstrip("/").rsplit("/", 1)[-1]
        if name not in self.payloads:
            return make_response(404, b"Not Found")
        return make_response(200, self.payloads[name])

    def close(self) -> None:
        self.closed = True


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_session() -> FakeSession:
    """A session serving the canned payloads."""
    return FakeSession()


@pytest.fixture
def pokeapi_client(fake_session: FakeSession) -> PokeAPIClient:
    """A PokeAPI client backed by the fake session."""
    return PokeAPIClient(base_url="https://pokeapi.co/api/v2", session=fake_session)


@pytest.fixture
def pokemon_server(pokeapi_client: PokeAPIClient) -> PokemonServer:
    """A PokemonServer that never touches the network."""
    return PokemonServer(client=pokeapi_client)
