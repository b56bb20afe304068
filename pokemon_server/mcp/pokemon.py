"""Pokemon lookup MCP server.

Provides tools backed by PokeAPI:
- Pokemon information (height, weight, types, base stats)
- Side-by-side base stat comparison of two Pokemon
"""

import logging
from typing import Any

from .base import MCPServer, ToolDef, ToolParameter, ToolResult
from .errors import ArgumentTypeError, ComparisonError, FetchError
from .formatting import format_compare, format_single
from .pokeapi import PokeAPIClient

logger = logging.getLogger(__name__)


def require_string(args: dict[str, Any], name: str) -> str:
    """Return args[name], raising ArgumentTypeError unless it is a str."""
    value = args.get(name)
    if not isinstance(value, str):
        raise ArgumentTypeError(name)
    return value


class PokemonServer(MCPServer):
    """MCP server for Pokemon lookup tools."""

    def __init__(self, client: PokeAPIClient | None = None):
        self._client = client or PokeAPIClient()
        self._tools = [
            ToolDef(
                name="get_pokemon",
                description="Get information about a Pokemon",
                parameters=[
                    ToolParameter(
                        name="name",
                        type="string",
                        description="Name of the Pokemon (lowercase)",
                    ),
                ],
            ),
            ToolDef(
                name="compare_pokemon",
                description="Compare two Pokemon",
                parameters=[
                    ToolParameter(
                        name="pokemon1",
                        type="string",
                        description="First Pokemon to compare (lowercase)",
                    ),
                    ToolParameter(
                        name="pokemon2",
                        type="string",
                        description="Second Pokemon to compare (lowercase)",
                    ),
                ],
            ),
        ]
        # Built once; never mutated after construction
        self._handlers = {
            "get_pokemon": self._get_pokemon,
            "compare_pokemon": self._compare_pokemon,
        }

    def list_tools(self) -> list[ToolDef]:
        return self._tools

    def call_tool(self, name: str, args: dict[str, Any]) -> ToolResult:
        handler = self._handlers.get(name)
        if handler is None:
            return ToolResult(success=False, error=f"Unknown tool: {name}")
        return handler(args or {})

    def _get_pokemon(self, args: dict) -> ToolResult:
        try:
            name = require_string(args, "name")
        except ArgumentTypeError as e:
            return ToolResult(success=False, error=str(e))

        try:
            pokemon = self._client.fetch(name)
        except FetchError as e:
            return ToolResult(success=False, error=f"Error fetching Pokemon: {e}")

        return ToolResult(success=True, data=format_single(pokemon))

    def _compare_pokemon(self, args: dict) -> ToolResult:
        try:
            pokemon1 = require_string(args, "pokemon1")
            pokemon2 = require_string(args, "pokemon2")
        except ArgumentTypeError as e:
            return ToolResult(success=False, error=str(e))

        # Fetched one after the other; the first failure is reported
        fetched = []
        for name in (pokemon1, pokemon2):
            try:
                fetched.append(self._client.fetch(name))
            except FetchError as e:
                return ToolResult(success=False, error=f"Error fetching {name}: {e}")

        p1, p2 = fetched
        try:
            comparison = format_compare(p1, p2)
        except ComparisonError as e:
            logger.warning(f"Cannot compare {pokemon1!r} and {pokemon2!r}: {e}")
            return ToolResult(
                success=False, error=f"Error comparing {pokemon1} and {pokemon2}: {e}"
            )

        return ToolResult(success=True, data=comparison)

    def close(self) -> None:
        """Release the HTTP session."""
        self._client.close()
