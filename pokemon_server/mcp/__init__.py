"""MCP server implementations."""

from .base import MCPServer, ToolDef, ToolParameter, ToolResult
from .errors import (
    ArgumentTypeError,
    ComparisonError,
    ComparisonErrorKind,
    FetchError,
    FetchErrorKind,
)
from .formatting import format_compare, format_single, title_case
from .pokeapi import CreatureRecord, PokeAPIClient, Stat, fetch_pokemon
from .pokemon import PokemonServer

__all__ = [
    # Base classes
    "MCPServer",
    "ToolDef",
    "ToolParameter",
    "ToolResult",
    # Errors
    "ArgumentTypeError",
    "ComparisonError",
    "ComparisonErrorKind",
    "FetchError",
    "FetchErrorKind",
    # PokeAPI
    "CreatureRecord",
    "PokeAPIClient",
    "Stat",
    "fetch_pokemon",
    # Formatting
    "format_compare",
    "format_single",
    "title_case",
    # Server implementations
    "PokemonServer",
]
