"""Configuration settings for the Pokemon MCP server."""

import os

from dotenv import load_dotenv

load_dotenv()

# Upstream API
POKEAPI_BASE_URL = os.getenv("POKEAPI_BASE_URL", "https://pokeapi.co/api/v2").rstrip("/")

# Request timeout in seconds. Unset means the transport default (wait forever).
_timeout = os.getenv("POKEAPI_TIMEOUT", "")
POKEAPI_TIMEOUT = float(_timeout) if _timeout else None

# Server identity advertised during the protocol handshake
SERVER_NAME = "Pokemon Server 🎮"
SERVER_VERSION = "1.0.0"

# Logs go to stderr; stdout is reserved for the protocol channel
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
