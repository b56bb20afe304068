"""PokeAPI client.

Fetches a single Pokemon by name and decodes the parts of the payload
the tools need into an immutable CreatureRecord.
"""

import logging

import requests
from pydantic import BaseModel, ConfigDict, ValidationError

from ..config import POKEAPI_BASE_URL, POKEAPI_TIMEOUT
from .errors import FetchError, FetchErrorKind
from .formatting import title_case

logger = logging.getLogger(__name__)


# Upstream payload shape. Strict so that e.g. "7" is not accepted as an int;
# fields not listed here are ignored.


class NamedResource(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str


class TypeSlot(BaseModel):
    model_config = ConfigDict(strict=True)

    type: NamedResource


class StatSlot(BaseModel):
    model_config = ConfigDict(strict=True)

    base_stat: int
    stat: NamedResource


class PokemonPayload(BaseModel):
    model_config = ConfigDict(strict=True)

    name: str
    height: int
    weight: int
    types: list[TypeSlot]
    stats: list[StatSlot]


class Stat(BaseModel):
    """A named base stat and its value."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: int


class CreatureRecord(BaseModel):
    """The attributes of one Pokemon, as returned by PokeAPI."""

    model_config = ConfigDict(frozen=True)

    name: str
    height: int  # decimeters
    weight: int  # hectograms
    types: tuple[str, ...]
    stats: tuple[Stat, ...]

    @property
    def display_name(self) -> str:
        return title_case(self.name)

    @classmethod
    def from_payload(cls, payload: PokemonPayload) -> "CreatureRecord":
        return cls(
            name=payload.name,
            height=payload.height,
            weight=payload.weight,
            types=tuple(slot.type.name for slot in payload.types),
            stats=tuple(Stat(name=slot.stat.name, value=slot.base_stat) for slot in payload.stats),
        )


def decode_pokemon(body: bytes | str) -> CreatureRecord:
    """Decode a PokeAPI `/pokemon/{name}` response body.

    Raises:
        FetchError: with kind DECODE if the body is not JSON or lacks a
            required field.
    """
    try:
        payload = PokemonPayload.model_validate_json(body)
    except ValidationError as e:
        raise FetchError(FetchErrorKind.DECODE, f"invalid Pokemon payload: {e}") from e
    return CreatureRecord.from_payload(payload)


class PokeAPIClient:
    """Minimal PokeAPI client: one GET per lookup, no caching, no retry."""

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ):
        """Initialize the client.

        Args:
            base_url: API root. Defaults to POKEAPI_BASE_URL config.
            timeout: Request timeout in seconds. Defaults to POKEAPI_TIMEOUT
                config, where None means the transport default.
            session: Optional requests session to issue requests with.
        """
        self.base_url = (base_url or POKEAPI_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else POKEAPI_TIMEOUT
        self._session = session or requests.Session()

    def pokemon_url(self, name: str) -> str:
        # Case-folding is the only normalization applied to the name
        return f"{self.base_url}/pokemon/{name.lower()}"

    def fetch(self, name: str) -> CreatureRecord:
        """Fetch a Pokemon by name.

        Args:
            name: Pokemon name, any case

        Returns:
            The decoded CreatureRecord

        Raises:
            FetchError: on transport failure, a non-200 status, or an
                undecodable body.
        """
        url = self.pokemon_url(name)
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            logger.warning(f"Request for {name!r} failed: {e}")
            raise FetchError(FetchErrorKind.NETWORK, str(e)) from e

        if response.status_code != 200:
            logger.warning(f"PokeAPI returned {response.status_code} for {name!r}")
            raise FetchError(
                FetchErrorKind.HTTP_STATUS,
                f"API returned status code {response.status_code}",
                status=response.status_code,
            )

        return decode_pokemon(response.content)

    def close(self) -> None:
        self._session.close()


def fetch_pokemon(name: str, session: requests.Session | None = None) -> CreatureRecord:
    """Fetch a Pokemon with a throwaway client."""
    client = PokeAPIClient(session=session)
    try:
        return client.fetch(name)
    finally:
        if session is None:
            client.close()
