"""Errors raised while serving Pokemon tool calls.

All of these are caught by the dispatcher and reported back to the host
as failed tool results; none of them reach the transport.
"""

from enum import Enum


class ArgumentTypeError(ValueError):
    """A required tool argument was missing or not a string."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"{argument} must be a string")


class FetchErrorKind(str, Enum):
    NETWORK = "network"
    HTTP_STATUS = "http_status"
    DECODE = "decode"


class FetchError(Exception):
    """Looking up a Pokemon upstream failed."""

    def __init__(self, kind: FetchErrorKind, message: str, status: int | None = None):
        self.kind = kind
        self.message = message
        self.status = status
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class ComparisonErrorKind(str, Enum):
    STAT_COUNT_MISMATCH = "stat_count_mismatch"


class ComparisonError(Exception):
    """Two records could not be compared stat by stat."""

    def __init__(self, kind: ComparisonErrorKind, message: str):
        self.kind = kind
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message
