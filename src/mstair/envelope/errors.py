# File: src/mstair/envelope/errors.py
"""
Reasons an envelope address token can be rejected.

Every rejection is a final classification of malformed input; nothing here is
retryable. AddrError subclasses ValueError so callers that only care about
"bad value" can catch it generically.
"""

from __future__ import annotations

from enum import Enum


__all__ = [
    "AddrError",
    "AddrErrorKind",
]


class AddrErrorKind(Enum):
    """Tag describing why parsing failed; the value is the stable diagnostic message."""

    EMPTY = "address was empty"
    MISSING_AT = "address did not contain '@'"
    INVALID_BRACKETS = "address contained malformed brackets"
    INVALID_CHARACTER = "address contained invalid character(s)"
    WHITESPACE = "address contained whitespace or a display name"

    @property
    def message(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class AddrError(ValueError):
    """
    Raised (or returned by try_parse_envelope) when an address token is malformed.

    Carries no payload beyond `kind`; two errors are equal when their kinds are.
    """

    kind: AddrErrorKind

    def __init__(self, kind: AddrErrorKind) -> None:
        if not isinstance(kind, AddrErrorKind):
            raise TypeError(f"kind must be AddrErrorKind, got {type(kind).__name__}")
        super().__init__(kind.message)
        self.kind = kind

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.kind.name})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, AddrError):
            return self.kind is other.kind
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.kind)

    def __reduce__(self) -> tuple[type[AddrError], tuple[AddrErrorKind]]:
        return (self.__class__, (self.kind,))


# End of file: src/mstair/envelope/errors.py
