# File: src/mstair/envelope/address.py
"""
mstair.envelope.address - Parsed SMTP envelope address value
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from mstair.envelope.config import DomainCase


__all__ = [
    "Address",
]


@dataclass(frozen=True, slots=True)
class Address:
    """
    An SMTP envelope address: `local@domain`, or the null reverse-path `<>`.

    Instances normally come from parse_envelope(). The local part keeps its case
    exactly; the domain has already been case-folded. Either both parts are
    non-empty or both are empty (the null address).
    """

    local: str
    """The "john" in "john@doe.com" or "<john@doe.com>"."""

    domain: str
    """The domain following the '@'."""

    def __post_init__(self) -> None:
        if not isinstance(self.local, str) or not isinstance(self.domain, str):
            raise TypeError(
                f"Address parts must be str, got {type(self.local).__name__}"
                f" and {type(self.domain).__name__}"
            )
        if bool(self.local) != bool(self.domain):
            raise ValueError(
                f"Address parts must both be empty or both be non-empty: {self.local!r}, {self.domain!r}"
            )

    def __str__(self) -> str:
        """Display form: "<>" for the null address, else "local@domain"."""
        return "<>" if self.is_null() else self.to_addr_spec()

    @classmethod
    def null(cls) -> Address:
        """Return the null reverse-path address."""
        return cls(local="", domain="")

    @classmethod
    def parse(cls, text: str, *, domain_case: DomainCase | None = None) -> Address:
        """Same as parse_envelope(text, domain_case=domain_case)."""
        from mstair.envelope.parser import parse_envelope

        return parse_envelope(text, domain_case=domain_case)

    def to_addr_spec(self) -> str:
        """Render as "local@domain" (the null address renders as "@")."""
        return f"{self.local}@{self.domain}"

    def to_bracketed(self) -> str:
        """Render as "<local@domain>" for use in MAIL FROM / RCPT TO arguments."""
        return f"<{self.to_addr_spec()}>"

    def is_null(self) -> bool:
        return not self.local and not self.domain

    def with_domain(self, domain: str) -> Address:
        """
        Return a copy with the same local part and `domain` used verbatim.

        The replacement is neither syntax-checked nor case-folded.

        :raises ValueError: If the result would have exactly one empty part.
        """
        return Address(local=self.local, domain=domain)


# End of file: src/mstair/envelope/address.py
