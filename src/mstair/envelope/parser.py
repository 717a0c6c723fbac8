# File: src/mstair/envelope/parser.py
"""
Minimal SMTP envelope address parsing.

This is deliberately not an RFC 5322 mailbox parser. Only the addr-spec forms used
in SMTP command arguments are accepted:

- ``local@domain``
- ``<local@domain>``
- ``<>`` (null reverse-path)

Display names, comments, quoted strings and header syntax are rejected. The local
part is kept exactly as given; the domain is case-folded (see mstair.envelope.config).

Example:
    >>> parse_envelope("  <Bounce+Tag@Sub.Example.com>  ")
    Address(local='Bounce+Tag', domain='sub.example.com')
    >>> str(parse_envelope("<>"))
    '<>'
    >>> try_parse_envelope("Alice Smith@example.com")
    AddrError(WHITESPACE)
"""

from __future__ import annotations

from typing import Final, NoReturn

from mstair.envelope.address import Address
from mstair.envelope.config import DomainCase, fold_domain
from mstair.envelope.errors import AddrError, AddrErrorKind
from mstair.envelope.xlogging.logger_factory import create_logger


__all__ = [
    "is_envelope_address",
    "parse_envelope",
    "try_parse_envelope",
]

NULL_REVERSE_PATH: Final[str] = "<>"

# Unicode White_Space property. str.isspace() also accepts U+001C..U+001F, which are not.
WHITESPACE: Final[frozenset[str]] = frozenset(
    "\t\n\x0b\x0c\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_WHITESPACE_CHARS: Final[str] = "".join(sorted(WHITESPACE))

_LOG = create_logger(__name__)


def parse_envelope(text: str, *, domain_case: DomainCase | None = None) -> Address:
    """
    Parse an SMTP envelope address token.

    Outer whitespace is trimmed; anything else that is not a plain or bracketed
    addr-spec is rejected.

    :param text: Raw token, e.g. the argument of MAIL FROM: or RCPT TO:.
    :param domain_case: Case-folding policy for the domain; default is the active policy.
    :return: The parsed Address (Address.null() for "<>").
    :raises AddrError: If the token is malformed.
    :raises TypeError: If text is not a str.
    """
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    token = text.strip(_WHITESPACE_CHARS)
    if token == NULL_REVERSE_PATH:
        return Address.null()

    # Whitespace and stray bracket checks run before the '@' split, so a display-name
    # form never yields the address embedded in it.
    is_bracketed = False
    if token.startswith("<"):
        is_bracketed = True
        token = token[1:]
    if token.endswith(">"):
        if not is_bracketed:
            _reject(text, AddrErrorKind.INVALID_BRACKETS)
        token = token[:-1]
    elif is_bracketed:
        _reject(text, AddrErrorKind.INVALID_BRACKETS)

    if not WHITESPACE.isdisjoint(token):
        _reject(text, AddrErrorKind.WHITESPACE)
    if "<" in token or ">" in token:
        _reject(text, AddrErrorKind.INVALID_BRACKETS)
    if not token:
        _reject(text, AddrErrorKind.EMPTY)

    local, sep, domain = token.partition("@")
    if not sep:
        _reject(text, AddrErrorKind.MISSING_AT)
    if not local or not domain:
        _reject(text, AddrErrorKind.EMPTY)
    if "@" in domain:
        _reject(text, AddrErrorKind.INVALID_CHARACTER)

    return Address(local=local, domain=fold_domain(domain, domain_case))


def try_parse_envelope(text: str, *, domain_case: DomainCase | None = None) -> Address | AddrError:
    """Like parse_envelope(), but return the AddrError instead of raising it."""
    try:
        return parse_envelope(text, domain_case=domain_case)
    except AddrError as exc:
        return exc


def is_envelope_address(text: str) -> bool:
    """Return True if `text` parses as an envelope address (including "<>")."""
    return not isinstance(try_parse_envelope(text), AddrError)


def _reject(text: str, kind: AddrErrorKind) -> NoReturn:
    _LOG.trace("Rejected %r: %s", text, kind.message, stacklevel=3)
    raise AddrError(kind)


# End of file: src/mstair/envelope/parser.py
