# File: src/mstair/envelope/config.py
"""
Domain case-folding policy.

SMTP domains are case-insensitive, so parsed domains are folded to lowercase.
Two policies exist:

- DomainCase.ASCII: lower ASCII letters only, leave every other character as-is.
  This is the default and matches established behaviour, e.g. "MÜNICH" -> "mÜnich".
- DomainCase.CASEFOLD: full Unicode str.casefold(), e.g. "MÜNICH" -> "münich".

The default comes from the ENVELOPE_DOMAIN_CASE environment variable (a .env file
is honoured). It can be overridden per thread, so concurrent callers with
different needs do not interfere.

Exports:
- DomainCase: the policy enum.
- domain_case(): check or override the policy for this thread.
- domain_case_context(): context manager for a temporary override.
- fold_domain(): apply a policy to a domain string.
"""

from __future__ import annotations

import os
import string
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from typing import Final

from mstair.envelope.xlogging.logger_factory import create_logger
from mstair.envelope.xlogging.logger_util import load_dotenv


__all__ = [
    "DOMAIN_CASE_ENV_VAR",
    "DomainCase",
    "domain_case",
    "domain_case_context",
    "domain_case_from_environment",
    "fold_domain",
]

DOMAIN_CASE_ENV_VAR: Final[str] = "ENVELOPE_DOMAIN_CASE"

_ASCII_LOWER: Final[dict[int, int]] = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

_LOG = create_logger(__name__)

_tls = threading.local()


class DomainCase(Enum):
    ASCII = "ascii"
    CASEFOLD = "casefold"


@dataclass
class TLSAttrs:
    """Thread-local policy override."""

    domain_case_override: DomainCase | None = None


def _get_tls() -> TLSAttrs:
    """Return the current thread's TLSAttrs instance, initializing if needed."""
    try:
        return _tls.state
    except AttributeError:
        _tls.state = TLSAttrs()
        return _tls.state


def domain_case_from_environment() -> DomainCase:
    """
    Read the policy from ENVELOPE_DOMAIN_CASE.

    Unset or blank means ASCII. Unknown values are logged and treated as ASCII.
    """
    load_dotenv()
    raw = os.environ.get(DOMAIN_CASE_ENV_VAR, "").strip().strip("'\"").lower()
    if not raw:
        return DomainCase.ASCII
    try:
        return DomainCase(raw)
    except ValueError:
        _LOG.warning(
            "Ignoring %s=%r; expected one of %s",
            DOMAIN_CASE_ENV_VAR,
            raw,
            ", ".join(m.value for m in DomainCase),
        )
        return DomainCase.ASCII


def domain_case(
    *,
    unset_override: bool = False,
    override: DomainCase | None = None,
) -> DomainCase:
    """
    Return the domain case policy for this thread, with optional override.

    :param unset_override: If True, clears any prior override for this thread.
    :param override: If given, sets the override for this thread.
    :return: The active DomainCase.
    """
    tls = _get_tls()
    if unset_override:
        tls.domain_case_override = None
    if override is not None:
        tls.domain_case_override = DomainCase(override)
        return tls.domain_case_override
    if tls.domain_case_override is not None:
        return tls.domain_case_override
    return domain_case_from_environment()


@contextmanager
def domain_case_context(mode: DomainCase) -> Iterator[DomainCase]:
    """
    Temporarily set the domain case policy for this thread.

    Restores the previous override on exit. Nested contexts are supported.
    """
    tls = _get_tls()
    previous = tls.domain_case_override
    tls.domain_case_override = DomainCase(mode)
    try:
        yield tls.domain_case_override
    finally:
        tls.domain_case_override = previous


def fold_domain(domain: str, mode: DomainCase | None = None) -> str:
    """
    Fold the case of `domain` according to `mode` (default: the active policy).

    Both policies are idempotent, so folding an already folded domain is a no-op.
    """
    mode = domain_case() if mode is None else DomainCase(mode)
    if mode is DomainCase.CASEFOLD:
        return domain.casefold()
    return domain.translate(_ASCII_LOWER)


# End of file: src/mstair/envelope/config.py
