"""
package: mstair.envelope
"""

# <AUTOGEN_INIT>
from mstair.envelope import (
    address,
    config,
    errors,
    parser,
    xlogging,
)


__all__ = [
    "address",
    "config",
    "errors",
    "parser",
    "xlogging",
]
# </AUTOGEN_INIT>

from mstair.envelope.address import Address
from mstair.envelope.config import DomainCase, domain_case_context
from mstair.envelope.errors import AddrError, AddrErrorKind
from mstair.envelope.parser import is_envelope_address, parse_envelope, try_parse_envelope


__all__ += [
    "AddrError",
    "AddrErrorKind",
    "Address",
    "DomainCase",
    "domain_case_context",
    "is_envelope_address",
    "parse_envelope",
    "try_parse_envelope",
]

__version__ = "0.1.0"
