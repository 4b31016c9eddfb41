# SPDX-License-Identifier: MIT
"""Loose semantic version parsing and formatting.

This package parses MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD] strings into
structured Version values and formats them back to canonical text. Parsing
is deliberately lenient: leading zeros, omitted minor/patch components and
a missing '-' before the pre-release are all accepted.

Example:
    >>> from loose_semver import Version, parse_version
    >>>
    >>> version = parse_version("1.2.3-beta.9+acd.v3.2")
    >>> version.major
    1
    >>> [str(part) for part in version.prerelease]
    ['beta', '9']
    >>>
    >>> parse_version("001.20.0301") == Version(1, 20, 301)
    True
    >>> str(parse_version("1.2.3foo"))
    '1.2.3-foo'
"""

__version__ = "0.1.0"

from .cursor import ByteCursor
from .errors import (
    DecodeError,
    InvalidInputError,
    InvalidNumericRangeError,
    ParseError,
    UnexpectedEofError,
)
from .parser import (
    is_valid_version,
    parse_identifier,
    parse_version,
)
from .version import (
    U64_MAX,
    Identifier,
    Version,
    format_version,
)

__all__ = [
    # Values
    "Identifier",
    "Version",
    "U64_MAX",
    # Parsing and formatting
    "parse_version",
    "parse_identifier",
    "is_valid_version",
    "format_version",
    # Scanning
    "ByteCursor",
    # Errors
    "ParseError",
    "InvalidInputError",
    "InvalidNumericRangeError",
    "UnexpectedEofError",
    "DecodeError",
]
