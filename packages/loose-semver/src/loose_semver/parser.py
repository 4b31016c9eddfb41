# SPDX-License-Identifier: MIT
"""Recursive-descent parser for loose version strings.

Grammar::

    version     := numeric-run ( '.' numeric-run ( '.' numeric-run qualifier? )? )?
    qualifier   := ( ( '-' | '+' | <other> ) parts )? ( '+' parts )?
    parts       := part ( '.' part )*
    part        := [0-9A-Za-z]+
    numeric-run := [0-9]+

Loose extensions over strict semantic versioning:
- Leading zeros are accepted everywhere ("001.20.0301" is 1.20.301)
- Missing minor and patch default to 0 ("5" is 5.0.0)
- The '-' before a pre-release may be omitted ("1.2.3foo" is 1.2.3-foo)

Every qualifier part must be non-empty, so "1.2.3-", "1.2.3+" and
"1.2.3-a..b" are rejected.
"""

from __future__ import annotations

import logging
import string

from .cursor import ByteCursor
from .errors import (
    InvalidInputError,
    InvalidNumericRangeError,
    ParseError,
    UnexpectedEofError,
)
from .version import U64_MAX, Identifier, Version

logger = logging.getLogger(__name__)

DIGITS = frozenset(string.digits.encode("ascii"))
ALPHANUMERICS = frozenset((string.ascii_letters + string.digits).encode("ascii"))

_DOT = ord(".")
_HYPHEN = ord("-")
_PLUS = ord("+")

_U64_DIGITS = len(str(U64_MAX))


def _invalid(cursor: ByteCursor) -> ParseError:
    """Build the error for an unexpected byte, or end of input, at the cursor."""
    if cursor.at_end():
        return UnexpectedEofError(position=cursor.position)
    return InvalidInputError(cursor.peek_char(), position=cursor.position)


def _to_u64(raw: str, position: int) -> int:
    if not raw:
        raise InvalidNumericRangeError(position=position)
    # Leading zeros are loose input; anything past 20 digits cannot fit in u64
    digits = raw.lstrip("0") or "0"
    if len(digits) > _U64_DIGITS:
        raise InvalidNumericRangeError(raw, position=position)
    value = int(digits)
    if value > U64_MAX:
        raise InvalidNumericRangeError(raw, position=position)
    return value


def _parse_numeric_run(cursor: ByteCursor) -> int:
    """Parse a run of digits; leading zeros are allowed."""
    start = cursor.position
    return _to_u64(cursor.take_while(DIGITS.__contains__), start)


def _expect_dot(cursor: ByteCursor) -> None:
    if cursor.peek_one() != _DOT:
        raise _invalid(cursor)
    cursor.take_one()


def _parse_part(cursor: ByteCursor) -> Identifier:
    start = cursor.position
    part = cursor.take_while(ALPHANUMERICS.__contains__)
    if not part:
        raise _invalid(cursor)
    if part.isdigit():
        return Identifier(_to_u64(part, start))
    return Identifier(part)


def _parse_parts(cursor: ByteCursor) -> tuple[Identifier, ...]:
    parts = [_parse_part(cursor)]
    while cursor.peek_one() == _DOT:
        cursor.take_one()
        parts.append(_parse_part(cursor))
    return tuple(parts)


def _parse_version(cursor: ByteCursor) -> Version:
    if cursor.at_end():
        raise UnexpectedEofError(position=cursor.position)

    major = _parse_numeric_run(cursor)
    if cursor.at_end():
        return Version(major)

    _expect_dot(cursor)
    minor = _parse_numeric_run(cursor)
    if cursor.at_end():
        return Version(major, minor)

    _expect_dot(cursor)
    patch = _parse_numeric_run(cursor)
    if cursor.at_end():
        return Version(major, minor, patch)

    # "1.2.3foo" is read as "1.2.3-foo", so only '-' and '+' are consumed here
    separator = cursor.peek_one()
    if separator in (_HYPHEN, _PLUS):
        cursor.take_one()

    prerelease: tuple[Identifier, ...] = ()
    if separator != _PLUS:
        prerelease = _parse_parts(cursor)
        if cursor.at_end():
            return Version(major, minor, patch, prerelease=prerelease)
        if cursor.peek_one() != _PLUS:
            raise _invalid(cursor)
        cursor.take_one()

    build = _parse_parts(cursor)
    if not cursor.at_end():
        raise _invalid(cursor)
    return Version(major, minor, patch, prerelease=prerelease, build=build)


def parse_version(version_string: str) -> Version:
    """Parse a version string into a Version object.

    Args:
        version_string: Text of the form MAJOR[.MINOR[.PATCH[qualifier]]]

    Returns:
        A Version object with parsed components

    Raises:
        TypeError: If version_string is not a str
        UnexpectedEofError: If the input is empty or ends mid-token
        InvalidNumericRangeError: If a numeric run is empty or too large
        InvalidInputError: If an unexpected character is found

    Examples:
        >>> parse_version("1.2.3-beta.9+acd.v3.2")
        Version(major=1, minor=2, patch=3, prerelease=(Identifier(value='beta'), Identifier(value=9)), build=(Identifier(value='acd'), Identifier(value='v3'), Identifier(value=2)))

        >>> parse_version("5") == parse_version("5.0.0")
        True
    """
    if not isinstance(version_string, str):
        raise TypeError(f"Version must be a string, got {type(version_string).__name__}")

    try:
        return _parse_version(ByteCursor.from_text(version_string))
    except ParseError as exc:
        logger.debug("Rejected version %r: %s", version_string, exc)
        raise


def parse_identifier(text: str) -> Identifier:
    """Parse a single pre-release or build identifier.

    Only the leading run of ASCII letters and digits is read; anything after
    it is ignored. All digits give a numeric identifier, anything else gives
    a text identifier.

    Raises:
        TypeError: If text is not a str
        UnexpectedEofError: If text is empty
        InvalidInputError: If text does not start with a letter or digit
        InvalidNumericRangeError: If an all-digit identifier is too large

    Examples:
        >>> parse_identifier("beta")
        Identifier(value='beta')
        >>> parse_identifier("007")
        Identifier(value=7)
        >>> parse_identifier("beta-1")
        Identifier(value='beta')
    """
    if not isinstance(text, str):
        raise TypeError(f"Identifier must be a string, got {type(text).__name__}")

    return _parse_part(ByteCursor.from_text(text))


def is_valid_version(version_string: str) -> bool:
    """Check if a string parses as a version.

    Examples:
        >>> is_valid_version("1.2.3foo")
        True
        >>> is_valid_version("1.2.")
        False
    """
    if not isinstance(version_string, str):
        return False
    try:
        parse_version(version_string)
    except ParseError:
        return False
    return True
