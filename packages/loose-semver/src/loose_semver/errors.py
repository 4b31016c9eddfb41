# SPDX-License-Identifier: MIT
"""Exceptions raised while parsing version strings.

Every failed parse raises exactly one of the ParseError subclasses below.
Misuse of the value types themselves (wrong argument types, numbers out of
range) raises the builtin TypeError/ValueError instead.
"""

from __future__ import annotations

from typing import Optional


class ParseError(ValueError):
    """Base class for all version and identifier parse failures.

    Attributes:
        message: Human readable description of the failure
        position: Byte offset into the UTF-8 encoded input, if known
    """

    def __init__(self, message: str, *, position: Optional[int] = None):
        self.message = message
        self.position = position
        prefix = f"at byte {position}: " if position is not None else ""
        super().__init__(prefix + message)


class InvalidInputError(ParseError):
    """Raised when the grammar expected a delimiter and found another character."""

    def __init__(self, found: Optional[str], *, position: Optional[int] = None):
        self.found = found
        super().__init__(f"Invalid input: {found!r}", position=position)


class InvalidNumericRangeError(ParseError):
    """Raised when a numeric run is empty or does not fit in 64 unsigned bits."""

    def __init__(self, raw: str = "", *, position: Optional[int] = None):
        self.raw = raw
        message = "Invalid numeric range"
        if raw:
            message += f": {raw}"
        super().__init__(message, position=position)


class UnexpectedEofError(ParseError):
    """Raised when input ends where another token was required."""

    def __init__(self, *, position: Optional[int] = None):
        super().__init__("Unexpected end of input", position=position)


class DecodeError(ParseError):
    """Raised when consumed bytes are not valid UTF-8 text."""

    pass
