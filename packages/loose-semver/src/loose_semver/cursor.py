# SPDX-License-Identifier: MIT
"""Byte cursor used by the version grammar.

The cursor is a positioned, forward-only view over an in-memory buffer. It
offers one byte of lookahead and no rewinding, so any backtracking in the
grammar has to be written as peek-before-take.
"""

from __future__ import annotations

from typing import Callable, Optional, Union

from .errors import DecodeError

BytesLike = Union[bytes, bytearray, memoryview]


class ByteCursor:
    """Forward-only cursor over a bytes-like buffer.

    The buffer is wrapped in a memoryview and never copied.

    Examples:
        >>> cursor = ByteCursor.from_text("12a")
        >>> cursor.take_while(lambda b: 0x30 <= b <= 0x39)
        '12'
        >>> cursor.peek_one()
        97
        >>> cursor.take_one()
        97
        >>> cursor.at_end()
        True
    """

    __slots__ = ("_buffer", "_position")

    def __init__(self, data: BytesLike):
        self._buffer = memoryview(data).cast("B")
        self._position = 0

    @classmethod
    def from_text(cls, text: str) -> ByteCursor:
        """Create a cursor over the UTF-8 encoding of ``text``."""
        return cls(text.encode("utf-8"))

    @property
    def position(self) -> int:
        """Number of bytes consumed so far."""
        return self._position

    def __len__(self) -> int:
        return len(self._buffer) - self._position

    def at_end(self) -> bool:
        return self._position >= len(self._buffer)

    def take_one(self) -> Optional[int]:
        if self.at_end():
            return None
        byte = self._buffer[self._position]
        self._position += 1
        return byte

    def peek_one(self) -> Optional[int]:
        if self.at_end():
            return None
        return self._buffer[self._position]

    def peek_char(self) -> Optional[str]:
        """Return the character starting at the cursor without consuming it.

        Multi-byte UTF-8 sequences are decoded as a whole. A byte that does
        not start a valid sequence is returned as the code point of its value.
        """
        byte = self.peek_one()
        if byte is None:
            return None
        for width in range(1, 5):
            chunk = self._buffer[self._position : self._position + width]
            try:
                return bytes(chunk).decode("utf-8")
            except UnicodeDecodeError:
                continue
        return chr(byte)

    def take_while(self, predicate: Callable[[int], bool]) -> str:
        """Consume the longest run of bytes accepted by ``predicate``.

        The first rejected byte is left in place. The run may be empty.

        Args:
            predicate: Called with each byte value in turn

        Returns:
            The consumed bytes decoded as UTF-8

        Raises:
            DecodeError: If the consumed bytes are not valid UTF-8
        """
        start = self._position
        end = start
        size = len(self._buffer)
        while end < size and predicate(self._buffer[end]):
            end += 1
        try:
            text = bytes(self._buffer[start:end]).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DecodeError(f"Invalid UTF-8 in input: {exc.reason}", position=start) from exc
        self._position = end
        return text
