# SPDX-License-Identifier: MIT
"""Version and identifier value types.

A version is MAJOR.MINOR.PATCH with optional pre-release and build
qualifiers, each an ordered sequence of dot-separated identifiers:
- 1.2.3
- 1.2.3-beta.9
- 1.2.3-beta.9+acd.v3.2
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Iterable, Union

# Numeric fields and numeric identifiers are unsigned 64-bit integers
U64_MAX = 2**64 - 1
_I64_MIN = -(2**63)


def _check_u64(name: str, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"{name} out of range for an unsigned 64-bit integer: {value}")


@dataclass(frozen=True, slots=True)
class Identifier:
    """One dot-separated segment of a pre-release or build qualifier.

    The value is either an ``int`` (numeric identifier) or a ``str`` made of
    ASCII letters and digits with at least one letter. A segment that is all
    digits is always numeric, so ``Identifier("42")`` is rejected in favour of
    ``Identifier(42)``.

    Attributes:
        value: The numeric value or the literal text of the segment
    """

    value: Union[int, str]

    def __post_init__(self) -> None:
        value = self.value
        if isinstance(value, str):
            if not value:
                raise ValueError("Identifier text cannot be empty")
            if not (value.isascii() and value.isalnum()):
                raise ValueError(f"Identifier must be ASCII alphanumeric: {value!r}")
            if value.isdigit():
                raise ValueError(f"All-digit identifier must be numeric: {value!r}")
        else:
            _check_u64("Identifier value", value)

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_numeric(self) -> bool:
        return isinstance(self.value, int)

    @property
    def is_alphanumeric(self) -> bool:
        return isinstance(self.value, str)

    @classmethod
    def from_int(cls, number: Any) -> Identifier:
        """Create a numeric identifier from any integer type.

        Accepts anything implementing ``__index__`` whose value fits a signed
        or unsigned 64-bit integer. Negative values wrap to their two's
        complement unsigned value, the same as widening a signed integer
        into an unsigned 64-bit one.

        Raises:
            TypeError: If ``number`` is a bool or not an integer
            OverflowError: If ``number`` does not fit in 64 bits

        Examples:
            >>> Identifier.from_int(7)
            Identifier(value=7)
            >>> Identifier.from_int(-1).value == U64_MAX
            True
        """
        if isinstance(number, bool):
            raise TypeError("Identifier.from_int() does not accept bool")
        value = operator.index(number)
        if not _I64_MIN <= value <= U64_MAX:
            raise OverflowError(f"Integer does not fit in 64 bits: {value}")
        return cls(value & U64_MAX)

    @classmethod
    def coerce(cls, obj: Union[Identifier, int, str]) -> Identifier:
        """Convert an Identifier, int or identifier text into an Identifier.

        All-digit text becomes a numeric identifier, so ``coerce("7")`` and
        ``coerce(7)`` are equal.

        Raises:
            ValueError: If text is not a valid identifier or is out of range
        """
        if isinstance(obj, Identifier):
            return obj
        if isinstance(obj, str):
            if obj.isascii() and obj.isdigit():
                digits = obj.lstrip("0") or "0"
                if len(digits) > len(str(U64_MAX)):
                    raise ValueError(f"Identifier out of range for an unsigned 64-bit integer: {obj}")
                return cls(int(digits))
            return cls(obj)
        return cls.from_int(obj)


IdentifierLike = Union[Identifier, int, str]


@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed version.

    Equality is structural over all five fields. Versions are not ordered.

    Attributes:
        major: Major version number
        minor: Minor version number
        patch: Patch version number
        prerelease: Pre-release identifiers in source order, empty if none
        build: Build identifiers in source order, empty if none
    """

    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: tuple[Identifier, ...] = ()
    build: tuple[Identifier, ...] = ()

    def __post_init__(self) -> None:
        for name in ("major", "minor", "patch"):
            _check_u64(name, getattr(self, name))
        object.__setattr__(self, "prerelease", _identifiers("prerelease", self.prerelease))
        object.__setattr__(self, "build", _identifiers("build", self.build))

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += "-" + ".".join(map(str, self.prerelease))
        if self.build:
            version += "+" + ".".join(map(str, self.build))
        return version

    @property
    def is_prerelease(self) -> bool:
        """Return True if the version carries a pre-release qualifier."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return MAJOR.MINOR.PATCH without qualifiers."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @classmethod
    def with_prerelease(
        cls, major: int, minor: int, patch: int, prerelease: Iterable[IdentifierLike]
    ) -> Version:
        """Create a version with a pre-release qualifier and no build.

        Examples:
            >>> str(Version.with_prerelease(2, 3, 0, ["alpha"]))
            '2.3.0-alpha'
        """
        return cls(major, minor, patch, prerelease=tuple(prerelease))

    @classmethod
    def with_build(
        cls, major: int, minor: int, patch: int, build: Iterable[IdentifierLike]
    ) -> Version:
        """Create a version with build metadata and no pre-release.

        Examples:
            >>> str(Version.with_build(2, 3, 0, ["githash"]))
            '2.3.0+githash'
        """
        return cls(major, minor, patch, build=tuple(build))


def _identifiers(name: str, items: Any) -> tuple[Identifier, ...]:
    if isinstance(items, (str, bytes)):
        raise TypeError(f"{name} must be a sequence of identifiers, not a string")
    return tuple(Identifier.coerce(item) for item in items)


def format_version(version: Version) -> str:
    """Render a version as MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD].

    Examples:
        >>> format_version(Version(1, 2, 3))
        '1.2.3'
    """
    return str(version)
