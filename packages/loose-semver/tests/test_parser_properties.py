# SPDX-License-Identifier: MIT
"""Property-based tests for version parsing and formatting.

These tests verify that:
- A bare MAJOR.MINOR.PATCH version formats as the three decimal numbers
- Canonical versions survive a format/parse round trip
- Leading zeros and a missing '-' before the pre-release do not change the result
- All-digit identifiers are always numeric
- Formatting is a pure function of the value
- Digit runs of any length parse or raise InvalidNumericRangeError
- Arbitrary text either parses or raises a ParseError, never anything else
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings, strategies as st

from loose_semver import (
    U64_MAX,
    Identifier,
    InvalidNumericRangeError,
    ParseError,
    Version,
    format_version,
    parse_identifier,
    parse_version,
)


# =============================================================================
# Strategies for generating test data
# =============================================================================

u64 = st.integers(min_value=0, max_value=U64_MAX)

# Text identifiers: ASCII alphanumeric with at least one letter
text_identifiers = st.from_regex(r"[0-9]*[A-Za-z][0-9A-Za-z]*", fullmatch=True)

identifiers = st.one_of(
    u64.map(Identifier),
    text_identifiers.map(Identifier),
)

qualifiers = st.lists(identifiers, max_size=5)


@st.composite
def versions(draw):
    """Generate an arbitrary Version."""
    return Version(
        draw(u64),
        draw(u64),
        draw(u64),
        prerelease=draw(qualifiers),
        build=draw(qualifiers),
    )


# =============================================================================
# Properties
# =============================================================================


@given(u64, u64, u64)
@settings(max_examples=200)
def test_bare_version_formats_as_triple(major, minor, patch):
    assert format_version(Version(major, minor, patch)) == f"{major}.{minor}.{patch}"


@given(versions())
@settings(max_examples=200)
def test_round_trip(version):
    assert parse_version(format_version(version)) == version


@given(versions())
def test_formatting_is_idempotent(version):
    assert str(version) == str(version)
    assert format_version(version) == str(version)


@given(u64, u64, u64, st.integers(min_value=0, max_value=6000))
@settings(max_examples=50)
def test_leading_zeros_ignored(major, minor, patch, zeros):
    pad = "0" * zeros
    text = f"{pad}{major}.{pad}{minor}.{pad}{patch}"
    assert parse_version(text) == Version(major, minor, patch)


@given(u64, u64, u64, st.from_regex(r"[A-Za-z][0-9A-Za-z]*", fullmatch=True), qualifiers)
def test_implicit_prerelease_matches_explicit(major, minor, patch, head, rest):
    tail = "".join(f".{ident}" for ident in rest)
    implicit = parse_version(f"{major}.{minor}.{patch}{head}{tail}")
    explicit = parse_version(f"{major}.{minor}.{patch}-{head}{tail}")
    assert implicit == explicit
    assert implicit.prerelease[0] == Identifier(head)


@given(u64)
def test_missing_components_default_to_zero(major):
    assert parse_version(str(major)) == parse_version(f"{major}.0") == Version(major, 0, 0)


@given(st.from_regex(r"[0-9]{1,19}", fullmatch=True))
def test_all_digit_identifier_is_numeric(digits):
    ident = parse_identifier(digits)
    assert ident.is_numeric
    assert ident.value == int(digits)


@given(text_identifiers)
def test_text_identifier_is_alphanumeric(text):
    ident = parse_identifier(text)
    assert ident == Identifier(text)
    assert str(ident) == text


@given(st.text(max_size=30))
@settings(max_examples=300)
def test_arbitrary_text_parses_or_raises_parse_error(text):
    try:
        version = parse_version(text)
    except ParseError:
        return
    assert isinstance(version, Version)


@given(st.integers(min_value=0, max_value=6000), st.from_regex(r"[0-9]{1,19}", fullmatch=True))
@settings(max_examples=50)
def test_zero_padded_identifier_is_numeric(zeros, digits):
    ident = parse_identifier("0" * zeros + digits)
    assert ident == Identifier(int(digits))


@given(
    st.integers(min_value=0, max_value=6000),
    st.from_regex(r"[1-9][0-9]{0,24}", fullmatch=True),
)
@settings(max_examples=100)
def test_digit_runs_of_any_length(zeros, significant):
    digits = "0" * zeros + significant
    if int(significant) <= U64_MAX:
        assert parse_version(digits) == Version(int(significant))
    else:
        with pytest.raises(InvalidNumericRangeError):
            parse_version(digits)


@given(st.integers(min_value=4301, max_value=6000))
@settings(max_examples=20)
def test_overlong_digit_run_is_out_of_range(length):
    with pytest.raises(InvalidNumericRangeError):
        parse_version("9" * length)
    with pytest.raises(InvalidNumericRangeError):
        parse_identifier("1" * length)
