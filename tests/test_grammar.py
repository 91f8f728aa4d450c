"""Tests for basic_cookies.grammar — the fixed RFC 6265 character tables."""

import pytest

from basic_cookies.grammar import (
    COOKIE_OCTETS,
    NAME_SEPARATORS,
    QUOTED_OCTETS,
    TOKEN_CHARS,
    first_invalid,
    is_cookie_value,
    is_token,
    quote_if_needed,
    unquote,
)


class TestTables:
    def test_token_chars(self) -> None:
        expected = set("!#$%&'*+-.^_`|~0123456789")
        expected |= {chr(c) for c in range(ord("a"), ord("z") + 1)}
        expected |= {chr(c) for c in range(ord("A"), ord("Z") + 1)}
        assert TOKEN_CHARS == expected

    def test_separators_excluded_from_token(self) -> None:
        assert not TOKEN_CHARS & set(NAME_SEPARATORS)

    def test_cookie_octet_ranges(self) -> None:
        ranges = [(0x21, 0x21), (0x23, 0x2B), (0x2D, 0x3A), (0x3C, 0x5B), (0x5D, 0x7E)]
        expected = {chr(c) for lo, hi in ranges for c in range(lo, hi + 1)}
        assert COOKIE_OCTETS == expected

    @pytest.mark.parametrize("char", [" ", "\t", "\x7f", "\x00", '"', ",", ";", "\\"])
    def test_excluded_octets(self, char: str) -> None:
        assert char not in COOKIE_OCTETS

    def test_quoted_octets_add_only_space(self) -> None:
        assert QUOTED_OCTETS - COOKIE_OCTETS == {" "}


class TestHelpers:
    def test_first_invalid(self) -> None:
        assert first_invalid("abc", TOKEN_CHARS) is None
        assert first_invalid("ab c", TOKEN_CHARS) == 2
        assert first_invalid("", TOKEN_CHARS) is None

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ('"abc"', ("abc", 1)),
            ('""', ("", 1)),
            ('"', ('"', 0)),
            ('"abc', ('"abc', 0)),
            ("abc", ("abc", 0)),
        ],
    )
    def test_unquote(self, value: str, expected: tuple[str, int]) -> None:
        assert unquote(value) == expected

    def test_is_token(self) -> None:
        assert is_token("session_id")
        assert not is_token("")
        assert not is_token("a b")
        assert not is_token("a=b")

    def test_is_cookie_value(self) -> None:
        assert is_cookie_value("")
        assert is_cookie_value("abc=def")
        assert is_cookie_value('"a b"')
        assert not is_cookie_value("a b")
        assert not is_cookie_value('"')

    def test_quote_if_needed(self) -> None:
        assert quote_if_needed("abc") == "abc"
        assert quote_if_needed("a b") == '"a b"'
