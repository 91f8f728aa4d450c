"""RFC 6265 character tables for ``Cookie`` header parsing.

Fixed tables rather than derived regexes, so every caller accepts and
rejects exactly the same characters.

cookie-name is an RFC 2616 token::

    token      = 1*<any CHAR except CTLs or separators>
    separators = "(" | ")" | "<" | ">" | "@" | "," | ";" | ":" | "\\" | <">
               | "/" | "[" | "]" | "?" | "=" | "{" | "}" | SP | HT

cookie-value is a run of cookie-octets, optionally wrapped in DQUOTEs::

    cookie-octet = %x21 / %x23-2B / %x2D-3A / %x3C-5B / %x5D-7E

Inside the quoted form SP (%x20) is accepted as well.
"""

from collections.abc import Set

PAIR_SEPARATOR = "; "
NAME_VALUE_SEPARATOR = "="
DQUOTE = '"'

# SP and HT fall outside the visible range below, so they need no entry here.
NAME_SEPARATORS = '()<>@,;:\\"/[]?={}'

_VISIBLE_ASCII = frozenset(chr(c) for c in range(0x21, 0x7F))

TOKEN_CHARS: frozenset[str] = _VISIBLE_ASCII - frozenset(NAME_SEPARATORS)
COOKIE_OCTETS: frozenset[str] = _VISIBLE_ASCII - frozenset('",;\\')

# Body of a quoted value: cookie-octets plus SP
QUOTED_OCTETS: frozenset[str] = COOKIE_OCTETS | {" "}


def first_invalid(text: str, allowed: Set[str]) -> int | None:
    """Return the index of the first character of *text* not in *allowed*."""
    for index, char in enumerate(text):
        if char not in allowed:
            return index
    return None


def unquote(value: str) -> tuple[str, int]:
    """Strip one pair of surrounding DQUOTEs from *value*.

    Returns the inner text and how many leading characters were removed
    (0 or 1), so callers can map positions back onto the original value.
    A lone ``"`` is left alone; it is rejected later as an illegal octet.
    """
    if len(value) >= 2 and value.startswith(DQUOTE) and value.endswith(DQUOTE):
        return value[1:-1], 1
    return value, 0


def value_chars(quoted: bool) -> frozenset[str]:
    """Characters allowed in a cookie-value body, quoted or bare."""
    return QUOTED_OCTETS if quoted else COOKIE_OCTETS


def quote_if_needed(value: str) -> str:
    """Wrap *value* in DQUOTEs when it holds a space, the only quoted-only character."""
    if " " in value:
        return f"{DQUOTE}{value}{DQUOTE}"
    return value


def is_token(text: str) -> bool:
    """True if *text* is a non-empty, valid cookie-name."""
    return bool(text) and first_invalid(text, TOKEN_CHARS) is None


def is_cookie_value(text: str) -> bool:
    """True if *text* is a valid cookie-value, quoted or not."""
    inner, skipped = unquote(text)
    return first_invalid(inner, value_chars(bool(skipped))) is None
