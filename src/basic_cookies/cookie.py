"""Cookie request-header parsing.

Splits an RFC 6265 ``Cookie`` header value into ordered ``Cookie`` pairs and
validates every name and value against the fixed tables in
``basic_cookies.grammar``. Parsing is all-or-nothing: the first violation
aborts the call and nothing partial is returned.

Only ``"; "`` separates pairs and nothing is trimmed, so stray whitespace
or a bare ``;`` surfaces as an illegal character.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field

from basic_cookies.config import DEFAULT_CONFIG, ParserConfig
from basic_cookies.errors import (
    CookieParseError,
    IllegalCharacterError,
    LimitExceededError,
    MalformedPairError,
    MissingNameError,
)
from basic_cookies.grammar import (
    NAME_VALUE_SEPARATOR,
    PAIR_SEPARATOR,
    TOKEN_CHARS,
    first_invalid,
    is_token,
    quote_if_needed,
    unquote,
    value_chars,
)

logger = logging.getLogger("basic_cookies")


@dataclass(frozen=True, slots=True)
class Cookie:
    """One ``name=value`` pair from a ``Cookie`` header.

    ``value`` is stored without its surrounding quotes when the header
    used the quoted form.
    """

    name: str
    value: str

    def __post_init__(self) -> None:
        # Offsets are relative to str(self), the pair as it would be sent
        if not self.name:
            raise MissingNameError(offset=0, pair=str(self))
        if not is_token(self.name):
            bad = first_invalid(self.name, TOKEN_CHARS) or 0
            raise IllegalCharacterError(offset=bad, pair=str(self), character=self.name[bad])
        quoted = quote_if_needed(self.value) != self.value
        bad = first_invalid(self.value, value_chars(quoted))
        if bad is not None:
            offset = len(self.name) + 1 + int(quoted) + bad
            raise IllegalCharacterError(offset=offset, pair=str(self), character=self.value[bad])

    @classmethod
    def parse(cls, header: str, config: ParserConfig = DEFAULT_CONFIG) -> list["Cookie"]:
        """Parse *header*. See ``basic_cookies.parse``."""
        return parse(header, config)

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> str:
        return self.value

    def __str__(self) -> str:
        return f"{self.name}{NAME_VALUE_SEPARATOR}{quote_if_needed(self.value)}"


@dataclass(frozen=True, slots=True)
class ParseResult:
    """The outcome of ``try_parse``: the cookies, or the error that stopped parsing.

    The result is falsy on failure::

        result = try_parse(header)
        if not result:
            return Response(str(result.error), status=400)
    """

    cookies: list[Cookie] = field(default_factory=list)
    error: CookieParseError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok


def _parse_pair(pair: str, start: int) -> Cookie:
    name, sep, value = pair.partition(NAME_VALUE_SEPARATOR)
    if not sep:
        raise MalformedPairError(offset=start, pair=pair)
    if not name:
        raise MissingNameError(offset=start, pair=pair)

    bad = first_invalid(name, TOKEN_CHARS)
    if bad is not None:
        raise IllegalCharacterError(offset=start + bad, pair=pair, character=name[bad])

    inner, skipped = unquote(value)
    bad = first_invalid(inner, value_chars(bool(skipped)))
    if bad is not None:
        # name, "=", then any opening quote precede the inner value
        offset = start + len(name) + 1 + skipped + bad
        raise IllegalCharacterError(offset=offset, pair=pair, character=inner[bad])

    return Cookie(name=name, value=inner)


def _parse(header: str, config: ParserConfig) -> list[Cookie]:
    if config.max_header_length is not None and len(header) > config.max_header_length:
        raise LimitExceededError("max_header_length", config.max_header_length, len(header))
    if not header:
        return []

    pairs = header.split(PAIR_SEPARATOR)
    if config.max_cookies is not None and len(pairs) > config.max_cookies:
        raise LimitExceededError("max_cookies", config.max_cookies, len(pairs))

    cookies: list[Cookie] = []
    start = 0
    for pair in pairs:
        cookies.append(_parse_pair(pair, start))
        start += len(pair) + len(PAIR_SEPARATOR)
    return cookies


def parse(header: str, config: ParserConfig = DEFAULT_CONFIG) -> list[Cookie]:
    """Parse a ``Cookie`` header value into cookies, in header order.

    Returns an empty list for an empty header.

    Raises:
        MalformedPairError: a pair (including an empty one) has no ``=``.
        MissingNameError: a pair starts with ``=``.
        IllegalCharacterError: a name or value breaks the RFC 6265 grammar.
        LimitExceededError: the header exceeds a limit set on *config*.
    """
    try:
        return _parse(header, config)
    except CookieParseError as exc:
        logger.debug("Rejected cookie header (%s): %s", exc.kind, exc)
        raise


def try_parse(header: str, config: ParserConfig = DEFAULT_CONFIG) -> ParseResult:
    """Like ``parse``, but returns parse failures instead of raising them.

    ``LimitExceededError`` still propagates; it reports a policy decision
    about the header, not a grammar violation.
    """
    try:
        return ParseResult(cookies=parse(header, config))
    except CookieParseError as exc:
        return ParseResult(error=exc)


def parse_cookies(header: str, config: ParserConfig = DEFAULT_CONFIG) -> dict[str, str]:
    """Parse a ``Cookie`` header into a name-value dict.

    Validation is as strict as ``parse``. When a name repeats, the last
    value wins.
    """
    return {cookie.name: cookie.value for cookie in parse(header, config)}


def format_cookie_header(cookies: Iterable[Cookie]) -> str:
    """Serialize *cookies* back into a ``Cookie`` header value.

    The output re-parses to an equal list; every ``Cookie`` was checked
    against the grammar when it was constructed.
    """
    return PAIR_SEPARATOR.join(str(cookie) for cookie in cookies)
