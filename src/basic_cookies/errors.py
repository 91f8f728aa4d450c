"""basic_cookies exception hierarchy.

Every failure the package reports derives from ``CookieError``, so callers
can reject a header with a single ``except`` clause or branch on the
concrete parse failure.
"""

from dataclasses import dataclass
from typing import ClassVar


class CookieError(Exception):
    """Base for all basic_cookies errors."""


class ConfigurationError(CookieError):
    """Raised when a ``ParserConfig`` is constructed with invalid limits."""


# Not frozen: raise and contextlib assign __traceback__ on the instance
@dataclass(eq=False)
class CookieParseError(CookieError):
    """A ``Cookie`` header that does not follow the RFC 6265 grammar.

    ``offset`` indexes into the header string. Everything before a reported
    position has already been validated as US-ASCII, so the same number is
    also the byte offset into the encoded header.

    ``pair`` is the full cookie-pair the failure occurred in, and
    ``character`` the offending character when there is one.
    """

    offset: int
    pair: str
    character: str | None = None

    kind: ClassVar[str] = "parse-error"
    reason: ClassVar[str] = "invalid cookie header"

    def __post_init__(self) -> None:
        super().__init__(self.offset, self.pair, self.character)

    @property
    def message(self) -> str:
        """Human-readable diagnostic."""
        where = f"at offset {self.offset}"
        if self.character is not None:
            where = f"{self.character!r} {where}"
        return f"{self.reason}: {where} in {self.pair!r}"

    def __str__(self) -> str:
        return self.message


class MalformedPairError(CookieParseError):
    """A cookie-pair has no ``=`` separator. Offset is the pair's start."""

    kind = "malformed-pair"
    reason = "cookie-pair has no '=' separator"


class MissingNameError(CookieParseError):
    """A cookie-pair has nothing before its ``=``. Offset is the pair's start."""

    kind = "missing-name"
    reason = "cookie-pair has an empty name"


class IllegalCharacterError(CookieParseError):
    """A cookie-name or cookie-value contains a character outside its grammar."""

    kind = "illegal-character"
    reason = "illegal character"


@dataclass(eq=False)
class LimitExceededError(CookieError):
    """A header exceeded one of the limits set on ``ParserConfig``."""

    limit: str
    maximum: int
    actual: int

    def __post_init__(self) -> None:
        super().__init__(self.limit, self.maximum, self.actual)

    def __str__(self) -> str:
        return f"{self.limit} exceeded: {self.actual} > {self.maximum}"
