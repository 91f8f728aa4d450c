"""Parser configuration.

ParserConfig is a frozen dataclass, immutable after creation. The defaults
impose no limits, so ``parse(header)`` follows the RFC grammar alone.
"""

from dataclasses import dataclass

from basic_cookies.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ParserConfig:
    """Limits applied before and during parsing. Override what you need::

        config = ParserConfig(max_header_length=4096, max_cookies=50)
        cookies = parse(header, config)
    """

    # Characters, checked before the header is split
    max_header_length: int | None = None

    # Cookie-pairs, checked after splitting and before validation
    max_cookies: int | None = None

    def __post_init__(self) -> None:
        for field_name in ("max_header_length", "max_cookies"):
            limit = getattr(self, field_name)
            if limit is not None and limit < 0:
                msg = f"{field_name} must be >= 0 or None, got {limit}"
                raise ConfigurationError(msg)


DEFAULT_CONFIG = ParserConfig()
