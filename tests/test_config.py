"""Tests for basic_cookies.config — ParserConfig frozen dataclass."""

import pytest

from basic_cookies.config import DEFAULT_CONFIG, ParserConfig
from basic_cookies.errors import ConfigurationError


class TestParserConfig:
    def test_defaults(self) -> None:
        cfg = ParserConfig()

        assert cfg.max_header_length is None
        assert cfg.max_cookies is None

    def test_default_config_is_unlimited(self) -> None:
        assert DEFAULT_CONFIG == ParserConfig()

    def test_override(self) -> None:
        cfg = ParserConfig(max_header_length=4096, max_cookies=50)

        assert cfg.max_header_length == 4096
        assert cfg.max_cookies == 50

    def test_zero_is_allowed(self) -> None:
        assert ParserConfig(max_cookies=0).max_cookies == 0

    def test_frozen(self) -> None:
        cfg = ParserConfig()

        with pytest.raises(AttributeError):
            cfg.max_cookies = 1  # type: ignore[misc]

    @pytest.mark.parametrize("field_name", ["max_header_length", "max_cookies"])
    def test_negative_limit_rejected(self, field_name: str) -> None:
        with pytest.raises(ConfigurationError, match=field_name):
            ParserConfig(**{field_name: -1})
