"""basic_cookies — strict RFC 6265 ``Cookie`` request-header parsing.

Splits a ``Cookie`` header value into ordered name/value pairs and rejects
anything outside the RFC grammar with a position-aware error.

Basic usage::

    from basic_cookies import parse

    cookies = parse("cookie1=value1; cookie2=value2")
    cookies[0].name   # "cookie1"
    cookies[1].value  # "value2"

Non-raising variant::

    from basic_cookies import try_parse

    result = try_parse(header)
    if not result:
        print(result.error.offset, result.error.message)
"""

# Declare free-threading support (PEP 703)
_Py_mod_gil = 0

__version__ = "0.1.0"
__all__ = [
    "COOKIE_OCTETS",
    "TOKEN_CHARS",
    "ConfigurationError",
    "Cookie",
    "CookieError",
    "CookieParseError",
    "IllegalCharacterError",
    "LimitExceededError",
    "MalformedPairError",
    "MissingNameError",
    "ParseResult",
    "ParserConfig",
    "format_cookie_header",
    "is_cookie_value",
    "is_token",
    "parse",
    "parse_cookies",
    "try_parse",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "COOKIE_OCTETS": "basic_cookies.grammar",
    "TOKEN_CHARS": "basic_cookies.grammar",
    "ConfigurationError": "basic_cookies.errors",
    "Cookie": "basic_cookies.cookie",
    "CookieError": "basic_cookies.errors",
    "CookieParseError": "basic_cookies.errors",
    "IllegalCharacterError": "basic_cookies.errors",
    "LimitExceededError": "basic_cookies.errors",
    "MalformedPairError": "basic_cookies.errors",
    "MissingNameError": "basic_cookies.errors",
    "ParseResult": "basic_cookies.cookie",
    "ParserConfig": "basic_cookies.config",
    "format_cookie_header": "basic_cookies.cookie",
    "is_cookie_value": "basic_cookies.grammar",
    "is_token": "basic_cookies.grammar",
    "parse": "basic_cookies.cookie",
    "parse_cookies": "basic_cookies.cookie",
    "try_parse": "basic_cookies.cookie",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import basic_cookies`` cheap for callers that only need one helper.
    """
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_name), name)
