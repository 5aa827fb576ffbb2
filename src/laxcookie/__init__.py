"""laxcookie: lenient ``Set-Cookie`` expiry parsing.

Reads the ``Expires`` dates real servers actually send, not just the ones
the RFCs describe.

Basic usage::

    from laxcookie import parse_expires, parse_set_cookie

    parse_expires("Thu, 01-Jan-70 00:00:01 GMT")
    # datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc)

    cookie = parse_set_cookie("sid=abc; Path=/; Expires=Wed, 09 Jun 2021 10:18:14 GMT")
    cookie.expiry
    # datetime.datetime(2021, 6, 9, 10, 18, 14, tzinfo=datetime.timezone.utc)
"""

__version__ = "0.1.0"
__all__ = [
    "ClientCookie",
    "ConfigurationError",
    "CookieAttributeHandler",
    "CookieConfig",
    "LaxCookieError",
    "LaxExpiresHandler",
    "MalformedCookieError",
    "build_handler_table",
    "parse_expires",
    "parse_set_cookie",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import laxcookie`` cheap while providing a flat top-level API.
    """
    if name == "ClientCookie":
        from laxcookie.http.cookies import ClientCookie

        return ClientCookie

    if name == "CookieAttributeHandler":
        from laxcookie.http.protocol import CookieAttributeHandler

        return CookieAttributeHandler

    if name == "CookieConfig":
        from laxcookie.config import CookieConfig

        return CookieConfig

    if name in ("LaxExpiresHandler", "parse_expires"):
        from laxcookie.http import expires as _expires

        return getattr(_expires, name)

    if name in ("build_handler_table", "parse_set_cookie"):
        from laxcookie.http import set_cookie as _set_cookie

        return getattr(_set_cookie, name)

    if name in ("ConfigurationError", "LaxCookieError", "MalformedCookieError"):
        from laxcookie import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
