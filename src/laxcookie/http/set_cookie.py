"""``Set-Cookie`` header reading and attribute dispatch.

Splits a header into the cookie pair and its attributes, stores every
attribute as received, and routes each value to the handler registered
for its name. What happens when a handler rejects a value is decided by
``CookieConfig.on_malformed``.
"""

import logging
from collections.abc import Iterable, Mapping

from laxcookie.config import CookieConfig
from laxcookie.errors import ConfigurationError, MalformedCookieError
from laxcookie.http.cookies import ClientCookie
from laxcookie.http.protocol import CookieAttributeHandler

logger = logging.getLogger("laxcookie.cookies")


def build_handler_table(
    handlers: Iterable[CookieAttributeHandler],
) -> dict[str, CookieAttributeHandler]:
    """Index handlers by lower-cased attribute name.

    Raises ``ConfigurationError`` for objects that are not handlers and
    for two handlers claiming the same attribute.
    """
    table: dict[str, CookieAttributeHandler] = {}
    for handler in handlers:
        if not isinstance(handler, CookieAttributeHandler):
            msg = f"{handler!r} is not a cookie attribute handler."
            raise ConfigurationError(msg)
        key = handler.attribute_name.lower()
        if key in table:
            msg = f"Duplicate handler for cookie attribute {handler.attribute_name!r}: {table[key]!r} and {handler!r}"
            raise ConfigurationError(msg)
        table[key] = handler
    return table


def _default_handlers() -> dict[str, CookieAttributeHandler]:
    from laxcookie.http.expires import LaxExpiresHandler

    return build_handler_table((LaxExpiresHandler(),))


def parse_set_cookie(
    header: str,
    handlers: Iterable[CookieAttributeHandler] | Mapping[str, CookieAttributeHandler] | None = None,
    config: CookieConfig | None = None,
) -> ClientCookie | None:
    """Parse a ``Set-Cookie`` header value into a ``ClientCookie``.

    Returns ``None`` if the header has no ``name=value`` pair, or if a
    handler rejected an attribute and the policy is ``"discard"``.

    *handlers* defaults to the lax ``Expires`` handler alone. For a
    mapping, only its values are used; they are re-indexed by their own
    ``attribute_name``.

    An attribute value is recorded in ``cookie.attributes`` only once its
    handler accepts it. Under ``"ignore"`` a rejected value leaves the
    cookie exactly as the earlier attributes left it.
    """
    cfg = config or CookieConfig()
    if handlers is None:
        table = _default_handlers()
    elif isinstance(handlers, Mapping):
        table = build_handler_table(handlers.values())
    else:
        table = build_handler_table(handlers)

    pair, *attrs = header.split(";")
    name, sep, value = pair.partition("=")
    name = name.strip()
    if not sep or not name:
        logger.debug("Skipping Set-Cookie without a name=value pair: %r", header)
        return None

    cookie = ClientCookie(name=name, value=value.strip())
    for attr in attrs:
        attr_name, _, attr_value = attr.partition("=")
        attr_name = attr_name.strip().lower()
        if not attr_name:
            continue
        attr_value = attr_value.strip()

        handler = table.get(attr_name)
        if handler is not None:
            try:
                handler.parse(cookie, attr_value)
            except MalformedCookieError as exc:
                if cfg.on_malformed == "raise":
                    raise
                if cfg.on_malformed == "discard":
                    logger.debug("Discarding cookie %r: %s (%s)", cookie.name, exc, exc.kind)
                    return None
                logger.debug("Ignoring attribute on cookie %r: %s (%s)", cookie.name, exc, exc.kind)
                continue
        cookie.attributes[attr_name] = attr_value

    return cookie
