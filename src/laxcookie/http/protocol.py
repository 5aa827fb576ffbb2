"""Cookie attribute handler protocol.

A handler is any object shaped like::

    class MaxAgeHandler:
        attribute_name = "max-age"

        def parse(self, cookie: ClientCookie, value: str) -> None: ...
        def validate(self, cookie: ClientCookie, origin_host: str) -> None: ...
        def match(self, cookie: ClientCookie, origin_host: str) -> bool: ...

No base class required. ``parse_set_cookie`` checks the shape, not the
lineage.
"""

from typing import Protocol, runtime_checkable

from laxcookie.http.cookies import ClientCookie


@runtime_checkable
class CookieAttributeHandler(Protocol):
    """Protocol for the handler of one ``Set-Cookie`` attribute.

    ``attribute_name`` is compared case-insensitively. ``parse`` raises
    ``MalformedCookieError`` for a value it cannot accept.
    """

    attribute_name: str

    def parse(self, cookie: ClientCookie, value: str) -> None: ...

    def validate(self, cookie: ClientCookie, origin_host: str) -> None: ...

    def match(self, cookie: ClientCookie, origin_host: str) -> bool: ...
