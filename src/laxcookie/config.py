"""Cookie handling configuration.

CookieConfig is a frozen dataclass: immutable after creation and checked
once in ``__post_init__``.
"""

from dataclasses import dataclass
from typing import Literal

from laxcookie.errors import ConfigurationError

# What parse_set_cookie does when a handler rejects an attribute value
type MalformedPolicy = Literal["ignore", "discard", "raise"]

_POLICIES = frozenset({"ignore", "discard", "raise"})


@dataclass(frozen=True, slots=True)
class CookieConfig:
    """Set-Cookie handling configuration. Immutable after creation.

    ``on_malformed`` controls what happens when an attribute handler
    raises ``MalformedCookieError``::

        CookieConfig()                       # drop the attribute, keep the cookie
        CookieConfig(on_malformed="discard")  # drop the whole cookie
        CookieConfig(on_malformed="raise")    # propagate the error
    """

    on_malformed: MalformedPolicy = "ignore"

    def __post_init__(self) -> None:
        if self.on_malformed not in _POLICIES:
            allowed = ", ".join(sorted(_POLICIES))
            msg = f"CookieConfig.on_malformed must be one of: {allowed} (got {self.on_malformed!r})."
            raise ConfigurationError(msg)
