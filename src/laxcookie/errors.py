"""laxcookie exception hierarchy.

Shared by the expires parser, the attribute dispatch layer, and config
validation so every module raises and catches the same types.
"""

from dataclasses import dataclass
from typing import Literal

# Why a cookie attribute value was rejected
type FailureKind = Literal["missing_field", "numeric_overflow", "out_of_range"]


class LaxCookieError(Exception):
    """Base for all laxcookie-specific errors."""


class ConfigurationError(LaxCookieError):
    """Raised when a config or handler set is invalid.

    Typically raised while building the attribute handler table.
    """


@dataclass(frozen=True, slots=True)
class MalformedCookieError(LaxCookieError):
    """A cookie attribute value that could not be parsed.

    Carries the raw offending value. The caller decides whether to drop
    the attribute, drop the cookie, or reject the whole header.
    """

    value: str
    kind: FailureKind
    attribute: str = "expires"

    def __str__(self) -> str:
        return f"Invalid '{self.attribute}' attribute: {self.value}"
