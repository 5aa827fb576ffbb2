"""Lax ``Expires`` attribute parsing.

Real servers send cookie expiry dates in every shape imaginable::

    Wed, 09 Jun 2021 10:18:14 GMT
    Thu, 01-Jan-70 00:00:01 GMT
    2021/jun/09 10:18:14
    10:18:14 09 JUNE 2021 UTC

Rather than matching one fixed format, the value is split into tokens on
a broad set of delimiter characters, and each token is offered to four
field grammars (time, day of month, month, year) in a fixed order. The
first still-open grammar that matches claims the token; anything else is
skipped. Once every field is found the date is assembled in UTC.

Pure and stateless: the only shared data are two read-only tables built
at import time, so ``parse_expires`` is safe to call from any thread.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass, replace
from datetime import UTC, datetime
from types import MappingProxyType

from laxcookie.errors import MalformedCookieError
from laxcookie.http.cookies import ClientCookie


def _delimiters() -> frozenset[str]:
    chars = {"\t"}
    for lo, hi in ((0x20, 0x2F), (0x3B, 0x40), (0x5B, 0x60), (0x7B, 0x7E)):
        chars.update(chr(c) for c in range(lo, hi + 1))
    return frozenset(chars)


DELIMITERS: frozenset[str] = _delimiters()

MONTHS = MappingProxyType(
    {
        "jan": 1,
        "feb": 2,
        "mar": 3,
        "apr": 4,
        "may": 5,
        "jun": 6,
        "jul": 7,
        "aug": 8,
        "sep": 9,
        "oct": 10,
        "nov": 11,
        "dec": 12,
    }
)

# Anything after the first non-digit is discarded, line breaks included.
_TIME_RE = re.compile(r"([0-9]{1,2}):([0-9]{1,2}):([0-9]{1,2})(?:[^0-9].*)?", re.DOTALL)
_DAY_OF_MONTH_RE = re.compile(r"([0-9]{1,2})(?:[^0-9].*)?", re.DOTALL)
_MONTH_RE = re.compile(
    r"(jan|feb|mar|apr|may|jun|jul|aug|sep|oct|nov|dec).*",
    re.IGNORECASE | re.ASCII | re.DOTALL,
)
_YEAR_RE = re.compile(r"([0-9]{2,4})(?:[^0-9].*)?", re.DOTALL)

_INT_MAX = 2**31 - 1
_MIN_YEAR = 1601

# Blank means only these characters: ASCII controls treated as whitespace plus
# the Unicode space, line and paragraph separators, minus the no-break spaces
# (U+00A0, U+2007, U+202F).
_BLANK = frozenset(
    " \t\n\x0b\x0c\r\x1c\x1d\x1e\x1f"
    "\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2008\u2009\u200a"
    "\u2028\u2029\u205f\u3000"
)


# -- Tokenizer --


def iter_tokens(value: str, start: int = 0, end: int | None = None) -> Iterator[str]:
    """Yield the delimiter-separated tokens of ``value[start:end]`` in order.

    A value made only of delimiters yields nothing.
    """
    pos = start
    end = len(value) if end is None else end
    while pos < end:
        while pos < end and value[pos] in DELIMITERS:
            pos += 1
        mark = pos
        while pos < end and value[pos] not in DELIMITERS:
            pos += 1
        if pos == mark:
            return
        yield value[mark:pos]


# -- Field classifier --


@dataclass(frozen=True, slots=True)
class DateFields:
    """Fields claimed so far during one parse. ``None`` means not found yet."""

    time: tuple[int, int, int] | None = None
    day: int | None = None
    month: int | None = None
    year: int | None = None

    @property
    def complete(self) -> bool:
        return None not in (self.time, self.day, self.month, self.year)


def _to_int(digits: str, value: str) -> int:
    number = int(digits)
    if number > _INT_MAX:
        raise MalformedCookieError(value=value, kind="numeric_overflow")
    return number


def classify_token(token: str, fields: DateFields, value: str = "") -> DateFields:
    """Offer *token* to each open field grammar; return the updated fields.

    Priority is time, day of month, month, year. A token that matches no
    open grammar leaves *fields* unchanged. *value* is the full attribute
    value, used only for error context.
    """
    if fields.time is None:
        m = _TIME_RE.fullmatch(token)
        if m:
            hour, minute, second = (_to_int(g, value) for g in m.groups())
            return replace(fields, time=(hour, minute, second))
    if fields.day is None:
        m = _DAY_OF_MONTH_RE.fullmatch(token)
        if m:
            return replace(fields, day=_to_int(m.group(1), value))
    if fields.month is None:
        m = _MONTH_RE.fullmatch(token)
        if m:
            return replace(fields, month=MONTHS[m.group(1).lower()])
    if fields.year is None:
        m = _YEAR_RE.fullmatch(token)
        if m:
            return replace(fields, year=_to_int(m.group(1), value))
    return fields


# -- Date assembler --


def assemble(fields: DateFields, value: str) -> datetime:
    """Build the UTC instant from a complete set of fields.

    Raises ``MalformedCookieError`` if a field is missing or out of range.
    """
    if fields.time is None or fields.day is None or fields.month is None or fields.year is None:
        raise MalformedCookieError(value=value, kind="missing_field")

    hour, minute, second = fields.time
    day = fields.day
    year = fields.year
    if 70 <= year <= 99:
        year += 1900
    elif 0 <= year <= 69:
        year += 2000

    if not 1 <= day <= 31 or year < _MIN_YEAR or hour > 23 or minute > 59 or second > 59:
        raise MalformedCookieError(value=value, kind="out_of_range")

    # Day is only checked against 1..31 above; 31 April and friends land here.
    try:
        return datetime(year, fields.month, day, hour, minute, second, tzinfo=UTC)
    except ValueError:
        raise MalformedCookieError(value=value, kind="out_of_range") from None


def parse_expires(value: str) -> datetime | None:
    """Parse an ``Expires`` attribute value into an aware UTC datetime.

    Returns ``None`` for a blank value (nothing to set). Raises
    ``MalformedCookieError`` when the value cannot be read as a date::

        >>> parse_expires("Wed, 09 Jun 2021 10:18:14 GMT")
        datetime.datetime(2021, 6, 9, 10, 18, 14, tzinfo=datetime.timezone.utc)
    """
    if all(ch in _BLANK for ch in value):
        return None
    fields = DateFields()
    for token in iter_tokens(value):
        fields = classify_token(token, fields, value)
        if fields.complete:
            break
    return assemble(fields, value)


# -- Attribute handler --


class LaxExpiresHandler:
    """``Expires`` attribute handler using the lax date grammar.

    Satisfies ``CookieAttributeHandler``. Holds no state, so one instance
    can serve every cookie on every thread.
    """

    __slots__ = ()

    attribute_name = "expires"

    def parse(self, cookie: ClientCookie, value: str) -> None:
        """Set the cookie's expiry from *value*. Blank values are a no-op."""
        expiry = parse_expires(value)
        if expiry is not None:
            cookie.set_expiry(expiry)

    def validate(self, cookie: ClientCookie, origin_host: str) -> None:
        """Expiry places no constraint on the origin."""

    def match(self, cookie: ClientCookie, origin_host: str) -> bool:
        """Expiry never excludes a cookie from matching an origin."""
        return True

    def __repr__(self) -> str:
        return "LaxExpiresHandler()"
