"""Client-side cookie state.

``ClientCookie`` is the object attribute handlers write into while a
``Set-Cookie`` header is being read (see ``parse_set_cookie``).
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime


@dataclass(slots=True)
class ClientCookie:
    """A cookie received in a ``Set-Cookie`` header.

    Mutable while its attributes are being parsed. ``attributes`` keeps
    every attribute as received, keyed by lower-cased name.
    """

    name: str
    value: str
    expiry: datetime | None = None
    attributes: dict[str, str] = field(default_factory=dict)

    def set_expiry(self, instant: datetime) -> None:
        """Set the absolute expiry time. *instant* must be timezone-aware."""
        if instant.tzinfo is None or instant.utcoffset() is None:
            msg = f"Cookie expiry must be timezone-aware, got naive {instant!r}"
            raise ValueError(msg)
        self.expiry = instant

    @property
    def is_persistent(self) -> bool:
        """True if the cookie has an expiry (i.e. is not a session cookie)."""
        return self.expiry is not None

    def is_expired(self, now: datetime | None = None) -> bool:
        """True if the expiry is at or before *now* (default: current UTC time).

        Session cookies never expire by date.
        """
        if self.expiry is None:
            return False
        if now is None:
            now = datetime.now(UTC)
        return self.expiry <= now
