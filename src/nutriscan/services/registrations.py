"""Short-lived store for sign-up data between registration steps."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Protocol


@dataclass(frozen=True)
class PendingRegistration:
    """Sign-up details kept until the profile form is submitted."""

    email: str
    name: str


class RegistrationStore(Protocol):
    """Store for pending registrations keyed by a handoff token."""

    def stash(self, token: str, registration: PendingRegistration) -> None:
        """Keep registration data until it is consumed or expires."""

    def pop(self, token: str) -> PendingRegistration | None:
        """Return and forget the registration, if still valid."""


@dataclass
class _Entry:
    registration: PendingRegistration
    expires_at: datetime


@dataclass
class InMemoryRegistrationStore(RegistrationStore):
    """Process-local registration store with a TTL."""

    ttl_seconds: int
    _entries: dict[str, _Entry]

    def __init__(self, ttl_seconds: int = 900) -> None:
        self.ttl_seconds = ttl_seconds
        self._entries = {}

    def stash(self, token: str, registration: PendingRegistration) -> None:
        expires_at = datetime.now(tz=UTC) + timedelta(seconds=self.ttl_seconds)
        self._entries[token] = _Entry(registration=registration, expires_at=expires_at)

    def pop(self, token: str) -> PendingRegistration | None:
        entry = self._entries.pop(token, None)
        if entry is None:
            return None
        if datetime.now(tz=UTC) >= entry.expires_at:
            return None
        return entry.registration
