"""In-memory implementation of IdentityStore."""

from email_notify.exceptions import IdentityLookupError
from email_notify.identity.models import Identity
from email_notify.identity.store import IdentityStore


class InMemoryIdentityStore(IdentityStore):
    """In-memory implementation of IdentityStore for testing and development."""

    def __init__(self) -> None:
        self._identities: dict[tuple[str, str], Identity] = {}
        self._unavailable: str | None = None

    def add(self, identity: Identity) -> None:
        """Add or replace an identity."""
        self._identities[(identity.realm, identity.username)] = identity

    def set_unavailable(self, reason: str | None) -> None:
        """Make every lookup fail with the given reason; None restores service."""
        self._unavailable = reason

    def get_identity(self, username: str, realm: str) -> Identity | None:
        """Get the identity for a username within a realm."""
        if self._unavailable is not None:
            raise IdentityLookupError(self._unavailable, username=username, realm=realm)
        return self._identities.get((realm, username))
