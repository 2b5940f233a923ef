"""IdentityStore abstract interface."""

from abc import ABC, abstractmethod

from email_notify.identity.models import Identity


class IdentityStore(ABC):
    """Abstract interface to the host's identity repository.

    Implementations raise IdentityLookupError when the repository or the
    session backing it fails, and return None for unknown users.
    """

    @abstractmethod
    def get_identity(self, username: str, realm: str) -> Identity | None:
        """Get the identity for a username within a realm."""
        pass
