"""Identity repository contract used for recipient lookup."""

from email_notify.identity.models import Identity
from email_notify.identity.store import IdentityStore
from email_notify.identity.stores.inmemory import InMemoryIdentityStore

__all__ = ["Identity", "IdentityStore", "InMemoryIdentityStore"]
