"""Identity store implementations."""

from email_notify.identity.stores.inmemory import InMemoryIdentityStore

__all__ = ["InMemoryIdentityStore"]
