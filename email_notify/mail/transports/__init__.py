"""Mail transport implementations."""

from email_notify.mail.transports.inmemory import InMemoryTransport
from email_notify.mail.transports.smtp import SmtpTransport

__all__ = ["InMemoryTransport", "SmtpTransport"]
