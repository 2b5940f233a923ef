"""Mail dispatch: message model, SMTP transports and the dispatcher."""

from email_notify.mail.dispatcher import MailDispatcher
from email_notify.mail.models import MailMessage, SmtpConnection
from email_notify.mail.transport import MailTransport
from email_notify.mail.transports.inmemory import InMemoryTransport
from email_notify.mail.transports.smtp import SmtpTransport

__all__ = [
    "InMemoryTransport",
    "MailDispatcher",
    "MailMessage",
    "MailTransport",
    "SmtpConnection",
    "SmtpTransport",
]
