"""MailTransport abstract interface."""

from abc import ABC, abstractmethod

from email_notify.mail.models import MailMessage, SmtpConnection


class MailTransport(ABC):
    """Hands a message to an SMTP server.

    Called with connection=None, the transport uses its host-default
    connection (the reduced-argument form used when a node leaves its
    SMTP host or port unset).
    """

    @abstractmethod
    def send(self, message: MailMessage, connection: SmtpConnection | None = None) -> None:
        """Send a message. Any failure propagates to the caller."""
        pass
