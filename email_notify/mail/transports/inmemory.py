"""In-memory transport for testing and development."""

from email_notify.mail.models import MailMessage, SmtpConnection
from email_notify.mail.transport import MailTransport


class InMemoryTransport(MailTransport):
    """Records messages instead of sending them.

    Set `fail_with` to make every send raise that exception.
    """

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.sent: list[tuple[MailMessage, SmtpConnection | None]] = []
        self.fail_with = fail_with

    def send(self, message: MailMessage, connection: SmtpConnection | None = None) -> None:
        """Record the message, or raise the primed failure."""
        if self.fail_with is not None:
            raise self.fail_with
        self.sent.append((message, connection))

    @property
    def messages(self) -> list[MailMessage]:
        """Messages sent so far."""
        return [message for message, _ in self.sent]
