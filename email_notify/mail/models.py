"""Mail message and SMTP connection models."""

from dataclasses import dataclass, field
from email.message import EmailMessage

from pydantic import SecretStr

from email_notify.config.models.node import NodeConfig
from email_notify.config.models.transport import TransportConfig

CHARSET = "UTF-8"
TEXT_PLAIN = "text/plain"
TEXT_HTML = "text/html"


@dataclass(frozen=True)
class MailMessage:
    """A rendered message ready for the transport."""

    from_address: str
    recipients: tuple[str, ...]
    subject: str
    body: str
    content_type: str = TEXT_PLAIN
    charset: str = CHARSET

    def to_email_message(self) -> EmailMessage:
        """Build the stdlib message handed to smtplib."""
        msg = EmailMessage()
        msg["From"] = self.from_address
        msg["To"] = ", ".join(self.recipients)
        msg["Subject"] = self.subject
        msg.set_content(
            self.body,
            subtype=self.content_type.split("/", 1)[1],
            charset=self.charset.lower(),
        )
        return msg


@dataclass(frozen=True)
class SmtpConnection:
    """Where and how to connect to an SMTP server.

    The password stays a SecretStr so that repr() and logs never show it.
    """

    host: str
    port: int
    username: str | None = None
    password: SecretStr | None = field(default=None, repr=False)
    ssl_enabled: bool = False
    starttls_enabled: bool = False
    timeout_seconds: float = 30.0

    @classmethod
    def from_node_config(cls, config: NodeConfig) -> "SmtpConnection":
        """Connection for a node with host and port set."""
        if config.uses_default_transport() or config.smtp_host is None or config.smtp_port is None:
            raise ValueError("smtp_host and smtp_port are required")
        return cls(
            host=config.smtp_host,
            port=config.smtp_port,
            username=config.smtp_username,
            password=config.smtp_password,
            ssl_enabled=config.smtp_ssl_enabled,
            starttls_enabled=config.smtp_starttls_enabled,
            timeout_seconds=config.smtp_timeout_seconds,
        )

    @classmethod
    def from_transport_config(cls, config: TransportConfig) -> "SmtpConnection":
        """Unauthenticated host-default connection."""
        return cls(host=config.host, port=config.port, timeout_seconds=config.timeout_seconds)
