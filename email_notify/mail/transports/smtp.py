"""smtplib-backed transport."""

import smtplib
import ssl

from email_notify.config.models.transport import TransportConfig
from email_notify.mail.models import MailMessage, SmtpConnection
from email_notify.mail.transport import MailTransport


class SmtpTransport(MailTransport):
    """Sends one message per connection with the standard library client.

    SMTPS is used when ssl_enabled is set; otherwise a plain connection is
    opened and upgraded with STARTTLS when starttls_enabled is set. Login
    happens only when both username and password are configured. Every
    connection carries a socket timeout so a stalled server cannot block
    the workflow step forever.
    """

    def __init__(self, default: TransportConfig | None = None) -> None:
        self.default_connection = SmtpConnection.from_transport_config(
            default or TransportConfig()
        )

    def send(self, message: MailMessage, connection: SmtpConnection | None = None) -> None:
        """Send a message over a fresh SMTP connection."""
        conn = connection or self.default_connection

        if conn.ssl_enabled:
            client: smtplib.SMTP = smtplib.SMTP_SSL(
                conn.host,
                conn.port,
                timeout=conn.timeout_seconds,
                context=ssl.create_default_context(),
            )
        else:
            client = smtplib.SMTP(conn.host, conn.port, timeout=conn.timeout_seconds)

        with client as server:
            if conn.starttls_enabled and not conn.ssl_enabled:
                server.starttls(context=ssl.create_default_context())
            if conn.username and conn.password is not None:
                server.login(conn.username, conn.password.get_secret_value())
            server.send_message(message.to_email_message(), to_addrs=list(message.recipients))
