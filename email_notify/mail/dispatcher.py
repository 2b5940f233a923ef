"""Mail dispatcher.

Builds a single-recipient message from rendered strings and routes it
through a MailTransport, using the node's SMTP settings or, when its host
or port is unset, the transport's host-default connection.
"""

import structlog

from email_notify.config.models.node import NodeConfig
from email_notify.exceptions import MailError
from email_notify.mail.models import TEXT_HTML, TEXT_PLAIN, MailMessage, SmtpConnection
from email_notify.mail.transport import MailTransport
from email_notify.observability.logging import get_logger


class MailDispatcher:
    """Sends node email through a transport.

    The logger only ever receives recipient, host, port and content type;
    SMTP credentials are never passed to it.
    """

    def __init__(
        self,
        transport: MailTransport,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._transport = transport
        self._logger = logger or get_logger(__name__)

    def send_mail(
        self,
        from_address: str,
        to: str,
        subject: str,
        body: str,
        config: NodeConfig,
    ) -> MailMessage:
        """Send one message.

        Args:
            from_address: Sender address
            to: Recipient address (may be empty; the transport decides)
            subject: Rendered subject
            body: Rendered body
            config: Node configuration supplying SMTP settings

        Returns:
            The message that was sent

        Raises:
            MailError: If the transport fails for any reason
        """
        message = MailMessage(
            from_address=from_address,
            recipients=(to,),
            subject=subject,
            body=body,
            content_type=TEXT_HTML if config.html else TEXT_PLAIN,
        )

        connection: SmtpConnection | None = None
        if not config.uses_default_transport():
            connection = SmtpConnection.from_node_config(config)

        log = self._logger.bind(
            recipient=to,
            content_type=message.content_type,
            smtp_host=connection.host if connection else None,
            smtp_port=connection.port if connection else None,
            default_transport=connection is None,
        )
        log.info("mail_send_attempt")

        try:
            self._transport.send(message, connection)
        except Exception as e:
            log.error("mail_send_failed", error=str(e), error_type=type(e).__name__)
            raise MailError(to, e) from e

        log.info("mail_sent")
        return message
