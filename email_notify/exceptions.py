"""Exception hierarchy for the email notify node.

All errors inherit from EmailNotifyError, which carries a human-readable
message. None of them is fatal to the host: the node catches the
recoverable ones at its boundary and turns them into log events and
outcomes.
"""


class EmailNotifyError(Exception):
    """Base exception for all email notify errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(EmailNotifyError):
    """Raised when configuration cannot be located or loaded."""


class IdentityLookupError(EmailNotifyError):
    """Raised when the identity repository or session fails."""

    def __init__(self, message: str, username: str | None = None, realm: str | None = None) -> None:
        super().__init__(message)
        self.username = username
        self.realm = realm


class MailError(EmailNotifyError):
    """Raised when a message cannot be handed to the SMTP transport."""

    def __init__(self, recipient: str, cause: BaseException) -> None:
        super().__init__(f"Failed to send email to {recipient}: {cause}")
        self.recipient = recipient
        self.cause = cause


class PluginError(EmailNotifyError):
    """Raised on plug-in lifecycle failures."""
