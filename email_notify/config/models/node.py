"""Node configuration model.

One NodeConfig is supplied per node instance when the host builds the
node, and it is never mutated afterwards.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, SecretStr

FailurePolicy = Literal["continue", "outcome"]


class NodeConfig(BaseModel):
    """Configuration for one email notify node instance."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    attribute: str = Field(
        default="mail",
        min_length=1,
        description="Identity attribute holding the recipient address",
    )
    subject: str = Field(default="Subject", description="Subject template")
    message: str = Field(default="Message", description="Message body template")
    html: bool = Field(default=False, description="Send the body as text/html")
    from_address: str = Field(
        default="admin@example.com",
        description="Sender address",
    )

    smtp_host: str | None = Field(
        default="localhost",
        description="SMTP host; None or blank uses the host-default transport",
    )
    smtp_port: int | None = Field(
        default=25,
        gt=0,
        le=65535,
        description="SMTP port; None uses the host-default transport",
    )
    smtp_username: str | None = Field(default=None, description="SMTP login name")
    smtp_password: SecretStr | None = Field(default=None, description="SMTP password")
    smtp_ssl_enabled: bool = Field(default=False, description="Connect over SMTPS")
    smtp_starttls_enabled: bool = Field(
        default=False, description="Upgrade the connection with STARTTLS"
    )
    smtp_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Bound on every blocking SMTP call (seconds)",
    )

    suspend_enabled: bool = Field(
        default=False,
        description="Halt the workflow after sending until it is resumed",
    )
    failure_policy: FailurePolicy = Field(
        default="continue",
        description=(
            "'continue' always proceeds to the next step; "
            "'outcome' routes to success/failure"
        ),
    )
    render_on_suspend: bool = Field(
        default=True,
        description="Render subject/message templates in the suspend path",
    )
    suspend_message: str = Field(
        default="An email has been sent to your inbox.",
        description="Status shown while the workflow is suspended",
    )
    suspend_error_message: str = Field(
        default="Unable to send email. Please contact your administrator.",
        description="Status shown when the send failed while suspending",
    )

    def uses_default_transport(self) -> bool:
        """True when host or port is unset. A blank host counts as unset."""
        return not (self.smtp_host and self.smtp_host.strip()) or self.smtp_port is None

    def log_safe(self) -> dict[str, Any]:
        """Non-secret fields for diagnostics."""
        data = self.model_dump(exclude={"smtp_password", "subject", "message"})
        data["smtp_password_set"] = self.smtp_password is not None
        return data
