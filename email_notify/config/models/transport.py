"""Host-default SMTP transport configuration.

Used when a node instance leaves its SMTP host or port unset.
"""

from pydantic import BaseModel, Field


class TransportConfig(BaseModel):
    """Connection the transport falls back to."""

    host: str = Field(default="localhost", description="Default SMTP host")
    port: int = Field(default=25, gt=0, le=65535, description="Default SMTP port")
    timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Socket timeout for the default connection (seconds)",
    )
