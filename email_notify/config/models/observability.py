"""Observability configuration models."""

from typing import Literal

from pydantic import BaseModel, Field


class LoggingConfig(BaseModel):
    """Structured logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Minimum log level"
    )
    format: Literal["json", "console"] = Field(
        default="json", description="Output format"
    )
    redact_pii: bool = Field(
        default=True, description="Mask email addresses found in log values"
    )


class ObservabilityConfig(BaseModel):
    """Top-level observability configuration."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
