"""Configuration models."""

from email_notify.config.models.node import FailurePolicy, NodeConfig
from email_notify.config.models.observability import LoggingConfig, ObservabilityConfig
from email_notify.config.models.transport import TransportConfig

__all__ = [
    "FailurePolicy",
    "LoggingConfig",
    "NodeConfig",
    "ObservabilityConfig",
    "TransportConfig",
]
