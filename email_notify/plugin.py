"""Plug-in registration for the host's node lifecycle manager.

The host installs the plug-in once, starts it on every boot, and calls
upgrade() when the installed version is older than PLUGIN_VERSION.
"""

import re
from abc import ABC, abstractmethod
from enum import Enum

import structlog

from email_notify.config.settings import Settings
from email_notify.exceptions import PluginError
from email_notify.node.node import EmailNotifyNode
from email_notify.observability.logging import get_logger, setup_logging

SEMVER_PATTERN = re.compile(r"^(\d+)\.(\d+)\.(\d+)$")


def parse_version(version: str) -> tuple[int, int, int]:
    """Parse a MAJOR.MINOR.PATCH version string."""
    match = SEMVER_PATTERN.match(version)
    if match is None:
        raise PluginError(f"Invalid plugin version: {version!r}")
    major, minor, patch = (int(part) for part in match.groups())
    return major, minor, patch


class StartupType(str, Enum):
    """Why the host is starting the plug-in."""

    FIRST_TIME_INSTALL = "first_time_install"
    NORMAL_STARTUP = "normal_startup"
    UPGRADE = "upgrade"


class NodeRegistry(ABC):
    """Host-side registry of installed node types."""

    @abstractmethod
    def register(self, version: str, node_class: type[EmailNotifyNode]) -> None:
        """Register a node type under a plug-in version."""
        pass

    @abstractmethod
    def upgrade(self, node_class: type[EmailNotifyNode]) -> None:
        """Migrate existing instances of a node type to its latest definition."""
        pass


class InMemoryNodeRegistry(NodeRegistry):
    """In-memory NodeRegistry for testing and development."""

    def __init__(self) -> None:
        self.registered: dict[str, list[type[EmailNotifyNode]]] = {}
        self.upgraded: list[type[EmailNotifyNode]] = []

    def register(self, version: str, node_class: type[EmailNotifyNode]) -> None:
        self.registered.setdefault(version, []).append(node_class)

    def upgrade(self, node_class: type[EmailNotifyNode]) -> None:
        self.upgraded.append(node_class)


class EmailNotifyNodePlugin:
    """Registers EmailNotifyNode with the host."""

    PLUGIN_VERSION = "1.0.5"

    def __init__(
        self,
        registry: NodeRegistry,
        settings: Settings | None = None,
        logger: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        self._registry = registry
        self._settings = settings
        self._logger = (logger or get_logger(__name__)).bind(plugin_version=self.PLUGIN_VERSION)

    @property
    def plugin_version(self) -> str:
        return self.PLUGIN_VERSION

    def nodes_by_version(self) -> dict[str, list[type[EmailNotifyNode]]]:
        """Node classes provided by this plug-in, keyed by version."""
        return {self.PLUGIN_VERSION: [EmailNotifyNode]}

    def on_install(self) -> None:
        """Register every provided node type. Called once, on first startup."""
        for version, node_classes in self.nodes_by_version().items():
            for node_class in node_classes:
                self._registry.register(version, node_class)
        self._logger.info("plugin_installed")

    def on_startup(self, startup_type: StartupType) -> None:
        """Called on every host start, after install/upgrade.

        Configures logging from settings when the plug-in was given any.
        """
        if self._settings is not None:
            logging_config = self._settings.observability.logging
            setup_logging(
                level=logging_config.level,
                format=logging_config.format,
                redact_pii=logging_config.redact_pii,
            )
        self._logger.info("plugin_started", startup_type=startup_type.value)

    def upgrade(self, from_version: str) -> None:
        """Upgrade node definitions installed by an older plug-in version.

        Raises:
            PluginError: If from_version is malformed or not older than this plug-in
        """
        if parse_version(from_version) >= parse_version(self.PLUGIN_VERSION):
            raise PluginError(
                f"Cannot upgrade from {from_version} to {self.PLUGIN_VERSION}"
            )
        self._registry.upgrade(EmailNotifyNode)
        self._logger.info("plugin_upgraded", from_version=from_version)
