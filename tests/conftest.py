"""Shared test fixtures for the email notify test suite."""

from collections.abc import Callable, Generator
from pathlib import Path
from typing import Any

import pytest
import structlog

from email_notify.config.models.node import NodeConfig
from email_notify.config.settings import set_toml_config
from email_notify.identity import Identity, InMemoryIdentityStore
from email_notify.mail import InMemoryTransport
from email_notify.node import EmailNotifyNode, TreeContext


@pytest.fixture
def test_config_dir(tmp_path: Path) -> Path:
    """Create a temporary config directory for testing."""
    config_dir = tmp_path / "config"
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def mock_toml_files(test_config_dir: Path) -> Callable[[dict[str, str]], None]:
    """Factory fixture to create TOML files in the test config directory.

    Usage:
        def test_something(mock_toml_files):
            mock_toml_files({
                "default.toml": "app_name = 'test'",
                "development.toml": "[node]\nsuspend_enabled = true",
            })
    """

    def _create_toml_files(files: dict[str, str]) -> None:
        for filename, content in files.items():
            (test_config_dir / filename).write_text(content)

    return _create_toml_files


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Clear cached settings and TOML state around each test."""
    from email_notify.config import get_settings

    get_settings.cache_clear()
    set_toml_config({})
    yield
    get_settings.cache_clear()
    set_toml_config({})


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so logging tests don't leak configuration."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def identity_store() -> InMemoryIdentityStore:
    """Identity store holding one user with a mail attribute."""
    store = InMemoryIdentityStore()
    store.add(
        Identity(
            username="demo",
            realm="/alpha",
            attributes={"mail": ["demo@example.com"], "cn": ["Demo User"]},
        )
    )
    return store


@pytest.fixture
def transport() -> InMemoryTransport:
    """Transport that records messages."""
    return InMemoryTransport()


@pytest.fixture
def make_state() -> Callable[..., dict[str, Any]]:
    """Factory for workflow state of the demo user."""

    def _make_state(**extra: Any) -> dict[str, Any]:
        state: dict[str, Any] = {"username": "demo", "realm": "/alpha"}
        state.update(extra)
        return state

    return _make_state


@pytest.fixture
def make_node(
    identity_store: InMemoryIdentityStore, transport: InMemoryTransport
) -> Callable[..., EmailNotifyNode]:
    """Factory for nodes wired to the in-memory store and transport."""

    def _make_node(**config: Any) -> EmailNotifyNode:
        return EmailNotifyNode(NodeConfig(**config), identity_store, transport)

    return _make_node


@pytest.fixture
def make_context() -> Callable[..., TreeContext]:
    """Factory for invocation contexts with a predictable resume URI."""

    def _make_context(state: dict[str, Any], **kwargs: Any) -> TreeContext:
        kwargs.setdefault("mint_resume_uri", lambda: "https://am.example.com/resume?id=abc123")
        return TreeContext(shared_state=state, **kwargs)

    return _make_context
