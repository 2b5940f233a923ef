"""Unit tests for resolve_recipient."""

from unittest.mock import MagicMock

from structlog.testing import capture_logs

from email_notify.config.models.node import NodeConfig
from email_notify.identity import Identity, InMemoryIdentityStore
from email_notify.node import resolve_recipient


class TestResolveRecipient:
    """Tests for resolve_recipient."""

    def test_state_email_wins(self, identity_store: InMemoryIdentityStore, make_state) -> None:
        """An email in state is used even when the identity has one too."""
        state = make_state(email="a@x.com")

        assert resolve_recipient(state, identity_store, NodeConfig()) == "a@x.com"

    def test_state_email_skips_lookup(self, make_state) -> None:
        """The identity store is not consulted when state has an email."""
        store = MagicMock()

        resolve_recipient(make_state(email="a@x.com"), store, NodeConfig())

        store.get_identity.assert_not_called()

    def test_state_email_none_falls_back(self, identity_store: InMemoryIdentityStore, make_state) -> None:
        """An explicit None email entry is treated as absent."""
        state = make_state(email=None)

        assert resolve_recipient(state, identity_store, NodeConfig()) == "demo@example.com"

    def test_identity_attribute(self, identity_store: InMemoryIdentityStore, make_state) -> None:
        """The configured attribute is read from the identity."""
        assert resolve_recipient(make_state(), identity_store, NodeConfig()) == "demo@example.com"

    def test_custom_attribute(self, make_state) -> None:
        """Any attribute name can be configured."""
        store = InMemoryIdentityStore()
        store.add(Identity(
            username="demo",
            realm="/alpha",
            attributes={"mail": ["work@x.com"], "altMail": ["home@x.com"]},
        ))

        result = resolve_recipient(make_state(), store, NodeConfig(attribute="altMail"))
        assert result == "home@x.com"

    def test_empty_attribute_returns_empty(self, make_state) -> None:
        """An empty attribute set yields "" with a warning, without raising."""
        store = InMemoryIdentityStore()
        store.add(Identity(username="demo", realm="/alpha", attributes={"mail": []}))

        with capture_logs() as logs:
            result = resolve_recipient(make_state(), store, NodeConfig())

        assert result == ""
        assert logs[-1]["event"] == "recipient_attribute_missing"
        assert logs[-1]["log_level"] == "warning"

    def test_unknown_identity_returns_empty(self, make_state) -> None:
        """A user missing from the repository yields ""."""
        assert resolve_recipient(make_state(), InMemoryIdentityStore(), NodeConfig()) == ""

    def test_lookup_error_degrades(self, identity_store: InMemoryIdentityStore, make_state) -> None:
        """Repository failures are logged and yield ""."""
        identity_store.set_unavailable("SSO session invalid")

        with capture_logs() as logs:
            result = resolve_recipient(make_state(), identity_store, NodeConfig())

        assert result == ""
        assert logs[-1]["event"] == "recipient_lookup_failed"
        assert logs[-1]["error"] == "SSO session invalid"

    def test_store_driver_error_degrades(self, make_state) -> None:
        """Errors other than IdentityLookupError are logged and yield ""."""
        store = MagicMock()
        store.get_identity.side_effect = ConnectionError("directory unreachable")

        with capture_logs() as logs:
            result = resolve_recipient(make_state(), store, NodeConfig())

        assert result == ""
        assert logs[-1]["event"] == "recipient_lookup_failed"
        assert logs[-1]["error"] == "directory unreachable"
        assert logs[-1]["error_type"] == "ConnectionError"

    def test_attribute_read_error_degrades(self, make_state) -> None:
        """A failure while reading the attribute also yields ""."""
        identity = MagicMock()
        identity.get_attribute.side_effect = TimeoutError("attribute read timed out")
        store = MagicMock()
        store.get_identity.return_value = identity

        with capture_logs() as logs:
            result = resolve_recipient(make_state(), store, NodeConfig())

        assert result == ""
        assert logs[-1]["error_type"] == "TimeoutError"

    def test_missing_username_returns_empty(self, identity_store: InMemoryIdentityStore) -> None:
        """Without a username in state there is nobody to look up."""
        assert resolve_recipient({}, identity_store, NodeConfig()) == ""

    def test_default_realm(self) -> None:
        """A missing realm means the root realm."""
        store = InMemoryIdentityStore()
        store.add(Identity(username="demo", attributes={"mail": ["root@x.com"]}))

        assert resolve_recipient({"username": "demo"}, store, NodeConfig()) == "root@x.com"

    def test_state_not_mutated(self, identity_store: InMemoryIdentityStore, make_state) -> None:
        """Resolution only reads the state."""
        state = make_state()
        before = dict(state)

        resolve_recipient(state, identity_store, NodeConfig())

        assert state == before
