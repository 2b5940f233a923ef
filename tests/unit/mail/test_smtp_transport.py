"""Unit tests for SmtpTransport with smtplib replaced by a fake."""

import smtplib

import pytest
from pydantic import SecretStr

from email_notify.config.models.transport import TransportConfig
from email_notify.mail import MailMessage, SmtpConnection, SmtpTransport


class DummySMTP:
    """Stands in for smtplib.SMTP / SMTP_SSL and records calls."""

    instances: list["DummySMTP"] = []

    def __init__(self, host=None, port=None, timeout=None, context=None):
        self.host = host
        self.port = port
        self.timeout = timeout
        self.context = context
        self.started_tls = False
        self.logged_in = None
        self.sent = []
        self.closed = False
        DummySMTP.instances.append(self)

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.closed = True

    def starttls(self, context=None):
        self.started_tls = True

    def login(self, user, password):
        self.logged_in = (user, password)

    def send_message(self, msg, to_addrs=None):
        self.sent.append((msg, tuple(to_addrs or [])))
        return {}


class DummySMTPSSL(DummySMTP):
    pass


@pytest.fixture(autouse=True)
def fake_smtplib(monkeypatch: pytest.MonkeyPatch) -> None:
    """Replace smtplib clients with DummySMTP."""
    DummySMTP.instances = []
    monkeypatch.setattr(smtplib, "SMTP", DummySMTP)
    monkeypatch.setattr(smtplib, "SMTP_SSL", DummySMTPSSL)


@pytest.fixture
def message() -> MailMessage:
    """A plain-text message."""
    return MailMessage(
        from_address="admin@example.com",
        recipients=("demo@example.com",),
        subject="Your code",
        body="Code: 1234",
    )


class TestSmtpTransport:
    """Tests for SmtpTransport.send."""

    def test_plain_connection(self, message: MailMessage) -> None:
        """Without TLS flags or credentials it connects and sends only."""
        SmtpTransport().send(message, SmtpConnection(host="mail.local", port=2525, timeout_seconds=5))

        server = DummySMTP.instances[0]
        assert type(server) is DummySMTP
        assert (server.host, server.port, server.timeout) == ("mail.local", 2525, 5)
        assert server.started_tls is False
        assert server.logged_in is None
        msg, to_addrs = server.sent[0]
        assert to_addrs == ("demo@example.com",)
        assert msg["Subject"] == "Your code"
        assert msg["From"] == "admin@example.com"
        assert server.closed is True

    def test_starttls_and_login(self, message: MailMessage) -> None:
        """STARTTLS upgrades the connection and credentials are used."""
        connection = SmtpConnection(
            host="smtp.example.com",
            port=587,
            username="mailer",
            password=SecretStr("s3cret!"),
            starttls_enabled=True,
        )
        SmtpTransport().send(message, connection)

        server = DummySMTP.instances[0]
        assert server.started_tls is True
        assert server.logged_in == ("mailer", "s3cret!")

    def test_ssl_uses_smtps(self, message: MailMessage) -> None:
        """The SSL flag opens an SMTPS connection without STARTTLS."""
        connection = SmtpConnection(
            host="smtp.example.com",
            port=465,
            ssl_enabled=True,
            starttls_enabled=True,
        )
        SmtpTransport().send(message, connection)

        server = DummySMTP.instances[0]
        assert type(server) is DummySMTPSSL
        assert server.context is not None
        assert server.started_tls is False

    def test_username_without_password_skips_login(self, message: MailMessage) -> None:
        """Login needs both username and password."""
        SmtpTransport().send(message, SmtpConnection(host="h", port=25, username="mailer"))

        assert DummySMTP.instances[0].logged_in is None

    def test_default_connection(self, message: MailMessage) -> None:
        """No connection means the configured host default."""
        transport = SmtpTransport(TransportConfig(host="relay.internal", port=1025, timeout_seconds=3))
        transport.send(message)

        server = DummySMTP.instances[0]
        assert (server.host, server.port, server.timeout) == ("relay.internal", 1025, 3)

    def test_errors_propagate(self, message: MailMessage, monkeypatch: pytest.MonkeyPatch) -> None:
        """Transport errors are left to the dispatcher to wrap."""

        def refuse(*args, **kwargs):
            raise ConnectionRefusedError("refused")

        monkeypatch.setattr(smtplib, "SMTP", refuse)

        with pytest.raises(ConnectionRefusedError):
            SmtpTransport().send(message)


class TestSmtpConnection:
    """Tests for SmtpConnection."""

    def test_repr_hides_password(self) -> None:
        """The password is not part of the repr."""
        connection = SmtpConnection(host="h", port=25, username="u", password=SecretStr("pw-123"))
        assert "pw-123" not in repr(connection)
