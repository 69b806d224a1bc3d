"""Tests for the virtual SMTP transport."""

from __future__ import annotations

import base64
import email
import smtplib
from unittest.mock import patch

import pytest

from mailisk.errors import SmtpError
from mailisk.smtp import VirtualSmtpTransport, build_message
from mailisk.types import OutgoingAttachment, SendVirtualEmailParams, SmtpSettings

SETTINGS: SmtpSettings = {
    "host": "smtp.mailisk.com",
    "port": 587,
    "username": "test-namespace",
    "password": "mock-password",
}


def make_params(**overrides) -> SendVirtualEmailParams:
    values = {
        "from_address": "sender@example.com",
        "to": "john@test-namespace.mailisk.net",
        "subject": "Hello",
    }
    values.update(overrides)
    return SendVirtualEmailParams(**values)


class TestBuildMessage:
    """Tests for MIME message construction."""

    def test_text_only(self) -> None:
        """Test that a text-only email is a single text/plain part."""
        msg = build_message(make_params(text="Testing"))
        assert msg.get_content_type() == "text/plain"
        assert msg["Subject"] == "Hello"
        assert msg["From"] == "sender@example.com"
        assert msg["To"] == "john@test-namespace.mailisk.net"
        assert msg["Date"] is not None
        assert msg["Message-ID"] is not None
        assert msg.get_payload(decode=True) == b"Testing"

    def test_html_only(self) -> None:
        """Test that an HTML-only email is a single text/html part."""
        msg = build_message(make_params(html="<p>Hi</p>"))
        assert msg.get_content_type() == "text/html"

    def test_text_and_html(self) -> None:
        """Test that text and HTML become alternatives."""
        msg = build_message(make_params(text="Hi", html="<p>Hi</p>"))
        assert msg.get_content_type() == "multipart/alternative"
        types = [part.get_content_type() for part in msg.get_payload()]
        assert types == ["text/plain", "text/html"]

    def test_multiple_recipients(self) -> None:
        """Test that a recipient list is joined in the To header."""
        msg = build_message(make_params(to=["a@ns.mailisk.net", "b@ns.mailisk.net"], text="x"))
        assert msg["To"] == "a@ns.mailisk.net, b@ns.mailisk.net"

    def test_custom_headers(self) -> None:
        """Test that extra headers are added and can replace generated ones."""
        msg = build_message(
            make_params(
                text="x",
                headers={"X-Custom-Header": "Custom Value", "Message-ID": "<fixed@example.com>"},
            )
        )
        assert msg["X-Custom-Header"] == "Custom Value"
        assert msg.get_all("Message-ID") == ["<fixed@example.com>"]

    def test_attachments(self) -> None:
        """Test that attachments wrap the body in multipart/mixed."""
        msg = build_message(
            make_params(
                text="See attached",
                attachments=[
                    OutgoingAttachment(
                        filename="report.pdf", content=b"%PDF-1.4", content_type="application/pdf"
                    ),
                    OutgoingAttachment(
                        filename="notes.txt", content="hello", content_type="text/plain"
                    ),
                ],
            )
        )
        assert msg.get_content_type() == "multipart/mixed"
        body, pdf, notes = msg.get_payload()
        assert body.get_content_type() == "text/plain"
        assert pdf.get_content_type() == "application/pdf"
        assert pdf.get_filename() == "report.pdf"
        assert pdf.get_payload(decode=True) == b"%PDF-1.4"
        assert notes.get_payload(decode=True) == b"hello"

    def test_message_round_trips_through_parser(self) -> None:
        """Test that the serialised message parses back with its attachment."""
        msg = build_message(
            make_params(
                text="x",
                attachments=[OutgoingAttachment(filename="a.bin", content=b"\x00\xff")],
            )
        )
        parsed = email.message_from_string(msg.as_string())
        attachment = parsed.get_payload()[1]
        assert attachment.get_content_type() == "application/octet-stream"
        assert base64.b64decode(attachment.get_payload()) == b"\x00\xff"


class TestVirtualSmtpTransport:
    """Tests for the SMTP session lifecycle."""

    @pytest.mark.asyncio
    async def test_constructor_does_not_connect(self) -> None:
        """Test that no connection is made before open()."""
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            transport = VirtualSmtpTransport(SETTINGS)
            assert transport.is_open is False
        smtp_cls.assert_not_called()

    @pytest.mark.asyncio
    async def test_open_uses_starttls_when_offered(self) -> None:
        """Test that the plaintext connection is upgraded and authenticated."""
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.has_extn.return_value = True
            async with VirtualSmtpTransport(SETTINGS, timeout=5000) as transport:
                assert transport.is_open

        smtp_cls.assert_called_once_with("smtp.mailisk.com", 587, timeout=5.0)
        server.has_extn.assert_called_with("starttls")
        server.starttls.assert_called_once()
        server.login.assert_called_once_with("test-namespace", "mock-password")
        server.quit.assert_called_once()
        assert transport.is_open is False

    @pytest.mark.asyncio
    async def test_open_without_starttls(self) -> None:
        """Test that STARTTLS is skipped when the server does not offer it."""
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.has_extn.return_value = False
            async with VirtualSmtpTransport(SETTINGS):
                pass

        server.starttls.assert_not_called()
        server.login.assert_called_once()

    @pytest.mark.asyncio
    async def test_login_failure_closes_socket(self) -> None:
        """Test that a rejected login raises SmtpError and drops the socket."""
        original = smtplib.SMTPAuthenticationError(535, b"Authentication failed")
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.login.side_effect = original
            transport = VirtualSmtpTransport(SETTINGS)
            with pytest.raises(SmtpError) as exc_info:
                await transport.open()

        assert exc_info.value.__cause__ is original
        server.close.assert_called_once()
        assert transport.is_open is False

    @pytest.mark.asyncio
    async def test_connection_refused(self) -> None:
        """Test that a refused connection raises SmtpError."""
        with patch("mailisk.smtp.smtplib.SMTP", side_effect=ConnectionRefusedError("refused")):
            with pytest.raises(SmtpError, match="SMTP connection failed"):
                await VirtualSmtpTransport(SETTINGS).open()

    @pytest.mark.asyncio
    async def test_send(self) -> None:
        """Test that send submits the built message."""
        params = make_params(to=["a@ns.mailisk.net", "b@ns.mailisk.net"], text="Testing")
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            async with VirtualSmtpTransport(SETTINGS) as transport:
                await transport.send(params)

        from_addr, to_addrs, message = server.sendmail.call_args[0]
        assert from_addr == "sender@example.com"
        assert to_addrs == ["a@ns.mailisk.net", "b@ns.mailisk.net"]
        assert "Subject: Hello" in message

    @pytest.mark.asyncio
    async def test_send_requires_open_session(self) -> None:
        """Test that sending on a closed transport fails."""
        with pytest.raises(SmtpError, match="not open"):
            await VirtualSmtpTransport(SETTINGS).send(make_params(text="x"))

    @pytest.mark.asyncio
    async def test_send_failure_closes_on_exit(self) -> None:
        """Test that the session is released when sending fails."""
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.sendmail.side_effect = smtplib.SMTPRecipientsRefused(
                {"x@elsewhere.com": (550, b"No such namespace")}
            )
            with pytest.raises(SmtpError):
                async with VirtualSmtpTransport(SETTINGS) as transport:
                    await transport.send(make_params(to="x@elsewhere.com", text="x"))

        server.quit.assert_called_once()

    @pytest.mark.asyncio
    async def test_close_falls_back_when_quit_fails(self) -> None:
        """Test that a dropped connection is still closed."""
        with patch("mailisk.smtp.smtplib.SMTP") as smtp_cls:
            server = smtp_cls.return_value
            server.quit.side_effect = smtplib.SMTPServerDisconnected("gone")
            transport = VirtualSmtpTransport(SETTINGS)
            await transport.open()
            await transport.close()
            await transport.close()

        server.quit.assert_called_once()
        server.close.assert_called_once()
