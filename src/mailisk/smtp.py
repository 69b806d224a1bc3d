"""Virtual SMTP transport for Mailisk SDK.

Each namespace exposes an SMTP relay whose credentials come from the
SMTP settings endpoint. Mail sent through it lands in the namespace's
inbox. The SMTP protocol is handled by ``smtplib``; its blocking calls
run in a worker thread.
"""

from __future__ import annotations

import asyncio
import logging
import smtplib
from email import encoders
from email.message import Message
from email.mime.base import MIMEBase
from email.mime.multipart import MIMEMultipart
from email.mime.text import MIMEText
from email.utils import formatdate, make_msgid
from typing import Any

from .constants import DEFAULT_TIMEOUT_MS
from .errors import SmtpError
from .types import SendVirtualEmailParams, SmtpSettings

logger = logging.getLogger("mailisk")


def _recipients(to: str | list[str]) -> list[str]:
    return [to] if isinstance(to, str) else list(to)


def build_message(params: SendVirtualEmailParams) -> Message:
    """Build the MIME message for a virtual email.

    Text and HTML bodies become a multipart/alternative pair when both
    are given; attachments wrap the body in multipart/mixed.

    Args:
        params: The email to build.

    Returns:
        The MIME message.
    """
    body: Message
    if params.text is not None and params.html is not None:
        body = MIMEMultipart("alternative")
        body.attach(MIMEText(params.text, "plain", "utf-8"))
        body.attach(MIMEText(params.html, "html", "utf-8"))
    elif params.html is not None:
        body = MIMEText(params.html, "html", "utf-8")
    else:
        body = MIMEText(params.text or "", "plain", "utf-8")

    msg: Message
    if params.attachments:
        msg = MIMEMultipart("mixed")
        msg.attach(body)
        for attachment in params.attachments:
            maintype, _, subtype = attachment.content_type.partition("/")
            part = MIMEBase(maintype, subtype or "octet-stream")
            content = attachment.content
            if isinstance(content, str):
                content = content.encode("utf-8")
            part.set_payload(content)
            encoders.encode_base64(part)
            part.add_header("Content-Disposition", "attachment", filename=attachment.filename)
            msg.attach(part)
    else:
        msg = body

    msg["Subject"] = params.subject
    msg["From"] = params.from_address
    msg["To"] = ", ".join(_recipients(params.to))
    msg["Date"] = formatdate(localtime=True)
    msg["Message-ID"] = make_msgid()
    for name, value in (params.headers or {}).items():
        if name in msg:
            msg.replace_header(name, value)
        else:
            msg[name] = value

    return msg


class VirtualSmtpTransport:
    """SMTP session against a namespace's virtual relay.

    The connection is plaintext (no implicit TLS). It is upgraded with
    STARTTLS when the server offers it, then authenticated with the
    namespace credentials.

    Example:
        ```python
        settings = (await api.get_smtp_settings("mynamespace"))["data"]
        async with VirtualSmtpTransport(settings) as transport:
            await transport.send(params)
        ```
    """

    def __init__(self, settings: SmtpSettings, *, timeout: int = DEFAULT_TIMEOUT_MS) -> None:
        """Initialize the transport. No connection is made until ``open``.

        Args:
            settings: Host, port and credentials of the relay.
            timeout: Socket timeout in milliseconds.
        """
        self._settings = settings
        self._timeout = timeout
        self._server: smtplib.SMTP | None = None

    async def __aenter__(self) -> VirtualSmtpTransport:
        await self.open()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    @property
    def is_open(self) -> bool:
        return self._server is not None

    def _connect(self) -> smtplib.SMTP:
        server = smtplib.SMTP(
            self._settings["host"],
            self._settings["port"],
            timeout=self._timeout / 1000,
        )
        try:
            server.ehlo()
            if server.has_extn("starttls"):
                server.starttls()
                server.ehlo()
            server.login(self._settings["username"], self._settings["password"])
        except Exception:
            server.close()
            raise
        return server

    async def open(self) -> None:
        """Connect and authenticate.

        Raises:
            SmtpError: If the connection or login fails.
        """
        if self._server is not None:
            return
        logger.debug(
            "Opening SMTP session to %s:%s", self._settings["host"], self._settings["port"]
        )
        try:
            self._server = await asyncio.to_thread(self._connect)
        except (smtplib.SMTPException, OSError) as e:
            raise SmtpError(f"SMTP connection failed: {e}") from e

    async def send(self, params: SendVirtualEmailParams) -> None:
        """Submit an email.

        Args:
            params: The email to send.

        Raises:
            SmtpError: If the session is not open or the server rejects the mail.
        """
        if self._server is None:
            raise SmtpError("SMTP session is not open")
        message = build_message(params)
        try:
            await asyncio.to_thread(
                self._server.sendmail,
                params.from_address,
                _recipients(params.to),
                message.as_string(),
            )
        except (smtplib.SMTPException, OSError) as e:
            raise SmtpError(f"Failed to send email: {e}") from e

    async def close(self) -> None:
        """Close the session. Safe to call more than once."""
        server, self._server = self._server, None
        if server is None:
            return
        try:
            await asyncio.to_thread(server.quit)
        except (smtplib.SMTPException, OSError):
            # Server already gone; drop the socket.
            server.close()
        logger.debug("Closed SMTP session to %s", self._settings["host"])
