"""MailiskClient - Main entry point for Mailisk SDK."""

from __future__ import annotations

import logging
from typing import Any

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LOOKBACK_SECONDS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
)
from .http import ApiClient
from .smtp import VirtualSmtpTransport
from .types import (
    BasicAuth,
    ClientConfig,
    GetAttachmentResponse,
    ListNamespacesResponse,
    ListSmsNumbersResponse,
    LongPollPolicy,
    RequestOptions,
    SearchInboxParams,
    SearchInboxResponse,
    SearchSmsMessagesParams,
    SearchSmsMessagesResponse,
    SendVirtualEmailParams,
    SendVirtualSmsParams,
    SmtpSettingsResponse,
)

logger = logging.getLogger("mailisk")


class MailiskClient:
    """Main client for interacting with the Mailisk API.

    Example:
        ```python
        async with MailiskClient(api_key="your-api-key") as client:
            result = await client.search_inbox("mynamespace")
            for email in result["data"]:
                print(email["subject"])
        ```
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str | None = None,
        auth: BasicAuth | None = None,
        timeout: int = DEFAULT_TIMEOUT_MS,
        lookback_seconds: int = DEFAULT_LOOKBACK_SECONDS,
        wait_timeout: int = DEFAULT_WAIT_TIMEOUT_MS,
        max_redirects: int = DEFAULT_MAX_REDIRECTS,
    ) -> None:
        """Initialize the Mailisk client.

        Args:
            api_key: API key for authentication.
            base_url: Base URL for the API server (default: https://api.mailisk.com/).
            auth: Optional basic-auth credentials sent with every API request.
            timeout: Default HTTP request timeout in milliseconds.
            lookback_seconds: Default search window for inbox and SMS searches
                (default: 900).
            wait_timeout: Request timeout in milliseconds for waiting searches
                (default: 300000).
            max_redirects: Redirect ceiling for searches (default: 99999).
        """
        self._config = ClientConfig(
            api_key=api_key,
            base_url=base_url or DEFAULT_BASE_URL,
            auth=auth,
            timeout=timeout,
        )
        self._long_poll = LongPollPolicy(
            lookback_seconds=lookback_seconds,
            max_wait=wait_timeout,
            max_redirects=max_redirects,
        )
        self._api_client = ApiClient(self._config, self._long_poll)

    async def __aenter__(self) -> MailiskClient:
        """Enter async context manager."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Exit async context manager."""
        await self.close()

    async def close(self) -> None:
        """Close the client and release its HTTP connections."""
        await self._api_client.close()

    async def list_namespaces(self) -> ListNamespacesResponse:
        """List all namespaces that belong to the current account (API key)."""
        return await self._api_client.list_namespaces()

    async def search_inbox(
        self,
        namespace: str,
        params: SearchInboxParams | None = None,
        options: RequestOptions | None = None,
    ) -> SearchInboxResponse:
        """Search the inbox of a namespace.

        By default this waits: the call does not return until at least one
        email matches or 5 minutes pass. It also only looks at emails
        received in the last 15 minutes. Pass ``wait=False`` or an explicit
        ``from_timestamp`` in ``params`` to change either.

        Example:
            ```python
            # Latest emails for one address
            result = await client.search_inbox(
                namespace, SearchInboxParams(to_addr_prefix="john@mynamespace.mailisk.net")
            )

            # Last 20 emails in the namespace, without waiting
            result = await client.search_inbox(
                namespace, SearchInboxParams(wait=False, from_timestamp=0, limit=20)
            )
            ```

        Args:
            namespace: The namespace to search.
            params: Search filters.
            options: Per-request timeout and redirect overrides.

        Returns:
            The server's response: ``total_count``, ``options`` and ``data``.
        """
        return await self._api_client.search_inbox(namespace, params, options)

    async def search_sms_messages(
        self,
        phone_number: str,
        params: SearchSmsMessagesParams | None = None,
        options: RequestOptions | None = None,
    ) -> SearchSmsMessagesResponse:
        """Search SMS messages sent to a phone number.

        Waits and filters by date the same way as ``search_inbox``.

        Args:
            phone_number: The receiving phone number.
            params: Search filters.
            options: Per-request timeout and redirect overrides.

        Returns:
            The server's response: ``total_count``, ``options`` and ``data``.
        """
        return await self._api_client.search_sms_messages(phone_number, params, options)

    async def list_sms_numbers(self) -> ListSmsNumbersResponse:
        """List all SMS phone numbers associated with the current account."""
        return await self._api_client.list_sms_numbers()

    async def send_virtual_sms(self, params: SendVirtualSmsParams) -> None:
        """Send a virtual SMS to one of the account's phone numbers."""
        await self._api_client.send_virtual_sms(params)

    async def get_smtp_settings(self, namespace: str) -> SmtpSettingsResponse:
        """Get the SMTP settings for a namespace."""
        return await self._api_client.get_smtp_settings(namespace)

    async def send_virtual_email(self, namespace: str, params: SendVirtualEmailParams) -> None:
        """Send an email using the virtual SMTP.

        These emails can only be sent to valid Mailisk namespaces, i.e.
        addresses ending in @mynamespace.mailisk.net. The recipient is not
        checked client-side.

        Example:
            ```python
            await client.send_virtual_email(
                namespace,
                SendVirtualEmailParams(
                    from_address="test@example.com",
                    to=f"john@{namespace}.mailisk.net",
                    subject="This is a test",
                    text="Testing",
                ),
            )
            ```

        Args:
            namespace: Namespace whose SMTP relay is used.
            params: The email to send.

        Raises:
            SmtpError: If the relay refuses the connection or the message.
        """
        settings = await self._api_client.get_smtp_settings(namespace)
        async with VirtualSmtpTransport(settings["data"], timeout=self._config.timeout) as transport:
            await transport.send(params)
        logger.debug("Sent virtual email to %s via namespace %s", params.to, namespace)

    async def get_attachment(self, attachment_id: str) -> GetAttachmentResponse:
        """Get attachment metadata, including a short-lived ``download_url``."""
        return await self._api_client.get_attachment(attachment_id)

    async def download_attachment(self, attachment_id: str) -> bytes:
        """Download an attachment.

        Example:
            ```python
            attachment = email["attachments"][0]
            content = await client.download_attachment(attachment["id"])
            Path(attachment["filename"]).write_bytes(content)
            ```

        Args:
            attachment_id: The attachment ID.

        Returns:
            The raw attachment content.
        """
        return await self._api_client.download_attachment(attachment_id)
