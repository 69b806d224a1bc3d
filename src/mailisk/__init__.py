"""Mailisk Python SDK.

An async Python client for Mailisk - email and SMS testing with
namespaced inboxes, long-polling search and a virtual SMTP relay.

Example:
    ```python
    import asyncio
    from mailisk import MailiskClient, SendVirtualEmailParams

    async def main():
        async with MailiskClient(api_key="your-api-key") as client:
            await client.send_virtual_email(
                "mynamespace",
                SendVirtualEmailParams(
                    from_address="test@example.com",
                    to="john@mynamespace.mailisk.net",
                    subject="Hello",
                    text="Testing",
                ),
            )

            # Waits until the email arrives (up to 5 minutes)
            result = await client.search_inbox("mynamespace")
            print(result["data"][0]["subject"])

    asyncio.run(main())
    ```
"""

from .client import MailiskClient
from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LOOKBACK_SECONDS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
)
from .errors import ApiError, MailiskError, NetworkError, SmtpError, TimeoutError
from .smtp import VirtualSmtpTransport
from .types import (
    AttachmentMetadata,
    BasicAuth,
    ClientConfig,
    Email,
    EmailAddress,
    EmailAttachmentRef,
    GetAttachmentResponse,
    ListNamespacesResponse,
    ListSmsNumbersResponse,
    LongPollPolicy,
    Namespace,
    OutgoingAttachment,
    RequestOptions,
    SearchInboxParams,
    SearchInboxResponse,
    SearchSmsMessagesParams,
    SearchSmsMessagesResponse,
    SendVirtualEmailParams,
    SendVirtualSmsParams,
    SmsMessage,
    SmsNumber,
    SmtpSettings,
    SmtpSettingsResponse,
)

__version__ = "0.1.0"

__all__ = [
    # Main classes
    "MailiskClient",
    "VirtualSmtpTransport",
    # Constants
    "DEFAULT_BASE_URL",
    "DEFAULT_TIMEOUT_MS",
    "DEFAULT_LOOKBACK_SECONDS",
    "DEFAULT_WAIT_TIMEOUT_MS",
    "DEFAULT_MAX_REDIRECTS",
    # Configuration
    "BasicAuth",
    "ClientConfig",
    "LongPollPolicy",
    "RequestOptions",
    # Request parameters
    "OutgoingAttachment",
    "SearchInboxParams",
    "SearchSmsMessagesParams",
    "SendVirtualEmailParams",
    "SendVirtualSmsParams",
    # Response types
    "AttachmentMetadata",
    "Email",
    "EmailAddress",
    "EmailAttachmentRef",
    "GetAttachmentResponse",
    "ListNamespacesResponse",
    "ListSmsNumbersResponse",
    "Namespace",
    "SearchInboxResponse",
    "SearchSmsMessagesResponse",
    "SmsMessage",
    "SmsNumber",
    "SmtpSettings",
    "SmtpSettingsResponse",
    # Errors
    "MailiskError",
    "ApiError",
    "NetworkError",
    "TimeoutError",
    "SmtpError",
    # Version
    "__version__",
]
