"""Type definitions for Mailisk SDK."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, TypedDict

from .constants import (
    DEFAULT_BASE_URL,
    DEFAULT_LOOKBACK_SECONDS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TIMEOUT_MS,
    DEFAULT_WAIT_TIMEOUT_MS,
)


@dataclass(frozen=True)
class BasicAuth:
    """HTTP basic-auth credentials sent alongside the API key.

    Attributes:
        username: Basic-auth user name.
        password: Basic-auth password.
    """

    username: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for MailiskClient.

    Attributes:
        api_key: API key for authentication.
        base_url: Base URL for the API server.
        auth: Optional basic-auth credentials layered on every API request.
        timeout: Default HTTP request timeout in milliseconds.
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    auth: BasicAuth | None = None
    timeout: int = DEFAULT_TIMEOUT_MS


@dataclass(frozen=True)
class LongPollPolicy:
    """Defaults applied to the waiting search endpoints.

    Attributes:
        lookback_seconds: How far back the default search window starts.
        max_wait: Request timeout in milliseconds used while waiting for mail.
        max_redirects: Redirect ceiling for search requests. The server
            answers a pending wait by redirecting back to itself.
    """

    lookback_seconds: int = DEFAULT_LOOKBACK_SECONDS
    max_wait: int = DEFAULT_WAIT_TIMEOUT_MS
    max_redirects: int = DEFAULT_MAX_REDIRECTS


@dataclass(frozen=True)
class RequestOptions:
    """Per-request transport overrides.

    Attributes:
        timeout: Request timeout in milliseconds. None uses the default.
        max_redirects: Maximum redirects to follow. None uses the default.
    """

    timeout: int | None = None
    max_redirects: int | None = None


@dataclass
class SearchInboxParams:
    """Filters for searching a namespace inbox.

    Attributes:
        limit: Maximum number of emails returned, used with ``offset`` for pagination.
        offset: Number of emails to skip, used with ``limit`` for pagination.
        from_timestamp: Starting unix timestamp in seconds.
            Defaults to 15 minutes before the request.
        to_timestamp: Ending unix timestamp in seconds.
        to_addr_prefix: 'to' address must start with this.
        from_addr_includes: 'from' address must include this.
        subject_includes: Subject must include this (case insensitive).
        wait: Keep the request open until at least one email matches.
            Anything other than an explicit False is treated as True.
    """

    limit: int | None = None
    offset: int | None = None
    from_timestamp: int | None = None
    to_timestamp: int | None = None
    to_addr_prefix: str | None = None
    from_addr_includes: str | None = None
    subject_includes: str | None = None
    wait: bool | None = None


@dataclass
class SearchSmsMessagesParams:
    """Filters for searching SMS messages sent to a phone number.

    Attributes:
        limit: Maximum number of messages returned.
        offset: Number of messages to skip.
        body: Message body must include this.
        from_number: Sender phone number.
        from_date: Earliest message date (ISO 8601 string or datetime).
            Defaults to 15 minutes before the request.
        to_date: Latest message date (ISO 8601 string or datetime).
        wait: Keep the request open until at least one message matches.
    """

    limit: int | None = None
    offset: int | None = None
    body: str | None = None
    from_number: str | None = None
    from_date: str | datetime | None = None
    to_date: str | datetime | None = None
    wait: bool | None = None


@dataclass
class OutgoingAttachment:
    """Attachment for an email sent through the virtual SMTP.

    Attributes:
        filename: File name shown to the recipient.
        content: Raw bytes, or text encoded as UTF-8.
        content_type: MIME type of the content.
    """

    filename: str
    content: bytes | str
    content_type: str = "application/octet-stream"


@dataclass
class SendVirtualEmailParams:
    """Email to inject into a namespace through the virtual SMTP.

    Attributes:
        from_address: Sender of the email.
        to: Recipient(s). Must belong to the namespace, e.g.
            'john@mynamespace.mailisk.net'.
        subject: Subject line.
        text: Plain text body.
        html: HTML body.
        headers: Extra message headers.
        attachments: Files to attach.
    """

    from_address: str
    to: str | list[str]
    subject: str
    text: str | None = None
    html: str | None = None
    headers: dict[str, str] | None = None
    attachments: list[OutgoingAttachment] = field(default_factory=list)


@dataclass
class SendVirtualSmsParams:
    """SMS to inject through the virtual SMS endpoint.

    Attributes:
        from_number: Sender phone number.
        to_number: Recipient phone number, must be one of the account's numbers.
        body: Message text.
    """

    from_number: str
    to_number: str
    body: str


# Server response shapes. Bodies are returned exactly as received.


class EmailAddress(TypedDict, total=False):
    """Email address with optional display name."""

    address: str
    name: str


class EmailAttachmentRef(TypedDict, total=False):
    """Attachment reference embedded in an email."""

    id: str
    filename: str
    content_type: str
    size: int


# 'from' is a keyword, so the email shape uses the functional syntax.
Email = TypedDict(
    "Email",
    {
        "id": str,
        "from": EmailAddress,
        "to": list[EmailAddress],
        "cc": list[EmailAddress],
        "bcc": list[EmailAddress],
        "subject": str,
        "html": str,
        "text": str,
        "received_date": str,
        "received_timestamp": int,
        "expires_timestamp": int,
        "spam_score": float,
        "attachments": list[EmailAttachmentRef],
    },
    total=False,
)


class SearchInboxResponse(TypedDict):
    """Inbox search result.

    ``options`` echoes the parameters the server used for the query.
    """

    total_count: int
    options: dict[str, Any]
    data: list[Email]


class SmsMessage(TypedDict, total=False):
    """SMS message received by a phone number."""

    id: str
    sms_phone_number_id: str
    body: str
    from_number: str
    to_number: str
    provider_message_id: str
    provider_created_at: str
    created_at: str
    direction: str


class SearchSmsMessagesResponse(TypedDict):
    """SMS search result."""

    total_count: int
    options: dict[str, Any]
    data: list[SmsMessage]


class SmsNumber(TypedDict, total=False):
    """Phone number registered to the account."""

    id: str
    organisation_id: str
    status: str
    country: str
    phone_number: str
    created_at: str
    updated_at: str


class ListSmsNumbersResponse(TypedDict, total=False):
    total_count: int
    data: list[SmsNumber]


class Namespace(TypedDict):
    id: str
    namespace: str


class ListNamespacesResponse(TypedDict, total=False):
    total_count: int
    data: list[Namespace]


class SmtpSettings(TypedDict):
    """Credentials for a namespace's virtual SMTP relay."""

    host: str
    port: int
    username: str
    password: str


class SmtpSettingsResponse(TypedDict):
    data: SmtpSettings


class AttachmentMetadata(TypedDict, total=False):
    """Attachment metadata.

    ``download_url`` is short-lived and pre-authorised; it is fetched
    without the API key.
    """

    id: str
    filename: str
    content_type: str
    size: int
    expires_at: str
    download_url: str


class GetAttachmentResponse(TypedDict):
    data: AttachmentMetadata
