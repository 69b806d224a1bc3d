"""Unified HTTP API client for Mailisk SDK."""

from __future__ import annotations

from .attachment_client import AttachmentApiClient
from .email_client import EmailApiClient
from .namespace_client import NamespaceApiClient
from .sms_client import SmsApiClient


class ApiClient(NamespaceApiClient, EmailApiClient, SmsApiClient, AttachmentApiClient):
    """HTTP client exposing every Mailisk API operation.

    All domain clients share one BaseApiClient state, so a single set of
    underlying httpx clients serves every endpoint.
    """
