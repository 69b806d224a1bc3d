"""HTTP client for Mailisk SDK.

This module provides HTTP clients for the Mailisk API:
- ApiClient: Unified client with all operations
- BaseApiClient: Common HTTP operations
- NamespaceApiClient: Namespaces and SMTP settings
- EmailApiClient: Inbox search
- SmsApiClient: SMS search, numbers and virtual SMS
- AttachmentApiClient: Attachment metadata and download
"""

from .api_client import ApiClient
from .attachment_client import AttachmentApiClient
from .base_client import BaseApiClient, encode_path_segment
from .email_client import EmailApiClient
from .namespace_client import NamespaceApiClient
from .sms_client import SmsApiClient

__all__ = [
    "ApiClient",
    "AttachmentApiClient",
    "BaseApiClient",
    "EmailApiClient",
    "NamespaceApiClient",
    "SmsApiClient",
    "encode_path_segment",
]
