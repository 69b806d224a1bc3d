"""Namespace API client for Mailisk SDK."""

from __future__ import annotations

from typing import cast

from ..types import ListNamespacesResponse, SmtpSettingsResponse
from .base_client import BaseApiClient, encode_path_segment


class NamespaceApiClient(BaseApiClient):
    """API client for namespace operations."""

    async def list_namespaces(self) -> ListNamespacesResponse:
        """List all namespaces that belong to the API key's account.

        Returns:
            The namespaces response body.
        """
        response = await self._request("GET", "api/namespaces")
        return cast(ListNamespacesResponse, response.json())

    async def get_smtp_settings(self, namespace: str) -> SmtpSettingsResponse:
        """Get the virtual SMTP settings for a namespace.

        Settings are fetched on every call and never cached.

        Args:
            namespace: The namespace name.

        Returns:
            The SMTP settings response body.
        """
        encoded = encode_path_segment(namespace)
        response = await self._request("GET", f"api/smtp/{encoded}")
        return cast(SmtpSettingsResponse, response.json())
