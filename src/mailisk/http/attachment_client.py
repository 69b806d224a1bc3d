"""Attachment API client for Mailisk SDK."""

from __future__ import annotations

import logging
from typing import cast

from ..types import GetAttachmentResponse
from .base_client import BaseApiClient, encode_path_segment

logger = logging.getLogger("mailisk")


class AttachmentApiClient(BaseApiClient):
    """API client for email attachments."""

    async def get_attachment(self, attachment_id: str) -> GetAttachmentResponse:
        """Get attachment metadata, including a short-lived download URL.

        Args:
            attachment_id: The attachment ID.

        Returns:
            The attachment response body.
        """
        encoded = encode_path_segment(attachment_id)
        response = await self._request("GET", f"api/attachments/{encoded}")
        return cast(GetAttachmentResponse, response.json())

    async def download_attachment(self, attachment_id: str) -> bytes:
        """Download the content of an attachment.

        Fetches the metadata, then downloads ``download_url`` directly.
        Neither the URL nor the content is cached.

        Args:
            attachment_id: The attachment ID.

        Returns:
            The raw attachment bytes.
        """
        result = await self.get_attachment(attachment_id)
        content = await self._fetch_url(result["data"]["download_url"])
        logger.debug("Downloaded attachment %s (%d bytes)", attachment_id, len(content))
        return content
