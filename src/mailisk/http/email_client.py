"""Email API client for Mailisk SDK."""

from __future__ import annotations

from typing import cast

from ..long_poll import resolve_inbox_query, resolve_request_options
from ..types import RequestOptions, SearchInboxParams, SearchInboxResponse
from .base_client import BaseApiClient, encode_path_segment


class EmailApiClient(BaseApiClient):
    """API client for searching namespace inboxes."""

    async def search_inbox(
        self,
        namespace: str,
        params: SearchInboxParams | None = None,
        options: RequestOptions | None = None,
    ) -> SearchInboxResponse:
        """Search the inbox of a namespace.

        Args:
            namespace: The namespace name.
            params: Search filters.
            options: Transport overrides.

        Returns:
            The search response body.
        """
        query = resolve_inbox_query(params, self.long_poll)
        resolved = resolve_request_options(query["wait"], options, self.long_poll)
        encoded = encode_path_segment(namespace)
        response = await self._request(
            "GET", f"api/emails/{encoded}/inbox", params=query, options=resolved
        )
        return cast(SearchInboxResponse, response.json())
