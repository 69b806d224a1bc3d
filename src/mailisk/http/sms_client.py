"""SMS API client for Mailisk SDK."""

from __future__ import annotations

from dataclasses import asdict
from typing import cast

from ..long_poll import resolve_request_options, resolve_sms_query
from ..types import (
    ListSmsNumbersResponse,
    RequestOptions,
    SearchSmsMessagesParams,
    SearchSmsMessagesResponse,
    SendVirtualSmsParams,
)
from .base_client import BaseApiClient, encode_path_segment


class SmsApiClient(BaseApiClient):
    """API client for SMS operations.

    Provides methods for searching messages, listing numbers and sending
    virtual SMS.
    """

    async def search_sms_messages(
        self,
        phone_number: str,
        params: SearchSmsMessagesParams | None = None,
        options: RequestOptions | None = None,
    ) -> SearchSmsMessagesResponse:
        """Search SMS messages sent to a phone number.

        Args:
            phone_number: The receiving phone number.
            params: Search filters.
            options: Transport overrides.

        Returns:
            The search response body.
        """
        query = resolve_sms_query(params, self.long_poll)
        resolved = resolve_request_options(query["wait"], options, self.long_poll)
        encoded = encode_path_segment(phone_number)
        response = await self._request(
            "GET", f"api/sms/{encoded}/messages", params=query, options=resolved
        )
        return cast(SearchSmsMessagesResponse, response.json())

    async def list_sms_numbers(self) -> ListSmsNumbersResponse:
        """List all SMS phone numbers of the account.

        Returns:
            The SMS numbers response body.
        """
        response = await self._request("GET", "api/sms/numbers")
        return cast(ListSmsNumbersResponse, response.json())

    async def send_virtual_sms(self, params: SendVirtualSmsParams) -> None:
        """Send a virtual SMS.

        Args:
            params: Sender, recipient and body.
        """
        await self._request("POST", "api/sms/virtual", json=asdict(params))
