"""Error hierarchy for Mailisk SDK."""

from __future__ import annotations


class MailiskError(Exception):
    """Base exception for all Mailisk SDK errors."""

    pass


class ApiError(MailiskError):
    """HTTP API error with status code.

    Attributes:
        status_code: The HTTP status code.
        message: The error message.
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"API Error ({status_code}): {message}")


class NetworkError(MailiskError):
    """Network communication failure."""

    pass


class TimeoutError(MailiskError):
    """Request timeout.

    Raised when a long-poll search outlives its wait window as well as
    for ordinary slow requests.
    """

    pass


class SmtpError(MailiskError):
    """Virtual SMTP connection or submission failure."""

    pass
