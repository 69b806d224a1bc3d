"""Request defaults for the waiting search endpoints.

Inbox and SMS searches default to a recent time window and ask the
server to hold the request open until something matches. The client
side of that contract is a long request timeout and a generous redirect
ceiling, since the server keeps a pending wait alive by redirecting.
"""

from __future__ import annotations

import logging
import math
import time
from dataclasses import asdict
from datetime import datetime, timedelta, timezone
from typing import Any

from .types import LongPollPolicy, RequestOptions, SearchInboxParams, SearchSmsMessagesParams
from .utils import to_iso_timestamp

logger = logging.getLogger("mailisk")


def _compact(values: dict[str, Any]) -> dict[str, Any]:
    """Drop unset filters so they are omitted from the query string."""
    return {key: value for key, value in values.items() if value is not None}


def _resolve_wait(wait: bool | None) -> bool:
    # Only an explicit False turns waiting off.
    return wait is not False


def resolve_inbox_query(
    params: SearchInboxParams | None,
    policy: LongPollPolicy,
    *,
    now: float | None = None,
) -> dict[str, Any]:
    """Build the query for an inbox search.

    Args:
        params: Caller supplied filters.
        policy: Long-poll defaults.
        now: Current unix time in seconds. Defaults to ``time.time()``.

    Returns:
        Query parameters with ``from_timestamp`` and ``wait`` resolved.
    """
    query = asdict(params) if params is not None else {}

    if query.get("from_timestamp") is None:
        current = time.time() if now is None else now
        query["from_timestamp"] = math.floor(current) - policy.lookback_seconds

    query["wait"] = _resolve_wait(query.get("wait"))
    return _compact(query)


def resolve_sms_query(
    params: SearchSmsMessagesParams | None,
    policy: LongPollPolicy,
    *,
    now: datetime | None = None,
) -> dict[str, Any]:
    """Build the query for an SMS search.

    Args:
        params: Caller supplied filters.
        policy: Long-poll defaults.
        now: Current time. Defaults to ``datetime.now(timezone.utc)``.

    Returns:
        Query parameters with ``from_date`` and ``wait`` resolved and all
        dates rendered as ISO 8601 strings.
    """
    query = asdict(params) if params is not None else {}

    if query.get("from_date") is None:
        current = datetime.now(timezone.utc) if now is None else now
        query["from_date"] = current - timedelta(seconds=policy.lookback_seconds)

    for key in ("from_date", "to_date"):
        if isinstance(query.get(key), datetime):
            query[key] = to_iso_timestamp(query[key])

    query["wait"] = _resolve_wait(query.get("wait"))
    return _compact(query)


def resolve_request_options(
    wait: bool,
    options: RequestOptions | None,
    policy: LongPollPolicy,
) -> RequestOptions:
    """Fill in transport overrides for a search request.

    The redirect ceiling always defaults to the policy value. The timeout
    is only raised to the policy's wait window when the request waits;
    otherwise it is left to the client default.

    Args:
        wait: The resolved ``wait`` flag of the query.
        options: Caller supplied overrides.
        policy: Long-poll defaults.

    Returns:
        The resolved options.
    """
    options = options or RequestOptions()

    max_redirects = options.max_redirects
    if max_redirects is None:
        max_redirects = policy.max_redirects

    timeout = options.timeout
    if wait and timeout is None:
        timeout = policy.max_wait

    resolved = RequestOptions(timeout=timeout, max_redirects=max_redirects)
    logger.debug("Resolved search options: wait=%s %s", wait, resolved)
    return resolved
