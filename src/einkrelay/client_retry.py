#!/usr/bin/env python3
"""Poll loop and retry logic for the terminal client.

This module provides the polling loop with automatic retry using tenacity
for exponential backoff when the server is unreachable.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx
from tenacity import retry, retry_if_exception_type, stop_never, wait_exponential

from einkrelay.client_constants import INITIAL_WAIT, MAX_WAIT, POLL_INTERVAL, REQUEST_TIMEOUT, WAIT_MULTIPLIER
from einkrelay.hashing import is_error_hash
from einkrelay.poll_state import PollClientState
from einkrelay.protocol import CONTENT_PATH, ContentResponse

logger = logging.getLogger(__name__)


async def fetch_content(client: httpx.AsyncClient, base_url: str) -> ContentResponse:
    """Poll the server once.

    Error payloads (status 500) are returned like any other response; they
    carry a body with an error fingerprint.

    Args:
        client: HTTP client to poll with.
        base_url: Server base URL, e.g. http://192.168.1.5:5001.

    Returns:
        The polled ContentResponse.

    Raises:
        ConnectionError: If the server cannot be reached or answers with
            something other than a content payload.
    """
    url = base_url.rstrip("/") + CONTENT_PATH
    try:
        response = await client.get(url, timeout=REQUEST_TIMEOUT)
    except httpx.TransportError as e:
        raise ConnectionError(f"Failed to poll {url}: {e}") from e
    try:
        return ContentResponse.model_validate(response.json())
    except ValueError as e:
        raise ConnectionError(
            f"Unexpected response from {url} (status {response.status_code}): {e}"
        ) from e


async def poll_once(
    client: httpx.AsyncClient,
    base_url: str,
    state: PollClientState,
    on_change: Callable[[str], None],
) -> bool:
    """Poll once and hand the markup to on_change if it changed.

    Returns:
        True if on_change was called.
    """
    content = await fetch_content(client, base_url)
    if not state.has_changed(content.hash):
        return False
    if is_error_hash(content.hash):
        logger.warning("Server reported an error, will poll again")
    else:
        logger.debug("Document changed, hash %s", content.hash)
    state.record(content.hash)
    on_change(content.html)
    return True


@retry(
    wait=wait_exponential(
        multiplier=WAIT_MULTIPLIER,
        min=INITIAL_WAIT,
        max=MAX_WAIT,
    ),
    retry=retry_if_exception_type((ConnectionError, OSError)),
    stop=stop_never,
)
async def run_client_with_retry(
    base_url: str,
    state: PollClientState,
    on_change: Callable[[str], None],
    interval: float = POLL_INTERVAL,
) -> None:
    """Poll the server forever, reconnecting with backoff on failure.

    Clears the poll state on each attempt so the first successful poll
    after a reconnect is always shown.

    Args:
        base_url: Server base URL.
        state: The client's fingerprint state.
        on_change: Called with the markup whenever the document changed.
        interval: Seconds between polls.

    Note:
        This function never returns normally - it either runs forever
        or raises an exception that doesn't trigger retry.
    """
    state.clear()

    logger.debug("Polling %s", base_url)
    async with httpx.AsyncClient() as client:
        while True:
            try:
                await poll_once(client, base_url, state, on_change)
            except ConnectionError as e:
                logger.warning("Poll failed: %s, will retry", e)
                raise
            await asyncio.sleep(interval)
