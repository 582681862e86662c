#!/usr/bin/env python3
"""Client mode implementation for eink-relay.

The client is a terminal reader: it polls a running server exactly the way
the reader page does and prints the rendered document every time its
fingerprint changes.

See client_retry.py for polling and reconnection.
"""

from __future__ import annotations

import click

from einkrelay.client_constants import POLL_INTERVAL
from einkrelay.client_retry import run_client_with_retry
from einkrelay.poll_state import PollClientState


def print_document(markup: str) -> None:
    """Print rendered markup followed by a separator line."""
    click.echo(markup, nl=False)
    click.echo("-" * 40)


async def run_client(base_url: str, interval: float = POLL_INTERVAL) -> None:
    """Run client mode against a server.

    Args:
        base_url: Server base URL, e.g. http://192.168.1.5:5001.
        interval: Seconds between polls.
    """
    state = PollClientState()
    await run_client_with_retry(base_url, state, print_document, interval)
