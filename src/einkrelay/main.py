"""CLI handling for eink-relay.

This module provides the command-line interface for eink-relay, handling
argument parsing via click, logging configuration, and dispatching to server
or client mode based on user-specified options.

Usage:
    eink-relay --server [--host HOST] [--port PORT] [--mode off|replace|append] [--verbose]
    eink-relay --client URL [--verbose]
"""

import click
import sys

from einkrelay.client_constants import POLL_INTERVAL
from einkrelay.main_logging import configure_logging
from einkrelay.main_options import MutuallyExclusiveOption, require_one_of
from einkrelay.producer import SAMPLE_INTERVAL
from einkrelay.producer_mode import ProducerMode
from einkrelay.server_socket import SERVER_HOST, SERVER_PORT


@click.command()
@click.option(
    "--server",
    is_flag=True,
    cls=MutuallyExclusiveOption,
    exclusive_with=["client"],
    help="Serve the document to e-ink readers",
)
@click.option(
    "--client",
    metavar="URL",
    cls=MutuallyExclusiveOption,
    exclusive_with=["server"],
    help="Poll a running server and print document changes",
)
@click.option("--host", default=SERVER_HOST, show_default=True, help="Interface to listen on")
@click.option("--port", default=SERVER_PORT, show_default=True, type=int, help="Port to listen on")
@click.option(
    "--mode",
    type=click.Choice([mode.value for mode in ProducerMode]),
    default=ProducerMode.DISABLED.value,
    show_default=True,
    help="What to do with copied text: ignore it, replace the document, or append to it",
)
@click.option(
    "--interval",
    type=float,
    default=None,
    help=f"Seconds between clipboard samples (server, default {SAMPLE_INTERVAL}) "
    f"or polls (client, default {POLL_INTERVAL})",
)
@click.option(
    "--verbose",
    is_flag=True,
    help="Enable DEBUG-level logging",
)
def main(
    server: bool,
    client: str | None,
    host: str,
    port: int,
    mode: str,
    interval: float | None,
    verbose: bool,
) -> None:
    """Relay a Markdown document from the clipboard or an editor to e-ink readers."""
    require_one_of(server=server, client=client)
    if interval is not None and interval <= 0:
        raise click.UsageError("--interval must be positive")

    configure_logging(verbose, server)

    if server:
        _run_server_mode(host, port, ProducerMode(mode), interval or SAMPLE_INTERVAL)
    else:
        _run_client_mode(client, interval or POLL_INTERVAL)


def _run_server_mode(host: str, port: int, mode: ProducerMode, interval: float) -> None:
    """Run the distribution server with the clipboard producer alongside.

    Args:
        host: Interface address to listen on.
        port: TCP port to listen on.
        mode: Initial clipboard producer mode.
        interval: Seconds between clipboard samples.
    """
    from einkrelay.clipboard_io import X11ClipboardSource
    from einkrelay.commands import RelayState, get_server_info
    from einkrelay.editor import AppendingEditor
    from einkrelay.producer import ProducerGateway
    from einkrelay.producer_mode import ModeFlags
    from einkrelay.server import run_server
    from einkrelay.server_socket import print_startup_message

    state = RelayState(modes=ModeFlags(mode))
    gateway = ProducerGateway(
        state.store,
        state.modes,
        X11ClipboardSource(),
        AppendingEditor(state.store),
        interval,
    )
    # Always running; tick() idles while the mode is off
    gateway.start()

    print_startup_message(port, get_server_info(port))
    try:
        served = run_server(state.store, host, port)
    finally:
        gateway.stop(timeout=interval * 4)
    if not served:
        click.echo(f"Error: could not listen on {host}:{port}", err=True)
        sys.exit(1)


def _run_client_mode(base_url: str, interval: float) -> None:
    """Run client mode until interrupted.

    Args:
        base_url: Server base URL.
        interval: Seconds between polls.
    """
    import asyncio
    from einkrelay.client import run_client

    try:
        asyncio.run(run_client(base_url, interval))
    except KeyboardInterrupt:
        pass
