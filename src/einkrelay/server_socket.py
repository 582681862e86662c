#!/usr/bin/env python3
"""Server socket utilities for eink-relay.

This module provides utility functions for the TCP socket the distribution
server listens on, including:
- Binding the listening socket before the server starts
- Printing the startup message with the reader URL
"""

from __future__ import annotations

import socket
import sys

# The port on which the web server listens.
SERVER_PORT: int = 5001

# Bind on all interfaces so readers on the LAN can connect.
SERVER_HOST: str = "0.0.0.0"


class BindFailure(OSError):
    """
    Exception raised when the listening socket cannot be bound.

    Fatal to the distribution server only; the rest of the process keeps
    running.
    """

    pass


def bind_listening_socket(host: str, port: int) -> socket.socket:
    """Create, bind and listen on a TCP socket.

    Args:
        host: Interface address to bind.
        port: TCP port to bind.

    Returns:
        The bound, listening socket.

    Raises:
        BindFailure: If the address is in use or cannot be bound.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
        sock.listen(socket.SOMAXCONN)
    except OSError as e:
        sock.close()
        raise BindFailure(f"Failed to bind to address {host}:{port}: {e}") from e
    return sock


def print_startup_message(port: int, server_info: str) -> None:
    """Print server startup message to stderr.

    Args:
        port: TCP port the server listens on.
        server_info: Where to open the reader page, as reported by
            get_server_info().
    """
    print(f"E-Ink server listening on port {port}.", file=sys.stderr)
    print(server_info, file=sys.stderr)
