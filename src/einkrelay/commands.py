#!/usr/bin/env python3
"""Commands exposed to the editor UI.

These are plain pass-throughs: the document accessors delegate to the
store, the toggles delegate to the mode flags. Neither adds locking of its
own.
"""

from __future__ import annotations

import logging
import socket
from dataclasses import dataclass, field

from einkrelay.producer_mode import ModeFlags
from einkrelay.protocol import BOOTSTRAP_PATH
from einkrelay.server_socket import SERVER_PORT
from einkrelay.store import ContentStore

logger = logging.getLogger(__name__)


@dataclass
class RelayState:
    """Everything the UI commands operate on.

    Attributes:
        store: The shared document store.
        modes: Clipboard producer mode flags.
    """

    store: ContentStore = field(default_factory=ContentStore)
    modes: ModeFlags = field(default_factory=ModeFlags)


def get_text(state: RelayState) -> str:
    """Return the current document."""
    return state.store.read()


def set_text(state: RelayState, new_text: str) -> None:
    """Replace the document."""
    state.store.write(new_text)


def set_send_on_copy(state: RelayState, enabled: bool) -> None:
    """Toggle replacing the document with each new clipboard text."""
    state.modes.set_replace_document(enabled)


def set_add_to_editor_on_copy(state: RelayState, enabled: bool) -> None:
    """Toggle appending each new clipboard text in the editor."""
    state.modes.set_append_notify(enabled)


def set_clipboard_monitoring(state: RelayState, enabled: bool) -> None:
    """Older name for set_send_on_copy."""
    set_send_on_copy(state, enabled)


def get_local_ip_address() -> str | None:
    """
    Find the address this machine uses on the local network.

    Connecting a UDP socket sends nothing; it only selects the outgoing
    interface, whose address is then read back.

    Returns:
        The non-loopback IPv4 address, or None if it cannot be determined.
    """
    sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
    try:
        sock.connect(("10.255.255.255", 1))
        address = sock.getsockname()[0]
    except OSError as e:
        logger.debug("Local address lookup failed: %s", e)
        return None
    finally:
        sock.close()
    if address.startswith("127.") or address == "0.0.0.0":
        return None
    return address


def get_server_info(port: int = SERVER_PORT) -> str:
    """Describe where to open the reader page."""
    address = get_local_ip_address()
    if address is None:
        return "Could not determine the IP address. Check the network connection."
    return f"Open on the reader: http://{address}:{port}{BOOTSTRAP_PATH}"
