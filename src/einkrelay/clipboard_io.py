"""X11 clipboard sampling.

This module provides the clipboard source the producer samples. The source
requests the CLIPBOARD selection as UTF8_STRING from its current owner and
returns the decoded text.

Every way a sample can fail to produce text (no owner, owner refusing the
text target, timeout, incremental transfer, undecodable bytes, empty
content) is reported as ClipboardReadError so the producer can reset its
de-duplication state and try again on the next tick.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Protocol

from Xlib import X

from einkrelay.clipboard import create_hidden_window, open_display
from einkrelay.selection_utils import discard_pending_events, wait_for_event_type

if TYPE_CHECKING:
    from Xlib.display import Display
    from Xlib.xobject.drawable import Window

logger = logging.getLogger(__name__)

# Timeout in seconds for clipboard read operations to prevent hangs
# when the clipboard owner is unresponsive
CLIPBOARD_TIMEOUT: float = 2.0


class ClipboardReadError(Exception):
    """Raised when a clipboard sample does not yield text."""

    pass


class ClipboardSource(Protocol):
    """Anything the producer can sample text from."""

    def open(self) -> None: ...

    async def read_text(self) -> str: ...

    def close(self) -> None: ...


async def read_clipboard_text(
    display: Display,
    window: Window,
    selection_atom: int,
) -> str:
    """Read text content from the current selection owner.

    Requests UTF8_STRING target from the current clipboard owner and returns
    the decoded text. The wait for the answer ends inside the worker thread
    after CLIPBOARD_TIMEOUT, so an unresponsive owner leaves nothing behind
    that could consume the answer to a later request.

    Args:
        display: The X11 display connection.
        window: The window to receive selection data.
        selection_atom: The selection atom to read (normally CLIPBOARD).

    Returns:
        The clipboard text.

    Raises:
        ClipboardReadError: If no text could be read.
    """
    owner = display.get_selection_owner(selection_atom)
    if owner == X.NONE:
        raise ClipboardReadError("Clipboard has no owner")

    utf8_atom = display.intern_atom("UTF8_STRING")
    prop_atom = display.intern_atom("EINKRELAY_SEL")

    discard_pending_events(display)
    window.convert_selection(selection_atom, utf8_atom, prop_atom, X.CurrentTime)
    display.flush()

    event = await asyncio.to_thread(
        wait_for_event_type, display, X.SelectionNotify, CLIPBOARD_TIMEOUT
    )
    if event is None:
        raise ClipboardReadError(
            f"Clipboard read timed out after {CLIPBOARD_TIMEOUT} seconds"
        )

    if event.property == X.NONE:
        raise ClipboardReadError("Clipboard owner has no text content")

    data = _read_selection_property(display, window, prop_atom)
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ClipboardReadError(f"Clipboard content is not valid UTF-8: {e}") from e
    if not text:
        raise ClipboardReadError("Clipboard is empty")
    return text


def _read_selection_property(
    display: "Display", window: "Window", prop_atom: int
) -> bytes:
    """Read and delete selection property from window.

    Args:
        display: The X11 display connection.
        window: The window containing the property.
        prop_atom: The property atom to read.

    Returns:
        Content bytes.

    Raises:
        ClipboardReadError: If the property is missing or uses INCR.
    """
    prop = window.get_full_property(prop_atom, X.AnyPropertyType)
    window.delete_property(prop_atom)
    display.flush()

    if prop is None:
        raise ClipboardReadError("Selection property was empty")
    if prop.property_type == display.intern_atom("INCR"):
        raise ClipboardReadError("Incremental clipboard transfers are not supported")

    data = prop.value
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(data)


class X11ClipboardSource:
    """Samples the X11 CLIPBOARD selection."""

    def __init__(self) -> None:
        self.display: Display | None = None
        self.window: Window | None = None
        self.clipboard_atom = 0

    def open(self) -> None:
        """Connect to the display and create the requestor window.

        Raises:
            ClipboardUnavailable: If no X11 display can be reached.
        """
        self.display = open_display()
        self.window = create_hidden_window(self.display)
        self.clipboard_atom = self.display.intern_atom("CLIPBOARD")

    async def read_text(self) -> str:
        """Sample the clipboard once.

        Raises:
            ClipboardReadError: If the sample did not yield text.
        """
        if self.display is None or self.window is None:
            raise ClipboardReadError("Clipboard source is not open")
        try:
            return await read_clipboard_text(self.display, self.window, self.clipboard_atom)
        except ClipboardReadError:
            raise
        except Exception as e:
            raise ClipboardReadError(f"Clipboard read failed: {e}") from e

    def close(self) -> None:
        if self.display is not None:
            self.display.close()
            self.display = None
            self.window = None
