"""X11 clipboard connection setup.

This module provides the pieces needed before the clipboard can be sampled
using the python-xlib library:
- Opening the X11 display named by $DISPLAY
- Creating a hidden window to receive converted selection data

Failures here mean there is no clipboard to sample at all and are reported
as ClipboardUnavailable, which ends the producer loop but nothing else.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from Xlib import X

if TYPE_CHECKING:
    from Xlib.display import Display
    from Xlib.xobject.drawable import Window


class ClipboardUnavailable(Exception):
    """Raised when no X11 clipboard can be reached."""

    pass


def open_display() -> Display:
    """Validate X11 connectivity and return Display object.

    Checks that the DISPLAY environment variable is set and opens an X11
    connection.

    Returns:
        Display object for X11 operations.

    Raises:
        ClipboardUnavailable: If DISPLAY is unset or X11 connection fails.
    """
    display_name = os.environ.get("DISPLAY")
    if not display_name:
        raise ClipboardUnavailable("DISPLAY environment variable is not set")

    try:
        from Xlib.display import Display as XDisplay
        return XDisplay(display_name)
    except Exception as e:
        raise ClipboardUnavailable(f"Failed to connect to X11 display: {e}") from e


def create_hidden_window(display: Display) -> Window:
    """Create a 1x1 unmapped window to receive selection data.

    X11 delivers converted selections as a property on a requestor window.
    This creates a minimal hidden window for that purpose.

    Args:
        display: The X11 display connection.

    Returns:
        A Window object used as selection requestor.
    """
    screen = display.screen()
    window = screen.root.create_window(
        0, 0, 1, 1, 0, screen.root_depth, event_mask=X.PropertyChangeMask,
    )
    return window
