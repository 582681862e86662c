#!/usr/bin/env python3
"""X11 selection event helpers."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from Xlib.display import Display
    from Xlib.protocol.rq import Event

# Seconds to sleep between checks of the display queue while waiting.
EVENT_POLL_INTERVAL: float = 0.01


def discard_pending_events(display: "Display") -> int:
    """Drop every event already queued on the display without blocking.

    Clears answers to earlier requests that arrived after their reader gave
    up, so they cannot be mistaken for the answer to the next request.

    Args:
        display: The X11 display connection.

    Returns:
        Number of events discarded.
    """
    discarded = 0
    while display.pending_events() > 0:
        display.next_event()
        discarded += 1
    return discarded


def wait_for_event_type(
    display: "Display", target_event_type: int, timeout: float
) -> "Event | None":
    """Read events from the display until one of the target type arrives.

    Only events already pending are read, so the call never blocks inside
    the X11 library and always returns by the deadline. The relay never
    owns a selection, so any other event is of no interest and is dropped.

    Args:
        display: The X11 display connection.
        target_event_type: The X11 event type to wait for.
        timeout: Seconds to wait before giving up.

    Returns:
        The matching event, or None if the deadline passed.
    """
    deadline = time.monotonic() + timeout
    while True:
        while display.pending_events() > 0:
            event = display.next_event()
            if event.type == target_event_type:
                return event
        if time.monotonic() >= deadline:
            return None
        time.sleep(EVENT_POLL_INTERVAL)
