#!/usr/bin/env python3
"""Tests for X11 selection event helpers."""
import time
from collections import deque
from unittest.mock import MagicMock

from Xlib import X

from einkrelay.selection_utils import discard_pending_events, wait_for_event_type


def make_display(*event_types: int) -> MagicMock:
    """Create a mock display with the given events already queued."""
    queue = deque()
    for event_type in event_types:
        event = MagicMock()
        event.type = event_type
        queue.append(event)
    display = MagicMock()
    display.pending_events.side_effect = lambda: len(queue)
    display.next_event.side_effect = queue.popleft
    display.event_queue = queue
    return display


def test_returns_matching_event_skipping_others() -> None:
    display = make_display(X.PropertyNotify, X.SelectionNotify, X.PropertyNotify)
    event = wait_for_event_type(display, X.SelectionNotify, 1.0)
    assert event.type == X.SelectionNotify
    assert len(display.event_queue) == 1


def test_returns_none_by_deadline_without_blocking() -> None:
    display = make_display(X.PropertyNotify)
    start = time.monotonic()
    assert wait_for_event_type(display, X.SelectionNotify, 0.05) is None
    assert time.monotonic() - start < 1.0
    # Only pending events are read; nothing is left waiting in next_event
    assert display.next_event.call_count == 1


def test_discard_pending_events_empties_queue() -> None:
    display = make_display(X.SelectionNotify, X.PropertyNotify)
    assert discard_pending_events(display) == 2
    assert not display.event_queue
