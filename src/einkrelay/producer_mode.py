#!/usr/bin/env python3
"""Clipboard producer mode flags.

The producer can replace the document with each new clipboard text or hand
each new text to the editor for appending. The two are mutually exclusive:
enabling one disables the other in the same call, so the producer never
observes both set.
"""

from __future__ import annotations

import enum
import logging
import threading

logger = logging.getLogger(__name__)


class ProducerMode(enum.Enum):
    """What the producer does with newly observed clipboard text."""

    DISABLED = "off"
    REPLACE_DOCUMENT = "replace"
    APPEND_NOTIFY = "append"


class ModeFlags:
    """Thread-safe pair of mutually exclusive producer flags.

    The UI (or CLI) sets the flags; the producer reads mode() fresh on
    every tick.
    """

    def __init__(self, mode: ProducerMode = ProducerMode.DISABLED) -> None:
        self._lock = threading.Lock()
        self._replace = mode is ProducerMode.REPLACE_DOCUMENT
        self._append = mode is ProducerMode.APPEND_NOTIFY

    @property
    def replace_document(self) -> bool:
        with self._lock:
            return self._replace

    @property
    def append_notify(self) -> bool:
        with self._lock:
            return self._append

    def set_replace_document(self, enabled: bool) -> None:
        """Enable or disable replace mode; enabling disables append mode."""
        with self._lock:
            self._replace = enabled
            if enabled:
                self._append = False
        logger.info("Send on copy set to: %s", enabled)

    def set_append_notify(self, enabled: bool) -> None:
        """Enable or disable append mode; enabling disables replace mode."""
        with self._lock:
            self._append = enabled
            if enabled:
                self._replace = False
        logger.info("Add to editor on copy set to: %s", enabled)

    def set_mode(self, mode: ProducerMode) -> None:
        """Switch directly to the given mode."""
        with self._lock:
            self._replace = mode is ProducerMode.REPLACE_DOCUMENT
            self._append = mode is ProducerMode.APPEND_NOTIFY
        logger.info("Clipboard producer mode set to: %s", mode.value)

    def mode(self) -> ProducerMode:
        """Return the current mode as one consistent snapshot."""
        with self._lock:
            if self._replace:
                return ProducerMode.REPLACE_DOCUMENT
            if self._append:
                return ProducerMode.APPEND_NOTIFY
            return ProducerMode.DISABLED
