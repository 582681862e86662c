#!/usr/bin/env python3
"""Clipboard producer loop.

The producer samples the clipboard on a fixed interval in its own thread,
with its own asyncio event loop, so it never shares an execution context
with request handling. Depending on the mode read fresh on every tick it
either replaces the document with new clipboard text or notifies the editor.

De-duplication keeps the last observed text. A failed or empty sample
clears it, so text copied again after an image (or after the clipboard was
emptied) counts as new.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING

from einkrelay.clipboard import ClipboardUnavailable
from einkrelay.clipboard_io import ClipboardReadError
from einkrelay.producer_mode import ProducerMode
from einkrelay.store import StoreUnavailable

if TYPE_CHECKING:
    from einkrelay.clipboard_io import ClipboardSource
    from einkrelay.producer_mode import ModeFlags
    from einkrelay.store import ContentStore

logger = logging.getLogger(__name__)

# Seconds between clipboard samples. Responsive without burning CPU.
SAMPLE_INTERVAL: float = 0.5


class ProducerGateway:
    """Samples a clipboard source and feeds new text to the document.

    Attributes:
        last_observed_text: Last text acted upon, or None after a failed read.
    """

    def __init__(
        self,
        store: ContentStore,
        modes: ModeFlags,
        source: ClipboardSource,
        notify: Callable[[str], None],
        interval: float = SAMPLE_INTERVAL,
    ) -> None:
        self.store = store
        self.modes = modes
        self.source = source
        self.notify = notify
        self.interval = interval
        self.last_observed_text: str | None = None
        self._stop = threading.Event()
        self._thread: threading.Thread | None = None

    async def tick(self) -> None:
        """Run one sampling step."""
        mode = self.modes.mode()
        if mode is ProducerMode.DISABLED:
            return

        try:
            current = await self.source.read_text()
            if not current:
                raise ClipboardReadError("Clipboard is empty")
        except ClipboardReadError as e:
            # Non-text content is normal (images, files); not an error
            logger.warning("Could not read text from clipboard: %s", e)
            self.last_observed_text = None
            return

        if not current.strip() or current == self.last_observed_text:
            return

        if mode is ProducerMode.REPLACE_DOCUMENT:
            logger.info("New text detected in clipboard. Updating shared document.")
            try:
                self.store.write(current)
            except StoreUnavailable as e:
                logger.error("Clipboard text not stored: %s", e)
                return
            self.last_observed_text = current
        elif mode is ProducerMode.APPEND_NOTIFY:
            logger.info("New text detected in clipboard. Sending to editor.")
            self.last_observed_text = current
            try:
                self.notify(current)
            except Exception:
                logger.exception("Editor failed to take clipboard text")

    async def run(self) -> None:
        """Open the source and sample until stop() is called.

        A source that cannot be opened ends the loop; nothing else is
        affected.
        """
        try:
            self.source.open()
        except ClipboardUnavailable as e:
            logger.error("Failed to initialize clipboard: %s. Producer will exit.", e)
            return

        logger.info("Clipboard producer started.")
        try:
            while not self._stop.is_set():
                await self.tick()
                await asyncio.sleep(self.interval)
        finally:
            self.source.close()
            logger.info("Clipboard producer stopped.")

    def start(self) -> threading.Thread:
        """Run the loop in a daemon thread with its own event loop."""
        self._stop.clear()
        self._thread = threading.Thread(
            target=asyncio.run, args=(self.run(),), name="clipboard-producer", daemon=True,
        )
        self._thread.start()
        return self._thread

    def stop(self, timeout: float | None = None) -> None:
        """Ask the loop to finish and wait for the thread."""
        self._stop.set()
        if self._thread is not None:
            self._thread.join(timeout)
