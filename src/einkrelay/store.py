#!/usr/bin/env python3
"""Shared document store.

ContentStore owns the one canonical document. Manual edits, the clipboard
producer and HTTP updates all write through it; every poll reads through
it. Each component receives the same instance explicitly so tests can build
as many independent stores as they need.

A write swaps the reference to a new immutable string under the exclusive
lock, so a concurrent reader sees either the old or the new document and
never a mixture.
"""

from __future__ import annotations

import logging

from einkrelay.rwlock import LockUnavailable, ReadWriteLock

logger = logging.getLogger(__name__)

# Upper bound in seconds on waiting for the lock. Critical sections are a
# single reference swap, so hitting this means the lock is wedged.
LOCK_TIMEOUT: float = 2.0

DEFAULT_TEXT: str = (
    "## Welcome!\n\n"
    "This is the editor for your e-ink reader. Type Markdown here and it "
    "will appear on the page you open on the reader."
)


class StoreUnavailable(RuntimeError):
    """
    Exception raised when the document lock cannot be used.

    Raised when the lock is poisoned by a failed writer or cannot be
    acquired within LOCK_TIMEOUT. Callers report it and carry on; the store
    may work again on the next call.
    """

    pass


class ContentStore:
    """
    Lock-guarded holder of the shared document.

    Attributes:
        lock_timeout: Seconds to wait for the lock before giving up.
    """

    def __init__(self, text: str = DEFAULT_TEXT, lock_timeout: float = LOCK_TIMEOUT) -> None:
        self._text = text
        self._lock = ReadWriteLock()
        self.lock_timeout = lock_timeout

    def read(self) -> str:
        """
        Return the current document verbatim.

        Raises:
            StoreUnavailable: If the read lock cannot be acquired.
        """
        try:
            with self._lock.read_locked(self.lock_timeout):
                return self._text
        except LockUnavailable as e:
            logger.error("Failed to acquire read lock: %s", e)
            raise StoreUnavailable(f"Failed to acquire read lock: {e}") from e

    def write(self, text: str) -> None:
        """
        Replace the document completely.

        Args:
            text: The new document text.

        Raises:
            StoreUnavailable: If the write lock cannot be acquired.
        """
        try:
            with self._lock.write_locked(self.lock_timeout):
                self._text = text
        except LockUnavailable as e:
            logger.error("Failed to acquire write lock: %s", e)
            raise StoreUnavailable(f"Failed to acquire write lock: {e}") from e
        logger.debug("Document replaced (%d characters)", len(text))

    @property
    def poisoned(self) -> bool:
        """True while the lock is poisoned."""
        return self._lock.poisoned

    def recover(self) -> None:
        """Clear a poisoned lock so later reads and writes can succeed."""
        if self._lock.poisoned:
            logger.warning("Recovering poisoned document lock")
        self._lock.clear_poison()
