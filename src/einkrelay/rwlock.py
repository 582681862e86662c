#!/usr/bin/env python3
"""Reader/writer lock for the shared document.

Any number of readers may hold the lock together; a writer holds it alone.
Waiting writers block new readers so a steady stream of polls cannot starve
an edit.

Acquisition never waits longer than the given timeout and is never retried.
If an exception escapes a write section the lock is poisoned: every later
acquisition fails until clear_poison() is called.
"""

from __future__ import annotations

import threading
import time
from collections.abc import Iterator
from contextlib import contextmanager


class LockUnavailable(RuntimeError):
    """Raised when the lock is poisoned or cannot be acquired in time."""

    pass


class ReadWriteLock:
    """Writer-preferring reader/writer lock built on a Condition.

    Attributes:
        poisoned: True after an exception escaped a write section.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0
        self.poisoned = False

    def _wait(self, ready, timeout: float) -> None:
        """Wait on the condition until ready() holds. Caller holds _cond."""
        deadline = time.monotonic() + timeout
        while not ready():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                raise LockUnavailable(f"Lock not acquired within {timeout} seconds")
            self._cond.wait(remaining)
        if self.poisoned:
            raise LockUnavailable("Lock poisoned by a failed writer")

    def acquire_read(self, timeout: float) -> None:
        """Acquire a shared hold.

        Raises:
            LockUnavailable: If poisoned or not acquired within timeout.
        """
        with self._cond:
            if self.poisoned:
                raise LockUnavailable("Lock poisoned by a failed writer")
            self._wait(lambda: not self._writer and not self._writers_waiting, timeout)
            self._readers += 1

    def release_read(self) -> None:
        with self._cond:
            self._readers -= 1
            if not self._readers:
                self._cond.notify_all()

    def acquire_write(self, timeout: float) -> None:
        """Acquire an exclusive hold.

        Raises:
            LockUnavailable: If poisoned or not acquired within timeout.
        """
        with self._cond:
            if self.poisoned:
                raise LockUnavailable("Lock poisoned by a failed writer")
            self._writers_waiting += 1
            try:
                self._wait(lambda: not self._writer and not self._readers, timeout)
            finally:
                self._writers_waiting -= 1
                # Readers held back by this writer may proceed if it gave up
                self._cond.notify_all()
            self._writer = True

    def release_write(self, poison: bool = False) -> None:
        with self._cond:
            self._writer = False
            if poison:
                self.poisoned = True
            self._cond.notify_all()

    def clear_poison(self) -> None:
        """Make the lock usable again after a writer failure."""
        with self._cond:
            self.poisoned = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self, timeout: float) -> Iterator[None]:
        """Hold the lock shared for the duration of the block."""
        self.acquire_read(timeout)
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self, timeout: float) -> Iterator[None]:
        """Hold the lock exclusively; an escaping exception poisons it."""
        self.acquire_write(timeout)
        try:
            yield
        except BaseException:
            self.release_write(poison=True)
            raise
        self.release_write()
