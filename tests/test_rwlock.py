#!/usr/bin/env python3
"""Tests for the reader/writer lock."""
import threading
import time

import pytest

from einkrelay.rwlock import LockUnavailable, ReadWriteLock


def _wait_until(predicate, timeout: float = 2.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not reached")
        time.sleep(0.005)


class TestShared:
    """Tests for shared (read) holds."""

    def test_readers_share_lock(self) -> None:
        lock = ReadWriteLock()
        lock.acquire_read(0.1)
        lock.acquire_read(0.1)
        lock.release_read()
        lock.release_read()

    def test_reader_blocks_writer(self) -> None:
        lock = ReadWriteLock()
        with lock.read_locked(0.1):
            with pytest.raises(LockUnavailable):
                lock.acquire_write(0.05)
        # Released reader lets writer in
        with lock.write_locked(0.1):
            pass

    def test_waiting_writer_blocks_new_readers(self) -> None:
        lock = ReadWriteLock()
        lock.acquire_read(0.1)
        acquired = threading.Event()

        def writer() -> None:
            lock.acquire_write(2.0)
            acquired.set()
            lock.release_write()

        thread = threading.Thread(target=writer)
        thread.start()
        _wait_until(lambda: lock._writers_waiting == 1)

        with pytest.raises(LockUnavailable):
            lock.acquire_read(0.05)

        lock.release_read()
        thread.join(2.0)
        assert acquired.is_set()
        with lock.read_locked(0.1):
            pass


class TestExclusive:
    """Tests for exclusive (write) holds."""

    def test_writer_blocks_reader(self) -> None:
        lock = ReadWriteLock()
        with lock.write_locked(0.1):
            with pytest.raises(LockUnavailable):
                lock.acquire_read(0.05)

    def test_writer_blocks_writer(self) -> None:
        lock = ReadWriteLock()
        with lock.write_locked(0.1):
            with pytest.raises(LockUnavailable):
                lock.acquire_write(0.05)

    def test_timed_out_writer_releases_waiting_readers(self) -> None:
        lock = ReadWriteLock()
        lock.acquire_read(0.1)
        with pytest.raises(LockUnavailable):
            lock.acquire_write(0.05)
        assert lock._writers_waiting == 0
        lock.acquire_read(0.05)


class TestPoison:
    """Tests for poisoning after a failed writer."""

    def test_exception_in_write_section_poisons(self) -> None:
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked(0.1):
                raise ValueError("failed")
        assert lock.poisoned
        with pytest.raises(LockUnavailable):
            lock.acquire_read(0.1)
        with pytest.raises(LockUnavailable):
            lock.acquire_write(0.1)

    def test_exception_in_read_section_does_not_poison(self) -> None:
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.read_locked(0.1):
                raise ValueError("failed")
        assert not lock.poisoned

    def test_clear_poison_restores(self) -> None:
        lock = ReadWriteLock()
        with pytest.raises(ValueError):
            with lock.write_locked(0.1):
                raise ValueError("failed")
        lock.clear_poison()
        with lock.write_locked(0.1):
            pass
