#!/usr/bin/env python3
"""Pytest fixtures for eink-relay tests.

Provides document stores (healthy and poisoned), producer mode flags and a
scripted clipboard source.
"""

from collections.abc import Iterable

import pytest

from einkrelay.producer_mode import ModeFlags, ProducerMode
from einkrelay.store import ContentStore


class ScriptedClipboardSource:
    """Clipboard source returning a fixed sequence of samples.

    A sample that is an exception instance is raised instead of returned.
    Once the script runs out the last sample repeats.
    """

    def __init__(self, samples: Iterable[str | Exception]) -> None:
        self.samples = list(samples)
        self.reads = 0
        self.opened = False
        self.closed = False

    def open(self) -> None:
        self.opened = True

    async def read_text(self) -> str:
        index = min(self.reads, len(self.samples) - 1)
        self.reads += 1
        sample = self.samples[index]
        if isinstance(sample, Exception):
            raise sample
        return sample

    def close(self) -> None:
        self.closed = True


def poison(store: ContentStore) -> None:
    """Poison a store's lock the way a failing writer would."""
    with pytest.raises(RuntimeError):
        with store._lock.write_locked(1.0):
            raise RuntimeError("writer failed mid-update")


@pytest.fixture
def store() -> ContentStore:
    """Create a fresh ContentStore holding the default greeting."""
    return ContentStore()


@pytest.fixture
def poisoned_store() -> ContentStore:
    """Create a ContentStore whose lock is poisoned."""
    store = ContentStore()
    poison(store)
    return store


@pytest.fixture
def replace_modes() -> ModeFlags:
    """Mode flags with replace mode enabled."""
    return ModeFlags(ProducerMode.REPLACE_DOCUMENT)


@pytest.fixture
def append_modes() -> ModeFlags:
    """Mode flags with append mode enabled."""
    return ModeFlags(ProducerMode.APPEND_NOTIFY)
