#!/usr/bin/env python3
"""
Unit tests for PollClientState change detection.
"""
from einkrelay.hashing import make_error_hash
from einkrelay.poll_state import PollClientState
from einkrelay.rendering import process


def test_first_poll_is_a_change() -> None:
    assert PollClientState().has_changed(process("x").fingerprint)


def test_same_fingerprint_is_not_a_change() -> None:
    state = PollClientState()
    fingerprint = process("x").fingerprint
    state.record(fingerprint)
    assert not state.has_changed(fingerprint)


def test_new_fingerprint_is_a_change() -> None:
    state = PollClientState()
    state.record(process("x").fingerprint)
    assert state.has_changed(process("y").fingerprint)


def test_error_fingerprint_always_a_change() -> None:
    """Clients never get stuck on an error payload."""
    state = PollClientState()
    error_hash = make_error_hash()
    state.record(error_hash)
    assert state.has_changed(error_hash)


def test_clear_forgets_fingerprint() -> None:
    state = PollClientState()
    fingerprint = process("x").fingerprint
    state.record(fingerprint)
    state.clear()
    assert state.last_hash is None
    assert state.has_changed(fingerprint)
