#!/usr/bin/env python3
"""
Unit tests for fingerprint hashing.

Tests that compute_hash produces consistent 64-character hex digests and
that error fingerprints stay outside the digest namespace.
"""
from einkrelay.hashing import ERROR_HASH_PREFIX, compute_hash, is_error_hash, make_error_hash


def test_compute_hash_produces_sha256_hex() -> None:
    """Test compute_hash returns 64-character hex SHA-256 digest."""
    result = compute_hash(b"<p>test content</p>\n")
    assert len(result) == 64
    assert all(c in "0123456789abcdef" for c in result)


def test_compute_hash_consistent_output() -> None:
    """Test same input always produces same hash."""
    data = b"<h1>Hello world!</h1>\n"
    assert compute_hash(data) == compute_hash(data)


def test_compute_hash_different_for_different_input() -> None:
    """Test different inputs produce different hashes."""
    assert compute_hash(b"content A") != compute_hash(b"content B")


def test_make_error_hash_uses_reserved_prefix() -> None:
    """Test error fingerprints start with the reserved prefix."""
    value = make_error_hash()
    assert value.startswith(ERROR_HASH_PREFIX)
    assert is_error_hash(value)


def test_make_error_hash_is_fresh_each_call() -> None:
    """Test consecutive error fingerprints differ."""
    values = {make_error_hash() for _ in range(50)}
    assert len(values) > 1


def test_digest_is_never_an_error_hash() -> None:
    """Test a real digest is never mistaken for an error fingerprint."""
    assert not is_error_hash(compute_hash(b"error-"))
