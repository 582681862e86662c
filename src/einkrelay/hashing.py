#!/usr/bin/env python3
"""
SHA-256 fingerprints for rendered markup.

Pull clients cannot receive pushed updates, so they poll and compare an
opaque fingerprint against the one they last rendered. The fingerprint is
computed over the rendered HTML rather than the Markdown source: two source
texts that render identically are the same document to a reader.

This module provides:
- compute_hash(): SHA-256 hex digest of rendered markup
- make_error_hash(): unique fingerprint for synthesized error payloads

Error fingerprints live in the "error-" namespace. A hex digest only ever
contains [0-9a-f], so an error fingerprint can never equal a real one and a
client that receives it always treats the payload as changed.
"""
import hashlib
import time

ERROR_HASH_PREFIX: str = "error-"


def compute_hash(data: bytes) -> str:
    """
    Compute SHA-256 hash of rendered markup.

    Args:
        data: UTF-8 encoded markup bytes to hash.

    Returns:
        Hexadecimal string representation of the SHA-256 digest.
    """
    return hashlib.sha256(data).hexdigest()


def make_error_hash() -> str:
    """
    Return a fresh fingerprint for an error payload.

    Each call returns a new value so consecutive error responses also
    compare as changed.

    Returns:
        "error-" followed by the current time in nanoseconds.
    """
    return f"{ERROR_HASH_PREFIX}{time.time_ns()}"


def is_error_hash(hash_value: str) -> bool:
    """Check whether a fingerprint belongs to a synthesized error payload."""
    return hash_value.startswith(ERROR_HASH_PREFIX)
