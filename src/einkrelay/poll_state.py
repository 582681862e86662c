#!/usr/bin/env python3
"""
Fingerprint state kept by a polling reader.

A reader cannot be told that the document changed; it asks every few
seconds and compares the returned fingerprint with the one it rendered
last. Only a differing fingerprint triggers a re-render.

Error payloads carry fingerprints from a reserved namespace that never
matches a real one, so they always count as changed and the reader keeps
asking instead of settling on the error.
"""
from dataclasses import dataclass

from einkrelay.hashing import is_error_hash


@dataclass
class PollClientState:
    """
    Track the fingerprint of the last rendered document.

    Attributes:
        last_hash: Fingerprint last rendered, or None before the first poll.
    """

    last_hash: str | None = None

    def has_changed(self, current_hash: str) -> bool:
        """
        Check whether a polled fingerprint differs from the last rendered one.

        Args:
            current_hash: Fingerprint returned by the latest poll.

        Returns:
            True if the reader should re-render.
        """
        if is_error_hash(current_hash):
            return True
        return current_hash != self.last_hash

    def record(self, hash_value: str) -> None:
        """
        Record the fingerprint of what was just rendered.

        Args:
            hash_value: Fingerprint of the rendered document.
        """
        self.last_hash = hash_value

    def clear(self) -> None:
        """
        Forget the last fingerprint.

        Used on reconnect so the first successful poll is always rendered.
        """
        self.last_hash = None
