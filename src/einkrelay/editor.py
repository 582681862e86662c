#!/usr/bin/env python3
"""Headless editor that appends clipboard snippets to the document.

In append mode the producer never writes the store itself; it hands new
clipboard text to the editor, which merges it with what it is showing and
saves the result like any manual edit. When no graphical editor is
attached, AppendingEditor plays that role against the store directly.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from einkrelay.store import ContentStore

logger = logging.getLogger(__name__)


def append_snippet(current: str, snippet: str) -> str:
    """
    Merge a snippet into the editor content.

    Args:
        current: The text currently in the editor.
        snippet: The text to append.

    Returns:
        The snippet alone if current is blank, otherwise current and snippet
        separated by a blank line.
    """
    if not current.strip():
        return snippet
    return f"{current}\n\n{snippet}"


class AppendingEditor:
    """Notification target for append mode backed by a ContentStore."""

    def __init__(self, store: ContentStore) -> None:
        self.store = store

    def __call__(self, snippet: str) -> None:
        """
        Append a snippet and save the merged document.

        Raises:
            StoreUnavailable: If the store cannot be read or written.
        """
        merged = append_snippet(self.store.read(), snippet)
        self.store.write(merged)
        logger.info("Appended %d characters from clipboard", len(snippet))
