#!/usr/bin/env python3
"""Markdown rendering pipeline.

Turns the raw document text into the HTML served to readers together with
its change fingerprint. Rendering never fails: a renderer error degrades to
an inline error paragraph so every call yields something a reader can show.
"""

from __future__ import annotations

import html
import logging
from typing import NamedTuple

from markdown_it import MarkdownIt

from einkrelay.hashing import compute_hash

logger = logging.getLogger(__name__)


class RenderedView(NamedTuple):
    """Rendered markup and the fingerprint derived from it."""

    markup: str
    fingerprint: str


def create_renderer() -> MarkdownIt:
    """Build a CommonMark renderer with table and strikethrough support."""
    return MarkdownIt("commonmark").enable(["table", "strikethrough"])


_renderer = create_renderer()


def render_markdown(text: str) -> str:
    """Render Markdown to HTML, degrading to an error fragment on failure.

    Args:
        text: Markdown source.

    Returns:
        Rendered HTML.
    """
    try:
        return _renderer.render(text)
    except Exception as e:
        logger.warning("Markdown processing failed: %s", e)
        return f"<p>Markdown processing error: {html.escape(str(e))}</p>"


def process(text: str) -> RenderedView:
    """Render text and fingerprint the result.

    The fingerprint is computed over the rendered markup, so it depends on
    the markup alone and not on the source text.

    Args:
        text: Markdown source.

    Returns:
        RenderedView of (markup, SHA-256 hex fingerprint).
    """
    markup = render_markdown(text)
    return RenderedView(markup, compute_hash(markup.encode("utf-8")))
