#!/usr/bin/env python3
"""Tests for the Markdown rendering pipeline."""
from unittest.mock import MagicMock, patch

from einkrelay.hashing import compute_hash, make_error_hash
from einkrelay.rendering import process, render_markdown
from einkrelay.store import DEFAULT_TEXT

CORPUS = [
    "",
    "plain text",
    "# Title",
    "## Welcome!\n\nSome *emphasis* and **strong** text.",
    "| a | b |\n|---|---|\n| 1 | 2 |",
    "~~gone~~",
    "```python\nprint('hi')\n```",
    "<script>alert(1)</script>",
    "- one\n- two\n\n1. first\n2. second",
    "> quoted\n\n---\n\n[link](http://example.com)",
    "unclosed `code and **bold",
    DEFAULT_TEXT,
]


class TestRenderMarkdown:
    """Tests for Markdown to HTML conversion."""

    def test_renders_commonmark(self) -> None:
        assert render_markdown("# Title") == "<h1>Title</h1>\n"

    def test_renders_tables(self) -> None:
        markup = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")
        assert "<table>" in markup
        assert "<td>1</td>" in markup

    def test_renders_strikethrough(self) -> None:
        assert "<s>gone</s>" in render_markdown("~~gone~~")

    def test_renderer_error_degrades_to_fragment(self) -> None:
        """A failing renderer yields an inline error paragraph instead of raising."""
        broken = MagicMock()
        broken.render.side_effect = ValueError("bad <input>")
        with patch("einkrelay.rendering._renderer", broken):
            markup = render_markdown("anything")
        assert markup == "<p>Markdown processing error: bad &lt;input&gt;</p>"


class TestProcess:
    """Tests for the (markup, fingerprint) pipeline."""

    def test_fingerprint_is_hash_of_markup(self) -> None:
        view = process("Hello")
        assert view.markup == "<p>Hello</p>\n"
        assert view.fingerprint == compute_hash(view.markup.encode("utf-8"))

    def test_same_markup_from_different_sources_same_fingerprint(self) -> None:
        """Sources that render identically are indistinguishable."""
        setext = process("Hi\n==")
        atx = process("# Hi")
        assert setext.markup == atx.markup
        assert setext.fingerprint == atx.fingerprint
        assert process("*a*").fingerprint == process("_a_").fingerprint

    def test_different_markup_different_fingerprint(self) -> None:
        views = [process(text) for text in CORPUS]
        by_markup = {view.markup: view.fingerprint for view in views}
        assert len(set(by_markup.values())) == len(by_markup)

    def test_deterministic(self) -> None:
        for text in CORPUS:
            assert process(text) == process(text)

    def test_error_fingerprints_never_match_corpus(self) -> None:
        fingerprints = {process(text).fingerprint for text in CORPUS}
        for _ in range(10):
            assert make_error_hash() not in fingerprints
        assert not any(value.startswith("error-") for value in fingerprints)

    def test_degraded_render_still_fingerprinted(self) -> None:
        broken = MagicMock()
        broken.render.side_effect = RuntimeError("boom")
        with patch("einkrelay.rendering._renderer", broken):
            view = process("anything")
        assert "Markdown processing error" in view.markup
        assert len(view.fingerprint) == 64
