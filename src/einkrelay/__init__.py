"""Relay a Markdown document to pull-only e-ink readers."""

__version__ = "0.1.0"
