"""Tests for X11 display and window setup."""
from unittest.mock import MagicMock, patch

import pytest

from einkrelay.clipboard import ClipboardUnavailable, create_hidden_window, open_display


class TestOpenDisplay:
    """Tests for open_display function."""

    def test_missing_display_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("DISPLAY", raising=False)
        with pytest.raises(ClipboardUnavailable, match="DISPLAY"):
            open_display()

    def test_connection_failure_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISPLAY", ":99")
        with patch("Xlib.display.Display", side_effect=OSError("refused")):
            with pytest.raises(ClipboardUnavailable, match="refused"):
                open_display()

    def test_returns_display(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DISPLAY", ":99")
        mock_display = MagicMock()
        with patch("Xlib.display.Display", return_value=mock_display) as mock_cls:
            assert open_display() is mock_display
        mock_cls.assert_called_once_with(":99")


class TestCreateHiddenWindow:
    """Tests for create_hidden_window function."""

    def test_creates_window(self) -> None:
        """Create a 1x1 window."""
        mock_display = MagicMock()
        mock_window = MagicMock()
        mock_display.screen().root.create_window.return_value = mock_window
        result = create_hidden_window(mock_display)
        assert result == mock_window
