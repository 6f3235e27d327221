"""Tests for the process entry point."""

import logging
from unittest.mock import patch

from macrocook import main as entry


class TestMain:
    """Tests for main."""

    def test_runs_stdio_transport(self):
        """The server runs over stdio."""
        with patch.object(entry.mcp, "run") as run, patch.object(entry, "configure_logging"), patch.object(entry, "get_store"):
            entry.main()
        run.assert_called_once_with(transport="stdio")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_level_from_environment(self, monkeypatch):
        """LOG_LEVEL picks the level."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        with patch.object(logging, "basicConfig") as basic_config:
            entry.configure_logging()
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch):
        """Unknown levels fall back to INFO."""
        monkeypatch.setenv("LOG_LEVEL", "chatty")
        with patch.object(logging, "basicConfig") as basic_config:
            entry.configure_logging()
        assert basic_config.call_args.kwargs["level"] == logging.INFO
