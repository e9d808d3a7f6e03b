"""Unit tests for logging configuration and the server entry point."""

from unittest.mock import patch

import structlog

from calc_api.__main__ import main
from calc_api.logging_config import configure_logging


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_unknown_level_falls_back(self):
        """Test an unrecognized level name does not raise."""
        configure_logging("NOT_A_LEVEL")
        structlog.get_logger("test").info("still_logging")

    def test_json_logs(self, capsys):
        """Test JSON rendering emits the event name."""
        configure_logging("INFO", json_logs=True)
        structlog.get_logger("test").info("json_event", answer=42)
        out = capsys.readouterr().out
        assert '"event": "json_event"' in out
        assert '"answer": 42' in out
        configure_logging("INFO")


class TestMain:
    """Tests for the uvicorn entry point."""

    def test_runs_uvicorn_with_settings(self):
        """Test the app is served on the configured host and port."""
        with patch("calc_api.__main__.uvicorn.run") as run:
            main()
        args, kwargs = run.call_args
        assert args == ("calc_api.main:app",)
        assert kwargs["port"] == 8080
        assert kwargs["host"] == "0.0.0.0"
