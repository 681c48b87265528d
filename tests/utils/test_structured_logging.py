"""Tests for structured logging configuration."""

import json

import pytest

from technical_levels.indicators.levels import compute_levels
from technical_levels.schemas.levels import LevelSettings
from technical_levels.utils.structured_logging import configure_structured_logging, get_logger


@pytest.fixture
def debug_logging():
    """Enable debug-level JSON logging for one test, then restore test config."""
    configure_structured_logging(log_level="DEBUG")
    yield
    configure_structured_logging(log_level="WARNING")


class TestStructuredLogging:
    """Tests for structlog setup and engine log events."""

    def test_computation_event_logged(self, debug_logging, capsys, v_dip_candles):
        """Test compute_levels emits a JSON summary event at debug level."""
        compute_levels(v_dip_candles, LevelSettings())

        lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
        event = json.loads(lines[-1])
        assert event["event"] == "technical_levels_computed"
        assert event["level"] == "debug"
        assert event["pivots"] == 1
        assert event["support_levels"] == 1
        assert "timestamp" in event

    def test_insufficient_candles_event(self, debug_logging, capsys):
        """Test short series log the minimum-data event."""
        compute_levels([], LevelSettings())

        event = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
        assert event["event"] == "insufficient_candles"
        assert event["required"] == 7

    def test_debug_filtered_at_warning(self, capsys, v_dip_candles):
        """Test debug events are suppressed at the test log level."""
        compute_levels(v_dip_candles, LevelSettings())

        assert "technical_levels_computed" not in capsys.readouterr().out

    def test_console_renderer(self, capsys):
        """Test console rendering for local development."""
        configure_structured_logging(log_level="INFO", json_logs=False)
        try:
            get_logger("test").info("console_event", answer=42)
        finally:
            configure_structured_logging(log_level="WARNING")

        out = capsys.readouterr().out
        assert "console_event" in out
        assert "answer=42" in out

    def test_level_from_configuration(
        self, monkeypatch, clear_settings_cache, capsys, v_dip_candles
    ):
        """Test the configured LOG_LEVEL applies when no level is passed."""
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        configure_structured_logging()
        try:
            compute_levels(v_dip_candles, LevelSettings())
        finally:
            configure_structured_logging(log_level="WARNING")

        assert "technical_levels_computed" in capsys.readouterr().out
