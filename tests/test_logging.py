"""Tests for the logging module."""

import pytest

from srcset_parse.logging import configure_logging, get_logger


class TestLogging:
    """Tests for logging configuration."""

    def test_debug_suppressed_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test debug events are filtered when not verbose."""
        configure_logging()
        get_logger().debug("quiet-event")

        captured = capsys.readouterr()
        assert "quiet-event" not in captured.err
        assert "quiet-event" not in captured.out

    def test_debug_emitted_when_verbose(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test debug events are printed in verbose mode."""
        configure_logging(verbose=True)
        get_logger().debug("loud-event")

        assert "loud-event" in capsys.readouterr().err

    def test_events_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test info and error events are written to stderr, not stdout."""
        configure_logging()
        log = get_logger()
        log.info("info-event", key="value")
        log.error("error-event")

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "info-event" in captured.err
        assert "value" in captured.err
        assert "error-event" in captured.err
