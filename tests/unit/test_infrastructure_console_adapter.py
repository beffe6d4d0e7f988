"""Unit tests for ConsoleAdapter (structlog)."""

import json

import pytest
import structlog

from src.infrastructure.logging import ConsoleAdapter


def _last_json_line(capsys) -> dict:
    lines = [line for line in capsys.readouterr().out.splitlines() if line.strip()]
    return json.loads(lines[-1])


@pytest.mark.unit
class TestConsoleAdapter:
    def test_json_output_includes_context(self, capsys):
        # Arrange
        adapter = ConsoleAdapter(use_json=True)

        # Act
        adapter.info("User logged in", user_id="42")

        # Assert
        record = _last_json_line(capsys)
        assert record["event"] == "User logged in"
        assert record["level"] == "info"
        assert record["user_id"] == "42"
        assert "timestamp" in record

    def test_error_flattens_exception(self, capsys):
        adapter = ConsoleAdapter(use_json=True)

        adapter.error("Login failed", error=ValueError("boom"))

        record = _last_json_line(capsys)
        assert record["error_type"] == "ValueError"
        assert record["error_message"] == "boom"

    def test_bound_context_and_trace_id(self, capsys):
        """Test bind() context and contextvars both reach the record."""
        # Arrange
        adapter = ConsoleAdapter(use_json=True).bind(component="auth")
        structlog.contextvars.bind_contextvars(trace_id="trace-123")

        # Act
        try:
            adapter.warning("Refresh rejected")
        finally:
            structlog.contextvars.clear_contextvars()

        # Assert
        record = _last_json_line(capsys)
        assert record["component"] == "auth"
        assert record["trace_id"] == "trace-123"

    def test_level_filtering(self, capsys):
        adapter = ConsoleAdapter(use_json=True, level="WARNING")

        adapter.info("hidden")
        adapter.warning("shown")

        out = capsys.readouterr().out
        assert "hidden" not in out
        assert "shown" in out
