"""Tests for harsnip logging utilities."""

from __future__ import annotations

import json

import pytest
import structlog

from harsnip.logging import add_log_level, configure_logging, get_logger, request_context


class TestAddLogLevel:
    """Tests for the add_log_level processor."""

    def test_sets_level(self) -> None:
        assert add_log_level(None, "info", {})["level"] == "info"

    def test_translates_warn(self) -> None:
        assert add_log_level(None, "warn", {})["level"] == "warning"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_output=True)
        get_logger("test").info("snippet_generated", target="shell")

        line = capsys.readouterr().err.strip()
        record = json.loads(line)
        assert record["event"] == "snippet_generated"
        assert record["target"] == "shell"
        assert record["level"] == "info"
        assert "timestamp" in record

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="WARNING", json_output=True)
        get_logger("test").info("hidden")
        get_logger("test").warning("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_level_name_case_insensitive(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="debug", json_output=True)
        get_logger("test").debug("lowercase_level")

        assert "lowercase_level" in capsys.readouterr().err

    def test_unknown_level_falls_back_to_info(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="chatty", json_output=True)
        get_logger("test").debug("hidden")
        get_logger("test").info("shown")

        err = capsys.readouterr().err
        assert "hidden" not in err
        assert "shown" in err

    def test_logs_go_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="DEBUG")
        get_logger("test").debug("console_line")

        captured = capsys.readouterr()
        assert "console_line" in captured.err
        assert captured.out == ""


class TestRequestContext:
    """Tests for the request_context context manager."""

    def test_binds_and_unbinds(self) -> None:
        with request_context("api.yaml", action="generate"):
            bound = structlog.contextvars.get_contextvars()
            assert bound["context_id"] == "api.yaml"
            assert bound["action"] == "generate"

        assert "context_id" not in structlog.contextvars.get_contextvars()

    def test_unbinds_on_exception(self) -> None:
        with pytest.raises(RuntimeError), request_context("api.yaml"):
            raise RuntimeError("boom")

        assert "context_id" not in structlog.contextvars.get_contextvars()

    def test_context_in_log_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level="INFO", json_output=True)
        with request_context("api.yaml", action="copy_curl"):
            get_logger("test").info("curl_copied")

        record = json.loads(capsys.readouterr().err.strip())
        assert record["context_id"] == "api.yaml"
        assert record["action"] == "copy_curl"
