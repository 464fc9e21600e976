"""Tests for logging setup."""

from __future__ import annotations

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from searchbridge.config.settings import ObservabilitySettings
from searchbridge.observability.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    package_logger = logging.getLogger("searchbridge")
    handlers, level = package_logger.handlers[:], package_logger.level
    yield
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    structlog.reset_defaults()


class TestSetupLogging:
    def test_adapter_error_renders_as_json(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_format="json"), stream=stream)

        logging.getLogger("searchbridge.adapters.doofinder.adapter").error(
            "Doofinder error code %d in response: endpoint=%s", 500, "search"
        )

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "Doofinder error code 500 in response: endpoint=search"
        assert record["level"] == "error"
        assert record["logger"] == "searchbridge.adapters.doofinder.adapter"
        assert "timestamp" in record

    def test_console_format(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_format="console"), stream=stream)

        logging.getLogger("searchbridge.core.pagination").error("Doofinder empty results in response: page=%d", 3)

        output = stream.getvalue()
        assert "Doofinder empty results in response: page=3" in output
        assert "error" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output)

    def test_log_level_filters_records(self) -> None:
        stream = io.StringIO()
        setup_logging(ObservabilitySettings(log_level="error"), stream=stream)

        logging.getLogger("searchbridge.adapters.doofinder.adapter").info("Doofinder adapter initialized")
        assert stream.getvalue() == ""

    def test_repeated_setup_keeps_one_handler(self) -> None:
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        assert len(logging.getLogger("searchbridge").handlers) == 1

    def test_structlog_loggers_use_same_renderer(self) -> None:
        stream = io.StringIO()
        setup_logging(stream=stream)

        structlog.get_logger("searchbridge.client").error("sync call failed", query="shoes")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "sync call failed"
        assert record["query"] == "shoes"
