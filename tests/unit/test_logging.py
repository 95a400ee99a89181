"""Tests for logging setup and formatters."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from base16_sh.runtime.logging import (
    ROOT_LOGGER,
    ConsoleFormatter,
    JSONLFormatter,
    log_with_context,
    setup_logging,
)


@pytest.fixture(autouse=True)
def reset_logger():
    """Detach handlers installed by setup_logging after each test."""
    yield
    root = logging.getLogger(ROOT_LOGGER)
    for handler in root.handlers:
        handler.close()
    root.handlers.clear()
    root.propagate = True
    root.setLevel(logging.NOTSET)


def make_record(name: str, level: int, message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(name, level, __file__, 10, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONLFormatter:
    def test_fields(self) -> None:
        record = make_record("base16_sh.core.schemes", logging.INFO, "Loaded 3 schemes")
        entry = json.loads(JSONLFormatter().format(record))
        assert entry["level"] == "INFO"
        assert entry["component"] == "SCHEMES"
        assert entry["message"] == "Loaded 3 schemes"
        assert "source" not in entry

    def test_warning_has_source(self) -> None:
        record = make_record("base16_sh.core.templates", logging.WARNING, "skip")
        entry = json.loads(JSONLFormatter().format(record))
        assert entry["source"]["line"] == 10

    def test_context_and_component_extra(self) -> None:
        record = make_record(
            "base16_sh.runtime.server",
            logging.INFO,
            "request",
            component="HTTP",
            context={"path": "/monokai"},
        )
        entry = json.loads(JSONLFormatter().format(record))
        assert entry["component"] == "HTTP"
        assert entry["context"] == {"path": "/monokai"}


class TestConsoleFormatter:
    def test_contains_component_and_message(self) -> None:
        record = make_record("base16_sh.core.resolver", logging.WARNING, "odd")
        line = ConsoleFormatter().format(record)
        assert "[RESOLVER]" in line
        assert "WARNING" in line
        assert line.endswith("odd")


class TestSetupLogging:
    def test_writes_jsonl_file(self, tmp_path: Path) -> None:
        log_file = setup_logging(tmp_path / "logs", "debug")
        assert log_file == tmp_path / "logs" / "server.log"

        log_with_context(
            logging.getLogger("base16_sh.core.schemes"),
            logging.WARNING,
            "Skipping scheme 'broken'",
            scheme="broken",
        )
        for handler in logging.getLogger(ROOT_LOGGER).handlers:
            handler.flush()

        entries = [json.loads(line) for line in log_file.read_text().splitlines()]
        assert entries[0]["message"] == "Logging initialized"
        assert entries[-1]["component"] == "SCHEMES"
        assert entries[-1]["context"] == {"scheme": "broken"}

    def test_console_only(self) -> None:
        assert setup_logging(None) is None
        root = logging.getLogger(ROOT_LOGGER)
        assert len(root.handlers) == 1
        assert root.propagate is False

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(None, "chatty")
        assert logging.getLogger(ROOT_LOGGER).level == logging.INFO
