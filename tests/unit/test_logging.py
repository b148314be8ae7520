"""Tests for the logging setup."""

import json
import logging

import pytest
import structlog

from pathjson.infrastructure.logging import IgnoreLogChangeDetectedFilter, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    setup_logging(level="WARNING")


@pytest.mark.unit
class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_root_level(self) -> None:
        setup_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_writes_rotating_file(self, tmp_path) -> None:
        log_file = tmp_path / "logs" / "pathjson.log"
        setup_logging(level="INFO", log_file_path=str(log_file))

        structlog.get_logger("pathjson.test").info("decoded", codec="hex")

        content = log_file.read_text(encoding="utf-8")
        assert "decoded" in content
        assert "codec=hex" in content

    def test_json_output(self, tmp_path) -> None:
        log_file = tmp_path / "pathjson.log"
        setup_logging(level="INFO", log_file_path=str(log_file), json_output=True)

        structlog.get_logger("pathjson.test").warning("too large", limit=10)

        event = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert event["event"] == "too large"
        assert event["limit"] == 10
        assert event["level"] == "warning"

    def test_stdlib_loggers_share_handlers(self, tmp_path) -> None:
        log_file = tmp_path / "pathjson.log"
        setup_logging(level="INFO", log_file_path=str(log_file), json_output=True)

        logging.getLogger("uvicorn.error").info("Started server process")

        event = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert event["event"] == "Started server process"
        assert event["logger"] == "uvicorn.error"


@pytest.mark.unit
class TestIgnoreLogChangeDetectedFilter:
    """Reload chatter is filtered out."""

    def test_filters_reload_messages(self) -> None:
        record = logging.LogRecord(
            "watchfiles.main", logging.INFO, __file__, 1,
            "Detected file change in 'src/pathjson/core/codecs.py'", None, None,
        )
        assert not IgnoreLogChangeDetectedFilter().filter(record)

    def test_keeps_other_messages(self) -> None:
        record = logging.LogRecord(
            "pathjson", logging.INFO, __file__, 1, "Decoded JSON from path", None, None,
        )
        assert IgnoreLogChangeDetectedFilter().filter(record)
