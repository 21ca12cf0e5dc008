"""Tests for structured logging setup."""
import json
import logging
from logging.handlers import RotatingFileHandler

import pytest

from pattern_catalog.config.schemas.logging_schema import LoggingConfig
from pattern_catalog.infrastructure.logging import get_logger, setup_logging


@pytest.mark.unit
class TestSetupLogging:
    def test_console_handler_writes_to_stderr(self, capsys):
        setup_logging(LoggingConfig(level="INFO"))
        get_logger("tests.console").info("hello from test", answer=42)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "hello from test" in captured.err
        assert "answer=42" in captured.err

    def test_level_filters_messages(self, capsys):
        setup_logging(LoggingConfig(level="ERROR"))
        get_logger("tests.level").warning("should be hidden")
        assert "should be hidden" not in capsys.readouterr().err

    def test_default_config_is_warning(self):
        setup_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_file_destination_with_json_renderer(self, tmp_path):
        log_file = tmp_path / "nested" / "catalog.log"
        setup_logging(
            LoggingConfig(level="INFO", destination="file", file_path=str(log_file), renderer="json")
        )
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], RotatingFileHandler)

        get_logger("tests.file").info("written to file", key="strategy")
        handlers[0].flush()

        records = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
        event = next(r for r in records if r["event"] == "written to file")
        assert event["key"] == "strategy"
        assert event["level"] == "info"
        assert event["logger"] == "tests.file"

    def test_both_destinations(self, tmp_path):
        setup_logging(LoggingConfig(destination="both", file_path=str(tmp_path / "c.log")))
        handler_types = {type(h) for h in logging.getLogger().handlers}
        assert handler_types == {RotatingFileHandler, logging.StreamHandler}

    def test_repeated_setup_replaces_handlers(self):
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig())
        assert len(logging.getLogger().handlers) == 1
