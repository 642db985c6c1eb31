"""
Tests for the logging helpers and match tracing.
"""

import logging
import os
from datetime import datetime

from matchkit.config import Config, LogConfig
from matchkit.matchers import Eq
from matchkit.utils import ColoredFormatter, MatchLogger, get_logger, setup_logger, trace_enabled


class TestGetLogger:

    def test_package_logger(self):
        assert get_logger().name == "matchkit"
        assert get_logger("matchkit").name == "matchkit"

    def test_prefixes_foreign_names(self):
        assert get_logger("custom").name == "matchkit.custom"

    def test_keeps_package_names(self):
        assert get_logger("matchkit.matchers.change").name == "matchkit.matchers.change"

    def test_silent_by_default(self):
        handlers = logging.getLogger("matchkit").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestColoredFormatter:

    def test_record_is_not_mutated(self):
        record = logging.LogRecord("matchkit", logging.WARNING, __file__, 1, "careful", None, None)
        output = ColoredFormatter("%(levelname)s | %(message)s").format(record)

        assert "careful" in output
        assert "\033[" in output
        assert record.levelname == "WARNING"
        assert record.msg == "careful"


class TestSetupLogger:

    def test_level_and_console_handler(self):
        setup_logger(LogConfig(level="INFO"))
        logger = logging.getLogger("matchkit")

        assert logger.level == logging.INFO
        assert any(isinstance(h.formatter, ColoredFormatter) for h in logger.handlers)

    def test_file_handler(self, tmp_path):
        log_dir = tmp_path / "logs"
        setup_logger(LogConfig(level="INFO", log_dir=str(log_dir)))

        get_logger("custom").info("written to file")
        for handler in logging.getLogger("matchkit").handlers:
            handler.flush()

        log_file = log_dir / f"matchkit_{datetime.now().strftime('%Y%m%d')}.log"
        assert log_file.exists()
        text = log_file.read_text(encoding="utf-8")
        assert "written to file" in text
        assert "\033[" not in text

    def test_reconfigures(self):
        first = setup_logger(LogConfig(level="INFO"))
        second = setup_logger(LogConfig(level="ERROR"))

        assert first is not second
        assert MatchLogger._instance is second
        assert logging.getLogger("matchkit").level == logging.ERROR


class TestTracing:

    def test_disabled_by_default(self, caplog):
        caplog.set_level(logging.DEBUG, logger="matchkit")
        Eq("foo").match(lambda: "foo")

        assert trace_enabled() is False
        assert "eq 'foo'" not in caplog.text

    def test_environment_alone_does_not_enable(self, monkeypatch):
        monkeypatch.setenv("MATCHKIT_TRACE_MATCHES", "true")
        assert trace_enabled() is False

    def test_enabled_through_setup_logger(self, monkeypatch, caplog):
        monkeypatch.setenv("MATCHKIT_TRACE_MATCHES", "true")
        setup_logger()
        caplog.set_level(logging.DEBUG, logger="matchkit")

        Eq("foo").match(lambda: "bar")

        assert trace_enabled() is True
        assert "eq 'foo' -> False" in caplog.text

    def test_logger_config_takes_precedence(self, monkeypatch):
        monkeypatch.setenv("MATCHKIT_TRACE_MATCHES", "true")
        setup_logger(LogConfig(trace_matches=False))

        assert trace_enabled() is False


class TestMatchLeavesEnvironmentAlone:
    """match() never loads configuration on its own."""

    def test_dotenv_is_not_loaded(self, monkeypatch, tmp_path):
        monkeypatch.delenv("MATCHKIT_TEST_SECRET", raising=False)
        (tmp_path / ".env").write_text("MATCHKIT_TEST_SECRET=leaked\nMATCHKIT_TRACE_MATCHES=true\n")
        before = dict(os.environ)

        assert Eq(1).match(lambda: 1) is True

        assert dict(os.environ) == before
        assert "MATCHKIT_TEST_SECRET" not in os.environ
        assert Config._instance is None

    def test_invalid_log_level_does_not_break_matching(self, monkeypatch):
        monkeypatch.setenv("MATCHKIT_LOG_LEVEL", "verbose")

        assert Eq(1).match(lambda: 1) is True
        assert Eq(1).match(lambda: 2) is False
