"""
Tests for configuration loading.

Validates that:
1. Defaults apply when nothing is set
2. Environment variables override defaults
3. .env files seed the environment without overriding it
4. Invalid log levels are rejected
"""

import pytest

from matchkit.config import Config, LogConfig, get_config


def _track_env(monkeypatch, *names):
    """Make monkeypatch delete names that a .env file will load."""
    for name in names:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestLogConfig:

    def test_defaults(self):
        config = LogConfig()
        assert config.level == "WARNING"
        assert config.log_dir == ""
        assert config.trace_matches is False
        assert config.file_logging is False

    def test_level_is_normalized(self):
        assert LogConfig(level="debug").level == "DEBUG"

    def test_unknown_level(self):
        with pytest.raises(ValueError, match="unknown log level 'LOUD'"):
            LogConfig(level="LOUD")

    def test_file_logging(self, tmp_path):
        assert LogConfig(log_dir=str(tmp_path)).file_logging is True


class TestConfig:

    def test_defaults(self):
        config = get_config()
        assert config.log.level == "WARNING"
        assert config.log.trace_matches is False

    def test_singleton(self):
        assert get_config() is get_config()

    def test_reset_rereads_environment(self, monkeypatch):
        assert get_config().log.level == "WARNING"
        monkeypatch.setenv("MATCHKIT_LOG_LEVEL", "info")
        assert get_config().log.level == "WARNING"

        Config.reset()
        assert get_config().log.level == "INFO"

    @pytest.mark.parametrize("raw,expected", [
        ("1", True),
        ("true", True),
        ("YES", True),
        (" on ", True),
        ("0", False),
        ("off", False),
        ("", False),
    ])
    def test_trace_flag(self, monkeypatch, raw, expected):
        monkeypatch.setenv("MATCHKIT_TRACE_MATCHES", raw)
        assert get_config().log.trace_matches is expected

    def test_invalid_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("MATCHKIT_LOG_LEVEL", "chatty")
        with pytest.raises(ValueError, match="unknown log level"):
            get_config()

    def test_dotenv_file(self, monkeypatch, tmp_path):
        _track_env(monkeypatch, "MATCHKIT_LOG_LEVEL", "MATCHKIT_TRACE_MATCHES")
        (tmp_path / ".env").write_text("MATCHKIT_LOG_LEVEL=DEBUG\nMATCHKIT_TRACE_MATCHES=true\n")

        config = get_config()
        assert config.log.level == "DEBUG"
        assert config.log.trace_matches is True

    def test_custom_env_file(self, monkeypatch, tmp_path):
        _track_env(monkeypatch, "MATCHKIT_LOG_LEVEL")
        (tmp_path / "matchkit.env").write_text("MATCHKIT_LOG_LEVEL=ERROR\n")

        assert get_config("matchkit.env").log.level == "ERROR"

    def test_environment_wins_over_dotenv(self, monkeypatch, tmp_path):
        monkeypatch.setenv("MATCHKIT_LOG_LEVEL", "ERROR")
        (tmp_path / ".env").write_text("MATCHKIT_LOG_LEVEL=DEBUG\n")

        assert get_config().log.level == "ERROR"

    def test_summary_short(self, monkeypatch, tmp_path):
        assert get_config().summary_short() == "matchkit | log=WARNING -> console | trace=off"

        Config.reset()
        monkeypatch.setenv("MATCHKIT_LOG_DIR", str(tmp_path))
        monkeypatch.setenv("MATCHKIT_TRACE_MATCHES", "1")
        summary = get_config().summary_short()
        assert str(tmp_path) in summary
        assert summary.endswith("trace=on")
