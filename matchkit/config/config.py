"""
Configuration management for matchkit.
Loads settings from .env files and environment variables with library-friendly defaults.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in TRUE_VALUES


@dataclass
class LogConfig:
    """
    Logging configuration.

    Attributes:
        level: Level name for the matchkit loggers (DEBUG, INFO, WARNING, ...)
        log_dir: Directory for the file handler; empty disables file output
        trace_matches: Log every match() outcome at DEBUG
    """
    level: str = "WARNING"
    log_dir: str = ""
    trace_matches: bool = False

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.level.upper()), int):
            raise ValueError(f"LogConfig: unknown log level '{self.level}'")
        self.level = self.level.upper()

    @property
    def file_logging(self) -> bool:
        return bool(self.log_dir)


class Config:
    """
    Central configuration manager.

    Loads configuration from environment variables (optionally seeded from
    .env files) and provides typed access to all settings.
    """

    _instance: Optional['Config'] = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, env_file: str = ".env"):
        if self._initialized:
            return

        # Later files override earlier ones; the process environment wins over both
        for env_name in [".env", env_file]:
            env_path = Path(env_name)
            if env_path.exists():
                load_dotenv(env_path, override=False)

        self.log = self._load_log_config()

        self._initialized = True

    def _load_log_config(self) -> LogConfig:
        """Load logging configuration from environment."""
        return LogConfig(
            level=os.getenv("MATCHKIT_LOG_LEVEL", "WARNING"),
            log_dir=os.getenv("MATCHKIT_LOG_DIR", ""),
            trace_matches=_env_flag("MATCHKIT_TRACE_MATCHES"),
        )

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance so the next get_config() re-reads the environment."""
        cls._instance = None

    def summary_short(self) -> str:
        """Generate a short one-line configuration summary."""
        target = self.log.log_dir or "console"
        trace = "on" if self.log.trace_matches else "off"
        return f"matchkit | log={self.log.level} -> {target} | trace={trace}"


def get_config(env_file: str = ".env") -> Config:
    """Get or create the global config instance."""
    return Config(env_file)
