"""
Logging system for matchkit.
Provides human-readable logs with optional console and file output.

The package logger carries only a NullHandler until setup_logger() is
called, so importing matchkit never prints anything on its own.
"""

import copy
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import LogConfig, get_config

ROOT_LOGGER_NAME = "matchkit"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


# ANSI color codes for terminal output
class Colors:
    RESET = "\033[0m"
    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"
    BOLD = "\033[1m"


class ColoredFormatter(logging.Formatter):
    """Custom formatter with colors for console output."""

    LEVEL_COLORS = {
        logging.DEBUG: Colors.CYAN,
        logging.INFO: Colors.GREEN,
        logging.WARNING: Colors.YELLOW,
        logging.ERROR: Colors.RED,
        logging.CRITICAL: Colors.BOLD + Colors.RED,
    }

    def format(self, record):
        # Copy so the file handler still sees the plain record
        record = copy.copy(record)
        color = self.LEVEL_COLORS.get(record.levelno, Colors.WHITE)
        record.levelname = f"{color}{record.levelname}{Colors.RESET}"
        record.msg = f"{color}{record.msg}{Colors.RESET}"
        return super().format(record)


class MatchLogger:
    """
    Central logging setup for matchkit.

    Features:
    - Console output with colors
    - Optional dated log file when LogConfig.log_dir is set
    - Child loggers per module (matchkit.matchers.change, ...)
    """

    _instance: Optional['MatchLogger'] = None
    _initialized: bool = False

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_config: Optional[LogConfig] = None):
        if MatchLogger._initialized:
            return

        self.config = log_config or get_config().log
        self.main_logger = self._create_logger(ROOT_LOGGER_NAME, self.config.level)

        MatchLogger._initialized = True

    def _create_logger(self, name: str, level: str) -> logging.Logger:
        """Create a configured logger instance."""
        logger = logging.getLogger(name)
        logger.setLevel(getattr(logging, level.upper()))
        logger.handlers.clear()

        # Console handler with colors
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(ColoredFormatter(
            "%(asctime)s | %(levelname)s | %(message)s",
            datefmt="%H:%M:%S"
        ))
        logger.addHandler(console_handler)

        # File handler (plain text, no colors)
        if self.config.file_logging:
            log_dir = Path(self.config.log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            log_file = log_dir / f"matchkit_{datetime.now().strftime('%Y%m%d')}.log"

            file_handler = logging.FileHandler(log_file, encoding='utf-8')
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S"
            ))
            logger.addHandler(file_handler)

        return logger

    @property
    def trace_matches(self) -> bool:
        return self.config.trace_matches


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger under the matchkit namespace.

    Args:
        name: Module name (usually __name__); None returns the package logger

    Returns:
        Standard library Logger
    """
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logger(log_config: Optional[LogConfig] = None) -> MatchLogger:
    """Initialize console/file handlers with custom settings."""
    MatchLogger._initialized = False
    MatchLogger._instance = None
    return MatchLogger(log_config)


def trace_enabled() -> bool:
    """
    Whether match outcomes should be logged (MATCHKIT_TRACE_MATCHES).

    Only a logger set up through setup_logger() can turn tracing on. Matching
    never loads the configuration itself, so it never reads .env files or
    touches os.environ.
    """
    if MatchLogger._instance is not None and MatchLogger._initialized:
        return MatchLogger._instance.trace_matches
    return False
