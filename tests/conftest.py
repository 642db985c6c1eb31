"""
Pytest configuration for matchkit tests.
"""

import logging

import pytest

from matchkit.config import Config
from matchkit.utils.logger import MatchLogger
from tests.harness import ActionSpy, Counter, Form, TextBox


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    """
    Fresh Config/MatchLogger singletons and an empty working directory.

    Restores the package logger's handlers and level afterwards so tests that
    call setup_logger() don't leak console handlers into later tests.
    """
    monkeypatch.chdir(tmp_path)
    for name in ("MATCHKIT_LOG_LEVEL", "MATCHKIT_LOG_DIR", "MATCHKIT_TRACE_MATCHES"):
        monkeypatch.delenv(name, raising=False)

    package_logger = logging.getLogger("matchkit")
    saved_handlers = list(package_logger.handlers)
    saved_level = package_logger.level

    Config.reset()
    MatchLogger._instance = None
    MatchLogger._initialized = False

    yield

    for handler in package_logger.handlers:
        if handler not in saved_handlers:
            handler.close()
    package_logger.handlers[:] = saved_handlers
    package_logger.setLevel(saved_level)

    Config.reset()
    MatchLogger._instance = None
    MatchLogger._initialized = False


@pytest.fixture
def counter() -> Counter:
    """Counter starting at zero."""
    return Counter()


@pytest.fixture
def text_box() -> TextBox:
    """TextBox holding 'foo'."""
    return TextBox()


@pytest.fixture
def valid_form() -> Form:
    """Form with no errors and one child."""
    return Form(children=["field"])


@pytest.fixture
def spy() -> ActionSpy:
    """Action that only counts its calls."""
    return ActionSpy()
