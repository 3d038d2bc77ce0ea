"""Tests for settings and logging setup."""
import importlib
import logging

import pytest

import config.settings
from conftest import MONDAY, at
from config import (
    DEFAULT_TIMEZONE,
    PARSE_LOGGERS,
    env_float,
    get_local_now,
    get_logger,
    resolve_log_level,
    setup_logging,
    setup_console_logging,
    LISTING_CATEGORIES,
    VENUE_CATEGORIES,
)
from utils.hours import get_place_status


@pytest.fixture
def root_logger():
    """Root logger, with handlers and levels put back afterwards."""
    root = logging.getLogger()
    saved = list(root.handlers), root.level
    yield root
    for handler in root.handlers:
        if handler not in saved[0]:
            handler.close()
    root.handlers[:] = saved[0]
    root.setLevel(saved[1])
    for name in PARSE_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.fixture
def reload_settings(monkeypatch):
    """Re-read settings after changing the environment."""
    def _reload(**env):
        for name, value in env.items():
            monkeypatch.setenv(name, value)
        return importlib.reload(config.settings)
    yield _reload
    for name in ("LOG_LEVEL", "DEFAULT_MAX_DISTANCE_MI"):
        monkeypatch.delenv(name, raising=False)
    importlib.reload(config.settings)


def test_local_now_is_timezone_aware():
    now = get_local_now()
    assert now.tzinfo is not None
    assert now.tzinfo.zone == DEFAULT_TIMEZONE.zone


def test_all_is_filter_only():
    assert LISTING_CATEGORIES[0] == "All"
    assert "All" not in VENUE_CATEGORIES


class TestEnvFloat:
    """Tests for numeric environment settings."""

    def test_unset_uses_default(self, monkeypatch):
        monkeypatch.delenv("GYM_TEST_RADIUS", raising=False)
        assert env_float("GYM_TEST_RADIUS", 50) == 50.0

    def test_number(self, monkeypatch):
        monkeypatch.setenv("GYM_TEST_RADIUS", "12.5")
        assert env_float("GYM_TEST_RADIUS", 50) == 12.5

    @pytest.mark.parametrize("raw", ["far", "", "nan"])
    def test_not_a_number_uses_default(self, monkeypatch, raw):
        monkeypatch.setenv("GYM_TEST_RADIUS", raw)
        assert env_float("GYM_TEST_RADIUS", 50) == 50.0

    def test_bad_max_distance_does_not_break_import(self, reload_settings):
        settings = reload_settings(DEFAULT_MAX_DISTANCE_MI="far")
        assert settings.DEFAULT_MAX_DISTANCE_MI == 50.0


class TestLogLevel:
    """Tests for resolving the configured log level."""

    def test_names_are_case_insensitive(self):
        assert resolve_log_level("warning") == logging.WARNING
        assert resolve_log_level(" Debug ") == logging.DEBUG

    def test_constants_pass_through(self):
        assert resolve_log_level(logging.ERROR) == logging.ERROR

    @pytest.mark.parametrize("level", ["bogus", "", None])
    def test_unknown_falls_back_to_info(self, level):
        assert resolve_log_level(level) == logging.INFO

    def test_level_comes_from_environment(self, reload_settings, root_logger):
        settings = reload_settings(LOG_LEVEL="debug")
        assert settings.LOG_LEVEL == "DEBUG"
        setup_console_logging()
        assert root_logger.level == logging.DEBUG

    def test_explicit_level_wins(self, reload_settings, root_logger):
        reload_settings(LOG_LEVEL="debug")
        setup_console_logging(level="error")
        assert root_logger.level == logging.ERROR


class TestLoggingSetup:
    """Tests for setup_logging and setup_console_logging."""

    def test_setup_logging_writes_rotating_file(self, tmp_path, root_logger):
        setup_logging(level=logging.DEBUG, log_dir=str(tmp_path / "logs"), log_file="gym.log")
        get_logger("tests.config").info("hello from tests")
        for handler in root_logger.handlers:
            handler.flush()
        assert "hello from tests" in (tmp_path / "logs" / "gym.log").read_text(encoding="utf-8")

    def test_console_logging_replaces_handlers(self, root_logger):
        setup_console_logging(level=logging.ERROR)
        assert len(root_logger.handlers) == 1
        assert root_logger.level == logging.ERROR

    def test_parse_debug_opens_only_parse_loggers(self, root_logger):
        setup_console_logging(level=logging.WARNING, parse_debug=True)
        assert logging.getLogger("utils.hours").isEnabledFor(logging.DEBUG)
        assert logging.getLogger("core.discovery").isEnabledFor(logging.DEBUG)
        assert not logging.getLogger("tests.config").isEnabledFor(logging.INFO)
        assert all(h.level == logging.DEBUG for h in root_logger.handlers)

    def test_parse_debug_off_silences_hours_unknown(self, root_logger):
        setup_console_logging(level=logging.DEBUG)
        assert not logging.getLogger("utils.hours").isEnabledFor(logging.DEBUG)
        assert logging.getLogger("tests.config").isEnabledFor(logging.DEBUG)

    def test_hours_unknown_reaches_handlers_with_parse_debug(self, root_logger):
        setup_console_logging(level=logging.WARNING, parse_debug=True)
        records = []
        collector = logging.Handler()
        collector.emit = records.append
        root_logger.addHandler(collector)

        assert get_place_status("Monday: By appointment", at(MONDAY, 10)) is None
        assert any(r.name == "utils.hours" and r.levelno == logging.DEBUG for r in records)
