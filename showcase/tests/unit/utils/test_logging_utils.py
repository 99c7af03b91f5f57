from __future__ import annotations

import logging

import pytest

from showcase.utils import logging as logging_utils


@pytest.fixture(autouse=True)
def _restore_root_level(monkeypatch):
    for var in ("SHOWCASE_LOG_LEVEL", "SHOWCASE_DEBUG_LOGGING", "SHOWCASE_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    root = logging.getLogger()
    previous = root.level
    yield
    root.setLevel(previous)


def test_preferences_toggle_debug_level() -> None:
    assert logging_utils.apply_preferences(True) == logging.DEBUG
    assert logging.getLogger().level == logging.DEBUG
    assert logging_utils.apply_preferences(False) == logging.INFO


def test_env_level_overrides_preferences(monkeypatch) -> None:
    monkeypatch.setenv("SHOWCASE_LOG_LEVEL", "warning")

    assert logging_utils.apply_preferences(True) == logging.WARNING
    assert logging_utils.configure_root() == logging.WARNING


def test_debug_flag_forces_debug(monkeypatch) -> None:
    monkeypatch.setenv("SHOWCASE_DEBUG", "on")

    assert logging_utils.configure_root("ERROR") == logging.DEBUG


def test_configure_root_falls_back_for_unknown_names() -> None:
    assert logging_utils.configure_root("chatty") == logging.INFO
    assert logging_utils.configure_root(logging.ERROR) == logging.ERROR
    assert logging_utils.level_name(logging.ERROR) == "ERROR"


def test_env_override_reads_given_mapping() -> None:
    assert logging_utils.env_override({}) is None
    assert logging_utils.env_override({"SHOWCASE_LOG_LEVEL": "15"}) == 15
    assert logging_utils.env_override({"SHOWCASE_DEBUG_LOGGING": "yes"}) == logging.DEBUG
    assert logging_utils.env_override({"SHOWCASE_DEBUG": "off"}) is None


def test_http_pool_logging_only_verbose_when_debugging() -> None:
    http_logger = logging.getLogger(logging_utils.HTTP_LOGGER)
    previous = http_logger.level
    try:
        logging_utils.apply_preferences(False)
        assert http_logger.level == logging.WARNING
        logging_utils.apply_preferences(True)
        assert http_logger.level == logging.DEBUG
    finally:
        http_logger.setLevel(previous)
