"""Tests for ``setup_logging``."""

import logging

import pytest

from mobile_app_ws.app.core.logging_config import PACKAGE_LOGGER, setup_logging

pytestmark = pytest.mark.unit


@pytest.fixture
def bare_root(monkeypatch):
    root = logging.getLogger()
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = root.level, package_logger.level
    monkeypatch.setattr(root, "handlers", [])
    yield root
    for handler in root.handlers:
        handler.close()
    root.setLevel(saved[0])
    package_logger.setLevel(saved[1])


def test_level_applies_to_package_logger(bare_root) -> None:
    package_logger = setup_logging("debug")

    assert package_logger.name == PACKAGE_LOGGER
    assert package_logger.level == logging.DEBUG
    assert bare_root.level == logging.DEBUG


def test_other_loggers_stay_at_warning(bare_root) -> None:
    setup_logging("INFO")

    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
    assert bare_root.level == logging.WARNING


def test_unknown_level_falls_back_to_info(bare_root) -> None:
    assert setup_logging("chatty").level == logging.INFO


def test_file_handler_is_added_once(bare_root, tmp_path) -> None:
    logfile = tmp_path / "service.log"

    setup_logging("INFO", str(logfile))
    setup_logging("INFO", str(logfile))
    logging.getLogger(PACKAGE_LOGGER + ".tests").info("written")

    assert len(bare_root.handlers) == 2
    assert any(isinstance(h, logging.FileHandler) for h in bare_root.handlers)
    for handler in bare_root.handlers:
        handler.flush()
    assert "written" in logfile.read_text(encoding="utf-8")


def test_existing_handlers_are_left_alone(monkeypatch) -> None:
    root = logging.getLogger()
    sentinel = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [sentinel])
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    saved = package_logger.level

    try:
        setup_logging("ERROR")
        assert root.handlers == [sentinel]
        assert package_logger.level == logging.ERROR
    finally:
        package_logger.setLevel(saved)
