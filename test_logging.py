"""
Tests for the logging configuration
"""

import logging
from logging.handlers import RotatingFileHandler

from logging_config import setup_logging, get_logger, LOGGER_NAME


def close_handlers(logger):
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_setup_logging_writes_to_file(tmp_path):
    logger = setup_logging(name="battery_tray_test_file", logs_dir=tmp_path / "logs")
    try:
        file_handlers = [h for h in logger.handlers if isinstance(h, RotatingFileHandler)]
        assert len(file_handlers) == 1
        assert not logger.propagate

        logger.debug("Detailed icon information - file only")
        file_handlers[0].flush()

        log_files = list((tmp_path / "logs").glob("battery_tray_*.log"))
        assert len(log_files) == 1
        assert "Detailed icon information" in log_files[0].read_text(encoding="utf-8")
    finally:
        close_handlers(logger)


def test_setup_logging_is_idempotent(tmp_path):
    logger = setup_logging(name="battery_tray_test_idempotent", logs_dir=tmp_path)
    try:
        handler_count = len(logger.handlers)
        assert setup_logging(name="battery_tray_test_idempotent", logs_dir=tmp_path) is logger
        assert len(logger.handlers) == handler_count
    finally:
        close_handlers(logger)


def test_console_can_be_disabled(tmp_path):
    logger = setup_logging(name="battery_tray_test_quiet", enable_console=False, logs_dir=tmp_path)
    try:
        assert all(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    finally:
        close_handlers(logger)


def test_unwritable_log_dir_falls_back_to_console(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file where the log directory should be")

    logger = setup_logging(name="battery_tray_test_fallback", logs_dir=blocker / "logs")
    try:
        assert logger.handlers
        assert not any(isinstance(h, RotatingFileHandler) for h in logger.handlers)
    finally:
        close_handlers(logger)


def test_get_logger_returns_child():
    child = get_logger("icon_generator")
    assert child.name == f"{LOGGER_NAME}.icon_generator"
    assert logging.getLogger(LOGGER_NAME).handlers
