"""Unit tests for core.logger."""

import logging

from crossover_backtest.core.logger import setup_logging


def test_console_only_by_default():
    logger = setup_logging("DEBUG")
    assert logger.name == "crossover_backtest"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_file_handler_and_repeat_setup(tmp_path):
    setup_logging("INFO", tmp_path / "logs", "run.log")
    logger = setup_logging("INFO", tmp_path / "logs", "run.log")
    assert len(logger.handlers) == 2
    logging.getLogger("crossover_backtest.backtest").info("hello from the engine")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from the engine" in (tmp_path / "logs" / "run.log").read_text(encoding="utf-8")
    setup_logging("INFO")


def test_unknown_level_falls_back_to_info():
    assert setup_logging("chatty").level == logging.INFO
