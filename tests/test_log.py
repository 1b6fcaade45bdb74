"""
Tests for logger setup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cafe_order.log import setup_logger


def test_setup_logger_writes_to_file_once(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "debug.log"
    log = setup_logger("cafe_order_test_file", log_file=log_file)
    again = setup_logger("cafe_order_test_file", log_file=log_file)
    assert again is log
    assert len(log.handlers) == 1

    log.info("catalog_loaded items=%d", 3)
    for handler in log.handlers:
        handler.flush()
    assert "| INFO | cafe_order_test_file | catalog_loaded items=3" in log_file.read_text(encoding="utf-8")


def test_setup_logger_without_file() -> None:
    log = setup_logger("cafe_order_test_null", log_file=None)
    assert isinstance(log.handlers[0], logging.NullHandler)
