"""Logging setup for the cafe-order app."""

from __future__ import annotations

import logging
from pathlib import Path

from cafe_order.config import DEBUG_LOG_PATH


def setup_logger(
    name: str = "cafe_order",
    level: int = logging.DEBUG,
    log_file: str | Path | None = DEBUG_LOG_PATH,
) -> logging.Logger:
    """
    Configure and return the package logger.

    The TUI owns the terminal, so records go to a file instead of stderr.

    Args:
        name: Logger name.
        level: Logging level.
        log_file: Path to the log file. If None, a NullHandler is attached.

    Returns:
        Configured logger.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    log.setLevel(level)
    log.propagate = False

    if log_file is None:
        log.addHandler(logging.NullHandler())
        return log

    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    fh = logging.FileHandler(log_path, encoding="utf-8")
    fh.setFormatter(fmt)
    log.addHandler(fh)
    return log
