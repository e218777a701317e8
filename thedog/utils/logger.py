"""Logging setup for the dog image client."""

import logging
import sys
from pathlib import Path
from typing import Optional

from thedog.utils.config import log_level


def setup_logger(
    name: str = "thedog",
    level: int | str | None = None,
    log_file: Optional[Path] = None,
) -> logging.Logger:
    """
    Configure and return a logger.

    Args:
        name: Logger name.
        level: Logging level, as a number or a level name such as "DEBUG".
            Defaults to THEDOG_LOG_LEVEL (see thedog.utils.config.log_level).
        log_file: Optional path to log file. If None, logs to stderr only.

    Returns:
        Configured logger.
    """
    log = logging.getLogger(name)
    if log.handlers:
        return log

    if level is None:
        level = log_level()
    log.setLevel(level.upper() if isinstance(level, str) else level)
    fmt = logging.Formatter(
        "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    h = logging.StreamHandler(sys.stderr)
    h.setFormatter(fmt)
    log.addHandler(h)

    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        log.addHandler(fh)

    return log


def get_logger(name: str = "thedog") -> logging.Logger:
    """Return the package logger. Use after setup_logger has been called."""
    return logging.getLogger(name)
