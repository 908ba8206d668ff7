"""Logging configuration for the backend and frontend packages."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAMES = ("backend", "frontend")


def setup_logging(level: int = logging.WARNING, log_file: Path | None = None) -> None:
    """Configure the package loggers.

    Console output goes to stderr; stdout belongs to the terminal
    frontends.  Calling this again replaces the previous handlers.

    Args:
        level: Logging level (e.g. ``logging.DEBUG``).
        log_file: Optional path to also write the log to.
    """
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    handlers: list[logging.Handler] = []
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when the menu restarts a frontend.
        for old in logger.handlers[:]:
            logger.removeHandler(old)
            old.close()
        for handler in handlers:
            logger.addHandler(handler)
        logger.propagate = False

    logging.getLogger("backend").debug("Logging initialized.")
