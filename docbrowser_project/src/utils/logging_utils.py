#!/usr/bin/env python3
"""Logging setup for the document browser.

Console output always; a log file when requested.  Everything below the
root logger inherits the handlers installed here.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def default_log_file() -> Path:
    """Location used by the application entry point (``~/.docbrowser/docbrowser.log``)."""
    return Path.home() / ".docbrowser" / "docbrowser.log"


def setup_logging(log_level: int = logging.INFO,
                  log_file: Optional[str] = None) -> None:
    """Set up application logging with the specified configuration.

    Args:
        log_level: The logging level (default: logging.INFO). The
            ``DOCBROWSER_LOG_LEVEL`` environment variable (e.g. ``DEBUG``)
            takes precedence when set.
        log_file: Optional path to a log file. If None, logs to console only.

    """
    env_level = os.environ.get("DOCBROWSER_LOG_LEVEL")
    if env_level:
        log_level = logging.getLevelName(env_level.upper()) if not env_level.isdigit() else int(env_level)
        if not isinstance(log_level, int):
            log_level = logging.INFO

    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Re-running setup must not duplicate output.
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)

        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized (level=%s)", logging.getLevelName(log_level))
