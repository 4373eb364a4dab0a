"""Logging utilities for the capsule bot."""
from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(log_file: str | None = None, level: str | None = None) -> None:
    """Configure root logging with both file and console handlers."""
    root = logging.getLogger()
    if root.handlers:
        return  # already configured

    log_file = log_file or settings.LOG_FILE
    Path(log_file).parent.mkdir(parents=True, exist_ok=True)

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=2_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)

    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.addHandler(file_handler)
    root.addHandler(console_handler)


logger = logging.getLogger("capsule_bot")
