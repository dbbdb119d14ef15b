"""
PRISM — Logging
The TUI owns the terminal, so records go to a rotating file only.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_MAX_BYTES = 1_000_000
LOG_BACKUP_COUNT = 3


def configure_logging(logs_dir: Path, level: str = "INFO") -> Path:
    """Attach a rotating file handler to the package logger and return the log path."""
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / "prism.log"

    root = logging.getLogger("prism_picker")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    if any(isinstance(h, RotatingFileHandler) for h in root.handlers):
        return log_file

    handler = RotatingFileHandler(
        log_file,
        maxBytes=LOG_MAX_BYTES,
        backupCount=LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
    return log_file
