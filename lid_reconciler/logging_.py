from __future__ import annotations

import logging
import os
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s - %(message)s"
LOG_MAX_BYTES = 2_000_000
LOG_BACKUPS = 3


def _file_handler_for(root: logging.Logger, log_file: str) -> RotatingFileHandler | None:
    target = os.path.abspath(log_file)
    for handler in root.handlers:
        if isinstance(handler, RotatingFileHandler) and handler.baseFilename == target:
            return handler
    return None


def setup_logging(log_file: str | None = None, verbose: bool = False) -> None:
    """
    Log to the console, and append to `log_file` when given.

    The console handler is only added to an unconfigured root logger; the
    file handler is added whenever that file is not already being written,
    so the daemon's log file exists even under a pre-configured root.
    """
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)
    root = logging.getLogger()
    root.setLevel(level)

    if not root.handlers:
        console = logging.StreamHandler()
        console.setFormatter(formatter)
        root.addHandler(console)

    if log_file and _file_handler_for(root, log_file) is None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handler = RotatingFileHandler(
            log_file, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
