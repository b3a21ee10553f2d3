"""Logging setup for deskscan - rotating file handler and excepthook."""

from __future__ import annotations

import logging
import sys
import traceback

from deskscan.core.config import CACHE_DIR

LOG_FILE = CACHE_DIR / "deskscan.log"
LOG_MAX_BYTES = 256 * 1024  # 256 KB
LOG_BACKUP_COUNT = 2


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to file and install excepthook for uncaught exceptions.

    With *verbose*, records are also echoed to stderr.
    """
    root = logging.getLogger("deskscan")
    root.setLevel(logging.DEBUG)

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    # Avoid duplicate handlers
    if not root.handlers:
        try:
            from logging.handlers import RotatingFileHandler

            CACHE_DIR.mkdir(parents=True, exist_ok=True)
            handler = RotatingFileHandler(
                LOG_FILE,
                maxBytes=LOG_MAX_BYTES,
                backupCount=LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except OSError:
            handler = logging.StreamHandler(sys.stderr)

        handler.setLevel(logging.DEBUG)
        handler.setFormatter(formatter)
        root.addHandler(handler)

        if verbose and isinstance(handler, logging.FileHandler):
            echo = logging.StreamHandler(sys.stderr)
            echo.setLevel(logging.DEBUG)
            echo.setFormatter(formatter)
            root.addHandler(echo)

    sys.excepthook = _excepthook


def _excepthook(exc_type: type, exc_value: BaseException, exc_tb) -> None:
    """Log uncaught exceptions to file and stderr."""
    lines = traceback.format_exception(exc_type, exc_value, exc_tb)
    msg = "".join(lines)
    logger = logging.getLogger("deskscan")
    logger.critical("Uncaught exception:\n%s", msg)
    sys.__excepthook__(exc_type, exc_value, exc_tb)


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(f"deskscan.{name}")
