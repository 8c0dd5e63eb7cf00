"""Process-wide logging setup for the subnorm command line."""

from __future__ import annotations

import logging
import logging.handlers
import os
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILE_NAME = "subnorm.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _level_from_env() -> int:
    name = os.environ.get("SUBNORM_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(log_dir: Path | None = None) -> None:
    """Send log records to stderr and, optionally, a rotating file.

    Level comes from SUBNORM_LOG_LEVEL (default INFO). The log file
    ``subnorm.log`` goes to ``log_dir``, or SUBNORM_LOG_DIR when no directory
    is passed; without either only stderr is used. Calling this again
    replaces the handlers installed earlier.
    """
    if log_dir is None:
        env_dir = os.environ.get("SUBNORM_LOG_DIR")
        log_dir = Path(env_dir) if env_dir else None

    level = _level_from_env()
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if log_dir is not None:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_dir / LOG_FILE_NAME,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
