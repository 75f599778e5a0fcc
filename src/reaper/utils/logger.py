"""Logging utilities for reaper.

Usage:
    from reaper.utils.logger import logger
    logger.info("message")

Log level is controlled by the REAPER_LOG environment variable:
    REAPER_LOG=DEBUG
"""

from __future__ import annotations

import logging
import os
import sys
from functools import lru_cache
from pathlib import Path

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)


def _get_log_settings() -> tuple[str, str]:
    """Get log settings, trying centralized config first, falling back to env vars.

    Returns:
        Tuple of (log_level, log_dir)
    """
    try:
        from reaper.config import get_settings

        settings = get_settings()
        return settings.logging.log, settings.storage.log_dir
    except Exception:
        # Settings failed validation (e.g. a bad REAPER_SEGMENT_COUNT);
        # logging still has to come up so the error can be reported.
        return (
            os.getenv("REAPER_LOG", "INFO"),
            os.getenv("REAPER_LOG_DIR", "~/.reaper/logs"),
        )


def _log_filename() -> str:
    proc_name = os.path.basename(sys.argv[0])
    if "reaper-segments" in proc_name:
        return "reaper-segments.log"
    return "reaper.log"


@lru_cache(maxsize=None)
def get_logger() -> logging.Logger:
    """Returns a configured logger for reaper.

    Log level is set by REAPER_LOG env var (default INFO).
    """
    log_level_str, log_dir_str = _get_log_settings()

    log_level = getattr(logging, log_level_str.strip().upper(), logging.INFO)
    logging.basicConfig(level=log_level, format=LOG_FORMAT)

    logger = logging.getLogger("reaper")
    logger.setLevel(log_level)

    # File handler is best effort: a read-only home must not break the CLI
    try:
        log_dir = Path(log_dir_str).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_dir / _log_filename())
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
    except OSError as e:
        logger.warning("File logging disabled: %s", e)

    return logger


logger = get_logger()
