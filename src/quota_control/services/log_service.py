from __future__ import annotations

import os
from pathlib import Path

from loguru import logger

from quota_control.services.config_service import Settings

DEFAULT_LOG_LEVEL = "INFO"


def default_log_path() -> Path:
    xdg = os.environ.get("XDG_STATE_HOME")
    if xdg:
        base = Path(xdg)
    else:
        base = Path.home() / ".local" / "state"
    return base / "quota_control" / "quota_control.log"


def _known_level(name: str) -> bool:
    try:
        logger.level(name)
    except ValueError:
        return False
    return True


def setup_logging(settings: Settings) -> Path | None:
    """Send log records to a rotating file; curses owns the terminal.

    Returns the log file path, or None when no file sink could be added.
    """
    logger.remove()

    level = settings.log_level
    bad_level = not _known_level(level)
    if bad_level:
        level = DEFAULT_LOG_LEVEL

    p = Path(settings.log_path) if settings.log_path else default_log_path()
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(p),
            level=level,
            rotation="10 MB",
            retention=5,
            encoding="utf-8",
        )
    except OSError:
        return None

    if bad_level:
        logger.warning("unknown log_level {!r}, using {}", settings.log_level, DEFAULT_LOG_LEVEL)
    return p
