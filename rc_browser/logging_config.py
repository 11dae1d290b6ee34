from __future__ import annotations

import logging
import os
from typing import Optional, Union

from pythonjsonlogger import jsonlogger

PLAIN_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
JSON_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Dash's dev server logs every asset request at INFO.
NOISY_LOGGERS = ("werkzeug",)


def resolve_level(level: Union[int, str, None]) -> int:
    """
    Turn a level name ("debug", "INFO") or number into a logging level.
    Unknown names fall back to INFO.
    """
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
        level: Union[int, str, None] = None,
        force_format: Optional[str] = None,
) -> None:
    """
    Configure the root logger for the radiocarbon browser.

    Format selection:
        1) force_format argument ("json" or "plain") if provided
        2) env var RC_BROWSER_LOG_FORMAT
        3) default = "json"

    Level selection:
        1) level argument if provided
        2) env var RC_BROWSER_LOG_LEVEL
        3) default = INFO

    JSON records carry `level` and `logger` keys plus whatever a module
    passes through `extra=` (clause text, record counts, paths).
    """
    if force_format is not None:
        format_mode = force_format.lower()
    else:
        format_mode = os.getenv("RC_BROWSER_LOG_FORMAT", "json").lower()

    if level is None:
        level = os.getenv("RC_BROWSER_LOG_LEVEL")
    root_level = resolve_level(level)

    logger = logging.getLogger()
    logger.setLevel(root_level)

    handler = logging.StreamHandler()

    if format_mode == "plain":
        formatter = logging.Formatter(PLAIN_FORMAT)
    else:
        formatter = jsonlogger.JsonFormatter(
            JSON_FORMAT,
            rename_fields={"levelname": "level", "name": "logger"},
        )

    handler.setFormatter(formatter)

    # Replace any existing handlers to avoid duplicate logs
    logger.handlers.clear()
    logger.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(root_level, logging.WARNING))
