from __future__ import annotations

"""
Logging Handler Factories.

Every handler created here is tagged, so reconfiguration only removes
docsee's own handlers and leaves library or test-harness handlers alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import List, Optional

from docsee.infra.logging.config import CONSOLE_FORMAT, FILE_DATEFMT, FILE_FORMAT, LoggingConfig

_HANDLER_TAG_ATTR: str = "_docsee_handler"


def _tag_handler(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_TAG_ATTR, True)
    return handler


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def build_sink_handlers(cfg: LoggingConfig, level: int) -> List[logging.Handler]:
    """
    Create the terminal handlers that the queue listener writes to.

    Returns:
        List[logging.Handler]: Console and/or file handlers. May be empty.
    """
    sinks: List[logging.Handler] = []

    if cfg.console:
        console = logging.StreamHandler(sys.stderr)
        console.setLevel(level)
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        sinks.append(_tag_handler(console))

    if cfg.log_file:
        rotating = _open_rotating_file(cfg, level)
        if rotating is not None:
            sinks.append(rotating)

    return sinks


def _open_rotating_file(cfg: LoggingConfig, level: int) -> Optional[RotatingFileHandler]:
    """Open the rotating log file, or warn on stderr and return None."""
    log_file = str(cfg.log_file)
    try:
        parent = os.path.dirname(os.path.abspath(log_file))
        if parent:
            os.makedirs(parent, exist_ok=True)
        rotating = RotatingFileHandler(
            log_file,
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{log_file}': {e}\n")
        return None

    rotating.setLevel(level)
    rotating.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=FILE_DATEFMT))
    _tag_handler(rotating)
    return rotating
