from __future__ import annotations

"""
Logging Lifecycle.

Records are pushed onto a queue and written by a QueueListener thread,
so the worker threads downloading file bodies never block on console or
file I/O. Configuration is idempotent unless explicitly forced.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import Optional

from docsee.infra.logging.config import LoggingConfig
from docsee.infra.logging.handlers import _is_our_handler, _tag_handler, build_sink_handlers

_CONFIGURED_FLAG_ATTR: str = "_docsee_configured"
_QUEUE_LISTENER_ATTR: str = "_docsee_queue_listener"


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach a single queue-backed handler to the root logger.

    Args:
        cfg: Logging settings.
        force: Rebuild the handlers even if logging is already configured.

    Returns:
        logging.Logger: The root logger.
    """
    root = logging.getLogger()
    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    _detach(root)

    level = cfg.level
    root.setLevel(level)

    sinks = build_sink_handlers(cfg, level)
    if not sinks:
        return root

    records: queue.Queue[logging.LogRecord] = queue.Queue(-1)
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()
    atexit.register(_stop_listener, listener)

    root.addHandler(_tag_handler(QueueHandler(records)))
    setattr(root, _QUEUE_LISTENER_ATTR, listener)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)
    return root


def shutdown_logging() -> None:
    """Flush pending records and remove docsee handlers from the root logger."""
    _detach(logging.getLogger())


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _detach(root: logging.Logger) -> None:
    _stop_listener(getattr(root, _QUEUE_LISTENER_ATTR, None))
    setattr(root, _QUEUE_LISTENER_ATTR, None)
    setattr(root, _CONFIGURED_FLAG_ATTR, False)

    for handler in [h for h in root.handlers if _is_our_handler(h)]:
        root.removeHandler(handler)
        handler.close()


def _stop_listener(listener: Optional[QueueListener]) -> None:
    """Stop a listener once. A second call is a no-op."""
    if listener is not None and getattr(listener, "_thread", None) is not None:
        listener.stop()
