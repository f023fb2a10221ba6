"""Logging helpers for rationals.

Library output stays quiet by default: modules log under the ``rationals``
namespace and nothing is printed unless a caller attaches a handler, e.g.
through ``ensure_console_handler``. The root logger is never configured.
"""

import logging
from typing import Optional

_CONSOLE_HANDLER_NAME = "rationals_console"
_DEFAULT_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger("rationals").addHandler(logging.NullHandler())


def get_logger(name: str = "rationals") -> logging.Logger:
    return logging.getLogger(name)


def ensure_console_handler(
    logger: logging.Logger,
    *,
    enabled: bool,
    level: int = logging.DEBUG,
    fmt: str = _DEFAULT_FORMAT,
) -> None:
    """Attach/remove a StreamHandler to `logger` without touching root logging."""

    existing: Optional[logging.Handler] = None
    for h in logger.handlers:
        if getattr(h, "name", None) == _CONSOLE_HANDLER_NAME:
            existing = h
            break

    if not enabled:
        if existing is not None:
            logger.removeHandler(existing)
        return

    if existing is None:
        handler = logging.StreamHandler()
        handler.name = _CONSOLE_HANDLER_NAME
        handler.setFormatter(logging.Formatter(fmt))
        logger.addHandler(handler)
    else:
        existing.setFormatter(logging.Formatter(fmt))

    logger.setLevel(level)
    logger.propagate = False
