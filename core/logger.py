"""Logging helpers for the plan service.

`get_logger` hands out loggers that share one stream handler and one rotating
file handler, so every module writes the same format to the same places.
"""

import logging
import os
from logging.handlers import RotatingFileHandler

from core.config import get_settings

_formatter = logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s")
_handlers = []


def _shared_handlers():
    if _handlers:
        return _handlers

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(_formatter)
    _handlers.append(stream_handler)

    log_dir = get_settings().LOG_DIR
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "app.log"), maxBytes=5 * 1024 * 1024, backupCount=3
        )
        file_handler.setFormatter(_formatter)
        _handlers.append(file_handler)
    return _handlers


def get_logger(name: str = __name__, level: str = None) -> logging.Logger:
    """Return a logger wired to the shared handlers.

    Calling this repeatedly for the same name does not stack handlers.
    """
    logger = logging.getLogger(name)
    if not logger.handlers:
        logger.setLevel(level or get_settings().LOG_LEVEL)
        for handler in _shared_handlers():
            logger.addHandler(handler)
        logger.propagate = False
    return logger
