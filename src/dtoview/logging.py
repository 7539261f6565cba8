"""Logger setup for dtoview.

``configure_logger`` gives a logger one stream handler with the package log
format. Importing :mod:`dtoview` applies it to the ``"dtoview"`` logger, at the
``log_level`` setting (``DTOVIEW_LOG_LEVEL``), so codec and property errors
logged by submodules reach stderr. Loggers that already carry handlers are
returned untouched.
"""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logger(name: str, level: int | str | None = None) -> logging.Logger:
    """Summary: Return a logger configured with a standard formatter.
    Parameters:
        name: Name of the logger to retrieve.
        level: Optional logging level override. Defaults to the configured
            ``log_level`` setting when no handlers are configured on the logger.
    Returns:
        logging.Logger: Configured logger instance.
    Side Effects:
        Adds a ``StreamHandler`` with a standard formatter when the logger does
        not already have handlers attached.
    """

    logger = logging.getLogger(name)

    if not logger.handlers:
        if level is None:
            from dtoview.config import get_settings

            level = get_settings().log_level
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(level)

    return logger


__all__ = ["LOG_FORMAT", "configure_logger"]
