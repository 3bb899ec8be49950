"""Process-level helpers."""

from __future__ import annotations

import logging

_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_HANDLER_NAME = "nexus_grid"


def configure_logging(level: int | str = logging.INFO) -> logging.Logger:
    """Attach one stream handler to the ``nexus_grid`` logger.

    Calling it again only updates the level.
    """

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    logger = logging.getLogger("nexus_grid")
    logger.setLevel(level)
    if not any(getattr(handler, "name", None) == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt="%H:%M:%S"))
        logger.addHandler(handler)
    return logger
