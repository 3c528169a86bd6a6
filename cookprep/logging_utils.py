"""Mini README: Application-wide logging helpers for cookprep.

Structure:
    * get_logger - factory returning module loggers with shared formatting.
    * configure_root_logger - one-shot root configuration with a chosen level.

Usage:
    Modules import ``get_logger`` at import time and keep a module-level
    ``LOGGER``. The CLI calls ``configure_root_logger`` with the level taken
    from settings before running a batch. The handler is installed only once,
    so tests and the CLI never stack duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def configure_root_logger(level: Optional[Union[int, str]] = None) -> None:
    """Configure the root logger for operator-facing batch output.

    The handler is installed once; later calls only adjust the level.
    """

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    if isinstance(level, str):
        level = level.upper()
    if _LOGGER_INITIALISED:
        if level is not None:
            root_logger.setLevel(level)
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root_logger.setLevel(logging.INFO if level is None else level)
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
