"""Mini README: Application-wide logging helpers for PocketLedger.

Structure:
    * get_logger - factory returning module loggers with baseline setup.
    * configure_root_logger - installs the shared handler and adjusts level.

Usage:
    Modules import ``get_logger`` to create contextual loggers. The first
    call installs a single stderr handler on the root logger; later calls to
    ``configure_root_logger`` only change the level, so the menu can honour
    ``--log-level`` without stacking duplicate handlers.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False

DEFAULT_LEVEL = logging.WARNING


def configure_root_logger(level: Union[int, str, None] = None) -> None:
    """Configure the root logger once and apply ``level`` when provided."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()

    if not _LOGGER_INITIALISED:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter(
                "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        root_logger.addHandler(handler)
        root_logger.setLevel(DEFAULT_LEVEL)
        _LOGGER_INITIALISED = True

    if level is not None:
        if isinstance(level, str):
            level = level.upper()
        root_logger.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    configure_root_logger()
    return logging.getLogger(name)
