"""Logging configuration for frogpath runs.

Everything logs under the ``frogpath`` logger hierarchy; this module
attaches a single console handler to its root.
"""

from __future__ import annotations

import logging

ROOT_LOGGER = "frogpath"


def setup_logging(level: str | int = "INFO") -> logging.Logger:
    """Configure the ``frogpath`` logger for a run.

    Clears handlers left over from a previous call so repeated setup does
    not duplicate output.

    Args:
        level: Level name (``"DEBUG"``, ``"INFO"``, ...) or number.

    Returns:
        The configured root ``frogpath`` logger.

    Raises:
        ValueError: If ``level`` is not a known level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            msg = f"unknown log level {level!r}"
            raise ValueError(msg)
        level = resolved

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(
        logging.Formatter("[%(name)s] %(levelname)s: %(message)s"),
    )
    logger.addHandler(console_handler)
    return logger
