"""
Logging setup for the Longhorn Network.

All package loggers hang off the "longhorn" logger, which gets a single
stdout handler the first time get_logger() is called.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import LOG_LEVEL, VERBOSE

ROOT_LOGGER_NAME = "longhorn"

_configured = False


def _resolve_level(level: Optional[str]) -> int:
    name = (level or LOG_LEVEL or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level: Optional[str] = None, verbose: Optional[bool] = None) -> logging.Logger:
    """
    Configure the package root logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        verbose: When False, only warnings and above are emitted

    Returns:
        The "longhorn" root logger
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    root.addHandler(handler)

    lvl = _resolve_level(level)
    if verbose is None:
        verbose = VERBOSE
    if not verbose:
        lvl = max(lvl, logging.WARNING)
    root.setLevel(lvl)

    _configured = True
    return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """Get a logger under the package root, configuring the root on first use."""
    if not _configured:
        configure_logging()
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_verbose(flag: bool) -> None:
    """Enable/disable informational output (useful in notebooks/experiments)."""
    configure_logging(verbose=bool(flag))


def reset_logging() -> None:
    """Drop the package handler so the next get_logger() reconfigures (useful for testing)."""
    global _configured
    logging.getLogger(ROOT_LOGGER_NAME).handlers.clear()
    _configured = False
