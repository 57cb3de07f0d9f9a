"""Shared logger initialization for the whip CLI.

Usage:
    from whip.utils.logger import get_logger
    log = get_logger(__name__)
    log.info("message")

Modules only ask for loggers; the CLI calls configure_logging() once at startup.
"""
from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

_HANDLER = RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)

_FORMAT = "%(message)s"  # rich handler already adds time & level


def configure_logging(level: int = logging.INFO, verbose: bool = False) -> None:
    """Idempotently configure the root logger with the rich handler on stderr."""
    if verbose:
        level = logging.DEBUG
    root = logging.getLogger()
    root.setLevel(level)
    _HANDLER.setLevel(level)
    if _HANDLER not in root.handlers:
        _HANDLER.setFormatter(logging.Formatter(_FORMAT))
        root.addHandler(_HANDLER)


def get_logger(name: str = __name__, level: Optional[int] = None) -> logging.Logger:
    """Return a module-level logger."""
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    return logger
