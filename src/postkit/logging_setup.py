"""Centralized logging configuration for postkit."""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console"]

_LOG_LEVEL_ENV: Final[str] = "POSTKIT_LOG_LEVEL"
_DEFAULT_LEVEL_NAME: Final[str] = "INFO"

console = Console(stderr=True)


class _PostkitHandler(RichHandler):
    """Marker type for the handler installed by :func:`configure_logging`."""


def _resolve_level(level_name: str | None = None) -> int:
    """Return the logging level from the argument or the environment."""
    name = (level_name or os.getenv(_LOG_LEVEL_ENV, _DEFAULT_LEVEL_NAME)).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(level_name: str | None = None) -> None:
    """Install the postkit Rich handler on the root logger and set the level.

    Repeated calls (one per CLI command in a test session) leave a single
    handler in place and only adjust the level.
    """
    root_logger = logging.getLogger()
    if not any(isinstance(handler, _PostkitHandler) for handler in root_logger.handlers):
        root_logger.handlers.clear()
        handler = _PostkitHandler(
            console=console,
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(handler)

    root_logger.setLevel(_resolve_level(level_name))
    logging.captureWarnings(True)
