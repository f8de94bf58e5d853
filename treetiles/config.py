"""Defaults and logging setup for treetiles."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final, Optional, Tuple, Union

# Layout defaults
DEFAULT_BOUNDS: Final[Tuple[float, float, float, float]] = (0.0, 0.0, 800.0, 600.0)
DEFAULT_PADDING: Final[float] = 0.0

# Preview window & palette
PREVIEW_WINDOW_SIZE: Final[str] = "900x600"
CANVAS_BG_COLOR: Final[str] = "#0E1018"
RECT_INSET_PADDING: Final[float] = 1.0
MIN_LABEL_WIDTH: Final[int] = 60
MIN_LABEL_HEIGHT: Final[int] = 30
BRANCH_TILE_BASE: Final[str] = "#C48B4A"
LEAF_TILE_BASE: Final[str] = "#4D90D5"
TEXT_COLOR: Final[str] = "#191919"
NORMAL_LIGHTEN_FACTOR: Final[float] = 0.25
DEPTH_SHADE_FACTOR: Final[float] = 0.06

# Logging
LOG_LEVEL_ENV: Final[str] = "TREETILES_LOG_LEVEL"
LAUNCH_LOG_ENV: Final[str] = "TREETILES_LAUNCH_LOG"
LOG_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL: Final[str] = "WARNING"

_handler: Optional[logging.Handler] = None


def launch_log_path() -> Path:
    """Where ``python -m treetiles`` appends tracebacks of failed launches."""
    override = os.environ.get(LAUNCH_LOG_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".cache" / "treetiles" / "launch.log"


def resolve_log_level(level: Optional[Union[str, int]] = None) -> int:
    """Turn a level name, number or the environment default into a logging level.

    Raises:
        ValueError: if ``level`` names no known logging level
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def configure_logging(level: Optional[Union[str, int]] = None) -> None:
    """Send treetiles log records to stderr at ``level``.

    Calling it again only changes the level; the handler is installed once.
    """
    global _handler
    package_logger = logging.getLogger("treetiles")
    package_logger.setLevel(resolve_log_level(level))
    if _handler is None or _handler not in package_logger.handlers:
        _handler = logging.StreamHandler()
        _handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(_handler)
