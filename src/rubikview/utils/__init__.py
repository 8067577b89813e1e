"""Utility modules for rubikview."""

from rubikview.utils.display import StatusDisplay, LiveLogger, get_logger

__all__ = [
    "StatusDisplay",
    "LiveLogger",
    "get_logger",
]
