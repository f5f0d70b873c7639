"""
Utilities module - Common utility functions.
"""

from web_selection.utils.logging import setup_logging, configure_logging, get_logger

__all__ = [
    "setup_logging",
    "configure_logging",
    "get_logger",
]
