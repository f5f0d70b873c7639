"""
Exceptions module - Custom exception hierarchy.

This module defines all custom exceptions used throughout web-selection,
providing clear error types for different failure scenarios.
"""

from web_selection.exceptions.base import (
    WebSelectionError,
    ConfigurationError,
)
from web_selection.exceptions.provider import (
    ProviderError,
    UnsupportedStrategyError,
)
from web_selection.exceptions.selection import (
    SelectionError,
    EmptySelectionError,
    IndexOutOfRangeError,
    NoElementsFoundError,
    NoElementFoundError,
    CardinalityError,
    MultipleElementsError,
    RequiresAllError,
    AllModeNotSupportedError,
    NotComparableError,
    ElementRetrievalError,
    ElementQueryError,
)

__all__ = [
    # Base exceptions
    "WebSelectionError",
    "ConfigurationError",
    # Provider exceptions
    "ProviderError",
    "UnsupportedStrategyError",
    # Selection exceptions
    "SelectionError",
    "EmptySelectionError",
    "IndexOutOfRangeError",
    "NoElementsFoundError",
    "NoElementFoundError",
    "CardinalityError",
    "MultipleElementsError",
    "RequiresAllError",
    "AllModeNotSupportedError",
    "NotComparableError",
    "ElementRetrievalError",
    "ElementQueryError",
]
