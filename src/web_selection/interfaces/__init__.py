"""
Interfaces module - Abstract base classes for pluggable providers.

This module defines the contracts that page and element adapters must
implement to be resolvable by a selection.
"""

from web_selection.interfaces.provider import (
    IElementProvider,
    IElement,
)

__all__ = [
    "IElementProvider",
    "IElement",
]
