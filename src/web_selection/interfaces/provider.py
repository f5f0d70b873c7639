"""
Provider Interface - Abstract base classes for element providers.

This module defines the contract that page and element adapters must follow
so the resolver can walk from the document root down through nested elements
with the same code at every depth.

Example:
    >>> from web_selection.browsers import PlaywrightPage
    >>> root = PlaywrightPage(page)
    >>> buttons = root.get_elements(Criterion(Strategy.CSS, "button"))
    >>> icons = buttons[0].get_elements(Criterion(Strategy.CSS, ".icon"))
"""

from abc import ABC, abstractmethod
from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from web_selection.selection.criterion import Criterion


class IElementProvider(ABC):
    """
    Anything that can resolve one criterion into element handles.

    The page adapter resolves against the whole document; an element
    resolves against its own descendants.
    """

    @abstractmethod
    def get_elements(self, criterion: "Criterion") -> List["IElement"]:
        """
        Find all elements matching a single criterion.

        The criterion's index is ignored here; indexing is applied by
        the resolver after the provider answers.

        Args:
            criterion: Strategy and value to match

        Returns:
            Matching elements in document order (possibly empty)

        Raises:
            ProviderError: If the remote side fails to answer
        """
        ...


class IElement(IElementProvider):
    """
    Abstract interface for a live remote element.

    Handles are created by a provider during a single resolution and are
    not retained by the engine afterwards.
    """

    @abstractmethod
    def is_equal_to(self, other: "IElement") -> bool:
        """
        Check whether this handle refers to the same remote element.

        Args:
            other: Another handle from the same provider family

        Returns:
            True if both handles point at the same node
        """
        ...

    @abstractmethod
    def text(self) -> str:
        """Get the visible text of this element."""
        ...

    @abstractmethod
    def get_attribute(self, name: str) -> Optional[str]:
        """
        Get an attribute value from this element.

        Args:
            name: The attribute name

        Returns:
            The attribute value, or None if not present
        """
        ...

    @abstractmethod
    def get_css(self, property_name: str) -> str:
        """
        Get the computed value of a CSS property.

        Args:
            property_name: CSS property name (e.g. 'color')

        Returns:
            The computed value, e.g. 'rgba(0, 0, 255, 1)'
        """
        ...

    @abstractmethod
    def is_selected(self) -> bool:
        """Check if this element is a checked input or selected option."""
        ...

    @abstractmethod
    def is_visible(self) -> bool:
        """Check if this element is displayed."""
        ...

    @abstractmethod
    def is_enabled(self) -> bool:
        """Check if this element is enabled."""
        ...

    @abstractmethod
    def click(self) -> None:
        """Click on this element."""
        ...
