"""
Selection Queries - Reads and actions layered over the cardinality guard.

Single-element reads (text, attribute, CSS, click) go through
``select_one``; state checks go through ``select_multiple`` and pass only
when every selected element is in the state.
"""

from typing import Callable, Optional, TYPE_CHECKING
import logging

from web_selection.exceptions.selection import (
    ElementQueryError,
    ElementRetrievalError,
    NotComparableError,
)
from web_selection.selection.cardinality import select_multiple, select_one
from web_selection.selection.resolver import resolve

if TYPE_CHECKING:
    from web_selection.interfaces.provider import IElement

logger = logging.getLogger(__name__)


def equals_element(selection, comparable: object) -> bool:
    """
    Check whether two selections refer to the same single element.

    Args:
        selection: The first selection
        comparable: The selection to compare against

    Returns:
        True if both resolve to the same remote element

    Raises:
        NotComparableError: If ``comparable`` is not a selection
        ElementRetrievalError: If either side does not select exactly one element
        ElementQueryError: If the provider fails to compare the elements
    """
    from web_selection.selection.chain import Selection

    if not isinstance(comparable, Selection):
        raise NotComparableError()

    element = select_one(selection)
    other_element = select_one(comparable)

    try:
        return element.is_equal_to(other_element)
    except Exception as e:
        raise ElementQueryError(
            f"failed to compare '{selection}' to '{comparable}': {e}",
            selection=str(selection),
            cause=e,
        ) from e


class SelectionQueries:
    """Mixin giving a selection its element reads and actions."""

    def count(self) -> int:
        """Number of elements currently matched (no cardinality check)."""
        try:
            return len(resolve(self.provider, self))
        except Exception as e:
            raise ElementRetrievalError(
                f"failed to retrieve elements with '{self}': {e}",
                selection=str(self),
                cause=e,
            ) from e

    def text(self) -> str:
        """Visible text of the single selected element."""
        element = select_one(self)
        try:
            return element.text()
        except Exception as e:
            raise ElementQueryError(
                f"failed to retrieve text for '{self}': {e}",
                selection=str(self),
                cause=e,
            ) from e

    def _property(
        self, read: Callable[["IElement", str], Optional[str]], name: str, kind: str
    ) -> Optional[str]:
        element = select_one(self)
        try:
            return read(element, name)
        except Exception as e:
            raise ElementQueryError(
                f"failed to retrieve {kind} value for '{self}': {e}",
                selection=str(self),
                cause=e,
            ) from e

    def attribute(self, name: str) -> Optional[str]:
        """Value of an attribute on the single selected element."""
        return self._property(lambda element, attr: element.get_attribute(attr), name, "attribute")

    def css(self, property_name: str) -> str:
        """
        Computed CSS property of the single selected element.

        Only exact computed values are returned, e.g. ``rgba(0, 0, 255, 1)``
        rather than ``blue``.
        """
        return self._property(lambda element, prop: element.get_css(prop), property_name, "CSS property")

    def _state(self, check: Callable[["IElement"], bool], name: str) -> bool:
        for element in select_multiple(self):
            try:
                passed = check(element)
            except Exception as e:
                raise ElementQueryError(
                    f"failed to determine whether some '{self}' is {name}: {e}",
                    selection=str(self),
                    cause=e,
                ) from e
            if not passed:
                return False
        return True

    def selected(self) -> bool:
        """Whether every selected element is checked or selected."""
        return self._state(lambda element: element.is_selected(), "selected")

    def visible(self) -> bool:
        """Whether every selected element is displayed."""
        return self._state(lambda element: element.is_visible(), "visible")

    def enabled(self) -> bool:
        """Whether every selected element is enabled."""
        return self._state(lambda element: element.is_enabled(), "enabled")

    def click(self) -> None:
        """Click the single selected element."""
        element = select_one(self)
        try:
            element.click()
        except Exception as e:
            raise ElementQueryError(
                f"failed to click on '{self}': {e}",
                selection=str(self),
                cause=e,
            ) from e
        logger.debug(f"Clicked '{self}'")

    def equals_element(self, comparable: object) -> bool:
        """Whether this selection and ``comparable`` refer to the same element."""
        return equals_element(self, comparable)
