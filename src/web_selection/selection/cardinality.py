"""
Cardinality Guard - Enforces one-versus-many before handing out elements.

Both entry points resolve the selection against its bound provider and
raise ``ElementRetrievalError`` with the selection's rendering for any
failure, including provider errors.
"""

from typing import List, TYPE_CHECKING
import logging

from web_selection.exceptions.selection import (
    AllModeNotSupportedError,
    ElementRetrievalError,
    MultipleElementsError,
    NoElementFoundError,
    NoElementsFoundError,
    RequiresAllError,
)
from web_selection.selection.resolver import resolve

if TYPE_CHECKING:
    from web_selection.interfaces.provider import IElement
    from web_selection.selection.chain import Selection

logger = logging.getLogger(__name__)


def _select_elements(selection: "Selection") -> List["IElement"]:
    elements = resolve(selection.provider, selection)

    if not elements:
        raise NoElementsFoundError()

    if len(elements) > 1 and not selection.accept_all:
        raise RequiresAllError(len(elements))

    return elements


def _select_element(selection: "Selection") -> "IElement":
    if selection.accept_all:
        raise AllModeNotSupportedError()

    elements = resolve(selection.provider, selection)

    if not elements:
        raise NoElementFoundError()

    if len(elements) > 1:
        raise MultipleElementsError(len(elements))

    return elements[0]


def select_multiple(selection: "Selection") -> List["IElement"]:
    """
    Select one or more elements.

    Several matches are only accepted when the selection is in all() mode.

    Args:
        selection: The selection to resolve

    Returns:
        All matching elements (at least one)

    Raises:
        ElementRetrievalError: If resolution fails, nothing matches, or
            several elements match without all()
    """
    try:
        return _select_elements(selection)
    except Exception as e:
        logger.debug(f"Could not select elements for '{selection}': {e}")
        raise ElementRetrievalError(
            f"failed to retrieve elements with '{selection}': {e}",
            selection=str(selection),
            cause=e,
        ) from e


def select_one(selection: "Selection") -> "IElement":
    """
    Select exactly one element.

    Args:
        selection: The selection to resolve (must not be in all() mode)

    Returns:
        The single matching element

    Raises:
        ElementRetrievalError: If the selection is in all() mode, resolution
            fails, or the number of matches is not exactly one
    """
    try:
        return _select_element(selection)
    except Exception as e:
        logger.debug(f"Could not select element for '{selection}': {e}")
        raise ElementRetrievalError(
            f"failed to retrieve element with '{selection}': {e}",
            selection=str(selection),
            cause=e,
        ) from e
