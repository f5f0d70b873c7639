"""
Resolver - Turns a selection into live element handles.

Resolution walks the criteria outermost first. The first criterion is
answered by the root provider; every later criterion is answered by each
element found at the previous level, and the results are concatenated in
parent order:

    root  --#list-->      [P1, P2]
    P1    --li-->         [C11, C12]
    P2    --li-->         [C21, C22]
    result                [C11, C12, C21, C22]

An indexed criterion narrows its level to a single element after that
level's candidates are collected. Nothing is cached; every call queries
the provider again.
"""

from typing import List, TYPE_CHECKING
import logging

from web_selection.exceptions.selection import EmptySelectionError, IndexOutOfRangeError

if TYPE_CHECKING:
    from web_selection.interfaces.provider import IElement, IElementProvider
    from web_selection.selection.chain import Selection
    from web_selection.selection.criterion import Criterion

logger = logging.getLogger(__name__)


def get_elements(provider: "IElementProvider", criterion: "Criterion") -> List["IElement"]:
    """
    Resolve one criterion against one provider, applying its index.

    Args:
        provider: Page or element to query
        criterion: The criterion to resolve

    Returns:
        All matches, or just the indexed one

    Raises:
        IndexOutOfRangeError: If the index is outside the matches
    """
    elements = provider.get_elements(criterion)

    if criterion.indexed:
        if criterion.index < 0 or criterion.index >= len(elements):
            raise IndexOutOfRangeError(criterion.index, len(elements))
        elements = [elements[criterion.index]]

    return elements


def resolve(provider: "IElementProvider", selection: "Selection") -> List["IElement"]:
    """
    Resolve every level of a selection.

    Provider failures propagate unchanged; callers attach the selection
    context.

    Args:
        provider: Root provider for the first criterion
        selection: The selection to resolve

    Returns:
        Matching elements in parent-major order

    Raises:
        EmptySelectionError: If the selection has no criteria
        IndexOutOfRangeError: If any indexed level is out of range
    """
    if not selection.criteria:
        raise EmptySelectionError()

    first, *rest = selection.criteria
    current = get_elements(provider, first)
    logger.debug(f"{first}: {len(current)} element(s) from root")

    for criterion in rest:
        found: List["IElement"] = []
        for element in current:
            found.extend(get_elements(element, criterion))
        logger.debug(f"{criterion}: {len(found)} element(s) from {len(current)} parent(s)")
        current = found

    return current
