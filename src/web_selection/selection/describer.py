"""
Describer - Stable diagnostic rendering of a selection.

The rendering is embedded verbatim in every error message the engine
produces, e.g. ``CSS: #menu [1] | XPath: //li | Link: "Home" - All``.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from web_selection.selection.chain import Selection


CRITERIA_SEPARATOR = " | "
ALL_SUFFIX = " - All"


def render(selection: "Selection") -> str:
    """
    Render a selection for diagnostics.

    Args:
        selection: The selection to describe

    Returns:
        Criteria joined by ``" | "``, with ``" - All"`` appended in all() mode
    """
    rendered = CRITERIA_SEPARATOR.join(str(criterion) for criterion in selection.criteria)
    if selection.accept_all:
        return rendered + ALL_SUFFIX
    return rendered
