"""
web-selection - Chainable element selections for remotely rendered documents.

This package lets a caller describe where an element lives with a
composable selector chain and resolves it into live element handles each
time an action or query needs them.

Example:
    >>> from web_selection import Selection
    >>> from web_selection.browsers import PlaywrightPage
    >>> root = Selection(PlaywrightPage(page))
    >>> root.find("#menu").find_link("Settings").click()
    >>> root.find("li.item").all().visible()
"""

__version__ = "0.1.0"

# Public API exports
from web_selection.selection import (
    Criterion,
    Strategy,
    Selection,
    resolve,
    select_one,
    select_multiple,
    render,
    equals_element,
)
from web_selection.config.settings import Settings

__all__ = [
    "Criterion",
    "Strategy",
    "Selection",
    "resolve",
    "select_one",
    "select_multiple",
    "render",
    "equals_element",
    "Settings",
    "__version__",
]
