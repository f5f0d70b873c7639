"""
Selection module - Chainable selectors and their resolution engine.
"""

from web_selection.selection.criterion import Criterion, Strategy
from web_selection.selection.chain import Selection
from web_selection.selection.resolver import resolve
from web_selection.selection.cardinality import select_one, select_multiple
from web_selection.selection.describer import render
from web_selection.selection.queries import equals_element

__all__ = [
    "Criterion",
    "Strategy",
    "Selection",
    "resolve",
    "select_one",
    "select_multiple",
    "render",
    "equals_element",
]
