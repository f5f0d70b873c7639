"""
Pytest configuration and fixtures.
"""

import pytest
from typing import List, Optional

from web_selection.interfaces.provider import IElement, IElementProvider


class FakeElement(IElement):
    """In-memory element that records the criteria it is asked to resolve."""

    def __init__(
        self,
        name: str = "element",
        children: Optional[List["FakeElement"]] = None,
        text: str = "",
        attributes: Optional[dict] = None,
        css: Optional[dict] = None,
        selected: bool = False,
        visible: bool = True,
        enabled: bool = True,
        error: Optional[Exception] = None,
        read_error: Optional[Exception] = None,
    ):
        self.name = name
        self.children = children or []
        self._text = text
        self._attributes = attributes or {}
        self._css = css or {}
        self._selected = selected
        self._visible = visible
        self._enabled = enabled
        self.error = error
        self.read_error = read_error
        self.queries = []
        self.compared_with = None
        self.clicked = False

    def __repr__(self) -> str:
        return f"FakeElement({self.name!r})"

    def _read(self, value):
        if self.read_error:
            raise self.read_error
        return value

    def get_elements(self, criterion):
        self.queries.append(criterion)
        if self.error:
            raise self.error
        return list(self.children)

    def is_equal_to(self, other):
        self.compared_with = other
        return self._read(other is self)

    def text(self):
        return self._read(self._text)

    def get_attribute(self, name):
        return self._read(self._attributes.get(name))

    def get_css(self, property_name):
        return self._read(self._css.get(property_name, ""))

    def is_selected(self):
        return self._read(self._selected)

    def is_visible(self):
        return self._read(self._visible)

    def is_enabled(self):
        return self._read(self._enabled)

    def click(self):
        self._read(None)
        self.clicked = True


class FakePage(IElementProvider):
    """In-memory root provider."""

    def __init__(self, elements: Optional[List[FakeElement]] = None, error: Optional[Exception] = None):
        self.elements = elements or []
        self.error = error
        self.queries = []

    def get_elements(self, criterion):
        self.queries.append(criterion)
        if self.error:
            raise self.error
        return list(self.elements)


@pytest.fixture
def element_factory():
    """Provide the FakeElement class for building element trees."""
    return FakeElement


@pytest.fixture
def page():
    """Provide an empty fake root provider."""
    return FakePage()


@pytest.fixture
def root(page):
    """Provide an empty selection bound to the fake page."""
    from web_selection import Selection
    return Selection(page)


@pytest.fixture
def selection(root):
    """Provide a single-level CSS selection."""
    return root.find("#selector")


@pytest.fixture(autouse=True)
def clean_settings():
    """Reset the settings singleton around every test."""
    from web_selection.config import reset_settings

    reset_settings()
    yield
    reset_settings()
