"""
Playwright Browser - Element providers backed by Playwright's sync API.

This module adapts an existing Playwright page and its element handles to
the provider interfaces, so a selection can be resolved against a live
document. The caller owns the browser and page lifecycle.

Example:
    >>> from playwright.sync_api import sync_playwright
    >>> with sync_playwright() as p:
    ...     page = p.chromium.launch().new_page()
    ...     page.goto("https://example.com")
    ...     root = Selection(PlaywrightPage(page))
    ...     root.find("h1").text()
"""

from typing import Any, Callable, List, Optional, TypeVar
import json
import logging

from playwright.sync_api import Error as PlaywrightError

from web_selection.config import get_settings
from web_selection.config.settings import ProviderSettings
from web_selection.exceptions.provider import ProviderError, UnsupportedStrategyError
from web_selection.interfaces.provider import IElement, IElementProvider
from web_selection.selection.criterion import Criterion, Strategy

logger = logging.getLogger(__name__)

T = TypeVar("T")

COMPUTED_STYLE_JS = "(el, name) => window.getComputedStyle(el).getPropertyValue(name)"
IS_SELECTED_JS = "el => Boolean(el.checked || el.selected)"
SAME_NODE_JS = "(a, b) => a === b"


def build_selector(criterion: Criterion, link_text_match: str = "exact") -> str:
    """
    Translate a criterion into a Playwright selector string.

    Args:
        criterion: The criterion to translate
        link_text_match: 'exact' or 'partial' matching for link text

    Returns:
        A selector accepted by ``query_selector_all``

    Raises:
        UnsupportedStrategyError: If the strategy has no Playwright equivalent
    """
    if criterion.strategy is Strategy.CSS:
        return criterion.value
    if criterion.strategy is Strategy.XPATH:
        return f"xpath={criterion.value}"
    if criterion.strategy is Strategy.LINK_TEXT:
        pseudo = "text-is" if link_text_match == "exact" else "has-text"
        return f"a:{pseudo}({json.dumps(criterion.value)})"
    # reached only by strategies added to the enum without a translation here
    raise UnsupportedStrategyError(criterion.strategy.value)


def _run(description: str, func: Callable[..., T], *args: Any) -> T:
    try:
        return func(*args)
    except PlaywrightError as e:
        raise ProviderError(f"{description} failed: {e}") from e


class PlaywrightElement(IElement):
    """
    Playwright implementation of IElement.

    Wraps a Playwright ElementHandle; child criteria are resolved
    against its descendants.
    """

    def __init__(self, element: Any, link_text_match: str = "exact"):
        """
        Initialize the element wrapper.

        Args:
            element: Playwright ElementHandle
            link_text_match: Link text matching mode for child queries
        """
        self._element = element
        self._link_text_match = link_text_match

    def get_elements(self, criterion: Criterion) -> List[IElement]:
        """Find matching descendants."""
        selector = build_selector(criterion, self._link_text_match)
        handles = _run(f"query for '{selector}'", self._element.query_selector_all, selector)
        return [PlaywrightElement(handle, self._link_text_match) for handle in handles]

    def is_equal_to(self, other: IElement) -> bool:
        """Compare node identity inside the page."""
        if not isinstance(other, PlaywrightElement):
            raise ProviderError("cannot compare a Playwright element to a foreign element")
        return bool(_run("element comparison", self._element.evaluate, SAME_NODE_JS, other._element))

    def text(self) -> str:
        """Get visible text."""
        return _run("text retrieval", self._element.inner_text)

    def get_attribute(self, name: str) -> Optional[str]:
        """Get an attribute value."""
        return _run(f"attribute '{name}' retrieval", self._element.get_attribute, name)

    def get_css(self, property_name: str) -> str:
        """Get a computed CSS property."""
        return _run(
            f"CSS property '{property_name}' retrieval",
            self._element.evaluate,
            COMPUTED_STYLE_JS,
            property_name,
        )

    def is_selected(self) -> bool:
        """Check if checked or selected."""
        return bool(_run("selection check", self._element.evaluate, IS_SELECTED_JS))

    def is_visible(self) -> bool:
        """Check if visible."""
        return _run("visibility check", self._element.is_visible)

    def is_enabled(self) -> bool:
        """Check if enabled."""
        return _run("enabled check", self._element.is_enabled)

    def click(self) -> None:
        """Click on this element."""
        _run("click", self._element.click)


class PlaywrightPage(IElementProvider):
    """
    Playwright implementation of the root provider.

    Wraps a Playwright Page; criteria are resolved against the whole
    document.
    """

    def __init__(self, page: Any, settings: Optional[ProviderSettings] = None):
        """
        Initialize the page wrapper.

        Args:
            page: Playwright Page object (sync API)
            settings: Provider settings (defaults to the global settings)
        """
        self._page = page
        self._link_text_match = (settings or get_settings().provider).link_text_match

    @property
    def url(self) -> str:
        """Get current URL."""
        return self._page.url

    def get_elements(self, criterion: Criterion) -> List[IElement]:
        """Find matching elements in the document."""
        selector = build_selector(criterion, self._link_text_match)
        handles = _run(f"query for '{selector}'", self._page.query_selector_all, selector)
        logger.debug(f"Page query '{selector}' matched {len(handles)} element(s)")
        return [PlaywrightElement(handle, self._link_text_match) for handle in handles]
