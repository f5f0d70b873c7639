"""
Criterion - A single level of a selection.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Strategy(Enum):
    """Locator strategies, named after their WebDriver equivalents."""
    CSS = "css selector"
    XPATH = "xpath"
    LINK_TEXT = "link text"

    @property
    def label(self) -> str:
        """Short name used when rendering a selection."""
        return _LABELS[self]


_LABELS = {
    Strategy.CSS: "CSS",
    Strategy.XPATH: "XPath",
    Strategy.LINK_TEXT: "Link",
}


@dataclass(frozen=True)
class Criterion:
    """
    One selection rule: strategy, value and an optional position.

    Attributes:
        strategy: How ``value`` is interpreted
        value: The selector, expression or link text
        index: Position among the matches at this level (when indexed)
        indexed: Whether this level narrows to the element at ``index``
    """
    strategy: Strategy
    value: str
    index: int = 0
    indexed: bool = False

    def at(self, index: int) -> "Criterion":
        """Return a copy narrowed to the match at ``index``."""
        return replace(self, index=index, indexed=True)

    def __str__(self) -> str:
        if self.strategy is Strategy.LINK_TEXT:
            rendered = f'{self.strategy.label}: "{self.value}"'
        else:
            rendered = f"{self.strategy.label}: {self.value}"

        if self.indexed:
            return f"{rendered} [{self.index}]"
        return rendered
