"""
Selection - Immutable, chainable description of where elements live.

A selection is bound to a root provider and holds an ordered tuple of
criteria. Every builder method returns a new selection; the receiver is
never modified, so selections derived from a common prefix stay
independent.

Example:
    >>> root = Selection(PlaywrightPage(page))
    >>> rows = root.find("table.results").find("tr")   # CSS: table.results tr
    >>> second = rows.at(1).find_link("Details")       # CSS: table.results tr [1] | Link: "Details"
    >>> second.click()
"""

from dataclasses import dataclass, field, replace
from typing import Tuple, TYPE_CHECKING

from web_selection.selection.criterion import Criterion, Strategy
from web_selection.selection.describer import render
from web_selection.selection.queries import SelectionQueries

if TYPE_CHECKING:
    from web_selection.interfaces.provider import IElementProvider


LABEL_XPATH = (
    '//input[@id=(//label[normalize-space(text())="{text}"]/@for)]'
    ' | //label[normalize-space(text())="{text}"]/input'
)


@dataclass(frozen=True)
class Selection(SelectionQueries):
    """
    An ordered chain of criteria plus the all() flag.

    Attributes:
        provider: Root provider the first criterion is resolved against
        criteria: Selection levels, outermost first
        accept_all: Whether resolution may legally yield several elements
    """
    provider: "IElementProvider" = field(compare=False, repr=False)
    criteria: Tuple[Criterion, ...] = ()
    accept_all: bool = False

    def extend(self, strategy: Strategy, value: str) -> "Selection":
        """
        Append a new unindexed criterion.

        Consecutive unindexed CSS criteria are merged into one using the
        descendant combinator instead of adding a level.

        Args:
            strategy: Locator strategy for the new level
            value: Selector, expression or link text

        Returns:
            A new selection
        """
        if self.criteria:
            last = self.criteria[-1]
            if strategy is Strategy.CSS and last.strategy is Strategy.CSS and not last.indexed:
                merged = Criterion(Strategy.CSS, f"{last.value} {value}")
                return replace(self, criteria=self.criteria[:-1] + (merged,))

        return replace(self, criteria=self.criteria + (Criterion(strategy, value),))

    def find(self, selector: str) -> "Selection":
        """Narrow by CSS selector."""
        return self.extend(Strategy.CSS, selector)

    def find_xpath(self, selector: str) -> "Selection":
        """Narrow by XPath expression."""
        return self.extend(Strategy.XPATH, selector)

    def find_link(self, text: str) -> "Selection":
        """Narrow to links with exactly this text."""
        return self.extend(Strategy.LINK_TEXT, text)

    def find_by_label(self, text: str) -> "Selection":
        """
        Narrow to the input labelled by ``text``.

        Matches an input whose id is referenced by a label with this
        normalized text, or an input nested inside such a label.
        """
        return self.find_xpath(LABEL_XPATH.format(text=text))

    def at(self, index: int) -> "Selection":
        """
        Narrow the last level to the element at ``index``.

        The index is validated lazily, when the selection is resolved.
        On a selection without criteria this returns an unmodified copy.
        """
        if not self.criteria:
            return replace(self)

        return replace(self, criteria=self.criteria[:-1] + (self.criteria[-1].at(index),))

    def all(self) -> "Selection":
        """Allow this selection to refer to more than one element."""
        return replace(self, accept_all=True)

    def __str__(self) -> str:
        return render(self)
