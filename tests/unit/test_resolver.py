"""
Tests for the resolver - multi-level fan-out resolution.
"""

import pytest

from web_selection import Criterion, Strategy, resolve
from web_selection.exceptions import (
    EmptySelectionError,
    IndexOutOfRangeError,
    ProviderError,
)
from web_selection.selection.resolver import get_elements


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def tree(page, element_factory):
    """Two parents with two children each."""
    children_one = [element_factory("C11"), element_factory("C12")]
    children_two = [element_factory("C21"), element_factory("C22")]
    parent_one = element_factory("P1", children=children_one)
    parent_two = element_factory("P2", children=children_two)
    page.elements = [parent_one, parent_two]
    return parent_one, parent_two, children_one + children_two


# =============================================================================
# TESTS
# =============================================================================

class TestGetElements:
    """Test single-level resolution with indexing."""

    def test_passes_through_unindexed(self, page, element_factory):
        """Test unindexed criteria return every match."""
        page.elements = [element_factory("a"), element_factory("b")]
        assert get_elements(page, Criterion(Strategy.CSS, "x")) == page.elements

    def test_narrows_indexed(self, page, element_factory):
        """Test indexed criteria return only the element at the index."""
        page.elements = [element_factory("a"), element_factory("b")]
        assert get_elements(page, Criterion(Strategy.CSS, "x").at(1)) == [page.elements[1]]

    def test_index_equal_to_count(self, page, element_factory):
        """Test the first index past the end is rejected."""
        page.elements = [element_factory("a"), element_factory("b")]
        with pytest.raises(IndexOutOfRangeError, match=r"out of range \(>1\)") as exc_info:
            get_elements(page, Criterion(Strategy.CSS, "x").at(2))

        assert exc_info.value.index == 2
        assert exc_info.value.count == 2

    def test_index_into_empty_result(self, page):
        """Test indexing into no matches reports a maximum of -1."""
        with pytest.raises(IndexOutOfRangeError, match=r"out of range \(>-1\)"):
            get_elements(page, Criterion(Strategy.CSS, "x").at(0))

    def test_negative_index(self, page, element_factory):
        """Test negative indices do not wrap around."""
        page.elements = [element_factory("a"), element_factory("b")]
        with pytest.raises(IndexOutOfRangeError):
            get_elements(page, Criterion(Strategy.CSS, "x").at(-1))


class TestResolve:
    """Test full selection resolution."""

    def test_empty_selection(self, root):
        """Test a selection without criteria cannot be resolved."""
        with pytest.raises(EmptySelectionError, match="empty selection"):
            resolve(root.provider, root)

    def test_single_level(self, page, selection, element_factory):
        """Test the first level is answered by the root provider."""
        page.elements = [element_factory("a")]

        assert resolve(page, selection) == page.elements
        assert page.queries == [Criterion(Strategy.CSS, "#selector")]

    def test_parent_major_order(self, page, selection, tree):
        """Test children are concatenated parent by parent."""
        _, _, children = tree
        result = resolve(page, selection.find_xpath("children"))

        assert [element.name for element in result] == ["C11", "C12", "C21", "C22"]
        assert result == children

    def test_children_queried_with_next_criterion(self, page, selection, tree):
        """Test every parent is asked for the next level."""
        parent_one, parent_two, _ = tree
        resolve(page, selection.find_xpath("children"))

        assert parent_one.queries == [Criterion(Strategy.XPATH, "children")]
        assert parent_two.queries == [Criterion(Strategy.XPATH, "children")]

    def test_indexed_levels(self, page, selection, tree):
        """Test indexing narrows each level before fanning out."""
        parent_one, parent_two, children = tree
        result = resolve(page, selection.at(1).find_xpath("children").at(1))

        assert result == [children[3]]
        assert page.queries == [Criterion(Strategy.CSS, "#selector", index=1, indexed=True)]
        assert parent_one.queries == []
        assert parent_two.queries == [Criterion(Strategy.XPATH, "children", index=1, indexed=True)]

    def test_index_applies_per_parent(self, page, selection, tree):
        """Test an index picks one child from each parent, not one overall."""
        _, _, children = tree
        result = resolve(page, selection.find_xpath("children").at(0))

        assert result == [children[0], children[2]]

    def test_first_index_out_of_range(self, page, selection, tree):
        """Test an out-of-range first index fails."""
        with pytest.raises(IndexOutOfRangeError, match=r"element index out of range \(>1\)"):
            resolve(page, selection.at(2))

    def test_later_index_out_of_range(self, page, selection, tree):
        """Test an out-of-range index on a deeper level fails."""
        with pytest.raises(IndexOutOfRangeError, match=r"element index out of range \(>1\)"):
            resolve(page, selection.at(0).find("#selector").at(2))

    def test_no_parents_yields_nothing(self, page, selection):
        """Test an empty level short-circuits to an empty result."""
        assert resolve(page, selection.find_xpath("children")) == []

    def test_root_failure_propagates_unchanged(self, page, selection):
        """Test root provider errors are not wrapped by the resolver."""
        error = ProviderError("some error")
        page.error = error

        with pytest.raises(ProviderError) as exc_info:
            resolve(page, selection.find_xpath("children"))
        assert exc_info.value is error

    def test_child_failure_short_circuits(self, page, selection, tree):
        """Test a failing parent stops the whole resolution."""
        parent_one, parent_two, _ = tree
        parent_one.error = RuntimeError("some error")

        with pytest.raises(RuntimeError, match="some error"):
            resolve(page, selection.find_xpath("children"))
        assert parent_two.queries == []

    def test_requeries_every_time(self, page, selection, element_factory):
        """Test nothing is cached between resolutions."""
        page.elements = [element_factory("a")]
        resolve(page, selection)
        page.elements = [element_factory("b"), element_factory("c")]

        assert len(resolve(page, selection)) == 2
        assert len(page.queries) == 2
