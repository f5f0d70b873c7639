"""
Integration tests - selections resolved against a real Chromium page.

Skipped when Playwright's browsers are not installed.
"""

import pytest
from playwright.sync_api import Error as PlaywrightError, sync_playwright

from web_selection import Selection
from web_selection.browsers import PlaywrightPage
from web_selection.config import ProviderSettings
from web_selection.exceptions import ElementRetrievalError


HTML = """
<html><body>
  <ul id="first">
    <li class="item">One</li>
    <li class="item">Two</li>
  </ul>
  <ul id="second">
    <li class="item">Three</li>
    <li class="item" style="display: none">Four</li>
  </ul>
  <label for="email">Email</label>
  <input id="email" value="someone@example.com">
  <label>Name <input id="name"></label>
  <a href="/home">Home</a>
  <a href="/homepage">Homepage</a>
</body></html>
"""


@pytest.fixture(scope="module")
def browser():
    """Provide a headless Chromium, or skip."""
    with sync_playwright() as p:
        try:
            browser = p.chromium.launch(headless=True)
        except PlaywrightError as e:
            pytest.skip(f"Chromium not available: {e}")
        yield browser
        browser.close()


@pytest.fixture
def root(browser):
    """Provide a selection bound to a page with known content."""
    page = browser.new_page()
    page.set_content(HTML)
    yield Selection(PlaywrightPage(page, ProviderSettings()))
    page.close()


class TestPlaywrightSelection:
    """Test resolution end to end."""

    def test_merged_css(self, root):
        """Test merged CSS behaves as a descendant selector."""
        assert root.find("#second").find(".item").count() == 2

    def test_fan_out_order(self, root):
        """Test children come back parent by parent."""
        items = root.find("ul").at(1).find_xpath("./li").at(0)
        assert items.text() == "Three"

    def test_indexed_per_parent(self, root):
        """Test an index applies within each parent."""
        firsts = root.find_xpath("//ul").find_xpath("./li").at(1).all()
        assert firsts.count() == 2
        assert firsts.visible() is False

    def test_index_out_of_range(self, root):
        """Test an index past the end is reported."""
        with pytest.raises(ElementRetrievalError, match=r"element index out of range \(>1\)"):
            root.find_xpath("//ul").at(2).text()

    def test_link_text_exact(self, root):
        """Test link text matches the whole text."""
        assert root.find_link("Home").attribute("href") == "/home"

    def test_find_by_label(self, root):
        """Test both label forms resolve to their inputs."""
        assert root.find_by_label("Email").attribute("id") == "email"
        assert root.find_by_label("Name").attribute("id") == "name"

    def test_equals_element(self, root):
        """Test two routes to one node compare equal."""
        by_id = root.find("#email")
        by_label = root.find_by_label("Email")
        assert by_id.equals_element(by_label) is True
        assert by_id.equals_element(root.find("#name")) is False

    def test_css_property(self, root):
        """Test computed CSS is read from the page."""
        assert root.find("#second").find(".item").at(1).css("display") == "none"
