"""
Example: Basic Selection

This example shows how to build selections against a live page and read
from the elements they resolve to.
"""

from playwright.sync_api import sync_playwright

from web_selection import Selection
from web_selection.browsers import PlaywrightPage
from web_selection.config import load_config
from web_selection.utils import configure_logging


def main():
    """Run a basic selection example."""

    # Load configuration (from env vars, config files, or defaults)
    settings = load_config()
    configure_logging(settings.logging)

    with sync_playwright() as p:
        browser = p.chromium.launch(headless=True)
        page = browser.new_page()
        page.goto("https://example.com")

        root = Selection(PlaywrightPage(page, settings.provider))

        heading = root.find("body").find("h1")
        print(f"{heading}: {heading.text()}")

        paragraphs = root.find("p").all()
        print(f"{paragraphs}: {paragraphs.count()} match(es), visible={paragraphs.visible()}")

        link = root.find_xpath("//div").at(0).find_link("More information...")
        print(f"{link}: href={link.attribute('href')}")

        browser.close()


if __name__ == "__main__":
    main()
