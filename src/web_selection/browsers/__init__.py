"""
Browsers module - Element providers for browser automation engines.
"""

from web_selection.browsers.playwright_browser import (
    PlaywrightPage,
    PlaywrightElement,
    build_selector,
)

__all__ = [
    "PlaywrightPage",
    "PlaywrightElement",
    "build_selector",
]
