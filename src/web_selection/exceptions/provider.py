"""
Provider-related exceptions.

Providers are the page and element adapters that answer a single criterion.
Their failures reach the caller wrapped with selection context, never
reclassified.
"""

from web_selection.exceptions.base import WebSelectionError


class ProviderError(WebSelectionError):
    """
    Error raised by an element provider.

    Raised when the remote side fails to answer a query, such as:
    - Transport or connection failure
    - Stale or detached element handle
    - Invalid selector syntax
    """
    pass


class UnsupportedStrategyError(ProviderError):
    """
    Provider cannot resolve the requested strategy.
    """

    def __init__(self, strategy: str):
        super().__init__(f"unsupported selection strategy: {strategy}")
        self.strategy = strategy
