"""
Selection-related exceptions.

Leaf conditions raised while resolving a selection, and the wrappers that
attach the selection's rendering to them before they reach the caller.
"""

from web_selection.exceptions.base import WebSelectionError


class SelectionError(WebSelectionError):
    """Base exception for selection resolution errors."""
    pass


class EmptySelectionError(SelectionError):
    """
    Resolution attempted on a selection without criteria.
    """

    def __init__(self):
        super().__init__("empty selection")


class IndexOutOfRangeError(SelectionError):
    """
    Indexed criterion points past the candidates found at its level.

    Attributes:
        index: The requested index
        count: Number of candidates available at that level
    """

    def __init__(self, index: int, count: int):
        super().__init__(f"element index out of range (>{count - 1})")
        self.index = index
        self.count = count


class NoElementsFoundError(SelectionError):
    """Resolution succeeded but matched nothing (multi-element operation)."""

    def __init__(self):
        super().__init__("no elements found")


class NoElementFoundError(SelectionError):
    """Resolution succeeded but matched nothing (single-element operation)."""

    def __init__(self):
        super().__init__("no element found")


class CardinalityError(SelectionError):
    """Base exception for one-versus-many mismatches."""
    pass


class MultipleElementsError(CardinalityError):
    """
    A single-element operation matched more than one element.
    """

    def __init__(self, count: int):
        super().__init__(f"multiple elements ({count}) were selected")
        self.count = count


class RequiresAllError(CardinalityError):
    """
    A multi-element operation matched several elements without all().
    """

    def __init__(self, count: int):
        super().__init__(f"method requires all() for multiple elements ({count})")
        self.count = count


class AllModeNotSupportedError(CardinalityError):
    """
    A single-element operation was called on a selection in all() mode.
    """

    def __init__(self):
        super().__init__("method does not support all()")


class NotComparableError(SelectionError):
    """
    Equality check invoked with something that is not a selection.
    """

    def __init__(self):
        super().__init__("provided object is not a selection")


class ElementRetrievalError(WebSelectionError):
    """
    Selecting elements for a selection failed.

    Raised by the cardinality guard. The message embeds the selection's
    rendering; the original failure is kept on ``cause``.

    Attributes:
        selection: Rendering of the selection that failed
        cause: The underlying exception
    """

    def __init__(self, message: str, selection: str, cause: BaseException):
        super().__init__(message)
        self.selection = selection
        self.cause = cause


class ElementQueryError(WebSelectionError):
    """
    Reading from or acting on a selected element failed.

    Attributes:
        selection: Rendering of the selection that failed
        cause: The underlying exception
    """

    def __init__(self, message: str, selection: str, cause: BaseException):
        super().__init__(message)
        self.selection = selection
        self.cause = cause
