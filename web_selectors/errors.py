"""
Errors raised while building CSS selectors.
"""

from typing import Optional


class SelectorError(Exception):
    """Base class for selector building errors."""


class DuplicateFragmentError(SelectorError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Element, id and pseudo-element should not occur more then one time inside the selector"
        )


class OutOfOrderError(SelectorError):
    def __init__(self, message: Optional[str] = None):
        super().__init__(
            message
            or "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class InvalidCombinatorError(SelectorError, ValueError):
    def __init__(self, combinator):
        self.combinator = combinator
        super().__init__(f"Unknown combinator {combinator!r}; expected one of ' ', '>', '+', '~'")
