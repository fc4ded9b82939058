"""
Selectors package for building and managing CSS selectors.

The entry point is ``css_selector_builder``, an empty immutable builder:

    css_selector_builder.id("main").class_("container").stringify()
    # '#main.container'
"""

from .errors import DuplicateFragmentError, InvalidCombinatorError, OutOfOrderError, SelectorError
from .selector_builder import Category, Combinator, SelectorBuilder, css_selector_builder
from .selector_manager import SelectorManager

__version__ = "0.1.0"

combine = SelectorBuilder.combine

__all__ = [
    "Category",
    "Combinator",
    "DuplicateFragmentError",
    "InvalidCombinatorError",
    "OutOfOrderError",
    "SelectorBuilder",
    "SelectorError",
    "SelectorManager",
    "combine",
    "css_selector_builder",
]
