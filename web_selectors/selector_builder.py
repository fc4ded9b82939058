"""
SelectorBuilder: immutable builder for compound CSS selectors.

A selector is assembled from fragments in a fixed order:

    element#id.class[attr]:pseudo-class::pseudo-element

Every call returns a new builder, so partial selectors can be shared and
extended independently. Two finished selectors are joined with
SelectorBuilder.combine().
"""

import logging
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional, Tuple, Union

from .errors import DuplicateFragmentError, InvalidCombinatorError, OutOfOrderError

logger = logging.getLogger(__name__)

# Rank of a combined selector; above every category.
COMBINED_RANK = 1000


class Category(IntEnum):
    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5


class Combinator(str, Enum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


@dataclass(frozen=True)
class SelectorBuilder:
    order_rank: int = -1
    raw_prefix: str = ""
    element_name: Optional[str] = None
    id_name: Optional[str] = None
    class_names: Tuple[str, ...] = ()
    attributes: Tuple[str, ...] = ()
    pseudo_classes: Tuple[str, ...] = ()
    pseudo_element_name: Optional[str] = None

    def _check_order(self, category: Category) -> None:
        if self.order_rank > category:
            raise OutOfOrderError()

    def element(self, name: str) -> "SelectorBuilder":
        self._check_order(Category.ELEMENT)
        if self.element_name is not None:
            raise DuplicateFragmentError()
        return replace(self, element_name=name, order_rank=int(Category.ELEMENT))

    def id(self, name: str) -> "SelectorBuilder":
        self._check_order(Category.ID)
        if self.id_name is not None:
            raise DuplicateFragmentError()
        return replace(self, id_name=name, order_rank=int(Category.ID))

    def class_(self, name: str) -> "SelectorBuilder":
        self._check_order(Category.CLASS)
        return replace(self, class_names=self.class_names + (name,), order_rank=int(Category.CLASS))

    def attr(self, spec: str) -> "SelectorBuilder":
        self._check_order(Category.ATTRIBUTE)
        return replace(self, attributes=self.attributes + (spec,), order_rank=int(Category.ATTRIBUTE))

    def pseudo_class(self, name: str) -> "SelectorBuilder":
        self._check_order(Category.PSEUDO_CLASS)
        return replace(
            self,
            pseudo_classes=self.pseudo_classes + (name,),
            order_rank=int(Category.PSEUDO_CLASS),
        )

    def pseudo_element(self, name: str) -> "SelectorBuilder":
        # Terminal category: nothing ranks above it, so only uniqueness is checked.
        if self.pseudo_element_name is not None:
            raise DuplicateFragmentError()
        return replace(self, pseudo_element_name=name, order_rank=int(Category.PSEUDO_ELEMENT))

    def stringify(self) -> str:
        parts = [self.raw_prefix]
        if self.element_name is not None:
            parts.append(self.element_name)
        if self.id_name is not None:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        parts.extend(f"[{spec}]" for spec in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name is not None:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.stringify()

    @staticmethod
    def combine(
        left: "SelectorBuilder",
        combinator: Union[str, Combinator],
        right: "SelectorBuilder",
    ) -> "SelectorBuilder":
        """
        Join two selectors with a combinator into a new, combined builder.

        The combinator is always surrounded by single spaces, so the
        descendant combinator renders as three spaces:
        ``combine(a, " ", b)`` -> ``"a   b"``.
        """
        try:
            token = Combinator(combinator).value
        except ValueError:
            raise InvalidCombinatorError(combinator) from None
        prefix = f"{left.stringify()} {token} {right.stringify()}"
        logger.debug("Combined selector: %s", prefix)
        return SelectorBuilder(order_rank=COMBINED_RANK, raw_prefix=prefix)


# Zero-value builder; the entry point for building selectors.
css_selector_builder = SelectorBuilder()
