"""
SelectorManager: derives, stores and ranks CSS selectors.
"""

import logging
from typing import Optional, List, Dict

from .selector_builder import SelectorBuilder, css_selector_builder

logger = logging.getLogger(__name__)


class SelectorManager:
    def __init__(self):
        self.registry: Dict[str, SelectorBuilder] = {}

    def register(self, name: str, selector: SelectorBuilder) -> SelectorBuilder:
        self.registry[name] = selector
        logger.debug("Registered selector %s -> %s", name, selector)
        return selector

    def get(self, name: str) -> SelectorBuilder:
        try:
            return self.registry[name]
        except KeyError:
            raise KeyError(f"No selector registered under {name!r}") from None

    def rank_selectors(self, candidates: List[Dict]) -> List[Dict]:
        def score(cand):
            s = 0
            selector = cand.get("selector", "")
            sel = str(selector)
            text = cand.get("text", "")

            # Combined builders keep everything in raw_prefix; score their text.
            fields = isinstance(selector, SelectorBuilder) and not selector.raw_prefix

            # Unique identifiers
            has_id = selector.id_name is not None if fields else "#" in sel
            if has_id:
                s += 100

            if "data-testid" in sel or "data-test" in sel:
                s += 90
            elif "data-" in sel:
                s += 60
            if "name=" in sel or "for=" in sel:
                s += 80

            # Accessibility attributes
            if "aria-label" in sel:
                s += 70
            if "[role=" in sel:
                s += 65

            if text and ("button" in sel.lower() or "a[" in sel):
                s += 55

            if fields:
                class_count = len(selector.class_names)
            else:
                class_count = sel.count(".")
            if class_count == 1:
                s += 50
            elif class_count > 1:
                s += 40

            if "nth-child" in sel or "nth-of-type" in sel:
                s += 30

            # Penalties
            if len(sel) > 150:
                s -= 20
            if sel.count(">") > 3:
                s -= 15

            return s

        ranked = sorted(candidates, key=lambda c: -score(c))
        logger.debug("Ranked selectors: %s", [str(c.get("selector", "")) for c in ranked])
        return ranked

    def choose_best(self, candidates: List[Dict]) -> Optional[Dict]:
        ranked = self.rank_selectors(candidates)
        return ranked[0] if ranked else None

    def build_from_attrs(self, tag: str, attrs: Dict[str, str]) -> SelectorBuilder:
        """
        Build a selector for an element from its tag and HTML attributes.

        Uses the id, every class, and the most specific identifying
        attribute (first data-*, then aria-label, then name).
        """
        builder = css_selector_builder.element(tag)
        if attrs.get("id"):
            builder = builder.id(attrs["id"])
        for cls in (attrs.get("class") or "").split():
            builder = builder.class_(cls)

        attr_name = next((k for k in attrs if k.startswith("data-")), None)
        if attr_name is None:
            attr_name = next((k for k in ("aria-label", "name") if k in attrs), None)
        if attr_name is not None:
            builder = builder.attr(f"{attr_name}='{attrs[attr_name]}'")
        return builder

    def generate_selector_from_attrs(self, tag: str, attrs: Dict[str, str]) -> str:
        return self.build_from_attrs(tag, attrs).stringify()
