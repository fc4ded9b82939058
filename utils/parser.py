"""
HTML helpers using BeautifulSoup: visible text and selector matching.
"""

from bs4 import BeautifulSoup
from typing import List, Dict, Union
import logging

from web_selectors.selector_builder import SelectorBuilder

logger = logging.getLogger(__name__)


def html_to_text(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    for s in soup(["script", "style", "noscript"]):
        s.decompose()
    text = soup.get_text(separator="\n", strip=True)
    text = "\n".join([line.strip() for line in text.splitlines() if line.strip()])
    return text


def select_elements(html: str, selector: Union[SelectorBuilder, str]) -> List[Dict]:
    """
    Apply a CSS selector to an HTML document.

    Args:
        html: The HTML source
        selector: A SelectorBuilder or an already rendered selector string

    Returns:
        One dict per matched element with its tag name, attributes and text.
    """
    css = selector.stringify() if isinstance(selector, SelectorBuilder) else selector
    soup = BeautifulSoup(html, "html.parser")
    matches = []
    for el in soup.select(css):
        attrs = {
            k: " ".join(v) if isinstance(v, list) else v
            for k, v in el.attrs.items()
        }
        matches.append({
            "tag": el.name,
            "attrs": attrs,
            "text": html_to_text(str(el)),
        })
    logger.debug("Selector %s matched %d element(s)", css, len(matches))
    return matches


def count_matches(html: str, selector: Union[SelectorBuilder, str]) -> int:
    return len(select_elements(html, selector))
