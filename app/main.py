"""
Command-line entry point for building a CSS selector.

Fragments are applied in the order they are given, so the usual ordering
rules of the builder apply.
Usage:
    python -m app.main --element a --attr 'href$=".png"' --pseudo-class focus
    python -m app.main --id main --class container --html page.html --out data/selector.json
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from utils.io import save_json_atomic
from utils.logging_config import configure_logging
from utils.parser import count_matches
from web_selectors import SelectorBuilder, SelectorError, css_selector_builder

logger = logging.getLogger(__name__)


class FragmentAction(argparse.Action):
    """Collect (builder method, value) pairs in command-line order."""

    def __call__(self, parser, namespace, values, option_string=None):
        fragments = getattr(namespace, self.dest, None) or []
        fragments.append((self.const, values))
        setattr(namespace, self.dest, fragments)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Build a CSS selector from its fragments")
    fragment = dict(dest="fragments", action=FragmentAction, default=[])
    parser.add_argument("--element", const="element", help="Element (type) selector, e.g. div", **fragment)
    parser.add_argument("--id", const="id", help="Id selector without the leading #", **fragment)
    parser.add_argument("--class", const="class_", help="Class name (repeatable)", **fragment)
    parser.add_argument("--attr", const="attr", help="Attribute, e.g. 'href$=\".png\"' (repeatable)", **fragment)
    parser.add_argument("--pseudo-class", const="pseudo_class", help="Pseudo-class (repeatable)", **fragment)
    parser.add_argument("--pseudo-element", const="pseudo_element", help="Pseudo-element without the leading ::", **fragment)
    parser.add_argument("--html", help="HTML file to evaluate the selector against")
    parser.add_argument("--out", help="Write the selector and its fragments to this JSON file")
    return parser.parse_args(argv)


def build_selector(fragments) -> SelectorBuilder:
    builder = css_selector_builder
    for method, value in fragments:
        builder = getattr(builder, method)(value)
    return builder


def describe(builder: SelectorBuilder) -> dict:
    return {
        "selector": builder.stringify(),
        "fragments": {
            "element": builder.element_name,
            "id": builder.id_name,
            "classes": list(builder.class_names),
            "attributes": list(builder.attributes),
            "pseudo_classes": list(builder.pseudo_classes),
            "pseudo_element": builder.pseudo_element_name,
        },
    }


def main(argv=None) -> int:
    load_dotenv()
    configure_logging()
    args = parse_args(argv)

    try:
        builder = build_selector(args.fragments)
    except SelectorError as e:
        logger.error("Invalid selector: %s", e)
        return 2

    selector = builder.stringify()
    print(selector)

    if args.html:
        html = Path(args.html).read_text(encoding="utf-8")
        matches = count_matches(html, builder)
        logger.info("Selector %s matched %d element(s) in %s", selector, matches, args.html)
        print(matches)

    if args.out:
        save_json_atomic(describe(builder), args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
