"""
Example: build the selectors from the builder docs and apply one to a page.
"""

from web_selectors import css_selector_builder as builder
from utils.parser import select_elements

SAMPLE_HTML = """
<html>
<body>
<div id="main" class="container draggable">
  <a href="/img/cat.png">Cat</a>
  <a href="/about">About</a>
</div>
<table id="data"><tr><td>1</td><td>2</td></tr></table>
</body>
</html>
"""


def run():
    print(builder.id("main").class_("container").class_("editable").stringify())
    print(builder.element("a").attr('href$=".png"').pseudo_class("focus").stringify())

    nested = builder.combine(
        builder.element("div").id("main").class_("container").class_("draggable"),
        "+",
        builder.combine(
            builder.element("table").id("data"),
            "~",
            builder.combine(
                builder.element("tr").pseudo_class("nth-of-type(even)"),
                " ",
                builder.element("td").pseudo_class("nth-of-type(even)"),
            ),
        ),
    )
    print(nested.stringify())

    images = builder.combine(builder.element("div").id("main"), ">", builder.element("a").attr('href$=".png"'))
    for match in select_elements(SAMPLE_HTML, images):
        print(match["tag"], match["attrs"]["href"], match["text"])


if __name__ == "__main__":
    run()
