from web_selectors import css_selector_builder as builder
from utils.parser import count_matches, html_to_text, select_elements

PAGE = """
<html>
<head><style>.hidden { display: none; }</style></head>
<body>
<div id="main" class="container editable">
  <a class="thumb" href="/img/cat.png">Cat</a>
  <a href="/about">About</a>
  <ul><li>one</li><li>two</li></ul>
</div>
<p class="note">Note</p>
<script>var x = 1;</script>
</body>
</html>
"""


def test_html_to_text_drops_scripts_and_styles():
    text = html_to_text(PAGE)
    assert "Cat" in text
    assert "var x" not in text
    assert "display" not in text


def test_select_with_builder():
    selector = builder.element("a").attr('href$=".png"')
    matches = select_elements(PAGE, selector)
    assert len(matches) == 1
    assert matches[0]["tag"] == "a"
    assert matches[0]["attrs"] == {"class": "thumb", "href": "/img/cat.png"}
    assert matches[0]["text"] == "Cat"


def test_select_with_id_and_classes():
    assert count_matches(PAGE, builder.id("main").class_("container").class_("editable")) == 1
    assert count_matches(PAGE, builder.id("main").class_("missing")) == 0


def test_select_combined_selectors():
    child = builder.combine(builder.element("div").id("main"), ">", builder.element("a"))
    assert count_matches(PAGE, child) == 2

    descendant = builder.combine(builder.id("main"), " ", builder.element("li"))
    assert [m["text"] for m in select_elements(PAGE, descendant)] == ["one", "two"]

    sibling = builder.combine(builder.element("div"), "+", builder.element("p").class_("note"))
    assert count_matches(PAGE, sibling) == 1


def test_select_with_rendered_string():
    assert count_matches(PAGE, "li:nth-of-type(even)") == 1


def test_select_text_skips_scripts():
    html = '<div class="card"><script>track()</script><b>Loan</b> <i>offer</i></div>'
    matches = select_elements(html, builder.element("div").class_("card"))
    assert matches[0]["text"] == "Loan\noffer"
