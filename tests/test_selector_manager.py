import pytest

from web_selectors import css_selector_builder as builder
from web_selectors.selector_manager import SelectorManager


@pytest.fixture
def sm():
    return SelectorManager()


def test_generate_selector_from_attrs(sm):
    sel = sm.generate_selector_from_attrs("button", {"data-action": "apply", "class": "cta primary"})
    assert sel == "button.cta.primary[data-action='apply']"


def test_generate_selector_with_id(sm):
    sel = sm.generate_selector_from_attrs("input", {"id": "email", "name": "email"})
    assert sel == "input#email[name='email']"


def test_generate_selector_prefers_aria_label_over_name(sm):
    sel = sm.generate_selector_from_attrs("input", {"name": "q", "aria-label": "Search"})
    assert sel == "input[aria-label='Search']"


def test_generate_selector_bare_tag(sm):
    assert sm.generate_selector_from_attrs("form", {}) == "form"


def test_build_from_attrs_returns_builder(sm):
    selector = sm.build_from_attrs("a", {"class": "apply"})
    assert selector.element_name == "a"
    assert selector.pseudo_class("hover").stringify() == "a.apply:hover"


def test_registry(sm):
    apply_button = builder.element("button").id("apply")
    assert sm.register("apply", apply_button) is apply_button
    assert sm.get("apply").stringify() == "button#apply"
    with pytest.raises(KeyError):
        sm.get("missing")


def test_rank_selectors(sm):
    cands = [
        {"selector": "button[data-action='apply']"},
        {"selector": "#apply-now"},
        {"selector": "a.apply-now-btn.some-long-class-names"},
    ]
    ranked = sm.rank_selectors(cands)
    assert [c["selector"] for c in ranked] == [
        "#apply-now",
        "button[data-action='apply']",
        "a.apply-now-btn.some-long-class-names",
    ]


def test_rank_selectors_with_builders(sm):
    by_class = builder.element("a").class_("apply")
    by_id = builder.element("a").id("apply")
    best = sm.choose_best([{"selector": by_class}, {"selector": by_id}])
    assert best["selector"] is by_id


def test_choose_best_empty(sm):
    assert sm.choose_best([]) is None


def test_combined_builder_scores_like_its_string(sm):
    by_class = builder.element("a").class_("x")
    combined = builder.combine(builder.element("div").id("main"), ">", builder.element("a"))

    best = sm.choose_best([{"selector": by_class}, {"selector": combined}])
    assert best["selector"] is combined

    best_str = sm.choose_best([{"selector": str(by_class)}, {"selector": str(combined)}])
    assert best_str["selector"] == "div#main > a"


def test_test_attribute_not_counted_as_plain_data_attribute(sm):
    cands = [
        {"selector": "button[data-testid='apply']"},
        {"selector": "#apply"},
    ]
    # data-testid scores 90, the id 100
    assert sm.choose_best(cands)["selector"] == "#apply"
