import pytest

from componentkit.attrs import (
    AttrSet,
    Scalar,
    attr_map,
    attr_value,
    merge_attr_value,
    merge_attrs,
    render_attr,
    render_attrs,
)


def test_equal_scalars_stay_scalar() -> None:
    assert merge_attr_value(Scalar("en"), Scalar("en")) == Scalar("en")


def test_different_scalars_become_set() -> None:
    assert merge_attr_value(Scalar("a"), Scalar("b")) == AttrSet.of("a", "b")


def test_scalar_joins_set_on_either_side() -> None:
    assert merge_attr_value(Scalar("x"), AttrSet.of("y")) == AttrSet.of("x", "y")
    assert merge_attr_value(AttrSet.of("y"), Scalar("x")) == AttrSet.of("x", "y")
    assert merge_attr_value(AttrSet.of("y"), Scalar("y")) == AttrSet.of("y")


def test_sets_union_without_duplicates() -> None:
    merged = merge_attr_value(AttrSet.of("a", "b"), AttrSet.of("b", "c"))
    assert merged == AttrSet.of("a", "b", "c")
    assert len(merged.values) == 3


def test_boolean_flags_take_overlay_value() -> None:
    assert merge_attr_value(Scalar(True), Scalar(False)) == Scalar(False)
    assert merge_attr_value(Scalar("x"), Scalar(True)) == Scalar(True)
    assert merge_attr_value(Scalar(True), AttrSet.of("a")) == AttrSet.of("a")


def test_merge_attrs_keeps_base_only_keys_and_order() -> None:
    base = attr_map({"class": ["button"], "hreflang": "en"})
    overlay = attr_map({"class": "pretty", "href": "/hello"})

    merged = merge_attrs(base, overlay)

    assert list(merged) == ["class", "hreflang", "href"]
    assert merged["class"] == AttrSet.of("button", "pretty")
    assert merged["hreflang"] == Scalar("en")
    assert merged["href"] == Scalar("/hello")
    assert base["class"] == AttrSet.of("button"), "inputs are not mutated"


def test_attr_value_coercion() -> None:
    assert attr_value("a") == Scalar("a")
    assert attr_value(True) == Scalar(True)
    assert attr_value(["a", "b", "a"]) == AttrSet.of("a", "b")
    assert attr_value(AttrSet.of("z")) == AttrSet.of("z")


def test_render_attr_rules() -> None:
    assert render_attr("disabled", Scalar(True)) == " disabled"
    assert render_attr("disabled", Scalar(False)) == ""
    assert render_attr("title", Scalar("")) == ""
    assert render_attr("title", Scalar("false")) == ' title="false"'
    assert render_attr("href", Scalar("/x")) == ' href="/x"'
    assert render_attr("class", AttrSet.of("b", "a", "c")) == ' class="a b c"'


def test_render_attrs_in_insertion_order() -> None:
    attrs = attr_map({"id": "main", "hidden": True, "lang": ""})
    assert render_attrs(attrs) == ' id="main" hidden'


def test_attr_map_rejects_empty_names() -> None:
    with pytest.raises(ValueError):
        attr_map({"": "x"})
