from componentkit.attrs import AttrSet, Scalar
from componentkit.merge import merge_body, merge_content, merge_part
from componentkit.model import Body, Instance, Slotted, Template, Text, body, slotted


def test_text_appends_overlay_after_base() -> None:
    assert merge_content(Text("Hello"), Text(" World!")) == Text("Hello World!")


def test_text_merge_is_associative() -> None:
    left = merge_content(merge_content(Text("A"), Text("B")), Text("C"))
    right = merge_content(Text("A"), merge_content(Text("B"), Text("C")))
    assert left == right == Text("ABC")


def test_text_overlay_on_slotted_is_ignored() -> None:
    base = slotted(Instance.new("p", content="kept"))
    assert merge_content(base, Text("dropped")) == base


def test_slotted_overlay_replaces_text() -> None:
    overlay = slotted(title=Instance.new("h1"))
    assert merge_content(Text("old"), overlay) == overlay


def test_slotted_merge_keeps_base_layout_and_slots() -> None:
    base = Slotted({"a": Instance.new("p", content="A")}, ("a", "b"))
    overlay = Slotted({"b": Instance.new("p", content="B"), "c": Instance.new("p")}, ("c",))

    merged = merge_content(base, overlay)

    assert merged.layout == ("a", "b")
    assert list(merged.parts) == ["a", "b", "c"]
    assert merged.parts["b"] == overlay.parts["b"]


def test_slotted_merge_uses_overlay_layout_when_base_has_none() -> None:
    merged = merge_content(Slotted({}), Slotted({}, ("x",)))
    assert merged.layout == ("x",)


def test_shared_slot_merges_recursively() -> None:
    base = slotted(title=Instance.new("h1", {"class": "title"}, "Hello"))
    overlay = slotted(title=Body({"class": Scalar("big")}, Text(" there")))

    merged = merge_content(base, overlay).parts["title"]

    assert isinstance(merged, Instance)
    assert merged.tag == "h1"
    assert merged.overlay == Body({"class": AttrSet.of("title", "big")}, Text("Hello there"))


def test_part_template_from_overlay_only_when_base_has_none() -> None:
    base = body({"id": "x"})
    overlay = Instance.new("span", content="hi")

    merged = merge_part(base, overlay)

    assert isinstance(merged, Instance)
    assert merged.tag == "span"
    assert merged.overlay == Body({"id": Scalar("x")}, Text("hi"))

    kept = merge_part(Instance.new("em"), Instance.new("strong"))
    assert kept.tag == "em"


def test_template_parts_without_bodies_stay_templates() -> None:
    template = Template.create("section")
    assert merge_part(template, Template.create("aside")) == template
    assert merge_part(body(), body()) == Body()


def test_merge_body_with_missing_sides() -> None:
    only = body({"a": "1"}, "x")
    assert merge_body(None, only) is only
    assert merge_body(only, None) is only
    assert merge_body(None, None) is None
    assert merge_body(body(content="x"), body({"a": "1"})) == Body({"a": Scalar("1")}, Text("x"))
