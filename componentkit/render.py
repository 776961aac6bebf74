"""Serialize component instances to HTML fragments."""

from __future__ import annotations

from typing import Iterable, List, Optional

from .attrs import Scalar, render_attrs
from .merge import apply_overlay, bind_template, merge_body
from .model import DEFAULT_SLOT, Body, Content, ContentPart, Instance, Text, VOID_TAGS


def _render_slots(content: Content) -> str:
    if isinstance(content, Text):
        return content.text
    html_parts: List[str] = []
    for name in content.slot_order():
        part = content.parts.get(name)
        if not isinstance(part, Instance):
            continue
        # the anonymous slot adds no id, so an existing id stays as written
        if name != DEFAULT_SLOT:
            part = apply_overlay(part, Body({"id": Scalar(name)}))
        html_parts.append(render(part))
    return "".join(html_parts)


def _format_element(tag: str, body: Optional[Body]) -> str:
    body = body or Body()
    attrs = render_attrs(body.attrs)
    if tag in VOID_TAGS:
        return f"<{tag}{attrs}>"
    content = _render_slots(body.content) if body.content is not None else ""
    return f"<{tag}{attrs}>{content}</{tag}>"


def render(instance: Instance) -> str:
    """Render an instance: template defaults first, overlay on top."""

    tag, default = bind_template(instance.binding)
    return _format_element(tag, merge_body(default, instance.overlay))


def render_part(part: ContentPart) -> str:
    """Render a slot part. Only bound instances produce markup."""

    if isinstance(part, Instance):
        return render(part)
    return ""


def render_fragment(instances: Iterable[Instance]) -> str:
    return "".join(render(instance) for instance in instances)


__all__ = ["render", "render_fragment", "render_part"]
