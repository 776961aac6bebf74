"""Pure merge functions across content, bodies, parts and instances.

Every function here returns a new value. Templates reached through a
``Shared`` binding are only ever read.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Dict, Optional, Tuple

from .attrs import AttrInput, AttrValue, attr_value, merge_attrs
from .model import (
    Body,
    Content,
    ContentInput,
    ContentPart,
    Instance,
    Owned,
    Slotted,
    Template,
    TemplateBinding,
    Text,
    content_value,
)


def merge_content(base: Content, overlay: Content) -> Content:
    """Merge overlay content onto base content.

    Text appends to text. Text never overwrites slotted content, while slotted
    content replaces text. Two slotted values merge slot by slot.
    """

    if isinstance(overlay, Text):
        if isinstance(base, Text):
            return Text(base.text + overlay.text)
        return base
    if isinstance(base, Text):
        return overlay

    parts: Dict[str, ContentPart] = dict(base.parts)
    for name, part in overlay.parts.items():
        if name in parts:
            parts[name] = merge_part(parts[name], part)
        else:
            parts[name] = part
    layout = base.layout if base.layout is not None else overlay.layout
    return Slotted(parts, layout)


def _merge_optional_content(base: Optional[Content], overlay: Optional[Content]) -> Optional[Content]:
    if base is None:
        return overlay
    if overlay is None:
        return base
    return merge_content(base, overlay)


def merge_body(base: Optional[Body], overlay: Optional[Body]) -> Optional[Body]:
    if base is None:
        return overlay
    if overlay is None:
        return base
    return Body(
        merge_attrs(base.attrs, overlay.attrs),
        _merge_optional_content(base.content, overlay.content),
    )


def _binding_of(part: ContentPart) -> Optional[TemplateBinding]:
    if isinstance(part, Instance):
        return part.binding
    if isinstance(part, Template):
        return Owned(part)
    return None


def _body_of(part: ContentPart) -> Optional[Body]:
    if isinstance(part, Instance):
        return part.overlay
    if isinstance(part, Body):
        return part
    return None


def merge_part(base: ContentPart, overlay: ContentPart) -> ContentPart:
    """Merge two slot parts. The base keeps its template when it has one."""

    binding = _binding_of(base) or _binding_of(overlay)
    merged = merge_body(_body_of(base), _body_of(overlay))
    if binding is None:
        return merged or Body()
    if merged is None and not isinstance(base, Instance) and not isinstance(overlay, Instance):
        return binding.template
    return Instance(binding, merged)


def bind_template(binding: TemplateBinding) -> Tuple[str, Optional[Body]]:
    """Resolve a binding to the tag and default body it stands for."""

    template = binding.template
    return template.tag, template.default


def effective_body(instance: Instance) -> Body:
    """Template default with the instance overlay applied on top."""

    _, default = bind_template(instance.binding)
    return merge_body(default, instance.overlay) or Body()


def apply_overlay(instance: Instance, overlay: Body) -> Instance:
    return replace(instance, overlay=merge_body(instance.overlay, overlay))


def get_attr(instance: Instance, name: str) -> Optional[AttrValue]:
    return effective_body(instance).attrs.get(name)


def has_attr(instance: Instance, name: str) -> bool:
    return name in effective_body(instance).attrs


def set_attr(instance: Instance, name: str, value: AttrInput) -> Instance:
    """Replace the overlay value for ``name``; template defaults still merge underneath."""

    overlay = instance.overlay or Body()
    attrs = dict(overlay.attrs)
    attrs[name] = attr_value(value)
    return replace(instance, overlay=replace(overlay, attrs=attrs))


def add_attr(instance: Instance, name: str, value: AttrInput) -> Instance:
    return apply_overlay(instance, Body({name: attr_value(value)}))


def remove_attr(instance: Instance, name: str) -> Instance:
    """Drop ``name`` from the overlay. Template defaults are left alone."""

    if instance.overlay is None or name not in instance.overlay.attrs:
        return instance
    attrs = {key: value for key, value in instance.overlay.attrs.items() if key != name}
    return replace(instance, overlay=replace(instance.overlay, attrs=attrs))


def set_content(instance: Instance, content: ContentInput) -> Instance:
    overlay = instance.overlay or Body()
    return replace(instance, overlay=replace(overlay, content=content_value(content)))


__all__ = [
    "add_attr",
    "apply_overlay",
    "bind_template",
    "effective_body",
    "get_attr",
    "has_attr",
    "merge_body",
    "merge_content",
    "merge_part",
    "remove_attr",
    "set_attr",
    "set_content",
]
