"""Composable HTML components: templates, overlays and a deterministic renderer."""

from .attrs import AttrSet, Scalar, attr_map, attr_value, merge_attr_value, merge_attrs
from .errors import InvalidTag, LibraryError, UnknownTemplate
from .merge import (
    add_attr,
    apply_overlay,
    bind_template,
    effective_body,
    get_attr,
    has_attr,
    merge_body,
    merge_content,
    merge_part,
    remove_attr,
    set_attr,
    set_content,
)
from .model import (
    DEFAULT_SLOT,
    VOID_TAGS,
    Body,
    Instance,
    Owned,
    Shared,
    Slotted,
    Template,
    Text,
    body,
    content_value,
    slotted,
)
from .render import render, render_fragment, render_part

__all__ = [
    "AttrSet",
    "Body",
    "DEFAULT_SLOT",
    "Instance",
    "InvalidTag",
    "LibraryError",
    "Owned",
    "Scalar",
    "Shared",
    "Slotted",
    "Template",
    "Text",
    "UnknownTemplate",
    "VOID_TAGS",
    "add_attr",
    "apply_overlay",
    "attr_map",
    "attr_value",
    "bind_template",
    "body",
    "content_value",
    "effective_body",
    "get_attr",
    "has_attr",
    "merge_attr_value",
    "merge_attrs",
    "merge_body",
    "merge_content",
    "merge_part",
    "remove_attr",
    "render",
    "render_fragment",
    "render_part",
    "set_attr",
    "set_content",
    "slotted",
]
