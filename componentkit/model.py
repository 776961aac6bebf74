"""Value types for component trees: content, bodies, templates and instances."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple, Union

from .attrs import AttrInput, AttrValue, attr_map
from .errors import InvalidTag

DEFAULT_SLOT = ""

VOID_TAGS = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)


@dataclass(frozen=True)
class Text:
    text: str = ""


@dataclass(frozen=True)
class Slotted:
    """Named slots, each holding a content part.

    ``layout`` fixes which slots render and in what order. Slots outside the
    layout are kept but never rendered.
    """

    parts: Mapping[str, "ContentPart"] = field(default_factory=dict)
    layout: Optional[Tuple[str, ...]] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", MappingProxyType(dict(self.parts)))
        if self.layout is not None:
            object.__setattr__(self, "layout", tuple(dict.fromkeys(self.layout)))

    def slot_order(self) -> Tuple[str, ...]:
        if self.layout is not None:
            return self.layout
        return tuple(self.parts)


Content = Union[Text, Slotted]


@dataclass(frozen=True)
class Body:
    """Attributes plus optional content, with no tag of its own."""

    attrs: Mapping[str, AttrValue] = field(default_factory=dict)
    content: Optional[Content] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "attrs", MappingProxyType(dict(self.attrs)))


@dataclass(frozen=True)
class Template:
    """Tag name plus the default body every instance starts from."""

    tag: str
    default: Optional[Body] = None

    def __post_init__(self) -> None:
        tag = (self.tag or "").strip()
        if not tag:
            raise InvalidTag(self.tag)
        object.__setattr__(self, "tag", tag.lower())
        if self.is_void:
            default = self.default or Body()
            if default.content is None:
                object.__setattr__(self, "default", replace(default, content=Text()))

    @classmethod
    def create(
        cls,
        tag: str,
        attrs: Mapping[str, AttrInput] | None = None,
        content: "ContentInput" = None,
        *,
        slots: Iterable[str] | None = None,
    ) -> "Template":
        """Build a template from plain values.

        ``slots`` declares a fixed slot layout; content outside it is kept but
        not rendered. Text content cannot be combined with ``slots``.
        """

        value = content_value(content)
        if slots is not None:
            layout = tuple(slots)
            if isinstance(value, Text):
                raise ValueError("Text content cannot be combined with a slot layout")
            if isinstance(value, Slotted):
                value = replace(value, layout=layout)
            else:
                value = Slotted(layout=layout)
        if attrs is None and value is None:
            return cls(tag)
        return cls(tag, Body(attr_map(attrs), value))

    @property
    def is_void(self) -> bool:
        return self.tag in VOID_TAGS


@dataclass(frozen=True)
class Shared:
    """Read-only handle to a template owned elsewhere, e.g. by a library."""

    template: Template


@dataclass(frozen=True)
class Owned:
    """Template private to a single instance."""

    template: Template


TemplateBinding = Union[Shared, Owned]


@dataclass(frozen=True)
class Instance:
    """A template bound to the overlay supplied where it is used."""

    binding: TemplateBinding
    overlay: Optional[Body] = None

    @classmethod
    def new(
        cls,
        tag: str,
        attrs: Mapping[str, AttrInput] | None = None,
        content: "ContentInput" = None,
    ) -> "Instance":
        return cls(Owned(Template(tag)), _overlay(attrs, content))

    @classmethod
    def of(
        cls,
        template: Template,
        attrs: Mapping[str, AttrInput] | None = None,
        content: "ContentInput" = None,
        *,
        shared: bool = True,
    ) -> "Instance":
        binding: TemplateBinding = Shared(template) if shared else Owned(replace(template))
        return cls(binding, _overlay(attrs, content))

    @property
    def template(self) -> Template:
        return self.binding.template

    @property
    def tag(self) -> str:
        return self.binding.template.tag


ContentPart = Union[Body, Template, Instance]

ContentInput = Union[Content, str, Mapping[str, ContentPart], None]


def content_value(value: ContentInput) -> Optional[Content]:
    """Coerce text or a slot mapping into a content value."""

    if value is None or isinstance(value, (Text, Slotted)):
        return value
    if isinstance(value, str):
        return Text(value)
    return Slotted(dict(value))


def body(attrs: Mapping[str, AttrInput] | None = None, content: ContentInput = None) -> Body:
    return Body(attr_map(attrs), content_value(content))


def slotted(
    default: ContentPart | None = None,
    *,
    layout: Iterable[str] | None = None,
    **named: ContentPart,
) -> Slotted:
    """Build slotted content; a positional part fills the default slot."""

    parts: Dict[str, ContentPart] = {}
    if default is not None:
        parts[DEFAULT_SLOT] = default
    parts.update(named)
    return Slotted(parts, tuple(layout) if layout is not None else None)


def _overlay(attrs: Mapping[str, AttrInput] | None, content: ContentInput) -> Optional[Body]:
    if attrs is None and content is None:
        return None
    return body(attrs, content)


__all__ = [
    "Body",
    "Content",
    "ContentInput",
    "ContentPart",
    "DEFAULT_SLOT",
    "Instance",
    "Owned",
    "Shared",
    "Slotted",
    "Template",
    "TemplateBinding",
    "Text",
    "VOID_TAGS",
    "body",
    "content_value",
    "slotted",
]
