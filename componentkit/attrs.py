"""Attribute values, attribute maps and their merge rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Union


@dataclass(frozen=True)
class Scalar:
    """Single attribute value. Booleans act as presence flags."""

    value: str | bool


@dataclass(frozen=True)
class AttrSet:
    """Space-separated set of tokens, e.g. ``class``."""

    values: frozenset[str]

    @classmethod
    def of(cls, *values: str) -> "AttrSet":
        return cls(frozenset(values))


AttrValue = Union[Scalar, AttrSet]
AttrMap = Dict[str, AttrValue]

AttrInput = Union[AttrValue, str, bool, Iterable[str]]


def attr_value(value: AttrInput) -> AttrValue:
    """Coerce a plain Python value into an attribute value."""

    if isinstance(value, (Scalar, AttrSet)):
        return value
    if isinstance(value, (str, bool)):
        return Scalar(value)
    return AttrSet(frozenset(str(item) for item in value))


def attr_map(attrs: Mapping[str, AttrInput] | None = None) -> AttrMap:
    """Build an attribute map, coercing every value."""

    if not attrs:
        return {}
    result: AttrMap = {}
    for name, value in attrs.items():
        if not name:
            raise ValueError("Attribute name must not be empty")
        result[name] = attr_value(value)
    return result


def _members(value: AttrValue) -> frozenset[str]:
    if isinstance(value, AttrSet):
        return value.values
    return frozenset([str(value.value)])


def merge_attr_value(base: AttrValue, overlay: AttrValue) -> AttrValue:
    """Combine two attribute values; equal scalars stay scalar, anything else unions."""

    # boolean flags are replaced by the overlay, never unioned
    if isinstance(base, Scalar) and isinstance(base.value, bool):
        return overlay
    if isinstance(overlay, Scalar) and isinstance(overlay.value, bool):
        return overlay
    if isinstance(base, Scalar) and isinstance(overlay, Scalar) and base == overlay:
        return base
    return AttrSet(_members(base) | _members(overlay))


def merge_attrs(base: Mapping[str, AttrValue], overlay: Mapping[str, AttrValue]) -> AttrMap:
    """Merge attribute maps key-wise. Base keys keep their position."""

    merged: AttrMap = dict(base)
    for name, value in overlay.items():
        if name in merged:
            merged[name] = merge_attr_value(merged[name], value)
        else:
            merged[name] = value
    return merged


def render_attr(name: str, value: AttrValue) -> str:
    """Render one attribute with its leading space, or nothing if it is switched off."""

    if isinstance(value, AttrSet):
        return f' {name}="{" ".join(sorted(value.values))}"'
    if value.value is False or value.value == "":
        return ""
    if value.value is True:
        return f" {name}"
    return f' {name}="{value.value}"'


def render_attrs(attrs: Mapping[str, AttrValue]) -> str:
    return "".join(render_attr(name, value) for name, value in attrs.items())


__all__ = [
    "AttrInput",
    "AttrMap",
    "AttrSet",
    "AttrValue",
    "Scalar",
    "attr_map",
    "attr_value",
    "merge_attr_value",
    "merge_attrs",
    "render_attr",
    "render_attrs",
]
