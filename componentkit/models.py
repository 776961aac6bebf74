"""Pydantic models for declarative template libraries and component files."""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictStr, field_validator

AttrSpecValue = Union[StrictBool, StrictStr, List[StrictStr]]


def _numbers_as_text(value: Any) -> Any:
    """YAML reads `tabindex: 0` as an int; attributes keep it as the string "0"."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return [_numbers_as_text(item) for item in value]
    return value


def _attrs_as_text(attrs: Any) -> Any:
    if isinstance(attrs, dict):
        return {name: _numbers_as_text(value) for name, value in attrs.items()}
    return attrs


class ComponentSpec(BaseModel):
    """A component use site: a library template or an inline tag plus overlay."""

    use: Optional[str] = Field(
        None, description="Name of a library template to bind as a shared reference."
    )
    tag: Optional[str] = Field(
        None, description="Tag for an inline template owned by this component."
    )
    attrs: Dict[str, AttrSpecValue] = Field(
        default_factory=dict,
        description="Overlay attributes. Lists become token sets (e.g. class).",
    )
    content: Optional[Union[str, Dict[str, "ComponentSpec"]]] = Field(
        None, description="Literal text, or a mapping from slot name to child component."
    )

    @field_validator("attrs", mode="before")
    @classmethod
    def stringify_numbers(cls, attrs: Any) -> Any:
        return _attrs_as_text(attrs)

    model_config = ConfigDict(extra="forbid")


class TemplateSpec(BaseModel):
    """Reusable template entry in a library file."""

    tag: str = Field(..., description="Element tag name, case-insensitive.")
    attrs: Dict[str, AttrSpecValue] = Field(
        default_factory=dict, description="Default attributes for every instance."
    )
    content: Optional[Union[str, Dict[str, ComponentSpec]]] = Field(
        None, description="Default text, or default slot contents."
    )
    slots: Optional[List[str]] = Field(
        None, description="Fixed slot layout; only these slots render, in this order."
    )
    description: Optional[str] = Field(
        None, description="Free-form note shown by the templates command."
    )

    @field_validator("attrs", mode="before")
    @classmethod
    def stringify_numbers(cls, attrs: Any) -> Any:
        return _attrs_as_text(attrs)

    model_config = ConfigDict(extra="forbid")


class LibrarySpec(BaseModel):
    """Schema for a template library YAML file."""

    templates: Dict[str, TemplateSpec] = Field(
        default_factory=dict, description="Templates keyed by library name."
    )


__all__ = ["AttrSpecValue", "ComponentSpec", "LibrarySpec", "TemplateSpec"]
