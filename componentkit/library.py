"""Template libraries declared in YAML and the component trees built from them."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Union

from .attrs import AttrInput
from .errors import LibraryError, UnknownTemplate
from .io_utils import read_yaml
from .model import ContentInput, ContentPart, Instance, Slotted, Template, Text, body
from .models import ComponentSpec, LibrarySpec, TemplateSpec

log = logging.getLogger(__name__)


class TemplateLibrary:
    """Named, shared templates. Instances built here hold read-only references."""

    def __init__(self, specs: Mapping[str, TemplateSpec] | None = None) -> None:
        self._specs: Dict[str, TemplateSpec] = dict(specs or {})
        self._templates: Dict[str, Template] = {}
        self._resolving: List[str] = []

    def __contains__(self, name: object) -> bool:
        return name in self._specs or name in self._templates

    def __len__(self) -> int:
        return len(self.names())

    def names(self) -> list[str]:
        return sorted(set(self._specs) | set(self._templates))

    def spec(self, name: str) -> Optional[TemplateSpec]:
        return self._specs.get(name)

    def register(self, name: str, template: Template) -> Template:
        if name in self:
            raise LibraryError(f"Template already declared: {name!r}")
        self._templates[name] = template
        return template

    def get(self, name: str) -> Template:
        """Return the shared template for ``name``, building it on first use."""

        if name in self._templates:
            return self._templates[name]
        if name not in self._specs:
            raise UnknownTemplate(name)
        if name in self._resolving:
            chain = self._resolving[self._resolving.index(name) :] + [name]
            raise LibraryError(f"Cyclic template reference: {' -> '.join(chain)}")

        self._resolving.append(name)
        try:
            template = _build_template(self._specs[name], self)
        finally:
            self._resolving.pop()
        self._templates[name] = template
        log.debug("Built template %r as <%s>", name, template.tag)
        return template

    def build_all(self) -> Dict[str, Template]:
        return {name: self.get(name) for name in self.names()}

    def instance(
        self,
        name: str,
        attrs: Mapping[str, AttrInput] | None = None,
        content: ContentInput = None,
    ) -> Instance:
        return Instance.of(self.get(name), attrs, content)


def _build_content(
    content: Union[str, Dict[str, ComponentSpec], None],
    library: Optional[TemplateLibrary],
) -> ContentInput:
    if content is None:
        return None
    if isinstance(content, str):
        return Text(content)
    return Slotted({name: build_part(child, library) for name, child in content.items()})


def _build_template(spec: TemplateSpec, library: TemplateLibrary) -> Template:
    content = _build_content(spec.content, library)
    return Template.create(spec.tag, spec.attrs or None, content, slots=spec.slots)


def build_component(spec: ComponentSpec, library: Optional[TemplateLibrary] = None) -> Instance:
    """Turn a component spec into an instance, resolving ``use`` against the library."""

    if (spec.use is None) == (spec.tag is None):
        raise LibraryError("A component needs exactly one of 'use' or 'tag'")

    attrs = spec.attrs or None
    content = _build_content(spec.content, library)
    if spec.use is not None:
        if library is None:
            raise UnknownTemplate(spec.use)
        return library.instance(spec.use, attrs, content)
    return Instance.new(spec.tag or "", attrs, content)


def build_part(spec: ComponentSpec, library: Optional[TemplateLibrary] = None) -> ContentPart:
    """Build a slot part. Without ``use`` or ``tag`` it is a plain body that
    merges into whatever the template already holds in that slot."""

    if spec.use is None and spec.tag is None:
        return body(spec.attrs or None, _build_content(spec.content, library))
    return build_component(spec, library)


def library_from_mapping(data: Mapping[str, object] | None) -> TemplateLibrary:
    spec = LibrarySpec.model_validate(data or {})
    return TemplateLibrary(spec.templates)


def load_library(path: Path) -> TemplateLibrary:
    library = library_from_mapping(read_yaml(path))
    log.info("Loaded %d template(s) from %s", len(library), path)
    return library


def load_component(path: Path, library: Optional[TemplateLibrary] = None) -> Instance:
    spec = ComponentSpec.model_validate(read_yaml(path) or {})
    return build_component(spec, library)


__all__ = [
    "TemplateLibrary",
    "build_component",
    "build_part",
    "library_from_mapping",
    "load_component",
    "load_library",
]
