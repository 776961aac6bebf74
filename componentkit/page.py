"""Wrap rendered fragments into complete HTML documents."""

from __future__ import annotations

import logging
from typing import Iterable

from jinja2 import BaseLoader, Environment, StrictUndefined, select_autoescape
from markupsafe import Markup

from .model import Instance
from .render import render_fragment

log = logging.getLogger(__name__)

DOCUMENT_TEMPLATE = """<!DOCTYPE html>
<html lang="{{ lang }}">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
{% for line in head %}
{{ line }}
{% endfor %}
</head>
<body>
{{ fragment }}
</body>
</html>
"""


def document_env() -> Environment:
    """Jinja environment for document shells. Fragments are trusted markup."""

    return Environment(
        loader=BaseLoader(),
        autoescape=select_autoescape(default_for_string=True, default=True),
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


def render_document(
    fragment: str,
    *,
    title: str = "",
    lang: str = "en",
    head: Iterable[str] = (),
) -> str:
    """Place a fragment inside ``<body>``. The title is escaped, the fragment is not."""

    template = document_env().from_string(DOCUMENT_TEMPLATE)
    html_text = template.render(
        fragment=Markup(fragment),
        title=title,
        lang=lang,
        head=[Markup(line) for line in head],
    )
    log.debug("Rendered document %r (%d chars)", title, len(html_text))
    return html_text


def render_page(instances: Iterable[Instance], **kwargs) -> str:
    return render_document(render_fragment(instances), **kwargs)


__all__ = ["DOCUMENT_TEMPLATE", "document_env", "render_document", "render_page"]
