"""Command-line interface for componentkit."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from .errors import InvalidTag, LibraryError
from .io_utils import setup_logging, stable_json_dumps, write_text
from .library import TemplateLibrary, load_component, load_library
from .page import render_document
from .render import render

log = logging.getLogger(__name__)


def _load_library_arg(path: Optional[str]) -> TemplateLibrary:
    if path is None:
        return TemplateLibrary()
    try:
        return load_library(Path(path))
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid template library {path}: {exc}") from exc


def _render_once(args: argparse.Namespace, library: TemplateLibrary) -> str:
    component_path = Path(args.component)
    try:
        instance = load_component(component_path, library)
        html_text = render(instance)
    except FileNotFoundError as exc:
        raise SystemExit(str(exc)) from exc
    except ValidationError as exc:
        raise SystemExit(f"Invalid component file {component_path}: {exc}") from exc
    except (InvalidTag, LibraryError) as exc:
        raise SystemExit(f"Cannot build component from {component_path}: {exc}") from exc

    if args.document:
        html_text = render_document(html_text, title=args.title or "", lang=args.lang)
    return html_text


def _handle_render(args: argparse.Namespace) -> None:
    library = _load_library_arg(args.library)
    html_text = _render_once(args, library)

    if args.check:
        # fresh library so no built template is reused between the two runs
        second = _render_once(args, _load_library_arg(args.library))
        if second != html_text:
            raise SystemExit("Determinism check failed: outputs differ between runs")
        log.info("Determinism check passed")

    if args.out:
        path = write_text(args.out, html_text if html_text.endswith("\n") else html_text + "\n")
        log.info("Wrote %s", path)
    else:
        sys.stdout.write(html_text + "\n")


def _handle_templates(args: argparse.Namespace) -> None:
    library = _load_library_arg(args.library)
    try:
        templates = library.build_all()
    except (InvalidTag, LibraryError) as exc:
        raise SystemExit(f"Invalid template library {args.library}: {exc}") from exc

    if args.json:
        payload = {}
        for name, template in templates.items():
            spec = library.spec(name)
            slots = spec.slots if spec is not None and spec.slots else []
            payload[name] = {"tag": template.tag, "slots": list(slots)}
        sys.stdout.write(stable_json_dumps(payload))
        return

    for name, template in templates.items():
        spec = library.spec(name)
        line = f"{name}\t<{template.tag}>"
        if spec is not None and spec.description:
            line += f"\t{spec.description}"
        sys.stdout.write(line + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="componentkit",
        description="Render component trees declared in YAML into HTML.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr.")
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a component file.",
        description="Build a component tree from YAML and print its HTML.",
    )
    render_parser.add_argument("--component", required=True, help="Path to the component YAML file.")
    render_parser.add_argument("--library", default=None, help="Path to a template library YAML file.")
    render_parser.add_argument(
        "--document",
        action="store_true",
        help="Wrap the fragment in a complete HTML document.",
    )
    render_parser.add_argument("--title", default=None, help="Document title when --document is set.")
    render_parser.add_argument("--lang", default="en", help="Document language when --document is set.")
    render_parser.add_argument("--out", default=None, help="Write output here instead of stdout.")
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    render_parser.set_defaults(func=_handle_render)

    templates_parser = subparsers.add_parser(
        "templates",
        help="List templates declared in a library.",
    )
    templates_parser.add_argument("--library", required=True, help="Path to a template library YAML file.")
    templates_parser.add_argument("--json", action="store_true", help="Print a JSON summary instead.")
    templates_parser.set_defaults(func=_handle_templates)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    setup_logging(verbose=args.verbose)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
