"""Sanity-check rendered HTML fragments: void tags stay empty and ids are unique."""

from __future__ import annotations

import argparse
import re
from collections import Counter
from pathlib import Path
from typing import Iterable

from bs4 import BeautifulSoup

from componentkit.model import VOID_TAGS

CLOSING_TAG_RE = re.compile(r"</\s*([a-zA-Z][a-zA-Z0-9-]*)\s*>")


def find_html_files(root: Path) -> Iterable[Path]:
    """Yield all HTML files under the given root directory."""

    for path in sorted(root.rglob("*.html")):
        if path.is_file():
            yield path


def check_html(html: str) -> list[str]:
    errors: list[str] = []

    for match in CLOSING_TAG_RE.finditer(html):
        tag = match.group(1).lower()
        if tag in VOID_TAGS:
            errors.append(f"void tag <{tag}> has a closing tag")

    soup = BeautifulSoup(html, "html.parser")
    ids = Counter(tag.get("id") for tag in soup.find_all(id=True))
    for element_id, count in sorted(ids.items()):
        if count > 1:
            errors.append(f"id {element_id!r} used {count} times")
    return errors


def main() -> None:
    parser = argparse.ArgumentParser(description="Check rendered HTML files.")
    parser.add_argument("root", type=Path, help="Directory containing rendered .html files")
    args = parser.parse_args()

    if not args.root.exists():
        raise SystemExit(f"{args.root} not found; render some components first.")

    errors: list[str] = []
    paths = list(find_html_files(args.root))
    for html_path in paths:
        for message in check_html(html_path.read_text(encoding="utf-8")):
            errors.append(f"{html_path}: {message}")

    if errors:
        for message in errors:
            print(message)
        raise SystemExit(1)

    print(f"OK: {len(paths)} HTML files passed.")


if __name__ == "__main__":
    main()
