"""Utility helpers for file IO and logging."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import Any, Union

import yaml

PathLike = Union[str, Path]

LOGGER_NAME = "componentkit"


def stable_json_dumps(obj: object) -> str:
    """Serialize JSON in a stable, human-readable way with a trailing newline."""
    return json.dumps(obj, ensure_ascii=False, sort_keys=True, indent=2) + "\n"


def read_yaml(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return yaml.safe_load(path.read_text(encoding="utf-8"))


def write_text(path: PathLike, content: str, *, encoding: str = "utf-8") -> Path:
    """Write text content to a file, creating parent directories as needed."""

    file_path = Path(path)
    if file_path.parent != Path(""):
        file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content, encoding=encoding)
    return file_path


def setup_logging(verbose: bool = False) -> None:
    """Send componentkit logs to stderr.

    WARNING by default, INFO with ``verbose``, DEBUG when COMPONENTKIT_DEBUG is set.
    """

    if os.environ.get("COMPONENTKIT_DEBUG"):
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers = [handler]
    logger.propagate = False


__all__ = ["read_yaml", "setup_logging", "stable_json_dumps", "write_text"]
