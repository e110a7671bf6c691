"""Filesystem helpers for output paths and line-oriented files."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Sequence


def ensure_directory(path: str) -> str:
    """Creates a directory (and its parents) if needed."""

    Path(path).mkdir(parents=True, exist_ok=True)
    return path


def ensure_parent_directory(file_path: str) -> None:
    """Makes sure the folder that will hold ``file_path`` exists."""

    parent = os.path.dirname(os.path.abspath(file_path))
    if parent:
        ensure_directory(parent)


def default_clean_path(input_file: str) -> str:
    """Returns ``<input without extension>-clean.m3u`` next to the input."""

    stem, _ = os.path.splitext(input_file)
    return f"{stem}-clean.m3u"


def write_text(path: str, text: str) -> None:
    ensure_parent_directory(path)
    try:
        with open(path, "w", encoding="utf-8", errors="surrogateescape") as handle:
            handle.write(text)
    except OSError as exc:
        logging.error("Unable to write %s: %s", path, exc)
        raise


def write_lines(path: str, lines: Sequence[str]) -> None:
    """Writes ``lines`` joined by newlines, with a trailing newline when non-empty."""

    text = "\n".join(lines)
    if lines:
        text += "\n"
    write_text(path, text)
