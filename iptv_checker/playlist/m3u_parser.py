"""Tools for turning a line-oriented playlist into stream entries."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional

from ..models import PlaylistEntry

DIRECTIVE_PREFIX = "#EXTINF:"
STREAM_URL_RE = re.compile(r"^(?:https?|rtmp)://\S+$", re.IGNORECASE)


def display_text(value: str) -> str:
    """Replaces bytes that were not valid UTF-8 with U+FFFD for use outside the raw lines."""

    return value.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def is_stream_url(line: str) -> bool:
    """True when the whole line is an http, https or rtmp URL."""

    return bool(STREAM_URL_RE.match(line.strip()))


def directive_name(line: str) -> Optional[str]:
    """Returns the display text of an ``#EXTINF`` line, or None for other lines."""

    stripped = line.strip()
    if not stripped.startswith(DIRECTIVE_PREFIX) or "," not in stripped:
        return None
    return stripped.rsplit(",", 1)[1].strip()


def parse(lines: Iterable[str]) -> List[PlaylistEntry]:
    """Extracts (name, url) entries in playlist order.

    The most recent directive's name is carried forward and is not cleared
    after a URL consumes it, so several URLs below one ``#EXTINF`` line all
    inherit that name. URLs without any preceding directive get an empty name.
    """

    entries: List[PlaylistEntry] = []
    pending_name = ""
    for raw_line in lines:
        name = directive_name(raw_line)
        if name is not None:
            pending_name = name
            continue
        if is_stream_url(raw_line):
            entries.append(PlaylistEntry(name=display_text(pending_name), url=display_text(raw_line.strip())))

    if not entries:
        logging.warning("Playlist did not contain any stream URLs")
    return entries


def read_playlist(path: str) -> List[str]:
    """Reads a UTF-8 playlist and returns its lines without terminators.

    Invalid bytes are kept as surrogate escapes so that writing the lines back
    reproduces them unchanged.
    """

    with open(path, "r", encoding="utf-8", errors="surrogateescape") as handle:
        lines = handle.read().splitlines()
    logging.debug("Read %s lines from %s", len(lines), path)
    return lines
