"""Builds a cleaned playlist that omits unreachable streams."""

from __future__ import annotations

from typing import AbstractSet, List, Sequence

from .m3u_parser import display_text, is_stream_url


def filter_playlist(raw_lines: Sequence[str], unavailable_urls: AbstractSet[str]) -> List[str]:
    """Returns a new list of lines without the unavailable streams.

    Each dropped URL also takes the single line buffered right above it,
    normally its ``#EXTINF`` directive. An empty buffer is left untouched.
    """

    kept: List[str] = []
    for line in raw_lines:
        if not is_stream_url(line):
            kept.append(line)
            continue
        if display_text(line.strip()) not in unavailable_urls:
            kept.append(line)
            continue
        if kept:
            kept.pop()
    return kept
