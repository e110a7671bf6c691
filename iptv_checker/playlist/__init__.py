"""Playlist parsing and filtering helpers."""

from .m3u_parser import directive_name, display_text, is_stream_url, parse, read_playlist
from .playlist_filter import filter_playlist

__all__ = ["parse", "read_playlist", "is_stream_url", "directive_name", "display_text", "filter_playlist"]
