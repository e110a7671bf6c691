"""Data models for playlist entries, probe results, and run summaries."""

from .stream_models import CheckSummary, PlaylistEntry, ProbeResult

__all__ = [
    "PlaylistEntry",
    "ProbeResult",
    "CheckSummary",
]
