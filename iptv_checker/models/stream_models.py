"""Pydantic models that describe playlist entries and probe outcomes."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class PlaylistEntry(BaseModel):
    """A single stream extracted from a playlist."""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    url: str


class ProbeResult(BaseModel):
    """Outcome of one availability check against an entry's URL."""

    model_config = ConfigDict(frozen=True)

    entry: PlaylistEntry
    available: bool
    detail: str
    status_code: Optional[int] = None


class CheckSummary(BaseModel):
    """Aggregate counts for a finished run."""

    model_config = ConfigDict(frozen=True)

    total: int
    available: int
    unavailable: int
    rate: float
