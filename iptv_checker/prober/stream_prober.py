"""Sequential availability checks for playlist streams."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

import requests

from ..models import PlaylistEntry, ProbeResult
from ..utils.http_client import HttpClient

DEFAULT_TIMEOUT = 5

ProgressCallback = Callable[[int, int, ProbeResult], None]


def status_label(result: ProbeResult) -> str:
    state = "Available" if result.available else "Unavailable"
    return f"{state} ({result.detail})"


def log_progress(index: int, total: int, result: ProbeResult) -> None:
    """Default progress observer: one log line per probed stream."""

    percent = 100.0 * index / total if total else 100.0
    logging.info(
        "[%s/%s] %5.1f%% %s - %s",
        index,
        total,
        percent,
        result.entry.name or result.entry.url,
        status_label(result),
    )


class StreamProber:
    """Checks each stream URL once with a HEAD request and a hard timeout."""

    def __init__(
        self,
        http_client: Optional[HttpClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
        user_agent: Optional[str] = None,
    ) -> None:
        self.timeout = timeout
        self._http_client = http_client or HttpClient(timeout=timeout, user_agent=user_agent)

    def probe(self, entry: PlaylistEntry) -> ProbeResult:
        """Classifies a single entry; failures become unavailable results."""

        try:
            response = self._http_client.head(entry.url)
        except requests.exceptions.Timeout:
            return self._failure(entry, f"Timeout after {self.timeout:g}s")
        except requests.exceptions.ConnectionError as exc:
            return self._failure(entry, f"Connection error: {exc}")
        except (requests.exceptions.InvalidSchema, requests.exceptions.MissingSchema):
            return self._failure(entry, "Unsupported URL scheme")
        except requests.exceptions.InvalidURL as exc:
            return self._failure(entry, f"Invalid URL: {exc}")
        except requests.RequestException as exc:
            return self._failure(entry, f"{type(exc).__name__}: {exc}")
        except Exception as exc:
            logging.warning("Unexpected error while probing %s: %s", entry.url, exc)
            return self._failure(entry, f"{type(exc).__name__}: {exc}")

        status_code = response.status_code
        available = 200 <= status_code < 400
        if not available:
            logging.debug("%s answered HTTP %s", entry.url, status_code)
        return ProbeResult(
            entry=entry,
            available=available,
            detail=f"HTTP {status_code}",
            status_code=status_code,
        )

    def probe_entries(
        self,
        entries: Sequence[PlaylistEntry],
        max_streams: Optional[int] = None,
        progress: Optional[ProgressCallback] = log_progress,
    ) -> List[ProbeResult]:
        """Probes entries in playlist order, optionally capped to the first ``max_streams``."""

        if max_streams is not None and max_streams < 0:
            raise ValueError(f"max_streams must not be negative, got {max_streams}")
        selected = list(entries) if max_streams is None else list(entries[:max_streams])
        if len(selected) < len(entries):
            logging.info("Testing first %s of %s streams", len(selected), len(entries))

        results: List[ProbeResult] = []
        total = len(selected)
        for index, entry in enumerate(selected, start=1):
            result = self.probe(entry)
            results.append(result)
            if progress is not None:
                progress(index, total, result)
        return results

    def _failure(self, entry: PlaylistEntry, detail: str) -> ProbeResult:
        logging.debug("%s unavailable: %s", entry.url, detail)
        return ProbeResult(entry=entry, available=False, detail=detail)

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "StreamProber":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


def probe(url: str, timeout: float = DEFAULT_TIMEOUT) -> ProbeResult:
    """One-off check of a bare URL with a throwaway session."""

    with HttpClient(timeout=timeout) as http_client:
        return StreamProber(http_client=http_client, timeout=timeout).probe(PlaylistEntry(url=url))
