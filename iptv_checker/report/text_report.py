"""Plain-text report of a finished availability run."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from ..models import CheckSummary, ProbeResult
from ..prober.stream_prober import status_label
from ..utils.file_utils import write_text

REPORT_TITLE = "IPTV Stream Test Results"
UNNAMED_LABEL = "Unnamed"


def summarize(results: Sequence[ProbeResult]) -> CheckSummary:
    total = len(results)
    available = sum(1 for result in results if result.available)
    rate = round(100.0 * available / total, 2) if total else 0.0
    return CheckSummary(total=total, available=available, unavailable=total - available, rate=rate)


def build_report(results: Sequence[ProbeResult], generated_at: Optional[datetime] = None) -> str:
    timestamp = (generated_at or datetime.now()).strftime("%Y-%m-%d %H:%M:%S")
    summary = summarize(results)

    lines: List[str] = [
        REPORT_TITLE,
        f"Generated: {timestamp}",
        f"Total Tests: {summary.total}",
        "",
    ]
    for index, result in enumerate(results, start=1):
        lines.append(f"{index}. {result.entry.name or UNNAMED_LABEL} - {status_label(result)}")
        lines.append(result.entry.url)
        lines.append("")

    lines.extend(
        [
            "Summary",
            f"Available: {summary.available}",
            f"Unavailable: {summary.unavailable}",
            f"Availability Rate: {summary.rate:.2f}%",
        ]
    )
    return "\n".join(lines) + "\n"


def write_report(path: str, results: Sequence[ProbeResult], generated_at: Optional[datetime] = None) -> CheckSummary:
    """Writes the report to ``path`` and returns the summary it contains."""

    write_text(path, build_report(results, generated_at))
    logging.info("Saved report to %s", path)
    return summarize(results)
