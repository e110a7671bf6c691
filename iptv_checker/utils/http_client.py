"""Shared HTTP helpers for probing stream URLs."""

from __future__ import annotations

import logging
from typing import Dict, Optional

import requests

DEFAULT_USER_AGENT = "VLC/3.0.20 LibVLC/3.0.20"

PROBE_HEADERS_TEMPLATE: Dict[str, str] = {
    "user-agent": DEFAULT_USER_AGENT,
    "accept": "*/*",
    "connection": "close",
}


class HttpClient:
    """Issues lightweight requests against stream hosts with a fixed timeout."""

    def __init__(self, timeout: float = 5, user_agent: Optional[str] = None) -> None:
        self.timeout = timeout
        self._session = requests.Session()

        self._headers = PROBE_HEADERS_TEMPLATE.copy()
        if user_agent:
            self._headers["user-agent"] = user_agent
        self._session.headers.update(self._headers)

    def head(self, url: str) -> requests.Response:
        """HEAD ``url`` following redirects; network errors propagate to the caller."""

        logging.debug("HEAD %s (timeout=%ss)", url, self.timeout)
        response = self._session.head(url, allow_redirects=True, timeout=self.timeout)
        response.close()
        return response

    def close(self) -> None:
        self._session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
