"""Utility helpers for HTTP and filesystem operations."""

from .http_client import HttpClient
from .file_utils import default_clean_path, write_lines, write_text

__all__ = ["HttpClient", "default_clean_path", "write_lines", "write_text"]
