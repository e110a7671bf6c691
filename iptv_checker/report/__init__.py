"""Reporting for availability runs."""

from .text_report import build_report, summarize, write_report

__all__ = ["build_report", "summarize", "write_report"]
