"""Stream availability probing."""

from .stream_prober import DEFAULT_TIMEOUT, StreamProber, log_progress, probe, status_label

__all__ = ["StreamProber", "probe", "log_progress", "status_label", "DEFAULT_TIMEOUT"]
