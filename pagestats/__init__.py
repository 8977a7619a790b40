"""Progressive-summarization statistics for markdown notes.

Core entry point: :func:`compute_stats` turns document text into a
:class:`PageStats` record.
"""

from pagestats.stats import PageStats, Settings, compute_stats, format_layer_value, resolve_layer_symbol

__all__ = ["PageStats", "Settings", "compute_stats", "format_layer_value", "resolve_layer_symbol"]
