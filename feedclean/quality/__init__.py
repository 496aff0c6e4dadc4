# feedclean/quality/__init__.py
"""
Statistical quality and deduplication engine.

- statistics: per-series dispersion summary (min, max, stddev)
- cleaner: duplicate suppression for one series and its gap statistics
- engine: runs both over every provider and metric of a Batch
"""

from .statistics import DispersionSummary, summarize, summarize_provider, summarize_batch
from .cleaner import CleanerConfig, DEFAULT_CONFIG, GapStatistics, SeriesCleaning, clean_series
from .engine import CleaningReport, ProviderReport, clean_batch, clean_provider


__all__ = [
    "DispersionSummary",
    "summarize",
    "summarize_provider",
    "summarize_batch",
    "CleanerConfig",
    "DEFAULT_CONFIG",
    "GapStatistics",
    "SeriesCleaning",
    "clean_series",
    "CleaningReport",
    "ProviderReport",
    "clean_batch",
    "clean_provider",
]
