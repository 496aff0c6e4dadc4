# feedclean/__init__.py
"""
feedclean: per-provider deduplication and gap statistics for numeric feeds.

- core: TimeSeries / Metric / Provider / Batch data model
- quality: dispersion summaries, duplicate suppression, batch engine
- io: grouping of raw feed records into a Batch
"""

from .core import Batch, Metric, Provider, TimeSeries, CoreError, EmptySeries
from .quality import (
    CleanerConfig,
    CleaningReport,
    DispersionSummary,
    GapStatistics,
    clean_batch,
    clean_series,
    summarize,
)

__all__ = [
    "Batch",
    "Metric",
    "Provider",
    "TimeSeries",
    "CoreError",
    "EmptySeries",
    "CleanerConfig",
    "CleaningReport",
    "DispersionSummary",
    "GapStatistics",
    "clean_batch",
    "clean_series",
    "summarize",
]
