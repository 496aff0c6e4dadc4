# feedclean/quality/statistics.py
"""
Dispersion statistics of a whole series.

The summary is computed once per (provider, metric) series over every
reading of the run and is what the cleaner calibrates its value threshold on.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np

from ..core import Batch, EmptySeries, Key, Metric, Provider, TimeSeries
from ..core.timeseries import as_values

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DispersionSummary:
    min: float
    max: float
    stddev: float  # population standard deviation (ddof=0)
    mean: float
    n: int

    @property
    def spread(self) -> float:
        return self.max - self.min


def _values_of(series: TimeSeries | Metric | Any) -> np.ndarray:
    if isinstance(series, (TimeSeries, Metric)):
        return series.values
    return as_values(series)


def summarize(series: TimeSeries | Metric | Any) -> DispersionSummary:
    """
    Min, max and population standard deviation of every value in `series`.

    Two passes: mean first, then the mean of squared deviations.
    Raises EmptySeries when there is nothing to summarize.
    """
    v = _values_of(series)
    if v.size == 0:
        raise EmptySeries("cannot compute dispersion of an empty series")

    mean = float(np.mean(v))
    variance = float(np.mean((v - mean) ** 2))
    return DispersionSummary(
        min=float(np.min(v)),
        max=float(np.max(v)),
        stddev=float(np.sqrt(variance)),
        mean=mean,
        n=int(v.size),
    )


def summarize_provider(provider: Provider) -> dict[Key, DispersionSummary]:
    """Summaries for every non-empty metric of `provider`."""
    out: dict[Key, DispersionSummary] = {}
    for key, metric in provider.items():
        try:
            out[key] = summarize(metric)
        except EmptySeries:
            logger.warning(
                "provider %r metric %r has no numeric readings; no summary",
                provider.provider_id,
                key,
            )
    return out


def summarize_batch(batch: Batch) -> dict[Key, dict[Key, DispersionSummary]]:
    return {pid: summarize_provider(provider) for pid, provider in batch.items()}
