# feedclean/quality/cleaner.py
"""
Duplicate suppression for one series.

A reading is a duplicate of the last *retained* reading when it arrives
within `time_tolerance` of it and its value moved by less than
`stddev_fraction` of the series' standard deviation. Duplicates are dropped
from the cleaned series and counted as gaps.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable

import numpy as np

from ..core import InvalidConfig, TimeSeries
from .statistics import DispersionSummary

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CleanerConfig:
    """
    Thresholds of the duplicate test.

    - time_tolerance: readings closer than this (timestamp units) may be duplicates.
      100 matches the +-100 ms jitter of a provider on a fixed cadence.
    - stddev_fraction: value moves below stddev * fraction are noise.
    """
    time_tolerance: int = 100
    stddev_fraction: float = 0.5

    def __post_init__(self) -> None:
        if isinstance(self.time_tolerance, bool) or not isinstance(self.time_tolerance, int):
            raise InvalidConfig("CleanerConfig.time_tolerance must be an int.")
        if self.time_tolerance < 0:
            raise InvalidConfig("CleanerConfig.time_tolerance must be >= 0.")
        if not math.isfinite(self.stddev_fraction) or self.stddev_fraction < 0:
            raise InvalidConfig("CleanerConfig.stddev_fraction must be finite and >= 0.")

    def value_threshold(self, summary: DispersionSummary) -> float:
        return summary.stddev * self.stddev_fraction


DEFAULT_CONFIG = CleanerConfig()


@dataclass(frozen=True, slots=True)
class GapStatistics:
    """
    Suppressed-reading counts.

    total_gap_count adds up over series, max_gap_run keeps the longest single
    run. `merge` is associative and commutative with GapStatistics() as identity,
    so per-metric results can be folded in any order.
    """
    total_gap_count: int = 0
    max_gap_run: int = 0

    def merge(self, other: "GapStatistics") -> "GapStatistics":
        return GapStatistics(
            total_gap_count=self.total_gap_count + other.total_gap_count,
            max_gap_run=max(self.max_gap_run, other.max_gap_run),
        )

    @classmethod
    def combine(cls, stats: Iterable["GapStatistics"]) -> "GapStatistics":
        out = cls()
        for s in stats:
            out = out.merge(s)
        return out

    def as_dict(self) -> dict[str, int]:
        return {"total_gap_count": self.total_gap_count, "max_gap_run": self.max_gap_run}


@dataclass(frozen=True, slots=True)
class SeriesCleaning:
    """Outcome of cleaning one series."""

    cleaned: TimeSeries
    duplicate_mask: np.ndarray = field(repr=False)
    gaps: GapStatistics = field(default_factory=GapStatistics)
    # comparisons where the timestamp went backwards and the delta was taken as 0
    clamped: int = 0

    @property
    def n_duplicates(self) -> int:
        return self.gaps.total_gap_count


def clean_series(
    series: TimeSeries,
    summary: DispersionSummary,
    *,
    config: CleanerConfig = DEFAULT_CONFIG,
) -> SeriesCleaning:
    """
    Walk `series` in arrival order and drop noise-level repeats.

    The first reading is always kept. A later reading is a duplicate when both
    `time_delta < config.time_tolerance` and
    `|value - previous_value| < summary.stddev * config.stddev_fraction`,
    where "previous" is the last kept reading; duplicates never replace it.

    A timestamp lower than the previous one gives time_delta = 0, so such a
    reading only has to pass the value test to be dropped.

    Only the followers of a kept reading are counted: a run of N near-equal
    readings keeps the first and reports a run of N - 1.
    """
    threshold = config.value_threshold(summary)
    tolerance = config.time_tolerance

    duplicate = np.zeros(series.n, dtype=bool)
    prev: tuple[int, float] | None = None
    run = 0
    total = 0
    longest = 0
    clamped = 0

    for i, (value, timestamp) in enumerate(series.readings()):
        if prev is None:
            prev = (timestamp, value)
            continue

        prev_timestamp, prev_value = prev
        if timestamp >= prev_timestamp:
            time_delta = timestamp - prev_timestamp
        else:
            time_delta = 0
            clamped += 1

        if time_delta < tolerance and abs(value - prev_value) < threshold:
            duplicate[i] = True
            run += 1
            total += 1
            if run > longest:
                longest = run
            continue

        prev = (timestamp, value)
        run = 0

    if clamped:
        logger.debug(
            "series %r: %d timestamp(s) went backwards, delta taken as 0",
            series.name,
            clamped,
        )

    return SeriesCleaning(
        cleaned=series.take(~duplicate),
        duplicate_mask=duplicate,
        gaps=GapStatistics(total_gap_count=total, max_gap_run=longest),
        clamped=clamped,
    )
