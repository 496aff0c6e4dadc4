# core/metric.py

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import InvalidMetric
from .keys import Key, is_valid_key
from .metadata import MetricMeta
from .timeseries import TimeSeries

import numpy as np


@dataclass(slots=True, frozen=True)
class Metric:
    """One numeric value stream of a provider: metric key + readings."""

    name: Key
    series: TimeSeries
    meta: MetricMeta = field(default_factory=MetricMeta)

    def __post_init__(self) -> None:
        if not is_valid_key(self.name):
            raise InvalidMetric("Metric.name must be a non-empty string or an int.")

        if not isinstance(self.series, TimeSeries):
            raise InvalidMetric("Metric.series must be a TimeSeries instance.")

        if not isinstance(self.meta, MetricMeta):
            raise InvalidMetric("Metric.meta must be a MetricMeta instance.")

    # Convenience accessors
    @property
    def time(self) -> np.ndarray:
        return self.series.time

    @property
    def values(self) -> np.ndarray:
        return self.series.values

    @property
    def unit(self) -> str | None:
        return self.meta.unit

    @property
    def n(self) -> int:
        return self.series.n

    @property
    def t_start(self) -> int | None:
        return self.series.t_start

    @property
    def t_end(self) -> int | None:
        return self.series.t_end

    # Core operations
    def with_series(self, series: TimeSeries) -> "Metric":
        """Same metric key and metadata, different readings."""
        return Metric(name=self.name, series=series, meta=self.meta.copy())
    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        return self.series.to_numpy(copy=copy)
