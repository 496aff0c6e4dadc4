# feedclean/core/__init__.py
"""
Core domain objects for feedclean.

This module defines the in-memory data model of one processing run:
- TimeSeries: validated readings (value + timestamp) in arrival order
- Metric: one value stream of a provider (metric key + TimeSeries + metadata)
- Provider: one data source holding several metrics
- Batch: every provider seen in the run

The core layer is independent from feed formats and from cleaning logic.
"""

from .timeseries import TimeSeries
from .keys import Key
from .metric import Metric
from .provider import Provider
from .batch import Batch
from .metadata import MetricMeta, ProviderMeta, BatchMeta
from .exceptions import (
    CoreError,
    InvalidSeries,
    InvalidMetric,
    InvalidProvider,
    InvalidBatch,
    InvalidConfig,
    InvalidRecord,
    EmptySeries,
    MetricNotFound,
    ProviderNotFound,
)


__all__ = [
    # time series
    "TimeSeries",
    "Key",

    # domain objects
    "Metric",
    "Provider",
    "Batch",

    # metadata
    "MetricMeta",
    "ProviderMeta",
    "BatchMeta",

    # exceptions
    "CoreError",
    "InvalidSeries",
    "InvalidMetric",
    "InvalidProvider",
    "InvalidBatch",
    "InvalidConfig",
    "InvalidRecord",
    "EmptySeries",
    "MetricNotFound",
    "ProviderNotFound",
]
