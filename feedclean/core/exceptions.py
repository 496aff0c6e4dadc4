# feedclean/core/exceptions.py
from __future__ import annotations


class CoreError(Exception):
    """Base error for all feedclean exceptions."""


# ---- Validation / construction errors ----
class InvalidSeries(CoreError):
    """Raised when a TimeSeries is constructed with invalid inputs."""


class InvalidMetric(CoreError):
    """Raised when a Metric / MetricMeta is constructed with invalid inputs."""


class InvalidProvider(CoreError):
    """Raised when a Provider / ProviderMeta is constructed with invalid inputs."""


class InvalidBatch(CoreError):
    """Raised when a Batch / BatchMeta is constructed with invalid inputs."""


class InvalidConfig(CoreError):
    """Raised when cleaner thresholds are out of range."""


class InvalidRecord(CoreError):
    """Raised when a raw feed record cannot be grouped into a series."""


# ---- Computation preconditions ----
class EmptySeries(CoreError):
    """Raised when dispersion is requested for a series with zero readings."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class MetricNotFound(CoreError, KeyError):
    """Raised when a requested metric key is not present."""


class ProviderNotFound(CoreError, KeyError):
    """Raised when a requested provider id is not present."""
