# feedclean/core/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidMetric, InvalidProvider, InvalidBatch


@dataclass(frozen=True, slots=True)
class MetricMeta:
    """
    Metadata attached to a Metric.

    - unit: physical/display unit of the readings (degC, hPa, ...)
    - description: human-friendly description
    - source: origin of the readings (feed name, file, ...)
    - attrs: arbitrary additional fields
    """
    unit: str | None = None
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidMetric("MetricMeta.attrs must be a dict.")

    def copy(self) -> "MetricMeta":
        return MetricMeta(
            unit=self.unit,
            description=self.description,
            source=self.source,
            attrs=self.attrs.copy(),
        )


@dataclass(frozen=True, slots=True)
class ProviderMeta:
    """
    Metadata attached to a Provider (one data source).
    """
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidProvider("ProviderMeta.attrs must be a dict.")

    def copy(self) -> "ProviderMeta":
        return ProviderMeta(
            description=self.description,
            source=self.source,
            attrs=self.attrs.copy(),
        )


@dataclass(frozen=True, slots=True)
class BatchMeta:
    """
    Metadata attached to a Batch (one processing run over all providers).
    """
    description: str | None = None
    source: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidBatch("BatchMeta.attrs must be a dict.")

    def copy(self) -> "BatchMeta":
        return BatchMeta(
            description=self.description,
            source=self.source,
            attrs=self.attrs.copy(),
        )
