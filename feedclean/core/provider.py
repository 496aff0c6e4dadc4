# feedclean/core/provider.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from .exceptions import MetricNotFound, InvalidProvider
from .keys import Key, is_valid_key
from .metadata import ProviderMeta
from .metric import Metric


@dataclass(frozen=True, slots=True)
class Provider:
    """One data source and the Metrics it emitted in a run, keyed by metric key."""
    provider_id: Key
    metrics: Mapping[Key, Metric] = field(default_factory=dict, repr=False)
    meta: ProviderMeta = field(default_factory=ProviderMeta, repr=False)

    def __post_init__(self) -> None:
        if not is_valid_key(self.provider_id):
            raise InvalidProvider("Provider.provider_id must be a non-empty string or an int.")
        if not isinstance(self.metrics, Mapping):
            raise InvalidProvider("Provider.metrics must be a mapping (e.g., dict).")
        if not isinstance(self.meta, ProviderMeta):
            raise InvalidProvider("Provider.meta must be a ProviderMeta instance.")

        normalized: dict[Key, Metric] = {}
        for key, metric in self.metrics.items():
            if not is_valid_key(key):
                raise InvalidProvider("Provider.metrics keys must be non-empty strings or ints.")
            if not isinstance(metric, Metric):
                raise InvalidProvider("Provider.metrics values must be Metric instances.")
            # Enforce key-name consistency (important for predictable API)
            if metric.name != key:
                raise InvalidProvider(
                    f"Metric name mismatch: key {key!r} but Metric.name is {metric.name!r}."
                )
            normalized[key] = metric

        object.__setattr__(self, "metrics", normalized)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.metrics)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.metrics)

    def keys(self) -> Iterable[Key]:
        return self.metrics.keys()

    def items(self) -> Iterable[tuple[Key, Metric]]:
        return self.metrics.items()

    def values(self) -> Iterable[Metric]:
        return self.metrics.values()

    def __contains__(self, key: object) -> bool:
        return key in self.metrics

    def __getitem__(self, key: Key) -> Metric:
        try:
            return self.metrics[key]
        except KeyError as e:
            raise MetricNotFound(key) from e

    def get(self, key: Key, default: Metric | None = None) -> Metric | None:
        return self.metrics.get(key, default)

    @property
    def n_readings(self) -> int:
        return sum(m.n for m in self.metrics.values())

    def with_metrics(self, metrics: Mapping[Key, Metric]) -> "Provider":
        return Provider(provider_id=self.provider_id, metrics=metrics, meta=self.meta.copy())
