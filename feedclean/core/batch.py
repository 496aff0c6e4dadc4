# feedclean/core/batch.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Mapping

from .exceptions import InvalidBatch, ProviderNotFound
from .keys import Key, is_valid_key
from .metadata import BatchMeta
from .provider import Provider


@dataclass(frozen=True, slots=True)
class Batch:
    """
    Batch = every Provider seen in one processing run.

    Rebuilt from scratch for each run; nothing is carried between runs.
    Access is dict-like: batch[7]["temperature"].
    """
    providers: Mapping[Key, Provider] = field(default_factory=dict, repr=False)
    meta: BatchMeta = field(default_factory=BatchMeta, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.providers, Mapping):
            raise InvalidBatch("Batch.providers must be a mapping (e.g., dict).")
        if not isinstance(self.meta, BatchMeta):
            raise InvalidBatch("Batch.meta must be a BatchMeta instance.")

        normalized: dict[Key, Provider] = {}
        for key, provider in self.providers.items():
            if not is_valid_key(key):
                raise InvalidBatch("Batch.providers keys must be non-empty strings or ints.")
            if not isinstance(provider, Provider):
                raise InvalidBatch("Batch.providers values must be Provider instances.")
            if provider.provider_id != key:
                raise InvalidBatch(
                    f"Provider id mismatch: key {key!r} but Provider.provider_id is "
                    f"{provider.provider_id!r}."
                )
            normalized[key] = provider

        object.__setattr__(self, "providers", normalized)

    # ---- dict-like API ----
    def __len__(self) -> int:
        return len(self.providers)

    def __iter__(self) -> Iterator[Key]:
        return iter(self.providers)

    def __contains__(self, key: object) -> bool:
        return key in self.providers

    def keys(self) -> Iterable[Key]:
        return self.providers.keys()

    def items(self) -> Iterable[tuple[Key, Provider]]:
        return self.providers.items()

    def values(self) -> Iterable[Provider]:
        return self.providers.values()

    def __getitem__(self, key: Key) -> Provider:
        try:
            return self.providers[key]
        except KeyError as e:
            raise ProviderNotFound(key) from e

    def get(self, key: Key, default: Provider | None = None) -> Provider | None:
        return self.providers.get(key, default)

    @property
    def n_readings(self) -> int:
        return sum(p.n_readings for p in self.providers.values())
