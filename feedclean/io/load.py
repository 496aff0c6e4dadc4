# feedclean/io/load.py
from __future__ import annotations

import json
import logging
import math
from collections import defaultdict
from pathlib import Path
from typing import Any, Iterable, Mapping

import numpy as np

from feedclean.core import (
    Batch,
    BatchMeta,
    InvalidRecord,
    Key,
    Metric,
    MetricMeta,
    Provider,
    ProviderMeta,
    TimeSeries,
)
from feedclean.core.keys import is_valid_key

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("provider_id", "key", "value", "timestamp")
MAX_TIMESTAMP = int(np.iinfo(np.uint64).max)


def _reading(raw: Any, position: int) -> float | None:
    """Float value of a numeric payload, None for categorical or non-finite ones."""
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        return None
    try:
        value = float(raw)
    except OverflowError as e:
        raise InvalidRecord(f"record {position}: value out of range, got {raw!r}") from e
    return value if math.isfinite(value) else None


def _timestamp(raw: Any, position: int) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise InvalidRecord(f"record {position}: timestamp must be a number, got {raw!r}")
    if isinstance(raw, float) and not raw.is_integer():
        raise InvalidRecord(f"record {position}: timestamp must be integral, got {raw!r}")
    if raw < 0:
        raise InvalidRecord(f"record {position}: timestamp must be >= 0, got {raw!r}")
    if raw > MAX_TIMESTAMP:
        raise InvalidRecord(f"record {position}: timestamp out of range, got {raw!r}")
    return int(raw)


class _Columns:
    __slots__ = ("values", "times")

    def __init__(self) -> None:
        self.values: list[float] = []
        self.times: list[int] = []


def group_records(
    records: Iterable[Mapping[str, Any]],
    *,
    meta: BatchMeta | None = None,
) -> Batch:
    """
    Group raw feed records into a Batch, keeping arrival order.

    Each record carries `provider_id`, `key`, `value` and `timestamp`.
    A metric is registered the first time its key shows up; readings whose
    value is not a finite number (categorical payloads, NaN, Infinity) are
    dropped, so a metric made only of such payloads ends up with an empty series.
    """
    grouped: dict[Key, dict[Key, _Columns]] = defaultdict(dict)
    dropped: dict[Key, int] = defaultdict(int)

    for position, record in enumerate(records):
        if not isinstance(record, Mapping):
            raise InvalidRecord(f"record {position}: expected an object, got {type(record).__name__}")
        missing = [f for f in REQUIRED_FIELDS if f not in record]
        if missing:
            raise InvalidRecord(f"record {position}: missing field(s) {', '.join(missing)}")

        pid, key = record["provider_id"], record["key"]
        if not is_valid_key(pid):
            raise InvalidRecord(f"record {position}: invalid provider_id {pid!r}")
        if not is_valid_key(key):
            raise InvalidRecord(f"record {position}: invalid key {key!r}")
        timestamp = _timestamp(record["timestamp"], position)

        columns = grouped[pid].setdefault(key, _Columns())

        value = _reading(record["value"], position)
        if value is None:
            dropped[pid] += 1
            continue
        columns.values.append(value)
        columns.times.append(timestamp)

    if dropped:
        logger.debug("dropped %d categorical reading(s)", sum(dropped.values()))

    providers: dict[Key, Provider] = {}
    for pid, metrics in grouped.items():
        providers[pid] = Provider(
            provider_id=pid,
            metrics={
                key: Metric(
                    name=key,
                    series=TimeSeries(
                        time=np.array(cols.times, dtype=np.uint64),
                        values=np.array(cols.values, dtype=np.float64),
                        name=str(key),
                    ),
                    meta=MetricMeta(source=f"provider:{pid}"),
                )
                for key, cols in metrics.items()
            },
            meta=ProviderMeta(attrs={"dropped_categorical": dropped.get(pid, 0)}),
        )

    return Batch(providers=providers, meta=meta if meta is not None else BatchMeta())


def load_json(raw: str | bytes, *, source: str | None = None) -> Batch:
    """Parse a JSON array of feed records and group it."""
    try:
        data = json.loads(raw)
    except ValueError as e:
        # JSONDecodeError and UnicodeDecodeError
        raise InvalidRecord(f"invalid JSON: {e}") from e
    if not isinstance(data, list):
        raise InvalidRecord(f"expected a JSON array of records, got {type(data).__name__}")
    return group_records(data, meta=BatchMeta(source=source))


def load_path(path: str | Path) -> Batch:
    p = Path(path)
    return load_json(p.read_bytes(), source=str(p))
