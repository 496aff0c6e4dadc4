# core/timeseries.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

import numpy as np

from .exceptions import InvalidSeries


def _as_timestamps(time: Any) -> np.ndarray:
    t = np.asarray(time)
    if t.ndim != 1:
        raise InvalidSeries(f"`time` must be 1D, got shape {t.shape}")
    if t.size == 0:
        return t.astype(np.uint64)

    if t.dtype == np.bool_ or not np.issubdtype(t.dtype, np.number):
        raise InvalidSeries(f"`time` must be numeric, got dtype {t.dtype}")
    if np.issubdtype(t.dtype, np.complexfloating):
        raise InvalidSeries("`time` must be real-valued.")
    if np.issubdtype(t.dtype, np.floating):
        if not np.isfinite(t).all():
            raise InvalidSeries("`time` contains non-finite values (NaN/Inf).")
        if not np.all(t == np.floor(t)):
            raise InvalidSeries("`time` must hold integral timestamps.")
    if np.any(t < 0):
        raise InvalidSeries("`time` must not contain negative timestamps.")
    return t.astype(np.uint64)


def as_values(values: Any) -> np.ndarray:
    v = np.asarray(values)
    if v.ndim != 1:
        raise InvalidSeries(f"`values` must be 1D, got shape {v.shape}")
    if v.size == 0:
        return v.astype(np.float64)

    if v.dtype == np.bool_ or not np.issubdtype(v.dtype, np.number):
        raise InvalidSeries(f"`values` must be numeric, got dtype {v.dtype}")
    if np.issubdtype(v.dtype, np.complexfloating):
        raise InvalidSeries("`values` must be real-valued.")
    v = v.astype(np.float64)
    if not np.isfinite(v).all():
        raise InvalidSeries("`values` contains non-finite values (NaN/Inf).")
    return v


@dataclass(frozen=True, slots=True)
class TimeSeries:
    """
    Immutable series of numeric readings in arrival order.

    `time` holds unsigned integer timestamps (milliseconds in the usual feed,
    any consistent unit works), `values` the float64 readings. Arrival order
    is kept as-is: a timestamp going backwards is allowed here and handled
    by the cleaner.
    """

    time: np.ndarray = field(repr=False)
    values: np.ndarray = field(repr=False)
    name: str | None = None
    attrs: dict[str, Any] = field(default_factory=dict, repr=False)

    def __post_init__(self) -> None:
        t = _as_timestamps(self.time)
        v = as_values(self.values)

        if t.size != v.size:
            raise InvalidSeries(
                f"`time` and `values` must have same length, got {t.size} vs {v.size}"
            )

        if self.attrs is None:
            object.__setattr__(self, "attrs", {})
        elif not isinstance(self.attrs, dict):
            raise InvalidSeries("`attrs` must be a dict.")

        object.__setattr__(self, "time", t)
        object.__setattr__(self, "values", v)

    @classmethod
    def empty(cls, name: str | None = None) -> "TimeSeries":
        return cls(time=np.array([], dtype=np.uint64), values=np.array([]), name=name)

    @property
    def n(self) -> int:
        return int(self.time.size)

    def __len__(self) -> int:
        return self.n

    @property
    def t_start(self) -> int | None:
        return None if self.n == 0 else int(self.time[0])

    @property
    def t_end(self) -> int | None:
        return None if self.n == 0 else int(self.time[-1])

    @property
    def is_monotonic(self) -> bool:
        """True when timestamps never go backwards in arrival order."""
        if self.n < 2:
            return True
        return bool(np.all(self.time[1:] >= self.time[:-1]))

    def readings(self) -> Iterator[tuple[float, int]]:
        """Iterate `(value, timestamp)` pairs as plain Python numbers."""
        return zip(self.values.tolist(), self.time.tolist())

    def take(self, selector: Any) -> "TimeSeries":
        """Return the sub-series picked by a boolean mask or index array."""
        sel = np.asarray(selector)
        if sel.size == 0 and sel.dtype != np.bool_:
            sel = sel.astype(np.intp)
        if sel.dtype == np.bool_ and sel.shape != self.time.shape:
            raise InvalidSeries(
                f"mask must have shape {self.time.shape}, got {sel.shape}"
            )
        return TimeSeries(
            time=self.time[sel],
            values=self.values[sel],
            name=self.name,
            attrs=self.attrs.copy(),
        )

    def to_numpy(self, *, copy: bool = False) -> tuple[np.ndarray, np.ndarray]:
        if copy:
            return self.time.copy(), self.values.copy()
        return self.time, self.values
