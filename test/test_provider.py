# test/test_provider.py
import numpy as np
import pytest

from feedclean.core import Provider, Metric, TimeSeries, ProviderMeta
from feedclean.core import InvalidProvider, MetricNotFound


def _metric(name, t, v):
    return Metric(name=name, series=TimeSeries(time=t, values=np.array(v, dtype=float)))


def test_provider_basic_dict_api():
    m1 = _metric("temperature", [0, 1000, 2000], [10, 20, 30])
    m2 = _metric("pressure", [500, 1500], [100, 110])

    p = Provider(
        provider_id=1,
        metrics={"temperature": m1, "pressure": m2},
        meta=ProviderMeta(description="weather station"),
    )

    assert len(p) == 2
    assert "temperature" in p
    assert list(p) == ["temperature", "pressure"]
    assert p["pressure"].n == 2
    assert p.get("missing") is None
    assert p.n_readings == 5


def test_provider_rejects_metric_key_name_mismatch():
    m1 = _metric("temperature", [0, 1], [1, 2])
    with pytest.raises(InvalidProvider):
        Provider(provider_id=1, metrics={"temp": m1})


def test_provider_rejects_bad_id():
    with pytest.raises(InvalidProvider):
        Provider(provider_id="")
    with pytest.raises(InvalidProvider):
        Provider(provider_id=False)  # type: ignore[arg-type]


def test_provider_getitem_missing_raises_metricnotfound():
    p = Provider(provider_id="p")
    with pytest.raises(MetricNotFound):
        _ = p["missing"]


def test_with_metrics_keeps_id_and_meta_copy():
    p = Provider(provider_id=4, metrics={"a": _metric("a", [0], [1])}, meta=ProviderMeta(attrs={"k": 1}))

    p2 = p.with_metrics({})
    assert p2.provider_id == 4
    assert len(p2) == 0
    assert p2.meta.attrs == {"k": 1}
    assert p2.meta.attrs is not p.meta.attrs
