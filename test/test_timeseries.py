# test/test_timeseries.py
import numpy as np
import pytest

from feedclean.core.timeseries import TimeSeries
from feedclean.core.exceptions import InvalidSeries


def test_init_ok_basic():
    ts = TimeSeries(time=[0, 1000, 2000], values=[10.0, 20.0, 30.0], name="temperature")

    assert ts.n == 3
    assert len(ts) == 3
    assert ts.t_start == 0
    assert ts.t_end == 2000
    assert ts.name == "temperature"
    assert ts.time.dtype == np.uint64
    assert ts.values.dtype == np.float64


def test_init_rejects_non_1d():
    with pytest.raises(InvalidSeries):
        TimeSeries(time=np.array([[0, 1]]), values=np.array([1.0, 2.0]))


def test_init_rejects_length_mismatch():
    with pytest.raises(InvalidSeries):
        TimeSeries(time=np.array([0, 1, 2]), values=np.array([1.0, 2.0]))


def test_init_rejects_non_finite_values():
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0, 1, 2], values=[1.0, np.nan, 3.0])
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0, 1], values=[1.0, np.inf])


def test_init_rejects_bad_timestamps():
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0, -5], values=[1.0, 2.0])
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0.0, 1.5], values=[1.0, 2.0])
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0.0, np.nan], values=[1.0, 2.0])


def test_init_rejects_categorical_values():
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0, 1], values=["on", "off"])
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0, 1], values=[True, False])


def test_integral_float_timestamps_are_accepted():
    ts = TimeSeries(time=np.array([0.0, 100.0]), values=[1.0, 2.0])
    assert ts.time.tolist() == [0, 100]


def test_arrival_order_is_kept_even_when_time_goes_backwards():
    ts = TimeSeries(time=[1000, 500, 2000], values=[1.0, 2.0, 3.0])
    assert ts.time.tolist() == [1000, 500, 2000]
    assert ts.is_monotonic is False

    assert TimeSeries(time=[0, 0, 5], values=[1.0, 2.0, 3.0]).is_monotonic is True


def test_empty_series():
    ts = TimeSeries.empty(name="x")
    assert ts.n == 0
    assert ts.t_start is None
    assert ts.t_end is None
    assert ts.is_monotonic is True
    assert list(ts.readings()) == []

    ts2 = TimeSeries(time=np.array([]), values=np.array([]))
    assert ts2.time.dtype == np.uint64


def test_readings_yields_python_pairs():
    ts = TimeSeries(time=[0, 50], values=[10.0, 10.05])
    pairs = list(ts.readings())
    assert pairs == [(10.0, 0), (10.05, 50)]
    assert isinstance(pairs[0][1], int)


def test_take_with_mask_and_indices():
    ts = TimeSeries(time=[0, 1, 2, 3], values=[10.0, 20.0, 30.0, 40.0], attrs={"k": 1})

    out = ts.take(np.array([True, False, True, False]))
    assert out.time.tolist() == [0, 2]
    assert np.allclose(out.values, [10.0, 30.0])
    assert out.attrs == {"k": 1}
    assert out.attrs is not ts.attrs

    out2 = ts.take([3, 1])
    assert out2.time.tolist() == [3, 1]

    assert ts.take([]).n == 0

    with pytest.raises(InvalidSeries):
        ts.take(np.array([True, False]))


def test_to_numpy_copy_flag():
    ts = TimeSeries(time=[0, 1, 2], values=[1.0, 2.0, 3.0])

    t_view, v_view = ts.to_numpy(copy=False)
    t_cp, v_cp = ts.to_numpy(copy=True)

    assert t_view is ts.time and v_view is ts.values
    assert t_cp is not ts.time and v_cp is not ts.values
    assert np.array_equal(t_cp, ts.time) and np.allclose(v_cp, ts.values)


def test_attrs_validation():
    assert TimeSeries(time=[0], values=[1.0], attrs=None).attrs == {}
    with pytest.raises(InvalidSeries):
        TimeSeries(time=[0], values=[1.0], attrs=["nope"])  # type: ignore[arg-type]
