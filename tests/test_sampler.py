import math

import pytest

from springline.core.math import curve_point
from springline.core.sampler import Sample, sample_path, sample_tangents

P0 = (200.0, 300.0)
P1 = (350.0, 200.0)
P2 = (650.0, 400.0)
P3 = (800.0, 300.0)


def test_sample_path_default_has_101_points():
    samples = sample_path(P0, P1, P2, P3)
    pts = list(samples)
    assert len(samples) == 101
    assert len(pts) == 101
    assert pts[0] == curve_point(0.0, P0, P1, P2, P3) == P0
    assert pts[-1] == curve_point(1.0, P0, P1, P2, P3) == P3


def test_sample_path_is_restartable():
    samples = sample_path(P0, P1, P2, P3)
    assert list(samples) == list(samples)


def test_sample_path_is_lazy():
    it = iter(sample_path(P0, P1, P2, P3))
    assert next(it) == P0
    assert next(it) == curve_point(0.01, P0, P1, P2, P3)


def test_sample_path_midpoint():
    pts = list(sample_path(P0, P1, P2, P3))
    assert pts[50][0] == pytest.approx(500.0)
    assert pts[50][1] == pytest.approx(300.0)


def test_sample_path_even_resolution():
    samples = sample_path(P0, P1, P2, P3, resolution=0.25)
    assert list(samples.params()) == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert len(samples) == 5


def test_sample_path_uneven_resolution_closes_on_endpoint():
    samples = sample_path(P0, P1, P2, P3, resolution=0.3)
    params = list(samples.params())
    assert len(params) == len(samples) == 5
    assert params[:4] == pytest.approx([0.0, 0.3, 0.6, 0.9])
    assert params[-1] == 1.0
    assert list(samples)[-1] == P3


def test_sample_path_full_step():
    assert list(sample_path(P0, P1, P2, P3, resolution=1.0)) == [P0, P3]


@pytest.mark.parametrize("resolution", [0.0, -0.1, 1.5])
def test_sample_path_rejects_bad_resolution(resolution):
    with pytest.raises(ValueError):
        sample_path(P0, P1, P2, P3, resolution=resolution)


def test_sample_tangents_default_count():
    samples = sample_tangents(P0, P1, P2, P3)
    assert len(samples) == 16
    for i, s in enumerate(samples):
        assert isinstance(s, Sample)
        assert s.length == 40.0
        assert s.point == curve_point(i / 15, P0, P1, P2, P3)
        assert math.hypot(*s.tangent) == pytest.approx(1.0)


def test_sample_tangents_midpoint_direction():
    samples = sample_tangents(P0, P1, P2, P3, count=2)
    mid = samples[1]
    n = math.hypot(675.0, 150.0)
    assert mid.tangent[0] == pytest.approx(675.0 / n)
    assert mid.tangent[1] == pytest.approx(150.0 / n)


def test_sample_tangents_degenerate_curve_gives_zero_tangents():
    p = (10.0, 10.0)
    for s in sample_tangents(p, p, p, p, count=4):
        assert s.tangent == (0.0, 0.0)


def test_sample_tangents_rejects_bad_count():
    with pytest.raises(ValueError):
        sample_tangents(P0, P1, P2, P3, count=0)


def test_sample_segment_is_centred():
    s = Sample(point=(10.0, 10.0), tangent=(1.0, 0.0), length=40.0)
    assert s.segment() == ((-10.0, 10.0), (30.0, 10.0))

    s = Sample(point=(0.0, 0.0), tangent=(0.0, -1.0), length=10.0)
    assert s.segment() == ((0.0, 5.0), (0.0, -5.0))
