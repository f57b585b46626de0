from kolor.conversions import hsv_to_rgb, np_hsv_to_rgb
from kolor.samples import samples_rgb_hsv
import numpy as np
import pytest

rgb_tolerance = 1e-9


def test_hsv_to_rgb_samples():
    for rgb_exp, (h, s, v) in samples_rgb_hsv.items():
        rgb_out = hsv_to_rgb(h, s, v)
        assert rgb_out == pytest.approx(rgb_exp, abs=rgb_tolerance)


@pytest.mark.parametrize("hue, rgb", [
    (30.0, (1.0, 0.5, 0.0)),    # sector 0
    (90.0, (0.5, 1.0, 0.0)),    # sector 1
    (150.0, (0.0, 1.0, 0.5)),   # sector 2
    (210.0, (0.0, 0.5, 1.0)),   # sector 3
    (270.0, (0.5, 0.0, 1.0)),   # sector 4
    (330.0, (1.0, 0.0, 0.5)),   # sector 5
])
def test_hsv_to_rgb_sectors(hue, rgb):
    assert hsv_to_rgb(hue, 1.0, 1.0) == pytest.approx(rgb, abs=rgb_tolerance)


def test_hsv_to_rgb_wraps_hue():
    assert hsv_to_rgb(360.0, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0))
    assert hsv_to_rgb(480.0, 1.0, 1.0) == pytest.approx((0.0, 1.0, 0.0))
    assert hsv_to_rgb(-120.0, 1.0, 1.0) == pytest.approx((0.0, 0.0, 1.0))


def test_hsv_to_rgb_clamps_saturation_and_value():
    assert hsv_to_rgb(0.0, 2.0, 1.5) == pytest.approx((1.0, 0.0, 0.0))
    assert hsv_to_rgb(0.0, -1.0, 0.5) == (0.5, 0.5, 0.5)
    assert hsv_to_rgb(0.0, 1.0, -0.5) == pytest.approx((0.0, 0.0, 0.0))


def test_hsv_to_rgb_achromatic_ignores_hue():
    for hue in (0.0, 123.0, 359.0, 1000.0):
        assert hsv_to_rgb(hue, 0.0, 0.3) == (0.3, 0.3, 0.3)


def test_hsv_to_rgb_numpy_matches_scalar():
    h = np.array([-90.0, 0.0, 45.0, 120.0, 200.0, 300.0, 359.999, 720.0])
    s = np.array([1.0, 0.0, 0.5, 1.0, 0.25, 2.0, 1.0, 0.75])
    v = np.array([1.0, 0.5, 0.8, 0.2, 1.0, 1.0, -1.0, 0.6])
    rgb = np_hsv_to_rgb(h, s, v)
    assert rgb.shape == (8, 3)

    for i in range(len(h)):
        assert np.allclose(rgb[i], hsv_to_rgb(h[i], s[i], v[i]), atol=rgb_tolerance)


def test_hsv_to_rgb_numpy_2d():
    h = np.array([[0.0, 120.0], [240.0, 60.0]])
    rgb = np_hsv_to_rgb(h, 1.0, 1.0)
    expected = np.array([
        [[1.0, 0.0, 0.0], [0.0, 1.0, 0.0]],
        [[0.0, 0.0, 1.0], [1.0, 1.0, 0.0]],
    ])
    assert rgb.shape == (2, 2, 3)
    assert np.allclose(rgb, expected)


def test_hsv_to_rgb_tiny_negative_hue_stays_red():
    # -1e-14 wraps to exactly 360.0, which must map back to sector 0
    assert hsv_to_rgb(-1e-14, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0), abs=rgb_tolerance)
    assert hsv_to_rgb(360.0 - 1e-13, 1.0, 1.0) == pytest.approx((1.0, 0.0, 0.0), abs=1e-9)
    rgb = np_hsv_to_rgb(np.array([-1e-14, -1e-300]), 1.0, 1.0)
    assert np.allclose(rgb, [[1.0, 0.0, 0.0], [1.0, 0.0, 0.0]], atol=rgb_tolerance)


def test_hsv_to_rgb_non_finite_hue_is_grey():
    for hue in (float("nan"), float("inf"), float("-inf")):
        assert hsv_to_rgb(hue, 1.0, 0.5) == (0.5, 0.5, 0.5)

    rgb = np_hsv_to_rgb(np.array([np.nan, np.inf, 0.0]), 1.0, 0.5)
    assert np.allclose(rgb, [[0.5, 0.5, 0.5], [0.5, 0.5, 0.5], [0.5, 0.0, 0.0]])


def test_hsv_to_rgb_nan_saturation_does_not_raise():
    r, g, b = hsv_to_rgb(90.0, float("nan"), 1.0)
    assert g == 1.0
