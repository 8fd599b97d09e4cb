import math

import pytest

from fotonray.kernels import (
    biweight_kernel,
    conic_kernel,
    constant_kernel,
    epanechnikov_kernel,
    gaussian_kernel,
    logistic_kernel,
    max_radius,
    photon_distance,
)
from fotonray.rgb import RGB
from fotonray.vector import Point

FLUX = RGB(1.0, 2.0, 4.0)
ORIGIN = Point(0.0, 0.0, 0.0)


def test_photon_distance():
    assert photon_distance(Point(3.0, 4.0, 0.0), ORIGIN) == pytest.approx(5.0)
    assert photon_distance(ORIGIN, ORIGIN) == 0.0


def test_photon_distance_symmetric():
    a, b = Point(1.0, -2.0, 3.5), Point(-0.5, 4.0, 2.0)
    assert photon_distance(a, b) == pytest.approx(photon_distance(b, a))


def test_constant_kernel_integrates_back_to_flux():
    radius = 0.7
    result = constant_kernel(FLUX, radius)
    assert tuple(result * (math.pi * radius ** 2)) == pytest.approx(tuple(FLUX))


def test_conic_kernel_full_at_center_zero_at_edge():
    assert tuple(conic_kernel(ORIGIN, FLUX, 2.0, ORIGIN)) == pytest.approx(tuple(FLUX))
    edge = conic_kernel(Point(2.0, 0.0, 0.0), FLUX, 2.0, ORIGIN)
    assert tuple(edge) == pytest.approx((0.0, 0.0, 0.0))


def test_epanechnikov_kernel_center_and_edge():
    center = epanechnikov_kernel(ORIGIN, FLUX, 1.5, ORIGIN)
    assert tuple(center) == pytest.approx(tuple(FLUX * 0.75))
    edge = epanechnikov_kernel(Point(0.0, 1.5, 0.0), FLUX, 1.5, ORIGIN)
    assert tuple(edge) == pytest.approx((0.0, 0.0, 0.0))


def test_biweight_kernel_center_and_edge():
    center = biweight_kernel(ORIGIN, FLUX, 1.0, ORIGIN)
    assert tuple(center) == pytest.approx(tuple(FLUX * (15.0 / 16.0)))
    edge = biweight_kernel(Point(0.0, 0.0, 1.0), FLUX, 1.0, ORIGIN)
    assert tuple(edge) == pytest.approx((0.0, 0.0, 0.0))


def test_logistic_kernel_at_center():
    center = logistic_kernel(ORIGIN, FLUX, 1.0, ORIGIN)
    assert tuple(center) == pytest.approx(tuple(FLUX * 0.25))


@pytest.mark.parametrize(
    "kernel",
    [gaussian_kernel, conic_kernel, epanechnikov_kernel, biweight_kernel, logistic_kernel],
)
def test_kernels_decrease_with_distance(kernel):
    near = kernel(Point(0.1, 0.0, 0.0), FLUX, 1.0, ORIGIN)
    far = kernel(Point(0.8, 0.0, 0.0), FLUX, 1.0, ORIGIN)
    assert near.max() > far.max() >= 0.0


@pytest.mark.parametrize(
    "kernel",
    [gaussian_kernel, conic_kernel, epanechnikov_kernel, biweight_kernel, logistic_kernel],
)
def test_kernels_reject_zero_radius(kernel):
    with pytest.raises(ValueError):
        kernel(ORIGIN, FLUX, 0.0, ORIGIN)


def test_constant_kernel_rejects_zero_radius():
    with pytest.raises(ValueError):
        constant_kernel(FLUX, 0.0)


def test_gaussian_kernel_preserves_colour_ratios():
    result = gaussian_kernel(Point(0.3, 0.2, 0.1), FLUX, 1.0, ORIGIN)
    assert result.g == pytest.approx(2 * result.r)
    assert result.b == pytest.approx(4 * result.r)


def test_max_radius_picks_farthest():
    positions = [Point(1.0, 0.0, 0.0), Point(0.0, -3.0, 0.0), Point(0.5, 0.5, 0.5)]
    expected = photon_distance(positions[1], ORIGIN)
    assert max_radius(ORIGIN, positions) == pytest.approx(expected)


def test_max_radius_empty_is_zero():
    assert max_radius(ORIGIN, []) == 0.0