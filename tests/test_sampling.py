import math
import random

import pytest

from fotonray.sampling import (
    sample_hemisphere_angles,
    sample_hemisphere_direction,
    sample_sphere_angles,
    sample_sphere_direction,
    spherical_to_cartesian,
)
from fotonray.vector import Direction


def test_spherical_to_cartesian_pole():
    d = spherical_to_cartesian(0.0, 0.0)
    assert tuple(d) == pytest.approx((0.0, 0.0, 1.0))


def test_spherical_to_cartesian_equator():
    d = spherical_to_cartesian(0.0, math.pi / 2)
    assert tuple(d) == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)
    d = spherical_to_cartesian(math.pi / 2, math.pi / 2)
    assert tuple(d) == pytest.approx((0.0, 1.0, 0.0), abs=1e-12)


def test_spherical_to_cartesian_is_unit():
    for az, inc in [(0.3, 1.1), (2.5, 0.2), (-1.0, 2.9)]:
        assert spherical_to_cartesian(az, inc).norm() == pytest.approx(1.0)


def test_hemisphere_angles_in_range():
    rng = random.Random(1)
    for _ in range(200):
        az, inc = sample_hemisphere_angles(rng)
        assert 0.0 <= az < 2 * math.pi
        assert 0.0 <= inc <= math.pi / 2


def test_sphere_angles_in_range():
    rng = random.Random(2)
    for _ in range(200):
        az, inc = sample_sphere_angles(rng)
        assert 0.0 <= az < 2 * math.pi
        assert 0.0 <= inc <= math.pi


@pytest.mark.parametrize(
    "normal",
    [Direction(0, 0, 1), Direction(1, 0, 0), Direction(0, -1, 0), Direction(1, 1, 1).normalized()],
)
def test_hemisphere_direction_stays_above_surface(normal):
    rng = random.Random(3)
    for _ in range(200):
        d, prob = sample_hemisphere_direction(normal, rng)
        assert d.norm() == pytest.approx(1.0)
        cos_theta = d.dot(normal)
        assert cos_theta >= -1e-9
        assert prob == pytest.approx(cos_theta / math.pi, abs=1e-9)
        assert 0.0 <= prob <= 1 / math.pi + 1e-12


def test_sphere_direction_is_unit_and_covers_both_halves():
    rng = random.Random(4)
    zs = [sample_sphere_direction(rng).z for _ in range(500)]
    assert all(-1.0 <= z <= 1.0 for z in zs)
    assert any(z > 0 for z in zs) and any(z < 0 for z in zs)
    assert sample_sphere_direction(rng).norm() == pytest.approx(1.0)


def test_same_seed_same_samples():
    a = sample_sphere_direction(random.Random(42))
    b = sample_sphere_direction(random.Random(42))
    assert a == b
    da, pa = sample_hemisphere_direction(Direction(0, 0, 1), random.Random(7))
    db, pb = sample_hemisphere_direction(Direction(0, 0, 1), random.Random(7))
    assert da == db and pa == pb