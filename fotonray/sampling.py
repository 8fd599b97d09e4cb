"""Random direction sampling over the sphere and the cosine-weighted hemisphere."""

from __future__ import annotations

import math
import random
from typing import Optional, Tuple

from fotonray.vector import Direction, Vec3, normalize, orthonormal_basis


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def spherical_to_cartesian(azimuth: float, inclination: float) -> Direction:
    """Cartesian coordinates of the unit vector at (azimuth, inclination)."""
    sin_incl = math.sin(inclination)
    return Direction(
        sin_incl * math.cos(azimuth),
        sin_incl * math.sin(azimuth),
        math.cos(inclination),
    )


def sample_hemisphere_angles(rng: Optional[random.Random] = None) -> Tuple[float, float]:
    """Cosine-weighted (azimuth, inclination) on the upper hemisphere."""
    gen = _rng(rng)
    inclination = math.acos(math.sqrt(1 - gen.random()))
    azimuth = 2 * math.pi * gen.random()
    return azimuth, inclination


def sample_hemisphere_direction(
    normal: Vec3, rng: Optional[random.Random] = None
) -> Tuple[Direction, float]:
    """A cosine-weighted random direction around ``normal`` and its probability density."""
    azimuth, inclination = sample_hemisphere_angles(rng)
    local = normalize(spherical_to_cartesian(azimuth, inclination))
    n = Direction(*normal)
    tangent, bitangent = orthonormal_basis(n)
    direction = normalize(tangent * local.x + bitangent * local.y + n * local.z)
    probability = math.cos(inclination) / math.pi
    return direction, probability


def sample_sphere_angles(rng: Optional[random.Random] = None) -> Tuple[float, float]:
    """Uniform (azimuth, inclination) over the whole sphere."""
    gen = _rng(rng)
    inclination = math.acos(2.0 * gen.random() - 1.0)
    azimuth = 2 * math.pi * gen.random()
    return azimuth, inclination


def sample_sphere_direction(rng: Optional[random.Random] = None) -> Direction:
    """A uniformly distributed unit direction in global coordinates."""
    azimuth, inclination = sample_sphere_angles(rng)
    return normalize(spherical_to_cartesian(azimuth, inclination))