"""Density-estimation kernels that weight a photon's flux by its distance."""

from __future__ import annotations

import math
from typing import Iterable

from fotonray.rgb import RGB
from fotonray.vector import Vec3


def photon_distance(position: Vec3, center: Vec3) -> float:
    """Distance between a photon's position and ``center``."""
    return math.dist(tuple(position), tuple(center))


def _check_radius(max_radius: float) -> None:
    if max_radius <= 0:
        raise ValueError("kernel radius must be positive")


def constant_kernel(flux: RGB, radius: float) -> RGB:
    """Flux spread uniformly over a disc of ``radius``."""
    _check_radius(radius)
    return flux / (math.pi * radius ** 2)


def gaussian_kernel(position: Vec3, flux: RGB, max_radius: float, center: Vec3) -> RGB:
    """Flux weighted by a Gaussian of standard deviation ``max_radius``."""
    _check_radius(max_radius)
    r = photon_distance(position, center)
    normalisation = 1 / (max_radius * math.sqrt(2 * math.pi))
    exponent = -(r ** 2) / (2 * max_radius ** 2)
    return flux * (normalisation * math.exp(exponent))


def conic_kernel(position: Vec3, flux: RGB, max_radius: float, center: Vec3) -> RGB:
    """Flux weighted linearly, from full at the centre to zero at ``max_radius``."""
    _check_radius(max_radius)
    r = photon_distance(position, center)
    return flux * (1 - r / max_radius)


def epanechnikov_kernel(position: Vec3, flux: RGB, max_radius: float, center: Vec3) -> RGB:
    """Flux weighted by the Epanechnikov kernel."""
    _check_radius(max_radius)
    ratio = photon_distance(position, center) / max_radius
    return flux * (0.75 * (1 - ratio ** 2))


def biweight_kernel(position: Vec3, flux: RGB, max_radius: float, center: Vec3) -> RGB:
    """Flux weighted by the biweight (quartic) kernel."""
    _check_radius(max_radius)
    ratio = photon_distance(position, center) / max_radius
    return flux * ((15.0 / 16.0) * (1 - ratio ** 2) ** 2)


def logistic_kernel(position: Vec3, flux: RGB, max_radius: float, center: Vec3) -> RGB:
    """Flux weighted by the logistic kernel."""
    _check_radius(max_radius)
    ratio = photon_distance(position, center) / max_radius
    return flux * (1 / (math.exp(ratio) + 2 + math.exp(-ratio)))


def max_radius(center: Vec3, positions: Iterable[Vec3]) -> float:
    """Largest distance from ``center`` to any of ``positions`` (0 if none)."""
    return max((photon_distance(p, center) for p in positions), default=0.0)