"""Spherical planets with a launch station, and rocket connections between them."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple

from fotonray.rgb import RGB
from fotonray.transformations import change_basis
from fotonray.vector import (
    DEG_TO_RAD,
    EPSILON,
    Direction,
    Point,
    Vec3,
    cross,
    dot,
    norm,
    normalize,
)


@dataclass
class Planet:
    """A sphere with an axis, a reference city and a station on its surface.

    The station is placed by ``inclination`` and ``azimuth`` in degrees. The
    axis length must be twice the radius given by the reference city.
    """

    center: Point
    axis: Direction
    reference: Point
    inclination: float
    azimuth: float
    reflectance: RGB = field(default_factory=lambda: RGB(255.0, 255.0, 255.0))
    radius: float = field(init=False)
    station_local: Direction = field(init=False)

    def __post_init__(self) -> None:
        self.center = Point(*self.center)
        self.axis = Direction(*self.axis)
        self.reference = Point(*self.reference)
        self.radius = norm(self.reference - self.center)
        if abs(norm(self.axis) - self.radius * 2) > EPSILON:
            raise ValueError(
                f"planet axis ({norm(self.axis):.6f}) is not twice "
                f"the radius ({self.radius:.6f})"
            )
        incl = self.inclination * DEG_TO_RAD
        azim = self.azimuth * DEG_TO_RAD
        self.station_local = Direction(
            self.radius * math.sin(incl) * math.cos(azim),
            self.radius * math.sin(incl) * math.sin(azim),
            self.radius * math.cos(incl),
        )

    def __str__(self) -> str:
        return (
            f"Center: {self.center},\nAxis: {self.axis},\nReference city: "
            f"{self.reference}\nRadius: {self.radius:.9g}"
        )

    def station_ucs(self) -> Point:
        """The station position in global coordinates."""
        return self.center + self.station_local

    def station_basis(self) -> Tuple[Direction, Direction, Direction]:
        """Orthonormal (i, j, k) frame of the station, k being the surface normal."""
        k = normalize(self.station_ucs() - self.center)
        i = normalize(cross(k, self.axis))
        j = normalize(cross(k, i))
        return i, j, k

    def trajectory_to(self, other: Planet) -> Direction:
        """Unit direction from this station to the station of ``other``."""
        return normalize(other.station_ucs() - self.station_ucs())

    def escapes(self, trajectory: Vec3) -> bool:
        """True when a trajectory, in station coordinates, leaves the surface.

        A tangent trajectory counts as an impact.
        """
        return trajectory[2] > 0

    def connects_to(self, other: Planet) -> bool:
        """True when a launch from here leaves this planet and hits ``other``."""
        trajectory = self.trajectory_to(other)
        at_destination = normalize(
            change_basis(trajectory, other.station_basis(), other.station_ucs())
        )
        at_origin = normalize(
            change_basis(trajectory, self.station_basis(), self.station_ucs())
        )
        return not other.escapes(at_destination) and self.escapes(at_origin)


def interplanetary_connection(origin: Planet, destination: Planet) -> bool:
    """True when a launch from ``origin`` reaches ``destination``."""
    return origin.connects_to(destination)


def ray_sphere_intersection(
    origin: Vec3, direction: Vec3, planet: Planet
) -> Optional[Point]:
    """The intersection of the line through ``origin`` along ``direction`` with the planet.

    Of two intersections the one nearer to ``origin`` is returned; ``None``
    when the line misses the sphere.
    """
    p = Point(*origin)
    d = Direction(*direction)
    offset = p - planet.center
    a = d.norm() ** 2
    b = 2 * dot(d, offset)
    c = offset.norm() ** 2 - planet.radius ** 2
    discriminant = b * b - 4 * a * c
    if discriminant > 0:
        root = math.sqrt(discriminant)
        p1 = p + d * ((-b + root) / (2 * a))
        p2 = p + d * ((-b - root) / (2 * a))
        return p1 if norm(p - p1) < norm(p - p2) else p2
    if discriminant == 0:
        return p + d * (-b / (2 * a))
    return None