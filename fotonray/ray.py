"""Rays: a direction leaving from an origin point."""

from __future__ import annotations

from dataclasses import dataclass, field

from fotonray.transformations import change_basis
from fotonray.vector import Direction, Point, Vec3, norm, normalize


@dataclass(frozen=True)
class Ray:
    """A half-line starting at ``origin`` and heading along ``direction``."""

    direction: Direction = field(default_factory=Direction)
    origin: Point = field(default_factory=Point)

    def __str__(self) -> str:
        return f"Ray - direction: {self.direction}, origin: {self.origin}"


def globalize_and_normalize(
    ray: Ray, origin: Vec3, forward: Vec3, up: Vec3, left: Vec3
) -> Ray:
    """Map a camera-local ray into global coordinates with a unit direction.

    The frame's axes are the absolute values of the normalised ``forward``,
    ``up`` and ``left`` vectors, with its origin at ``origin``.
    """
    axes = [abs(Direction(*axis) / norm(axis)) for axis in (forward, up, left)]
    frame_origin = Point(*origin)
    direction = change_basis(normalize(ray.direction), axes, frame_origin, invert=False)
    start = change_basis(Point(*ray.origin), axes, frame_origin, invert=False)
    return Ray(normalize(direction), start)