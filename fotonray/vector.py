"""Three-component points and directions, with the usual vector algebra."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterator, Tuple

EPSILON = 1e-6
EPSILON_INTERSECTION = 1e-6
EPSILON_PLANE_MEMBERSHIP = 5e-5
EPSILON_PLANE_INTERSECTION = 1e-4
EPSILON_SPHERE_MEMBERSHIP = 5e-6
EPSILON_SPHERE_INTERSECTION = 8e-5
EPSILON_PHOTON = 1e-7
DEG_TO_RAD = 3.1415926535898 / 180
AREA_LIGHT_SAMPLES = 50


@dataclass(frozen=True)
class Vec3:
    """An immutable triple of coordinates x, y, z."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    _W: ClassVar[float] = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __len__(self) -> int:
        return 3

    def __str__(self) -> str:
        return "[" + ", ".join(f"{c:.9g}" for c in self) + "]"

    def dot(self, other: Vec3) -> float:
        """Scalar product with another triple."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.dot(self))

    def homogeneous(self) -> Tuple[float, float, float, float]:
        """Homogeneous coordinates (x, y, z, w)."""
        return (self.x, self.y, self.z, self._W)


class Point(Vec3):
    """A position in space."""

    _W: ClassVar[float] = 1.0

    def homogeneous(self) -> Tuple[float, float, float, float]:
        """Homogeneous coordinates with w = 1."""
        return (self.x, self.y, self.z, 1.0)

    def midpoint(self, other: Point) -> Point:
        """The point halfway between this point and ``other``."""
        return Point((self.x + other.x) / 2, (self.y + other.y) / 2, (self.z + other.z) / 2)

    def __add__(self, other: object) -> Point:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y, self.z + other.z)

    __radd__ = __add__

    def __sub__(self, other: object):
        if isinstance(other, Point):
            return Direction(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vec3):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, scalar: float) -> Point:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Point(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Point:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("division by zero is not allowed")
        return Point(self.x / scalar, self.y / scalar, self.z / scalar)


class Direction(Vec3):
    """A free vector: a direction with magnitude."""

    _W: ClassVar[float] = 0.0

    def homogeneous(self) -> Tuple[float, float, float, float]:
        """Homogeneous coordinates with w = 0."""
        return (self.x, self.y, self.z, 0.0)

    def cross(self, other: Vec3) -> Direction:
        """Vector product with another triple."""
        return Direction(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalized(self) -> Direction:
        """Unit-length direction pointing the same way."""
        length = self.norm()
        if length == 0:
            raise ValueError("cannot normalize a zero-length direction")
        return Direction(self.x / length, self.y / length, self.z / length)

    def __add__(self, other: object):
        if isinstance(other, Point):
            return other + self
        if not isinstance(other, Vec3):
            return NotImplemented
        return Direction(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: object) -> Direction:
        if not isinstance(other, Vec3) or isinstance(other, Point):
            return NotImplemented
        return Direction(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Direction:
        return Direction(-self.x, -self.y, -self.z)

    def __abs__(self) -> Direction:
        return Direction(abs(self.x), abs(self.y), abs(self.z))

    def __mul__(self, scalar: float) -> Direction:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Direction(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Direction:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("division by zero is not allowed")
        return Direction(self.x / scalar, self.y / scalar, self.z / scalar)


def dot(a: Vec3, b: Vec3) -> float:
    """Scalar product of two triples."""
    return a.dot(b)


def norm(v: Vec3) -> float:
    """Euclidean length of a triple."""
    return v.norm()


def cross(a: Vec3, b: Vec3) -> Direction:
    """Vector product of two triples."""
    return Direction(*a).cross(b)


def normalize(v: Vec3) -> Direction:
    """Unit direction along ``v``."""
    return Direction(*v).normalized()


def orthonormal_basis(normal: Vec3) -> Tuple[Direction, Direction]:
    """Two unit directions that, with ``normal``, form an orthonormal basis."""
    n = normalize(normal)
    helper = Direction(1.0, 0.0, 0.0) if abs(n.x) < 0.9 else Direction(0.0, 1.0, 0.0)
    tangent = helper.cross(n).normalized()
    bitangent = n.cross(tangent).normalized()
    return tangent, bitangent