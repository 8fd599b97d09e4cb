"""Affine transformations and changes of basis in homogeneous coordinates."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, TypeVar

from fotonray.vector import DEG_TO_RAD, Vec3

Row = Tuple[float, float, float, float]
Matrix4 = Tuple[Row, Row, Row, Row]

V = TypeVar("V", bound=Vec3)


def _apply(matrix: Matrix4, v: V) -> V:
    h = v.homogeneous()
    result = [sum(a * b for a, b in zip(row, h)) for row in matrix]
    return type(v)(result[0], result[1], result[2])


def _inverse(matrix: Matrix4) -> Matrix4:
    size = len(matrix)
    aug = [list(row) + [1.0 if c == r else 0.0 for c in range(size)] for r, row in enumerate(matrix)]
    for col in range(size):
        pivot = max(range(col, size), key=lambda r: abs(aug[r][col]))
        if abs(aug[pivot][col]) < 1e-12:
            raise ValueError("matrix is singular and cannot be inverted")
        aug[col], aug[pivot] = aug[pivot], aug[col]
        lead = aug[col][col]
        aug[col] = [value / lead for value in aug[col]]
        for r in range(size):
            if r != col and aug[r][col] != 0.0:
                factor = aug[r][col]
                aug[r] = [a - factor * b for a, b in zip(aug[r], aug[col])]
    return tuple(tuple(row[size:]) for row in aug)  # type: ignore[return-value]


def translate(v: V, x: float, y: float, z: float) -> V:
    """Translate by (x, y, z); directions are left unchanged."""
    m: Matrix4 = (
        (1.0, 0.0, 0.0, x),
        (0.0, 1.0, 0.0, y),
        (0.0, 0.0, 1.0, z),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _apply(m, v)


def scale(v: V, x: float, y: float, z: float) -> V:
    """Scale each coordinate by the matching factor."""
    m: Matrix4 = (
        (x, 0.0, 0.0, 0.0),
        (0.0, y, 0.0, 0.0),
        (0.0, 0.0, z, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _apply(m, v)


def _cos_sin(degrees: float) -> Tuple[float, float]:
    rad = degrees * DEG_TO_RAD
    return math.cos(rad), math.sin(rad)


def rotate_x(v: V, degrees: float) -> V:
    """Rotate about the X axis by ``degrees``."""
    c, s = _cos_sin(degrees)
    m: Matrix4 = (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, -s, 0.0),
        (0.0, s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _apply(m, v)


def rotate_y(v: V, degrees: float) -> V:
    """Rotate about the Y axis by ``degrees``."""
    c, s = _cos_sin(degrees)
    m: Matrix4 = (
        (c, 0.0, s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _apply(m, v)


def rotate_z(v: V, degrees: float) -> V:
    """Rotate about the Z axis by ``degrees``."""
    c, s = _cos_sin(degrees)
    m: Matrix4 = (
        (c, -s, 0.0, 0.0),
        (s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )
    return _apply(m, v)


def change_basis(v: V, basis: Sequence[Vec3], origin: Vec3, invert: bool = True) -> V:
    """Express ``v`` in another frame.

    ``basis`` holds the three axis vectors of the local frame and ``origin``
    its origin, both in global coordinates. With ``invert`` true, a global
    ``v`` is mapped into the local frame; otherwise a local ``v`` is mapped
    to global coordinates.
    """
    i, j, k = basis
    m: Matrix4 = (
        (i[0], j[0], k[0], origin[0]),
        (i[1], j[1], k[1], origin[1]),
        (i[2], j[2], k[2], origin[2]),
        (0.0, 0.0, 0.0, 1.0),
    )
    if invert:
        m = _inverse(m)
    return _apply(m, v)