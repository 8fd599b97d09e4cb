"""Red, green and blue triples used for colours, fluxes and coefficients."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Union

Number = Union[int, float]


@dataclass(frozen=True)
class RGB:
    """An immutable colour triple (r, g, b)."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", float(self.r))
        object.__setattr__(self, "g", float(self.g))
        object.__setattr__(self, "b", float(self.b))

    @classmethod
    def from_sequence(cls, values: Iterable[Number]) -> RGB:
        """Build a colour from exactly three values."""
        items = list(values)
        if len(items) != 3:
            raise ValueError("an RGB triple needs exactly 3 values")
        return cls(*items)

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

    def __getitem__(self, index: int) -> float:
        return (self.r, self.g, self.b)[index]

    def __len__(self) -> int:
        return 3

    def __str__(self) -> str:
        return f"[r={self.r:.9g}, g={self.g:.9g}, b={self.b:.9g}]"

    def __add__(self, other: object) -> RGB:
        if not isinstance(other, RGB):
            return NotImplemented
        return RGB(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: object) -> RGB:
        if not isinstance(other, RGB):
            return NotImplemented
        return RGB(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: object) -> RGB:
        if isinstance(other, RGB):
            return RGB(self.r * other.r, self.g * other.g, self.b * other.b)
        if isinstance(other, (int, float)):
            return RGB(self.r * other, self.g * other, self.b * other)
        return NotImplemented

    def __rmul__(self, other: object) -> RGB:
        if isinstance(other, (int, float)):
            return RGB(other * self.r, other * self.g, other * self.b)
        return NotImplemented

    def __truediv__(self, scalar: object) -> RGB:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        if scalar == 0:
            raise ValueError("division by zero is not allowed")
        return RGB(self.r / scalar, self.g / scalar, self.b / scalar)

    def norm(self) -> float:
        """Euclidean length of the triple."""
        return math.sqrt(self.r * self.r + self.g * self.g + self.b * self.b)

    def max(self) -> float:
        """The largest of the three components."""
        return max(self.r, self.g, self.b)

    def is_zero(self) -> bool:
        """True when every component is exactly zero."""
        return self.r == 0.0 and self.g == 0.0 and self.b == 0.0