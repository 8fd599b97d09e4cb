"""Image textures loaded from binary PPM files."""

from __future__ import annotations

from dataclasses import dataclass
from os import PathLike
from typing import Iterator, List, Tuple, Union

from fotonray.rgb import RGB


def _read_tokens(raw: bytes, count: int) -> Tuple[List[bytes], int]:
    """Read ``count`` whitespace-separated tokens; return them and the end offset."""
    tokens: List[bytes] = []
    pos = 0
    size = len(raw)
    while len(tokens) < count:
        while pos < size and raw[pos : pos + 1].isspace():
            pos += 1
        start = pos
        while pos < size and not raw[pos : pos + 1].isspace():
            pos += 1
        if start == pos:
            raise ValueError("truncated PPM header")
        tokens.append(raw[start:pos])
    return tokens, pos


@dataclass(frozen=True)
class Texture:
    """An RGB image with 8-bit samples and a maximum sample value."""

    width: int = 0
    height: int = 0
    max_value: float = 255.0
    data: bytes = b""

    @classmethod
    def from_ppm(cls, path: Union[str, PathLike]) -> Texture:
        """Load a binary (P6) PPM image."""
        with open(path, "rb") as handle:
            raw = handle.read()
        (magic,), _ = _read_tokens(raw, 1)
        if magic != b"P6":
            raise ValueError(f'PPM format of "{path}" not supported (P6 expected)')
        tokens, pos = _read_tokens(raw, 4)
        try:
            width, height, max_value = (int(t) for t in tokens[1:])
        except ValueError as exc:
            raise ValueError(f'malformed PPM header in "{path}"') from exc
        pos += 1  # the single whitespace byte after the header
        length = width * height * 3
        data = raw[pos : pos + length]
        if len(data) < length:
            raise ValueError(f'could not read the image data of "{path}"')
        return cls(width, height, float(max_value), data)

    def sample(self, u: float, v: float) -> RGB:
        """Colour at texture coordinates (u, v), in [0, 1], wrapping around the edges."""
        if self.width == 0 or self.height == 0:
            raise ValueError("cannot sample an empty texture")
        x = int(u * self.width) % self.width
        y = int(v * self.height) % self.height
        index = (y * self.width + x) * 3
        r, g, b = self.data[index : index + 3]
        return RGB(r / self.max_value, g / self.max_value, b / self.max_value)

    def pixels(self) -> Iterator[Tuple[int, int, int]]:
        """The raw (r, g, b) samples in row-major order."""
        for i in range(0, len(self.data) - 2, 3):
            yield self.data[i], self.data[i + 1], self.data[i + 2]