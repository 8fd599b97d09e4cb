"""Tone-mapping operators that bring radiance values into the [0, 1] range."""

from __future__ import annotations

import math
from typing import Iterable, List

GAMMA = 2.2


def clamp_and_equalize(values: Iterable[float], threshold: float) -> List[float]:
    """Divide values up to ``threshold`` by it; values above it become 1."""
    return [v / threshold if v <= threshold else 1.0 for v in values]


def clamp(values: Iterable[float]) -> List[float]:
    """Clamp values above 1 to 1, leaving the rest as they are."""
    return clamp_and_equalize(values, 1.0)


def equalize(values: Iterable[float], max_value: float) -> List[float]:
    """Normalise values by ``max_value``."""
    return clamp_and_equalize(values, max_value)


def _gamma_curve(ratio: float) -> float:
    if ratio < 0:
        return math.nan
    return ratio ** (1.0 / GAMMA)


def gamma_and_clamp(values: Iterable[float], threshold: float) -> List[float]:
    """Normalise by ``threshold`` and apply gamma; values above it become 1."""
    return [_gamma_curve(v / threshold) if v <= threshold else 1.0 for v in values]


def gamma(values: Iterable[float], max_value: float) -> List[float]:
    """Normalise by ``max_value`` and apply gamma correction."""
    return gamma_and_clamp(values, max_value)


def reinhard(values: Iterable[float], lmax: float) -> List[float]:
    """Equalise by ``lmax / 2.5`` and apply the extended Reinhard curve."""
    lmax_sq = lmax ** 2
    return [(c * (1 + c / lmax_sq)) / (1 + c) for c in equalize(values, lmax / 2.5)]