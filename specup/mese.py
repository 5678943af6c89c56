"""Fourier moments and bounded maximum entropy spectral estimates."""

from __future__ import annotations

import cmath
import math
from typing import Sequence

_INV_PI = 1.0 / math.pi
_INV_TWO_PI = 1.0 / (2.0 * math.pi)


def to_phase(wl: float, start: float, end: float) -> float:
    """Map a wavelength in ``[start, end]`` to a phase in ``[-pi, 0]``."""
    return math.pi * (wl - start) / (end - start) - math.pi


def _moments(phases: Sequence[float], values: Sequence[float], n: int) -> list[complex]:
    if len(phases) != len(values):
        raise ValueError("phases and values must have the same length")
    count = len(phases)
    return [
        sum(v * cmath.exp(-1j * k * p) for p, v in zip(phases, values)) / count
        for k in range(n)
    ]


def fourier_moments_of(
    phases: Sequence[float], values: Sequence[float], n: int
) -> list[complex]:
    """First ``n`` complex trigonometric moments of the sampled signal."""
    return _moments(phases, values, n)


def real_fourier_moments_of(
    phases: Sequence[float], values: Sequence[float], n: int
) -> list[float]:
    """Real parts of the first ``n`` trigonometric moments."""
    return [m.real for m in _moments(phases, values, n)]


def bounded_mese_l(phase: float, lagrange_m: Sequence[complex]) -> float:
    """Bounded MESE value at ``phase`` from its Lagrange multipliers; lies in (0, 1)."""
    total = complex(lagrange_m[0]).real
    for k, lam in enumerate(lagrange_m[1:], start=1):
        total += 2.0 * (lam * cmath.exp(-1j * k * phase)).real
    return _INV_PI * math.atan(total) + 0.5


def mese_precomp(phase: float, q: Sequence[float]) -> float:
    """MESE value at ``phase`` from precomputed coefficients ``q``."""
    t = sum(_INV_TWO_PI * qk * cmath.exp(-1j * k * phase) for k, qk in enumerate(q))
    div = abs(t) ** 2
    return (_INV_TWO_PI * q[0]) / div