"""Small vector and matrix types plus scalar helpers used by the converters."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Sequence, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Vec3:
    """Immutable three component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __len__(self) -> int:
        return 3

    def _combine(self, other, op) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(op(self.x, other.x), op(self.y, other.y), op(self.z, other.z))
        if isinstance(other, (int, float)):
            return Vec3(op(self.x, other), op(self.y, other), op(self.z, other))
        return NotImplemented

    def __add__(self, other) -> Vec3:
        return self._combine(other, lambda a, b: a + b)

    __radd__ = __add__

    def __sub__(self, other) -> Vec3:
        return self._combine(other, lambda a, b: a - b)

    def __rsub__(self, other) -> Vec3:
        return self._combine(other, lambda a, b: b - a)

    def __mul__(self, other) -> Vec3:
        return self._combine(other, lambda a, b: a * b)

    __rmul__ = __mul__

    def __truediv__(self, other) -> Vec3:
        return self._combine(other, lambda a, b: a / b)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __matmul__(self, other: Mat3) -> Vec3:
        if not isinstance(other, Mat3):
            return NotImplemented
        e = other.values
        return Vec3(
            self.x * e[0] + self.y * e[3] + self.z * e[6],
            self.x * e[1] + self.y * e[4] + self.z * e[7],
            self.x * e[2] + self.y * e[5] + self.z * e[8],
        )

    def max(self) -> float:
        """Largest component."""
        return max(self.x, self.y, self.z)

    def sum(self) -> float:
        """Sum of the components."""
        return self.x + self.y + self.z

    @staticmethod
    def distance2(a: Vec3, b: Vec3) -> float:
        """Squared Euclidean distance between two vectors."""
        return sum((p - q) ** 2 for p, q in zip(a, b))

    @staticmethod
    def distance(a: Vec3, b: Vec3) -> float:
        """Euclidean distance between two vectors."""
        return math.sqrt(Vec3.distance2(a, b))


class Mat3:
    """Immutable 3x3 matrix stored row by row."""

    __slots__ = ("values",)

    def __init__(self, *values: Number) -> None:
        if len(values) != 9:
            raise ValueError(f"Mat3 needs 9 values, got {len(values)}")
        self.values: tuple[float, ...] = tuple(float(v) for v in values)

    @classmethod
    def identity(cls) -> Mat3:
        return cls(1, 0, 0, 0, 1, 0, 0, 0, 1)

    def __getitem__(self, index: tuple[int, int]) -> float:
        row, col = index
        if not (0 <= row < 3 and 0 <= col < 3):
            raise IndexError("matrix index out of range")
        return self.values[row * 3 + col]

    def __eq__(self, other) -> bool:
        return isinstance(other, Mat3) and self.values == other.values

    def __hash__(self) -> int:
        return hash(self.values)

    def __repr__(self) -> str:
        return f"Mat3{self.values}"

    def __neg__(self) -> Mat3:
        return Mat3(*(-v for v in self.values))

    def __add__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(a + b for a, b in zip(self.values, other.values)))

    def __sub__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3(*(a - b for a, b in zip(self.values, other.values)))

    def __mul__(self, factor: Number) -> Mat3:
        if not isinstance(factor, (int, float)):
            return NotImplemented
        return Mat3(*(v * factor for v in self.values))

    __rmul__ = __mul__

    def __truediv__(self, divisor: Number) -> Mat3:
        if not isinstance(divisor, (int, float)):
            return NotImplemented
        inv = 1.0 / divisor
        return Mat3(*(v * inv for v in self.values))

    def __matmul__(self, v: Vec3) -> Vec3:
        if not isinstance(v, Vec3):
            return NotImplemented
        e = self.values
        return Vec3(
            e[0] * v.x + e[1] * v.y + e[2] * v.z,
            e[3] * v.x + e[4] * v.y + e[5] * v.z,
            e[6] * v.x + e[7] * v.y + e[8] * v.z,
        )

    def transposed(self) -> Mat3:
        e = self.values
        return Mat3(e[0], e[3], e[6], e[1], e[4], e[7], e[2], e[5], e[8])


def clamp(x: float, a: float, b: float) -> float:
    """Limit ``x`` to the range ``[a, b]``."""
    return a if x < a else (b if x > b else x)


def clamp_vec(v: Vec3, a: float, b: float) -> Vec3:
    """Clamp every component of ``v`` to ``[a, b]``."""
    return Vec3(clamp(v.x, a, b), clamp(v.y, a, b), clamp(v.z, a, b))


def _sigmoid(x: float) -> float:
    return 0.5 * x / math.sqrt(x * x + 1.0) + 0.5


def sigmoid_polynomial(x: float, coef: Sequence[float]) -> float:
    """Sigmoid of the quadratic ``coef[0]*x^2 + coef[1]*x + coef[2]``."""
    c0, c1, c2 = coef[0], coef[1], coef[2]
    return _sigmoid((c0 * x + c1) * x + c2)


def smoothstep(x: float) -> float:
    """Cubic Hermite step on ``[0, 1]``; input is clamped first."""
    x = clamp(x, 0.0, 1.0)
    x2 = x * x
    return 3.0 * x2 - 2.0 * x2 * x


def inv_smoothstep(x: float) -> float:
    """Inverse of :func:`smoothstep` on ``[0, 1]``."""
    return 0.5 - math.sin(math.asin(1.0 - 2.0 * x) / 3.0)


def determinant(m: Mat3) -> float:
    """Determinant of a 3x3 matrix."""
    e11, e12, e13, e21, e22, e23, e31, e32, e33 = m.values
    return (
        e11 * e22 * e33
        + e21 * e13 * e32
        + e12 * e23 * e31
        - e13 * e22 * e31
        - e11 * e23 * e32
        - e12 * e21 * e33
    )


def inverse(m: Mat3) -> Mat3:
    """Adjoint of ``m`` divided by its determinant."""
    det = determinant(m)
    e11, e12, e13, e21, e22, e23, e31, e32, e33 = m.values
    adjoint = Mat3(
        e22 + e33 - e23 * e32, e13 * e32 - e12 * e33, e12 * e23 - e13 * e22,
        e23 * e31 - e21 * e33, e11 * e33 - e13 * e31, e13 * e21 - e11 * e23,
        e21 * e32 - e22 * e31, e12 * e31 - e11 * e32, e11 * e22 - e12 * e21,
    )
    return adjoint / det