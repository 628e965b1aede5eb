"""Three-dimensional vectors, also used as points and colours."""

from __future__ import annotations

import math
from typing import Iterator, Sequence

from .util import clamp

Axis = int
"""Type used for coordinate indexes."""

X_AXIS: Axis = 0
Y_AXIS: Axis = 1
Z_AXIS: Axis = 2
AXES: tuple[Axis, ...] = (X_AXIS, Y_AXIS, Z_AXIS)


def _recip(f: float) -> float:
    """IEEE-style reciprocal: zero maps to a signed infinity."""
    if f == 0:
        return math.copysign(math.inf, f)
    return 1.0 / f


def _sqrt(f: float) -> float:
    """Square root that yields NaN for negative or NaN input."""
    return math.sqrt(f) if f >= 0 else math.nan


def _to_u8(f: float) -> int:
    """Saturating float to byte conversion; NaN becomes zero."""
    if math.isnan(f):
        return 0
    return int(min(max(f, 0.0), 255.0))


class Vec3:
    """An immutable 3-component vector of floats."""

    __slots__ = ("_e",)

    def __init__(self, x: float, y: float, z: float) -> None:
        self._e = (float(x), float(y), float(z))

    @classmethod
    def zero(cls) -> Vec3:
        """Return the vector ``[0, 0, 0]``."""
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def one(cls) -> Vec3:
        """Return the vector ``[1, 1, 1]``."""
        return cls(1.0, 1.0, 1.0)

    @classmethod
    def from_array(cls, a: Sequence[float]) -> Vec3:
        """Build a vector from the first three items of ``a``."""
        return cls(a[0], a[1], a[2])

    def x(self) -> float:
        return self._e[0]

    def y(self) -> float:
        return self._e[1]

    def z(self) -> float:
        return self._e[2]

    def length_squared(self) -> float:
        x, y, z = self._e
        return x * x + y * y + z * z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def unit_vector(self) -> Vec3:
        """Return the normalised vector (NaN components for a zero vector)."""
        return self * _recip(self.length())

    def dot(self, v: Vec3) -> float:
        return sum(a * b for a, b in zip(self._e, v._e))

    def cross(self, v: Vec3) -> Vec3:
        ax, ay, az = self._e
        bx, by, bz = v._e
        return Vec3(ay * bz - az * by, az * bx - ax * bz, ax * by - ay * bx)

    def reflect(self, n: Vec3) -> Vec3:
        """Reflect about the unit vector ``n``."""
        return self - 2.0 * self.dot(n) * n

    def refract(self, n: Vec3, etai_over_etat: float) -> Vec3:
        """Refract through a surface with unit normal ``n``.

        ``etai_over_etat`` is the refractive index of the incident medium
        divided by that of the transmitting medium.
        """
        cos_theta = -self.dot(n)
        r_out_parallel = (self + n * cos_theta) * etai_over_etat
        r_out_perp = n * -_sqrt(1.0 - r_out_parallel.length_squared())
        return r_out_parallel + r_out_perp

    def to_colour_from_sample(self, samples_per_pixel: int) -> Vec3:
        """Average an accumulated sample and gamma-correct it to 0..256."""
        r, g, b = (0.0 if math.isnan(c) else c for c in self._e)
        s = 1.0 / samples_per_pixel
        return Vec3(
            256.0 * clamp(_sqrt(s * r), 0.0, 0.999),
            256.0 * clamp(_sqrt(s * g), 0.0, 0.999),
            256.0 * clamp(_sqrt(s * b), 0.0, 0.999),
        )

    def to_rgb(self) -> tuple[int, int, int]:
        """Return the components as saturated bytes."""
        return (_to_u8(self._e[0]), _to_u8(self._e[1]), _to_u8(self._e[2]))

    def to_rgba(self) -> tuple[int, int, int, int]:
        """Return the components as saturated bytes with opaque alpha."""
        return (*self.to_rgb(), 255)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(a + b for a, b in zip(self._e, other._e)))

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(*(a - b for a, b in zip(self._e, other._e)))

    def __mul__(self, other: Vec3 | float) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(*(a * b for a, b in zip(self._e, other._e)))
        if isinstance(other, (int, float)):
            return Vec3(*(a * other for a in self._e))
        return NotImplemented

    def __rmul__(self, other: float) -> Vec3:
        if isinstance(other, (int, float)):
            return self * other
        return NotImplemented

    def __truediv__(self, f: float) -> Vec3:
        if not isinstance(f, (int, float)):
            return NotImplemented
        return self * _recip(f)

    def __neg__(self) -> Vec3:
        return self * -1.0

    def __getitem__(self, i: int) -> float:
        if not 0 <= i < 3:
            raise IndexError(f"vector index out of range: {i}")
        return self._e[i]

    def __iter__(self) -> Iterator[float]:
        return iter(self._e)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec3):
            return NotImplemented
        return self._e == other._e

    def __hash__(self) -> int:
        return hash(self._e)

    def __repr__(self) -> str:
        return f"Vec3({self._e[0]!r}, {self._e[1]!r}, {self._e[2]!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(repr(c) for c in self._e) + "]"


Colour = Vec3
Point3 = Vec3