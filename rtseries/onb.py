"""Orthonormal basis built around a surface normal."""

from __future__ import annotations

from .vector import Vec3


class ONB:
    """Three mutually orthogonal unit vectors with ``w`` along a given normal."""

    __slots__ = ("axis",)

    def __init__(self, n: Vec3) -> None:
        w = n.unit_vector()
        a = Vec3(0.0, 1.0, 0.0) if abs(w.x()) > 0.9 else Vec3(1.0, 0.0, 0.0)
        v = w.cross(a).unit_vector()
        u = w.cross(v)
        self.axis: tuple[Vec3, Vec3, Vec3] = (u, v, w)

    def u(self) -> Vec3:
        return self.axis[0]

    def v(self) -> Vec3:
        return self.axis[1]

    def w(self) -> Vec3:
        return self.axis[2]

    def local(self, a: float, b: float, c: float) -> Vec3:
        """Express coordinates ``(a, b, c)`` in this basis."""
        return a * self.u() + b * self.v() + c * self.w()

    def local_from_vec3(self, a: Vec3) -> Vec3:
        """Express the components of ``a`` in this basis."""
        return self.local(a.x(), a.y(), a.z())

    def __getitem__(self, i: int) -> Vec3:
        if not 0 <= i < 3:
            raise IndexError(f"basis index out of range: {i}")
        return self.axis[i]

    def __repr__(self) -> str:
        return f"ONB(axis={self.axis!r})"

    def __str__(self) -> str:
        return "[" + ", ".join(str(a) for a in self.axis) + "]"