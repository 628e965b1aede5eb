"""Rays with an origin, a direction and a time."""

from __future__ import annotations

from dataclasses import dataclass

from .vector import Point3, Vec3


@dataclass(frozen=True)
class Ray:
    """A ray starting at ``origin`` heading along ``direction`` at ``time``."""

    origin: Point3
    direction: Vec3
    time: float

    def at(self, t: float) -> Point3:
        """Return the point at parameter ``t`` along the ray."""
        return self.origin + self.direction * t

    def __str__(self) -> str:
        return f"o: {self.origin}, d: {self.direction}, t: {self.time}"