"""Probability density functions used for importance sampling."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from . import sampling
from .onb import ONB
from .util import PI
from .vector import Point3, Vec3


class Hittable(Protocol):
    """The part of a scene object that a :class:`HittablePDF` samples."""

    def pdf_value(self, origin: Point3, direction: Vec3) -> float: ...

    def random(self, origin: Point3) -> Vec3: ...


class PDF(ABC):
    """A probability density over directions."""

    @abstractmethod
    def value(self, direction: Vec3) -> float:
        """Return the density for ``direction``."""

    @abstractmethod
    def generate(self) -> Vec3:
        """Return a random direction drawn from this density."""


class CosinePDF(PDF):
    """Cosine-weighted density about a surface normal."""

    def __init__(self, n: Vec3) -> None:
        self.uvw = ONB(n)

    def value(self, direction: Vec3) -> float:
        cosine = direction.unit_vector().dot(self.uvw.w())
        return 0.0 if cosine <= 0.0 else cosine / PI

    def generate(self) -> Vec3:
        return self.uvw.local_from_vec3(sampling.cosine_direction())

    def __repr__(self) -> str:
        return f"CosinePDF(uvw={self.uvw!r})"


class HittablePDF(PDF):
    """Density of directions from ``origin`` towards an object such as a light."""

    def __init__(self, obj: Hittable, origin: Point3) -> None:
        self.object = obj
        self.origin = origin

    def value(self, direction: Vec3) -> float:
        return self.object.pdf_value(self.origin, direction)

    def generate(self) -> Vec3:
        return self.object.random(self.origin)

    def __repr__(self) -> str:
        return f"HittablePDF(object={self.object!r}, origin={self.origin!r})"


class MixturePDF(PDF):
    """Equal-weight mixture of two densities."""

    def __init__(self, p0: PDF, p1: PDF) -> None:
        self.p = (p0, p1)

    def value(self, direction: Vec3) -> float:
        return 0.5 * self.p[0].value(direction) + 0.5 * self.p[1].value(direction)

    def generate(self) -> Vec3:
        if sampling.sample() < 0.5:
            return self.p[0].generate()
        return self.p[1].generate()

    def __repr__(self) -> str:
        return f"MixturePDF(p={self.p!r})"