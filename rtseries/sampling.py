"""Random sampling helpers backed by a per-thread generator."""

from __future__ import annotations

import math
import random
import threading
from typing import MutableSequence

from .util import TWO_PI
from .vector import Vec3

_local = threading.local()


def _rng() -> random.Random:
    """Return this thread's generator, creating it from entropy on first use."""
    rng = getattr(_local, "rng", None)
    if rng is None:
        rng = random.Random()
        _local.rng = rng
    return rng


def _uniform(rng: random.Random, lower: float, upper: float) -> float:
    if not lower < upper:
        raise ValueError(f"empty sample range [{lower}, {upper})")
    return lower + (upper - lower) * rng.random()


def seed(s: int) -> None:
    """Reseed the current thread's generator with ``s``."""
    _local.rng = random.Random(s)


def sample() -> float:
    """Return a random float in ``[0, 1)``."""
    return _rng().random()


def samples(n: int) -> list[float]:
    """Return ``n`` random floats in ``[0, 1)``."""
    rng = _rng()
    return [rng.random() for _ in range(n)]


def _sample_range(rng: random.Random, lower, upper):
    if (
        isinstance(lower, int)
        and isinstance(upper, int)
        and not isinstance(lower, bool)
        and not isinstance(upper, bool)
    ):
        if not lower < upper:
            raise ValueError(f"empty sample range [{lower}, {upper})")
        return rng.randrange(lower, upper)
    return _uniform(rng, lower, upper)


def sample_in_range(lower, upper):
    """Return a random value in ``[lower, upper)``; integers when both bounds are."""
    return _sample_range(_rng(), lower, upper)


def samples_in_range(n: int, lower, upper) -> list:
    """Return ``n`` random values in ``[lower, upper)``."""
    rng = _rng()
    return [_sample_range(rng, lower, upper) for _ in range(n)]


def vec3() -> Vec3:
    """Return a vector with components in ``[0, 1)``."""
    rng = _rng()
    return Vec3(rng.random(), rng.random(), rng.random())


def vec3_in_range(lower: float, upper: float) -> Vec3:
    """Return a vector with components in ``[lower, upper)``."""
    rng = _rng()
    return Vec3(
        _uniform(rng, lower, upper),
        _uniform(rng, lower, upper),
        _uniform(rng, lower, upper),
    )


def vec3_in_unit_sphere() -> Vec3:
    """Return a random, non-normalised vector strictly inside the unit sphere."""
    rng = _rng()
    while True:
        p = Vec3(
            _uniform(rng, -1.0, 1.0),
            _uniform(rng, -1.0, 1.0),
            _uniform(rng, -1.0, 1.0),
        )
        if p.length_squared() < 1.0:
            return p


def unit_vec3() -> Vec3:
    """Return a random unit vector uniformly distributed on the sphere."""
    rng = _rng()
    a = _uniform(rng, 0.0, TWO_PI)
    z = _uniform(rng, -1.0, 1.0)
    r = math.sqrt(1.0 - z * z)
    return Vec3(r * math.cos(a), r * math.sin(a), z)


def vec3_in_hemisphere(normal: Vec3) -> Vec3:
    """Return a random vector in the unit sphere on the side of ``normal``."""
    in_unit_sphere = vec3_in_unit_sphere()
    if in_unit_sphere.dot(normal) > 0.0:
        return in_unit_sphere
    return -in_unit_sphere


def vec3_in_unit_disk() -> Vec3:
    """Return a random point inside the unit disk in the xy-plane."""
    rng = _rng()
    while True:
        p = Vec3(_uniform(rng, -1.0, 1.0), _uniform(rng, -1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def permute(v: MutableSequence) -> None:
    """Shuffle ``v`` in place into a single random cycle."""
    rng = _rng()
    for i in range(len(v) - 1, 0, -1):
        target = rng.randrange(0, i)
        v[i], v[target] = v[target], v[i]


def cosine_direction() -> Vec3:
    """Return a random unit vector with density ``cos(theta) / pi`` about +z."""
    rng = _rng()
    r1 = rng.random()
    r2 = rng.random()
    z = math.sqrt(1.0 - r2)
    phi = TWO_PI * r1
    r2_sqrt = math.sqrt(r2)
    return Vec3(math.cos(phi) * r2_sqrt, math.sin(phi) * r2_sqrt, z)


def vec3_to_sphere(radius: float, distance_squared: float) -> Vec3:
    """Return a direction uniformly sampled over the solid angle of a sphere.

    The sphere has ``radius`` and its centre lies along +z at a squared
    distance of ``distance_squared``.
    """
    rng = _rng()
    r1 = rng.random()
    r2 = rng.random()
    ratio = radius * radius / distance_squared
    z = 1.0 + r2 * (math.sqrt(1.0 - ratio) - 1.0)
    phi = TWO_PI * r1
    s = math.sqrt(1.0 - z * z)
    return Vec3(math.cos(phi) * s, math.sin(phi) * s, z)