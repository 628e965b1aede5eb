"""Colours for rays that hit nothing in the scene."""

from __future__ import annotations

from typing import Callable

from .ray import Ray
from .vector import Colour

BackgroundFn = Callable[[Ray], Colour]
"""A function mapping a ray to its background colour."""


def black_background(ray: Ray) -> Colour:
    """Return black; suited to scenes lit by emissive objects."""
    return Colour.zero()


def gradient_background(ray: Ray) -> Colour:
    """Return a white-to-blue vertical sky gradient."""
    unit_direction = ray.direction.unit_vector()
    t = 0.5 * (unit_direction.y() + 1.0)
    return (1.0 - t) * Colour(1.0, 1.0, 1.0) + t * Colour(0.5, 0.7, 1.0)