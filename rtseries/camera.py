"""Thin-lens camera with defocus blur and a shutter interval."""

from __future__ import annotations

import math

from . import sampling
from .ray import Ray
from .vector import Point3, Vec3


class Camera:
    """Generates primary rays through an image plane."""

    def __init__(
        self,
        lookfrom: Point3,
        lookat: Point3,
        vup: Vec3,
        vfov: float,
        aspect_ratio: float,
        aperture: float,
        focus_dist: float,
        time0: float,
        time1: float,
    ) -> None:
        theta = math.radians(vfov)
        half_height = math.tan(theta / 2.0)
        half_width = aspect_ratio * half_height

        w = (lookfrom - lookat).unit_vector()
        u = vup.cross(w).unit_vector()
        v = w.cross(u)

        self.origin = lookfrom
        self.lower_left_corner = (
            lookfrom
            - u * (half_width * focus_dist)
            - v * (half_height * focus_dist)
            - w * focus_dist
        )
        self.horizontal = u * (2.0 * half_width * focus_dist)
        self.vertical = v * (2.0 * half_height * focus_dist)
        self.lens_radius = aperture / 2.0
        self.u = u
        self.v = v
        self.w = w
        self.time0 = time0
        self.time1 = time1

    def get_ray(self, s: float, t: float) -> Ray:
        """Return a ray through image-plane coordinates ``(s, t)`` at a random shutter time."""
        rd = sampling.vec3_in_unit_disk() * self.lens_radius
        offset = self.u * rd.x() + self.v * rd.y()
        time = sampling.sample_in_range(self.time0, self.time1)
        return Ray(
            self.origin + offset,
            self.lower_left_corner
            + self.horizontal * s
            + self.vertical * t
            - self.origin
            - offset,
            time,
        )

    def __str__(self) -> str:
        return (
            f"camera(lower_left_corner: {self.lower_left_corner}, "
            f"horizontal: {self.horizontal}, vertical: {self.vertical}, "
            f"origin: {self.origin}, lens_radius: {self.lens_radius}, "
            f"u: {self.u}, v: {self.v}, w: {self.w}, "
            f"time0: {self.time0}, time1: {self.time1})"
        )

    def __repr__(self) -> str:
        return (
            f"Camera(lower_left_corner={self.lower_left_corner!r}, "
            f"horizontal={self.horizontal!r}, vertical={self.vertical!r}, "
            f"origin={self.origin!r}, lens_radius={self.lens_radius!r}, "
            f"u={self.u!r}, v={self.v!r}, w={self.w!r}, "
            f"time0={self.time0!r}, time1={self.time1!r})"
        )