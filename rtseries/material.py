"""Surface materials that scatter, absorb or emit light."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Protocol

from . import sampling
from .pdf import PDF, CosinePDF
from .ray import Ray
from .util import PI
from .vector import Colour, Point3, Vec3


class HitRecord(Protocol):
    """What a material needs to know about a ray-surface intersection."""

    point: Point3
    normal: Vec3
    u: float
    v: float
    front_face: bool


class Texture(Protocol):
    """A colour source evaluated at surface coordinates and a point."""

    def value(self, u: float, v: float, p: Point3) -> Colour: ...


@dataclass
class ScatterRecord:
    """The outcome of scattering a ray off a surface."""

    attenuation: Colour
    specular_ray: Optional[Ray] = None
    scattered_ray: Optional[Ray] = None
    pdf: Optional[PDF] = None


class Material:
    """Base material: absorbs every ray and emits nothing."""

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        """Scatter ``ray_in``; ``None`` means the ray is absorbed."""
        return None

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        """Return the scattering density for ``scattered``."""
        return 0.0

    def emission(self, ray_in: Ray, rec: HitRecord) -> Colour:
        """Return the emitted colour; black by default."""
        return Colour.zero()


def _sqrt(f: float) -> float:
    return math.sqrt(f) if f >= 0 else math.nan


def schlick(cosine: float, ref_idx: float) -> float:
    """Schlick's approximation of the Fresnel reflectance."""
    r0 = (1.0 - ref_idx) / (1.0 + ref_idx)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5.0


class Dielectric(Material):
    """A clear material that reflects and refracts, such as glass."""

    def __init__(self, ri: float) -> None:
        self.ref_idx = ri
        self.one_over_ref_idx = 1.0 / ri

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        attenuation = Colour(1.0, 1.0, 1.0)
        etai_over_etat = self.one_over_ref_idx if rec.front_face else self.ref_idx

        unit_direction = ray_in.direction.unit_vector()
        unit_normal = rec.normal.unit_vector()

        cos_theta = -min(unit_direction.dot(unit_normal), 1.0)
        sin_theta = _sqrt(1.0 - cos_theta * cos_theta)

        if etai_over_etat * sin_theta > 1.0 or sampling.sample() < schlick(
            cos_theta, etai_over_etat
        ):
            direction = unit_direction.reflect(unit_normal)
        else:
            direction = unit_direction.refract(unit_normal, etai_over_etat)

        return ScatterRecord(
            attenuation=attenuation,
            specular_ray=Ray(rec.point, direction, ray_in.time),
        )

    def __str__(self) -> str:
        return (
            f"dielectric(ref_idx: {self.ref_idx}, "
            f"one_over_ref_idx: {self.one_over_ref_idx})"
        )

    def __repr__(self) -> str:
        return (
            f"Dielectric(ref_idx={self.ref_idx!r}, "
            f"one_over_ref_idx={self.one_over_ref_idx!r})"
        )


class DiffuseLight(Material):
    """An emissive material that lights the scene from its front face."""

    def __init__(self, emit: Texture) -> None:
        self.emit = emit

    def emission(self, ray_in: Ray, rec: HitRecord) -> Colour:
        if rec.front_face:
            return self.emit.value(rec.u, rec.v, rec.point)
        return Colour.zero()

    def __str__(self) -> str:
        return f"diffuse_light(emit: {self.emit})"

    def __repr__(self) -> str:
        return f"DiffuseLight(emit={self.emit!r})"


class Isotropic(Material):
    """Scatters uniformly in all directions; used for participating media."""

    def __init__(self, albedo: Texture) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        direction = sampling.vec3_in_unit_sphere()
        return ScatterRecord(
            attenuation=self.albedo.value(rec.u, rec.v, rec.point),
            scattered_ray=Ray(rec.point, direction, ray_in.time),
        )

    def __str__(self) -> str:
        return f"isotropic(albedo: {self.albedo})"

    def __repr__(self) -> str:
        return f"Isotropic(albedo={self.albedo!r})"


class Lambertian(Material):
    """An ideal diffuse material with cosine-weighted scattering."""

    def __init__(self, albedo: Texture) -> None:
        self.albedo = albedo

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        return ScatterRecord(
            attenuation=self.albedo.value(rec.u, rec.v, rec.point),
            pdf=CosinePDF(rec.normal),
        )

    def scattering_pdf(self, ray_in: Ray, rec: HitRecord, scattered: Ray) -> float:
        n = rec.normal.unit_vector()
        v = scattered.direction.unit_vector()
        cosine = n.dot(v)
        return 0.0 if cosine < 0.0 else cosine / PI

    def __str__(self) -> str:
        return f"lambertian(albedo: {self.albedo})"

    def __repr__(self) -> str:
        return f"Lambertian(albedo={self.albedo!r})"


class Metal(Material):
    """A reflective material with optional blur controlled by ``fuzz``."""

    def __init__(self, albedo: Texture, fuzz: float) -> None:
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray_in: Ray, rec: HitRecord) -> Optional[ScatterRecord]:
        unit_normal = rec.normal.unit_vector()
        reflected = ray_in.direction.unit_vector().reflect(unit_normal)
        direction = reflected + self.fuzz * sampling.vec3_in_unit_sphere()

        if direction.dot(unit_normal) > 0.0:
            return ScatterRecord(
                attenuation=self.albedo.value(rec.u, rec.v, rec.point),
                specular_ray=Ray(rec.point, direction, ray_in.time),
            )
        return None

    def __str__(self) -> str:
        return f"metal(albedo: {self.albedo}, fuzz: {self.fuzz})"

    def __repr__(self) -> str:
        return f"Metal(albedo={self.albedo!r}, fuzz={self.fuzz!r})"