# rtseries

The core pieces of a recursive Monte Carlo ray tracer in pure Python.
The package has no dependencies.

- `rtseries.util` – the constants `PI`, `TWO_PI`, `PI_OVER_2`, `INFINITY`,
  `RAY_EPSILON` and `MIN_THICKNESS`, and `clamp(x, lower, upper)`.
- `rtseries.vector` – `Vec3`, an immutable vector that also serves for
  points and colours (`Point3` and `Colour` are aliases). It supports
  `+`, `-`, `*` by a scalar or component-wise by another vector, `/` by a
  scalar, negation, indexing and iteration. It also has `dot`, `cross`,
  `unit_vector`, `reflect` and `refract`. `to_colour_from_sample`
  averages an accumulated sample sum and gamma-corrects it, and
  `to_rgb` / `to_rgba` convert the result to saturated byte tuples.
- `rtseries.onb` – `ONB`, an orthonormal basis whose `w` axis follows a
  given normal, with `local` and `local_from_vec3`.
- `rtseries.ray` – `Ray`, a frozen dataclass with `origin`, `direction`
  and `time`, and `at(t)`.
- `rtseries.sampling` – a random source kept per thread. It offers
  `seed`, `sample`, `samples`, `sample_in_range`, `samples_in_range`,
  `vec3`, `vec3_in_range`, `vec3_in_unit_sphere`, `unit_vec3`,
  `vec3_in_hemisphere`, `vec3_in_unit_disk`, `cosine_direction` and
  `vec3_to_sphere`. It also has `permute`, which shuffles a list in place
  into a single random cycle.
- `rtseries.pdf` – the abstract `PDF` base class and `CosinePDF`,
  `HittablePDF` and `MixturePDF` for importance sampling.
  `HittablePDF` accepts any object that provides
  `pdf_value(origin, direction)` and `random(origin)`.
- `rtseries.background` – `black_background` and `gradient_background`.
- `rtseries.camera` – `Camera`, a thin-lens camera with defocus blur and
  a shutter interval for motion blur.
- `rtseries.material` – `Material` and its subclasses `Lambertian`,
  `Metal`, `Dielectric`, `Isotropic` and `DiffuseLight`, plus `schlick`.
  `scatter` returns a `ScatterRecord`, or `None` when the ray is absorbed.
  Materials accept any hit record that has `point`, `normal`, `u`, `v` and
  `front_face`. Textures may be any object with `value(u, v, p)`.

## Installation

```
pip install .
```

## Example

```python
from rtseries import sampling
from rtseries.camera import Camera
from rtseries.vector import Vec3
from rtseries.background import gradient_background

sampling.seed(42)

camera = Camera(
    Vec3(13.0, 2.0, 3.0),   # lookfrom
    Vec3(0.0, 0.0, 0.0),    # lookat
    Vec3(0.0, 1.0, 0.0),    # vup
    20.0,                   # vertical field of view in degrees
    2.0,                    # aspect ratio
    0.1,                    # aperture
    10.0,                   # focus distance
    0.0,                    # shutter open
    1.0,                    # shutter close
)

ray = camera.get_ray(0.5, 0.5)
colour = gradient_background(ray)
print(colour.to_colour_from_sample(1).to_rgb())
```

Calling `sampling.seed` makes later random draws in the same thread
repeatable.

## What this package does not do

The package supplies building blocks only. It has no scene geometry or
hittable objects and no textures. It has no renderer that traces whole
images, no image file output and no command-line program. To produce
pictures, provide your own objects, textures and render loop, following
the protocols described above.

## Running the tests

```
pip install .[test]
pytest
```