import pytest

from rtseries import sampling
from rtseries.camera import Camera
from rtseries.vector import Vec3


def _pinhole(time0=0.0, time1=1.0):
    return Camera(
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 0.0, -1.0),
        Vec3(0.0, 1.0, 0.0),
        90.0,
        1.0,
        0.0,
        1.0,
        time0,
        time1,
    )


def test_pinhole_ray_starts_at_lookfrom():
    sampling.seed(31)
    ray = _pinhole().get_ray(0.3, 0.7)
    assert ray.origin == Vec3(0.0, 0.0, 0.0)


def test_centre_ray_points_at_target():
    sampling.seed(32)
    ray = _pinhole().get_ray(0.5, 0.5)
    d = ray.direction.unit_vector()
    assert tuple(d) == pytest.approx((0.0, 0.0, -1.0), abs=1e-12)


def test_lower_left_corner_ray():
    sampling.seed(33)
    ray = _pinhole().get_ray(0.0, 0.0)
    assert tuple(ray.direction) == pytest.approx((-1.0, -1.0, -1.0))


def test_ray_time_within_shutter():
    sampling.seed(34)
    cam = _pinhole(2.0, 3.0)
    for _ in range(50):
        assert 2.0 <= cam.get_ray(0.5, 0.5).time < 3.0


def test_empty_shutter_interval_raises():
    with pytest.raises(ValueError):
        _pinhole(1.0, 1.0).get_ray(0.5, 0.5)


def test_aperture_offsets_origin_within_lens():
    sampling.seed(35)
    lookfrom = Vec3(1.0, 2.0, 3.0)
    cam = Camera(
        lookfrom,
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        40.0,
        2.0,
        0.5,
        10.0,
        0.0,
        1.0,
    )
    for _ in range(50):
        ray = cam.get_ray(0.5, 0.5)
        offset = ray.origin - lookfrom
        assert offset.length() < 0.25 + 1e-12
        assert offset.dot(cam.w) == pytest.approx(0.0, abs=1e-12)


def test_focus_point_is_shared_by_lens_rays():
    sampling.seed(36)
    lookfrom = Vec3(0.0, 0.0, 5.0)
    cam = Camera(
        lookfrom,
        Vec3(0.0, 0.0, 0.0),
        Vec3(0.0, 1.0, 0.0),
        60.0,
        1.5,
        1.0,
        5.0,
        0.0,
        1.0,
    )
    for _ in range(20):
        ray = cam.get_ray(0.5, 0.5)
        focus = ray.at(1.0)
        assert tuple(focus) == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)


def test_basis_is_orthonormal():
    cam = _pinhole()
    assert cam.u.length() == pytest.approx(1.0)
    assert cam.v.length() == pytest.approx(1.0)
    assert cam.w.length() == pytest.approx(1.0)
    assert cam.u.dot(cam.v) == pytest.approx(0.0)
    assert cam.u.dot(cam.w) == pytest.approx(0.0)
    assert cam.lens_radius == 0.0