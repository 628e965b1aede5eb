import math

import pytest

from rtseries.vector import AXES, Vec3


def approx_vec(v):
    return pytest.approx(tuple(v))


def test_zero_and_one():
    assert tuple(Vec3.zero()) == (0.0, 0.0, 0.0)
    assert tuple(Vec3.one()) == (1.0, 1.0, 1.0)


def test_from_array_and_accessors():
    v = Vec3.from_array([1.5, -2.0, 3.25])
    assert (v.x(), v.y(), v.z()) == (1.5, -2.0, 3.25)
    assert [v[i] for i in AXES] == [1.5, -2.0, 3.25]


def test_index_out_of_range():
    with pytest.raises(IndexError):
        Vec3.one()[3]


def test_display_format():
    assert str(Vec3(1, 2, 3)) == "[1.0, 2.0, 3.0]"


def test_add_sub_round_trip():
    a = Vec3(1.5, -2.0, 0.25)
    b = Vec3(-3.0, 4.5, 7.0)
    assert tuple((a + b) - b) == approx_vec(a)


def test_scalar_multiplication_both_sides():
    a = Vec3(1.5, -2.0, 0.25)
    assert a * 2.0 == a + a
    assert 2.0 * a == a * 2.0
    assert -a == a * -1.0


def test_componentwise_multiply_with_one_is_identity():
    a = Vec3(1.5, -2.0, 0.25)
    assert a * Vec3.one() == a


def test_division_inverts_multiplication():
    a = Vec3(1.5, -2.0, 0.25)
    assert tuple((a * 4.0) / 4.0) == approx_vec(a)


def test_division_by_zero_gives_non_finite():
    v = Vec3(1.0, 0.0, -1.0) / 0.0
    assert math.isinf(v.x()) and v.x() > 0
    assert math.isnan(v.y())
    assert math.isinf(v.z()) and v.z() < 0


def test_in_place_operators_rebind():
    a = Vec3(1.0, 2.0, 3.0)
    b = a
    b += Vec3.one()
    assert a == Vec3(1.0, 2.0, 3.0)
    assert b - Vec3.one() == a


def test_length_and_length_squared():
    v = Vec3(3.0, -4.0, 12.0)
    assert v.length() ** 2 == pytest.approx(v.length_squared())
    assert v.length_squared() == pytest.approx(v.dot(v))


def test_unit_vector_has_unit_length():
    v = Vec3(3.0, -4.0, 12.0)
    u = v.unit_vector()
    assert u.length() == pytest.approx(1.0)
    assert tuple(u * v.length()) == approx_vec(v)


def test_unit_vector_of_zero_is_nan():
    result = Vec3.zero().unit_vector()
    assert [math.isnan(c) for c in result] == [True, True, True]


def test_cross_is_orthogonal_and_anticommutative():
    a = Vec3(1.0, 2.0, 3.0)
    b = Vec3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)
    assert tuple(b.cross(a)) == approx_vec(-c)


def test_reflect_properties():
    n = Vec3(0.0, 1.0, 0.0)
    v = Vec3(1.0, -2.0, 0.5)
    r = v.reflect(n)
    assert r.length() == pytest.approx(v.length())
    assert r.dot(n) == pytest.approx(-v.dot(n))
    assert tuple(r.reflect(n)) == approx_vec(v)


def test_refract_with_equal_indices_keeps_direction():
    n = Vec3(0.0, 1.0, 0.0)
    d = Vec3(1.0, -1.0, 0.0).unit_vector()
    assert tuple(d.refract(n, 1.0)) == approx_vec(d)


def test_refract_total_internal_reflection_is_nan():
    n = Vec3(0.0, 1.0, 0.0)
    d = Vec3(1.0, -0.1, 0.0).unit_vector()
    result = d.refract(n, 3.0)
    assert [math.isnan(c) for c in result] == [True, True, True]


def test_to_rgba_alpha_is_opaque():
    assert Vec3(10.0, 20.0, 30.0).to_rgba() == (10, 20, 30, 255)


def test_to_rgb_saturates():
    assert Vec3(1000.0, -5.0, math.nan).to_rgb() == (255, 0, 0)


def test_to_colour_from_sample_full_white():
    assert Vec3.one().to_colour_from_sample(1).to_rgb() == (255, 255, 255)


def test_to_colour_from_sample_replaces_nan_and_negative():
    colour = Vec3(math.nan, -1.0, 0.0).to_colour_from_sample(4)
    assert colour.to_rgb() == (0, 0, 0)


def test_to_colour_from_sample_averages():
    single = Vec3(0.25, 0.5, 0.1).to_colour_from_sample(1)
    many = Vec3(1.0, 2.0, 0.4).to_colour_from_sample(4)
    assert tuple(many) == approx_vec(single)


def test_equality_and_hash():
    assert Vec3(1, 2, 3) == Vec3(1.0, 2.0, 3.0)
    assert len({Vec3(1, 2, 3), Vec3(1.0, 2.0, 3.0)}) == 1