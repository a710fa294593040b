import math

import pytest

from gameframe.vector3 import Vector3


def test_add_then_subtract_round_trips():
    a = Vector3(1.0, -2.0, 3.5)
    b = Vector3(0.25, 8.0, -1.0)
    assert (a + b) - b == a


def test_scale_and_divide_round_trip():
    a = Vector3(2.0, -4.0, 6.0)
    result = (a * 1.5) / 1.5
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)
    assert result.z == pytest.approx(a.z)


def test_equality_is_exact():
    assert Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0)
    assert not (Vector3(1.0, 2.0, 3.0) == Vector3(1.0, 2.0, 3.0001))


def test_copy_is_independent():
    v = Vector3(1.0, 2.0, 3.0)
    c = v.copy()
    c.x = 9.0
    assert v.x == 1.0
    assert c == Vector3(9.0, 2.0, 3.0)


def test_cross_is_perpendicular_to_operands():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    c = a.cross(b)
    assert a.dot(c) == pytest.approx(0.0, abs=1e-9)
    assert b.dot(c) == pytest.approx(0.0, abs=1e-9)


def test_cross_is_anticommutative():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-4.0, 0.5, 2.0)
    assert a.cross(b) == b.cross(a) * -1.0


def test_length_square_adds_z_instead_of_squaring():
    assert Vector3(0.0, 0.0, 2.0).length_square() == Vector3(2.0, 0.0, 0.0).length_square()


def test_length_matches_magnitude_in_plane():
    v = Vector3(3.0, -7.0, 0.0)
    assert v.length() == pytest.approx(v.magnitude())


def test_magnitude_squared_is_dot_with_self():
    v = Vector3(1.5, -2.0, 4.0)
    assert v.magnitude() ** 2 == pytest.approx(v.dot(v))


def test_distance_uses_difference():
    a = Vector3(1.0, 2.0, 0.0)
    b = Vector3(4.0, 6.0, 0.0)
    assert a.distance(b) == (a - b).length()
    assert a.distance_square(b) == (a - b).length_square()


def test_normalize_gives_unit_magnitude():
    v = Vector3(3.0, -1.0, 2.0)
    assert v.normalize().magnitude() == pytest.approx(1.0)


def test_normalize_leaves_tiny_vector_unchanged():
    v = Vector3(0.0001, 0.0, 0.0)
    assert v.normalize() == v


def test_centroid_of_equal_points_is_that_point():
    v = Vector3(1.5, 3.0, -6.0)
    c = Vector3.centroid(v, v, v)
    assert c.x == pytest.approx(v.x)
    assert c.y == pytest.approx(v.y)
    assert c.z == pytest.approx(v.z)


def test_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-5.0, 4.0, 0.5)
    assert Vector3.lerp(a, b, 0.0) == a
    assert Vector3.lerp(a, b, 1.0) == b


def test_reflect_flips_normal_component():
    v = Vector3(1.0, -2.0, 0.5)
    n = Vector3(0.0, 1.0, 0.0)
    r = Vector3.reflect(v, n)
    assert r.dot(n) == pytest.approx(-v.dot(n))
    assert Vector3.reflect(r, n) == v


def test_angle_of_same_direction_is_zero():
    v = Vector3(1.0, 2.0, 3.0)
    assert Vector3.angle(v, v * 2.0) == pytest.approx(0.0, abs=1e-6)


def test_angle_of_perpendicular_axes():
    assert Vector3.angle(Vector3(1.0, 0.0, 0.0), Vector3(0.0, 3.0, 0.0)) == pytest.approx(math.pi / 2)


def test_angle_with_zero_vector_raises():
    with pytest.raises(ZeroDivisionError):
        Vector3.angle(Vector3(), Vector3(1.0, 0.0, 0.0))


def test_equal_within_distance():
    a = Vector3(1.0, 1.0, 0.0)
    assert Vector3.equal(a, Vector3(1.01, 1.0, 0.0), 0.1)
    assert not Vector3.equal(a, Vector3(5.0, 1.0, 0.0), 0.1)


def test_ordering_by_size():
    small = Vector3(1.0, 0.0, 0.0)
    big = Vector3(2.0, 0.0, 0.0)
    assert small < big
    assert big > small
    assert not (big < small)