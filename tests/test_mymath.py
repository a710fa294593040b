import math

import pytest

from gameframe.mymath import (
    calc_vector_angle,
    check_acute_angle,
    check_parallel_relation,
    check_vertical_relation,
    clamp,
    cot,
    deg_to_rad,
    len_seg_on_separate_axis,
    lerp,
    near_zero,
    rad_to_deg,
)
from gameframe.vector3 import Vector3


def test_deg_to_rad_half_turn():
    assert deg_to_rad(180.0) == pytest.approx(math.pi)


def test_degree_radian_round_trip():
    assert rad_to_deg(deg_to_rad(37.0)) == pytest.approx(37.0)


def test_clamp():
    assert clamp(0.0, 1.0, -3.0) == 0.0
    assert clamp(0.0, 1.0, 5.0) == 1.0
    assert clamp(0.0, 1.0, 0.25) == 0.25


def test_lerp_endpoints():
    assert lerp(2.0, 8.0, 0.0) == 2.0
    assert lerp(2.0, 8.0, 1.0) == 8.0


def test_near_zero_default_and_custom_epsilon():
    assert near_zero(0.0005)
    assert not near_zero(0.01)
    assert near_zero(0.01, 0.1)


def test_cot_is_reciprocal_of_tan():
    x = 0.7
    assert cot(x) * math.tan(x) == pytest.approx(1.0)


def test_len_seg_on_axis_aligned_vectors():
    sep = Vector3(1.0, 0.0, 0.0)
    assert len_seg_on_separate_axis(sep, Vector3(-4.0, 0.0, 0.0), Vector3(0.0, 7.0, 0.0)) == pytest.approx(4.0)


def test_len_seg_zero_third_axis_same_as_omitted():
    sep = Vector3(0.0, 1.0, 0.0)
    e1 = Vector3(1.0, 2.0, 3.0)
    e2 = Vector3(-1.0, 0.5, 2.0)
    assert len_seg_on_separate_axis(sep, e1, e2) == len_seg_on_separate_axis(sep, e1, e2, Vector3())


def test_len_seg_ignores_sign_of_axes():
    sep = Vector3(0.6, 0.8, 0.0)
    e1 = Vector3(1.0, 2.0, 3.0)
    e2 = Vector3(-1.0, 0.5, 2.0)
    e3 = Vector3(2.0, -2.0, 1.0)
    assert len_seg_on_separate_axis(sep, e1 * -1.0, e2, e3) == pytest.approx(
        len_seg_on_separate_axis(sep, e1, e2, e3)
    )


def test_check_acute_angle():
    vertex = Vector3(0.0, 0.0, 0.0)
    assert check_acute_angle(Vector3(1.0, 0.0, 0.0), vertex, Vector3(0.0, 1.0, 0.0))
    assert check_acute_angle(Vector3(1.0, 0.0, 0.0), vertex, Vector3(1.0, 1.0, 0.0))
    assert not check_acute_angle(Vector3(1.0, 0.0, 0.0), vertex, Vector3(-1.0, 1.0, 0.0))


def test_check_parallel_relation():
    a0, a1 = Vector3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0)
    assert check_parallel_relation(a0, a1, Vector3(0.0, 3.0, 0.0), Vector3(5.0, 3.0, 0.0))
    assert not check_parallel_relation(a0, a1, Vector3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 0.0))


def test_check_vertical_relation():
    a0, a1 = Vector3(0.0, 0.0, 0.0), Vector3(2.0, 0.0, 0.0)
    assert check_vertical_relation(a0, a1, Vector3(1.0, 0.0, 0.0), Vector3(1.0, 0.0, 4.0))
    assert not check_vertical_relation(a0, a1, Vector3(0.0, 3.0, 0.0), Vector3(5.0, 3.0, 0.0))


def test_calc_vector_angle_zero_vector():
    assert calc_vector_angle(Vector3(), Vector3(1.0, 0.0, 0.0)) == 0.0


def test_calc_vector_angle_same_direction_and_symmetry():
    a = Vector3(1.0, 2.0, 2.0)
    b = Vector3(-3.0, 1.0, 0.5)
    assert calc_vector_angle(a, a * 4.0) == pytest.approx(0.0, abs=1e-6)
    assert calc_vector_angle(a, b) == pytest.approx(calc_vector_angle(b, a))


def test_calc_vector_angle_matches_vector3_angle():
    a = Vector3(1.0, 2.0, 2.0)
    b = Vector3(-3.0, 1.0, 0.5)
    assert calc_vector_angle(a, b) == pytest.approx(Vector3.angle(a, b))