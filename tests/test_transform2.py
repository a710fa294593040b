import math

import pytest

from gameframe.matrix4 import Matrix4
from gameframe.transform2 import Transform2
from gameframe.vector2 import Vector2
from gameframe.vector3 import Vector3


def test_default_transform_is_identity():
    t = Transform2()
    assert t.scale == Vector2(1.0, 1.0)
    assert t.create_matrix4() == Matrix4.identity()


def test_defaults_are_not_shared():
    a = Transform2()
    b = Transform2()
    a.scale.x = 5.0
    assert b.scale.x == 1.0


def test_translation_only_moves_points():
    t = Transform2(location=Vector2(5.0, 6.0))
    m = t.create_matrix4()
    assert m.translation() == Vector3(5.0, 6.0, 0.0)
    v = Vector3(1.0, 2.0, 0.0)
    assert m.transform(v) - Vector3(5.0, 6.0, 0.0) == v


def test_scale_then_translate():
    t = Transform2(location=Vector2(5.0, 6.0), scale=Vector2(2.0, 3.0))
    result = t.create_matrix4().transform(Vector3(1.0, 1.0, 0.0))
    assert (result.x, result.y, result.z) == pytest.approx((7.0, 9.0, 0.0))


def test_rotation_preserves_length_and_z():
    t = Transform2(rotation=math.pi / 3)
    v = Vector3(3.0, 4.0, 2.0)
    result = t.create_matrix4().transform(v)
    assert result.magnitude() == pytest.approx(v.magnitude())
    assert result.z == pytest.approx(v.z)


def test_quarter_turn_maps_x_to_y():
    t = Transform2(rotation=math.pi / 2)
    result = t.create_matrix4().transform(Vector3(1.0, 0.0, 0.0))
    assert tuple(result) == pytest.approx((0.0, 1.0, 0.0), abs=1e-9)


def test_matrix_is_invertible_back_to_point():
    t = Transform2(location=Vector2(-2.0, 7.0), rotation=0.7, scale=Vector2(2.0, 0.5))
    m = t.create_matrix4()
    inv = Matrix4(m.mat)
    inv.invert()
    v = Vector3(3.0, -1.0, 0.0)
    assert tuple(inv.transform(m.transform(v))) == pytest.approx(tuple(v), abs=1e-9)