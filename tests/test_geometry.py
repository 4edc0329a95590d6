import math

import pytest

from marioworld.geometry import (
    Circlef,
    Color4f,
    Ellipsef,
    Point2f,
    Rectf,
    Vector2f,
    Window,
)


def test_window_defaults():
    w = Window()
    assert (w.title, w.width, w.height, w.is_vsync_on) == ("Title", 320.0, 180.0, True)


def test_color_default_is_opaque_black():
    assert Color4f() == Color4f(0.0, 0.0, 0.0, 1.0)


def test_circle_and_ellipse_defaults_at_origin():
    assert Circlef().center == Point2f(0.0, 0.0)
    assert Circlef().radius == 0.0
    e = Ellipsef(Point2f(1.0, 2.0), 3.0, 4.0)
    assert (e.center, e.radius_x, e.radius_y) == (Point2f(1.0, 2.0), 3.0, 4.0)


def test_rect_vertices_order():
    r = Rectf(10.0, 20.0, 5.0, 7.0)
    right = r.left + r.width
    top = r.bottom + r.height
    assert r.vertices() == [
        Point2f(r.left, r.bottom),
        Point2f(right, r.bottom),
        Point2f(right, top),
        Point2f(r.left, top),
    ]


def test_rect_bottom_left_round_trip():
    r = Rectf(1.0, 2.0, 3.0, 4.0)
    assert r.bottom_left() == Point2f(1.0, 2.0)
    r.set_bottom_left(Point2f(8.0, 9.0))
    assert r.bottom_left() == Point2f(8.0, 9.0)
    assert (r.width, r.height) == (3.0, 4.0)


def test_point_vector_translation_round_trip():
    p = Point2f(3.0, -1.5)
    v = Vector2f(2.25, 4.0)
    assert (p + v) - v == p


def test_point_difference_is_vector_between():
    a = Point2f(1.0, 2.0)
    b = Point2f(4.0, 6.0)
    diff = b - a
    assert isinstance(diff, Vector2f)
    assert diff == Vector2f.between(a, b)
    assert a + diff == b


def test_from_point_matches_between_origin():
    p = Point2f(7.5, -3.0)
    assert Vector2f.from_point(p) == Vector2f.between(Point2f(), p)
    assert Vector2f.from_point(p).to_point() == p


def test_equals_uses_epsilon():
    v = Vector2f(1.0, 1.0)
    assert v == Vector2f(1.0005, 0.9995)
    assert not (v == Vector2f(1.01, 1.0))
    assert v.equals(Vector2f(1.01, 1.0), epsilon=0.1)


def test_dot_and_cross_with_orthogonal():
    v = Vector2f(3.0, 4.0)
    o = v.orthogonal()
    assert v.dot(o) == 0.0
    assert v.cross(o) == pytest.approx(v.squared_length())


def test_length_consistency():
    v = Vector2f(3.0, 4.0)
    assert v.length() == pytest.approx(math.sqrt(v.squared_length()))
    assert v.norm() == v.length()
    assert v.length() == 5.0


def test_normalized_has_unit_length_and_same_direction():
    v = Vector2f(-6.0, 2.5)
    n = v.normalized()
    assert n.length() == pytest.approx(1.0)
    assert v.cross(n) == pytest.approx(0.0)
    assert v.dot(n) > 0


def test_normalized_tiny_vector_is_zero():
    assert Vector2f(0.0001, 0.0).normalized() == Vector2f(0.0, 0.0)


def test_angle_with_orthogonal_is_quarter_turn():
    v = Vector2f(2.0, 1.0)
    assert v.angle_with(v.orthogonal()) == pytest.approx(math.pi / 2)
    assert v.orthogonal().angle_with(v) == pytest.approx(-math.pi / 2)
    assert v.angle_with(v) == pytest.approx(0.0)


def test_reflect_twice_is_identity_and_keeps_length():
    v = Vector2f(3.0, -2.0)
    n = Vector2f(1.0, 1.0).normalized()
    r = v.reflect(n)
    assert r.length() == pytest.approx(v.length())
    assert r.reflect(n) == v


def test_reflect_flips_normal_component():
    v = Vector2f(5.0, -3.0)
    up = Vector2f(0.0, 1.0)
    assert v.reflect(up) == Vector2f(v.x, -v.y)


def test_arithmetic_operators():
    a = Vector2f(1.5, -2.0)
    b = Vector2f(0.5, 4.0)
    assert (a + b) - b == a
    assert -a + a == Vector2f()
    assert +a == a
    assert 2 * a == a + a
    assert a * 2 == 2 * a
    assert (a * 3) / 3 == a


def test_multiplication_by_non_number_raises():
    with pytest.raises(TypeError):
        Vector2f(1.0, 1.0) * "x"


def test_str_format():
    assert str(Vector2f(1.5, -2.0)) == "Vector2f(1.50, -2.00)"