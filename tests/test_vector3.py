import pytest

from megatex.vector3 import FORWARD, ONE, RIGHT, UP, ZERO, Vector3


def as_tuple(v):
    return (v.x, v.y, v.z)


def test_abs_and_negate():
    v = Vector3(-1.0, 2.0, -3.0)
    assert v.abs() == Vector3(1.0, 2.0, 3.0)
    assert -(-v) == v
    assert v + (-v) == ZERO


def test_cross_of_axes():
    assert RIGHT.cross(UP) == FORWARD
    assert UP.cross(FORWARD) == RIGHT
    assert FORWARD.cross(RIGHT) == UP


def test_cross_is_orthogonal():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-2.0, 0.5, 4.0)
    c = a.cross(b)
    assert c.dot(a) == pytest.approx(0.0)
    assert c.dot(b) == pytest.approx(0.0)


def test_add_scaled_and_scale():
    a = Vector3(1.0, 2.0, 3.0)
    assert ZERO.add_scaled(a, 2.0) == a.scale(2.0)
    assert a.add_scaled(a, 1.0) == a + a


def test_multiply_by_one():
    a = Vector3(1.5, -2.0, 3.0)
    assert a.multiply(ONE) == a


def test_normalized():
    assert Vector3(3.0, 4.0, 12.0).normalized().mag_sqrd() == pytest.approx(1.0)
    assert ZERO.normalized() == ZERO


def test_lerp_endpoints():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-5.0, 0.0, 9.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


def test_dist_sqrd_matches_difference():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-5.0, 0.0, 9.0)
    assert a.dist_sqrd(b) == (a - b).mag_sqrd()


@pytest.mark.parametrize("v", [Vector3(1.0, 0.0, 0.0), Vector3(0.0, 1.0, 0.0), Vector3(0.3, -2.0, 5.0)])
def test_perp_is_orthogonal(v):
    p = v.perp()
    assert p.dot(v) == pytest.approx(0.0)
    assert not p.is_zero()


def test_project_and_project_plane_sum():
    v = Vector3(1.0, 2.0, 3.0)
    n = Vector3(1.0, 1.0, 0.0).normalized()
    assert as_tuple(v.project(n) + v.project_plane(n)) == pytest.approx(as_tuple(v))
    assert v.project_plane(n).dot(n) == pytest.approx(0.0)


def test_move_towards_reaches():
    target = Vector3(0.5, 0.0, 0.0)
    result, reached = ZERO.move_towards(target, 1.0)
    assert reached is True
    assert result == target


def test_move_towards_limited():
    target = Vector3(10.0, 0.0, 0.0)
    result, reached = ZERO.move_towards(target, 2.0)
    assert reached is False
    assert result.mag_sqrd() == pytest.approx(4.0)
    assert result.cross(target).is_zero()


def test_triple_product_identity():
    a = Vector3(1.0, 2.0, 3.0)
    b = Vector3(-1.0, 0.5, 2.0)
    c = Vector3(4.0, -3.0, 1.0)
    result = a.triple_product(b, c)
    assert as_tuple(result) == pytest.approx((2.5, 7.5, 12.5))
    assert as_tuple(result) == pytest.approx(as_tuple(a.cross(b).cross(c)))


def test_min_max():
    a = Vector3(1.0, 5.0, -2.0)
    b = Vector3(3.0, 2.0, -1.0)
    assert a.min(b) == Vector3(1.0, 2.0, -2.0)
    assert a.max(b) == Vector3(3.0, 5.0, -1.0)


def test_is_zero():
    assert ZERO.is_zero() is True
    assert UP.is_zero() is False


def test_to_s8norm():
    assert RIGHT.to_s8norm() == (127, 0, 0)
    assert (-ONE).to_s8norm() == (-127, -127, -127)


def test_eval_barycentric_picks_vertex():
    assert RIGHT.eval_barycentric_1d(2.0, 5.0, 7.0) == 2.0
    assert UP.eval_barycentric_1d(2.0, 5.0, 7.0) == 5.0
    assert FORWARD.eval_barycentric_1d(2.0, 5.0, 7.0) == 7.0