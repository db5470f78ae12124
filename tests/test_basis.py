import pytest

from megatex.basis import Basis
from megatex.quaternion import Quaternion
from megatex.vector3 import FORWARD, RIGHT, UP, Vector3

ROTATION = Quaternion.axis_angle(Vector3(1.0, -1.0, 2.0).normalized(), 0.85)


def _v(v):
    return (v.x, v.y, v.z)


def test_identity_quaternion_gives_standard_axes():
    basis = Basis.from_quat(Quaternion.identity())
    assert _v(basis.x) == pytest.approx(_v(RIGHT))
    assert _v(basis.y) == pytest.approx(_v(UP))
    assert _v(basis.z) == pytest.approx(_v(FORWARD))


def test_rotate_matches_quaternion():
    basis = Basis.from_quat(ROTATION)
    v = Vector3(2.0, -0.5, 1.5)
    assert _v(basis.rotate(v)) == pytest.approx(_v(ROTATION.rotate(v)))


def test_unrotate_matches_conjugate():
    basis = Basis.from_quat(ROTATION)
    v = Vector3(-3.0, 1.0, 0.25)
    assert _v(basis.unrotate(v)) == pytest.approx(_v(ROTATION.conjugate().rotate(v)))


def test_rotate_unrotate_round_trip():
    basis = Basis.from_quat(ROTATION)
    v = Vector3(4.0, 5.0, -6.0)
    assert _v(basis.unrotate(basis.rotate(v))) == pytest.approx(_v(v))


def test_axes_are_orthogonal():
    basis = Basis.from_quat(ROTATION)
    assert basis.x.dot(basis.y) == pytest.approx(0.0, abs=1e-12)
    assert basis.x.dot(basis.z) == pytest.approx(0.0, abs=1e-12)
    assert basis.y.dot(basis.z) == pytest.approx(0.0, abs=1e-12)