import pytest

from megatex.vector4 import Vector4


def test_lerp_endpoints():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(-1.0, 0.0, 8.0, 2.0)
    assert a.lerp(b, 0.0) == a
    assert a.lerp(b, 1.0) == b


@pytest.mark.parametrize("t", [0.0, 0.25, 0.5, 1.0])
def test_lerp_of_equal_vectors(t):
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    result = a.lerp(a, t)
    assert result.x == pytest.approx(a.x)
    assert result.y == pytest.approx(a.y)
    assert result.z == pytest.approx(a.z)
    assert result.w == pytest.approx(a.w)


def test_lerp_is_symmetric():
    a = Vector4(1.0, 2.0, 3.0, 4.0)
    b = Vector4(-1.0, 0.0, 8.0, 2.0)
    forward = a.lerp(b, 0.3)
    backward = b.lerp(a, 0.7)
    assert forward.x == pytest.approx(backward.x)
    assert forward.y == pytest.approx(backward.y)
    assert forward.z == pytest.approx(backward.z)
    assert forward.w == pytest.approx(backward.w)