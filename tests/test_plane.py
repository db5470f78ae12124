import pytest

from megatex.plane import (
    Plane,
    Plane2,
    calculate_barycentric_coords,
    evaluate_barycentric_coords,
)
from megatex.vector2 import Vector2
from megatex.vector3 import UP, Vector3

A = Vector3(0.0, 0.0, 0.0)
B = Vector3(4.0, 0.0, 0.0)
C = Vector3(0.0, 4.0, 0.0)


def test_plane_through_point_has_zero_distance():
    point = Vector3(1.0, 2.0, 3.0)
    plane = Plane.from_normal_and_point(UP, point)
    assert plane.point_distance(point) == pytest.approx(0.0)
    assert plane.d == pytest.approx(-2.0)


def test_point_distance_is_signed():
    plane = Plane.from_normal_and_point(UP, Vector3(0.0, 0.0, 0.0))
    above = plane.point_distance(Vector3(0.0, 3.0, 0.0))
    below = plane.point_distance(Vector3(0.0, -3.0, 0.0))
    assert above == pytest.approx(-below)
    assert above > 0


def test_parallel_ray_misses():
    plane = Plane.from_normal_and_point(UP, Vector3(0.0, 2.0, 0.0))
    assert plane.ray_intersection(Vector3(0.0, 0.0, 0.0), Vector3(1.0, 0.0, 0.0)) is None


def test_ray_hits_plane_at_point_on_plane():
    plane = Plane.from_normal_and_point(UP, Vector3(0.0, 2.0, 0.0))
    origin = Vector3(1.0, 0.0, 1.0)
    direction = Vector3(0.0, 1.0, 0.0)
    distance = plane.ray_intersection(origin, direction)
    hit = origin.add_scaled(direction, distance)
    assert plane.point_distance(hit) == pytest.approx(0.0)
    assert distance == pytest.approx(2.0)


def test_project_point_on_plane_is_unchanged():
    plane = Plane.from_normal_and_point(UP, Vector3(0.0, 1.0, 0.0))
    point = Vector3(5.0, 1.0, -2.0)
    assert plane.project_point(point) == point


def test_plane2_distance():
    plane = Plane2(Vector2(0.0, 1.0), -1.0)
    assert plane.distance_to_point(Vector2(7.0, 1.0)) == pytest.approx(0.0)
    assert plane.distance_to_point(Vector2(0.0, 3.0)) > 0


@pytest.mark.parametrize(
    "corner, expected",
    [
        (A, Vector3(1.0, 0.0, 0.0)),
        (B, Vector3(0.0, 1.0, 0.0)),
        (C, Vector3(0.0, 0.0, 1.0)),
    ],
)
def test_barycentric_of_corners(corner, expected):
    result = calculate_barycentric_coords(A, B, C, corner)
    assert result.x == pytest.approx(expected.x)
    assert result.y == pytest.approx(expected.y)
    assert result.z == pytest.approx(expected.z)


def test_barycentric_round_trip():
    point = Vector3(1.0, 1.5, 0.0)
    bary = calculate_barycentric_coords(A, B, C, point)
    assert bary.x + bary.y + bary.z == pytest.approx(1.0)
    back = evaluate_barycentric_coords(A, B, C, bary)
    assert back.x == pytest.approx(point.x)
    assert back.y == pytest.approx(point.y)
    assert back.z == pytest.approx(point.z)


def test_degenerate_triangle_uses_longer_edge():
    b = Vector3(2.0, 0.0, 0.0)
    c = Vector3(1.0, 0.0, 0.0)
    result = calculate_barycentric_coords(A, b, c, b)
    assert result.x == pytest.approx(0.0)
    assert result.y == pytest.approx(1.0)
    assert result.z == pytest.approx(0.0)