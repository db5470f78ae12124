"""Planes in three dimensions, lines in two, and barycentric coordinates."""

from dataclasses import dataclass
from typing import Optional

from .vector2 import UP2, Vector2
from .vector3 import UP, Vector3


@dataclass(frozen=True)
class Plane:
    normal: Vector3 = UP
    d: float = 0.0

    @classmethod
    def from_normal_and_point(cls, normal: Vector3, point: Vector3) -> "Plane":
        return cls(normal, -normal.dot(point))

    def ray_intersection(self, origin: Vector3, direction: Vector3) -> Optional[float]:
        """Distance along the ray to the plane, or None if the ray is parallel."""
        normal_dot = self.normal.dot(direction)
        if abs(normal_dot) < 0.00001:
            return None
        return -(origin.dot(self.normal) + self.d) / normal_dot

    def point_distance(self, point: Vector3) -> float:
        """Signed distance of point from the plane."""
        return self.normal.dot(point) + self.d

    def project_point(self, point: Vector3) -> Vector3:
        """Offset point along the normal by its signed distance."""
        return point.add_scaled(self.normal, self.point_distance(point))


@dataclass(frozen=True)
class Plane2:
    normal: Vector2 = UP2
    d: float = 0.0

    def distance_to_point(self, point: Vector2) -> float:
        return self.normal.dot(point) + self.d


def _segment_lerp(a: Vector3, b: Vector3, point: Vector3) -> float:
    edge = b - a
    denom = edge.mag_sqrd()
    if denom < 0.00000001:
        return 0.5
    return (point - a).dot(edge) / denom


def calculate_barycentric_coords(a: Vector3, b: Vector3, c: Vector3, point: Vector3) -> Vector3:
    """Barycentric coordinates of point with respect to triangle abc.

    For a degenerate triangle the point is placed on its longer edge from a.
    """
    v0 = b - a
    v1 = c - a
    v2 = point - a

    d00 = v0.dot(v0)
    d01 = v0.dot(v1)
    d11 = v1.dot(v1)
    d20 = v2.dot(v0)
    d21 = v2.dot(v1)

    denom = d00 * d11 - d01 * d01

    if abs(denom) < 0.000001:
        if d00 > d11:
            y = _segment_lerp(a, b, point)
            return Vector3(1.0 - y, y, 0.0)
        z = _segment_lerp(a, c, point)
        return Vector3(1.0 - z, 0.0, 0.0)

    inv = 1.0 / denom
    y = (d11 * d20 - d01 * d21) * inv
    z = (d00 * d21 - d01 * d20) * inv
    return Vector3(1.0 - y - z, y, z)


def evaluate_barycentric_coords(a: Vector3, b: Vector3, c: Vector3, bary: Vector3) -> Vector3:
    """Point of triangle abc at the given barycentric coordinates."""
    return a.scale(bary.x).add_scaled(b, bary.y).add_scaled(c, bary.z)