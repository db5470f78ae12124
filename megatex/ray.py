"""Rays with an origin and a direction."""

from dataclasses import dataclass

from .transform import Transform
from .vector3 import FORWARD, ZERO, Vector3


@dataclass(frozen=True)
class Ray:
    origin: Vector3 = ZERO
    direction: Vector3 = FORWARD

    def transformed(self, transform: Transform) -> "Ray":
        """The ray moved by transform; the direction is only rotated."""
        return Ray(
            transform.transform_point(self.origin),
            transform.rotation.rotate(self.direction),
        )

    def distance_along(self, point: Vector3) -> float:
        """Distance along the ray to the foot of the perpendicular from point."""
        return (point - self.origin).dot(self.direction)