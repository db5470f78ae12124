"""Orthonormal bases built from rotations."""

from dataclasses import dataclass

from .quaternion import Quaternion
from .vector3 import FORWARD, RIGHT, UP, Vector3


@dataclass(frozen=True)
class Basis:
    x: Vector3 = RIGHT
    y: Vector3 = UP
    z: Vector3 = FORWARD

    @classmethod
    def from_quat(cls, quat: Quaternion) -> "Basis":
        """The axes of the frame rotated by quat."""
        x = quat.rotate(RIGHT)
        y = quat.rotate(UP)
        return cls(x, y, x.cross(y))

    def rotate(self, vector: Vector3) -> Vector3:
        """Express a local vector in world space."""
        return self.x.scale(vector.x).add_scaled(self.y, vector.y).add_scaled(self.z, vector.z)

    def unrotate(self, vector: Vector3) -> Vector3:
        """Express a world vector in this basis."""
        return Vector3(self.x.dot(vector), self.y.dot(vector), self.z.dot(vector))