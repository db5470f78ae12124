"""Three-component float vectors."""

import math
from dataclasses import dataclass

from .mathf import float_to_s8norm


@dataclass(frozen=True)
class Vector3:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def abs(self) -> "Vector3":
        return Vector3(abs(self.x), abs(self.y), abs(self.z))

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, factor: float) -> "Vector3":
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def add_scaled(self, other: "Vector3", factor: float) -> "Vector3":
        return Vector3(
            self.x + other.x * factor,
            self.y + other.y * factor,
            self.z + other.z * factor,
        )

    def multiply(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x * other.x, self.y * other.y, self.z * other.z)

    def normalized(self) -> "Vector3":
        """Unit vector in the same direction; the zero vector stays zero."""
        denom = self.mag_sqrd()
        if denom == 0.0:
            return Vector3(0.0, 0.0, 0.0)
        return self.scale(1.0 / math.sqrt(denom))

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        t_flip = 1.0 - t
        return Vector3(
            self.x * t_flip + other.x * t,
            self.y * t_flip + other.y * t,
            self.z * t_flip + other.z * t,
        )

    def dot(self, other: "Vector3") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def mag_sqrd(self) -> float:
        return self.dot(self)

    def dist_sqrd(self, other: "Vector3") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        dz = self.z - other.z
        return dx * dx + dy * dy + dz * dz

    def cross(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def perp(self) -> "Vector3":
        """A vector perpendicular to this one."""
        if abs(self.x) > abs(self.z):
            return self.cross(FORWARD)
        return self.cross(RIGHT)

    def project(self, normal: "Vector3") -> "Vector3":
        return normal.scale(self.dot(normal))

    def project_plane(self, normal: "Vector3") -> "Vector3":
        return self.add_scaled(normal, -self.dot(normal))

    def move_towards(self, towards: "Vector3", max_distance: float) -> tuple["Vector3", bool]:
        """Step towards a point by at most max_distance.

        Returns the new position and whether the point was reached.
        """
        distance = self.dist_sqrd(towards)
        if distance < max_distance * max_distance:
            return towards, True
        factor = max_distance / math.sqrt(distance)
        return self.add_scaled(towards - self, factor), False

    def triple_product(self, b: "Vector3", c: "Vector3") -> "Vector3":
        """Return b * (self . c) - self * (b . c)."""
        return b.scale(self.dot(c)).add_scaled(self, -b.dot(c))

    def max(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.x if self.x > other.x else other.x,
            self.y if self.y > other.y else other.y,
            self.z if self.z > other.z else other.z,
        )

    def min(self, other: "Vector3") -> "Vector3":
        return Vector3(
            self.x if self.x < other.x else other.x,
            self.y if self.y < other.y else other.y,
            self.z if self.z < other.z else other.z,
        )

    def is_zero(self) -> bool:
        return self.x == 0.0 and self.y == 0.0 and self.z == 0.0

    def to_s8norm(self) -> tuple[int, int, int]:
        """Components as signed 8-bit normalised integers."""
        return (float_to_s8norm(self.x), float_to_s8norm(self.y), float_to_s8norm(self.z))

    def eval_barycentric_1d(self, a: float, b: float, c: float) -> float:
        """Weight three scalars by these barycentric coordinates."""
        return self.x * a + self.y * b + self.z * c


RIGHT = Vector3(1.0, 0.0, 0.0)
UP = Vector3(0.0, 1.0, 0.0)
FORWARD = Vector3(0.0, 0.0, 1.0)
ZERO = Vector3(0.0, 0.0, 0.0)
ONE = Vector3(1.0, 1.0, 1.0)