"""Two-component float vectors, also usable as complex rotations."""

import math
from dataclasses import dataclass

from .mathf import maxf, minf


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def from_angle(cls, radians: float) -> "Vector2":
        """Unit complex number for the given angle."""
        return cls(math.cos(radians), math.sin(radians))

    def complex_mul(self, other: "Vector2") -> "Vector2":
        return Vector2(
            self.x * other.x - self.y * other.y,
            self.x * other.y + self.y * other.x,
        )

    def complex_conj(self) -> "Vector2":
        return Vector2(self.x, -self.y)

    def rotate_towards(self, towards: "Vector2", max_step: "Vector2") -> tuple["Vector2", bool]:
        """Rotate towards a target by at most max_step.

        Returns the new rotation and whether the target was reached.
        """
        diff = self.complex_conj().complex_mul(towards)
        if diff.x > max_step.x:
            return towards, True
        step = Vector2(max_step.x, -max_step.y) if diff.y < 0 else max_step
        return self.complex_mul(step), False

    def rotate90(self) -> "Vector2":
        return Vector2(-self.y, self.x)

    def cross(self, other: "Vector2") -> float:
        return self.x * other.y - self.y * other.x

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def scale(self, factor: float) -> "Vector2":
        return Vector2(self.x * factor, self.y * factor)

    def mag_sqr(self) -> float:
        return self.x * self.x + self.y * self.y

    def dist_sqr(self, other: "Vector2") -> float:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def normalized(self) -> "Vector2":
        """Unit vector in the same direction; tiny vectors are returned unchanged."""
        if self.x == 0.0 and self.y == 0.0:
            return self
        denom = math.sqrt(self.mag_sqr())
        if denom < 0.0000001:
            return self
        return self.scale(1.0 / denom)

    def min(self, other: "Vector2") -> "Vector2":
        return Vector2(minf(self.x, other.x), minf(self.y, other.y))

    def max(self, other: "Vector2") -> "Vector2":
        return Vector2(maxf(self.x, other.x), maxf(self.y, other.y))

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        return Vector2(
            (other.x - self.x) * t + self.x,
            (other.y - self.y) * t + self.y,
        )


RIGHT2 = Vector2(1.0, 0.0)
UP2 = Vector2(0.0, 1.0)
ZERO2 = Vector2(0.0, 0.0)
ONE2 = Vector2(1.0, 1.0)