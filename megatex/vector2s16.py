"""Two-component vectors of signed 16-bit integers."""

from dataclasses import dataclass

from .vector3 import Vector3

_S16_MIN = -0x8000
_S16_MAX = 0x7FFF


def _wrap16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


@dataclass(frozen=True)
class Vector2s16:
    x: int = 0
    y: int = 0

    def __post_init__(self):
        for value in (self.x, self.y):
            if not _S16_MIN <= value <= _S16_MAX:
                raise ValueError(f"component {value} does not fit in a signed 16-bit integer")

    def __add__(self, other: "Vector2s16") -> "Vector2s16":
        return Vector2s16(_wrap16(self.x + other.x), _wrap16(self.y + other.y))

    def __sub__(self, other: "Vector2s16") -> "Vector2s16":
        return Vector2s16(_wrap16(self.x - other.x), _wrap16(self.y - other.y))

    def dot(self, other: "Vector2s16") -> int:
        return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector2s16") -> int:
        return self.x * other.y - self.y * other.x

    def mag_sqr(self) -> int:
        return self.x * self.x + self.y * self.y

    def dist_sqr(self, other: "Vector2s16") -> int:
        dx = self.x - other.x
        dy = self.y - other.y
        return dx * dx + dy * dy

    def falls_between(self, towards: "Vector2s16", check: "Vector2s16") -> bool:
        """Whether check lies in the angular sweep from self round to towards."""
        direction_cross = self.cross(towards)
        if direction_cross == 0:
            return self.cross(check) >= 0
        if direction_cross > 0:
            return self.cross(check) >= 0 and check.cross(towards) >= 0
        return self.cross(check) >= 0 or check.cross(towards) >= 0


def barycentric(a: Vector2s16, b: Vector2s16, c: Vector2s16, point: Vector2s16) -> Vector3:
    """Barycentric coordinates of point in triangle abc."""
    v0 = b - a
    v1 = c - a
    v2 = point - a

    d00 = float(v0.dot(v0))
    d01 = float(v0.dot(v1))
    d11 = float(v1.dot(v1))
    d20 = float(v2.dot(v0))
    d21 = float(v2.dot(v1))

    denom = 1.0 / (d00 * d11 - d01 * d01)
    y = (d11 * d20 - d01 * d21) * denom
    z = (d00 * d21 - d01 * d20) * denom
    return Vector3(1.0 - y - z, y, z)