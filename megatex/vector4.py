"""Four-component float vectors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector4:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    def lerp(self, other: "Vector4", t: float) -> "Vector4":
        t_inv = 1.0 - t
        return Vector4(
            self.x * t_inv + other.x * t,
            self.y * t_inv + other.y * t,
            self.z * t_inv + other.z * t,
            self.w * t_inv + other.w * t,
        )