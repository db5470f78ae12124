"""Axis-aligned bounding boxes in two and three dimensions."""

from dataclasses import dataclass

from .vector2 import ZERO2, Vector2
from .vector3 import ZERO, Vector3


@dataclass(frozen=True)
class Box2D:
    min: Vector2 = ZERO2
    max: Vector2 = ZERO2


@dataclass(frozen=True)
class Box3D:
    min: Vector3 = ZERO
    max: Vector3 = ZERO

    def contains_point(self, point: Vector3) -> bool:
        """Whether point lies strictly inside the box."""
        return (
            self.min.x < point.x
            and self.min.y < point.y
            and self.min.z < point.z
            and self.max.x > point.x
            and self.max.y > point.y
            and self.max.z > point.z
        )

    def overlaps(self, other: "Box3D") -> bool:
        """Whether the two boxes touch or intersect."""
        return (
            self.min.x <= other.max.x
            and self.max.x >= other.min.x
            and self.min.y <= other.max.y
            and self.max.y >= other.min.y
            and self.min.z <= other.max.z
            and self.max.z >= other.min.z
        )

    def union(self, other: "Box3D") -> "Box3D":
        """Smallest box holding both boxes."""
        return Box3D(self.min.min(other.min), self.max.max(other.max))

    def union_point(self, point: Vector3) -> "Box3D":
        """Smallest box holding this box and point."""
        return Box3D(self.min.min(point), self.max.max(point))

    def support(self, direction: Vector3) -> Vector3:
        """Corner of the box furthest along direction."""
        return Vector3(
            self.max.x if direction.x > 0.0 else self.min.x,
            self.max.y if direction.y > 0.0 else self.min.y,
            self.max.z if direction.z > 0.0 else self.min.z,
        )