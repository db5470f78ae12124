"""Position, rotation and scale applied in the order scale, rotate, translate."""

from dataclasses import dataclass, field

from .quaternion import Quaternion
from .vector3 import ONE, ZERO, Vector3


@dataclass(frozen=True)
class Transform:
    position: Vector3 = ZERO
    rotation: Quaternion = field(default_factory=Quaternion.identity)
    scale: Vector3 = ONE

    @classmethod
    def identity(cls) -> "Transform":
        return cls(ZERO, Quaternion.identity(), ONE)

    def to_matrix(self, scene_scale: float) -> list[list[float]]:
        """4x4 matrix for row vectors; translation is multiplied by scene_scale."""
        matrix = self.rotation.to_matrix()
        for row, factor in zip(matrix[:3], (self.scale.x, self.scale.y, self.scale.z)):
            row[0] *= factor
            row[1] *= factor
            row[2] *= factor
        matrix[3][0] = self.position.x * scene_scale
        matrix[3][1] = self.position.y * scene_scale
        matrix[3][2] = self.position.z * scene_scale
        return matrix

    def inverted(self) -> "Transform":
        """Approximate inverse that treats scale as uniform."""
        scale = self.scale
        uniform_scale = 1.0
        if scale.x != 1.0 or scale.y != 1.0 or scale.z != 1.0:
            uniform_scale = 3.0 / (scale.x + scale.y + scale.z)

        if uniform_scale == 1.0:
            out_scale = scale
        else:
            out_scale = Vector3(1.0 / scale.x, 1.0 / scale.y, 1.0 / scale.z)

        rotation = self.rotation.conjugate()
        position = rotation.rotate(-self.position)
        if uniform_scale != 1.0:
            position = position.scale(1.0 / uniform_scale)

        return Transform(position, rotation, out_scale)

    def transform_point(self, point: Vector3) -> Vector3:
        return self.rotation.rotate(self.scale.multiply(point)) + self.position

    def transform_point_inverse(self, point: Vector3) -> Vector3:
        local = self.transform_point_inverse_no_scale(point)
        return Vector3(local.x / self.scale.x, local.y / self.scale.y, local.z / self.scale.z)

    def transform_point_inverse_no_scale(self, point: Vector3) -> Vector3:
        return self.rotation.conjugate().rotate(point - self.position)

    def concat(self, right: "Transform") -> "Transform":
        """Transform that applies right first, then self."""
        rotated_offset = self.rotation.rotate(right.position)
        return Transform(
            self.position + rotated_offset.multiply(self.scale),
            self.rotation * right.rotation,
            self.scale.multiply(right.scale),
        )

    def lerp(self, other: "Transform", t: float) -> "Transform":
        return Transform(
            self.position.lerp(other.position, t),
            self.rotation.lerp(other.rotation, t),
            self.scale.lerp(other.scale, t),
        )