"""Rotation quaternions."""

import math
from dataclasses import dataclass

from .mathf import Random
from .vector2 import Vector2
from .vector3 import FORWARD, RIGHT, UP, Vector3


@dataclass(frozen=True)
class Quaternion:
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    @classmethod
    def identity(cls) -> "Quaternion":
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def axis_angle(cls, axis: Vector3, angle: float) -> "Quaternion":
        """Rotation of angle radians about a unit axis."""
        sin_theta = math.sin(angle * 0.5)
        cos_theta = math.cos(angle * 0.5)
        return cls(axis.x * sin_theta, axis.y * sin_theta, axis.z * sin_theta, cos_theta)

    @classmethod
    def euler_angles(cls, angles: Vector3) -> "Quaternion":
        """Rotation about x, then y, then z, by the components of angles."""
        about_x = cls.axis_angle(RIGHT, angles.x)
        about_y = cls.axis_angle(UP, angles.y)
        about_z = cls.axis_angle(FORWARD, angles.z)
        return about_z * (about_y * about_x)

    @classmethod
    def axis_complex(cls, axis: Vector3, complex_value: Vector2) -> "Quaternion":
        """Rotation about axis by the angle held in a unit complex number."""
        sin_theta = 0.5 - complex_value.x * 0.5
        if sin_theta < 0.0:
            sin_theta = 0.0
        else:
            sin_theta = math.sqrt(sin_theta)
            if complex_value.y < 0.0:
                sin_theta = -sin_theta

        cos_theta = 0.5 + complex_value.x * 0.5
        cos_theta = 0.0 if cos_theta < 0.0 else math.sqrt(cos_theta)

        return cls(axis.x * sin_theta, axis.y * sin_theta, axis.z * sin_theta, cos_theta)

    @classmethod
    def look(cls, look_dir: Vector3, up: Vector3) -> "Quaternion":
        """Rotation that points -z along look_dir with y as close to up as possible."""
        z_dir = -look_dir.normalized()
        y_dir = up.add_scaled(z_dir, -z_dir.dot(up)).normalized()
        x_dir = y_dir.cross(z_dir)

        trace = x_dir.x + y_dir.y + z_dir.z
        if trace > 0:
            root = math.sqrt(trace + 1.0) * 2.0
            inv = 1.0 / root
            return cls(
                (y_dir.z - z_dir.y) * inv,
                (z_dir.x - x_dir.z) * inv,
                (x_dir.y - y_dir.x) * inv,
                0.25 * root,
            )
        if x_dir.x > y_dir.y and x_dir.x > z_dir.z:
            root = math.sqrt(1.0 + x_dir.x - y_dir.y - z_dir.z) * 2.0
            inv = 1.0 / root
            return cls(
                0.25 * root,
                (y_dir.x + x_dir.y) * inv,
                (z_dir.x + x_dir.z) * inv,
                (y_dir.z - z_dir.y) * inv,
            )
        if y_dir.y > z_dir.z:
            root = math.sqrt(1.0 + y_dir.y - x_dir.x - z_dir.z) * 2.0
            inv = 1.0 / root
            return cls(
                (y_dir.x + x_dir.y) * inv,
                0.25 * root,
                (z_dir.y + y_dir.z) * inv,
                (z_dir.x - x_dir.z) * inv,
            )
        root = math.sqrt(1.0 + z_dir.z - x_dir.x - y_dir.y) * 2.0
        inv = 1.0 / root
        return cls(
            (z_dir.x + x_dir.z) * inv,
            (z_dir.y + y_dir.z) * inv,
            0.25 * root,
            (x_dir.y - y_dir.x) * inv,
        )

    @classmethod
    def random(cls, rng: Random) -> "Quaternion":
        """A random unit quaternion drawn from rng."""
        x = rng.random_float() - 0.5
        y = rng.random_float() - 0.5
        z = rng.random_float() - 0.5
        w = rng.random_float() - 0.5
        return cls(x, y, z, w).normalized()

    def conjugate(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, self.w)

    def __neg__(self) -> "Quaternion":
        return Quaternion(-self.x, -self.y, -self.z, -self.w)

    def __mul__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        a, b = self, other
        return Quaternion(
            a.w * b.x + a.x * b.w + a.y * b.z - a.z * b.y,
            a.w * b.y + a.y * b.w + a.z * b.x - a.x * b.z,
            a.w * b.z + a.z * b.w + a.x * b.y - a.y * b.x,
            a.w * b.w - a.x * b.x - a.y * b.y - a.z * b.z,
        )

    def __add__(self, other: "Quaternion") -> "Quaternion":
        if not isinstance(other, Quaternion):
            return NotImplemented
        return Quaternion(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def rotate(self, vector: Vector3) -> Vector3:
        """Apply this rotation to a vector."""
        result = self * Quaternion(vector.x, vector.y, vector.z, 0.0) * self.conjugate()
        return Vector3(result.x, result.y, result.z)

    def rotated_bounding_box_size(self, half_box_size: Vector3) -> Vector3:
        """Half extents of the axis-aligned box around a rotated box."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x * x, y * y, z * z
        xy, yz, xz = x * y, y * z, x * z
        xw, yw, zw = x * w, y * w, z * w

        return Vector3(
            abs(1.0 - 2.0 * (yy + zz)) * half_box_size.x
            + abs(2.0 * (xy - zw)) * half_box_size.y
            + abs(2.0 * (xz + yw)) * half_box_size.z,
            abs(2.0 * (xy + zw)) * half_box_size.x
            + abs(1.0 - 2.0 * (xx + zz)) * half_box_size.y
            + abs(2.0 * (yz - xw)) * half_box_size.z,
            abs(2.0 * (xz - yw)) * half_box_size.x
            + abs(2.0 * (yz + xw)) * half_box_size.y
            + abs(1.0 - 2.0 * (xx + yy)),
        )

    def to_matrix(self) -> list[list[float]]:
        """4x4 rotation matrix; row i is the image of the i-th axis."""
        x, y, z, w = self.x, self.y, self.z, self.w
        xx, yy, zz = x * x, y * y, z * z
        xy, yz, xz = x * y, y * z, x * z
        xw, yw, zw = x * w, y * w, z * w

        return [
            [1.0 - 2.0 * (yy + zz), 2.0 * (xy + zw), 2.0 * (xz - yw), 0.0],
            [2.0 * (xy - zw), 1.0 - 2.0 * (xx + zz), 2.0 * (yz + xw), 0.0],
            [2.0 * (xz + yw), 2.0 * (yz - xw), 1.0 - 2.0 * (xx + yy), 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ]

    def normalized(self) -> "Quaternion":
        """Unit quaternion; near-zero input gives the identity."""
        mag_sqr = self.dot(self)
        if mag_sqr < 0.00001:
            return Quaternion.identity()
        inv = 1.0 / math.sqrt(mag_sqr)
        return Quaternion(self.x * inv, self.y * inv, self.z * inv, self.w * inv)

    def lerp(self, other: "Quaternion", t: float) -> "Quaternion":
        """Normalised linear blend along the shorter arc; a cheap slerp."""
        t_inv = 1.0 - t
        if self.dot(other) < 0:
            t = -t
        return Quaternion(
            t_inv * self.x + t * other.x,
            t_inv * self.y + t * other.y,
            t_inv * self.z + t * other.z,
            t_inv * self.w + t * other.w,
        ).normalized()

    def apply_angular_velocity(self, angular_velocity: Vector3, time_step: float) -> "Quaternion":
        """Integrate an angular velocity over one time step."""
        half_step = time_step * 0.5
        velocity = Quaternion(
            angular_velocity.x * half_step,
            angular_velocity.y * half_step,
            angular_velocity.z * half_step,
            0.0,
        )
        return (velocity * self + self).normalized()

    def decompose(self) -> tuple[Vector3, float]:
        """Split into a unit axis and an angle."""
        axis_mag = math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)
        if axis_mag < 0.0001:
            return UP, 0.0
        inv = 1.0 / axis_mag
        axis = Vector3(self.x * inv, self.y * inv, self.z * inv)
        return axis, math.sin(axis_mag) * 2.0

    def dot(self, other: "Quaternion") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w


ZERO_QUATERNION = Quaternion(0.0, 0.0, 0.0, 0.0)