"""4x4 float matrices for row vectors, stored as lists of four rows."""

from .vector3 import Vector3
from .vector4 import Vector4

SCENE_SCALE = 128


def _identity() -> list[list[float]]:
    return [[1.0 if row == col else 0.0 for col in range(4)] for row in range(4)]


def perspective(
    left: float, right: float, top: float, bottom: float, near: float, far: float
) -> tuple[list[list[float]], int]:
    """Projection matrix for a frustum, and its 16-bit perspective normaliser."""
    matrix = _identity()
    matrix[0][0] = 2.0 * near / (right - left)
    matrix[1][1] = 2.0 * near / (top - bottom)
    matrix[2][0] = (right + left) / (right - left)
    matrix[2][1] = (top + bottom) / (top - bottom)
    matrix[2][2] = -(far + near) / (far - near)
    matrix[2][3] = -1.0
    matrix[3][2] = -2.0 * far * near / (far - near)
    matrix[3][3] = 0.0

    if near + far <= 2.0:
        persp_norm = 0xFFFF
    else:
        persp_norm = int((2.0 * 65536.0) / (near + far)) & 0xFFFF
        if persp_norm <= 0:
            persp_norm = 1

    return matrix, persp_norm


def normalized_z_value(depth: float, near: float, far: float) -> float:
    """Depth mapped to [-1, 1], clamped at the near and far planes."""
    if depth >= -near:
        return -1.0
    if depth <= -far:
        return 1.0
    return (far * (depth + near) + 2.0 * far * near) / (depth * (far - near))


def vec3_mul(matrix: list[list[float]], vector: Vector3) -> Vector4:
    """Multiply a point (w = 1) by the matrix."""
    x, y, z = vector.x, vector.y, vector.z
    return Vector4(
        *(matrix[0][col] * x + matrix[1][col] * y + matrix[2][col] * z + matrix[3][col] for col in range(4))
    )


def from_basis(
    origin: Vector3, x: Vector3, y: Vector3, z: Vector3, scene_scale: float = SCENE_SCALE
) -> list[list[float]]:
    """Matrix with the given axes and an origin multiplied by scene_scale."""
    return [
        [x.x, x.y, x.z, 0.0],
        [y.x, y.y, y.z, 0.0],
        [z.x, z.y, z.z, 0.0],
        [origin.x * scene_scale, origin.y * scene_scale, origin.z * scene_scale, 1.0],
    ]