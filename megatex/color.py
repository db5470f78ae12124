"""8-bit RGBA colours."""

from dataclasses import dataclass

from .mathf import lerp as _lerp


def mul_channel(a: int, b: int) -> int:
    """Multiply two 8-bit channels so that 255 acts as one."""
    combined = ((a + 1) * (b + 1)) >> 8
    return (combined - 1) & 0xFF if combined else 0


@dataclass(frozen=True)
class Color:
    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 255

    def lerp(self, other: "Color", t: float) -> "Color":
        """Blend towards other, truncating each channel."""
        return Color(
            int(_lerp(self.r, other.r, t)) & 0xFF,
            int(_lerp(self.g, other.g, t)) & 0xFF,
            int(_lerp(self.b, other.b, t)) & 0xFF,
            int(_lerp(self.a, other.a, t)) & 0xFF,
        )

    def __mul__(self, other: "Color") -> "Color":
        if not isinstance(other, Color):
            return NotImplemented
        return Color(
            mul_channel(self.r, other.r),
            mul_channel(self.g, other.g),
            mul_channel(self.b, other.b),
            mul_channel(self.a, other.a),
        )


BLACK = Color(0, 0, 0, 255)
WHITE = Color(255, 255, 255, 255)
HALF_TRANSPARENT_BLACK = Color(0, 0, 0, 128)
HALF_TRANSPARENT_WHITE = Color(255, 255, 255, 128)