"""Bitmap fonts with hashed kerning tables."""

from dataclasses import dataclass
from typing import Sequence, Union

from .vector2s16 import Vector2s16

CharLike = Union[int, str]


def _code(char: CharLike) -> int:
    return ord(char) if isinstance(char, str) else char


@dataclass(frozen=True)
class FontKerning:
    amount: int = 0
    first: int = 0
    second: int = 0


@dataclass(frozen=True)
class FontSymbol:
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0
    xoffset: int = 0
    yoffset: int = 0
    xadvance: int = 0


@dataclass(frozen=True)
class TextureRectangle:
    """A glyph drawn at (x, y) on screen from texel (s, t) of the font texture."""

    x: int
    y: int
    width: int
    height: int
    s: int
    t: int


GFX_PER_SYMBOL = 3


@dataclass
class Font:
    kerning: Sequence[FontKerning]
    symbols: Sequence[FontSymbol]
    base: int
    char_height: int
    symbol_count: int
    kerning_multiplier: int
    kerning_mask: int
    max_collisions: int

    def determine_kerning(self, first: CharLike, second: CharLike) -> int:
        """Kerning adjustment between two characters, 0 when none is stored."""
        first_code = _code(first)
        second_code = _code(second)
        start = (first_code * self.kerning_multiplier + second_code) & self.kerning_mask
        for index in range(start, start + self.max_collisions + 1):
            if index >= len(self.kerning):
                break
            entry = self.kerning[index]
            if entry.amount == 0:
                return 0
            if entry.first == first_code and entry.second == second_code:
                return entry.amount
        return 0

    def _layout(self, message: str, x: int, y: int):
        """Yield (symbol, pen x, pen y) for each drawable character."""
        start_x = x
        prev = 0
        for char in message:
            code = ord(char)
            try:
                if char == "\n":
                    y += self.char_height
                    x = start_x
                    continue
                if code >= self.symbol_count:
                    continue
                symbol = self.symbols[code]
                x += self.determine_kerning(prev, code)
                yield symbol, x, y
                x += symbol.xadvance
            finally:
                prev = code

    def render(self, message: str, x: int, y: int) -> list[TextureRectangle]:
        """Rectangles that draw message with its top-left pen at (x, y)."""
        return [
            TextureRectangle(
                pen_x + symbol.xoffset,
                pen_y + symbol.yoffset,
                symbol.width,
                symbol.height,
                symbol.x,
                symbol.y,
            )
            for symbol, pen_x, pen_y in self._layout(message, x, y)
        ]

    def count_gfx(self, message: str) -> int:
        """Number of display list commands needed to render message."""
        drawable = sum(1 for char in message if char != "\n" and ord(char) < self.symbol_count)
        return drawable * GFX_PER_SYMBOL

    def measure(self, message: str) -> Vector2s16:
        """Width and height in pixels of the rendered message."""
        width = 0
        lines = message.count("\n")
        for symbol, pen_x, _ in self._layout(message, 0, 0):
            width = max(width, pen_x + symbol.xadvance)
        return Vector2s16(width, lines * self.char_height + self.char_height)