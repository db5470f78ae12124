"""Splitting an image copy into texture tiles that fit texture memory."""

from dataclasses import dataclass

MAX_TILE_X = 64
MAX_TILE_Y = 32
BYTES_PER_PIXEL = 2


@dataclass(frozen=True)
class ImageTile:
    """One tile: a region of the source image and where it lands on screen."""

    source_x: int
    source_y: int
    source_offset: int
    dest_x: int
    dest_y: int
    width: int
    height: int


def _ceil_div(value: int, divisor: int) -> int:
    return max(0, -(-value // divisor))


def copy_image_tiles(
    image_width: int,
    image_height: int,
    sx: int,
    sy: int,
    dx: int,
    dy: int,
    width: int,
    height: int,
    screen_width: int,
) -> list[ImageTile]:
    """Tiles needed to copy a width x height region of a 16-bit image to (dx, dy).

    Tiles are clipped against the top, left and right of the screen. The
    source offset is a byte offset into the image.
    """
    if dy < 0:
        height += dy
        sy -= dy
        dy = 0

    if height <= 0:
        return []

    tiles: list[ImageTile] = []
    tile_y_count = _ceil_div(height, MAX_TILE_Y)

    for tile_x in range(_ceil_div(width, MAX_TILE_X)):
        curr_x = tile_x * MAX_TILE_X
        tile_width = min(width - curr_x, MAX_TILE_X)
        curr_dx = dx + curr_x

        if curr_dx >= screen_width:
            break
        if curr_dx + tile_width < 0:
            continue
        if curr_dx < 0:
            tile_width += curr_dx
            curr_dx = 0
        if curr_dx + tile_width >= screen_width:
            tile_width = screen_width - curr_dx

        scaled_y = 0
        for tile_y in range(tile_y_count):
            curr_y = tile_y * MAX_TILE_Y
            tile_height = min(height - curr_y, MAX_TILE_Y)
            source_x = sx + curr_x
            source_y = sy + curr_y
            tiles.append(
                ImageTile(
                    source_x=source_x,
                    source_y=source_y,
                    source_offset=(source_x + source_y * image_width) * BYTES_PER_PIXEL,
                    dest_x=curr_dx,
                    dest_y=dy + scaled_y,
                    width=tile_width,
                    height=tile_height,
                )
            )
            scaled_y += tile_height

    return tiles