# megatex

Building blocks for a small 3D game engine, in pure Python with no
third-party dependencies.

## Modules

- `megatex.mathf`: scalar helpers (`lerp`, `inv_lerp`, `move_towards`,
  `mod`, `floorf`, `ceilf`, `bounce_back_lerp`, `clampf`, `signf`, `sign`,
  `minf`, `maxf`, `float_to_s8norm`, `safe_invert`) and `Random`, a
  deterministic linear congruential generator giving 15-bit values
  (`random_int`, `random_in_range`, `random_in_rangef`, `random_float`).
- `megatex.vector2`: `Vector2`, with arithmetic operators, dot and cross
  products, normalisation, lerp, and complex-number rotation helpers
  (`from_angle`, `complex_mul`, `complex_conj`, `rotate_towards`,
  `rotate90`).
- `megatex.vector3`: `Vector3`, with arithmetic operators, `dot`, `cross`,
  `normalized`, `lerp`, `project`, `project_plane`, `move_towards`,
  `triple_product`, `perp`, component-wise `min`/`max`, `to_s8norm` and
  `eval_barycentric_1d`; constants `RIGHT`, `UP`, `FORWARD`, `ZERO`, `ONE`.
- `megatex.vector4`: `Vector4` with `lerp`.
- `megatex.vector2s16`: `Vector2s16`, signed 16-bit integer vectors
  (components outside that range raise `ValueError`; addition and
  subtraction wrap), with `dot`, `cross`, `falls_between`, and the
  `barycentric` function.
- `megatex.quaternion`: `Quaternion`, built with `identity`, `axis_angle`,
  `euler_angles`, `axis_complex`, `look` or `random`; multiplied with `*`,
  applied to vectors with `rotate`, plus `to_matrix`, `normalized`, `lerp`,
  `apply_angular_velocity`, `decompose` and `rotated_bounding_box_size`.
- `megatex.basis`: `Basis`, three axes from a quaternion, with `rotate` and
  `unrotate`.
- `megatex.transform`: `Transform` (position, rotation, scale applied as
  scale, rotate, translate) with `to_matrix`, `inverted`,
  `transform_point`, `transform_point_inverse`, `concat` and `lerp`.
- `megatex.ray`: `Ray` with `transformed` and `distance_along`.
- `megatex.matrix`: 4x4 matrices as lists of rows: `perspective` (returns
  the matrix and a 16-bit perspective normaliser), `normalized_z_value`,
  `vec3_mul` and `from_basis`.
- `megatex.boxes`: `Box2D` and `Box3D` (`contains_point`, `overlaps`,
  `union`, `union_point`, `support`).
- `megatex.plane`: `Plane` (`from_normal_and_point`, `ray_intersection`,
  which returns `None` for a parallel ray, `point_distance`,
  `project_point`), `Plane2`, `calculate_barycentric_coords` and
  `evaluate_barycentric_coords`.
- `megatex.color`: `Color`, 8-bit RGBA with `lerp` and `*` (channel
  multiply where 255 acts as one, see `mul_channel`); constants `BLACK`,
  `WHITE`, `HALF_TRANSPARENT_BLACK`, `HALF_TRANSPARENT_WHITE`.
- `megatex.font`: `Font` with hashed `FontKerning` tables and
  `FontSymbol` glyphs; `determine_kerning`, `render` (a list of
  `TextureRectangle`), `count_gfx` and `measure`.
- `megatex.image`: `copy_image_tiles`, which splits a copy of a 16-bit
  image region into `ImageTile`s of at most 64x32 pixels, clipped to the
  top, left and right of the screen.
- `megatex.controller`: `Controllers`, holding one `ControllerPad` per
  port with the previous frame kept, for held, pressed and released
  `Button`s and `ControllerDirection`s from the stick or direction pad.
- `megatex.renderstate`: `RenderState`, a fixed-size display-list buffer
  where commands are appended upwards (`emit`, `inline_branch`) and scratch
  memory is reserved downwards (`request_memory`, which raises
  `DisplayListFull` when it would meet the display list); `start_chunk` and
  `end_chunk` move a run of commands into scratch memory.

## Installation

```
pip install .
```

For development, with the test dependencies:

```
pip install -e ".[test]"
pytest
```

## Example

```python
from math import pi

from megatex.mathf import Random, lerp
from megatex.quaternion import Quaternion
from megatex.vector3 import RIGHT, UP

turn = Quaternion.axis_angle(UP, pi / 2)
print(turn.rotate(RIGHT))  # about (0, 0, -1)

rng = Random(1)
print(rng.random_in_range(0, 10))
print(lerp(0.0, 10.0, 0.25))  # 2.5
```

The vector, quaternion, basis, transform, ray, box, plane and colour types
are frozen dataclasses: operations return new values. `Font`,
`Controllers` and `RenderState` hold state and change in place.

## What this package does not do

It draws nothing and plays nothing. Display-list commands in a
`RenderState` are whatever Python objects the caller emits; `Font.render`
and `copy_image_tiles` only compute rectangles and tiles. `Controllers`
does not read any device: pad readings are passed to
`read_pending_data`. There is no audio, no level loading, no scene and no
game loop or command-line program.