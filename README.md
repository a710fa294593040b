# gameframe

Building blocks for grid-based puzzle games: the math, collision, timing and
game-state pieces that a tile-based game needs. It uses only the standard
library.

## Modules

- `gameframe.vector2`: `Vector2`, a mutable 2D vector with `+`, `-`, `*`, `/`,
  `dot`, `length`, `distance`, `square_length`, `normalized` and `angle`.
- `gameframe.vector3`: `Vector3`, a mutable 3D vector with `+`, `-`, scalar
  `*` and `/`, `dot`, `cross`, `magnitude` (Euclidean length), `normalize`,
  `distance`, and the static helpers `centroid`, `lerp`, `reflect`, `angle` and
  `equal`. Note that `length_square()` (used by `<`, `>`, `length()` and
  `distance()`) adds the z component instead of squaring it; use
  `magnitude()` for the true length.
- `gameframe.mymath`: `deg_to_rad`, `rad_to_deg`, `clamp`, `lerp`,
  `near_zero`, `cot`, `len_seg_on_separate_axis`, and the predicates
  `check_acute_angle`, `check_parallel_relation`, `check_vertical_relation`,
  plus `calc_vector_angle`.
- `gameframe.matrix4`: `Matrix4`, a 4x4 matrix in the row-vector convention
  (translation in the last row). Factories for scale, rotation about x, y and
  z, quaternions, translation, look-at and a simple view-projection; in-place
  `invert()` (raises `ValueError` on a singular matrix); `transform` and
  `transform_with_persp_div`.
- `gameframe.quaternion`: `Quaternion` with `from_axis_angle`, `conjugate`,
  `normalized`, `lerp`, `slerp`, `concatenate`, `create_rotate` and `rotate`.
- `gameframe.transform2`: `Transform2` (location, rotation, scale) and its
  `create_matrix4()`.
- `gameframe.shapes`: `Rect`, `RectPlus`, `Circle`, `Sphere`, `OBB`,
  `Capsule`, and the result records `PointLineShort` and `TwoLineShort`.
- `gameframe.collision2d`: `is_hit_box`, `is_hit_rect`, `is_hit_circle`,
  `is_hit_circle_and_box`.
- `gameframe.collision3d`: plane, AABB, circle and cylinder tests,
  `aabb_short_length`, the separating-axis `obb_collision`, closest points
  between points, lines and segments, and sphere, capsule and OBB tests.
  `sphere_capsule_col` returns `(hit, closest_axis_point)`;
  `obb_sphere_col` and `obb_capsule_col` return the contact point or `None`.
- `gameframe.easing`: `linear` and the in, out and in-out variants of quad,
  cubic, quart, quint, sine, expo and circ, plus `out_elastic`. Each takes
  `(cnt, start, end, frames)`.
- `gameframe.textscan`: `load` and `save` for whole files, and the scanners
  `find_string`, `skip_space`, `get_string`, `get_dec_num` and
  `get_float_num`.
- `gameframe.timing`: `Timer` (seconds between calls, from a microsecond
  clock) and `FpsController`, which sleeps to hold 60 frames per second and
  reports `fps()`. Both accept the clock (and sleep function) to use.
- `gameframe.resources`: `ResourceServer`, which caches image, split-image
  and sound handles by file name. It calls a loader object you supply,
  which must provide `load_graph`, `load_div_graph`, `load_sound_mem`,
  `delete_graph` and `delete_sound_mem`.
- `gameframe.modes`: `ModeBase` and `ModeServer`. Modes sit on layers; adds
  and removals take effect at the next `process_init()`; processing runs from
  the top layer down and rendering from the bottom up, with skip and pause
  controls for the layers below.
- `gameframe.animation`: `AnimationInfo` and `Animation`, frame-table
  animations that yield the image handle to show.
- `gameframe.tilemap`: a 30 x 17 `Map` of `MapChip`s built from a layer's
  `data` array and a chip table read by `load_chip_csv`, with a grid of the
  game objects standing on it.
- `gameframe.objects`: `GameObject`, `Enemy`, and `EnemyTomato`, an enemy
  that walks a route back and forth on every second player step and sets
  the game over when it walks into the player.

## Install

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Examples

```python
from gameframe.vector3 import Vector3
from gameframe import collision2d, easing

a = Vector3(1.0, 2.0, 3.0)
b = Vector3(4.0, 5.0, 6.0)
print(a.dot(b), a.cross(b))

print(collision2d.is_hit_box(0, 0, 10, 10, 5, 5, 10, 10))  # True

print(easing.in_out_quad(30, 0.0, 100.0, 60))  # 50.0, the halfway point
```

A mode starts running after the next call to `process_init`:

```python
from gameframe.modes import ModeBase, ModeServer

server = ModeServer()
server.add(ModeBase(), 1, "title")
server.process_init()
server.process()
server.render()
```

## What it does not do

The package draws nothing, opens no window, reads no controller input and
plays no sound. `ModeBase.render()` only runs the callables in its
`render_hooks`, and images and sounds are loaded only through the loader
you give to `ResourceServer`. There is no command to start a game, no game
loop, no player object and no mode that reads stage files; those are left
to the program built on top of these pieces.