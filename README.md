# marioworld

The game logic of a small side-scrolling platformer. It covers geometry, collision tests, level outlines read from SVG, sprite-sheet frame bookkeeping, a following camera, collectable items and the player's avatar. It has no dependencies outside the standard library.

## Modules

- `marioworld.geometry`: the dataclasses `Point2f`, `Vector2f`, `Rectf`, `Circlef`, `Ellipsef`, `Color4f` and `Window`.
  - `Vector2f` supports `+`, `-`, scalar `*` and `/`, `dot`, `cross`, `length`, `normalized`, `orthogonal`, `reflect` and `angle_with`. Its `==` compares within 0.001.
  - `Point2f + Vector2f` gives a point. `Point2f - Point2f` gives a vector.
  - `Rectf.vertices()` returns the four corners counter-clockwise, starting at the bottom left.
- `marioworld.matrix`: `Matrix2x3`, a 2D affine transform.
  - Build one with `identity()`, `rotation(degrees)`, `scaling(...)` or `translation(...)`.
  - Apply it with `transform_point`, `transform_vector`, `transform_rect` or `transform_polygon`.
  - `m1 * m2` composes two transforms. `inverse()` raises `ZeroDivisionError` for a singular matrix.
- `marioworld.collision`: overlap and intersection tests.
  - Overlap: `rects_overlap`, `circles_overlap`, `rect_overlaps_circle`, `polygon_overlaps_circle`, `segment_overlaps_rect` and `segment_overlaps_circle`.
  - Containment: `is_point_in_rect`, `is_point_in_circle` and `is_point_in_polygon`.
  - Segments: `intersect_line_segments`, `intersect_rect_line`, `dist_point_line_segment` and `is_point_on_line_segment`.
  - `raycast(vertices, p1, p2)` casts a ray against a closed polygon. It returns the nearest `HitInfo` (`fraction`, `intersect_point`, `normal`), or `None` when nothing is hit.
  - `clamp(value, low, high)` limits a value to a range.
- `marioworld.svg`: reads polygons from the `<path>` elements of an SVG.
  - Path data may use only the `M`, `L`, `H`, `V` and `Z` commands, absolute or relative.
  - `vertices_from_svg_file(path)` flips y using the `viewBox` height, so that y points up.
  - Malformed or unsupported content raises `SvgError`, a subclass of `ValueError`. Bézier curves are rejected.
  - `vertices_from_svg_string`, `vertices_from_path_data`, `element_contents`, `attribute_value` and `remove_spaces` are also available.
- `marioworld.sprite`: `Sprite`, the frame state of a `cols` × `rows` sheet whose pixel size you supply.
  - `update(elapsed_sec)` advances at most one frame per call.
  - `skip_frames` and `set_current_frame` wrap around the sheet.
  - `source_rect()` and `bounds(pos, scale)` give the rectangles of the current frame.
- `marioworld.camera`: `Camera(width, height)`.
  - `position(target)` centres on the target and clamps the view to the level boundaries set with `set_level_boundaries`.
  - The offset used to centre is a quarter of the view size, because the scene is meant to be drawn at twice its size.
- `marioworld.pickups`: `PickUp`, plus `Coin`, `YoshiCoin` and `Mushroom`.
  - Each item is built from a position and the pixel size of its sheet.
  - `overlapping_check(avatar_shape)` reports a touch and drops the item's sprite.
  - A `Mushroom` in state `MushroomState.SPAWNING` rises slowly.
- `marioworld.powerups`: `PowerUp`, `PowerUpType` and `PowerUpManager`.
  - `add_item`, `update` and `hit_item` are available, and the manager supports `len()` and iteration.
  - `hit_item` removes the first power-up that overlaps the given rectangle.
  - A power-up's hit box is an empty rectangle at the origin unless one is passed in.
- `marioworld.avatar`: `Avatar`, the player character.
  - Its input each tick is a collection of pressed `Key` values: `LEFT`, `RIGHT`, `UP`, `DOWN`, `X` to run and `Z` to jump.
  - It moves through states given by `MarioState`: idle, walking, running, jumping, run-jumping, falling and changing direction.
  - `select_frame(keys)` picks the sprite frame for the current state.

## Install

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Examples

```python
from marioworld.geometry import Point2f, Rectf
from marioworld.collision import raycast, rects_overlap

ground = [Point2f(0, 0), Point2f(0, 10), Point2f(100, 10), Point2f(100, 0)]
hit = raycast(ground, Point2f(50, 20), Point2f(50, 5))
if hit is not None:
    print(hit.intersect_point)   # Point2f(x=50.0, y=10.0)

print(rects_overlap(Rectf(0, 0, 10, 10), Rectf(5, 5, 10, 10)))   # True
```

An `Avatar` needs a level object. That object provides `is_on_ground(shape, velocity)`, `is_hitting_wall(shape, velocity)` and `handle_collision(shape, velocity)`. The last of these may change the shape and the velocity in place.

```python
from marioworld.avatar import Avatar, Key

class FlatGround:
    def is_on_ground(self, shape, velocity):
        return shape.bottom <= 0

    def is_hitting_wall(self, shape, velocity):
        return False

    def handle_collision(self, shape, velocity):
        if shape.bottom < 0:
            shape.bottom = 0
            velocity.y = 0

avatar = Avatar()
avatar.update(1 / 60, FlatGround(), {Key.RIGHT})
print(avatar.state)   # MarioState.WALKING
```

## What the package does not do

- It draws nothing, plays no sound and opens no window. There is no game loop and no command to start a game.
- Sprites never load image files. You give each sheet's pixel size yourself.
- There is no level or terrain class. Pass your own object with the three methods shown above, and fill it with polygons from, for example, `vertices_from_svg_file`.

## Tests

```
pytest
```