# scorpsim

Pure-Python building blocks for a small predator/prey simulation set in a
toric (wrap-around) square world. The package has no runtime dependencies.

## What is inside

- `scorpsim.vec2d`: the `Vec2d` 2D vector. It supports arithmetic (`+`, `-`,
  `*`, `/` and their in-place forms), indexing by axis 0 or 1, and approximate
  equality. Its methods are `length`, `length_squared`, `normalised`, `normal`,
  `angle`, `dot` and `sign`. The module also provides the helpers `distance`
  and `normal`.
- `scorpsim.utility`: unique ids (`create_uid`) and tolerant float comparison
  (`is_equal`). It also has angle differences brought into [-PI, PI)
  (`angle_delta`), string `split`, and grid cell lookup in a wrapping world
  (`vec2d_to_cell_coord`, which returns a `CellCoord`). The rest are
  `count_diff`, `to_nice_string` and `map_erase_if`.
- `scorpsim.constants`: the numeric constants (`PI`, `TAU`, `DEG_TO_RAD`,
  `EPSILON`), default animal and chasing-automaton parameters, and the graph
  titles in `Titles`.
- `scorpsim.json_value`: a minimal JSON value model.
  - Build values with `string`, `number`, `boolean`, `object_` and `array`.
  - Walk nested objects with `get_property`.
  - Objects offer `set`, `has_value`, `remove` and `keys`. Arrays offer `add`,
    `size` and `remove`. Both are indexed with `[]`.
  - Type mismatches raise `BadConversion`. Missing keys or indices raise
    `NoSuchElement`.
- `scorpsim.json_serialiser`: `read_from_string`, `read_from_file`,
  `write_to_string` and `write_to_file`.
  - A malformed payload raises `BadPayload`. A file that cannot be opened
    raises `NoSuchFile`.
  - Strings are read verbatim, with no escape sequences.
  - Written objects have their keys sorted.
- `scorpsim.random_dist`: `uniform` gives integers when both bounds are
  integers. The module also has `uniform_vec`, `normal` (which takes a mean and
  a variance) and `exponential`.
- `scorpsim.arc`: `Arc` computes the vertex strip of a partial circle outline.
  It provides `vertices()` and `local_bounds()`.
- `scorpsim.collider`: `CircularCollider`, a circle in a toric world whose side
  is `world_size` (1000 by default).
  - It provides the shortest wrap-around `direction_to` and `distance_to`.
  - Tests: `is_colliding` (also `a | b`), `is_circular_collider_inside` (also
    `a > b`) and `is_point_inside` (also `a > point`).
  - Movement: `move` (also `+=`).
- `scorpsim.rock`: `Rock`, a collider with a random radius between 1/50 and
  2/50 of the world size and a random `orientation`.
- `scorpsim.graph`: `Graph` holds up to six named time series over a rolling
  window.
  - Feed it with `update_data(seconds, {title: value})`.
  - Export its contents as a tab-separated table with `series_in_string()`.
- `scorpsim.stats`: `Stats` keeps graphs by identifier. Use `add_graph` to
  register one, `focus_on` to switch to a graph by its title, and
  `active_graph` to get the graph in focus.

## Example

```python
from scorpsim.vec2d import Vec2d
from scorpsim.collider import CircularCollider
from scorpsim.json_value import object_, number
from scorpsim.json_serialiser import write_to_string, read_from_string

a = CircularCollider(Vec2d(1, 1), 2)
b = CircularCollider(Vec2d(-1, -1), 2)   # wraps to the far corner
print(a.is_colliding(b))                  # True: the world is toric

cfg = object_()
cfg.set("size", number(1000))
assert read_from_string(write_to_string(cfg)) == cfg
```

## What it does not do

This is a library only:

- It has no command-line program.
- It has no window and draws nothing. `Arc` and `Graph` compute coordinates
  but render none.
- It has no animals, environment or main simulation loop.

Those are left to the application that uses these pieces.

## Running the tests

```
pip install -e .[test]
pytest
```