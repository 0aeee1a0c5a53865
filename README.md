# pixelplay

Three small games and toys built on pygame: an analogue clock, flappy
block and snake. The package also holds the state and arithmetic behind
several Julia-set fractal viewers.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install ".[test]"
pytest
```

## Games and toys

### Analogue clock

```
pixelplay-clock
```

A 900×900 window with a clock face. It has red, blue and green second,
minute and hour hands, a coloured progress arc for each, and tick marks
for every minute, with longer marks on the hours. The hands do not move
until you press **set system time**. That button sets the clock to the
current local time, and from then on the hands advance once a second.

The logic lives in `pixelplay.clock.ClockFace`:

- `set_time(hours, minutes, seconds)` points the hands at a time.
- `tick()` advances the hands by one second.
- `resize(width, height)` recomputes the centre and radii.
- `second_hand()`, `minute_hand()` and `hour_hand()` return `Segment`
  objects.
- `tick_marks()` returns a list of `Segment`.
- `arcs()` returns a list of `Arc`. Angles are in degrees and run
  counter-clockwise from three o'clock.

### Flappy block

```
pixelplay-flappy
```

Press **Space** to flap. Walls scroll in from the right. Each wall the
block passes adds a point to the score shown at the top. Touching a wall
restarts the game. When a wall scrolls off the left edge, a new one is
added on the right with a randomly placed gap.

The logic is `pixelplay.flappy.FlappyGame`. It takes an optional
`random.Random` for the gap positions. Call `step()` once per frame,
which scrolls, applies gravity, recycles walls, checks collisions and
updates the score. `flap()` gives the block an upward kick. Each wall is
an `Obstacle` with `x`, `gap_top` and `scorable`.

### Snake

```
pixelplay-snake
```

Steer with the arrow keys. The snake cannot reverse onto itself. Eating
the food grows the snake by one cell and scores a point. Leaving the
field ends the game and shows a menu with your score, your best score,
and **Restart** and **Quit** buttons.

The best score is kept in `records.txt` in the current directory. If
`sprites/snake.png` exists, it is used as the sprite sheet. Otherwise the
snake and food are drawn as plain squares. The window can be resized,
and the field follows the window size.

Library pieces:

- `pixelplay.snake.SnakeGame`:
  - `step()` moves the snake, eats, trims, and checks the bounds.
  - `turn(direction)` takes a `Direction`.
  - `move()`, `eat()`, `trim_self_collision()` and `check_bounds()` are
    the individual parts of a step.
  - `resize(width, height)` fits the field to a window size.
  - `sprite_cells()` returns the sprite-sheet offset for every cell.

  When the head runs into its own body more than four cells back,
  everything from that point to the end of the tail is cut off.
- `Block` and `Food` are cells. `Food.random(width, height, rng)` places
  food at a random cell.
- `RecordStore(path)` has `load()` and `update(score)`. `update` keeps
  the higher of the stored record and the score, and returns it.

## Fractal viewer state

These modules hold parameters, input handling and camera state for
Julia-set viewers:

- `pixelplay.fractal_params`:
  - `parse_parameters(texts)` checks the six menu fields (re, im,
    iterations, zoom, x, y). It returns a `FieldCheck` per field, plus a
    `JuliaParameters`, or `None` when a field is invalid.
  - `palette_bytes()` returns the 16-colour RGBA palette.
  - `kernel_inputs(params, mode, width, height)` returns the ten kernel
    inputs.
  - `work_sizes(width, height, local_size)` returns the global and local
    work sizes.
  - `kernel_source_path(mode)` and `background_path(mode)` give the file
    names expected for each `ColorMode`.
- `pixelplay.fractal_view.JuliaExplorer` covers the menu, the timer-driven
  zoom and the window title. Input goes in through `handle_key(key, text)`
  (arrow keys pan, `+`/`-` zoom, Space pauses, Escape returns to the menu,
  and digits followed by Return set the zoom), `press`, `drag` and
  `wheel`. `handle_key` returns `True` when **S** asks for a snapshot.
  Key codes are in `Key`.
- `pixelplay.orbit.OrbitView` is an orbit camera for 3D fractal views. It
  has the `fractal3d()` and `lens()` presets, turns with a mouse drag,
  and moves with W/S. `uniforms(width, height)` returns the shader
  values. `dispatch_groups(width, height)` gives 16×16 work-group counts.
- `pixelplay.animation` has two classes. `ZoomView` is a steadily
  zooming 2D view. `NoiseAnimation` is a time-driven animation that gets
  100 fresh random offsets each frame.
- `pixelplay.assets.copy_folder_contents(source, target, remove_source,
  make_dirs)` copies the visible files of an asset folder into a target
  folder, replacing files that are already there.

## What the package does not do

The fractal modules only compute state and inputs. The package does not
include a renderer, a window or a command for the fractal viewers, and
it ships no GPU kernels, shaders, palette images or menu backgrounds.
The paths from `kernel_source_path` and `background_path` name files you
have to supply yourself. `JuliaExplorer.handle_key` reports a snapshot
request, but nothing in the package writes an image.