# sdgame

`sdgame` provides small building blocks for 2D games in plain Python. It
needs nothing outside the standard library.

## What's inside

| Module | Provides |
| --- | --- |
| `sdgame.vector` | `Vector2` and `Vector3`: immutable vectors with `+`, `-`, `*`, `/` (by a vector or a number), `length()`, `normalized()` and `distance()`. `Vector2` also has `rotate()` and `w`/`h` aliases |
| `sdgame.rectangle` | `Rectangle` with `left`, `right`, `top`, `bottom`, `area`, `is_empty()` and `intersects()` |
| `sdgame.mathutil` | `lerp`, `clamp`, `sign`, `mod`, `wrap`, `wrap_vector`, `deg_to_rad`, `rad_to_deg`, `trajectory`, `trajectory_x`, `trajectory_y` and `point_direction` |
| `sdgame.rand` | `Rand`, a seedable random source with `next`, `inext`, `range`, `irange`, `chance` and `choose` |
| `sdgame.color` | `Color` (bytes 0–255) and `FColor` (0.0–1.0); `Color.from_hex`, `from_rgb_string`, `from_rgba_string` and `to_fcolor` |
| `sdgame.vm` | `VM`, a stack of unsigned 32-bit values at most 512 deep |
| `sdgame.timing` | `GameTime` (frame ticks, delta capped at 64 ms), `Chronogram` (stopwatches), `Timer` (ten countdown timers) and `Performance` (named measurements in milliseconds) |
| `sdgame.statemachine` | `StateMachine` and `StateMachineState`, with enter, exit, pause and step callbacks |
| `sdgame.input` | `Key`, `Button`, `EventType`, event classes, and `Keyboard`, `Mouse` and `InputMgr`, which track pressed, held and released state |
| `sdgame.camera` | `Camera2D`: an orthographic view matrix, world bounds and `screen_to_world` |
| `sdgame.spritebatch` | `SpriteBatch`, which collects textured quads, sorts them and groups their vertices into `RenderBatch`es |
| `sdgame.scenes` | `Scene`, `SceneRunner`, `SceneCache` and `SceneMgr` for stacked scenes |
| `sdgame.spritefont` | `SpriteFont` for atlas layout, measuring and drawing bitmap-font text onto a `SpriteBatch` |

## Installation

```
pip install .
```

## Examples

Colours:

```python
from sdgame.color import Color

Color.from_rgb_string("#ff8000")      # Color(r=255, g=128, b=0, a=255)
Color.from_rgba_string("#00000080")   # Color(r=0, g=0, b=0, a=128)
Color.from_hex(0xFF0000FF).to_fcolor()
```

A state machine (changes take effect at the next `update`):

```python
from sdgame.statemachine import StateMachine

machine = StateMachine()
machine.add_state("idle").on_enter(lambda: print("idle"))
machine.add_state("run").on_step(lambda dt, total: None)
machine.start_state("idle")
machine.update(16)   # milliseconds since the last frame
```

Countdown timers driven by a clock you supply:

```python
from sdgame.timing import GameTime, Timer

ticks = iter([10, 40, 70])
game_time = GameTime(clock=lambda: next(ticks))
timer = Timer(game_time)
timer.set(0, 50)
timer.add_listener(0, lambda index: print("timer", index, "finished"))
for _ in range(3):
    game_time.update()
    timer.update()
```

Input from event objects:

```python
from sdgame.input import EventType, InputMgr, Key, KeyboardEvent

inputs = InputMgr()
inputs.process_input([KeyboardEvent(EventType.KEY_DOWN, Key.SPACE)])
inputs.keyboard.key_pressed(Key.SPACE)   # True
inputs.keyboard.is_key_down(Key.SPACE)   # True
```

Batching quads:

```python
from sdgame.color import Color
from sdgame.rectangle import Rectangle
from sdgame.spritebatch import SortOrder, SpriteBatch

batch = SpriteBatch()
batch.begin(sort_order=SortOrder.BACK_TO_FRONT)
batch.draw_rectangle(Rectangle(0, 0, 4, 2), Color(255, 0, 0, 255), depth=1.0)
batch.end()
len(batch.vertices)   # 6: two triangles per quad
```

Scenes:

```python
from sdgame.scenes import Scene, SceneMgr

class Title(Scene):
    pass

scenes = SceneMgr()
scenes.register(Title)
scenes.start(Title)
scenes.update()
scenes.current_scene   # the Title instance
```

## What it does not do

`sdgame` opens no window and talks to no graphics or audio device.
`SpriteBatch` and `Camera2D` produce vertex lists, batches and matrices;
drawing them is left to whatever renderer you use. `SpriteFont` does not
read font files or rasterise glyphs: it lays out glyphs of sizes you give it
(`SpriteFont.from_glyph_sizes`) and queues text on a `SpriteBatch`.
`InputMgr` reads no devices either; you pass it event objects. There is no
tweening or easing module, and no command-line program.

## Running the tests

```
pip install .[test]
pytest
```