# reefbeat

The game-logic core of a rhythm-driven underwater fishing game. It holds the
state and rules that a game loop drives. Each part can be used and tested on
its own. The package depends only on the standard library.

## Modules

- `reefbeat.timer`
  - `Timer` is a countdown that you advance with `update(dt)`. It offers
    `remaining()`, `remaining_int()` and `is_finished()`. `tick_tock()` is a
    pendulum that flips every twelve updates and resets to `False` once the
    timer has run out.
  - `RealTimeTimer` is a wall-clock countdown with `start()`, `pause()`,
    `reset()` and `set()`. Its `clock` argument defaults to `time.monotonic`,
    and you can replace it in tests.
- `reefbeat.logger`
  - `Severity` has the levels `VERBOSE`, `DEBUG`, `EVENT` and `ERROR`.
  - `Logger` writes lines of the form `[seconds]\tLevel\tmessage` for
    messages at or above its minimum severity. It writes to a file (by
    default `Trace.log`) or, with `use_console=True`, to standard output.
    It has `error()`, `event()`, `debug()` and `verbose()` shortcuts. It
    works as a context manager and closes its file on exit.
- `reefbeat.object_types`
  - `GameObjectType` lists the kinds of world objects.
  - `is_pixel_shader_applicable()` tells whether a kind is drawn with the
    pixelate shader. At present no kind is.
- `reefbeat.save`
  - `SaveData` and `ModuleData` hold the saved game state.
  - `serialize_save()` produces compact JSON. It leaves out the transient
    `"Boss E Trigger"` event.
  - `deserialize_save()` parses that JSON. Fields that are absent or of the
    wrong kind keep their defaults. It raises `ValueError` on text that is
    not a JSON object, and on wrongly typed required fields.
  - `load_text()` reads a file as UTF-8. `default_save_data()` returns the
    state of a fresh game.
  - `SaveDataManager` loads and saves one file:
    - `load()` returns `True` when it read an existing file. When the file
      is missing, it writes a default save and returns `False`.
    - An optional `on_events_loaded` callback receives the completed events
      after a load.
- `reefbeat.boss`
  - `load_boss_config()` reads a boss pattern file into `BossConfig`, with
    `EntryData` steps.
  - `boss_file()` maps a `BossName` to its configuration path. `BossType`
    names the boss behaviours.
  - `entry_state_for_bar()` picks the entry state for a bar. It returns
    `None` to keep the current state and raises `IndexError` once the fight
    is over.
  - `chase_step()` and `lerp()` are movement helpers.
- `reefbeat.dialog`
  - `DialogBook` holds dialog lines grouped by id, as `(character, text)`
    pairs. `DialogBook.from_file()` and `load_dialog_book()` read it from
    JSON. A text given as a list gets one entry picked at random.
  - `Dialog` reveals lines one character at a time:
    - `load_group()` plays every line of a group.
    - `load_random()` plays one line picked from a group.
    - `next_line()` finishes the current line or moves to the next one.
    - `hide()` closes the dialog.
- `reefbeat.fishery`
  - `read_fish_csv()` reads the species table into `FishDex` entries.
  - `FishBook` offers prices (`money_for()`) and weighted picks
    (`pick_index()`).
  - `FishSpawner.update()` advances a spawn timer. When a fish should
    appear, it returns a `SpawnPlan`. `FISH3` fish bring followers placed
    by one of the `FORMATIONS`.
- `reefbeat.render_math`
  - `circle_line_positions()` gives the points of a circle outline.
  - `quad_uv()` gives the UV rectangle of a sprite frame.
  - `post_process_passes()` lists the `ShaderPass` steps for a game state
    (`"Mode1"`, `"Mode2"`, `"Title"`).

## Example

```python
from reefbeat.save import SaveData, serialize_save, deserialize_save
from reefbeat.timer import Timer

data = SaveData(day=3, money=120)
data.fish_collection[0] = 5
restored = deserialize_save(serialize_save(data))
assert restored.money == 120
assert restored.fish_collection == {0: 5}

timer = Timer(2.0)
timer.update(0.5)
print(timer.remaining())  # 1.5
```

## What it does not do

The package has no window, no game loop, no drawing and no audio. It does
not collect or order draw calls by layer, and it has no command-line
program. `render_math` and the spawn plans describe what to draw or create.
The game that uses the package does the drawing and the creating.

## Tests

```
pip install -e .[test]
pytest
```