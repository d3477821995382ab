# rallykit

Building blocks of a rally racing game in plain Python, with no third-party
dependencies: co-driver pace notes, vehicle control and engine state, vertex
data for sky, water, checkpoint rings and rain, and the rules behind the
in-race display and the end credits.

## Modules

- `rallykit.codriver` – `match_notes` turns pace notes such as
  `"hard left over jump"` into vocabulary entries, gluing words together and
  taking the longest run that is known. `CodriverSigns` keeps the signs for
  the current notes, fades them out (`alpha`) and places them in a row
  (`layout`) using a `CodriverUserConfig`. `CodriverVoice` plays the matching
  word samples one after another on a background thread through a player
  callable you supply.
- `rallykit.vehicle` – `CoreType`, `ClipType`, `ControlState` (with
  `set_zero`, `set_default_rates` and `clamp`), `ClipPoint`, `WheelType`,
  `EngineInstance`, and the conversions `mps_to_mph`, `mps_to_kph`,
  `rpm_to_rps` and `rps_to_rpm`.
- `rallykit.geometry` – `Mesh` and the builders `build_sky_mesh`,
  `build_checkpoint_mesh` and `build_water_mesh`, which return interleaved
  vertices and triangle-strip indices.
- `rallykit.effects` – `RainDrop` and `build_rain_mesh`, `snowflake_alpha`,
  `snowflake_transform`, `damage_color`, `checkpoint_color_index` and
  `checkpoint_height`.
- `rallykit.hud` – `course_time_display`, `go_banner_alpha`,
  `countdown_size`, `counter_text`, `gear_label`, `speed_label`, and the end
  credits: `credits_lines`, `credits_scroll`, `credit_line_level`.
- `rallykit.resources` – `Resource` and `ResourceList`, an ordered collection
  with `add`, `find` by name and `clear`.

## Example

```python
from rallykit.codriver import CodriverSigns, match_notes
from rallykit.effects import damage_color
from rallykit.hud import counter_text, gear_label
from rallykit.vehicle import EngineInstance, rpm_to_rps

vocabulary = {"hardleft": "HL", "overjump": "OJ"}
print(match_notes("hard left over jump", vocabulary))   # ['HL', 'OJ']

signs = CodriverSigns(vocabulary)
signs.set("hard left", 0.0)
print(signs.alpha(3.5))          # 0.5: fading after the default 3 s

engine = EngineInstance(min_rps=rpm_to_rps(1000.0))
print(round(engine.engine_rpm()))  # 1000

print(gear_label(-1), counter_text(3, 10, finished=False))  # R 3/10
print(damage_color(0.25))        # (0.5, 1.0, 0.0, 0.5)
```

## What it does not do

rallykit draws nothing and opens no window: the geometry and effect
functions only produce numbers for a renderer to use. It has no physics
simulation, no menus, no command to start a game, and it does not store
players' best times or any other files.

## Tests

```
pip install -e .[test]
pytest
```