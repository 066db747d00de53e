# stagecraft

stagecraft provides building blocks for a small frame-driven game loop. It keeps the state and does the arithmetic. Drawing, file decoding and sound output are left to objects that you supply.

## What is in it

- **`stagecraft.vectors`** holds the frozen value types `Vec2`, `Vec3` and `Color`. `Vec3` has `dot`, `cross`, `length` and `normalized` methods. The module also defines the vertex records `Vertex2D` and `Vertex3D`.
- **`stagecraft.process`** has the helpers `clamp`, `wrap`, `normalize_rot`, `normalize_diff_rot`, `lerp_dest`, `lerp_diff` and `is_in_range`.
- **`stagecraft.objects`**
  - `Scene` keeps objects in fixed-size slots, with one layer per priority. Its `add`, `remove`, `count`, `get` and `is_full` methods manage those slots. `update_all`, `draw_all(canvas)` and `release_all` walk the objects from the lowest priority to the highest.
  - `GameObject` is the abstract base. It registers itself with its scene when it is constructed, and `release()` takes it out again.
- **`stagecraft.motion_file`**
  - `parse_motion_text` and `load_motion_file` read a motion script, which is a set of `KEY = value` lines.
  - The script lists model files (`MODEL_FILENAME`) and a character set, made of `NUM_PARTS` plus `INDEX`, `PARENT`, `POS` and `ROT` for each part.
  - It then holds motion sets, each with `LOOP`, `NUM_KEY`, `FRAME`, and the per-part `POS` and `ROT` values in `KEYSET`/`KEY` blocks.
  - The result is a `MotionData` holding `MotionInfo`, `KeyInfo`, `Key` and `PartSetup` records.
- **`stagecraft.motion`**
  - `Motion` plays those motions frame by frame.
  - `set_motion(type, blend, blend_frames)` switches motion, either at once or with a blend over a number of frames.
  - `update(num_parts)` returns a `Pose` for each part. A finished one-shot motion blends back to motion 0.
- **`stagecraft.number`** provides `NumberSprite`, a quad that shows one digit of a 0–9 texture strip.
- **`stagecraft.word`**
  - `WordSprite` is a quad that shows one letter, given as a `Letter` value, of an A–Z strip.
  - `TestWord` is a scene object that displays a single letter.
- **`stagecraft.score`**
  - `Score` is a nine-digit counter, clamped to the range 0–999 999 999.
  - `ScoreLerper` moves towards a target over `set_dest_score(value, duration)` frames.
  - `create_score` builds either kind, chosen by `ScoreType`.
- **`stagecraft.object2d`** provides `Object2D`, a screen quad that can be rotated, resized, tinted and given UV coordinates.
- **`stagecraft.object3d`**
  - `Object3D` is a world-space quad.
  - `surface_height` and `snap_to_surface` place a point on its surface.
  - An object set as its `follower` is snapped onto the surface on every `update`.
- **`stagecraft.texture_manager` and `stagecraft.model_manager`**
  - `TextureManager` and `ModelManager` load each file once, through a loader function you pass in, and hand out the slot index the file was stored in.
  - Each has a `load(path)` method for list files of `TEXTURE_NAME = file` or `FILENAME = file` entries.
  - `ModelError` reports a model that could not be loaded.
- **`stagecraft.object_x`**
  - `ObjectX` draws a registered model, one subset per material, and can also draw its shadow.
  - `shadow_matrix(light_dir, plane)` builds the planar projection that the shadow uses.
- **`stagecraft.sound`**
  - `find_chunk`, `read_chunk_data` and `load_wave` read RIFF/WAVE files into `WaveData`.
  - `SoundBank` loads the sounds for each `SoundLabel` and tracks which of them are playing, through `play`, `stop`, `stop_all` and `is_playing`.
  - Unreadable files raise `SoundError`.
- **`stagecraft.particle`** provides `Particle3D`, an emitter. Each frame it hands randomly directed effects to a `spawn_effect` callback, and its random generator can be injected.

## Drawing

Objects draw by calling methods on the `canvas` argument that you pass in:

- `canvas.draw_quad(vertices, texture_index)` is used by the 2D sprites, `Object2D` and the score digits.
- `canvas.draw_world_quad(world, vertices, texture_index)` is used by `Object3D`.
- `canvas.draw_subset(world, mesh, subset, material, texture)` is used by `ObjectX`.

Matrices are 4×4 tuples in row-vector convention.

## Example

```python
from stagecraft.motion import Motion
from stagecraft.motion_file import load_motion_file
from stagecraft.objects import Scene
from stagecraft.score import ScoreType, create_score
from stagecraft.vectors import Vec3

scene = Scene(max_objects=256, num_priorities=8)

data = load_motion_file("motionPlayer.txt", max_parts=15, num_motions=5)
motion = Motion(data.motions)
motion.set_motion(1, True, 15)
for _ in range(60):
    poses = motion.update(data.num_parts)

score = create_score(scene, ScoreType.LERPER, Vec3(1150.0, 50.0, 0.0), 180.0, 30.0)
score.set_dest_score(100000, 120)
scene.update_all()
```

## What it does not do

stagecraft has no window, no rendering, no input handling and no audio output. `SoundBank` only records playback state. There is no player character, camera, game mode or command-line program either. Texture and model files are decoded only by the loader functions you give to the managers.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Tests

```
pytest
```