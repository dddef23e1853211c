# voxelcraft

A small first-person voxel sandbox. You start hovering above a 16×16×16 chunk
of blocks: a layer of grass on top, dirt below it, ore-textured dirt further
down and gem-textured stone at the bottom. Fly around, break blocks and build
with a hotbar of ten block types, all under a skybox.

## Installing

```
pip install .
```

The game needs a display with OpenGL 3.3 support.

## Playing

```
voxelcraft
```

The game opens full screen with the mouse captured. Options:

| Option            | Effect                                                        |
|-------------------|---------------------------------------------------------------|
| `--assets DIR`    | Directory holding the `blocks/` and `skybox/` images (default `../assets`) |
| `--windowed`      | Open a 1920×1080 window instead of going full screen           |

If no window can be opened the command prints an error and exits with status 1.

| Input                        | Action                              |
|------------------------------|-------------------------------------|
| Mouse                        | Look around                         |
| Arrow keys                   | Look around                         |
| W / A / S / D                | Move forward / left / back / right  |
| Space / Left Ctrl            | Move up / down                      |
| Left Shift                   | Move twice as fast                  |
| Left click or Backspace      | Break the block under the crosshair |
| Right click or `` ` ``       | Place the selected block            |
| 1 – 0                        | Select the block to place           |

Number keys select: 1 snow, 2 grass, 3 water, 4 glass, 5 sand, 6 gravel,
7 planks, 8 bricks, 9 wood, 0 leaves. Snow is selected at the start.

## Assets

Textures are read from the asset directory, which holds `blocks/<name>.png`
for each block type (for example `blocks/grass.png`; evil stone uses
`blocks/stone.png`) and `skybox/right.bmp`, `left.bmp`, `top.bmp`,
`bottom.bmp`, `front.bmp` and `back.bmp`. A missing or unreadable image leaves
its texture blank. `voxelcraft.textures.texture_path` and
`voxelcraft.skybox.face_paths` give the exact file names.

## Using the pieces

The world logic does not need a window and can be used on its own:

```python
import random
from voxelcraft.blocks import BlockType
from voxelcraft.chunk import Chunk
from voxelcraft.raycast import raycast_block

chunk = Chunk({}, random.Random(0))
hit = raycast_block(chunk, (8.5, 12.0, 8.5), (0.0, -1.0, 0.0), 500.0,
                    True, BlockType.SNOW, {})
print(hit.position, hit.normal)          # (8, 8, 8) (0, 1, 0)
print(chunk.get_block((8, 9, 8)).type)   # BlockType.SNOW
```

- `voxelcraft.chunk.Chunk` holds the blocks; `get_block` and `set_block` raise
  `IndexError` outside the chunk, and `exposed_positions()` yields the solid
  blocks with at least one open face — those are the blocks that get drawn.
- `voxelcraft.raycast.raycast_block` walks the ray through the grid and, on the
  first solid block, either turns it to air or places the picked block against
  the face it hit. It returns a `RaycastHit`, or `None` when nothing solid lies
  within the distance.
- `voxelcraft.camera.Camera` moves and turns from a set of held `Movement`
  controls and mouse motion; `view_matrix()` gives its view matrix.
- `voxelcraft.world.World` ties the camera and chunk together; `interact`
  breaks or places at the block in view.
- `voxelcraft.transforms` has the 4×4 matrix helpers (`perspective`,
  `look_at`, `translate`, `ortho`, `strip_translation`).

## What it does not do

The world is a single chunk. There is no terrain beyond it, no saving or
loading of a world, and no gravity or collision: the camera flies freely.

## Running the tests

```
pip install .[test]
pytest
```