import random

import numpy as np
import pytest

from voxelcraft.blocks import BlockType
from voxelcraft.camera import (
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    STARTING_CAMERA_POSITION,
    Camera,
)
from voxelcraft.chunk import CHUNK_SIZE
from voxelcraft.transforms import translate
from voxelcraft.world import (
    CUBE_VERTICES,
    FAR_PLANE,
    NEAR_PLANE,
    World,
    projection_matrix,
)


def _ndc_depth(matrix, distance):
    clip = matrix @ np.array([0.0, 0.0, -distance, 1.0])
    return clip[2] / clip[3]


def test_projection_maps_near_and_far_planes():
    matrix = projection_matrix(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert _ndc_depth(matrix, NEAR_PLANE) == pytest.approx(-1.0)
    assert _ndc_depth(matrix, FAR_PLANE) == pytest.approx(1.0)


def test_projection_uses_screen_aspect():
    matrix = projection_matrix(SCREEN_WIDTH, SCREEN_HEIGHT)
    assert matrix[1, 1] / matrix[0, 0] == pytest.approx(SCREEN_WIDTH / SCREEN_HEIGHT)


def test_projection_rejects_zero_height():
    with pytest.raises(ValueError):
        projection_matrix(SCREEN_WIDTH, 0)


def test_cube_placed_at_block_position_surrounds_it():
    centre = (3.0, 4.0, 5.0)
    model = translate(centre)
    rows = list(zip(*[iter(CUBE_VERTICES)] * 5))
    assert len(rows) == 36
    for row in rows:
        moved = model @ np.array([row[0], row[1], row[2], 1.0])
        for axis in range(3):
            assert abs(moved[axis] - centre[axis]) == pytest.approx(0.5)
        assert all(c in (0.0, 1.0) for c in row[3:])


def test_new_world_state():
    world = World(rng=random.Random(1))
    assert world.textures == {}
    assert tuple(world.camera.position) == STARTING_CAMERA_POSITION
    assert world.chunk.get_block((0, CHUNK_SIZE // 2, 0)).type == BlockType.GRASS


def _looking_down(world):
    world.camera = Camera((3.5, 12.5, 3.5))
    world.camera.update(set(), 0.0, 890.0, 0.0)
    return world


def test_interact_breaks_surface_block():
    world = _looking_down(World(rng=random.Random(2)))
    hit = world.interact(False, BlockType.SNOW)
    assert hit is not None
    assert hit.position == (3, CHUNK_SIZE // 2, 3)
    assert hit.normal == (0, 1, 0)
    assert world.chunk.get_block(hit.position).is_air()


def test_interact_places_on_struck_face():
    world = _looking_down(World(rng=random.Random(2)))
    hit = world.interact(True, BlockType.SNOW)
    assert hit is not None
    above = tuple(p + n for p, n in zip(hit.position, hit.normal))
    assert world.chunk.get_block(above).type == BlockType.SNOW
    assert world.chunk.get_block(hit.position).type == BlockType.GRASS


def test_interact_misses_when_looking_away():
    world = World(rng=random.Random(3))
    before = list(world.chunk.exposed_positions())
    assert world.interact(False, BlockType.SNOW) is None
    assert list(world.chunk.exposed_positions()) == before