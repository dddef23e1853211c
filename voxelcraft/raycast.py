"""Grid traversal used to pick, break and place blocks."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence, Tuple

from .blocks import Block, BlockType
from .chunk import Chunk


@dataclass(frozen=True)
class RaycastHit:
    """The block a ray struck and the face normal it entered through."""

    position: Tuple[int, int, int]
    normal: Tuple[int, int, int]


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def raycast_block(
    chunk: Chunk,
    origin: Sequence[float],
    direction: Sequence[float],
    max_dist: float,
    place: bool,
    picked_block: BlockType,
    textures: Optional[Mapping[BlockType, int]] = None,
) -> Optional[RaycastHit]:
    """Walk the ray through the grid; break or place at the first solid block.

    When ``place`` is true the picked block is put against the struck face if
    that cell is inside the chunk; otherwise the struck block becomes air.
    Returns the hit, or None when nothing solid lies within ``max_dist``.
    """
    textures = textures or {}
    origin = [float(c) for c in origin]
    direction = [float(c) for c in direction]
    if len(origin) != 3 or len(direction) != 3:
        raise ValueError("origin and direction need three components")

    ray_step = [_sign(d) for d in direction]
    delta = [abs(1.0 / d) if d != 0 else math.inf for d in direction]
    current = [math.floor(c) for c in origin]

    ray_dist = []
    for o, d, s, c in zip(origin, direction, ray_step, current):
        if s > 0:
            ray_dist.append((c + 1 - o) / d)
        elif s < 0:
            ray_dist.append((o - c) / -d)
        else:
            ray_dist.append(math.inf)

    step = [0, 0, 0]
    t = 0.0
    while t < max_dist:
        position = (current[0], current[1], current[2])
        if chunk.is_inside(position) and not chunk.get_block(position).is_air():
            normal = (-step[0], -step[1], -step[2])
            if place:
                target = tuple(p + n for p, n in zip(position, normal))
                if chunk.is_inside(target):
                    chunk.set_block(target, Block(picked_block, textures.get(picked_block, 0)))
            else:
                chunk.set_block(position, Block(BlockType.AIR, 0))
            return RaycastHit(position, normal)

        axis = min(range(3), key=lambda a: ray_dist[a])
        nearest = ray_dist[axis]
        ray_dist[axis] += delta[axis]
        step = [0, 0, 0]
        step[axis] = ray_step[axis]
        current[axis] += ray_step[axis]
        t = nearest

    return None