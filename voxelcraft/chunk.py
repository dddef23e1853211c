"""A fixed-size cube of blocks with layered terrain."""

from __future__ import annotations

import random
from typing import Iterator, Mapping, Optional, Sequence, Tuple

from .blocks import Block, BlockType

CHUNK_SIZE = 16

Position = Tuple[int, int, int]

_NEIGHBOUR_OFFSETS = (
    (0, 1, 0),
    (0, -1, 0),
    (-1, 0, 0),
    (1, 0, 0),
    (0, 0, -1),
    (0, 0, 1),
)


def random_block_type(rng: random.Random, start: int, end: int) -> BlockType:
    """Pick a block type uniformly from the half-open range [start, end)."""
    if end <= start:
        raise ValueError(f"empty block range [{start}, {end})")
    return BlockType(rng.randrange(start, end))


class Chunk:
    """A CHUNK_SIZE cube of blocks, indexed by (x, y, z)."""

    size = CHUNK_SIZE

    def __init__(
        self,
        textures: Optional[Mapping[BlockType, int]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        textures = textures or {}
        rng = rng or random.Random()

        def texture(kind: BlockType) -> int:
            return textures.get(kind, 0)

        half = CHUNK_SIZE // 2
        self._blocks = []
        for _x in range(CHUNK_SIZE):
            column = []
            for y in range(CHUNK_SIZE):
                row = []
                for _z in range(CHUNK_SIZE):
                    if y > half:
                        block = Block(BlockType.AIR, 0)
                    elif y > half - 1:
                        block = Block(BlockType.GRASS, texture(BlockType.GRASS))
                    elif y > half - 3:
                        block = Block(BlockType.DIRT, texture(BlockType.DIRT))
                    elif y > half - 6:
                        ore = random_block_type(rng, BlockType.STONE, BlockType.GOLD + 1)
                        block = Block(BlockType.DIRT, texture(ore))
                    else:
                        gem = random_block_type(rng, BlockType.DIAMOND, BlockType.EVIL_STONE + 1)
                        block = Block(BlockType.STONE, texture(gem))
                    row.append(block)
                column.append(row)
            self._blocks.append(column)

    def is_inside(self, pos: Sequence[int]) -> bool:
        """Return True if ``pos`` lies within the chunk."""
        return all(0 <= int(c) < CHUNK_SIZE for c in pos)

    def _check(self, pos: Sequence[int]) -> Position:
        x, y, z = (int(c) for c in pos)
        if not self.is_inside((x, y, z)):
            raise IndexError(f"position {(x, y, z)} is outside the chunk")
        return x, y, z

    def get_block(self, pos: Sequence[int]) -> Block:
        """Return the block at ``pos``."""
        x, y, z = self._check(pos)
        return self._blocks[x][y][z]

    def set_block(self, pos: Sequence[int], block: Block) -> None:
        """Replace the block at ``pos``."""
        x, y, z = self._check(pos)
        self._blocks[x][y][z] = block

    def _is_open(self, x: int, y: int, z: int) -> bool:
        if not self.is_inside((x, y, z)):
            return True
        return self._blocks[x][y][z].is_air()

    def exposed_positions(self) -> Iterator[Position]:
        """Yield positions of solid blocks with at least one open face."""
        for x, plane in enumerate(self._blocks):
            for y, row in enumerate(plane):
                for z, block in enumerate(row):
                    if block.is_air():
                        continue
                    if any(
                        self._is_open(x + dx, y + dy, z + dz)
                        for dx, dy, dz in _NEIGHBOUR_OFFSETS
                    ):
                        yield (x, y, z)