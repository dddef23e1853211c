"""Block kinds and the block value stored in a chunk."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class BlockType(IntEnum):
    """Every kind of block, in a fixed order that other modules rely on."""

    AIR = 0

    SNOW = 1
    GRASS = 2
    DIRT = 3
    WOOD = 4
    PLANKS = 5
    BRICKS = 6
    STONE = 7
    IRON = 8
    COAL = 9
    GOLD = 10
    DIAMOND = 11
    EMERALD = 12
    EVIL_STONE = 13

    WHITE = 14
    ORANGE = 15
    MAGENTA = 16
    LIGHT_BLUE = 17
    YELLOW = 18
    LIME = 19
    GREEN = 20
    CYAN = 21
    BLUE = 22
    PURPLE = 23
    PINK = 24
    GRAY = 25
    LIGHT_GRAY = 26
    BROWN = 27
    BLACK = 28
    RED = 29

    SAND = 30
    GRAVEL = 31

    GLASS = 32
    LEAVES = 33

    WATER = 34
    LAVA = 35


@dataclass(frozen=True)
class Block:
    """A block: its kind and the texture it is drawn with."""

    type: BlockType = BlockType.AIR
    texture_id: int = 0

    def is_air(self) -> bool:
        """Return True if this block is empty space."""
        return self.type == BlockType.AIR