import pytest

from voxelcraft.app import main, picked_block_for_key
from voxelcraft.blocks import BlockType


@pytest.mark.parametrize(
    "digit, block",
    [
        ("1", BlockType.SNOW),
        ("2", BlockType.GRASS),
        ("3", BlockType.WATER),
        ("4", BlockType.GLASS),
        ("5", BlockType.SAND),
        ("6", BlockType.GRAVEL),
        ("7", BlockType.PLANKS),
        ("8", BlockType.BRICKS),
        ("9", BlockType.WOOD),
        ("0", BlockType.LEAVES),
    ],
)
def test_number_keys_pick_blocks(digit, block):
    assert picked_block_for_key(ord(digit)) == block


@pytest.mark.parametrize("symbol", [ord("a"), ord("`"), 0xFF08, -1])
def test_other_keys_pick_nothing(symbol):
    assert picked_block_for_key(symbol) is None


def test_number_keys_cover_distinct_blocks():
    picked = {picked_block_for_key(ord(str(d))) for d in range(10)}
    assert len(picked) == 10
    assert BlockType.AIR not in picked


def test_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--no-such-option"])
    assert info.value.code == 2