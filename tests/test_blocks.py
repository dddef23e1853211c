from voxelcraft.blocks import Block, BlockType


def test_air_is_first_and_lava_last():
    assert BlockType(0) is BlockType.AIR
    assert BlockType(len(BlockType) - 1) is BlockType.LAVA
    assert Block(BlockType(0)).is_air()
    assert not Block(BlockType(len(BlockType) - 1)).is_air()


def test_values_are_contiguous():
    rebuilt = [BlockType(value) for value in range(len(BlockType))]
    assert rebuilt == list(BlockType)


def test_default_block_is_air_without_texture():
    block = Block()
    assert block.type is BlockType.AIR
    assert block.texture_id == 0
    assert block.is_air()


def test_solid_block_is_not_air():
    assert not Block(BlockType.DIRT, 5).is_air()


def test_blocks_compare_by_value():
    assert Block(BlockType.SAND, 3) == Block(BlockType.SAND, 3)
    assert Block(BlockType.SAND, 3) != Block(BlockType.SAND, 4)