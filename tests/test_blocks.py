import pytest

from cubeworld.blocks import (
    ATLAS_FRAMES,
    Block,
    BlockId,
    BlockMeshType,
    Direction,
    MeshInfo,
    Torchlight,
    all_blocks,
    get_block,
)

HORIZONTAL = (Direction.NORTH, Direction.SOUTH, Direction.EAST, Direction.WEST)
ORIGIN = (0, 0, 0)


def test_every_block_id_is_registered():
    blocks = all_blocks()
    assert [b.id for b in blocks] == sorted(BlockId)
    for block_id in BlockId:
        assert get_block(block_id).id is block_id


def test_get_block_accepts_plain_int():
    assert get_block(int(BlockId.STONE)) is get_block(BlockId.STONE)


def test_unknown_block_id_raises():
    with pytest.raises(ValueError):
        get_block(len(BlockId) + 100)


def test_air_has_no_texture():
    air = get_block(BlockId.AIR)
    assert not air.solid and air.transparent
    with pytest.raises(ValueError):
        air.texture_location(ORIGIN, Direction.UP)


def test_every_other_block_has_texture_for_all_faces():
    for block in all_blocks():
        if block.id is BlockId.AIR:
            continue
        for direction in Direction:
            x, y = block.texture_location(ORIGIN, direction)
            assert 0 <= x < ATLAS_FRAMES and 0 <= y < ATLAS_FRAMES


def test_grass_faces():
    grass = get_block(BlockId.GRASS)
    assert grass.texture_location(ORIGIN, Direction.UP) == (0, 0)
    sides = {grass.texture_location(ORIGIN, d) for d in HORIZONTAL}
    assert len(sides) == 1
    assert grass.texture_location(ORIGIN, Direction.DOWN) == get_block(
        BlockId.DIRT
    ).texture_location(ORIGIN, Direction.UP)


@pytest.mark.parametrize("block_id", [BlockId.LOG, BlockId.PINE_LOG])
def test_logs_share_end_texture(block_id):
    log = get_block(block_id)
    up = log.texture_location(ORIGIN, Direction.UP)
    assert log.texture_location(ORIGIN, Direction.DOWN) == up
    assert log.texture_location(ORIGIN, Direction.NORTH) != up


def test_podzol_bottom_is_dirt():
    podzol = get_block(BlockId.PODZOL)
    dirt = get_block(BlockId.DIRT)
    assert podzol.texture_location(ORIGIN, Direction.DOWN) == dirt.texture_location(
        ORIGIN, Direction.NORTH
    )
    assert podzol.texture_location(ORIGIN, Direction.UP) != podzol.texture_location(
        ORIGIN, Direction.EAST
    )


def test_sprites_are_transparent_and_not_solid():
    sprites = [b for b in all_blocks() if b.mesh_type is BlockMeshType.SPRITE]
    assert {b.id for b in sprites} == {
        BlockId.ROSE,
        BlockId.BUTTERCUP,
        BlockId.SHRUB,
        BlockId.TALLGRASS,
    }
    assert all(b.transparent and not b.solid for b in sprites)


def test_liquids():
    liquids = [b for b in all_blocks() if b.liquid]
    assert {b.id for b in liquids} == {BlockId.WATER, BlockId.LAVA}
    for block in liquids:
        assert block.mesh_type is BlockMeshType.LIQUID
        assert block.animated and block.transparent and not block.solid


def test_animation_frames_are_distinct_cells():
    for block in all_blocks():
        frames = block.animation_frames()
        if block.animated:
            assert len(frames) == ATLAS_FRAMES
            assert len(set(frames)) == ATLAS_FRAMES
        else:
            assert frames == ()


def test_lava_frames_share_column_and_water_frames_share_row():
    lava = get_block(BlockId.LAVA).animation_frames()
    water = get_block(BlockId.WATER).animation_frames()
    assert len({x for x, _ in lava}) == 1
    assert len({y for _, y in water}) == 1


def test_water_modifiers():
    water = get_block(BlockId.WATER)
    stone = get_block(BlockId.STONE)
    assert water.gravity_modifier == pytest.approx(0.72)
    assert water.drag > stone.drag


def test_light_emitters():
    for block in all_blocks():
        light = block.torchlight(ORIGIN)
        if block.can_emit_light:
            assert light != Torchlight()
        else:
            assert light == Torchlight()
    assert get_block(BlockId.TORCH).torchlight(ORIGIN) == Torchlight(15, 11, 5, 15)


def test_torchlight_channels_are_validated():
    with pytest.raises(ValueError):
        Torchlight(16, 0, 0, 0)
    with pytest.raises(ValueError):
        Torchlight(0, 0, 0, -1)


def test_aabb_is_unit_cube_at_position():
    pos = (3, -7, 12)
    for block in all_blocks():
        box = block.aabb(pos)
        assert box.min == tuple(float(v) for v in pos)
        assert box.size() == pytest.approx((1.0, 1.0, 1.0))


def test_torch_mesh_fits_inside_block():
    torch = get_block(BlockId.TORCH)
    for direction in Direction:
        info = torch.mesh_information(ORIGIN, direction)
        assert isinstance(info, MeshInfo)
        for offset, size in zip(info.offset, info.size):
            assert 0.0 <= offset and offset + size <= 1.0
    up = torch.mesh_information(ORIGIN, Direction.UP)
    side = torch.mesh_information(ORIGIN, Direction.NORTH)
    assert up.offset == side.offset
    assert up.uv_size != side.uv_size


def test_blocks_without_custom_mesh_raise():
    with pytest.raises(ValueError):
        get_block(BlockId.STONE).mesh_information(ORIGIN, Direction.UP)


def test_default_block_properties():
    block = Block(BlockId.STONE)
    assert block.solid and not block.transparent
    assert block.mesh_type is BlockMeshType.DEFAULT
    assert block.gravity_modifier == block.drag == block.slipperiness