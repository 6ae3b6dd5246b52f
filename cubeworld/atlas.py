"""Sprite atlases and the animated block atlas built from an RGBA image."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from cubeworld.blocks import ATLAS_FRAMES, Block, BlockId, all_blocks
from cubeworld.input import TICKRATE

ATLAS_FPS = 6
"""Animation frames shown per second."""

BYTES_PER_PIXEL = 4

IVec2 = tuple[int, int]
Vec2 = tuple[float, float]


def _ivec2(values: Iterable[int], what: str) -> IVec2:
    result = tuple(int(v) for v in values)
    if len(result) != 2:
        raise ValueError(f"{what} needs two components, got {len(result)}")
    if result[0] <= 0 or result[1] <= 0:
        raise ValueError(f"{what} must be positive, got {result}")
    return result  # type: ignore[return-value]


@dataclass(frozen=True)
class Atlas:
    """A texture of ``texture_size`` pixels split into equal sprites.

    Sprite rows are counted from the top of the image while texture
    coordinates have their origin at the bottom.
    """

    texture_size: IVec2
    sprite_size: IVec2
    size: IVec2 = field(init=False)
    sprite_unit: Vec2 = field(init=False)
    pixel_unit: Vec2 = field(init=False)

    def __post_init__(self) -> None:
        texture = _ivec2(self.texture_size, "texture size")
        sprite = _ivec2(self.sprite_size, "sprite size")
        object.__setattr__(self, "texture_size", texture)
        object.__setattr__(self, "sprite_size", sprite)
        object.__setattr__(
            self, "size", (texture[0] // sprite[0], texture[1] // sprite[1])
        )
        object.__setattr__(
            self, "sprite_unit", (sprite[0] / texture[0], sprite[1] / texture[1])
        )
        object.__setattr__(self, "pixel_unit", (1.0 / texture[0], 1.0 / texture[1]))

    def uv(self, pos: Sequence[int]) -> tuple[Vec2, Vec2]:
        """Texture coordinates (min, max) of the sprite at cell ``pos``."""
        x, y = pos
        tw, th = self.texture_size
        sw, sh = self.sprite_size
        px = x * sw
        py = (self.size[1] - y - 1) * sh
        return (px / tw, py / th), ((px + sw) / tw, (py + sh) / th)


class BlockAtlas:
    """Block texture atlas with one pixel buffer per animation frame.

    ``pixels`` is RGBA data, bottom row first, of ``size`` (width, height).
    For each frame, every animated block's sprite for that frame is copied
    over the location of its first frame.
    """

    def __init__(
        self,
        pixels: bytes,
        size: Sequence[int],
        sprite_size: Sequence[int],
        blocks: Optional[Iterable[Block]] = None,
    ) -> None:
        self.size = _ivec2(size, "image size")
        self.sprite_size = _ivec2(sprite_size, "sprite size")
        width, height = self.size
        expected = width * height * BYTES_PER_PIXEL
        if len(pixels) != expected:
            raise ValueError(
                f"expected {expected} bytes of RGBA pixels, got {len(pixels)}"
            )
        self.size_sprites: IVec2 = (
            width // self.sprite_size[0],
            height // self.sprite_size[1],
        )

        animated = [
            block
            for block in (all_blocks() if blocks is None else blocks)
            if block.id != BlockId.AIR and block.animated
        ]

        frames = []
        for i in range(ATLAS_FRAMES):
            buffer = bytearray(pixels)
            for block in animated:
                block_frames = block.animation_frames()
                self._copy_sprite(buffer, block_frames[i], block_frames[0])
            frames.append(bytes(buffer))
        self.frames: tuple[bytes, ...] = tuple(frames)
        self.atlas = Atlas(self.size, self.sprite_size)

    def _sprite_origin(self, cell: Sequence[int]) -> IVec2:
        x, y = cell
        return (
            self.sprite_size[0] * x,
            self.sprite_size[1] * (self.size_sprites[1] - y - 1),
        )

    def _copy_sprite(
        self, buffer: bytearray, source: Sequence[int], target: Sequence[int]
    ) -> None:
        width = self.size[0]
        fx, fy = self._sprite_origin(source)
        tx, ty = self._sprite_origin(target)
        # Only the first channel of each pixel is carried over.
        for j in range(self.sprite_size[1]):
            for i in range(self.sprite_size[0]):
                src = ((fy + j) * width + (fx + i)) * BYTES_PER_PIXEL
                dst = ((ty + j) * width + (tx + i)) * BYTES_PER_PIXEL
                buffer[dst] = buffer[src]

    def frame_index(self, ticks: int) -> int:
        """Animation frame shown at game tick ``ticks``."""
        return (ticks // (TICKRATE // ATLAS_FPS)) % ATLAS_FRAMES

    def frame(self, ticks: int) -> bytes:
        """Pixel data of the frame shown at game tick ``ticks``."""
        return self.frames[self.frame_index(ticks)]