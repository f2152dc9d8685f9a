"""Sprites, sprite sheets, frame animations and sprite batching."""

from __future__ import annotations

from collections.abc import Hashable, Sequence
from dataclasses import dataclass, field


def _tuple(values: Sequence[float], size: int, name: str) -> tuple:
    result = tuple(values)
    if len(result) != size:
        raise ValueError(f"{name} needs {size} components, got {len(result)}")
    return result


@dataclass
class Sprite:
    """A textured rectangle placed in the world."""

    texture_handle: Hashable = None
    position: tuple = (0.0, 0.0, 0.0)
    dimension: tuple = (0.0, 0.0)
    texture_coord: tuple = (0.0, 0.0)
    texture_dim: tuple = (1.0, 1.0)

    def __post_init__(self) -> None:
        self.position = _tuple(self.position, 3, "position")
        self.dimension = _tuple(self.dimension, 2, "dimension")
        self.texture_coord = _tuple(self.texture_coord, 2, "texture_coord")
        self.texture_dim = _tuple(self.texture_dim, 2, "texture_dim")


@dataclass(frozen=True)
class SpriteVertex:
    """One corner of a sprite quad."""

    x: float
    y: float
    z: float
    u: float
    v: float


def quad_vertices(sprite: Sprite) -> list[SpriteVertex]:
    """Corners of a sprite: bottom left, bottom right, top right, top left."""
    x, y, z = sprite.position
    w, h = sprite.dimension
    u, v = sprite.texture_coord
    uw, uh = sprite.texture_dim
    return [
        SpriteVertex(x, y, z, u, v),
        SpriteVertex(x + w, y, z, u + uw, v),
        SpriteVertex(x + w, y + h, z, u + uw, v + uh),
        SpriteVertex(x, y + h, z, u, v + uh),
    ]


class SpriteSheet:
    """Sprites that share one texture, addressed by index."""

    def __init__(self, texture_handle: Hashable) -> None:
        self.texture_handle = texture_handle
        self._sprites: list[Sprite] = []

    def add_sprite(
        self,
        position: Sequence[float],
        dimension: Sequence[float],
        texture_coord: Sequence[float],
        texture_dim: Sequence[float],
    ) -> int:
        """Add a sprite and return its index."""
        self._sprites.append(
            Sprite(self.texture_handle, position, dimension, texture_coord, texture_dim)
        )
        return len(self._sprites) - 1

    def get_sprite(self, index: int) -> Sprite:
        """The sprite at ``index``; raises ``IndexError`` when out of range."""
        if not self.validity(index):
            raise IndexError(f"sprite index {index} out of range")
        return self._sprites[index]

    def validity(self, index: int) -> bool:
        """Whether ``index`` names a sprite of the sheet."""
        return 0 <= index < len(self._sprites)

    def __len__(self) -> int:
        return len(self._sprites)


class SpriteAnimation:
    """Cycles through a range of sprites of a sheet at a fixed frame time."""

    def __init__(
        self, sheet: SpriteSheet, begin_sprite: int, end_sprite: int, frame_time: float
    ) -> None:
        if frame_time <= 0:
            raise ValueError(f"frame time must be positive, got {frame_time}")
        self.sheet = sheet
        self.begin = begin_sprite
        self.end = end_sprite
        self.frame_time = frame_time
        self.current_index = begin_sprite
        self._elapsed = 0

    def update(self, dt: float) -> None:
        """Advance the animation by ``dt`` time units, wrapping at the end."""
        self._elapsed += dt
        while self._elapsed > self.frame_time:
            self.current_index += 1
            if self.current_index > self.end:
                self.current_index = self.begin
            self._elapsed -= self.frame_time

    def current_sprite(self) -> Sprite:
        """The sprite shown at this point of the animation."""
        return self.sheet.get_sprite(self.current_index)


def create_sprite_sheet_quad(
    texture_handle: Hashable,
    texture_width: int,
    texture_height: int,
    quad_dim: Sequence[int],
    sprite_dim: Sequence[float],
) -> SpriteSheet:
    """Cut a texture into a grid of equal cells, row by row."""
    quad_w, quad_h = quad_dim
    if quad_w <= 0 or quad_h <= 0:
        raise ValueError(f"quad dimension must be positive, got {tuple(quad_dim)}")
    sheet = SpriteSheet(texture_handle)
    width = quad_w / texture_width
    height = quad_h / texture_height
    columns = texture_width // quad_w
    rows = texture_height // quad_h
    for j in range(rows):
        for i in range(columns):
            sheet.add_sprite((0.0, 0.0, 0.0), sprite_dim, (i * width, j * height), (width, height))
    return sheet


def create_animation(
    sheet: SpriteSheet, begin_frame: int, end_frame: int, frame_time: float
) -> SpriteAnimation:
    """Animation over frames ``begin_frame``..``end_frame`` (order-insensitive)."""
    if begin_frame > end_frame:
        begin_frame, end_frame = end_frame, begin_frame
    if not sheet.validity(end_frame):
        raise IndexError(f"animation frame {end_frame} out of range")
    return SpriteAnimation(sheet, begin_frame, end_frame, frame_time)


@dataclass
class SpriteBatch:
    """Accumulates sprites of one texture as quads."""

    texture_handle: Hashable
    _vertices: list = field(default_factory=list, repr=False)
    _indices: list = field(default_factory=list, repr=False)

    def submit_sprite(self, sprite: Sprite) -> None:
        """Append a sprite; its texture must be the batch's texture."""
        if sprite.texture_handle != self.texture_handle:
            raise ValueError("a batch cannot hold sprites with a different texture")
        base = len(self._vertices)
        self._vertices.extend(quad_vertices(sprite))
        self._indices.extend([base, base + 1, base + 2, base + 2, base + 3, base])

    def reset(self) -> None:
        """Discard every submitted sprite."""
        self._vertices.clear()
        self._indices.clear()

    @property
    def vertices(self) -> tuple[SpriteVertex, ...]:
        """All vertices, four per sprite."""
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        """Triangle indices, six per sprite."""
        return tuple(self._indices)