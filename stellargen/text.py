"""Glyph metrics, fonts and batching of text into textured quads."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Character:
    """Metrics of one glyph.

    ``u``, ``v``, ``w`` and ``h`` locate the glyph in the texture atlas;
    ``width`` and ``height`` are its size in pixels; ``advance`` is the
    horizontal step to the next glyph in 1/64 pixel.
    """

    u: float = 0.0
    v: float = 0.0
    w: float = 0.0
    h: float = 0.0
    width: int = 0
    height: int = 0
    bearing_x: int = 0
    bearing_y: int = 0
    advance: int = 0


_EMPTY_CHARACTER = Character()


class Font:
    """A set of glyphs sharing one line height."""

    _CHAR_PX_SPACE = 2

    def __init__(self, characters: Mapping[str, Character], height: int) -> None:
        self._characters = dict(characters)
        self.height = height

    def get_char(self, char: str) -> Character:
        """Metrics of ``char``; an unknown character has all-zero metrics."""
        return self._characters.get(char, _EMPTY_CHARACTER)

    @classmethod
    def char_px_space(cls) -> int:
        """Pixels of padding between glyphs in the atlas."""
        return cls._CHAR_PX_SPACE


@dataclass(frozen=True)
class TextVertex:
    """One corner of a glyph quad: position, colour and texture coordinates."""

    x: float
    y: float
    z: float
    r: float
    g: float
    b: float
    a: float
    u: float
    v: float


def _quad_indices(base: int) -> list[int]:
    return [base, base + 1, base + 2, base + 2, base + 3, base]


class TextBatch:
    """Accumulates text as quads (four vertices, six indices per glyph)."""

    def __init__(self, font: Font) -> None:
        self.font = font
        self._vertices: list[TextVertex] = []
        self._indices: list[int] = []

    def submit_text(
        self,
        text: str,
        position: Sequence[float],
        r: float,
        g: float,
        b: float,
        a: float = 1.0,
    ) -> None:
        """Append the quads of ``text``, starting at ``position`` (x, y, z).

        A newline returns to the start x and moves down one font height.
        """
        px, py, pz = position
        cursor_x = 0.0
        cursor_y = 0.0
        for ch in text:
            if ch == "\n":
                cursor_x = 0.0
                cursor_y -= self.font.height
                continue
            c = self.font.get_char(ch)
            x = px + cursor_x + c.bearing_x
            y = py + cursor_y - c.height + c.bearing_y
            base = len(self._vertices)
            self._vertices.extend(
                (
                    TextVertex(x, y, pz, r, g, b, a, c.u, c.v + c.h),
                    TextVertex(x + c.width, y, pz, r, g, b, a, c.u + c.w, c.v + c.h),
                    TextVertex(x + c.width, y + c.height, pz, r, g, b, a, c.u + c.w, c.v),
                    TextVertex(x, y + c.height, pz, r, g, b, a, c.u, c.v),
                )
            )
            self._indices.extend(_quad_indices(base))
            cursor_x += c.advance >> 6

    def reset(self) -> None:
        """Discard every submitted glyph."""
        self._vertices.clear()
        self._indices.clear()

    @property
    def char_count(self) -> int:
        """Number of glyph quads in the batch."""
        return len(self._vertices) // 4

    @property
    def vertices(self) -> tuple[TextVertex, ...]:
        """All vertices, four per glyph."""
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        """Triangle indices, six per glyph."""
        return tuple(self._indices)