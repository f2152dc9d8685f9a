"""Vertex format and quad batching for user-interface drawing."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .text import Font


@dataclass(frozen=True)
class UIVertex:
    """One corner of a UI quad; ``draw_mode`` selects flat, texture or text."""

    x: float = 0.0
    y: float = 0.0
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0
    u: float = 0.0
    v: float = 0.0
    draw_mode: float = 0.0


class UIBatch:
    """Accumulates UI quads; holds the font that text elements lay out with."""

    def __init__(self, font: Font) -> None:
        self.font = font
        self._vertices: list[UIVertex] = []
        self._indices: list[int] = []

    def submit_quad(self, vertices: Sequence[UIVertex]) -> None:
        """Append one quad given as exactly four vertices."""
        quad = list(vertices)
        if len(quad) != 4:
            raise ValueError(f"a quad needs 4 vertices, got {len(quad)}")
        base = len(self._vertices)
        self._vertices.extend(quad)
        self._indices.extend([base, base + 1, base + 2, base + 2, base + 3, base])

    def reset(self) -> None:
        """Discard every submitted quad."""
        self._vertices.clear()
        self._indices.clear()

    @property
    def quad_count(self) -> int:
        """Number of quads in the batch."""
        return len(self._vertices) // 4

    @property
    def vertices(self) -> tuple[UIVertex, ...]:
        """All vertices, four per quad."""
        return tuple(self._vertices)

    @property
    def indices(self) -> tuple[int, ...]:
        """Triangle indices, six per quad."""
        return tuple(self._indices)