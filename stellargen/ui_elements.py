"""User-interface elements laid out in a tree: containers, panels, buttons, labels."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional

from .text import Font
from .ui_renderer import UIBatch, UIVertex

Vec2 = tuple


def _vec2(values: Sequence[float], name: str) -> tuple[float, float]:
    result = tuple(values)
    if len(result) != 2:
        raise ValueError(f"{name} needs 2 components, got {len(result)}")
    return result


def _vec4(values: Sequence[float], name: str) -> tuple[float, float, float, float]:
    result = tuple(values)
    if len(result) != 4:
        raise ValueError(f"{name} needs 4 components, got {len(result)}")
    return result


class PositionType(Enum):
    """How an element's position is interpreted."""

    ABSOLUTE = "absolute"
    RELATIVE = "relative"
    GRID = "grid"


class Anchor(Enum):
    """Where an element sits inside its grid cell; the value is the (x, y) factor."""

    TL = (0.0, 1.0)
    TC = (0.5, 1.0)
    TR = (1.0, 1.0)
    CL = (0.0, 0.5)
    CC = (0.5, 0.5)
    CR = (1.0, 0.5)
    BL = (0.0, 0.0)
    BC = (0.5, 0.0)
    BR = (1.0, 0.0)


@dataclass
class Position:
    """Position of an element with its interpretation and anchor."""

    type: PositionType = PositionType.ABSOLUTE
    anchor: Anchor = Anchor.CC
    position: tuple = (0.0, 0.0)

    def __post_init__(self) -> None:
        self.position = _vec2(self.position, "position")


@dataclass(frozen=True)
class Grid:
    """Rows and columns an element divides itself into; -1 means no grid."""

    row: int = -1
    column: int = -1

    @classmethod
    def sized(cls, rows: int, columns: int) -> "Grid":
        """A grid with at least one row and one column."""
        return cls(max(rows, 1), max(columns, 1))


class ElementState(Enum):
    """Interaction state of an element."""

    NORMAL = "normal"
    HOVERED = "hovered"
    FOCUSED = "focused"
    PRESSED = "pressed"
    DISABLED = "disabled"


class DrawMode(IntEnum):
    """How a drawable's quads are shaded."""

    FLAT = 0
    TEXTURE = 1
    TEXT = 2


@dataclass(frozen=True)
class MouseState:
    """Mouse position and whether the left button went down this frame."""

    x: float = 0.0
    y: float = 0.0
    left_down: bool = False


class Element:
    """A node of the UI tree with a position, a size and children."""

    def __init__(
        self,
        state: ElementState,
        position: Position,
        dimension: Sequence[float],
        grid: Grid = Grid(),
    ) -> None:
        self.state = state
        self.position = position
        self.dimension = _vec2(dimension, "dimension")
        self.grid = grid
        self.parent: Optional[Element] = None
        self._children: list[Element] = []

    @property
    def children(self) -> tuple["Element", ...]:
        """The element's children in insertion order."""
        return tuple(self._children)

    def add_child(self, child: "Element") -> None:
        """Append ``child`` and make this element its parent."""
        self._children.append(child)
        child.parent = self

    def has_grid(self) -> bool:
        """Whether the element divides itself into a grid."""
        return self.grid.column > 0 and self.grid.row > 0

    def absolute_position(self) -> tuple[float, float]:
        """Position on screen, resolved through the parents."""
        kind = self.position.type
        px, py = self.position.position
        if kind is PositionType.ABSOLUTE:
            return (px, py)
        if kind is PositionType.RELATIVE:
            if self.parent is None:
                return (px, py)
            bx, by = self.parent.absolute_position()
            return (bx + px, by + py)
        if self.parent is None or not self.parent.has_grid():
            return (0.0, 0.0)
        parent_grid = self.parent.grid
        pw, ph = self.parent.dimension
        cell_w = pw / parent_grid.column
        cell_h = ph / parent_grid.row
        bx, by = self.parent.absolute_position()
        base_x = bx + cell_w * px
        base_y = by + cell_h * py
        ax, ay = self.position.anchor.value
        w, h = self.dimension
        return (base_x + ax * (cell_w - w), base_y + ay * (cell_h - h))

    def update(self, mouse: MouseState) -> None:
        """React to input; plain elements do nothing."""

    def submit(self, batch: UIBatch) -> None:
        """Add the element's quads to ``batch``; plain elements draw nothing."""


class Drawable(Element):
    """An element with a colour and a texture region."""

    def __init__(
        self,
        state: ElementState,
        position: Position,
        dimension: Sequence[float],
        grid: Grid,
        color: Sequence[float],
        texture_pos: Sequence[float],
        texture_dim: Sequence[float],
        draw_mode: DrawMode,
    ) -> None:
        super().__init__(state, position, dimension, grid)
        self.color = _vec4(color, "color")
        self.texture_pos = _vec2(texture_pos, "texture_pos")
        self.texture_dim = _vec2(texture_dim, "texture_dim")
        self.draw_mode = DrawMode(draw_mode)


class Container(Element):
    """An invisible element placed at an absolute position."""

    def __init__(
        self,
        state: ElementState,
        position: Sequence[float],
        dimension: Sequence[float],
        grid: Grid = Grid(),
    ) -> None:
        super().__init__(
            state, Position(PositionType.ABSOLUTE, Anchor.TL, position), dimension, grid
        )


class Panel(Drawable):
    """A filled or textured rectangle."""

    def submit(self, batch: UIBatch) -> None:
        x, y = self.absolute_position()
        w, h = self.dimension
        r, g, b, a = self.color
        u, v = self.texture_pos
        uw, uh = self.texture_dim
        mode = float(self.draw_mode)
        batch.submit_quad(
            [
                UIVertex(x, y, r, g, b, a, u, v, mode),
                UIVertex(x + w, y, r, g, b, a, u + uw, v, mode),
                UIVertex(x + w, y + h, r, g, b, a, u + uw, v + uh, mode),
                UIVertex(x, y + h, r, g, b, a, u, v + uh, mode),
            ]
        )


class Button(Element):
    """An invisible clickable area that calls a callback."""

    def __init__(
        self,
        state: ElementState,
        position: Position,
        dimension: Sequence[float],
        grid: Grid,
        callback: Callable[[], None],
    ) -> None:
        super().__init__(state, position, dimension, grid)
        self._callback = callback

    def update(self, mouse: MouseState) -> None:
        """Call the callback when the left button goes down strictly inside."""
        if not mouse.left_down:
            return
        x, y = self.absolute_position()
        w, h = self.dimension
        if x < mouse.x < x + w and y < mouse.y < y + h:
            self._callback()

    def set_on_click(self, callback: Callable[[], None]) -> None:
        """Replace the click callback."""
        self._callback = callback


class Label(Drawable):
    """A line or block of text; its size follows from the font."""

    def __init__(
        self,
        state: ElementState,
        position: Position,
        grid: Grid,
        color: Sequence[float],
        text: str,
    ) -> None:
        super().__init__(
            state, position, (0.0, 0.0), grid, color, (0.0, 0.0), (0.0, 0.0), DrawMode.TEXT
        )
        self.text = text

    def compute_dimension(self, font: Font) -> tuple[float, float]:
        """Width of the widest line and height of the line breaks; stored and returned."""
        max_x = 0.0
        current_x = 0.0
        current_y = 0.0
        for ch in self.text:
            if ch == "\n":
                max_x = max(max_x, current_x)
                current_x = 0.0
                current_y += font.height
            else:
                current_x += font.get_char(ch).advance >> 6
        max_x = max(max_x, current_x)
        self.dimension = (max_x, current_y)
        return self.dimension

    def submit(self, batch: UIBatch) -> None:
        font = batch.font
        self.compute_dimension(font)
        px, py = self.absolute_position()
        r, g, b, a = self.color
        mode = float(DrawMode.TEXT)
        cursor_x = 0.0
        cursor_y = 0.0
        for ch in self.text:
            if ch == "\n":
                cursor_x = 0.0
                cursor_y -= font.height
                continue
            c = font.get_char(ch)
            x = px + cursor_x + c.bearing_x
            y = py + cursor_y - c.height + c.bearing_y
            batch.submit_quad(
                [
                    UIVertex(x, y, r, g, b, a, c.u, c.v + c.h, mode),
                    UIVertex(x + c.width, y, r, g, b, a, c.u + c.w, c.v + c.h, mode),
                    UIVertex(x + c.width, y + c.height, r, g, b, a, c.u + c.w, c.v, mode),
                    UIVertex(x, y + c.height, r, g, b, a, c.u, c.v, mode),
                ]
            )
            cursor_x += c.advance >> 6