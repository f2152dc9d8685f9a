"""Menus built as trees of UI elements, and a builder that nests them."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from typing import Optional

from .ui_elements import (
    Anchor,
    Button,
    Container,
    DrawMode,
    Element,
    ElementState,
    Grid,
    Label,
    MouseState,
    Panel,
    Position,
    PositionType,
)
from .ui_renderer import UIBatch


class MenuBuildError(RuntimeError):
    """Raised when a menu is built with unbalanced begin/end calls."""


def _descendants(element: Element) -> Iterator[Element]:
    """Every element below ``element``, parents before their children."""
    for child in element.children:
        yield child
        yield from _descendants(child)


class Menu:
    """A tree of UI elements rooted in an invisible container."""

    def __init__(
        self,
        state: ElementState,
        position: Sequence[float],
        dimension: Sequence[float],
        grid: Grid = Grid(),
    ) -> None:
        self._base = Container(state, position, dimension, grid)

    def add_element(self, element: Element) -> None:
        """Attach ``element`` directly under the menu's container."""
        self._base.add_child(element)

    def submit(self, batch: UIBatch) -> None:
        """Submit every element of the menu, parents before children."""
        for element in _descendants(self._base):
            element.submit(batch)

    def update(self, mouse: MouseState) -> None:
        """Update every element of the menu, parents before children."""
        for element in _descendants(self._base):
            element.update(mouse)

    @property
    def container(self) -> Element:
        """The root container holding the menu's elements."""
        return self._base


class MenuBuilder:
    """Builds a menu by opening and closing nested elements.

    Every ``begin_*`` call adds an element under the one currently open and
    opens it in turn; ``end`` closes it.
    """

    def __init__(self) -> None:
        self._stack: list[Element] = []
        self._menu: Optional[Menu] = None

    def create_menu(
        self,
        position: Sequence[float],
        dimension: Sequence[float],
        grid: Grid = Grid(),
    ) -> "MenuBuilder":
        """Start a new menu, discarding any unfinished one."""
        self._menu = Menu(ElementState.NORMAL, position, dimension, grid)
        self._stack = [self._menu.container]
        return self

    def complete_menu(self) -> Menu:
        """Return the built menu; every begun element must have been ended."""
        if len(self._stack) != 1 or self._menu is None:
            raise MenuBuildError(
                "cannot complete menu: elements not correctly ended"
            )
        return self._menu

    def _top(self) -> Element:
        if not self._stack:
            raise MenuBuildError("no open element: create a menu first")
        return self._stack[-1]

    def _open(self, element: Element) -> "MenuBuilder":
        self._top().add_child(element)
        self._stack.append(element)
        return self

    def begin_panel(
        self,
        state: ElementState,
        position: Sequence[float],
        pos_type: PositionType,
        dimension: Sequence[float],
        color: Sequence[float],
        grid: Grid = Grid(),
        anchor: Anchor = Anchor.CC,
    ) -> "MenuBuilder":
        """Open a flat-coloured panel."""
        self._top()
        panel = Panel(
            state,
            Position(pos_type, anchor, position),
            dimension,
            grid,
            color,
            (0.0, 0.0),
            (0.0, 0.0),
            DrawMode.FLAT,
        )
        return self._open(panel)

    def begin_image(
        self,
        state: ElementState,
        position: Sequence[float],
        pos_type: PositionType,
        dimension: Sequence[float],
        tex_pos: Sequence[float],
        tex_dim: Sequence[float],
        grid: Grid = Grid(),
        anchor: Anchor = Anchor.CC,
    ) -> "MenuBuilder":
        """Open a textured panel showing a region of the UI texture."""
        self._top()
        image = Panel(
            state,
            Position(pos_type, anchor, position),
            dimension,
            grid,
            (0.0, 0.0, 0.0, 1.0),
            tex_pos,
            tex_dim,
            DrawMode.TEXTURE,
        )
        return self._open(image)

    def begin_button(
        self,
        state: ElementState,
        position: Sequence[float],
        pos_type: PositionType,
        dimension: Sequence[float],
        callback: Callable[[], None],
        grid: Grid = Grid(),
        anchor: Anchor = Anchor.CC,
    ) -> "MenuBuilder":
        """Open a clickable area."""
        self._top()
        button = Button(
            state, Position(pos_type, anchor, position), dimension, grid, callback
        )
        return self._open(button)

    def begin_text(
        self,
        state: ElementState,
        position: Sequence[float],
        pos_type: PositionType,
        color: Sequence[float],
        text: str,
        grid: Grid = Grid(),
        anchor: Anchor = Anchor.CC,
    ) -> "MenuBuilder":
        """Open a text label."""
        self._top()
        label = Label(state, Position(pos_type, anchor, position), grid, color, text)
        return self._open(label)

    def end(self) -> "MenuBuilder":
        """Close the element opened last."""
        if len(self._stack) <= 1:
            raise MenuBuildError("cannot end: no element is open")
        self._stack.pop()
        return self