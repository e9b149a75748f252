"""The fixed maze the game is played on."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

WALL = "#"
PELLET = "."
POWER_PELLET = "*"
EMPTY = " "
PACMAN_GLYPH = "<"

_LAYOUT = (
    "##########",
    "#........#",
    "#.##.##..#",
    "#.....#..#",
    "#.#.#....#",
    "#.#.##.#.#",
    "#.......*#",
    "#.##.##..#",
    "#........#",
    "##########",
)


class _Positioned(Protocol):
    @property
    def x(self) -> int: ...

    @property
    def y(self) -> int: ...


class _NamedPositioned(_Positioned, Protocol):
    @property
    def name(self) -> str: ...


class GameMap:
    """A 10 by 10 grid of tiles; anything outside the grid counts as wall."""

    WIDTH = 10
    HEIGHT = 10

    def __init__(self) -> None:
        self._grid = [list(row) for row in _LAYOUT]

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.WIDTH and 0 <= y < self.HEIGHT

    def is_wall(self, x: int, y: int) -> bool:
        """Return True for wall tiles and for positions off the grid."""
        if not self._inside(x, y):
            return True
        return self._grid[y][x] == WALL

    def tile(self, x: int, y: int) -> str:
        """Return the tile at a position; off the grid this is a wall."""
        if not self._inside(x, y):
            return WALL
        return self._grid[y][x]

    def set_tile(self, x: int, y: int, tile: str) -> None:
        """Replace a tile; positions off the grid are ignored."""
        if self._inside(x, y):
            self._grid[y][x] = tile

    def render(self, pacman: _Positioned, ghosts: Iterable[_NamedPositioned]) -> str:
        """Draw the grid with Pac-Man and the ghosts on it.

        Each tile is followed by a space and each row by a newline. A ghost
        is drawn with the first letter of its name and covers Pac-Man.
        """
        ghosts = list(ghosts)
        lines = []
        for y, row in enumerate(self._grid):
            cells = []
            for x, glyph in enumerate(row):
                if x == pacman.x and y == pacman.y:
                    glyph = PACMAN_GLYPH
                for ghost in ghosts:
                    if x == ghost.x and y == ghost.y:
                        glyph = ghost.name[0]
                cells.append(glyph + " ")
            lines.append("".join(cells) + "\n")
        return "".join(lines)