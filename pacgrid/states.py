"""Ghost behaviours: how a ghost picks its next step."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Protocol

from pacgrid.board import GameMap
from pacgrid.pacman import PacMan

if TYPE_CHECKING:
    from pacgrid.ghosts import Ghost

BASE_X = 5
BASE_Y = 5

DIRECTIONS = ((0, 1), (0, -1), (1, 0), (-1, 0))


class _Chooser(Protocol):
    def choice(self, seq): ...


def _sign(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def _step_towards(ghost: Ghost, board: GameMap, target_x: int, target_y: int) -> None:
    gx, gy = ghost.x, ghost.y
    dx = _sign(target_x - gx)
    dy = _sign(target_y - gy)
    if not board.is_wall(gx + dx, gy):
        ghost.set_position(gx + dx, gy)
    elif not board.is_wall(gx, gy + dy):
        ghost.set_position(gx, gy + dy)


class GhostState(ABC):
    """A ghost behaviour."""

    name: ClassVar[str] = ""

    @abstractmethod
    def move(self, ghost: Ghost, board: GameMap, pacman: PacMan) -> None:
        """Move the ghost one step."""


class ChaseState(GhostState):
    """Head for Pac-Man, trying the horizontal step first."""

    name = "Chase"

    def move(self, ghost: Ghost, board: GameMap, pacman: PacMan) -> None:
        _step_towards(ghost, board, pacman.x, pacman.y)


class _RandomWalk(GhostState):
    def __init__(self, rng: _Chooser | None = None) -> None:
        self._rng = rng if rng is not None else random

    def _random_step(self, ghost: Ghost, board: GameMap) -> None:
        dx, dy = self._rng.choice(DIRECTIONS)
        target = (ghost.x + dx, ghost.y + dy)
        if not board.is_wall(*target):
            ghost.set_position(*target)


class WanderState(_RandomWalk):
    """Step in a random direction, staying put if it is a wall."""

    name = "Wander"

    def move(self, ghost: Ghost, board: GameMap, pacman: PacMan) -> None:
        self._random_step(ghost, board)


class FrightenedState(_RandomWalk):
    """Step in a random direction, staying put if it is a wall."""

    name = "Frightened"

    def move(self, ghost: Ghost, board: GameMap, pacman: PacMan) -> None:
        self._random_step(ghost, board)


class ReturnToBaseState(GhostState):
    """Head for the base; once there, go back to wandering."""

    name = "ReturnToBase"

    def move(self, ghost: Ghost, board: GameMap, pacman: PacMan) -> None:
        at_base = (ghost.x, ghost.y) == (BASE_X, BASE_Y)
        _step_towards(ghost, board, BASE_X, BASE_Y)
        if at_base:
            ghost.set_state(WanderState())