"""Ghosts, ghost decorators and the factories that create the four ghosts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from pacgrid.board import GameMap
from pacgrid.pacman import PacMan
from pacgrid.states import ChaseState, FrightenedState, GhostState, WanderState


class Ghost:
    """A named ghost on the grid, driven by its current state."""

    def __init__(self, name: str, x: int, y: int, state: GhostState | None = None) -> None:
        self._name = name
        self._x = x
        self._y = y
        self.state: GhostState | None = state if state is not None else WanderState()

    @property
    def name(self) -> str:
        return self._name

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def set_position(self, x: int, y: int) -> None:
        self._x = x
        self._y = y

    def update(self, board: GameMap, pacman: PacMan) -> None:
        """Let the current state move the ghost."""
        if self.state is not None:
            self.state.move(self, board, pacman)

    def set_state(self, state: GhostState | None) -> None:
        self.state = state

    def set_frightened(self) -> None:
        self.set_state(FrightenedState())

    def state_name(self) -> str:
        return self.state.name if self.state is not None else "None"

    def is_speed_boosted(self) -> bool:
        return False


class GhostDecorator(Ghost):
    """Wraps a ghost, reporting the wrapped ghost's name, position and state."""

    def __init__(self, ghost: Ghost) -> None:
        super().__init__("Decorator", ghost.x, ghost.y)
        self.wrapped = ghost

    @property
    def name(self) -> str:
        return self.wrapped.name

    @property
    def x(self) -> int:
        return self.wrapped.x

    @property
    def y(self) -> int:
        return self.wrapped.y

    def update(self, board: GameMap, pacman: PacMan) -> None:
        self.wrapped.update(board, pacman)

    def state_name(self) -> str:
        return self.wrapped.state_name()


class SpeedBoostDecorator(GhostDecorator):
    """A wrapped ghost that moves twice per update."""

    def update(self, board: GameMap, pacman: PacMan) -> None:
        self.wrapped.update(board, pacman)
        self.wrapped.update(board, pacman)

    def is_speed_boosted(self) -> bool:
        return True


class GhostFactory(ABC):
    """Creates one kind of ghost."""

    @abstractmethod
    def create_ghost(self) -> Ghost:
        """Return a new ghost at its starting position."""


class BlinkyFactory(GhostFactory):
    def create_ghost(self) -> Ghost:
        return Ghost("Blinky", 3, 3, ChaseState())


class PinkyFactory(GhostFactory):
    def create_ghost(self) -> Ghost:
        return Ghost("Pinky", 4, 3, WanderState())


class InkyFactory(GhostFactory):
    def create_ghost(self) -> Ghost:
        return Ghost("Inky", 3, 4, WanderState())


class ClydeFactory(GhostFactory):
    def create_ghost(self) -> Ghost:
        return Ghost("Clyde", 4, 4, WanderState())