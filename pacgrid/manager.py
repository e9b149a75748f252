"""Game rules: scoring, ghost updates, collisions and the win/lose state."""

from __future__ import annotations

from pacgrid.board import PELLET, POWER_PELLET, GameMap
from pacgrid.ghosts import Ghost, SpeedBoostDecorator
from pacgrid.pacman import PacMan
from pacgrid.states import BASE_X, BASE_Y, ReturnToBaseState

PELLET_POINTS = 10
POWER_PELLET_POINTS = 50
GHOST_POINTS = 200


class GameManager:
    """Holds the ghosts and the score, and advances the game one tick at a time."""

    def __init__(self) -> None:
        self._ghosts: list[Ghost] = []
        self.score = 0
        self.game_over = False
        self.won = False
        self.total_pellets = 0
        self.pellets_eaten = 0

    @property
    def ghosts(self) -> tuple[Ghost, ...]:
        return tuple(self._ghosts)

    def add_ghost(self, ghost: Ghost) -> None:
        self._ghosts.append(ghost)

    def update(self, board: GameMap, pacman: PacMan) -> None:
        """Advance one tick: Pac-Man eats, ghosts move, collisions are settled."""
        if self.game_over or self.won:
            return

        if self.total_pellets == 0:
            self._count_pellets(board)

        pacman.update_power_mode()
        if pacman.eat_pellet(board):
            # The tile is read after it has been eaten.
            tile = board.tile(pacman.x, pacman.y)
            if tile == PELLET:
                self.score += PELLET_POINTS
                self.pellets_eaten += 1
            elif tile == POWER_PELLET:
                self.score += POWER_PELLET_POINTS
                self.pellets_eaten += 1
                self._ghosts = [SpeedBoostDecorator(ghost) for ghost in self._ghosts]
                for ghost in self._ghosts:
                    ghost.set_frightened()

        for ghost in self._ghosts:
            ghost.update(board, pacman)

        self._check_collisions(pacman)
        if self.pellets_eaten == self.total_pellets:
            self.won = True
            self.game_over = True

    def is_game_over(self) -> bool:
        return self.game_over

    def has_won(self) -> bool:
        return self.won

    def _check_collisions(self, pacman: PacMan) -> None:
        for ghost in self._ghosts:
            if (pacman.x, pacman.y) != (ghost.x, ghost.y):
                continue
            if pacman.has_power():
                ghost.set_position(BASE_X, BASE_Y)
                ghost.set_state(ReturnToBaseState())
                self.score += GHOST_POINTS
            else:
                self.game_over = True

    def _count_pellets(self, board: GameMap) -> None:
        self.total_pellets += sum(
            board.tile(x, y) in (PELLET, POWER_PELLET)
            for y in range(board.HEIGHT)
            for x in range(board.WIDTH)
        )