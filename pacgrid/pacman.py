"""The player character."""

from __future__ import annotations

from pacgrid.board import EMPTY, PELLET, POWER_PELLET, GameMap

POWER_DURATION = 10


class PacMan:
    """Pac-Man's position and power-mode timer."""

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        self.power_mode = False
        self.power_duration = 0

    def move(self, dx: int, dy: int, board: GameMap) -> None:
        """Step by (dx, dy) unless the target tile is a wall."""
        new_x, new_y = self.x + dx, self.y + dy
        if not board.is_wall(new_x, new_y):
            self.x, self.y = new_x, new_y

    def eat_pellet(self, board: GameMap) -> bool:
        """Eat a pellet under Pac-Man, if any; a power pellet starts power mode."""
        tile = board.tile(self.x, self.y)
        if tile not in (PELLET, POWER_PELLET):
            return False
        board.set_tile(self.x, self.y, EMPTY)
        if tile == POWER_PELLET:
            self.power_mode = True
            self.power_duration = POWER_DURATION
        return True

    def update_power_mode(self) -> None:
        """Count power mode down by one tick."""
        if self.power_mode and self.power_duration > 0:
            self.power_duration -= 1
            if self.power_duration == 0:
                self.power_mode = False

    def has_power(self) -> bool:
        return self.power_mode