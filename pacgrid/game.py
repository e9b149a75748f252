"""The game loop and the command that starts it."""

from __future__ import annotations

import sys
import time
from typing import Protocol, TextIO

from pacgrid.board import GameMap
from pacgrid.ghosts import BlinkyFactory, ClydeFactory, Ghost, InkyFactory, PinkyFactory
from pacgrid.keys import Key, KeyReader
from pacgrid.manager import GameManager
from pacgrid.pacman import PacMan

START_X = 2
START_Y = 2
TICK_SECONDS = 0.2
CLEAR_SCREEN = "\x1b[2J\x1b[H"

_MOVES = {
    Key.UP: (0, -1),
    Key.DOWN: (0, 1),
    Key.LEFT: (-1, 0),
    Key.RIGHT: (1, 0),
}


class _KeySource(Protocol):
    def read_key(self) -> Key: ...


class Game:
    """One game: the maze, Pac-Man and the manager that runs the rules."""

    def __init__(self, out: TextIO | None = None, tick: float = TICK_SECONDS) -> None:
        self.board = GameMap()
        self.pacman = PacMan(START_X, START_Y)
        self.manager = GameManager()
        self.out = out if out is not None else sys.stdout
        self.tick = tick

    def add_ghost(self, ghost: Ghost) -> None:
        self.manager.add_ghost(ghost)

    def step(self, key: Key) -> bool:
        """Apply one key press and advance the game; return False on quit."""
        running = key is not Key.QUIT
        if key in _MOVES:
            self.pacman.move(*_MOVES[key], self.board)
        self.manager.update(self.board, self.pacman)
        return running

    def status_lines(self) -> list[str]:
        """The text shown under the maze."""
        pacman = self.pacman
        head = f"Pac-Man at ({pacman.x},{pacman.y})"
        if pacman.has_power():
            head += " [POWER MODE]"
        lines = [head, f"Score: {self.manager.score}"]
        for ghost in self.manager.ghosts:
            boost = " [SPEED BOOST]" if ghost.is_speed_boosted() else ""
            lines.append(f"{ghost.name} at ({ghost.x},{ghost.y}) [{ghost.state_name()}]{boost}")
        if self.manager.has_won():
            lines.append("You Win! All pellets eaten!")
        elif self.manager.is_game_over():
            lines.append("Game Over! Pac-Man was caught!")
        lines.append("Use arrow keys to move, 'q' to quit.")
        return lines

    def run(self, reader: _KeySource) -> None:
        """Play until the player quits or the game ends."""
        running = True
        while running and not self.manager.is_game_over():
            self.out.write(CLEAR_SCREEN)
            running = self.step(reader.read_key())
            self.out.write(self.board.render(self.pacman, self.manager.ghosts))
            self.out.write("".join(f"{line}\n" for line in self.status_lines()))
            self.out.flush()
            time.sleep(self.tick)


def main(argv: list[str] | None = None) -> int:
    """Start a game with the four ghosts on the terminal."""
    game = Game()
    for factory in (BlinkyFactory(), PinkyFactory(), InkyFactory(), ClydeFactory()):
        game.add_ghost(factory.create_ghost())
    with KeyReader() as reader:
        game.run(reader)
    return 0


if __name__ == "__main__":
    sys.exit(main())