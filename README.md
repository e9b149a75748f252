# pacgrid

A small Pac-Man game that runs in your terminal. Pac-Man starts at (2,2) in
a 10x10 maze and is hunted by four ghosts: Blinky, Pinky, Inky and Clyde.

## Installing

```
pip install .
```

## Playing

```
pacgrid
```

Use the arrow keys to move and `q` to quit. The game advances one tick every
200 ms whether or not a key is pressed, and the maze and a status block are
redrawn each tick.

On the board, `#` is a wall, `.` a pellet, `*` the power pellet, `<` is
Pac-Man and each ghost is shown by the first letter of its name.

- Blinky chases Pac-Man, trying a horizontal step first. Pinky, Inky and
  Clyde wander one random step per tick.
- Walking onto a pellet or the power pellet removes it from the maze.
- The power pellet turns on power mode (shown as `[POWER MODE]`) for ten
  ticks.
- A ghost that meets Pac-Man in power mode is worth 200 points; it is put
  back at the base (5,5) and heads for the base, then goes back to wandering.
- A ghost that meets Pac-Man without power mode ends the game with
  "Game Over! Pac-Man was caught!".

## What the game does not do

As the rules are coded, the tile under Pac-Man is checked for points only
after the pellet on it has been removed. Eating pellets therefore adds
nothing to the score, the pellet count never reaches the total, and the
game cannot be won: it ends only when a ghost catches Pac-Man or the player
quits. For the same reason the power pellet does not frighten the ghosts or
give them a speed boost. The score grows only by catching ghosts in power
mode.

## Using it as a library

```python
from pacgrid.game import Game
from pacgrid.ghosts import BlinkyFactory, ClydeFactory
from pacgrid.keys import Key

game = Game()
game.add_ghost(BlinkyFactory().create_ghost())
game.add_ghost(ClydeFactory().create_ghost())

game.step(Key.RIGHT)
for line in game.status_lines():
    print(line)
```

`Game.step` applies one key and advances one tick; it returns `False` for
`Key.QUIT`. `Game.run` loops with any object that has a `read_key()` method,
writing to the stream given as `out` (standard output by default).

The pieces can also be used one at a time:

- `pacgrid.board.GameMap` holds the maze: `is_wall`, `tile`, `set_tile`, and
  `render`, which returns the drawn maze as a string.
- `pacgrid.pacman.PacMan` is the player: `move`, `eat_pellet`,
  `update_power_mode`, `has_power`.
- `pacgrid.ghosts` has `Ghost`, the `GhostDecorator` and
  `SpeedBoostDecorator` wrappers (the latter moves the wrapped ghost twice per
  update) and the `BlinkyFactory`, `PinkyFactory`, `InkyFactory` and
  `ClydeFactory` factories.
- `pacgrid.states` has the ghost behaviours: `ChaseState`, `WanderState`,
  `FrightenedState` and `ReturnToBaseState`.
- `pacgrid.manager.GameManager` applies the rules each tick and tracks the
  score and the end of the game.
- `pacgrid.keys` has the `Key` enum, `decode_key`, which turns the bytes of
  one key press into a `Key`, and `KeyReader`, a context manager that reads
  keys from the terminal without blocking.

## Tests

```
pip install .[test]
pytest
```