import random

import pytest

from pacgrid.board import GameMap
from pacgrid.ghosts import Ghost
from pacgrid.pacman import PacMan
from pacgrid.states import (
    ChaseState,
    FrightenedState,
    GhostState,
    ReturnToBaseState,
    WanderState,
)


class _Fixed:
    def __init__(self, direction):
        self.direction = direction

    def choice(self, seq):
        assert self.direction in seq
        return self.direction


@pytest.fixture
def board():
    return GameMap()


def test_names():
    assert ChaseState().name == "Chase"
    assert WanderState().name == "Wander"
    assert FrightenedState().name == "Frightened"
    assert ReturnToBaseState().name == "ReturnToBase"


def test_base_state_is_abstract():
    with pytest.raises(TypeError):
        GhostState()


def test_chase_moves_horizontally_first(board):
    ghost = Ghost("Blinky", 1, 1, ChaseState())
    ChaseState().move(ghost, board, PacMan(5, 1))
    assert (ghost.x, ghost.y) == (2, 1)


def test_chase_falls_back_to_vertical(board):
    ghost = Ghost("Blinky", 1, 2, ChaseState())
    ChaseState().move(ghost, board, PacMan(3, 4))
    assert (ghost.x, ghost.y) == (1, 3)


def test_chase_never_enters_wall(board):
    ghost = Ghost("Blinky", 1, 1, ChaseState())
    pacman = PacMan(8, 8)
    for _ in range(30):
        ChaseState().move(ghost, board, pacman)
        assert not board.is_wall(ghost.x, ghost.y)


@pytest.mark.parametrize("state_cls", [WanderState, FrightenedState])
def test_random_step_moves_to_open_tile(board, state_cls):
    ghost = Ghost("Pinky", 1, 1)
    state_cls(_Fixed((1, 0))).move(ghost, board, PacMan(8, 8))
    assert (ghost.x, ghost.y) == (2, 1)


@pytest.mark.parametrize("state_cls", [WanderState, FrightenedState])
def test_random_step_into_wall_stays(board, state_cls):
    ghost = Ghost("Pinky", 1, 1)
    state_cls(_Fixed((0, -1))).move(ghost, board, PacMan(8, 8))
    assert (ghost.x, ghost.y) == (1, 1)


def test_wander_stays_off_walls_and_adjacent(board):
    ghost = Ghost("Inky", 3, 3)
    state = WanderState(random.Random(7))
    for _ in range(200):
        before = (ghost.x, ghost.y)
        state.move(ghost, board, PacMan(8, 8))
        assert not board.is_wall(ghost.x, ghost.y)
        assert abs(ghost.x - before[0]) + abs(ghost.y - before[1]) <= 1


def test_return_to_base_steps_towards_base(board):
    ghost = Ghost("Clyde", 3, 1, ReturnToBaseState())
    ghost.update(board, PacMan(8, 8))
    assert (ghost.x, ghost.y) == (4, 1)
    assert ghost.state_name() == "ReturnToBase"


def test_return_to_base_switches_to_wander_at_base(board):
    ghost = Ghost("Clyde", 5, 5, ReturnToBaseState())
    ghost.update(board, PacMan(8, 8))
    assert (ghost.x, ghost.y) == (5, 5)
    assert ghost.state_name() == "Wander"