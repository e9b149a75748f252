from pacgrid.board import EMPTY, PELLET, POWER_PELLET, GameMap
from pacgrid.ghosts import BlinkyFactory, Ghost
from pacgrid.manager import GHOST_POINTS, GameManager
from pacgrid.pacman import PacMan
from pacgrid.states import BASE_X, BASE_Y


def _still_ghost(x, y):
    ghost = Ghost("Still", x, y)
    ghost.set_state(None)
    return ghost


def _clear_pellets(board):
    for y in range(board.HEIGHT):
        for x in range(board.WIDTH):
            if board.tile(x, y) in (PELLET, POWER_PELLET):
                board.set_tile(x, y, EMPTY)


def test_new_manager_is_running():
    manager = GameManager()
    assert manager.is_game_over() is False
    assert manager.has_won() is False
    assert manager.score == 0
    assert manager.ghosts == ()


def test_add_ghost_keeps_order():
    manager = GameManager()
    first = _still_ghost(1, 1)
    second = _still_ghost(2, 1)
    manager.add_ghost(first)
    manager.add_ghost(second)
    assert manager.ghosts == (first, second)


def test_collision_without_power_ends_game():
    manager = GameManager()
    manager.add_ghost(_still_ghost(1, 1))
    pacman = PacMan(1, 1)
    manager.update(GameMap(), pacman)
    assert manager.is_game_over() is True
    assert manager.has_won() is False


def test_update_after_game_over_does_nothing():
    manager = GameManager()
    board = GameMap()
    manager.add_ghost(_still_ghost(1, 1))
    manager.update(board, PacMan(1, 1))
    other = PacMan(2, 1)
    manager.update(board, other)
    assert board.tile(2, 1) == PELLET


def test_collision_with_power_sends_ghost_home():
    manager = GameManager()
    ghost = _still_ghost(1, 1)
    manager.add_ghost(ghost)
    pacman = PacMan(1, 1)
    pacman.power_mode = True
    pacman.power_duration = 5
    manager.update(GameMap(), pacman)
    assert (ghost.x, ghost.y) == (BASE_X, BASE_Y)
    assert ghost.state_name() == "ReturnToBase"
    assert manager.score == GHOST_POINTS
    assert manager.is_game_over() is False


def test_board_without_pellets_is_won():
    board = GameMap()
    _clear_pellets(board)
    manager = GameManager()
    manager.update(board, PacMan(1, 1))
    assert manager.has_won() is True
    assert manager.is_game_over() is True


def test_pellet_under_pacman_is_eaten():
    board = GameMap()
    manager = GameManager()
    manager.update(board, PacMan(1, 1))
    assert board.tile(1, 1) == EMPTY
    assert manager.total_pellets > 0


def test_power_pellet_gives_power():
    board = GameMap()
    power = next(
        (x, y)
        for y in range(board.HEIGHT)
        for x in range(board.WIDTH)
        if board.tile(x, y) == POWER_PELLET
    )
    pacman = PacMan(*power)
    GameManager().update(board, pacman)
    assert pacman.has_power() is True
    assert board.tile(*power) == EMPTY


def test_ghosts_move_on_update():
    manager = GameManager()
    blinky = BlinkyFactory().create_ghost()
    manager.add_ghost(blinky)
    start = (blinky.x, blinky.y)
    pacman = PacMan(1, 1)
    manager.update(GameMap(), pacman)
    before = abs(start[0] - pacman.x) + abs(start[1] - pacman.y)
    after = abs(blinky.x - pacman.x) + abs(blinky.y - pacman.y)
    assert after == before - 1