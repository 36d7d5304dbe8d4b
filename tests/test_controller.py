# tests/test_controller.py
import random
import pytest

from snek.config import AppConfig
from snek.core import Cell, Direction, GameController, GameState, Outcome

DIRS = [Direction.LEFT, Direction.RIGHT, Direction.UP, Direction.DOWN]

def test_starts_idle(controller_factory):
    c = controller_factory(5, 4, head=(2, 2))
    assert c.state is GameState.START
    assert c.termination_cause is None
    assert c.snake_head == (2, 2)
    assert c.snake_length == 1
    assert c.grid.count(Cell.OCCUPIED_SNAKE) == 1

def test_time_does_not_move_before_first_direction(controller_factory):
    c = controller_factory(5, 5, head=(2, 2))
    for _ in range(10):
        r = c.advance(1.0)
        assert not r.moved and r.spawned is None
    assert c.snake_head == (2, 2)
    assert c.state is GameState.START
    assert (c.movement_elapsed, c.spawn_elapsed) == (10.0, 10.0)

def test_start_time_carries_into_first_tick(controller_factory):
    c = controller_factory(6, 6, head=(2, 2))
    c.advance(5.0)
    c.request_direction(Direction.RIGHT)
    r = c.advance(0.0)
    assert r.moved and r.outcome is Outcome.OK
    assert r.spawned is not None
    assert c.snake_head == (3, 2)
    assert (c.movement_elapsed, c.spawn_elapsed) == (0.0, 0.0)

def test_grid_view_for_drawing_is_read_only(controller_factory):
    c = controller_factory(4, 4, head=(1, 2))
    arr = c.grid.as_array()
    with pytest.raises(ValueError):
        arr[0, 0] = Cell.OCCUPIED_FRUIT
    assert c.grid is c.grid
    assert arr[2, 1] == Cell.OCCUPIED_SNAKE

def test_first_direction_starts_the_run(controller_factory):
    c = controller_factory(5, 5, head=(2, 2))
    assert c.request_direction(Direction.UP) is Outcome.OK
    assert c.state is GameState.IN_PROGRESS
    assert c.direction is Direction.UP

def test_move_fires_once_interval_is_crossed(controller_factory):
    c = controller_factory(5, 5, head=(2, 2))
    c.request_direction(Direction.RIGHT)
    assert not c.advance(0.2).moved
    assert c.snake_head == (2, 2)
    r = c.advance(0.1)
    assert r.moved and r.outcome is Outcome.OK
    assert c.snake_head == (3, 2)
    # excess is dropped, not carried
    assert c.movement_elapsed == 0.0

def test_large_delta_moves_only_once(controller_factory):
    c = controller_factory(9, 3, head=(0, 1))
    c.request_direction(Direction.RIGHT)
    c.advance(2.0)
    assert c.snake_head == (1, 1)
    assert c.moves == 1

def test_leaving_the_grid_ends_the_run(controller_factory):
    c = controller_factory(3, 3, head=(0, 1))
    c.request_direction(Direction.LEFT)
    r = c.advance(0.25)
    assert r.moved and r.outcome is Outcome.OUT_OF_BOUNDS
    assert r.state is GameState.END
    assert c.state is GameState.END
    assert c.termination_cause is Outcome.OUT_OF_BOUNDS
    assert c.snake_head == (0, 1)
    assert c.movement_elapsed == 0.0

def test_end_ignores_everything(controller_factory):
    c = controller_factory(3, 3, head=(0, 1))
    c.request_direction(Direction.LEFT)
    c.advance(0.25)
    assert c.request_direction(Direction.UP) is Outcome.GAME_OVER
    assert c.direction is Direction.LEFT
    for _ in range(40):
        r = c.advance(1.0)
        assert r.idle
    assert c.snake_head == (0, 1)
    assert c.grid.count(Cell.OCCUPIED_FRUIT) == 0
    assert c.termination_cause is Outcome.OUT_OF_BOUNDS

def test_refused_turn_is_not_fatal(controller_factory):
    c = controller_factory(5, 5, head=(2, 2))
    c.request_direction(Direction.RIGHT)
    assert c.request_direction(Direction.LEFT) is Outcome.OPPOSITE_DIRECTION
    assert c.state is GameState.IN_PROGRESS
    c.advance(0.25)
    assert c.snake_head == (3, 2)

def test_turn_applies_before_the_next_move(controller_factory):
    c = controller_factory(5, 5, head=(1, 1))
    c.request_direction(Direction.RIGHT)
    c.advance(0.25)
    c.request_direction(Direction.DOWN)
    c.advance(0.25)
    assert c.snake_head == (2, 2)

def test_fruit_spawns_on_cadence(controller_factory):
    c = controller_factory(6, 6, head=(0, 0), move_interval=100.0, spawn_interval=1.0)
    c.request_direction(Direction.RIGHT)
    assert c.advance(0.5).spawned is None
    r = c.advance(0.5)
    assert r.spawned is not None
    assert c.grid.get(r.spawned) == Cell.OCCUPIED_FRUIT
    assert c.spawn_elapsed == 0.0
    assert c.advance(0.9).spawned is None
    assert c.grid.count(Cell.OCCUPIED_FRUIT) == 1

def test_default_cadence():
    c = GameController(10, 10, rng=random.Random(0))
    assert (c.cfg.move_interval, c.cfg.spawn_interval) == (0.25, 5.0)
    assert (c.grid.width, c.grid.height) == (10, 10)

def test_eating_grows_on_the_same_tick(controller_factory):
    c = controller_factory(5, 3, head=(1, 1))
    c.request_direction(Direction.RIGHT)
    c.grid.set_fruit((2, 1), 0)
    r = c.advance(0.25)
    assert r.ate
    assert c.snake_length == 2
    snap = c.snapshot()
    assert snap.snake == ((2, 1), (1, 1))
    assert snap.fruits == ()

def test_self_collision_ends_the_run(controller_factory):
    c = controller_factory(6, 6, head=(1, 1))
    c.request_direction(Direction.RIGHT)
    # lay fruit in a row so the snake grows to length 5
    for x in range(2, 6):
        c.grid.set_fruit((x, 1), 0)
    for _ in range(4):
        c.advance(0.25)
    assert c.snake_length == 5
    for d in (Direction.DOWN, Direction.LEFT, Direction.UP):
        c.request_direction(d)
        c.advance(0.25)
    assert c.state is GameState.END
    assert c.termination_cause is Outcome.SELF_COLLISION

def test_snapshot_reflects_state(controller_factory):
    c = controller_factory(4, 3, head=(1, 1))
    c.grid.set_fruit((3, 2), 2)
    s = c.snapshot()
    assert s.snake == ((1, 1),)
    assert s.fruits == (((3, 2), 2),)
    assert s.dir is Direction.NONE
    assert (s.grid_w, s.grid_h, s.length, s.moves) == (4, 3, 1, 0)
    assert s.state is GameState.START and s.cause is None

def test_rejects_negative_delta(controller_factory):
    with pytest.raises(ValueError):
        controller_factory().advance(-0.1)

def test_rejects_bad_config():
    with pytest.raises(ValueError):
        GameController(0, 5)
    with pytest.raises(ValueError):
        GameController(cfg=AppConfig(move_interval=0))

@pytest.mark.parametrize("seed", range(8))
def test_invariants_hold_over_random_runs(seed, check_invariants):
    c = GameController(cfg=AppConfig(grid_w=7, grid_h=6, seed=seed, spawn_interval=0.5))
    driver = random.Random(seed + 100)
    for _ in range(400):
        if driver.random() < 0.3:
            c.request_direction(driver.choice(DIRS))
        c.advance(driver.choice([0.05, 0.1, 0.25]))
        check_invariants(c.grid, c._snake)
        if c.state is GameState.END:
            break
    assert c.state in (GameState.START, GameState.IN_PROGRESS, GameState.END)
