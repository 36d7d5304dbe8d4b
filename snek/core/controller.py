# snek/core/controller.py  (tick-driven state machine, no pygame)
from __future__ import annotations
import random
from typing import Optional
from snek.config import AppConfig
from .fruit import FruitSpawner
from .grid import Grid
from .interfaces import Cell, Direction, GameState, Outcome, Pos, Snapshot, TickReport
from .snake import Snake


class GameController:
    """Owns the grid and the snake and advances them on accumulated time.

    Drivers feed two kinds of events: ``request_direction`` (input) and
    ``advance`` (elapsed seconds). Nothing here draws or sleeps.
    """
    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        *,
        cfg: Optional[AppConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        cfg = cfg or AppConfig()
        if width is not None or height is not None:
            cfg = cfg.with_(grid_w=width if width is not None else cfg.grid_w,
                            grid_h=height if height is not None else cfg.grid_h)
        self.cfg = cfg.validate()
        self.rng = rng if rng is not None else random.Random(cfg.seed)

        self._grid = Grid(cfg.grid_w, cfg.grid_h)
        self._snake = Snake.new(self._grid, self.rng)
        self._spawner = FruitSpawner(cfg.spawn_max_attempts)

        self._state = GameState.START
        self._cause: Optional[Outcome] = None
        self.movement_elapsed = 0.0
        self.spawn_elapsed = 0.0
        self.moves = 0

    # ---- read-only surface ----
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def grid(self) -> Grid:
        """The board owned by this controller; drivers read it for drawing.

        Mutating it from outside bypasses the snake/fruit rules, so only tests
        that stage a board should write to it.
        """
        return self._grid

    @property
    def snake_head(self) -> Pos:
        return self._snake.head

    @property
    def snake_length(self) -> int:
        return self._snake.length

    @property
    def direction(self) -> Direction:
        return self._snake.direction

    @property
    def termination_cause(self) -> Optional[Outcome]:
        return self._cause

    # ---- events ----
    def request_direction(self, direction: Direction) -> Outcome:
        if self._state is GameState.END:
            return Outcome.GAME_OVER
        out = self._snake.set_direction(direction)
        if out.ok and self._state is GameState.START:
            self._state = GameState.IN_PROGRESS
        return out

    def advance(self, delta_seconds: float) -> TickReport:
        if delta_seconds < 0:
            raise ValueError(f"delta_seconds must be >= 0, got {delta_seconds}")
        idle = TickReport(moved=False, outcome=None, ate=False, spawned=None, state=self._state)
        if self._state is GameState.END:
            return idle

        self.movement_elapsed += delta_seconds
        self.spawn_elapsed += delta_seconds
        # time spent in START counts toward the first move and spawn
        if self._state is GameState.START:
            return idle

        spawned = None
        if self.spawn_elapsed >= self.cfg.spawn_interval:
            spawned = self._spawner.spawn(self._grid, self.rng)
            self.spawn_elapsed = 0.0

        moved, outcome, ate = False, None, False
        if self.movement_elapsed >= self.cfg.move_interval:
            before = self._snake.length
            outcome = self._snake.step(self._grid)
            moved = True
            if outcome.ok:
                self.moves += 1
                ate = self._snake.length > before
            else:
                self._cause, self._state = outcome, GameState.END
            self.movement_elapsed = 0.0

        return TickReport(moved=moved, outcome=outcome, ate=ate, spawned=spawned, state=self._state)

    def snapshot(self) -> Snapshot:
        g = self._grid
        return Snapshot(
            snake=self._snake.segments,
            fruits=tuple((p, g.fruit_colour(p)) for p in g.cells(Cell.OCCUPIED_FRUIT)),
            dir=self._snake.direction,
            length=self._snake.length,
            moves=self.moves,
            state=self._state,
            cause=self._cause,
            grid_w=g.width,
            grid_h=g.height,
        )
