# snek/core/interfaces.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Tuple, Optional, Protocol

Pos = Tuple[int, int]


class OutOfBoundsError(IndexError):
    """A grid position outside [0, width) x [0, height)."""
    def __init__(self, pos, width: int, height: int):
        super().__init__(f"position {pos} outside {width}x{height} grid")
        self.pos = pos


class Cell(IntEnum):
    VACANT = 0
    OCCUPIED_SNAKE = 1
    OCCUPIED_FRUIT = 2


class Direction(Enum):
    # value is the unit vector; y grows downward
    NONE = (0, 0)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    UP = (0, -1)
    DOWN = (0, 1)

    @property
    def vector(self) -> Pos:
        return self.value

    @property
    def opposite(self) -> "Direction":
        dx, dy = self.value
        return Direction((-dx, -dy))


class GameState(Enum):
    START = "start"
    IN_PROGRESS = "in_progress"
    END = "end"


class Outcome(Enum):
    OK = "ok"
    OPPOSITE_DIRECTION = "opposite_direction"
    OUT_OF_BOUNDS = "out_of_bounds"
    SELF_COLLISION = "self_collision"
    GAME_OVER = "game_over"

    @property
    def ok(self) -> bool:
        return self is Outcome.OK

    @property
    def terminal(self) -> bool:
        return self in (Outcome.OUT_OF_BOUNDS, Outcome.SELF_COLLISION)

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    Outcome.OK: "ok",
    Outcome.OPPOSITE_DIRECTION: "cannot turn the opposite direction",
    Outcome.OUT_OF_BOUNDS: "cannot go outside the eating-ground",
    Outcome.SELF_COLLISION: "collided with the snake's own body",
    Outcome.GAME_OVER: "the run is over",
}


@dataclass(frozen=True)
class Snapshot:
    snake: Tuple[Pos, ...]          # head first
    fruits: Tuple[Tuple[Pos, int], ...]   # (cell, palette index)
    dir: Direction
    length: int
    moves: int
    state: GameState
    cause: Optional[Outcome]
    grid_w: int
    grid_h: int


@dataclass(frozen=True)
class TickReport:
    moved: bool                     # a movement tick fired
    outcome: Optional[Outcome]      # result of that move, None if no move fired
    ate: bool
    spawned: Optional[Pos]
    state: GameState

    @property
    def idle(self) -> bool:
        return not self.moved and self.spawned is None


class Renderer(Protocol):
    def draw(self, snap: Snapshot) -> None: ...
    def set_title(self, text: str) -> None: ...
    def tick(self, fps: int) -> float: ...
    def close(self) -> None: ...
