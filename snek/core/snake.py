# snek/core/snake.py  (movement + growth rules, no pygame)
from __future__ import annotations
import random
from typing import List, Optional, Tuple
from .grid import Grid
from .interfaces import Cell, Direction, Outcome, Pos


class Snake:
    """Head, body (nearest-to-head first) and heading.

    The snake never keeps a reference to the grid: every mutating call gets
    the grid handle from its owner and updates cell states as a side effect.
    """
    def __init__(self, head: Pos, body: Optional[List[Pos]] = None,
                 heading: Direction = Direction.NONE):
        """Wrap an already-placed snake; the grid is not touched.

        The caller must have marked every segment OccupiedSnake and given
        distinct, adjacent cells. ``Snake.new`` is the placing constructor.
        """
        self._head: Pos = tuple(head)
        self._body: List[Pos] = [tuple(p) for p in (body or [])]
        self._heading = heading

    @classmethod
    def new(cls, grid: Grid, rng: random.Random) -> "Snake":
        head = grid.pos_of(rng.randrange(grid.size))
        grid.set(head, Cell.OCCUPIED_SNAKE)
        return cls(head)

    # ---- read-only ----
    @property
    def direction(self) -> Direction:
        return self._heading

    @property
    def head(self) -> Pos:
        return self._head

    @property
    def body(self) -> Tuple[Pos, ...]:
        return tuple(self._body)

    @property
    def segments(self) -> Tuple[Pos, ...]:
        return (self._head, *self._body)

    @property
    def length(self) -> int:
        return 1 + len(self._body)

    def __len__(self) -> int:
        return self.length

    # ---- rules ----
    def set_direction(self, requested: Direction) -> Outcome:
        if requested is Direction.NONE:
            raise ValueError("cannot request Direction.NONE")
        # only an exact 180° reversal is refused; NONE accepts anything
        if self._heading is not Direction.NONE and requested is self._heading.opposite:
            return Outcome.OPPOSITE_DIRECTION
        self._heading = requested
        return Outcome.OK

    def step(self, grid: Grid) -> Outcome:
        if self._heading is Direction.NONE:
            raise RuntimeError("step() called before a heading was set")

        hx, hy = self._head
        dx, dy = self._heading.vector
        new_head = (hx + dx, hy + dy)

        if not grid.in_bounds(new_head):
            return Outcome.OUT_OF_BOUNDS
        target = grid.get(new_head)
        if target == Cell.OCCUPIED_SNAKE:
            return Outcome.SELF_COLLISION
        ate = target == Cell.OCCUPIED_FRUIT

        # each segment follows into the slot its predecessor held before the step
        prev = self._head
        self._move(grid, None, new_head)
        for i, pos in enumerate(self._body):
            self._move(grid, i, prev)
            prev = pos

        if ate:
            # prev is now the cell the old tail vacated
            self.add_body(grid, fallback=prev)
        return Outcome.OK

    def add_body(self, grid: Grid, fallback: Optional[Pos] = None) -> Pos:
        if self._heading is Direction.NONE:
            raise RuntimeError("add_body() needs a heading")
        tx, ty = self._body[-1] if self._body else self._head
        dx, dy = self._heading.vector
        tail = (tx - dx, ty - dy)

        # after a turn the cell behind the tail may be off-grid or taken
        if fallback is not None and not (grid.in_bounds(tail) and grid.get(tail) == Cell.VACANT):
            tail = fallback

        grid.set(tail, Cell.OCCUPIED_SNAKE)
        self._body.append(tail)
        return tail

    def _move(self, grid: Grid, i: Optional[int], new: Pos) -> None:
        old = self._head if i is None else self._body[i]
        grid.set(old, Cell.VACANT)
        if i is None:
            self._head = new
        else:
            self._body[i] = new
        grid.set(new, Cell.OCCUPIED_SNAKE)

    def __repr__(self) -> str:
        return f"Snake(head={self._head}, body={self._body}, heading={self._heading.name})"
