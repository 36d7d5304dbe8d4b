# snek/core/grid.py  (passive cell store, no policy)
from __future__ import annotations
from typing import Iterator, Tuple
import numpy as np
from .interfaces import Cell, Pos, OutOfBoundsError

NO_FRUIT = -1


class Grid:
    """Fixed width x height board of Cell states, row-major, 0-indexed.

    Cells live in an int8 array of shape (height, width) so ``arr[y, x]`` is
    the cell at ``(x, y)``. A second array keeps the palette index of each
    fruit cell (``NO_FRUIT`` elsewhere).
    """
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
        self._w = int(width)
        self._h = int(height)
        self._cells = np.full((self._h, self._w), Cell.VACANT, dtype=np.int8)
        self._fruit = np.full((self._h, self._w), NO_FRUIT, dtype=np.int8)

    @property
    def width(self) -> int:
        return self._w

    @property
    def height(self) -> int:
        return self._h

    @property
    def size(self) -> int:
        return self._w * self._h

    def __len__(self) -> int:
        return self.size

    def in_bounds(self, pos: Pos) -> bool:
        x, y = pos
        return 0 <= x < self._w and 0 <= y < self._h

    def _check(self, pos: Pos) -> Tuple[int, int]:
        if not self.in_bounds(pos):
            raise OutOfBoundsError(pos, self._w, self._h)
        return pos

    def get(self, pos: Pos) -> Cell:
        x, y = self._check(pos)
        return Cell(int(self._cells[y, x]))

    def set(self, pos: Pos, cell: Cell) -> None:
        x, y = self._check(pos)
        self._cells[y, x] = Cell(cell)
        if cell != Cell.OCCUPIED_FRUIT:
            self._fruit[y, x] = NO_FRUIT

    def set_fruit(self, pos: Pos, colour: int) -> None:
        x, y = self._check(pos)
        self._cells[y, x] = Cell.OCCUPIED_FRUIT
        self._fruit[y, x] = colour

    def fruit_colour(self, pos: Pos) -> int:
        x, y = self._check(pos)
        return int(self._fruit[y, x])

    # ---- row-major index helpers ----
    def index_of(self, pos: Pos) -> int:
        x, y = self._check(pos)
        return x + y * self._w

    def pos_of(self, index: int) -> Pos:
        if not 0 <= index < self.size:
            raise OutOfBoundsError(index, self._w, self._h)
        return (index % self._w, index // self._w)

    # ---- read-only views ----
    def cells(self, kind: Cell) -> Iterator[Pos]:
        ys, xs = np.nonzero(self._cells == kind)
        for x, y in zip(xs.tolist(), ys.tolist()):
            yield (x, y)

    def count(self, kind: Cell) -> int:
        return int(np.count_nonzero(self._cells == kind))

    def __iter__(self) -> Iterator[Tuple[Pos, Cell]]:
        for y in range(self._h):
            for x in range(self._w):
                yield (x, y), Cell(int(self._cells[y, x]))

    def as_array(self) -> np.ndarray:
        view = self._cells.view()
        view.flags.writeable = False
        return view

    def __repr__(self) -> str:
        return f"Grid({self._w}x{self._h}, snake={self.count(Cell.OCCUPIED_SNAKE)}, fruit={self.count(Cell.OCCUPIED_FRUIT)})"
