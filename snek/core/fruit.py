# snek/core/fruit.py
from __future__ import annotations
import random
from typing import Optional, Sequence
from .grid import Grid
from .interfaces import Cell, Pos

# palette indices; viz.renderer_colors maps them to RGB
FRUIT_PALETTE: Sequence[str] = ("red", "blue", "orange")


class FruitSpawner:
    """Places fruit on a uniformly random vacant cell."""
    def __init__(self, max_attempts: int = 64, palette: Sequence[str] = FRUIT_PALETTE):
        if max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        if not palette:
            raise ValueError("palette must not be empty")
        self.max_attempts = max_attempts
        self.palette = tuple(palette)

    def spawn(self, grid: Grid, rng: random.Random) -> Optional[Pos]:
        """Mark one vacant cell as fruit and return it, or None when the grid is full.

        Rejection sampling over the whole grid; after ``max_attempts`` misses
        the cell is drawn from the vacant list instead, which keeps the choice
        uniform and bounds the work on crowded boards.
        """
        if grid.count(Cell.VACANT) == 0:
            return None

        pos = None
        for _ in range(self.max_attempts):
            cand = grid.pos_of(rng.randrange(grid.size))
            if grid.get(cand) == Cell.VACANT:
                pos = cand
                break
        if pos is None:
            pos = rng.choice(list(grid.cells(Cell.VACANT)))

        grid.set_fruit(pos, rng.randrange(len(self.palette)))
        return pos
