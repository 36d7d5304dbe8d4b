from .interfaces import (
    Cell, Direction, GameState, Outcome, OutOfBoundsError, Snapshot, TickReport,
)
from .grid import Grid
from .snake import Snake
from .fruit import FruitSpawner, FRUIT_PALETTE
from .controller import GameController

__all__ = [
    "Cell", "Direction", "GameState", "Outcome", "OutOfBoundsError", "Snapshot",
    "TickReport", "Grid", "Snake", "FruitSpawner", "FRUIT_PALETTE", "GameController",
]
