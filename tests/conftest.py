# tests/conftest.py
import os
import random
import sys

# Headless SDL so tests don't open a window
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

# Ensure project root is importable when running without an install
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

import pygame as pg
import pytest

from snek.config import AppConfig
from snek.core import Cell, Direction, GameController, Grid, Snake


class ScriptedRandom(random.Random):
    """random.Random whose randrange() returns queued values first."""
    def __init__(self, values=(), seed=0):
        super().__init__(seed)
        self.queue = list(values)

    def randrange(self, start, stop=None, step=1):
        if self.queue:
            return self.queue.pop(0)
        return super().randrange(start, stop, step)


def assert_consistent(grid, snake):
    segs = snake.segments
    assert len(set(segs)) == len(segs), "snake overlaps itself"
    assert set(grid.cells(Cell.OCCUPIED_SNAKE)) == set(segs)
    assert not set(grid.cells(Cell.OCCUPIED_FRUIT)) & set(segs)


@pytest.fixture(scope="session", autouse=True)
def _pygame_session():
    pg.init()
    yield
    pg.quit()

@pytest.fixture
def screen():
    return pg.Surface((200, 200), pg.SRCALPHA)

@pytest.fixture
def scripted_rng():
    return ScriptedRandom

@pytest.fixture
def check_invariants():
    return assert_consistent

@pytest.fixture
def snake_factory():
    def make(grid, segments, heading=Direction.NONE):
        head, *body = segments
        for p in segments:
            grid.set(p, Cell.OCCUPIED_SNAKE)
        return Snake(head, body, heading)
    return make

@pytest.fixture
def controller_factory():
    def make(w=3, h=3, head=None, seed=0, **cfg_kwargs):
        cfg = AppConfig(grid_w=w, grid_h=h, seed=seed, **cfg_kwargs)
        values = [] if head is None else [head[0] + head[1] * w]
        return GameController(cfg=cfg, rng=ScriptedRandom(values, seed=seed))
    return make
