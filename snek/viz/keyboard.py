# snek/viz/keyboard.py
import pygame as pg
from snek.core.interfaces import Direction

KEYMAP = {
    pg.K_LEFT: Direction.LEFT,
    pg.K_RIGHT: Direction.RIGHT,
    pg.K_UP: Direction.UP,
    pg.K_DOWN: Direction.DOWN,
}

class Keyboard:
    def translate(self, e):
        """Map one pygame event to a Direction, "quit", or None."""
        if e.type == pg.QUIT:
            return "quit"
        if e.type == pg.KEYDOWN:
            if e.key == pg.K_ESCAPE:
                return "quit"
            return KEYMAP.get(e.key)
        return None

    def poll(self):
        """Drain the event queue, in arrival order, skipping unmapped events."""
        out = []
        for e in pg.event.get():
            k = self.translate(e)
            if k is not None:
                out.append(k)
        return out
