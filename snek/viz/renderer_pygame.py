# snek/viz/renderer_pygame.py
from __future__ import annotations
import os
import pygame as pg
from typing import Optional, Union
from snek.config import AppConfig
from snek.core.fruit import FRUIT_PALETTE
from snek.core.interfaces import Snapshot
import snek.viz.renderer_colors as theme

PathLike = Union[str, bytes, os.PathLike]

class PygameRenderer:
    def __init__(self):
        self.cell = 25
        self.cfg: Optional[AppConfig] = None
        self.surf: Optional[pg.Surface] = None
        self.clock: Optional[pg.time.Clock] = None
        self._auto_flip = True
        self._frame_idx = 0
        self._font: Optional[pg.font.Font] = None

    def open(self, cfg: AppConfig) -> None:
        # Guard: ensure instance, not class
        if isinstance(cfg, type):
            raise TypeError("Pass an AppConfig instance (use AppConfig()), not the class.")
        self.cfg = cfg
        self.cell = cfg.render_cell

        pg.init()
        pg.display.set_caption(cfg.render_title)
        self.surf = pg.display.set_mode((cfg.grid_w * self.cell, cfg.grid_h * self.cell))
        self.clock = pg.time.Clock()
        self._auto_flip = True
        self._frame_idx = 0

        if cfg.render_record_dir:
            os.makedirs(cfg.render_record_dir, exist_ok=True)

    def attach_surface(self, surface: pg.Surface, cfg: AppConfig) -> None:
        """Draw onto a caller-owned surface; the caller flips and times frames."""
        if not pg.get_init():
            pg.init()
        self.cfg = cfg
        self.cell = cfg.render_cell
        self.surf = surface
        self.clock = None
        self._auto_flip = False

    def set_title(self, text: str) -> None:
        if self._auto_flip:
            pg.display.set_caption(text)

    def draw(self, s: Snapshot) -> None:
        assert self.surf is not None, "Renderer not opened"
        assert self.cfg is not None, "Renderer config not set (call open first)"
        surf = self.surf
        c = self.cell

        surf.fill(theme.BG)

        # vacant cells are outlines, occupied cells are filled
        for y in range(s.grid_h):
            for x in range(s.grid_w):
                pg.draw.rect(surf, theme.GRID, pg.Rect(x * c, y * c, c, c), 1)

        for (fx, fy), colour in s.fruits:
            rgb = theme.FRUIT[FRUIT_PALETTE[colour]] if colour >= 0 else theme.GRID
            pg.draw.rect(surf, rgb, pg.Rect(fx * c, fy * c, c, c))

        for i, (x, y) in enumerate(s.snake):
            col = theme.HEAD if i == 0 else theme.BODY
            pg.draw.rect(surf, col, pg.Rect(x * c, y * c, c, c))

        if self.cfg.render_show_hud:
            if self._font is None:
                self._font = pg.font.SysFont(None, 22)
            txt = self._font.render(
                f"Length: {s.length}   Moves: {s.moves}   Dir: {s.dir.name}",
                True, theme.TEXT
            )
            surf.blit(txt, (6, 4))

        if self._auto_flip:
            pg.display.flip()

        if self.cfg.render_record_dir:
            self._save_surface_frame()

    def tick(self, fps: int) -> float:
        """Wait for the next frame; returns elapsed seconds since the last call."""
        if self.clock:
            return self.clock.tick(fps) / 1000.0
        return 0.0

    def close(self) -> None:
        try:
            pg.quit()
        finally:
            self.surf = None
            self.clock = None
            self._font = None

    # internals
    def _save_surface_frame(self) -> None:
        assert self.surf is not None
        assert self.cfg is not None
        rec_dir: PathLike = self.cfg.render_record_dir
        if not isinstance(rec_dir, (str, bytes, os.PathLike)):
            raise TypeError(f"render_record_dir must be path-like, got {type(rec_dir)}")
        fname = os.path.join(rec_dir, f"frame_{self._frame_idx:06d}.png")
        pg.image.save(self.surf, fname)
        self._frame_idx += 1
