# snek/viz/renderer_headless.py
from __future__ import annotations
from typing import Optional
from snek.core.interfaces import Snapshot, Renderer

class HeadlessRenderer(Renderer):
    """Keeps the last frame and title; used by tests and scripted runs."""
    def __init__(self):
        self.last: Optional[Snapshot] = None
        self.title = ""
        self.frames = 0
    def draw(self, snap: Snapshot) -> None:
        self.last = snap
        self.frames += 1
    def set_title(self, text: str) -> None:
        self.title = text
    def tick(self, fps: int) -> float:
        return 1.0 / fps if fps else 0.0
    def close(self) -> None:
        pass
