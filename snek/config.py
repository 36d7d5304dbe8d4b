# snek/config.py
from dataclasses import dataclass, replace
from typing import Optional

@dataclass(frozen=True, slots=True)
class AppConfig:
    # board
    grid_w: int = 19
    grid_h: int = 15
    seed: Optional[int] = None

    # tick cadence (seconds of accumulated wall time)
    move_interval: float = 0.25
    spawn_interval: float = 5.0
    spawn_max_attempts: int = 64     # rejection draws before picking from the vacant list

    # render
    fps: int = 60
    render_cell: int = 25
    render_title: str = "Snek"
    render_show_hud: bool = True
    render_record_dir: Optional[str] = None

    # run log (CSV); None disables it
    log_path: Optional[str] = None

    def with_(self, **kwargs) -> "AppConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)

    def validate(self) -> "AppConfig":
        if self.grid_w <= 0 or self.grid_h <= 0:
            raise ValueError(f"grid must be at least 1x1, got {self.grid_w}x{self.grid_h}")
        if self.move_interval <= 0 or self.spawn_interval <= 0:
            raise ValueError("tick intervals must be positive")
        if self.spawn_max_attempts < 1:
            raise ValueError("spawn_max_attempts must be >= 1")
        return self
