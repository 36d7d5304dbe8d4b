# snek/runners/run_snake.py
from __future__ import annotations
from typing import Callable, Iterable, Optional, Union
from snek.config import AppConfig
from snek.core.controller import GameController
from snek.core.interfaces import Direction, Outcome, Renderer, Snapshot, TickReport
from snek.runlog import ALL_KEYS, CSVLogger, make_tick_logger, make_turn_logger

Key = Union[Direction, str]


def run(
    ctrl: GameController,
    rend: Renderer,
    poll: Callable[[], Iterable[Key]],
    cfg: AppConfig,
    on_tick: Optional[Callable[[TickReport], None]] = None,
    on_turn: Optional[Callable[[Outcome], None]] = None,
    max_frames: Optional[int] = None,
) -> Snapshot:
    """Frame loop: input first, then elapsed time, then draw.

    The window stays up after the run ends (like the classic game) until the
    player quits; ``max_frames`` bounds scripted runs.
    """
    title = cfg.render_title
    frame = 0
    reported_end = False
    while max_frames is None or frame < max_frames:
        frame += 1
        quit_requested = False
        for key in poll():
            if key == "quit":
                quit_requested = True
                break
            out = ctrl.request_direction(key)
            if on_turn is not None:
                on_turn(out)
            if out is Outcome.OPPOSITE_DIRECTION:
                rend.set_title(f"{title} : {out.message}")
        if quit_requested:
            break

        report = ctrl.advance(rend.tick(cfg.fps))
        if on_tick is not None:
            on_tick(report)
        if ctrl.termination_cause is not None and not reported_end:
            cause = ctrl.termination_cause
            rend.set_title(f"{title} : {cause.message} - over!")
            print(f"[snek] over: {cause.message} (length={ctrl.snake_length}, moves={ctrl.moves})")
            reported_end = True

        rend.draw(ctrl.snapshot())
    return ctrl.snapshot()


def main(cfg: Optional[AppConfig] = None) -> Snapshot:
    # pygame is only needed for the interactive window
    from snek.viz.keyboard import Keyboard
    from snek.viz.renderer_pygame import PygameRenderer

    cfg = (cfg or AppConfig()).validate()
    ctrl = GameController(cfg=cfg)

    rend = PygameRenderer()
    rend.open(cfg)
    kbd = Keyboard()

    logger = CSVLogger(cfg.log_path, fieldnames=ALL_KEYS) if cfg.log_path else None
    on_tick = make_tick_logger(logger, ctrl.snapshot) if logger else None
    on_turn = make_turn_logger(logger, lambda: ctrl.moves) if logger else None

    try:
        return run(ctrl, rend, kbd.poll, cfg, on_tick=on_tick, on_turn=on_turn)
    finally:
        if logger:
            logger.close()
        rend.close()
