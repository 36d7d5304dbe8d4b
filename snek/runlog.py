from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable, Optional
from snek.core.interfaces import Outcome, Snapshot, TickReport

ALL_KEYS = [
    "step", "event", "length", "head_x", "head_y", "fruit_x", "fruit_y", "cause",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped, not fatal
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        if not self._file.closed:
            self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_tick_logger(
    logger: Logger,
    snapshot_getter: Callable[[], Snapshot],
    step_getter: Optional[Callable[[], int]] = None,
) -> Callable[[TickReport], None]:
    """
    Returns a function(report: TickReport) -> None that writes one row per
    event in the report (spawn, move, end). Idle ticks write nothing.
    'step_getter' defaults to the snapshot's move count.
    """
    def _on_tick(report: TickReport) -> None:
        if report.idle:
            return
        snap = snapshot_getter()
        step = int(step_getter()) if step_getter is not None else snap.moves
        hx, hy = snap.snake[0]
        base = {"length": snap.length, "head_x": hx, "head_y": hy}

        if report.spawned is not None:
            fx, fy = report.spawned
            logger.log(step, {**base, "event": "spawn", "fruit_x": fx, "fruit_y": fy})
        if report.moved:
            if report.outcome is not None and report.outcome.terminal:
                logger.log(step, {**base, "event": "end", "cause": report.outcome.value})
                logger.flush()
            else:
                logger.log(step, {**base, "event": "eat" if report.ate else "move"})
    return _on_tick


def make_turn_logger(
    logger: Logger,
    step_getter: Callable[[], int],
) -> Callable[[Outcome], None]:
    """Returns a function(outcome) -> None that records refused turns only."""
    def _on_turn(outcome: Outcome) -> None:
        if outcome.ok:
            return
        logger.log(int(step_getter()), {"event": "turn_refused", "cause": outcome.value})
    return _on_turn
