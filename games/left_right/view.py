from __future__ import annotations
from dataclasses import dataclass
from typing import Optional

from .state import FalseStart, GameState, Init, Preparing, Result, Running, Side


@dataclass(frozen=True)
class ViewDescriptor:
    text: str
    side: Optional[Side] = None  # panel drawn brighter, if any


def _fmt(seconds: float) -> str:
    return f"{seconds:.2f}"


def project(state: GameState) -> ViewDescriptor:
    """
    Describe what to show for `state`. The side is only exposed while
    Running; the countdown must not give it away.
    """
    if isinstance(state, Init):
        return ViewDescriptor("Press <Space> to start")
    if isinstance(state, Preparing):
        return ViewDescriptor(f"time to start: {_fmt(state.time_to_start)}")
    if isinstance(state, Running):
        return ViewDescriptor(f"elapsed time: {_fmt(state.elapsed_time)}", state.side)
    if isinstance(state, Result):
        outcome = "win" if state.is_correct else "lose"
        return ViewDescriptor(f"You {outcome}! Elapsed time: {_fmt(state.elapsed_time)}")
    if isinstance(state, FalseStart):
        return ViewDescriptor("False start!")
    raise TypeError(f"Unknown game state: {state!r}")
