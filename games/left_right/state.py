from __future__ import annotations
import logging
import math
import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from engine.input.keymap import Key

from .const import START_DELAY_SEC

log = logging.getLogger(__name__)


class Side(Enum):
    LEFT = "left"
    RIGHT = "right"


# -----------------------------
# States
# -----------------------------

@dataclass(frozen=True)
class Init:
    pass


@dataclass(frozen=True)
class Preparing:
    time_to_start: float


@dataclass(frozen=True)
class Running:
    elapsed_time: float
    side: Side


@dataclass(frozen=True)
class Result:
    elapsed_time: float
    requested_side: Side
    chosen_side: Side

    @property
    def is_correct(self) -> bool:
        return self.requested_side == self.chosen_side


@dataclass(frozen=True)
class FalseStart:
    pass


GameState = Union[Init, Preparing, Running, Result, FalseStart]

_KEY_SIDE = {Key.LEFT: Side.LEFT, Key.RIGHT: Side.RIGHT}


# -----------------------------
# Side selection
# -----------------------------

class Coin:
    """Picks the side the player has to hit."""

    def flip(self) -> Side:
        raise NotImplementedError


class RandomCoin(Coin):
    def __init__(self, seed: Optional[int] = None):
        self.rng = random.Random(seed)

    def flip(self) -> Side:
        return Side.LEFT if self.rng.random() < 0.5 else Side.RIGHT


# -----------------------------
# State machine
# -----------------------------

class ReactionGame:
    """
    Owns the current GameState. Time ticks and key presses are applied one
    at a time, in the order the driver delivers them.
    """

    def __init__(self, coin: Optional[Coin] = None, state: Optional[GameState] = None):
        self.coin = coin if coin is not None else RandomCoin()
        self._state: GameState = state if state is not None else Init()

    @property
    def state(self) -> GameState:
        return self._state

    def _set(self, new_state: GameState) -> None:
        if type(new_state) is not type(self._state):
            log.debug("%s -> %s", self._state, new_state)
        self._state = new_state

    def advance_time(self, dt: float) -> None:
        """Apply dt seconds of elapsed time. Negative or NaN deltas count as zero."""
        if math.isnan(dt) or dt < 0:
            dt = 0.0

        s = self._state
        if isinstance(s, Preparing):
            remaining = s.time_to_start - dt
            if remaining < 0:
                self._set(Running(elapsed_time=0.0, side=self.coin.flip()))
            else:
                self._set(Preparing(time_to_start=remaining))
        elif isinstance(s, Running):
            self._set(Running(elapsed_time=s.elapsed_time + dt, side=s.side))
        elif isinstance(s, (Init, Result, FalseStart)):
            pass  # time only matters while a round is live
        else:
            raise TypeError(f"Unknown game state: {s!r}")

    def handle_key(self, key: Key) -> None:
        if not isinstance(key, Key):
            return

        s = self._state
        if isinstance(s, Preparing):
            # any key during the countdown forfeits the round, <Space> included
            self._set(FalseStart())
        elif isinstance(s, Running):
            if key in _KEY_SIDE:
                self._set(Result(
                    elapsed_time=s.elapsed_time,
                    requested_side=s.side,
                    chosen_side=_KEY_SIDE[key],
                ))
        elif isinstance(s, (Init, Result, FalseStart)):
            if key == Key.SPACE:
                self._set(Preparing(time_to_start=START_DELAY_SEC))
        else:
            raise TypeError(f"Unknown game state: {s!r}")
