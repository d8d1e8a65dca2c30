"""Shared fixtures."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from games.left_right.state import Coin, ReactionGame, Side


class FixedCoin(Coin):
    """Always lands on the same side; counts flips."""

    def __init__(self, side: Side):
        self.side = side
        self.flips = 0

    def flip(self) -> Side:
        self.flips += 1
        return self.side


@pytest.fixture
def left_coin() -> FixedCoin:
    return FixedCoin(Side.LEFT)


@pytest.fixture
def game(left_coin) -> ReactionGame:
    return ReactionGame(coin=left_coin)


@pytest.fixture
def make_game():
    """Build a game sitting in `state`, whose coin always picks `side`."""

    def _make(state=None, side: Side = Side.LEFT) -> ReactionGame:
        return ReactionGame(coin=FixedCoin(side), state=state)

    return _make
