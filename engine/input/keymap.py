from __future__ import annotations
from enum import Enum
from typing import Dict, Optional

import pygame


class Key(Enum):
    SPACE = "space"
    LEFT = "left"
    RIGHT = "right"


DEFAULT_BINDINGS: Dict[int, Key] = {
    pygame.K_SPACE: Key.SPACE,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


class KeyMapper:
    """
    Turns raw pygame keyboard events into the game's three-key vocabulary.
    Anything that isn't a KEYDOWN of a bound key maps to None.
    """

    def __init__(self, bindings: Optional[Dict[int, Key]] = None):
        self.bindings: Dict[int, Key] = dict(
            DEFAULT_BINDINGS if bindings is None else bindings)

    def map_event(self, event: pygame.event.Event) -> Optional[Key]:
        if event.type != pygame.KEYDOWN:
            return None
        return self.bindings.get(event.key)
