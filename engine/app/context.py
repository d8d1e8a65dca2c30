from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Tuple
from engine.api.config import EngineConfig
from engine.input.keymap import KeyMapper


@dataclass
class Context:
    screen: pygame.Surface
    clock: pygame.time.Clock
    cfg: EngineConfig
    # games may rebind keys in on_load; the loop reads it every frame
    keymap: KeyMapper
    screen_size: Tuple[int, int]
