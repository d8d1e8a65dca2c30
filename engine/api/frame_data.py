from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from engine.input.keymap import Key


@dataclass
class FrameData:
    timestamp: float
    # mapped key presses since the previous frame, in delivery order
    keys: List[Key] = field(default_factory=list)
