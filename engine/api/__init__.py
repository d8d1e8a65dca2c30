from .game_base import Game
from .frame_data import FrameData
from .config import EngineConfig
from engine.input.keymap import Key

__all__ = ["Game", "FrameData", "EngineConfig", "Key"]
