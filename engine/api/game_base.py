from __future__ import annotations

import pygame

from engine.app.context import Context

from .frame_data import FrameData


class Game:
    """
    What the loop drives. Each frame runs, in order:
    on_event for every raw event, on_update with the elapsed milliseconds
    and the mapped key presses, then on_draw.
    """

    def on_load(self, ctx: Context, manifest: dict) -> None:
        """Once, after the window exists."""
        ...

    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        ...

    def on_draw(self, surface: pygame.Surface) -> None:
        ...

    def on_event(self, event: pygame.event.Event) -> None:
        """Raw pygame event; quit and <Esc> never get here."""
        ...

    def on_unload(self) -> None:
        ...
