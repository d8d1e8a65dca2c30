from __future__ import annotations
import pygame

from engine.api import Game, FrameData
from engine.app.context import Context
from engine.render.shapes import draw_panels, draw_text, panel_layout, red_level

from .const import *
from .state import ReactionGame, Side
from .view import ViewDescriptor, project


class LeftRight(Game):
    def on_load(self, ctx: Context, manifest):
        self.ctx = ctx
        self.manifest = manifest

        opts = manifest.get("options", {}) or {}
        self.background = tuple(opts.get("background", BACKGROUND_COLOR))
        self.text_color = tuple(opts.get("text_color", TEXT_COLOR))
        self.panel_level = float(opts.get("panel_level", PANEL_LEVEL))
        self.highlight_diff = float(opts.get("highlight_diff", HIGHLIGHT_DIFF))

        self.layout = panel_layout(ctx.screen_size, BASE_WIDTH, BASE_FONT_SIZE, BASE_PADDING)
        self.machine = ReactionGame()

    # ---------- Update ----------
    def on_update(self, dt_ms: float, frame: FrameData) -> None:
        # presses arrived before this tick, so apply them first
        for key in frame.keys:
            self.machine.handle_key(key)
        self.machine.advance_time(dt_ms / 1000.0)

    # ---------- Draw ----------
    def panel_colors(self, view: ViewDescriptor):
        if view.side is None:
            diff = 0.0
        elif view.side == Side.LEFT:
            diff = self.highlight_diff
        else:
            diff = -self.highlight_diff
        return red_level(self.panel_level + diff), red_level(self.panel_level - diff)

    def on_draw(self, surface: pygame.Surface) -> None:
        view = project(self.machine.state)
        surface.fill(self.background)
        draw_text(surface, view.text, self.layout.text_pos,
                  self.text_color, size=self.layout.font_size)
        left, right = self.panel_colors(view)
        draw_panels(surface, self.layout, left, right)


def get_game():
    return LeftRight()
