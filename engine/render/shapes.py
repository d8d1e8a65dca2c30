from __future__ import annotations
from dataclasses import dataclass
import pygame
from typing import Tuple


@dataclass
class PanelLayout:
    font_size: int
    padding: float
    text_pos: Tuple[int, int]
    left: pygame.Rect
    right: pygame.Rect


def draw_text(surface: pygame.Surface, text: str, pos: Tuple[int, int], color=(230, 230, 230), size=24):
    font = pygame.font.SysFont(None, size)
    surface.blit(font.render(text, True, color), pos)


def panel_layout(screen_size: Tuple[int, int], base_width: int = 512, base_font: int = 32,
                 base_padding: int = 20) -> PanelLayout:
    """
    Status line on top, two equal panels side by side below it.
    Everything scales with the window width.
    """
    w, h = screen_size
    scale = w / base_width
    font_size = int(scale * base_font)
    padding = scale * base_padding

    top = font_size + padding * 2
    panel_w = w * 0.5 - padding * 1.5
    panel_h = h - top - padding

    left = pygame.Rect(int(padding), int(top), int(panel_w), int(panel_h))
    right = pygame.Rect(int(panel_w + padding * 2), int(top), int(panel_w), int(panel_h))
    return PanelLayout(font_size=font_size, padding=padding,
                       text_pos=(int(padding), int(padding)), left=left, right=right)


def red_level(level: float) -> Tuple[int, int, int]:
    # level in [0, 1]
    level = max(0.0, min(1.0, level))
    return (int(round(level * 255)), 0, 0)


def draw_panels(surface: pygame.Surface, layout: PanelLayout,
                left_color: Tuple[int, int, int], right_color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(surface, left_color, layout.left)
    pygame.draw.rect(surface, right_color, layout.right)
