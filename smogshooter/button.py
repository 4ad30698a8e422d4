"""Clickable rectangular buttons with a centred label."""

from __future__ import annotations

import pygame

from .game_state import FloatRect, Point

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
LABEL_SIZE = 16


class Button:
    """A white box centred on ``position`` with black text in the middle."""

    def __init__(self, position: Point, size: Point, text: str, font) -> None:
        px, py = float(position[0]), float(position[1])
        width, height = float(size[0]), float(size[1])
        self.position = (px, py)
        self.size = (width, height)
        self.text = text
        self.bounds = FloatRect(px - width / 2, py - height / 2, width, height)
        self._font = font
        label_w, label_h = font.size(text)
        self.label_position = (px - label_w / 2, py - label_h / 2)
        self._label: pygame.Surface | None = None

    def is_clicked(self, mouse_pos: Point) -> bool:
        """True if ``mouse_pos`` falls inside the button."""
        return self.bounds.contains(mouse_pos)

    def render(self, surface: pygame.Surface) -> None:
        """Draw the box and its label in window coordinates."""
        rect = pygame.Rect(
            round(self.bounds.left),
            round(self.bounds.top),
            round(self.bounds.width),
            round(self.bounds.height),
        )
        surface.fill(WHITE, rect)
        if self._label is None:
            self._label = self._font.render(self.text, True, BLACK)
        surface.blit(
            self._label, (round(self.label_position[0]), round(self.label_position[1]))
        )