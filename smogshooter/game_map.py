"""The play field: a textured square centred on the world origin."""

from __future__ import annotations

import pygame

from .game_state import FloatRect, Point, View

MAP_SIZE = 128 * 12
GREEN = (0, 255, 0)


class GameMap:
    """Play field centred on (0, 0); its size comes from its texture if given."""

    def __init__(self, size: Point | None = None, texture: pygame.Surface | None = None) -> None:
        if size is None:
            size = texture.get_size() if texture is not None else (MAP_SIZE, MAP_SIZE)
        self._size = (float(size[0]), float(size[1]))
        self._position = (0.0, 0.0)
        self.texture = texture
        self._rect = self._compute_bounds()

    @property
    def position(self) -> Point:
        """Centre of the map in world coordinates."""
        return self._position

    @property
    def size(self) -> Point:
        """Width and height of the map."""
        return self._size

    @property
    def left_up(self) -> Point:
        """Top-left corner of the map."""
        return (
            self._position[0] - self._size[0] / 2,
            self._position[1] - self._size[1] / 2,
        )

    def _compute_bounds(self) -> FloatRect:
        left, top = self.left_up
        return FloatRect(left, top, self._size[0], self._size[1])

    def is_clicked(self, mouse_pos: Point) -> bool:
        """True if a world position lies on the map."""
        return self._rect.contains(mouse_pos)

    def update(self) -> None:
        """Refresh the cached bounds from the map's position and size."""
        self._rect = self._compute_bounds()

    def render(self, surface: pygame.Surface, view: View) -> None:
        """Draw the map as seen through ``view``."""
        bounds = self._rect
        window = surface.get_size()
        x0, y0 = view.to_screen((bounds.left, bounds.top), window)
        x1, y1 = view.to_screen(
            (bounds.left + bounds.width, bounds.top + bounds.height), window
        )
        rect = pygame.Rect(round(x0), round(y0), round(x1 - x0), round(y1 - y0))
        if rect.width <= 0 or rect.height <= 0:
            return
        if self.texture is None:
            surface.fill(GREEN, rect)
            return
        image = self.texture
        if image.get_size() != rect.size:
            image = pygame.transform.scale(image, rect.size)
        surface.blit(image, rect.topleft)