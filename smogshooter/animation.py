"""Frame-strip animations and sprites that play them."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

import pygame

from .game_state import FloatRect, Point, View

EMPTY_TEXTURE = "empty.png"
FRAME_SIZE = 64


class Direction(Enum):
    """Facing of a moving sprite."""

    FRONT = "front"
    RIGHT = "right"
    BACK = "back"
    LEFT = "left"


@dataclass
class Animation:
    """A horizontal strip of equally sized frames played in a loop."""

    start_x: int
    start_y: int
    frame_width: int
    frame_height: int
    frame_count: int
    duration_per_frame: float
    current_frame: int = field(default=0, init=False)
    elapsed_time: float = field(default=0.0, init=False)

    def __post_init__(self) -> None:
        if self.frame_count < 1:
            raise ValueError("an animation needs at least one frame")

    def update(self, delta_time: float) -> None:
        """Advance time; step to the next frame once a frame's duration has passed."""
        self.elapsed_time += delta_time
        if self.elapsed_time >= self.duration_per_frame:
            self.elapsed_time = 0.0
            self.current_frame = (self.current_frame + 1) % self.frame_count

    def reset(self) -> None:
        """Go back to the first frame."""
        self.current_frame = 0
        self.elapsed_time = 0.0

    def current_frame_rect(self) -> pygame.Rect:
        """Area of the texture holding the current frame."""
        return pygame.Rect(
            self.start_x + self.current_frame * self.frame_width,
            self.start_y,
            self.frame_width,
            self.frame_height,
        )


class AnimatedSprite:
    """A positioned sprite that switches between named animations."""

    def __init__(self, loader: Callable[[str], pygame.Surface]) -> None:
        self._loader = loader
        self.texture = loader(EMPTY_TEXTURE)
        self.texture_rect = pygame.Rect(0, 0, FRAME_SIZE, FRAME_SIZE)
        self.position: Point = (0.0, 0.0)
        self.origin: Point = (0.0, 0.0)
        self.animations: dict[str, Animation] = {}
        self.textures: dict[str, pygame.Surface] = {}
        self.current_animation = ""

    def add_animation(self, name: str, texture_path: str, animation: Animation) -> None:
        """Register an animation under ``name`` with the texture it draws from."""
        self.animations[name] = copy.copy(animation)
        self.textures[name] = self._loader(texture_path)

    def play(self, name: str) -> None:
        """Switch to an animation; unknown names and the running one are ignored."""
        if name not in self.animations or name == self.current_animation:
            return
        self.current_animation = name
        self.texture = self.textures[name]
        bounds = self.global_bounds()
        self.origin = (bounds.width / 2, bounds.height / 2)
        self.animations[name].reset()

    def update(self, delta_time: float) -> None:
        """Advance the running animation and show its current frame."""
        animation = self.animations.get(self.current_animation)
        if animation is None:
            return
        animation.update(delta_time)
        self.texture_rect = animation.current_frame_rect()

    def move(self, offset: Point) -> None:
        """Shift the sprite by ``offset``."""
        self.position = (self.position[0] + offset[0], self.position[1] + offset[1])

    def global_bounds(self) -> FloatRect:
        """World-space rectangle covered by the sprite."""
        return FloatRect(
            self.position[0] - self.origin[0],
            self.position[1] - self.origin[1],
            float(self.texture_rect.width),
            float(self.texture_rect.height),
        )

    def draw(self, surface: pygame.Surface, view: View) -> None:
        """Draw the current frame onto ``surface`` as seen through ``view``."""
        bounds = self.global_bounds()
        window = surface.get_size()
        x0, y0 = view.to_screen((bounds.left, bounds.top), window)
        x1, y1 = view.to_screen(
            (bounds.left + bounds.width, bounds.top + bounds.height), window
        )
        size = (round(x1 - x0), round(y1 - y0))
        if size[0] <= 0 or size[1] <= 0:
            return
        frame = pygame.Surface(self.texture_rect.size, pygame.SRCALPHA)
        frame.blit(self.texture, (0, 0), self.texture_rect)
        if size != frame.get_size():
            frame = pygame.transform.scale(frame, size)
        surface.blit(frame, (round(x0), round(y0)))