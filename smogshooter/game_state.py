"""Geometry helpers and the base class shared by every game screen."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

Point = tuple[float, float]


@dataclass(frozen=True)
class FloatRect:
    """Axis-aligned rectangle given by its top-left corner and size."""

    left: float
    top: float
    width: float
    height: float

    def _span(self) -> tuple[float, float, float, float]:
        x0, x1 = sorted((self.left, self.left + self.width))
        y0, y1 = sorted((self.top, self.top + self.height))
        return x0, y0, x1, y1

    def contains(self, point: Point) -> bool:
        """True if the point lies inside; left/top edges included, right/bottom not."""
        x, y = point
        x0, y0, x1, y1 = self._span()
        return x0 <= x < x1 and y0 <= y < y1

    def intersects(self, other: FloatRect) -> bool:
        """True if the two rectangles overlap with a non-empty area."""
        ax0, ay0, ax1, ay1 = self._span()
        bx0, by0, bx1, by1 = other._span()
        return max(ax0, bx0) < min(ax1, bx1) and max(ay0, by0) < min(ay1, by1)


@dataclass
class View:
    """A 2D camera: the world area around ``center`` shown in ``viewport``."""

    center: Point
    size: Point
    viewport: FloatRect = field(default_factory=lambda: FloatRect(0.0, 0.0, 1.0, 1.0))

    def map_pixel_to_coords(self, pixel: Point, window_size: Point) -> Point:
        """Convert a window pixel into world coordinates seen through this view."""
        win_w, win_h = window_size
        port_left = self.viewport.left * win_w
        port_top = self.viewport.top * win_h
        port_w = self.viewport.width * win_w
        port_h = self.viewport.height * win_h
        world_left = self.center[0] - self.size[0] / 2
        world_top = self.center[1] - self.size[1] / 2
        return (
            world_left + (pixel[0] - port_left) / port_w * self.size[0],
            world_top + (pixel[1] - port_top) / port_h * self.size[1],
        )

    def to_screen(self, point: Point, window_size: Point) -> Point:
        """Convert world coordinates into a window pixel position."""
        win_w, win_h = window_size
        world_left = self.center[0] - self.size[0] / 2
        world_top = self.center[1] - self.size[1] / 2
        return (
            self.viewport.left * win_w
            + (point[0] - world_left) / self.size[0] * self.viewport.width * win_w,
            self.viewport.top * win_h
            + (point[1] - world_top) / self.size[1] * self.viewport.height * win_h,
        )


class GameState(ABC):
    """One screen of the game: takes input, advances, draws itself."""

    def __init__(self) -> None:
        self.mouse_pos: Point = (0.0, 0.0)

    def set_mouse_pos(self, pixel: Point, view: View, window_size: Point) -> Point:
        """Store and return the mouse position in the world of ``view``."""
        self.mouse_pos = view.map_pixel_to_coords(pixel, window_size)
        return self.mouse_pos

    @abstractmethod
    def handle_input(self, events):
        """React to a batch of window events."""

    @abstractmethod
    def update(self, delta_time):
        """Advance the screen by ``delta_time`` seconds."""

    @abstractmethod
    def render(self, surface):
        """Draw the screen onto ``surface``."""