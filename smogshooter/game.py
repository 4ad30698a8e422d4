"""The game window, its main loop, and the command that starts it."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

import pygame

from .data_manager import DATA_PATH, DataManager, Difficulty
from .game_state import GameState
from .pages import MainPage

WINDOW_WIDTH = 128 * 6
WINDOW_HEIGHT = 128 * 6
WINDOW_TITLE = "Game Window"
ASSET_DIR = "./assets"
FONT_FILE = "ARIAL.TTF"
FONT_SIZE = 16


class Game:
    """Owns the window, the font, the difficulty and the current screen."""

    def __init__(self, data_path: str | Path = DATA_PATH, asset_dir: str | Path = ASSET_DIR) -> None:
        self.data_path = Path(data_path)
        self.asset_dir = Path(asset_dir)
        pygame.display.init()
        pygame.font.init()
        try:
            self.font = pygame.font.Font(str(self.asset_dir / FONT_FILE), FONT_SIZE)
        except OSError as exc:
            raise RuntimeError("Error loading font") from exc
        self.window = pygame.display.set_mode(self.window_size)
        pygame.display.set_caption(WINDOW_TITLE)
        self.difficulty = Difficulty.EASY
        self.clock = time.monotonic
        self.is_open = True
        self.current_state: GameState = MainPage(self)

    @property
    def window_size(self) -> tuple[int, int]:
        """Width and height of the window in pixels."""
        return (WINDOW_WIDTH, WINDOW_HEIGHT)

    def load_texture(self, name: str) -> pygame.Surface:
        """Load an image from the asset directory."""
        image = pygame.image.load(str(self.asset_dir / name))
        if pygame.display.get_surface() is not None:
            return image.convert_alpha()
        return image

    def run(self) -> None:
        """Read the difficulty, then loop input, update and drawing until closed."""
        self.difficulty = DataManager(self.data_path).difficulty
        frame_clock = pygame.time.Clock()
        frame_clock.tick()
        while self.is_open:
            delta_time = frame_clock.tick() / 1000.0
            self.current_state.handle_input(pygame.event.get())
            self.current_state.update(delta_time)
            self.current_state.render(self.window)
            pygame.display.flip()
        pygame.display.quit()

    def change_state(self, state: GameState) -> None:
        """Replace the current screen."""
        self.current_state = state

    def close(self) -> None:
        """Ask the main loop to stop after this frame."""
        self.is_open = False


def main(argv=None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(description="Top-down shooter tuned by air quality.")
    parser.add_argument("--data", default=DATA_PATH, help="PM2.5 data file")
    parser.add_argument("--assets", default=ASSET_DIR, help="directory of images and font")
    args = parser.parse_args(argv)
    Game(args.data, args.assets).run()
    return 0