"""The game's screens: main menu, character screen and the play field."""

from __future__ import annotations

import random
from dataclasses import dataclass

import pygame

from .actors import Character, Enemy
from .button import BLACK, WHITE, Button
from .data_manager import Difficulty
from .game_map import GameMap
from .game_state import FloatRect, GameState, Point, View

PAGE_WIDTH = 128 * 6
PAGE_HEIGHT = 128 * 6
MENU_BUTTON_SIZE = (500, 50)
BUTTON_WIDTH = 100
BUTTON_HEIGHT = 50
SCORE_SHAPE_WIDTH = 100
SCORE_SHAPE_HEIGHT = 50
HEALTH_SHAPE_WIDTH = 100
HEALTH_SHAPE_HEIGHT = 50
DIFFICULTY_SHAPE_WIDTH = 100
DIFFICULTY_SHAPE_HEIGHT = 50
CHARACTER_VIEW_SIZE = (128 * 4, 128 * 4)
SPAWN_CHANCE = 70000
KILL_SCORE = 100
TEXT_MARGIN = 10

HERO_NAME = "Hero"
HERO_HEALTH = 5
HERO_ATTACK = 1
HERO_SPEED = 1

_ENEMY_STATS = {
    Difficulty.EASY: (2, 1, 1),
    Difficulty.MEDIUM: (3, 1, 1),
    Difficulty.HARD: (3, 2, 2),
    Difficulty.VERY_HARD: (5, 2, 2),
}

_POINTER_EVENTS = (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP)


def _default_view(game) -> View:
    width, height = game.window_size
    return View(center=(width / 2, height / 2), size=(float(width), float(height)))


def _is_click(event) -> bool:
    return getattr(event, "button", 1) <= 3


def _draw_text(surface: pygame.Surface, font, text: str, topleft: Point) -> None:
    x, y = topleft
    for line in text.split("\n"):
        if line:
            surface.blit(font.render(line, True, BLACK), (round(x), round(y)))
        y += font.get_linesize()


@dataclass
class _InfoBox:
    """A white panel in window coordinates holding a few lines of text."""

    center: Point
    size: Point

    @property
    def bounds(self) -> FloatRect:
        return FloatRect(
            self.center[0] - self.size[0] / 2,
            self.center[1] - self.size[1] / 2,
            self.size[0],
            self.size[1],
        )

    def render(self, surface: pygame.Surface, font, text: str) -> None:
        box = self.bounds
        surface.fill(
            WHITE,
            pygame.Rect(round(box.left), round(box.top), round(box.width), round(box.height)),
        )
        lines = text.rstrip("\n").split("\n")
        height = len(lines) * font.get_linesize()
        _draw_text(
            surface,
            font,
            text,
            (box.left + TEXT_MARGIN, self.center[1] - height / 2),
        )


class MainPage(GameState):
    """Menu with buttons to play, view the character screen, or quit."""

    def __init__(self, game) -> None:
        super().__init__()
        self.game = game
        self.play_button = Button(
            (PAGE_WIDTH / 2, PAGE_HEIGHT * 3 / 8), MENU_BUTTON_SIZE, "Play", game.font
        )
        self.character_button = Button(
            (PAGE_WIDTH / 2, PAGE_HEIGHT * 4.5 / 8), MENU_BUTTON_SIZE, "Character", game.font
        )
        self.exit_button = Button(
            (PAGE_WIDTH / 2, PAGE_HEIGHT * 6 / 8), MENU_BUTTON_SIZE, "Exit", game.font
        )

    def handle_input(self, events) -> None:
        """Close on request; react to released clicks on the menu buttons."""
        for event in events:
            if event.type == pygame.QUIT:
                self.game.close()
            if event.type == pygame.MOUSEBUTTONUP and _is_click(event):
                self.set_mouse_pos(event.pos, _default_view(self.game), self.game.window_size)
                if self.play_button.is_clicked(self.mouse_pos):
                    self.game.change_state(GamePlayPage(self.game))
                    return
                if self.character_button.is_clicked(self.mouse_pos):
                    self.game.change_state(CharacterPage(self.game))
                    return
                if self.exit_button.is_clicked(self.mouse_pos):
                    self.game.close()

    def update(self, delta_time: float) -> None:
        """The menu has nothing to advance."""

    def render(self, surface: pygame.Surface) -> None:
        """Draw the menu buttons on black."""
        surface.fill(BLACK)
        self.play_button.render(surface)
        self.character_button.render(surface)
        self.exit_button.render(surface)


class CharacterPage(GameState):
    """Character screen with a button back to the menu."""

    def __init__(self, game) -> None:
        super().__init__()
        self.game = game
        self.quit_button = Button(
            (PAGE_WIDTH / 2, PAGE_HEIGHT * 6 / 8), MENU_BUTTON_SIZE, "Quit", game.font
        )

    def handle_input(self, events) -> None:
        """Close on request; return to the menu when Quit is clicked."""
        for event in events:
            if event.type == pygame.QUIT:
                self.game.close()
            if event.type == pygame.MOUSEBUTTONUP and _is_click(event):
                self.set_mouse_pos(event.pos, _default_view(self.game), self.game.window_size)
                if self.quit_button.is_clicked(self.mouse_pos):
                    self.game.change_state(MainPage(self.game))
                    return

    def update(self, delta_time: float) -> None:
        """The character screen has nothing to advance."""

    def render(self, surface: pygame.Surface) -> None:
        """Draw the Quit button on black."""
        surface.fill(BLACK)
        self.quit_button.render(surface)


class GamePlayPage(GameState):
    """The play field: the hero, spawning enemies, score and health panels."""

    def __init__(self, game, rng: random.Random | None = None) -> None:
        super().__init__()
        self.game = game
        self.rng = rng if rng is not None else random.Random()
        self._pointer: Point = (0.0, 0.0)

        self.quit_button = Button(
            (BUTTON_WIDTH / 2, PAGE_HEIGHT - BUTTON_HEIGHT / 2),
            (BUTTON_WIDTH, BUTTON_HEIGHT),
            "Quit",
            game.font,
        )

        self.game_map = GameMap(texture=game.load_texture("map.png"))
        self.character = Character(
            HERO_NAME,
            HERO_HEALTH,
            HERO_ATTACK,
            HERO_SPEED,
            self.game_map,
            game.load_texture,
            game.clock,
        )
        self.enemies: list[Enemy] = []
        self.score = 0
        self.gameover = False

        self.character_view = View(
            center=self.character.position,
            size=(float(CHARACTER_VIEW_SIZE[0]), float(CHARACTER_VIEW_SIZE[1])),
        )

        self._score_box = _InfoBox(
            (PAGE_WIDTH - SCORE_SHAPE_WIDTH / 2, PAGE_HEIGHT - SCORE_SHAPE_HEIGHT / 2),
            (SCORE_SHAPE_WIDTH, SCORE_SHAPE_HEIGHT),
        )
        self._health_box = _InfoBox(
            (
                PAGE_WIDTH - HEALTH_SHAPE_WIDTH / 2,
                PAGE_HEIGHT - HEALTH_SHAPE_HEIGHT / 2 - SCORE_SHAPE_HEIGHT,
            ),
            (HEALTH_SHAPE_WIDTH, HEALTH_SHAPE_HEIGHT),
        )
        self._difficulty_box = _InfoBox(
            (
                PAGE_WIDTH - DIFFICULTY_SHAPE_WIDTH / 2,
                PAGE_HEIGHT
                - DIFFICULTY_SHAPE_HEIGHT / 2
                - SCORE_SHAPE_HEIGHT
                - HEALTH_SHAPE_HEIGHT,
            ),
            (DIFFICULTY_SHAPE_WIDTH, DIFFICULTY_SHAPE_HEIGHT),
        )
        self.score_text = ""
        self.health_text = ""
        self.difficulty_text = f"Difficulty:\n{game.difficulty.label}"

    def is_spawning(self) -> bool:
        """Roll whether an enemy appears this frame (one chance in SPAWN_CHANCE)."""
        return self.rng.randrange(SPAWN_CHANCE) == 1

    def spawning_location(self) -> Point:
        """A random point on one of the map's four edges."""
        edge = self.rng.randrange(4)
        left, top = self.game_map.left_up
        width, height = self.game_map.size
        if edge == 0:
            return (left + self.rng.randrange(int(width)), top)
        if edge == 1:
            return (left, top + self.rng.randrange(int(height)))
        if edge == 2:
            return (left + self.rng.randrange(int(width)), top + height)
        return (left + width, top + self.rng.randrange(int(height)))

    def spawn_enemy(self) -> Enemy:
        """Add an enemy, as strong as the difficulty demands, on the map's edge."""
        health, power, speed = _ENEMY_STATS.get(
            self.game.difficulty, _ENEMY_STATS[Difficulty.VERY_HARD]
        )
        enemy = Enemy(
            health,
            power,
            speed,
            self.spawning_location(),
            self.game.load_texture,
            self.game.clock,
        )
        self.enemies.append(enemy)
        return enemy

    def handle_input(self, events) -> None:
        """Handle quitting, walking to a clicked point and the attack key."""
        window_size = self.game.window_size
        for event in events:
            if event.type in _POINTER_EVENTS:
                self._pointer = event.pos
            if event.type == pygame.QUIT:
                self.game.close()
            if event.type == pygame.MOUSEBUTTONDOWN and _is_click(event):
                self.set_mouse_pos(event.pos, _default_view(self.game), window_size)
                if self.quit_button.is_clicked(self.mouse_pos):
                    self.game.change_state(MainPage(self.game))
                self.set_mouse_pos(event.pos, self.character_view, window_size)
                if self.game_map.is_clicked(self.mouse_pos):
                    self.character.set_target_point(self.mouse_pos)
            if event.type == pygame.KEYDOWN and event.key == pygame.K_a:
                self.character.set_is_attacking(True)

    def update(self, delta_time: float) -> None:
        """Advance the hero and enemies, count kills, and end the game on death."""
        self.game_map.update()

        self.set_mouse_pos(self._pointer, self.character_view, self.game.window_size)
        self.character.update(self.mouse_pos, self.enemies, delta_time)
        self.character_view.center = self.character.position
        self.health_text = f"Health: {self.character.current_health}\n"

        if self.is_spawning():
            self.spawn_enemy()

        for enemy in self.enemies:
            enemy.update(self.character, delta_time)

        survivors = [enemy for enemy in self.enemies if enemy.is_alive]
        self.score += KILL_SCORE * (len(self.enemies) - len(survivors))
        self.enemies = survivors
        self.score_text = f"Score: {self.score}\n"

        if not self.character.is_alive:
            self.gameover = True
        if self.gameover:
            self.game.change_state(MainPage(self.game))

    def render(self, surface: pygame.Surface) -> None:
        """Draw the world through the hero's view, then the panels on top."""
        surface.fill(BLACK)
        view = self.character_view
        self.game_map.render(surface, view)
        self.character.render(surface, view)
        self.character.draw(surface, view)
        for enemy in self.enemies:
            enemy.render(surface, view)
            enemy.draw(surface, view)

        font = self.game.font
        self.quit_button.render(surface)
        self._score_box.render(surface, font, self.score_text)
        self._health_box.render(surface, font, self.health_text)
        self._difficulty_box.render(surface, font, self.difficulty_text)