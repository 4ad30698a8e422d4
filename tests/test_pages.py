import random

import pygame
import pytest

from smogshooter.actors import Enemy
from smogshooter.button import WHITE
from smogshooter.data_manager import Difficulty
from smogshooter.pages import (
    BUTTON_HEIGHT,
    BUTTON_WIDTH,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    CharacterPage,
    GamePlayPage,
    MainPage,
)

BLACK = (0, 0, 0)
PLAY_PIXEL = (int(PAGE_WIDTH / 2 - 240), int(PAGE_HEIGHT * 3 / 8))
QUIT_PIXEL = (int(PAGE_WIDTH / 2 - 240), int(PAGE_HEIGHT * 6 / 8))


class FakeGame:
    window_size = (PAGE_WIDTH, PAGE_HEIGHT)

    def __init__(self, difficulty=Difficulty.EASY):
        pygame.font.init()
        self.font = pygame.font.Font(None, 16)
        self.difficulty = difficulty
        self.current_state = None
        self.is_open = True
        self.clock = lambda: 0.0

    def load_texture(self, name):
        size = (128, 128) if name == "map.png" else (64, 64)
        return pygame.Surface(size, pygame.SRCALPHA)

    def change_state(self, state):
        self.current_state = state

    def close(self):
        self.is_open = False


class FakeRng:
    def __init__(self, values=()):
        self.values = list(values)

    def randrange(self, stop):
        return self.values.pop(0) if self.values else 0


def release(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONUP, pos=pos, button=1)


def press(pos):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=pos, button=1)


def rendered_colour(state, size, pixel):
    surface = pygame.Surface(size)
    state.render(surface)
    return tuple(surface.get_at(pixel))[:3]


@pytest.fixture
def game():
    return FakeGame()


def test_main_page_play_opens_gameplay(game):
    page = MainPage(game)
    page.handle_input([release((PAGE_WIDTH / 2, PAGE_HEIGHT * 3 / 8))])
    state = game.current_state
    assert isinstance(state, GamePlayPage)
    assert state.score == 0
    assert state.difficulty_text == "Difficulty:\neasy"


def test_main_page_character_button(game):
    page = MainPage(game)
    page.handle_input([release((PAGE_WIDTH / 2, PAGE_HEIGHT * 4.5 / 8))])
    state = game.current_state
    assert isinstance(state, CharacterPage)
    assert rendered_colour(state, game.window_size, QUIT_PIXEL) == WHITE
    assert rendered_colour(state, game.window_size, PLAY_PIXEL) == BLACK


def test_main_page_exit_button_closes(game):
    page = MainPage(game)
    page.handle_input([release((PAGE_WIDTH / 2, PAGE_HEIGHT * 6 / 8))])
    assert game.is_open is False
    assert game.current_state is None


def test_main_page_quit_event_closes(game):
    MainPage(game).handle_input([pygame.event.Event(pygame.QUIT)])
    assert game.is_open is False


def test_main_page_click_outside_does_nothing(game):
    page = MainPage(game)
    page.handle_input([release((2, 2))])
    assert game.current_state is None
    assert game.is_open is True


def test_main_page_render(game):
    surface = pygame.Surface(game.window_size)
    MainPage(game).render(surface)
    assert tuple(surface.get_at(PLAY_PIXEL))[:3] == WHITE
    assert tuple(surface.get_at((5, 5)))[:3] == BLACK


def test_character_page_quit_returns_to_menu(game):
    page = CharacterPage(game)
    page.handle_input([release((PAGE_WIDTH / 2, PAGE_HEIGHT * 6 / 8))])
    state = game.current_state
    assert isinstance(state, MainPage)
    assert rendered_colour(state, game.window_size, PLAY_PIXEL) == WHITE


@pytest.mark.parametrize(
    "difficulty, text",
    [
        (Difficulty.EASY, "Difficulty:\neasy"),
        (Difficulty.MEDIUM, "Difficulty:\nmidium"),
        (Difficulty.HARD, "Difficulty:\nhard"),
        (Difficulty.VERY_HARD, "Difficulty:\nvery hard"),
    ],
)
def test_difficulty_text(difficulty, text):
    page = GamePlayPage(FakeGame(difficulty), FakeRng())
    assert page.difficulty_text == text


@pytest.mark.parametrize(
    "difficulty, stats",
    [
        (Difficulty.EASY, (2, 1, 1)),
        (Difficulty.MEDIUM, (3, 1, 1)),
        (Difficulty.HARD, (3, 2, 2)),
        (Difficulty.VERY_HARD, (5, 2, 2)),
    ],
)
def test_spawn_enemy_stats(difficulty, stats):
    page = GamePlayPage(FakeGame(difficulty), FakeRng())
    enemy = page.spawn_enemy()
    assert (enemy.max_health, enemy.attack_power, enemy.speed) == stats
    assert page.enemies == [enemy]


def test_is_spawning_only_on_one(game):
    assert GamePlayPage(game, FakeRng([1])).is_spawning() is True
    assert GamePlayPage(game, FakeRng([0])).is_spawning() is False


def test_spawning_location_top_edge(game):
    page = GamePlayPage(game, FakeRng([0, 5]))
    left, top = page.game_map.left_up
    assert page.spawning_location() == (left + 5, top)


def test_spawning_location_on_map_border(game):
    page = GamePlayPage(game, random.Random(3))
    left, top = page.game_map.left_up
    width, height = page.game_map.size
    for _ in range(200):
        x, y = page.spawning_location()
        assert left <= x <= left + width
        assert top <= y <= top + height
        assert x in (left, left + width) or y in (top, top + height)


def test_click_on_map_sets_target(game):
    page = GamePlayPage(game, FakeRng())
    pixel = (PAGE_WIDTH / 2 + 30, PAGE_HEIGHT / 2 - 20)
    page.handle_input([press(pixel)])
    expected = page.character_view.map_pixel_to_coords(pixel, game.window_size)
    assert page.character.target_point == pytest.approx(expected)
    assert game.current_state is None


def test_quit_button_returns_to_menu(game):
    page = GamePlayPage(game, FakeRng())
    page.handle_input([press((BUTTON_WIDTH / 2, PAGE_HEIGHT - BUTTON_HEIGHT / 2))])
    state = game.current_state
    assert isinstance(state, MainPage)
    assert rendered_colour(state, game.window_size, PLAY_PIXEL) == WHITE
    assert rendered_colour(state, game.window_size, (5, 5)) == BLACK


def test_attack_key_starts_attack(game):
    page = GamePlayPage(game, FakeRng())
    page.handle_input([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_a)])
    assert page.character.is_attacking is True


def test_update_sets_health_text(game):
    page = GamePlayPage(game, FakeRng())
    page.update(0.0)
    assert page.health_text == "Health: 5\n"
    assert page.score_text == "Score: 0\n"
    assert game.current_state is None


def test_dead_enemy_is_removed_and_scored(game):
    page = GamePlayPage(game, FakeRng())
    enemy = page.spawn_enemy()
    enemy.current_health = 0
    page.update(0.0)
    assert page.enemies == []
    assert page.score == 100
    assert page.score_text == "Score: 100\n"


def test_living_enemy_stays(game):
    page = GamePlayPage(game, FakeRng())
    page.enemies.append(Enemy(2, 1, 1, (40.0, 40.0), game.load_texture, game.clock))
    page.update(0.0)
    assert len(page.enemies) == 1
    assert page.score == 0


def test_death_ends_game(game):
    page = GamePlayPage(game, FakeRng())
    page.character.current_health = 0
    page.update(0.0)
    assert page.gameover is True
    assert isinstance(game.current_state, MainPage)


def test_gameplay_render_draws_panels(game):
    page = GamePlayPage(game, FakeRng())
    page.update(0.0)
    surface = pygame.Surface(game.window_size)
    page.render(surface)
    assert tuple(surface.get_at((2, PAGE_HEIGHT - 2)))[:3] == WHITE
    assert tuple(surface.get_at((PAGE_WIDTH - 2, PAGE_HEIGHT - 2)))[:3] == WHITE