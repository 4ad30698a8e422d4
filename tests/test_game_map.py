import pygame
import pytest

from smogshooter.game_map import MAP_SIZE, GameMap
from smogshooter.game_state import View


def test_default_size_and_centre():
    game_map = GameMap()
    assert MAP_SIZE == 128 * 12
    assert game_map.size == (MAP_SIZE, MAP_SIZE)
    assert game_map.position == (0.0, 0.0)


def test_size_taken_from_texture():
    texture = pygame.Surface((300, 200))
    game_map = GameMap(texture=texture)
    assert game_map.size == (300, 200)


def test_left_up_is_half_size_from_centre():
    game_map = GameMap(size=(400, 260))
    left, top = game_map.left_up
    assert left + game_map.size[0] / 2 == pytest.approx(game_map.position[0])
    assert top + game_map.size[1] / 2 == pytest.approx(game_map.position[1])


def test_is_clicked():
    game_map = GameMap(size=(400, 400))
    assert game_map.is_clicked((0.0, 0.0))
    assert game_map.is_clicked(game_map.left_up)
    assert not game_map.is_clicked((1000.0, 0.0))
    assert not game_map.is_clicked((0.0, -1000.0))


def test_update_leaves_map_unchanged():
    game_map = GameMap(size=(400, 400))
    game_map.update()
    assert game_map.size == (400, 400)
    assert game_map.position == (0.0, 0.0)


def test_render_without_texture_fills_green():
    game_map = GameMap(size=(100, 100))
    surface = pygame.Surface((200, 200))
    view = View(center=(0.0, 0.0), size=(200, 200))
    game_map.render(surface, view)
    assert surface.get_at((100, 100)) == pygame.Color(0, 255, 0, 255)
    assert surface.get_at((5, 5)) == pygame.Color(0, 0, 0, 255)


def test_render_with_texture_scales_to_view():
    texture = pygame.Surface((50, 50))
    texture.fill((0, 0, 255))
    game_map = GameMap(texture=texture)
    surface = pygame.Surface((200, 200))
    view = View(center=(0.0, 0.0), size=(100, 100))
    game_map.render(surface, view)
    assert surface.get_at((100, 100)) == pygame.Color(0, 0, 255, 255)
    assert surface.get_at((52, 100)) == pygame.Color(0, 0, 255, 255)
    assert surface.get_at((10, 100)) == pygame.Color(0, 0, 0, 255)