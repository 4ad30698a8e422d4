import pytest

from smogshooter.game_state import FloatRect, GameState, View

WINDOW = (768, 768)


def test_contains_includes_left_top_edge():
    rect = FloatRect(0, 0, 10, 10)
    assert rect.contains((0, 0))
    assert rect.contains((5, 5))


def test_contains_excludes_right_bottom_edge():
    rect = FloatRect(0, 0, 10, 10)
    assert not rect.contains((10, 5))
    assert not rect.contains((5, 10))


def test_contains_handles_negative_size():
    rect = FloatRect(10, 10, -10, -10)
    assert rect.contains((5, 5))


def test_intersects_overlap_and_touching():
    a = FloatRect(0, 0, 10, 10)
    assert a.intersects(FloatRect(5, 5, 10, 10))
    assert FloatRect(5, 5, 10, 10).intersects(a)
    assert not a.intersects(FloatRect(10, 0, 10, 10))
    assert not a.intersects(FloatRect(50, 50, 1, 1))


def test_default_view_is_identity():
    view = View(center=(WINDOW[0] / 2, WINDOW[1] / 2), size=WINDOW)
    assert view.map_pixel_to_coords((100, 200), WINDOW) == pytest.approx((100, 200))


def test_window_center_maps_to_view_center():
    view = View(center=(-40.0, 25.0), size=(512, 512))
    centre_pixel = (WINDOW[0] / 2, WINDOW[1] / 2)
    assert view.map_pixel_to_coords(centre_pixel, WINDOW) == pytest.approx(view.center)


@pytest.mark.parametrize("pixel", [(0, 0), (100, 300), (767, 12)])
def test_to_screen_round_trip(pixel):
    view = View(center=(300.0, -120.0), size=(512, 512))
    world = view.map_pixel_to_coords(pixel, WINDOW)
    assert view.to_screen(world, WINDOW) == pytest.approx(pixel)


def test_game_state_is_abstract():
    with pytest.raises(TypeError):
        GameState()


class _Screen(GameState):
    def handle_input(self, events):
        return list(events)

    def update(self, delta_time):
        return delta_time

    def render(self, surface):
        return surface


def test_set_mouse_pos_stores_world_position():
    screen = _Screen()
    view = View(center=(0.0, 0.0), size=(512, 512))
    pos = screen.set_mouse_pos((WINDOW[0] / 2, WINDOW[1] / 2), view, WINDOW)
    assert pos == pytest.approx((0.0, 0.0))
    assert screen.mouse_pos == pos