import pygame
import pytest

from blockyard.draw import (
    BLOCK_SIZE,
    draw_block,
    draw_rectangle,
    to_coord,
    to_coord_u32,
)


def _surface(size=200, fill=(0, 0, 0)):
    surface = pygame.Surface((size, size))
    surface.fill(fill)
    return surface


def test_to_coord_zero_and_one():
    assert to_coord(0) == 0.0
    assert to_coord(1) == pytest.approx(BLOCK_SIZE)


def test_to_coord_is_linear():
    assert to_coord(7) == pytest.approx(7 * to_coord(1))


def test_to_coord_u32_window_size():
    assert to_coord_u32(30) == 768


def test_to_coord_u32_truncates():
    assert to_coord_u32(1) == 25


def test_draw_block_fills_cell_only():
    surface = _surface()
    draw_block((1.0, 0.0, 0.0, 1.0), 1, 1, surface)
    center = int(to_coord(1) + BLOCK_SIZE / 2)
    assert surface.get_at((center, center))[:3] == (255, 0, 0)
    assert surface.get_at((5, 5))[:3] == (0, 0, 0)
    far = int(to_coord(3) + 5)
    assert surface.get_at((far, far))[:3] == (0, 0, 0)


def test_draw_rectangle_covers_span():
    surface = _surface()
    draw_rectangle((0.0, 1.0, 0.0, 1.0), 0, 0, 3, 1, surface)
    y = int(BLOCK_SIZE / 2)
    for x in (1, int(to_coord(1) + 3), int(to_coord(3)) - 2):
        assert surface.get_at((x, y))[:3] == (0, 255, 0)
    assert surface.get_at((x, int(to_coord(1) + 5)))[:3] == (0, 0, 0)


def test_draw_rectangle_translucent_blends():
    surface = _surface(fill=(255, 255, 255))
    draw_rectangle((0.9, 0.0, 0.0, 0.5), 0, 0, 2, 2, surface)
    r, g, b, _ = surface.get_at((10, 10))
    assert 0 < g < 255
    assert r > g
    assert g == b


def test_bad_colour_raises():
    surface = _surface()
    with pytest.raises(ValueError):
        draw_block((1.0, 0.0), 0, 0, surface)