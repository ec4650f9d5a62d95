"""Grid-to-pixel conversion and block drawing on pygame surfaces."""

from __future__ import annotations

from typing import Sequence

import pygame

BLOCK_SIZE = 25.6

Color = Sequence[float]


def to_coord(game_coord: int) -> float:
    """Convert a grid coordinate to a pixel coordinate."""
    return float(game_coord) * BLOCK_SIZE


def to_coord_u32(game_coord: int) -> int:
    """Convert a grid coordinate to a whole pixel count, truncating."""
    return int(to_coord(game_coord))


def _rgba(color: Color) -> tuple[int, int, int, int]:
    channels = tuple(max(0, min(255, round(c * 255))) for c in color)
    if len(channels) == 3:
        channels = (*channels, 255)
    if len(channels) != 4:
        raise ValueError(f"colour needs 3 or 4 channels, got {len(channels)}")
    return channels  # type: ignore[return-value]


def _grid_rect(x: int, y: int, width: int, height: int) -> pygame.Rect:
    left = round(to_coord(x))
    top = round(to_coord(y))
    right = round(to_coord(x + width))
    bottom = round(to_coord(y + height))
    return pygame.Rect(left, top, max(0, right - left), max(0, bottom - top))


def _fill(surface: pygame.Surface, color: Color, rect: pygame.Rect) -> None:
    rgba = _rgba(color)
    if rgba[3] >= 255:
        surface.fill(rgba[:3], rect)
        return
    overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
    overlay.fill(rgba)
    surface.blit(overlay, rect.topleft)


def draw_block(color: Color, x: int, y: int, surface: pygame.Surface) -> None:
    """Fill the single grid cell at (x, y) with an RGBA colour in 0..1."""
    _fill(surface, color, _grid_rect(x, y, 1, 1))


def draw_rectangle(
    color: Color, x: int, y: int, width: int, height: int, surface: pygame.Surface
) -> None:
    """Fill a rectangle of grid cells with an RGBA colour in 0..1."""
    _fill(surface, color, _grid_rect(x, y, width, height))