"""Window and event loop for the snake game."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from blockyard.draw import to_coord_u32
from blockyard.game import Game
from blockyard.snake import Direction

BACK_COLOR = (128, 128, 128)
FRAME_RATE = 60

_KEY_DIRECTIONS = {
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_UP: Direction.UP,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
}


def key_to_direction(key: int) -> Optional[Direction]:
    """Map an arrow key to a heading; other keys give None."""
    return _KEY_DIRECTIONS.get(key)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="snake", description="Play snake.")
    parser.add_argument("--width", type=int, default=30, help="grid width in cells")
    parser.add_argument("--height", type=int, default=30, help="grid height in cells")
    args = parser.parse_args(argv)
    if args.width < 3 or args.height < 3:
        parser.error("width and height must be at least 3")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the window and run the game until it is closed or Esc is pressed."""
    args = _parse_args(argv)
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (to_coord_u32(args.width), to_coord_u32(args.height))
        )
        pygame.display.set_caption("Snake")
        clock = pygame.time.Clock()
        game = Game(args.width, args.height)
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_ESCAPE:
                        running = False
                    else:
                        game.key_press(key_to_direction(event.key))
            if not running:
                break
            screen.fill(BACK_COLOR)
            game.draw(screen)
            pygame.display.flip()
            game.update(clock.tick(FRAME_RATE) / 1000.0)
    finally:
        pygame.quit()
    return 0