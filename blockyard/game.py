"""Game state: snake, food, walls, timing and restarts."""

from __future__ import annotations

import random
from typing import Optional

import pygame

from blockyard.draw import draw_block, draw_rectangle
from blockyard.snake import Direction, Snake

FOOD_COLOR = (1.0, 0.0, 0.0, 1.0)
BORDER_COLOR = (0.0, 0.0, 0.0, 1.0)
GAMEOVER_COLOR = (0.9, 0.0, 0.0, 0.5)

MOVING_PERIOD = 0.1
RESTART_TIME = 1.0

_START = (2, 2)
_FIRST_FOOD = (6, 4)


class Game:
    """A snake game on a walled grid of width x height cells."""

    def __init__(
        self, width: int, height: int, rng: Optional[random.Random] = None
    ) -> None:
        self.width = width
        self.height = height
        self._rng = rng if rng is not None else random.Random()
        self._reset()

    def _reset(self) -> None:
        self.snake = Snake(*_START)
        self.food_exists = True
        self.food = _FIRST_FOOD
        self.game_over = False
        self.waiting_time = 0.0

    def key_press(self, direction: Optional[Direction]) -> None:
        """Turn and step immediately, unless over, reversing or no direction."""
        if self.game_over or direction is None:
            return
        if direction is self.snake.head_direction().opposite():
            return
        self.update_snake(direction)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw snake, food, walls and the game-over overlay."""
        self.snake.draw(surface)
        if self.food_exists:
            draw_block(FOOD_COLOR, *self.food, surface)
        draw_rectangle(BORDER_COLOR, 0, 0, self.width, 1, surface)
        draw_rectangle(BORDER_COLOR, 0, self.height - 1, self.width, 1, surface)
        draw_rectangle(BORDER_COLOR, 0, 0, 1, self.height, surface)
        draw_rectangle(BORDER_COLOR, self.width - 1, 0, 1, self.height, surface)
        if self.game_over:
            draw_rectangle(GAMEOVER_COLOR, 0, 0, self.width, self.height, surface)

    def update(self, delta_time: float) -> None:
        """Advance the clock; move, respawn food or restart as due."""
        self.waiting_time += delta_time
        if self.game_over:
            if self.waiting_time > RESTART_TIME:
                self._reset()
            return
        if not self.food_exists:
            self.add_food()
        if self.waiting_time > MOVING_PERIOD:
            self.update_snake(None)

    def _check_eating(self) -> None:
        if self.food_exists and self.food == self.snake.head_position():
            self.food_exists = False
            self.snake.restore_tail()

    def _is_alive_after(self, direction: Optional[Direction]) -> bool:
        next_x, next_y = self.snake.next_head(direction)
        if self.snake.overlap_tail(next_x, next_y):
            return False
        return 0 < next_x < self.width - 1 and 0 < next_y < self.height - 1

    def add_food(self) -> None:
        """Place food on a random inner cell not covered by the snake."""
        while True:
            x = self._rng.randrange(1, self.width - 1)
            y = self._rng.randrange(1, self.height - 1)
            if not self.snake.overlap_tail(x, y):
                break
        self.food = (x, y)
        self.food_exists = True

    def update_snake(self, direction: Optional[Direction]) -> None:
        """Step the snake, or end the game if the step would be fatal."""
        if self._is_alive_after(direction):
            self.snake.move_forward(direction)
            self._check_eating()
        else:
            self.game_over = True
        self.waiting_time = 0.0