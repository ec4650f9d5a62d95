"""The snake: its body, heading and movement on the grid."""

from __future__ import annotations

import enum
from collections import deque
from itertools import islice
from typing import Iterator, Optional

import pygame

from blockyard.draw import draw_block

SNAKE_COLOR = (0.0, 0.8, 0.0, 1.0)

Position = tuple[int, int]


class Direction(enum.Enum):
    """A heading on the grid; y grows downwards."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    def opposite(self) -> "Direction":
        """The heading pointing the other way."""
        return _OPPOSITES[self]

    def step(self, x: int, y: int) -> Position:
        dx, dy = self.value
        return x + dx, y + dy


_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A three-block snake heading right, head first in its body."""

    def __init__(self, x: int, y: int) -> None:
        self._direction = Direction.RIGHT
        self._body: deque[Position] = deque([(x + 2, y), (x + 1, y), (x, y)])
        self._tail: Optional[Position] = None

    def __len__(self) -> int:
        return len(self._body)

    def __iter__(self) -> Iterator[Position]:
        return iter(self._body)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw every body block."""
        for x, y in self._body:
            draw_block(SNAKE_COLOR, x, y, surface)

    def head_position(self) -> Position:
        """Grid position of the head."""
        return self._body[0]

    def move_forward(self, direction: Optional[Direction] = None) -> None:
        """Step one cell, optionally turning first; remembers the dropped tail."""
        if direction is not None:
            self._direction = direction
        self._body.appendleft(self._direction.step(*self.head_position()))
        self._tail = self._body.pop()

    def head_direction(self) -> Direction:
        """Current heading."""
        return self._direction

    def next_head(self, direction: Optional[Direction] = None) -> Position:
        """Where the head would be after one step in the given or current heading."""
        moving = direction if direction is not None else self._direction
        return moving.step(*self.head_position())

    def restore_tail(self) -> None:
        """Grow by re-attaching the block dropped by the last move."""
        if self._tail is None:
            raise RuntimeError("snake has not moved yet; no tail to restore")
        self._body.append(self._tail)

    def overlap_tail(self, x: int, y: int) -> bool:
        """Whether (x, y) lies on the body, not counting the last block."""
        return (x, y) in islice(self._body, len(self._body) - 1)