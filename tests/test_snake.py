import pygame
import pytest

from blockyard.draw import BLOCK_SIZE, to_coord
from blockyard.snake import Direction, Snake


def test_opposite_is_involution():
    directions = list(Direction)
    assert len(directions) == 4
    for direction in directions:
        assert Direction.opposite(Direction.opposite(direction)) is direction
        assert Direction.opposite(direction) is not direction


def test_opposite_pairs():
    assert Direction.UP.opposite() is Direction.DOWN
    assert Direction.LEFT.opposite() is Direction.RIGHT


def test_initial_layout():
    snake = Snake(2, 2)
    assert list(snake) == [(4, 2), (3, 2), (2, 2)]
    assert snake.head_position() == (4, 2)
    assert snake.head_direction() is Direction.RIGHT


def test_move_forward_keeps_length():
    snake = Snake(2, 2)
    snake.move_forward(None)
    assert snake.head_position() == (5, 2)
    assert len(snake) == 3
    assert list(snake)[-1] == (3, 2)


def test_move_forward_turns():
    snake = Snake(2, 2)
    snake.move_forward(Direction.DOWN)
    assert snake.head_direction() is Direction.DOWN
    assert snake.head_position() == (4, 3)


def test_next_head_does_not_move():
    snake = Snake(2, 2)
    assert snake.next_head(Direction.UP) == (4, 1)
    assert snake.next_head(None) == (5, 2)
    assert snake.head_position() == (4, 2)
    assert snake.head_direction() is Direction.RIGHT


def test_restore_tail_grows():
    snake = Snake(2, 2)
    snake.move_forward(None)
    snake.restore_tail()
    assert len(snake) == 4
    assert list(snake)[-1] == (2, 2)


def test_restore_tail_before_move_raises():
    with pytest.raises(RuntimeError):
        Snake(2, 2).restore_tail()


def test_overlap_tail_ignores_last_block():
    snake = Snake(2, 2)
    assert snake.overlap_tail(4, 2) is True
    assert snake.overlap_tail(3, 2) is True
    assert snake.overlap_tail(2, 2) is False
    assert snake.overlap_tail(9, 9) is False


def test_draw_paints_body():
    surface = pygame.Surface((200, 200))
    surface.fill((0, 0, 0))
    snake = Snake(2, 2)
    snake.draw(surface)
    half = int(BLOCK_SIZE / 2)
    for x, y in snake:
        pixel = surface.get_at((int(to_coord(x)) + half, int(to_coord(y)) + half))
        assert pixel[1] > 0 and pixel[0] == 0