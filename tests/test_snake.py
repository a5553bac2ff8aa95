"""Tests for the Snake module."""

import pytest

from dual_snake.snake import Direction, Snake


class TestSnakeInit:
    def test_default_creation(self):
        snake = Snake(5, 5)
        assert snake.head == (5, 5)
        assert len(snake) == 1
        assert snake.direction == Direction.RIGHT

    def test_body_extends_opposite_to_direction(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert list(snake.body) == [(5, 5), (4, 5), (3, 5)]

    def test_body_extends_up(self):
        snake = Snake(5, 5, Direction.UP, length=3)
        assert list(snake.body) == [(5, 5), (5, 6), (5, 7)]

    def test_minimum_length(self):
        with pytest.raises(ValueError, match="at least 1"):
            Snake(0, 0, length=0)


class TestSnakeDirection:
    def test_set_valid_direction(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.set_direction(Direction.UP)
        assert snake.direction == Direction.UP

    def test_ignore_180_reversal(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert not snake.set_direction(Direction.LEFT)
        assert snake.direction == Direction.RIGHT

    def test_ignore_180_reversal_vertical(self):
        snake = Snake(5, 5, Direction.UP)
        snake.set_direction(Direction.DOWN)
        assert snake.direction == Direction.UP

    @pytest.mark.parametrize("current", list(Direction))
    def test_only_the_opposite_is_rejected(self, current):
        snake = Snake(5, 5, current)
        for candidate in Direction:
            assert snake.can_turn(candidate) == (candidate is not current.opposite)


class TestSnakeMovement:
    def test_next_head(self):
        snake = Snake(5, 5, Direction.RIGHT)
        assert snake.next_head() == (6, 5)

    def test_move_without_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        vacated = snake.move()
        assert snake.head == (6, 5)
        assert len(snake) == 3
        assert vacated == (3, 5)

    def test_move_with_growth(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        vacated = snake.move(grow=True)
        assert snake.head == (6, 5)
        assert len(snake) == 4
        assert vacated is None


class TestSnakeCollision:
    def test_tail(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.tail == (3, 5)

    def test_collides_with_tail(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert snake.collides((3, 5))

    def test_vacating_tail_is_skipped(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert not snake.collides((3, 5), tail_vacates=True)
        assert snake.collides((4, 5), tail_vacates=True)

    def test_free_cell_never_collides(self):
        snake = Snake(5, 5, Direction.RIGHT, length=3)
        assert not snake.collides((0, 0))
        assert not snake.collides((0, 0), tail_vacates=True)
