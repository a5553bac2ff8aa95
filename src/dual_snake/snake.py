"""Snake representation and movement logic."""

from __future__ import annotations

import enum
from collections import deque


class Direction(enum.Enum):
    """Cardinal movement directions with (col_delta, row_delta) values."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def opposite(self) -> Direction:
        """Return the heading that would reverse this one."""
        return _OPPOSITES[self]


# Pairs that would cause an instant 180° reversal.
_OPPOSITES: dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Snake:
    """A snake represented as an ordered deque of (col, row) body segments.

    The head is ``body[0]``; the tail is ``body[-1]``.
    """

    def __init__(
        self,
        start_col: int,
        start_row: int,
        direction: Direction = Direction.RIGHT,
        length: int = 1,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dc, dr = direction.value
        self.body: deque[tuple[int, int]] = deque()
        for i in range(length):
            self.body.append((start_col - dc * i, start_row - dr * i))
        self.direction = direction

    def __len__(self) -> int:
        return len(self.body)

    @property
    def head(self) -> tuple[int, int]:
        """Return the head coordinate."""
        return self.body[0]

    @property
    def tail(self) -> tuple[int, int]:
        """Return the last body segment."""
        return self.body[-1]

    def can_turn(self, new_direction: Direction) -> bool:
        """Return False for a direct reversal of the current heading."""
        return new_direction is not self.direction.opposite

    def set_direction(self, new_direction: Direction) -> bool:
        """Change direction, ignoring 180° reversals.

        Returns whether the heading was accepted.
        """
        if not self.can_turn(new_direction):
            return False
        self.direction = new_direction
        return True

    def next_head(self) -> tuple[int, int]:
        """Compute the next head position without moving."""
        dc, dr = self.direction.value
        c, r = self.head
        return c + dc, r + dr

    def move(self, grow: bool = False) -> tuple[int, int] | None:
        """Move the snake one step forward.

        Returns the vacated tail cell, or ``None`` if the snake grew.
        """
        self.body.appendleft(self.next_head())
        if grow:
            return None
        return self.body.pop()

    def collides(self, cell: tuple[int, int], tail_vacates: bool = False) -> bool:
        """Check *cell* against the body as it will stand after a move.

        When ``tail_vacates`` is set the tail segment is skipped, since it
        leaves its cell on the same tick the head arrives.
        """
        if cell not in self.body:
            return False
        # Segments are unique, so the tail is the only one at its cell.
        return not (tail_vacates and cell == self.tail)
