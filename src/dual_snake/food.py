"""Food spawning logic."""

from __future__ import annotations

import logging
from collections.abc import Collection
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from dual_snake.grid import Grid

logger = logging.getLogger(__name__)


class FoodSpawner:
    """Places the single food cell on free playable cells.

    Samples random cells first and rejects those on the snake; once
    ``max_attempts`` samples have failed it picks uniformly among the
    enumerated free cells instead, so a crowded board cannot stall it.
    Uses a seeded NumPy RNG for reproducible placement.
    """

    def __init__(
        self,
        grid: Grid,
        rng: np.random.Generator | None = None,
        max_attempts: int = 32,
    ) -> None:
        if max_attempts < 0:
            raise ValueError("max_attempts must be >= 0.")
        self.grid = grid
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def spawn(self, occupied: Collection[tuple[int, int]]) -> tuple[int, int] | None:
        """Return a free cell for the next food, or ``None`` if none is left."""
        taken = set(occupied)
        grid = self.grid
        for _ in range(self.max_attempts):
            cell = (
                int(self.rng.integers(grid.min_col, grid.max_col)),
                int(self.rng.integers(grid.min_row, grid.max_row)),
            )
            if cell not in taken:
                logger.debug("Food spawned at %s.", cell)
                return cell

        free = grid.free_cells(taken)
        if not free:
            logger.warning("No free cells available for food spawning.")
            return None
        cell = free[int(self.rng.integers(len(free)))]
        logger.debug("Food spawned at %s after exhausting samples.", cell)
        return cell
