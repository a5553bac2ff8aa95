"""Grid geometry and the boundary rule."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

_MIN_PLAYABLE = 4


class Grid:
    """Fixed-size discrete grid of ``width`` × ``height`` cells.

    Coordinates are ``(col, row)`` pairs. The playable range is
    ``[inset, width - inset) × [inset, height - inset)``; a non-zero
    ``inset`` reserves the outer ring of cells for a drawn border.
    """

    def __init__(self, width: int = 30, height: int = 20, inset: int = 0) -> None:
        if inset < 0:
            raise ValueError("inset must be >= 0.")
        if width - 2 * inset < _MIN_PLAYABLE or height - 2 * inset < _MIN_PLAYABLE:
            raise ValueError(
                f"Playable area must be at least {_MIN_PLAYABLE}×{_MIN_PLAYABLE}.",
            )
        self.width = width
        self.height = height
        self.inset = inset

    @property
    def min_col(self) -> int:
        """Inclusive lower bound for columns."""
        return self.inset

    @property
    def max_col(self) -> int:
        """Exclusive upper bound for columns."""
        return self.width - self.inset

    @property
    def min_row(self) -> int:
        """Inclusive lower bound for rows."""
        return self.inset

    @property
    def max_row(self) -> int:
        """Exclusive upper bound for rows."""
        return self.height - self.inset

    @property
    def center(self) -> tuple[int, int]:
        """Return the middle cell of the full grid."""
        return self.width // 2, self.height // 2

    def in_bounds(self, col: int, row: int) -> bool:
        """Check whether a coordinate lies within the playable range."""
        return (
            self.min_col <= col < self.max_col
            and self.min_row <= row < self.max_row
        )

    def free_cells(
        self, occupied: Iterable[tuple[int, int]],
    ) -> list[tuple[int, int]]:
        """Return every playable cell not listed in *occupied*."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        mask[self.min_row:self.max_row, self.min_col:self.max_col] = True
        for col, row in occupied:
            if self.in_bounds(col, row):
                mask[row, col] = False
        rows, cols = np.nonzero(mask)
        return list(zip(cols.tolist(), rows.tolist(), strict=True))
