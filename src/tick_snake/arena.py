"""Arena bounds and occupancy queries."""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from tick_snake.snake import Position


class Arena:
    """Rectangular playing field measured in cells.

    Occupancy masks are NumPy boolean arrays indexed ``[y, x]``.
    """

    def __init__(self, width: int = 32, height: int = 18) -> None:
        if width < 1 or height < 1:
            raise ValueError("Arena dimensions must be at least 1×1.")
        self.width = width
        self.height = height

    def in_bounds(self, position: tuple[int, int]) -> bool:
        """Check whether a coordinate lies within the arena."""
        x, y = position
        return 0 <= x < self.width and 0 <= y < self.height

    def occupancy(self, positions: Iterable[tuple[int, int]]) -> np.ndarray:
        """Return a mask with True on every in-bounds occupied cell."""
        mask = np.zeros((self.height, self.width), dtype=bool)
        for x, y in positions:
            if 0 <= x < self.width and 0 <= y < self.height:
                mask[y, x] = True
        return mask

    def free_cells(self, positions: Iterable[tuple[int, int]]) -> list[Position]:
        """Return every cell not covered by *positions*."""
        ys, xs = np.where(~self.occupancy(positions))
        return [
            Position(x, y)
            for x, y in zip(xs.tolist(), ys.tolist(), strict=True)
        ]

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height}
