"""Food placement by rejection sampling."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from tick_snake.snake import Position, Size

if TYPE_CHECKING:
    from collections.abc import Collection

    from tick_snake.arena import Arena

logger = logging.getLogger(__name__)

FOOD_SIZE = Size.square(0.8)


class FoodSpawner:
    """Picks food positions that avoid the snake's body.

    Candidates are drawn uniformly from the whole arena and redrawn while
    they land on a segment. After *max_attempts* misses the spawner stops
    sampling blindly and picks among the free cells directly, so a nearly
    full arena cannot stall a frame.
    """

    def __init__(
        self,
        arena: Arena,
        rng: np.random.Generator | None = None,
        max_attempts: int = 1000,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1.")
        self.arena = arena
        self.rng = rng if rng is not None else np.random.default_rng()
        self.max_attempts = max_attempts

    def _draw(self) -> Position:
        x = int(self.rng.integers(self.arena.width))
        y = int(self.rng.integers(self.arena.height))
        return Position(x, y)

    def spawn(self, occupied: Collection[tuple[int, int]]) -> Position | None:
        """Return a free position, or ``None`` if the arena is full."""
        blocked = set(occupied)
        for _ in range(self.max_attempts):
            candidate = self._draw()
            if candidate not in blocked:
                logger.debug("Food placed at %s.", candidate)
                return candidate

        free = self.arena.free_cells(blocked)
        if not free:
            logger.warning("No free cells available for food spawning.")
            return None
        candidate = free[int(self.rng.integers(len(free)))]
        logger.debug(
            "Food placed at %s after %d rejected draws.",
            candidate, self.max_attempts,
        )
        return candidate
