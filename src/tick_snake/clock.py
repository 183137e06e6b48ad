"""Fixed-interval tick scheduling against variable frame times."""

from __future__ import annotations

DEFAULT_TICK_INTERVAL = 0.15


class TickController:
    """Accumulates real elapsed time and reports how many ticks are due.

    Leftover time below one interval carries into the next frame, so a
    slow frame runs the missed ticks and a fast frame runs none.
    """

    def __init__(self, interval: float = DEFAULT_TICK_INTERVAL) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive.")
        self.interval = interval
        self.accumulator = 0.0

    def advance(self, elapsed: float) -> int:
        """Add *elapsed* seconds and return the number of due ticks."""
        if elapsed < 0:
            raise ValueError("elapsed must be non-negative.")
        self.accumulator += elapsed
        due = 0
        while self.accumulator >= self.interval:
            self.accumulator -= self.interval
            due += 1
        return due
