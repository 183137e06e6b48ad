"""Tick throughput benchmarking."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass

import numpy as np

from tick_snake.config import GameConfig
from tick_snake.engine import GameController, GameRound
from tick_snake.snake import Direction

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkResult:
    """Results from a throughput benchmark run."""

    total_ticks: int
    rounds_finished: int
    best_length: int
    wall_time_seconds: float
    ticks_per_second: float

    def summary(self) -> str:
        return (
            f"Benchmark: {self.total_ticks} ticks, "
            f"{self.rounds_finished} rounds, best length {self.best_length} "
            f"in {self.wall_time_seconds:.2f}s | "
            f"{self.ticks_per_second:.1f} ticks/s"
        )


def benchmark_ticks(
    *,
    ticks: int = 10_000,
    config: GameConfig | None = None,
    press_probability: float = 0.3,
    seed: int = 42,
) -> BenchmarkResult:
    """Measure raw tick throughput with random input.

    Before each tick a random direction is pushed with probability
    *press_probability*.
    """
    if ticks < 1:
        raise ValueError("ticks must be at least 1.")
    rng = np.random.default_rng(seed)
    directions = list(Direction)
    finished: list[int] = []

    def _record(done: GameRound) -> None:
        finished.append(len(done.snake))

    controller = GameController(config, rng=rng, on_game_over=_record)
    best = controller.length

    start = time.perf_counter()
    for _ in range(ticks):
        if rng.random() < press_probability:
            controller.press(directions[int(rng.integers(len(directions)))])
        controller.tick()
        best = max(best, controller.length)
    elapsed = time.perf_counter() - start

    result = BenchmarkResult(
        total_ticks=ticks,
        rounds_finished=len(finished),
        best_length=max([best, *finished]),
        wall_time_seconds=elapsed,
        ticks_per_second=ticks / max(elapsed, 1e-9),
    )
    logger.info(result.summary())
    return result
