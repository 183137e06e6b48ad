"""Headless frame loop driving a :class:`GameController`."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import numpy as np

from tick_snake.engine import GameController, GameRound
from tick_snake.input_buffer import Key

logger = logging.getLogger(__name__)

KeySource = Callable[[int], Sequence[Key]]


class RandomKeySource:
    """Presses one random arrow key on a fraction of frames."""

    def __init__(
        self,
        press_probability: float = 0.1,
        rng: np.random.Generator | None = None,
    ) -> None:
        if not 0.0 <= press_probability <= 1.0:
            raise ValueError("press_probability must be between 0 and 1.")
        self.press_probability = press_probability
        self.rng = rng if rng is not None else np.random.default_rng()
        self._keys = list(Key)

    def __call__(self, frame: int) -> list[Key]:
        if self.rng.random() >= self.press_probability:
            return []
        return [self._keys[int(self.rng.integers(len(self._keys)))]]


@dataclass
class RunStats:
    """Summary of a headless run."""

    frames: int = 0
    ticks: int = 0
    rounds_finished: int = 0
    best_length: int = 0
    wall_time_seconds: float = 0.0

    def summary(self) -> str:
        return (
            f"Run: {self.frames} frames, {self.ticks} ticks, "
            f"{self.rounds_finished} rounds finished, "
            f"best length {self.best_length} "
            f"in {self.wall_time_seconds:.2f}s"
        )


def run(
    controller: GameController,
    *,
    fps: float = 60.0,
    max_frames: int | None = None,
    key_source: KeySource | None = None,
    realtime: bool = False,
    clock: Callable[[], float] = time.perf_counter,
    sleep: Callable[[float], None] = time.sleep,
) -> RunStats:
    """Run the frame loop until *max_frames* frames (forever if ``None``).

    With *realtime* the loop measures elapsed time with *clock* and sleeps
    out the rest of each frame; otherwise every frame advances the game by
    exactly ``1 / fps`` seconds of simulated time.
    """
    if fps <= 0:
        raise ValueError("fps must be positive.")
    frame_time = 1.0 / fps
    stats = RunStats(best_length=controller.length)

    previous_hook = controller.on_game_over

    def _record(finished: GameRound) -> None:
        stats.rounds_finished += 1
        stats.best_length = max(stats.best_length, len(finished.snake))
        if previous_hook is not None:
            previous_hook(finished)

    controller.on_game_over = _record
    start = clock()
    last = start
    try:
        while max_frames is None or stats.frames < max_frames:
            if key_source is not None:
                controller.press_keys(key_source(stats.frames))

            if realtime:
                now = clock()
                elapsed = now - last
                last = now
            else:
                elapsed = frame_time
            stats.ticks += controller.frame(elapsed)
            stats.frames += 1
            stats.best_length = max(stats.best_length, controller.length)

            if realtime:
                remaining = frame_time - (clock() - last)
                if remaining > 0:
                    sleep(remaining)
    finally:
        controller.on_game_over = previous_hook
        stats.wall_time_seconds = clock() - start

    logger.info(stats.summary())
    return stats
