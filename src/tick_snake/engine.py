"""Round state and the controller that ticks, resets, and feeds it."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass

import numpy as np

from tick_snake.arena import Arena
from tick_snake.clock import TickController
from tick_snake.config import GameConfig
from tick_snake.events import EventQueue, GameEvent
from tick_snake.food import FOOD_SIZE, FoodSpawner
from tick_snake.input_buffer import InputBuffer, Key, collect_input
from tick_snake.rules import snake_eating, snake_growth, snake_movement
from tick_snake.snake import (
    HEAD_SIZE,
    SEGMENT_SIZE,
    Direction,
    Position,
    Size,
    SnakeState,
)

logger = logging.getLogger(__name__)


@dataclass
class GameRound:
    """Everything that lives for exactly one round.

    A game over throws the whole round away and builds a new one, so no
    segment, food, or queued input survives into the next round.
    """

    snake: SnakeState
    inputs: InputBuffer
    food: Position | None = None
    last_tail_position: Position | None = None
    ticks: int = 0

    @classmethod
    def new(cls, config: GameConfig) -> GameRound:
        """Build the canonical starting round for *config*."""
        snake = SnakeState(
            config.start_position, config.heading, length=config.start_length,
        )
        return cls(snake=snake, inputs=InputBuffer(config.input_capacity))


class GameController:
    """Single-snake, tick-driven game controller.

    Owns the current :class:`GameRound`, the fixed-tick clock, and the food
    spawner. Each tick runs movement, eating, and growth in that order, then
    reacts to the tick's events: a game over resets the round, and a food
    request places new food. All public methods share one lock, so input may
    be pushed from a different thread than the one calling :meth:`frame`.
    The *on_game_over* hook runs after the lock is released, so it may call
    back into the controller.
    """

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        on_game_over: Callable[[GameRound], None] | None = None,
    ) -> None:
        self.config = config if config is not None else GameConfig()
        self.arena = Arena(self.config.arena_width, self.config.arena_height)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self.spawner = FoodSpawner(
            self.arena, rng=self.rng, max_attempts=self.config.max_spawn_attempts,
        )
        self.clock = TickController(self.config.tick_interval)
        self.events = EventQueue()
        self.on_game_over = on_game_over
        self.last_events: frozenset[GameEvent] = frozenset()
        self._lock = threading.Lock()
        self._finished: list[GameRound] = []

        self.round = GameRound.new(self.config)
        self.events.emit(GameEvent.FOOD_NEEDED)
        self._react()

    @property
    def length(self) -> int:
        """Current segment count."""
        return len(self.round.snake)

    # --- input boundary ---

    def press(self, direction: Direction) -> bool:
        """Offer one direction command to the current round's buffer."""
        with self._lock:
            return self.round.inputs.push(direction)

    def press_keys(self, keys: Iterable[Key | str]) -> int:
        """Offer every key pressed this frame. Returns the number accepted."""
        with self._lock:
            return collect_input(self.round.inputs, keys)

    # --- scheduling ---

    def frame(self, elapsed: float) -> int:
        """Advance the clock by *elapsed* seconds and run every due tick.

        Returns the number of ticks run.
        """
        with self._lock:
            due = self.clock.advance(elapsed)
            for _ in range(due):
                self._run_tick()
        self._notify_finished()
        return due

    def tick(self) -> None:
        """Run exactly one tick, bypassing the clock."""
        with self._lock:
            self._run_tick()
        self._notify_finished()

    def _run_tick(self) -> None:
        current = self.round
        snake_movement(current, self.arena, self.events)
        snake_eating(current, self.events)
        snake_growth(current, self.events)
        current.ticks += 1
        current.last_tail_position = None
        self._react()

    def _react(self) -> None:
        """Handle the tick's events, then clear them."""
        if self.events.take(GameEvent.GAME_OVER):
            self._reset()
        if self.events.take(GameEvent.FOOD_NEEDED):
            self.round.food = self.spawner.spawn(self.round.snake.segments)
        self.last_events = self.events.emitted
        self.events.clear()

    def _reset(self) -> None:
        finished = self.round
        logger.info(
            "Game over after %d ticks with %d segments.",
            finished.ticks, len(finished.snake),
        )
        self.round = GameRound.new(self.config)
        self.events.emit(GameEvent.FOOD_NEEDED)
        self._finished.append(finished)

    def _notify_finished(self) -> None:
        """Hand finished rounds to the hook once the lock is released."""
        with self._lock:
            finished, self._finished = self._finished, []
        if self.on_game_over is None:
            return
        for done in finished:
            self.on_game_over(done)

    # --- output boundary ---

    def renderables(self) -> list[tuple[Position, Size]]:
        """Return ``(position, size)`` for every visible entity."""
        with self._lock:
            current = self.round
            items: list[tuple[Position, Size]] = [
                (seg, HEAD_SIZE if i == 0 else SEGMENT_SIZE)
                for i, seg in enumerate(current.snake.segments)
            ]
            if current.food is not None:
                items.append((current.food, FOOD_SIZE))
            return items

    def get_state(self) -> dict:
        """Return the full, serializable game state."""
        with self._lock:
            current = self.round
            return {
                "tick": current.ticks,
                "length": len(current.snake),
                "snake": current.snake.to_dict(),
                "food": list(current.food) if current.food is not None else None,
                "pending_inputs": [d.name.lower() for d in current.inputs],
                "arena": self.arena.to_dict(),
            }
