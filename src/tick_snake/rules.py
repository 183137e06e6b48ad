"""The three ordered tick phases: movement, eating, growth.

Each phase reads and mutates the current :class:`~tick_snake.engine.GameRound`
and communicates with later phases only through the tick's
:class:`~tick_snake.events.EventQueue`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_snake.events import GameEvent
from tick_snake.snake import Position

if TYPE_CHECKING:
    from tick_snake.arena import Arena
    from tick_snake.engine import GameRound
    from tick_snake.events import EventQueue

logger = logging.getLogger(__name__)


def snake_movement(round_: GameRound, arena: Arena, events: EventQueue) -> None:
    """Turn, advance the head one cell, and drag the body behind it."""
    snake = round_.snake
    if snake.head is None:
        logger.error("Movement skipped: snake has no head.")
        return

    # Every segment follows the pre-move position of the one ahead of it.
    before = list(snake.segments)

    snake.heading = round_.inputs.pop_matching(snake.heading)
    dx, dy = snake.heading.value
    old_head = before[0]
    new_head = Position(old_head.x + dx, old_head.y + dy)

    if not arena.in_bounds(new_head):
        events.emit(GameEvent.GAME_OVER, GameEvent.FOOD_NEEDED)
    if new_head in before:
        events.emit(GameEvent.GAME_OVER, GameEvent.FOOD_NEEDED)

    snake.segments = [new_head, *before[:-1]]
    round_.last_tail_position = before[-1]


def snake_eating(round_: GameRound, events: EventQueue) -> None:
    """Consume the food if the head is on it."""
    if round_.food is None or round_.snake.head != round_.food:
        return
    round_.food = None
    events.emit(GameEvent.GROWTH, GameEvent.FOOD_NEEDED)


def snake_growth(round_: GameRound, events: EventQueue) -> None:
    """Append a segment where the tail was before this tick's move."""
    if not events.take(GameEvent.GROWTH):
        return
    tail = round_.last_tail_position
    if tail is None:
        logger.error("Growth skipped: no tail position recorded this tick.")
        return
    round_.snake.append_segment(tail)
    logger.debug("Snake grew to %d segments.", len(round_.snake))
