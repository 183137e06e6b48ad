"""Per-tick event signals passed between the ordered tick phases."""

from __future__ import annotations

import enum


class GameEvent(enum.Enum):
    """Payload-free signals raised during a tick."""

    GAME_OVER = "game_over"
    GROWTH = "growth"
    FOOD_NEEDED = "food_needed"


class EventQueue:
    """Level-triggered event set for a single tick.

    Emitting an event that is already pending has no further effect, so a
    tick that hits a wall and its own body still ends only one round.
    Everything emitted since the last :meth:`clear` stays visible through
    :attr:`emitted`, even after a consumer has taken it.
    """

    def __init__(self) -> None:
        self._pending: set[GameEvent] = set()
        self._emitted: set[GameEvent] = set()

    def emit(self, *events: GameEvent) -> None:
        self._pending.update(events)
        self._emitted.update(events)

    def pending(self, event: GameEvent) -> bool:
        """Check for *event* without consuming it."""
        return event in self._pending

    def take(self, event: GameEvent) -> bool:
        """Read and clear *event*. Returns True if it was pending."""
        if event in self._pending:
            self._pending.discard(event)
            return True
        return False

    @property
    def emitted(self) -> frozenset[GameEvent]:
        return frozenset(self._emitted)

    def clear(self) -> None:
        self._pending.clear()
        self._emitted.clear()

    def __bool__(self) -> bool:
        return bool(self._pending)

    def __repr__(self) -> str:
        names = sorted(e.value for e in self._pending)
        return f"EventQueue({', '.join(names)})"
