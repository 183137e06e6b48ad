"""Buffered directional input and key bindings."""

from __future__ import annotations

import enum
from collections import deque
from collections.abc import Iterable, Iterator

from tick_snake.snake import Direction

DEFAULT_CAPACITY = 3


class Key(enum.Enum):
    """Arrow keys recognised by the input collector."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


KEY_BINDINGS: dict[Key, Direction] = {
    Key.LEFT: Direction.LEFT,
    Key.RIGHT: Direction.RIGHT,
    Key.UP: Direction.UP,
    Key.DOWN: Direction.DOWN,
}


class InputBuffer:
    """Bounded FIFO of pending direction commands.

    Written once per frame by the input collector and drained at most one
    command per tick by the movement phase. Once full, new commands are
    dropped rather than queued.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1.")
        self.capacity = capacity
        self._inputs: deque[Direction] = deque()

    def __len__(self) -> int:
        return len(self._inputs)

    def __iter__(self) -> Iterator[Direction]:
        return iter(self._inputs)

    def push(self, direction: Direction) -> bool:
        """Queue *direction* unless the buffer is full.

        Returns True if the command was accepted.
        """
        if len(self._inputs) >= self.capacity:
            return False
        self._inputs.append(direction)
        return True

    def pop_matching(self, current_heading: Direction) -> Direction:
        """Consume queued commands until one is a real turn.

        Commands equal to *current_heading* or its opposite are discarded
        along the way. Returns the accepted turn, or *current_heading* if the
        buffer ran dry. Commands behind the accepted one stay queued.
        """
        reverse = current_heading.opposite()
        while self._inputs:
            candidate = self._inputs.popleft()
            if candidate is not current_heading and candidate is not reverse:
                return candidate
        return current_heading

    def clear(self) -> None:
        self._inputs.clear()


def collect_input(buffer: InputBuffer, keys: Iterable[Key | str]) -> int:
    """Offer every key pressed this frame to *buffer*, in order.

    Unknown keys are ignored. Returns the number of commands accepted.
    """
    accepted = 0
    for key in keys:
        if not isinstance(key, Key):
            try:
                key = Key(key)
            except ValueError:
                continue
        if buffer.push(KEY_BINDINGS[key]):
            accepted += 1
    return accepted
