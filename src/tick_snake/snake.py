"""Snake representation: positions, directions, and the ordered body."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import NamedTuple


class Position(NamedTuple):
    """Grid cell coordinate. ``y`` grows upwards."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Logical size of an entity, in cell units."""

    width: float
    height: float

    @classmethod
    def square(cls, side: float) -> Size:
        return cls(side, side)


HEAD_SIZE = Size.square(0.8)
SEGMENT_SIZE = Size.square(0.65)


class Direction(enum.Enum):
    """Cardinal movement directions with (dx, dy) values."""

    LEFT = (-1, 0)
    UP = (0, 1)
    RIGHT = (1, 0)
    DOWN = (0, -1)

    def opposite(self) -> Direction:
        """Return the direction that would reverse onto the body."""
        return _OPPOSITES[self]

    @classmethod
    def from_name(cls, name: str) -> Direction:
        """Look up a direction by case-insensitive name (``"up"`` etc.)."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown direction: {name!r}.") from None


_OPPOSITES: dict[Direction, Direction] = {
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
}


class SnakeState:
    """A snake as an ordered list of segment positions.

    The head is ``segments[0]`` and owns :attr:`heading`; the tail is
    ``segments[-1]``.
    """

    def __init__(
        self,
        head: Position,
        heading: Direction = Direction.UP,
        length: int = 2,
    ) -> None:
        if length < 1:
            raise ValueError("Snake length must be at least 1.")
        dx, dy = heading.value
        x, y = head
        self.segments: list[Position] = [
            Position(x - dx * i, y - dy * i) for i in range(length)
        ]
        self.heading = heading

    @classmethod
    def from_segments(
        cls, segments: list[tuple[int, int]], heading: Direction,
    ) -> SnakeState:
        """Build a snake from explicit segment coordinates, head first."""
        if not segments:
            raise ValueError("Snake needs at least one segment.")
        snake = cls(Position(*segments[0]), heading, length=1)
        snake.segments = [Position(*seg) for seg in segments]
        return snake

    @property
    def head(self) -> Position | None:
        """Return the head coordinate, or ``None`` for an empty body."""
        return self.segments[0] if self.segments else None

    def __len__(self) -> int:
        return len(self.segments)

    def occupies(self, position: tuple[int, int]) -> bool:
        """Check whether any segment sits on *position*."""
        return position in self.segments

    def append_segment(self, position: Position) -> None:
        """Grow the body by one segment at *position*."""
        self.segments.append(position)

    def to_dict(self) -> dict:
        """Serialize snake state to a dictionary."""
        return {
            "segments": [list(seg) for seg in self.segments],
            "heading": self.heading.name.lower(),
        }
