"""Game configuration with JSON round-tripping."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from tick_snake.snake import Direction, Position

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GameConfig:
    """Arena size, tick rate, and the canonical starting snake."""

    arena_width: int = 32
    arena_height: int = 18
    tick_interval: float = 0.15
    input_capacity: int = 3

    # Starting snake: head position, heading, segment count.
    start_x: int = 3
    start_y: int = 3
    start_heading: str = "up"
    start_length: int = 2

    max_spawn_attempts: int = 1000
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.arena_width < 1 or self.arena_height < 1:
            raise ValueError("arena_width and arena_height must be at least 1.")
        if self.tick_interval <= 0:
            raise ValueError("tick_interval must be positive.")
        if self.input_capacity < 1:
            raise ValueError("input_capacity must be at least 1.")
        if self.start_length < 2:
            raise ValueError("start_length must be at least 2.")
        if self.max_spawn_attempts < 1:
            raise ValueError("max_spawn_attempts must be at least 1.")

        heading = Direction.from_name(self.start_heading)
        dx, dy = heading.value
        for i in range(self.start_length):
            x = self.start_x - dx * i
            y = self.start_y - dy * i
            if not (0 <= x < self.arena_width and 0 <= y < self.arena_height):
                raise ValueError(
                    "starting snake does not fit the arena; move start_x/start_y "
                    "or reduce start_length."
                )

    @property
    def heading(self) -> Direction:
        return Direction.from_name(self.start_heading)

    @property
    def start_position(self) -> Position:
        return Position(self.start_x, self.start_y)

    def to_dict(self) -> dict:
        return asdict(self)

    def save(self, path: str | Path) -> None:
        """Write config to a JSON file."""
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(json.dumps(self.to_dict(), indent=2))
        logger.info("Config saved to %s", p)

    @classmethod
    def load(cls, path: str | Path) -> GameConfig:
        """Load config from a JSON file, ignoring unknown keys."""
        raw = json.loads(Path(path).read_text())
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in raw.items() if k in known})
