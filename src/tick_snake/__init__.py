"""Tick Snake: fixed-tick snake game engine."""

from tick_snake.arena import Arena
from tick_snake.clock import TickController
from tick_snake.config import GameConfig
from tick_snake.engine import GameController, GameRound
from tick_snake.events import EventQueue, GameEvent
from tick_snake.food import FoodSpawner
from tick_snake.input_buffer import InputBuffer, Key
from tick_snake.snake import Direction, Position, Size, SnakeState

__all__ = [
    "Arena",
    "Direction",
    "EventQueue",
    "FoodSpawner",
    "GameConfig",
    "GameController",
    "GameEvent",
    "GameRound",
    "InputBuffer",
    "Key",
    "Position",
    "Size",
    "SnakeState",
    "TickController",
]
