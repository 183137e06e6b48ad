"""Tests for the GameController and round lifecycle."""

import json
import threading

import numpy as np

from tick_snake.config import GameConfig
from tick_snake.engine import GameController, GameRound
from tick_snake.events import GameEvent
from tick_snake.input_buffer import Key
from tick_snake.snake import Direction, Position, Size, SnakeState


def _controller(**overrides) -> GameController:
    overrides.setdefault("seed", 0)
    return GameController(GameConfig(**overrides))


def _place(controller, segments, heading, food=(20, 10)):
    controller.round.snake = SnakeState.from_segments(segments, heading)
    controller.round.food = Position(*food) if food is not None else None


def _assert_canonical(controller):
    current = controller.round
    assert current.snake.segments == [(3, 3), (3, 2)]
    assert current.snake.heading is Direction.UP
    assert len(current.inputs) == 0
    assert current.food is not None
    assert not current.snake.occupies(current.food)


class TestControllerInit:
    def test_canonical_start(self):
        controller = _controller()
        _assert_canonical(controller)
        assert controller.length == 2
        assert controller.round.ticks == 0

    def test_initial_food_requested(self):
        controller = _controller()
        assert controller.last_events == {GameEvent.FOOD_NEEDED}
        assert not controller.events

    def test_custom_arena(self):
        controller = _controller(arena_width=10, arena_height=8)
        assert controller.arena.width == 10
        assert controller.arena.height == 8


class TestControllerTick:
    def test_straight_tick_without_input(self):
        controller = _controller()
        controller.round.food = Position(20, 10)
        controller.tick()
        assert controller.round.snake.segments == [(3, 4), (3, 3)]
        assert controller.last_events == frozenset()
        assert controller.round.ticks == 1

    def test_turn_from_press(self):
        controller = _controller()
        controller.round.food = Position(20, 10)
        assert controller.press(Direction.RIGHT)
        controller.tick()
        assert controller.round.snake.head == (4, 3)

    def test_press_keys(self):
        controller = _controller()
        accepted = controller.press_keys([Key.LEFT, Key.DOWN, Key.RIGHT, Key.UP])
        assert accepted == 3
        assert controller.get_state()["pending_inputs"] == ["left", "down", "right"]

    def test_events_cleared_after_tick(self):
        controller = _controller()
        _place(controller, [(5, 4), (5, 3)], Direction.UP, food=(5, 5))
        controller.tick()
        assert not controller.events
        assert controller.round.last_tail_position is None


class TestControllerEating:
    def test_eating_grows_and_respawns_food(self):
        controller = _controller()
        _place(controller, [(5, 4), (5, 3)], Direction.UP, food=(5, 5))
        controller.tick()
        assert controller.length == 3
        assert controller.round.snake.segments == [(5, 5), (5, 4), (5, 3)]
        assert controller.last_events == {GameEvent.GROWTH, GameEvent.FOOD_NEEDED}
        assert controller.round.food is not None
        assert not controller.round.snake.occupies(controller.round.food)

    def test_new_segment_trails_after_next_tick(self):
        controller = _controller()
        _place(controller, [(5, 4), (5, 3)], Direction.UP, food=(5, 5))
        controller.tick()
        controller.round.food = Position(20, 10)
        controller.tick()
        assert controller.round.snake.segments == [(5, 6), (5, 5), (5, 4)]


class TestControllerGameOver:
    def test_wall_hit_resets_round(self):
        controller = _controller()
        _place(controller, [(0, 5), (1, 5)], Direction.LEFT)
        controller.tick()
        assert GameEvent.GAME_OVER in controller.last_events
        assert GameEvent.FOOD_NEEDED in controller.last_events
        _assert_canonical(controller)
        assert controller.round.ticks == 0

    def test_self_collision_resets_round(self):
        controller = _controller()
        _place(
            controller,
            [(5, 5), (6, 5), (6, 4), (5, 4), (4, 4)],
            Direction.LEFT,
        )
        controller.press(Direction.DOWN)
        controller.tick()
        assert GameEvent.GAME_OVER in controller.last_events
        _assert_canonical(controller)

    def test_reset_discards_queued_input(self):
        controller = _controller()
        _place(controller, [(0, 17), (1, 17)], Direction.LEFT)
        controller.press(Direction.UP)
        controller.press(Direction.RIGHT)
        controller.press(Direction.DOWN)
        controller.tick()
        assert GameEvent.GAME_OVER in controller.last_events
        _assert_canonical(controller)

    def test_reset_builds_a_new_round(self):
        controller = _controller()
        old = controller.round
        old_snake = old.snake
        _place(controller, [(0, 5), (1, 5)], Direction.LEFT)
        controller.tick()
        assert controller.round is not old
        assert controller.round.snake is not old_snake

    def test_long_snake_resets_to_two_segments(self):
        controller = _controller()
        _place(
            controller,
            [(0, 5), (1, 5), (2, 5), (3, 5), (4, 5)],
            Direction.LEFT,
        )
        controller.tick()
        assert controller.length == 2

    def test_on_game_over_receives_finished_round(self):
        finished: list[GameRound] = []
        controller = GameController(
            GameConfig(seed=0), on_game_over=finished.append,
        )
        _place(controller, [(0, 5), (1, 5), (2, 5)], Direction.LEFT)
        controller.tick()
        assert len(finished) == 1
        assert len(finished[0].snake) == 3
        assert finished[0] is not controller.round

    def test_game_over_hook_can_read_state(self):
        states: list[dict] = []
        controller = GameController(GameConfig(seed=0))
        controller.on_game_over = lambda _done: states.append(controller.get_state())
        _place(controller, [(0, 5), (1, 5)], Direction.LEFT)

        worker = threading.Thread(target=controller.tick)
        worker.start()
        worker.join(timeout=2.0)
        assert not worker.is_alive()
        assert len(states) == 1
        assert states[0]["snake"]["segments"] == [[3, 3], [3, 2]]

    def test_game_over_hook_runs_after_frame(self):
        seen: list[int] = []
        controller = GameController(GameConfig(seed=0, tick_interval=0.25))
        controller.on_game_over = lambda done: seen.append(
            controller.press(Direction.RIGHT),
        )
        _place(controller, [(0, 5), (1, 5)], Direction.LEFT)
        assert controller.frame(0.25) == 1
        assert seen == [True]
        assert list(controller.round.inputs) == [Direction.RIGHT]


class TestControllerFrames:
    def test_frame_runs_due_ticks(self):
        controller = _controller(tick_interval=0.25)
        controller.round.food = Position(20, 10)
        assert controller.frame(0.125) == 0
        assert controller.round.snake.head == (3, 3)
        assert controller.frame(0.125) == 1
        assert controller.round.snake.head == (3, 4)

    def test_slow_frame_catches_up(self):
        controller = _controller(tick_interval=0.25)
        controller.round.food = Position(20, 10)
        assert controller.frame(0.75) == 3
        assert controller.round.snake.head == (3, 6)

    def test_input_between_frames(self):
        controller = _controller(tick_interval=0.25)
        controller.round.food = Position(20, 10)
        controller.press_keys(["right"])
        controller.frame(0.25)
        controller.press_keys(["up"])
        controller.frame(0.25)
        assert controller.round.snake.segments == [(4, 4), (4, 3)]

    def test_concurrent_input(self):
        controller = _controller(tick_interval=0.01)
        stop = threading.Event()

        def _push():
            keys = list(Key)
            i = 0
            while not stop.is_set():
                controller.press_keys([keys[i % len(keys)]])
                i += 1

        pusher = threading.Thread(target=_push)
        pusher.start()
        try:
            for _ in range(200):
                controller.frame(0.01)
                current = controller.round
                assert len(current.inputs) <= 3
                assert len(current.snake) >= 2
        finally:
            stop.set()
            pusher.join()


class TestFoodPlacement:
    def test_food_never_on_snake(self):
        controller = _controller(arena_width=8, arena_height=6)
        rng = np.random.default_rng(5)
        directions = list(Direction)
        for _ in range(2000):
            controller.press(directions[int(rng.integers(4))])
            controller.tick()
            food = controller.round.food
            assert food is not None
            assert controller.arena.in_bounds(food)
            assert not controller.round.snake.occupies(food)

    def test_same_seed_same_game(self):
        state_a = self._run_game(seed=123)
        state_b = self._run_game(seed=123)
        assert state_a == state_b

    @staticmethod
    def _run_game(seed: int) -> dict:
        controller = GameController(GameConfig(seed=seed))
        for direction in [Direction.RIGHT, Direction.UP, Direction.RIGHT] * 5:
            controller.press(direction)
            controller.tick()
        return controller.get_state()


class TestControllerOutput:
    def test_renderables(self):
        controller = _controller()
        items = controller.renderables()
        assert len(items) == 3
        assert items[0] == (Position(3, 3), Size.square(0.8))
        assert items[1] == (Position(3, 2), Size.square(0.65))
        assert items[2] == (controller.round.food, Size.square(0.8))

    def test_renderables_without_food(self):
        controller = _controller()
        controller.round.food = None
        assert len(controller.renderables()) == 2

    def test_state_is_json_serializable(self):
        controller = _controller()
        controller.tick()
        serialized = json.dumps(controller.get_state())
        assert isinstance(serialized, str)

    def test_state_structure(self):
        state = _controller().get_state()
        assert state["tick"] == 0
        assert state["length"] == 2
        assert state["snake"]["heading"] == "up"
        assert state["arena"] == {"width": 32, "height": 18}
        assert len(state["food"]) == 2
