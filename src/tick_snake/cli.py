"""Command-line entry point for headless runs and benchmarks."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _positive_float(value: str) -> float:
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive number")
    return number


def _probability(value: str) -> float:
    number = float(value)
    if not 0.0 <= number <= 1.0:
        raise argparse.ArgumentTypeError("must be between 0 and 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tick-snake",
        description="Headless runner and benchmark for the snake game engine.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- run ---
    run_p = sub.add_parser("run", help="Play headless with random input.")
    run_p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file.",
    )
    run_p.add_argument("--fps", type=_positive_float, default=60.0)
    run_p.add_argument(
        "--frames", type=_positive_int, default=None,
        help="Stop after this many frames (default: run forever).",
    )
    run_p.add_argument("--seed", type=int, default=None)
    run_p.add_argument("--press-probability", type=_probability, default=0.1)
    run_p.add_argument(
        "--realtime", action="store_true",
        help="Pace frames against the wall clock.",
    )

    # --- benchmark ---
    bench_p = sub.add_parser("benchmark", help="Measure tick throughput.")
    bench_p.add_argument("--config", type=str, default=None)
    bench_p.add_argument("--ticks", type=_positive_int, default=10_000)
    bench_p.add_argument("--press-probability", type=_probability, default=0.3)
    bench_p.add_argument("--seed", type=int, default=42)

    return parser


def _load_config(args: argparse.Namespace) -> GameConfig:
    from tick_snake.config import GameConfig

    config = GameConfig.load(args.config) if args.config else GameConfig()
    seed = getattr(args, "seed", None)
    if seed is not None:
        d = config.to_dict()
        d["seed"] = seed
        config = GameConfig(**d)
    return config


def _run_run(args: argparse.Namespace) -> int:
    import numpy as np

    from tick_snake.engine import GameController
    from tick_snake.runner import RandomKeySource, run

    config = _load_config(args)
    controller = GameController(config)
    keys = RandomKeySource(
        args.press_probability, rng=np.random.default_rng(args.seed),
    )
    try:
        stats = run(
            controller,
            fps=args.fps,
            max_frames=args.frames,
            key_source=keys,
            realtime=args.realtime,
        )
    except KeyboardInterrupt:
        logger.info("Interrupted.")
        return 130
    print(stats.summary())  # noqa: T201
    return 0


def _run_benchmark(args: argparse.Namespace) -> int:
    from tick_snake.benchmark import benchmark_ticks

    result = benchmark_ticks(
        ticks=args.ticks,
        config=_load_config(args),
        press_probability=args.press_probability,
        seed=args.seed,
    )
    print(result.summary())  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``tick-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    handlers = {
        "run": _run_run,
        "benchmark": _run_benchmark,
    }
    return handlers[args.command](args)


if __name__ == "__main__":
    sys.exit(main())
