"""Entry point for playing the cave."""

import argparse
import os
import sys

from advent.game import run
from advent.io import ConsoleIO
from cave.colossal_cave import ColossalCave


def _default_seed() -> int | None:
    value = os.environ.get("ADVENT_SEED")
    return int(value) if value else None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Explore a portion of Colossal Cave.")
    parser.add_argument(
        "--debug",
        nargs="?",
        const=True,
        metavar="FILE",
        help="Enable debug mode; optionally provide FILE to redirect the debug output (STDERR) to it",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for random events (default: ADVENT_SEED environment variable)",
    )
    parser.add_argument(
        "--edit",
        action="store_true",
        help="Enable line editing and history with readline",
    )
    return parser


def run_cli(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    seed = args.seed if args.seed is not None else _default_seed()
    io_backend = ConsoleIO(editing=args.edit)
    debug_opt = args.debug

    if isinstance(debug_opt, str):  # --debug FILE provided
        orig_stderr = sys.stderr
        with open(debug_opt, "w", encoding="utf-8") as fh:
            try:
                sys.stderr = fh
                run(ColossalCave, io_backend=io_backend, debug=True, seed=seed)
            finally:
                sys.stderr = orig_stderr
    else:
        run(ColossalCave, io_backend=io_backend, debug=bool(debug_opt), seed=seed)


if __name__ == "__main__":
    run_cli()
