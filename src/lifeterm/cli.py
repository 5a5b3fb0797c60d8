"""Command-line entry point for the terminal Game of Life."""

import argparse
import logging
import sys
from typing import List, Optional

from .core.engine import LifeEngine, SeedError
from .driver import FRAME_DELAY, detect_display_size, run_animation
from .seed import DEFAULT_SEED_FILE, load_seed

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeterm", description="Conway's Game of Life in the terminal")
    parser.add_argument("--seed", default=DEFAULT_SEED_FILE, help="JSON seed file")
    parser.add_argument("--rows", type=int, default=None, help="Grid rows (default: terminal height)")
    parser.add_argument("--cols", type=int, default=None, help="Grid columns (default: terminal width)")
    parser.add_argument("--delay", type=float, default=FRAME_DELAY, help="Seconds between generations")
    parser.add_argument("--generations", type=int, default=None, help="Stop after N generations (default: run forever)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    if args.delay < 0:
        logger.error(f"Invalid configuration: delay must be non-negative, got {args.delay}")
        return 1
    if args.generations is not None and args.generations < 0:
        logger.error(f"Invalid configuration: generations must be non-negative, got {args.generations}")
        return 1

    try:
        seed = load_seed(args.seed)

        rows, cols = args.rows, args.cols
        if rows is None or cols is None:
            display_rows, display_cols = detect_display_size()
            rows = display_rows if rows is None else rows
            cols = display_cols if cols is None else cols

        engine = LifeEngine(seed, rows, cols)
    except SeedError as e:
        logger.error(f"Invalid seed: {e}")
        return 1

    try:
        run_animation(engine, delay=args.delay, generations=args.generations)
    except KeyboardInterrupt:
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
