#!/usr/bin/env python3
"""
Classic Pattern Demonstration Script

Runs the block, blinker and glider through the bounded engine and checks
the textbook behavior of each: the block never changes, the blinker
returns after 2 generations, the glider shifts one cell diagonally every
4 generations.
"""

import sys
import json
import logging
from pathlib import Path

from lifeterm.core.engine import LifeEngine
from lifeterm.patterns import BLOCK, BLINKER, GLIDER, translate
from lifeterm.core.render import render_frame

# Configure logging
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


def run_pattern_demo(rows=20, cols=40, steps=24):
    """Run the classic pattern demonstration and return metrics."""
    logger.info("=== CLASSIC PATTERN DEMONSTRATION ===")
    logger.info(f"Grid size: {rows}x{cols}")
    logger.info(f"Evolution steps: {steps}")

    block = translate(BLOCK, 2, cols - 6)
    blinker = translate(BLINKER, rows - 4, cols - 8)
    glider = translate(GLIDER, 1, 1)

    engine = LifeEngine(block + blinker + glider, rows, cols)
    logger.info(f"Initial live cells: {engine.population}\n{render_frame(engine.render_view())}")

    live_counts = [engine.population]
    for step in range(steps):
        live_count = engine.step()
        live_counts.append(live_count)

        if step % 4 == 3 or step == steps - 1:
            logger.info(f"Generation {engine.generation}: live={live_count}")

    live = set(engine.live_cells)
    shift = steps // 4
    results = {
        "rows": rows,
        "cols": cols,
        "steps": steps,
        "live_count_history": live_counts,
        "block_stable": set(block) <= live,
        "blinker_in_phase": steps % 2 == 0 and set(blinker) <= live,
        "glider_translated": steps % 4 == 0 and set(translate(GLIDER, 1 + shift, 1 + shift)) <= live,
        "consistent": engine.is_consistent(),
    }
    results["success"] = all(results[key] for key in
                             ("block_stable", "blinker_in_phase", "glider_translated", "consistent"))

    logger.info("\n=== FINAL METRICS ===")
    logger.info(f"Block stable: {'YES' if results['block_stable'] else 'NO'}")
    logger.info(f"Blinker back in phase: {'YES' if results['blinker_in_phase'] else 'NO'}")
    logger.info(f"Glider shifted {shift} cells: {'YES' if results['glider_translated'] else 'NO'}")
    logger.info(f"Final frame:\n{render_frame(engine.render_view())}")

    return results


def save_demo_log(results, log_file="logs/life_demo.json"):
    """Save demonstration results as JSON."""
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    with open(path, 'w') as f:
        json.dump(results, f, indent=2)

    logger.info(f"Demonstration log saved to: {path}")


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Classic Game of Life pattern demonstration")
    parser.add_argument("--rows", type=int, default=20, help="Grid rows")
    parser.add_argument("--cols", type=int, default=40, help="Grid columns")
    parser.add_argument("--steps", type=int, default=24, help="Evolution steps (multiple of 4)")
    parser.add_argument("--save", action="store_true", help="Write metrics to logs/life_demo.json")

    args = parser.parse_args()

    try:
        results = run_pattern_demo(rows=args.rows, cols=args.cols, steps=args.steps)

        if args.save:
            save_demo_log(results)

        if not results["success"]:
            logger.error("Demonstration failed: pattern behavior did not match expectations")
            sys.exit(1)

        print("\n✅ Classic patterns behaved as expected")

    except ValueError as e:
        logger.error(f"Demonstration failed: {e}")
        sys.exit(1)
