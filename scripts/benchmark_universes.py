#!/usr/bin/env python3
"""
Universe Representation Benchmark

Runs the same seed pattern for a fixed number of generations on every
universe representation and reports wall time, final population and
process memory. All representations must finish with the same alive set.
"""

import sys
import os
import json
import time
import logging
import psutil

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

from lifeverse.core.factory import UNIVERSE_KINDS, create_universe, load_universe
from lifeverse.patterns.library import PATTERNS, get_pattern, place_pattern


def measure_memory_mb() -> float:
    """Get current process memory usage in MB."""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss / 1024 / 1024


def run_benchmark(kind, steps, rows=None, cols=None, pattern="gosper_glider_gun",
                  start=(1, 1), universe_file=None):
    """Time `steps` generations on one representation and return metrics."""
    memory_before = measure_memory_mb()

    if universe_file:
        universe = load_universe(kind, universe_file)
    else:
        universe = create_universe(kind, rows, cols)
        place_pattern(universe, get_pattern(pattern), *start)

    start_time = time.perf_counter()
    for _ in range(steps):
        universe.advance()
    elapsed = time.perf_counter() - start_time

    alive = set(universe.get_alive_cells_pos())
    results = {
        "kind": kind,
        "rows": universe.row_count(),
        "cols": universe.col_count(),
        "steps": steps,
        "elapsed_s": elapsed,
        "steps_per_s": steps / elapsed if elapsed > 0 else float('inf'),
        "alive_count": len(alive),
        "memory_delta_mb": measure_memory_mb() - memory_before,
    }
    logger.info(f"{kind:>8}: {steps} steps in {elapsed:.3f} s, "
                f"{len(alive)} alive, +{results['memory_delta_mb']:.1f} MB")
    return results, alive


if __name__ == "__main__":
    import argparse
    parser = argparse.ArgumentParser(description="Benchmark universe representations")
    parser.add_argument("--steps", type=int, default=1000, help="Generations per run")
    parser.add_argument("--rows", type=int, default=512, help="Universe rows")
    parser.add_argument("--cols", type=int, default=512, help="Universe columns")
    parser.add_argument("--pattern", choices=sorted(PATTERNS), default="gosper_glider_gun")
    parser.add_argument("--load", metavar="FILE", help="Benchmark a .univ file instead of a pattern")
    parser.add_argument("--kinds", nargs="+", choices=sorted(UNIVERSE_KINDS), default=sorted(UNIVERSE_KINDS))
    parser.add_argument("--json", metavar="FILE", help="Write results as JSON")

    args = parser.parse_args()

    try:
        all_results = []
        alive_sets = {}
        for kind in args.kinds:
            results, alive = run_benchmark(kind, args.steps, args.rows, args.cols,
                                           args.pattern, universe_file=args.load)
            all_results.append(results)
            alive_sets[kind] = alive

        if len({frozenset(alive) for alive in alive_sets.values()}) != 1:
            logger.error("Representations disagree on the final alive set")
            sys.exit(1)

        if args.json:
            with open(args.json, 'w') as f:
                json.dump(all_results, f, indent=2)
            logger.info(f"Results written to {args.json}")

    except Exception as e:
        logger.error(f"Benchmark failed: {e}")
        sys.exit(1)
