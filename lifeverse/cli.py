#!/usr/bin/env python3
"""
Command line entry point: seed a universe, animate it, optionally save it.

Examples:
    lifeverse --pattern glider --at 1,1 --rows 30 --cols 30 --steps 60
    lifeverse --kind ordered --load gun.univ --view center --steps 300
    lifeverse --pattern gosper_glider_gun --no-animate --steps 1000 --save gun
"""

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from .config import SimulationConfig
from .core.errors import UniverseError
from .core.factory import UNIVERSE_KINDS, create_universe, load_universe
from .patterns.library import PATTERNS, get_pattern, place_pattern
from .render.animator import ANIMATORS
from .render.painter import GridPainter

logger = logging.getLogger(__name__)


def parse_position(value: str) -> Tuple[int, int]:
    """Parse a ``ROW,COL`` argument."""
    try:
        row, col = (int(part) for part in value.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL, got {value!r}") from None
    if row < 0 or col < 0:
        raise argparse.ArgumentTypeError(f"position must be non-negative, got {value!r}")
    return row, col


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="lifeverse", description="Conway's Game of Life in the terminal")
    parser.add_argument("--rows", type=int, help="Universe rows (env LIFEVERSE_ROWS)")
    parser.add_argument("--cols", type=int, help="Universe columns (env LIFEVERSE_COLS)")
    parser.add_argument("--kind", choices=sorted(UNIVERSE_KINDS), help="Universe representation")
    parser.add_argument("--pattern", action="append", default=[], choices=sorted(PATTERNS),
                        help="Seed pattern (repeatable)")
    parser.add_argument("--at", action="append", default=[], type=parse_position, metavar="ROW,COL",
                        help="Top-left position of the matching --pattern (default 0,0)")
    parser.add_argument("--load", metavar="FILE", help="Start from a .univ file (its size wins)")
    parser.add_argument("--save", metavar="FILE", help="Save the final generation to FILE[.univ]")
    parser.add_argument("--steps", type=int, help="Generations to run")
    parser.add_argument("--refresh-ms", type=int, help="Delay between frames in milliseconds")
    parser.add_argument("--view", choices=sorted(ANIMATORS), help="Animation viewport")
    parser.add_argument("--no-animate", action="store_true", help="Advance without painting")
    parser.add_argument("--log-level", help="Logging level")
    return parser


def run(config: SimulationConfig, patterns: List[str], positions: List[Tuple[int, int]],
        load_path: Optional[str] = None, save_path: Optional[str] = None,
        animate: bool = True):
    """Build, seed and run a universe.

    Returns:
        The universe after config.steps generations
    """
    if load_path:
        universe = load_universe(config.kind, load_path)
        logger.info(f"Loaded {universe!r} from {load_path}")
    else:
        universe = create_universe(config.kind, config.rows, config.cols)

    for i, name in enumerate(patterns):
        row, col = positions[i] if i < len(positions) else (0, 0)
        placed = place_pattern(universe, get_pattern(name), row, col)
        logger.info(f"Seeded {name} ({placed} cells) at ({row}, {col})")

    if animate:
        animator_class = ANIMATORS[config.view]
        with GridPainter() as painter:
            animator_class(config.refresh_period, painter=painter).animate(universe, config.steps)
    else:
        universe.step(config.steps)

    logger.info(f"Generation {universe.generation}: {universe.alive_count()} alive cells")

    if save_path:
        written = universe.save(save_path)
        logger.info(f"Saved universe to {written}")

    return universe


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        config = SimulationConfig.from_env().copy(
            rows=args.rows, cols=args.cols, kind=args.kind, steps=args.steps,
            refresh_ms=args.refresh_ms, view=args.view, log_level=args.log_level)
    except ValueError as e:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(level=getattr(logging, config.log_level),
                        format='%(asctime)s - %(levelname)s - %(message)s')

    try:
        run(config, args.pattern, args.at, load_path=args.load, save_path=args.save,
            animate=not args.no_animate)
    except (UniverseError, ValueError, OSError) as e:
        logger.error(f"Simulation failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
