"""Command line front end for the wildfire simulation.

Usage:
    wildfire [-bN] [-cN] [-dN] [-nN] [-pN] [-sN] [-L[X]] [-H]

Without ``-p`` the grid is redrawn in place (overlay mode) until every fire
is out; with ``-pN`` the first N cycles are printed one after another.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import (
    DEFAULT_BURNING_PERCENT,
    DEFAULT_CATCH_FIRE_PERCENT,
    DEFAULT_DENSITY,
    DEFAULT_LIGHTNING_CHANCE,
    DEFAULT_NEIGHBOR_EFFECT,
    DEFAULT_SIZE,
    ConfigError,
    SimulationConfig,
)
from .model import WildfireModel
from wildfire_viz import TerminalRenderer, WindowClosed, WindowRenderer

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130

OVERLAY_DELAY = 0.2


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that exits with status 1 on bad input."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_FAILURE, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    p = _ArgumentParser(
        prog="wildfire",
        description="Simulate a wildfire spreading through a grid of trees.",
        add_help=False,
    )
    p.add_argument("-H", action="help", help="View simulation options and quit.")
    p.add_argument(
        "-b", dest="burning_percent", type=int, default=DEFAULT_BURNING_PERCENT, metavar="N",
        help="proportion of trees that are already burning. 0 < N < 101.",
    )
    p.add_argument(
        "-c", dest="catch_fire_percent", type=int, default=DEFAULT_CATCH_FIRE_PERCENT, metavar="N",
        help="probability that a tree will catch fire. 0 < N < 101.",
    )
    p.add_argument(
        "-d", dest="density", type=int, default=DEFAULT_DENSITY, metavar="N",
        help="density: the proportion of trees in the grid. 0 < N < 101.",
    )
    p.add_argument(
        "-n", dest="neighbor_effect", type=int, default=DEFAULT_NEIGHBOR_EFFECT, metavar="N",
        help="proportion of neighbors that influence a tree catching fire. -1 < N < 101.",
    )
    p.add_argument(
        "-p", dest="max_cycles", type=int, default=None, metavar="N",
        help="number of states to print before quitting. -1 < N < 10001.",
    )
    p.add_argument(
        "-s", dest="size", type=int, default=DEFAULT_SIZE, metavar="N",
        help="simulation grid size. 4 < N < 41.",
    )
    p.add_argument(
        "-L", dest="lightning_chance", type=float, nargs="?", const=DEFAULT_LIGHTNING_CHANCE,
        default=None, metavar="X",
        help=f"enable lightning with strike probability X per cycle (default {DEFAULT_LIGHTNING_CHANCE}).",
    )
    p.add_argument("--seed", type=int, default=None, help="Seed for a reproducible run")
    p.add_argument("--gui", action="store_true", help="Show the grid in a Pygame window")
    p.add_argument(
        "--delay", type=float, default=None,
        help=f"Seconds between cycles (default {OVERLAY_DELAY} in overlay mode, 0 otherwise)",
    )
    p.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging verbosity (written to stderr)",
    )
    return p


def config_from_args(args: argparse.Namespace) -> SimulationConfig:
    """
    Build a validated configuration from parsed arguments.

    Raises:
        ConfigError: If any value is outside its allowed range
    """
    lightning_enabled = args.lightning_chance is not None
    return SimulationConfig(
        size=args.size,
        density=args.density,
        burning_percent=args.burning_percent,
        catch_fire_percent=args.catch_fire_percent,
        neighbor_effect=args.neighbor_effect,
        lightning_enabled=lightning_enabled,
        lightning_chance=args.lightning_chance if lightning_enabled else DEFAULT_LIGHTNING_CHANCE,
        max_cycles=args.max_cycles,
    ).validate()


def make_renderer(args: argparse.Namespace, config: SimulationConfig):
    if args.gui:
        return WindowRenderer()
    # Print mode (-pN) prints frames sequentially, otherwise redraw in place
    return TerminalRenderer(config, overlay=config.max_cycles is None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from the command line and return the exit status."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format='%(asctime)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        config = config_from_args(args)
    except ConfigError as e:
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    if args.delay is not None:
        delay = args.delay
    elif config.max_cycles is None and not args.gui:
        delay = OVERLAY_DELAY
    else:
        delay = 0.0

    renderer = make_renderer(args, config)
    model = WildfireModel(config, seed=args.seed)

    try:
        model.run(renderer, delay=delay)
    except (KeyboardInterrupt, WindowClosed):
        logger.warning("Simulation interrupted at cycle %d", model.cycle)
        return EXIT_INTERRUPTED

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
