"""Entry point for ``python -m frogpath``.

Loads the YAML config, builds a pond from a layout file (or generates a
random one), runs the path search and prints the result.  With ``--show``
the search is animated in a Pygame window instead.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import numpy as np

from frogpath.logging_config import setup_logging
from frogpath.pond.generate import random_pond
from frogpath.pond.pond import Pond, PondFormatError
from frogpath.search.controller import FrogPath
from frogpath.simulation.config import FrogPathConfig

logger = logging.getLogger("frogpath.cli")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)

EXIT_BAD_POND = 2


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="frogpath",
        description="frogpath - greedy frog path search across a hex pond",
    )
    parser.add_argument(
        "pond",
        nargs="?",
        type=pathlib.Path,
        help="Pond layout file (default: pond_file from the config)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--random",
        action="store_true",
        help="Search a randomly generated pond instead of a layout file",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for --random (default: seed from the config)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Animate the search in a Pygame window",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every hop and backtrack",
    )
    return parser


def load_config(path: pathlib.Path | None) -> FrogPathConfig:
    """Read the given config, or the bundled default if there is one."""
    if path is not None:
        return FrogPathConfig.from_yaml(path)
    if _DEFAULT_CONFIG.is_file():
        return FrogPathConfig.from_yaml(_DEFAULT_CONFIG)
    return FrogPathConfig()


def build_pond(args: argparse.Namespace, config: FrogPathConfig) -> Pond:
    """Create the pond selected on the command line.

    Raises:
        FileNotFoundError: If the layout file does not exist.
        PondFormatError: If no pond was selected or the layout is invalid.
        ValueError: If the random-pond settings are unusable or the layout
            file is not UTF-8 text.
    """
    if args.random:
        seed = config.seed if args.seed is None else args.seed
        rng = np.random.default_rng(seed)
        logger.info("Generating random pond with seed %d", seed)
        return random_pond(
            rng,
            config.random_width,
            config.random_height,
            terrain_weights=config.terrain_weights,
            max_flies=config.max_flies,
        )
    pond_file = args.pond or config.pond_file
    if pond_file is None:
        msg = "no pond layout given (pass a file, set pond_file, or use --random)"
        raise PondFormatError(msg)
    return Pond.from_file(pond_file)


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, build the pond, run or show the search."""
    args = build_parser().parse_args(argv)
    config = load_config(args.config)
    setup_logging("DEBUG" if args.verbose else config.log_level)

    try:
        pond = build_pond(args, config)
    except (FileNotFoundError, ValueError) as exc:
        logger.error("Cannot build pond: %s", exc)
        return EXIT_BAD_POND

    controller = FrogPath(pond=pond)

    if args.show:
        from frogpath.ui.pygame_client import PygameRenderer

        renderer = PygameRenderer(
            controller=controller,
            cell_size=config.cell_size,
            steps_per_second=config.steps_per_second,
        )
        renderer.run(fps=config.fps)

    result = controller.find_path()
    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
