"""Entry point for ``python -m langtons_ant``.

Reads the tick rate and turn pattern from the default YAML config and
the command line, validates them, builds a simulation engine, and opens
a Pygame window to watch the ant.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
from collections.abc import Sequence

from langtons_ant.errors import ConfigError
from langtons_ant.simulation.config import SimulationConfig
from langtons_ant.simulation.engine import SimulationEngine
from langtons_ant.ui.pygame_client import PygameRenderer

logger = logging.getLogger("langtons_ant")

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="langtons-ant",
        description="Langton's ant - a turmite on an infinite grid",
    )
    parser.add_argument(
        "-r",
        "--rate",
        help="Simulation ticks per second (default: 60)",
    )
    parser.add_argument(
        "-p",
        "--pattern",
        help="Turn pattern over L and R (default: RL)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=None,
        help="Path to YAML config file (default: config/default.yaml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output",
    )
    return parser


def load_config(args: argparse.Namespace) -> SimulationConfig:
    """Combine defaults, the YAML file and command-line overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The merged configuration, not yet validated.

    Raises:
        OSError: If an explicitly given config file cannot be read.
        ConfigError: If a value is invalid.
    """
    path = args.config
    if path is None and _DEFAULT_CONFIG.is_file():
        path = _DEFAULT_CONFIG

    if path is None:
        config = SimulationConfig()
    else:
        logger.info("Loading config from %s", path)
        config = SimulationConfig.from_yaml(path)

    return config.merged(rate=args.rate, pattern=args.pattern)


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI args, create engine, launch renderer."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args)
        engine = SimulationEngine(config=config)
    except (ConfigError, OSError) as exc:
        logger.debug("Startup failed", exc_info=True)
        parser.error(str(exc))

    logger.info("Running pattern %s at %d ticks/s", engine.pattern, config.rate)
    renderer = PygameRenderer(engine=engine)
    renderer.run()


if __name__ == "__main__":
    main()
