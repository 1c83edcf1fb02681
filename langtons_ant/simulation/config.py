"""Config — the tick rate and turn pattern, from YAML and the command line.

Only two things are configurable: how many ticks run per second and
which turn pattern the ant follows.  Values come from built-in
defaults, optionally overridden by a YAML file, optionally overridden
again by command-line flags.  Everything is validated once, before the
simulation starts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from pathlib import Path

import yaml

from langtons_ant.errors import ConfigError, InvalidRate
from langtons_ant.rules.pattern import DEFAULT_PATTERN, TurnPattern

logger = logging.getLogger(__name__)


def parse_rate(value: object) -> int:
    """Coerce a tick rate to a positive int.

    Accepts ints and ASCII digit strings such as ``"30"`` or ``"+30"``.
    Booleans, floats and anything else are rejected.

    Args:
        value: Raw rate from YAML or the command line.

    Returns:
        The rate as an int.

    Raises:
        InvalidRate: If the value is not a positive integer.
    """
    if isinstance(value, bool):
        raise InvalidRate(value)
    if isinstance(value, str):
        text = value.strip().removeprefix("+")
        if not (text.isascii() and text.isdigit()):
            raise InvalidRate(value)
        rate = int(text)
    elif isinstance(value, int):
        rate = value
    else:
        raise InvalidRate(value)
    if rate <= 0:
        raise InvalidRate(value)
    return rate


@dataclass(frozen=True)
class SimulationConfig:
    """Top-level simulation configuration.

    Attributes:
        rate: Simulation ticks per second.
        pattern: Turn pattern letters (see ``TurnPattern.parse``).
    """

    rate: int = 60
    pattern: str = DEFAULT_PATTERN

    @classmethod
    def from_yaml(cls, path: str | Path) -> SimulationConfig:
        """Load configuration from a YAML file.

        Keys that are absent keep their defaults.

        Args:
            path: Path to the YAML config file.

        Returns:
            A populated SimulationConfig instance.

        Raises:
            FileNotFoundError: If the config file does not exist.
            ConfigError: If the file is not a mapping or a value is invalid.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping, got {type(data).__name__}"
            raise ConfigError(msg)

        pattern = data.get("pattern", cls.pattern)
        if not isinstance(pattern, str):
            msg = f"{path}: pattern must be a string, got {pattern!r}"
            raise ConfigError(msg)

        config = cls(
            rate=parse_rate(data.get("rate", cls.rate)),
            pattern=pattern,
        )
        logger.debug("Loaded %s from %s", config, path)
        return config

    def merged(
        self,
        *,
        rate: int | str | None = None,
        pattern: str | None = None,
    ) -> SimulationConfig:
        """Return a copy with any non-None overrides applied.

        Args:
            rate: Replacement tick rate.
            pattern: Replacement turn pattern.
        """
        changes: dict[str, object] = {}
        if rate is not None:
            changes["rate"] = parse_rate(rate)
        if pattern is not None:
            changes["pattern"] = pattern
        return replace(self, **changes)

    def validate(self) -> TurnPattern:
        """Check every value and return the parsed turn pattern.

        Raises:
            InvalidRate: If ``rate`` is not a positive integer.
            PatternError: If ``pattern`` does not parse.
        """
        parse_rate(self.rate)
        return TurnPattern.parse(self.pattern)
