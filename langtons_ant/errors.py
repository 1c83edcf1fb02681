"""Errors — startup-time configuration failures.

Everything that can go wrong is caught before the first tick: a bad
tick rate or an unparseable turn pattern.  Once the engine is running
the core has no fallible operations.
"""

from __future__ import annotations


class LangtonsAntError(Exception):
    """Base class for all errors raised by this package."""


class ConfigError(LangtonsAntError, ValueError):
    """A configuration value was rejected during validation."""


class InvalidRate(ConfigError):
    """The tick rate is not a positive integer.

    Attributes:
        value: The rejected value, as supplied.
    """

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"invalid rate {value!r}: must be a positive integer")


class PatternError(ConfigError):
    """A turn pattern string could not be parsed."""


class EmptyPattern(PatternError):
    """The turn pattern string has no characters."""

    def __init__(self) -> None:
        super().__init__("invalid pattern: must contain at least one turn")


class InvalidPatternCharacter(PatternError):
    """The turn pattern contains a character outside the turn alphabet.

    Attributes:
        char: The offending character.
        index: Its position in the pattern string.
    """

    def __init__(self, char: str, index: int, alphabet: str) -> None:
        self.char = char
        self.index = index
        super().__init__(
            f"invalid pattern character {char!r} at position {index}: "
            f"expected one of {', '.join(alphabet)}",
        )
