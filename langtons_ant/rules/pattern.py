"""TurnPattern — the rule that tells the ant which way to turn.

A pattern is a string such as ``"RL"`` or ``"RRLLLRLLLRRR"``.  Position
``i`` in the string is the turn taken on a cell of colour ``i``, so a
pattern of length N drives an N-colour ant.  The classic Langton's ant
is ``"RL"``: turn right on white, left on black.

Letters are accepted in either case.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from langtons_ant.errors import EmptyPattern, InvalidPatternCharacter

logger = logging.getLogger(__name__)

DEFAULT_PATTERN = "RL"


class Turn(Enum):
    """A single turn instruction, valued by its pattern letter."""

    LEFT = "L"
    RIGHT = "R"


_ALPHABET = "".join(turn.value for turn in Turn)


@dataclass(frozen=True)
class TurnPattern:
    """An immutable, cyclically indexed sequence of turns.

    Attributes:
        turns: The instructions, one per cell colour.
    """

    turns: tuple[Turn, ...]

    @classmethod
    def parse(cls, text: str) -> TurnPattern:
        """Build a pattern from its letter form.

        Args:
            text: Pattern letters, e.g. ``"RL"`` or ``"llrr"``.

        Returns:
            The parsed pattern.

        Raises:
            EmptyPattern: If ``text`` is empty.
            InvalidPatternCharacter: On the first letter other than L or R.
        """
        if not text:
            raise EmptyPattern
        turns = []
        for index, char in enumerate(text):
            try:
                turns.append(Turn(char.upper()))
            except ValueError:
                raise InvalidPatternCharacter(char, index, _ALPHABET) from None
        pattern = cls(tuple(turns))
        logger.debug("Parsed pattern %s (%d colours)", pattern, len(pattern))
        return pattern

    @classmethod
    def default(cls) -> TurnPattern:
        """Return the classic two-colour ``RL`` rule."""
        return cls.parse(DEFAULT_PATTERN)

    def instruction_at(self, index: int) -> Turn:
        """Return the turn for colour ``index``, wrapping past the end."""
        return self.turns[index % len(self.turns)]

    def __len__(self) -> int:
        return len(self.turns)

    def __iter__(self) -> Iterator[Turn]:
        return iter(self.turns)

    def __str__(self) -> str:
        return "".join(turn.value for turn in self.turns)
