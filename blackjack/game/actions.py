"""Discrete actions fed into the game by the presentation layer."""

from enum import Enum, auto


class Action(Enum):
    """Input actions understood by the game."""

    HIT = auto()
    STAND = auto()
    ADVANCE = auto()
    QUIT = auto()

    # No user input needed, let a non-interactive phase run
    TICK = auto()

    def __str__(self) -> str:
        return self.name.lower()
