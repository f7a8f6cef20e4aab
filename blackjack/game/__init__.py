"""Game engine and state management."""

from blackjack.game.actions import Action
from blackjack.game.events import GameEvent, EventType
from blackjack.game.state import Phase
from blackjack.game.snapshot import GameSnapshot
from blackjack.game.engine import BlackjackGame, GameConfigError

__all__ = [
    "Action",
    "GameEvent",
    "EventType",
    "Phase",
    "GameSnapshot",
    "BlackjackGame",
    "GameConfigError",
]
