"""Game phase enumeration."""

from enum import Enum, auto


class Phase(Enum):
    """
    Per-round state machine phases.

    Flow: DEAL → PLAYER_TURN → DEALER_TURN → ROUND_END → (DEAL | GAME_OVER)
    """

    # Hands cleared and initial cards dealt
    DEAL = auto()

    # Players act in seat order
    PLAYER_TURN = auto()

    # Dealer draws to the stand threshold
    DEALER_TURN = auto()

    # Results shown, waiting to advance
    ROUND_END = auto()

    # All rounds played
    GAME_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def hides_hole_card(self) -> bool:
        """Check if the dealer's hole card is still face down."""
        return self in (Phase.DEAL, Phase.PLAYER_TURN)

