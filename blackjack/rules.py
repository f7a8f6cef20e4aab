"""Table rule variations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TableRules:
    """
    Table rules for a single-deck, no-betting game.

    The dealer hits until reaching dealer_stands_on and makes no soft 17
    distinction.
    """

    # Dealer stands on this total or more (soft and hard alike)
    dealer_stands_on: int = 17

    # Equal non-bust scores push instead of going to the dealer
    ties_push: bool = False

    # Cards dealt to every seat at the start of a round
    initial_cards: int = 2

    # Reshuffle a fresh deck when a draw finds it empty
    reshuffle_when_empty: bool = True

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")
        if self.initial_cards < 1:
            raise ValueError("initial_cards must be at least 1")

    @classmethod
    def classic(cls) -> "TableRules":
        """Dealer stands on 17, ties go to the dealer."""
        return cls()

    @classmethod
    def with_push(cls) -> "TableRules":
        """Dealer stands on 17, ties push."""
        return cls(ties_push=True)

    def __str__(self) -> str:
        ties = "ties push" if self.ties_push else "ties lose"
        return f"Dealer stands on {self.dealer_stands_on}, {ties}"
