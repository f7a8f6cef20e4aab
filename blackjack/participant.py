"""Table participants: players and the dealer."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable

from blackjack.cards import Card, Deck
from blackjack.hand import Hand, compute_score, is_bust, is_soft


class Role(Enum):
    """Seat role. The game picks the turn policy from it."""

    PLAYER = auto()
    DEALER = auto()


@dataclass
class Participant:
    """
    A seat at the table holding one hand.

    Players and the dealer share this structure. The score is cached and
    recomputed whenever the hand changes, so reads never see a stale value.
    """

    name: str
    role: Role = Role.PLAYER
    hand: Hand = field(default_factory=Hand)
    score: int = 0

    def hit(self, deck: Deck) -> Card | None:
        """
        Draw one card from the deck into the hand.

        Returns the card drawn, or None if the deck was empty. An empty draw
        leaves the hand and score untouched.
        """
        card = deck.draw()
        if card is None:
            return None
        self.hand.add_card(card)
        self._update_score()
        return card

    def set_hand(self, cards: Iterable[Card]) -> None:
        """Replace the hand and recompute the score."""
        self.hand = Hand(list(cards))
        self._update_score()

    def clear_hand(self) -> None:
        """Empty the hand for a new round."""
        self.set_hand([])

    def get_score(self) -> int:
        """Return the cached score."""
        return self.score

    def _update_score(self) -> None:
        self.score = compute_score(self.hand.cards)

    @property
    def cards(self) -> list[Card]:
        """Return a copy of the cards held."""
        return list(self.hand.cards)

    @property
    def is_bust(self) -> bool:
        return is_bust(self.score)

    @property
    def is_soft(self) -> bool:
        return is_soft(self.hand.cards)

    @property
    def is_dealer(self) -> bool:
        return self.role == Role.DEALER

    def __str__(self) -> str:
        return f"{self.name}: {self.hand}"
