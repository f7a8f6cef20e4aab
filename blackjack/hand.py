"""Hand scoring and round settlement for blackjack."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK = 21


def _raw_total(cards: Iterable[Card | None]) -> tuple[int, int]:
    """Sum cards with every Ace at 11; return (total, aces)."""
    total = 0
    aces = 0
    for card in cards:
        # An empty draw that slipped into a hand counts as no card at all
        if card is None:
            continue
        if card.is_ace:
            aces += 1
        total += card.value
    return total, aces


def compute_score(cards: Iterable[Card | None]) -> int:
    """
    Calculate the best blackjack total for a set of cards.

    Face cards count 10 and Aces start at 11. While the total is over 21,
    one Ace at a time drops to 1. The result depends only on which cards are
    held, never on their order.
    """
    total, aces = _raw_total(cards)

    # Reduce aces from 11 to 1 as needed
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1

    return total


def is_soft(cards: Iterable[Card | None]) -> bool:
    """Check if at least one Ace is still counted as 11."""
    total, aces = _raw_total(cards)
    while total > BLACKJACK and aces > 0:
        total -= 10
        aces -= 1
    return aces > 0


def is_bust(score: int) -> bool:
    """Check if a score is over 21."""
    return score > BLACKJACK


class Outcome(Enum):
    """Result of a player's hand against the dealer."""

    WIN = auto()
    LOSS = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return {
            Outcome.WIN: "wins",
            Outcome.LOSS: "loses",
            Outcome.PUSH: "pushes",
        }[self]


def settle(player_score: int, dealer_score: int, ties_push: bool = False) -> Outcome:
    """
    Compare a player's score to the dealer's.

    The player wins only when not bust and either the dealer busts or the
    player is higher. Everything else loses, including equal scores, unless
    ties_push is set, in which case equal non-bust scores push.
    """
    # Player busts always loses
    if is_bust(player_score):
        return Outcome.LOSS

    if is_bust(dealer_score) or player_score > dealer_score:
        return Outcome.WIN

    if ties_push and player_score == dealer_score:
        return Outcome.PUSH

    return Outcome.LOSS


@dataclass
class Hand:
    """An ordered list of cards with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """Return the best hand value."""
        return compute_score(self.cards)

    @property
    def is_soft(self) -> bool:
        """Check if the hand is soft (has an ace counted as 11)."""
        return is_soft(self.cards)

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return is_bust(self.value)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}".strip()

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
