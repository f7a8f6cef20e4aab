"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits."""

    HEART = 0
    DIAMOND = 1
    CLUB = 2
    SPADE = 3

    def __str__(self) -> str:
        symbols = {
            Suit.HEART: "♥",
            Suit.DIAMOND: "♦",
            Suit.CLUB: "♣",
            Suit.SPADE: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """Check if this suit is printed in red."""
        return self in (Suit.HEART, Suit.DIAMOND)


class Rank(Enum):
    """Card ranks, 1 (Ace) through 13 (King)."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self == Rank.ACE:
            return 11
        return min(self.value, 10)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'A♥', 'AS', '10d'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "H": Suit.HEART,
            "♥": Suit.HEART,
            "D": Suit.DIAMOND,
            "♦": Suit.DIAMOND,
            "C": Suit.CLUB,
            "♣": Suit.CLUB,
            "S": Suit.SPADE,
            "♠": Suit.SPADE,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def standard_cards() -> list[Card]:
    """Return the 52 cards of a standard deck in canonical order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


class Deck:
    """
    A single 52-card deck used as a stack.

    The deck starts empty and only becomes live after reset_and_shuffle().
    Cards are drawn from the end of the list. Dealt cards are never returned
    to the deck; a reshuffle replaces the whole contents.
    """

    def __init__(self, rng: Random | None = None) -> None:
        """
        Initialize an empty deck.

        Args:
            rng: Random number generator used for shuffling
        """
        self._rng = rng or Random()
        self._cards: list[Card] = []

    def reset_and_shuffle(self) -> None:
        """Repopulate with all 52 cards and shuffle them."""
        self._cards = standard_cards()
        self._rng.shuffle(self._cards)

    def draw(self) -> Card | None:
        """Draw the top card, or return None if the deck is empty."""
        if not self._cards:
            return None
        return self._cards.pop()

    def stack(self, cards: list[Card]) -> None:
        """
        Replace the contents with a prearranged order.

        The last card in the list is drawn first.
        """
        self._cards = list(cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)

    @property
    def is_empty(self) -> bool:
        """Check if no cards are left."""
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
