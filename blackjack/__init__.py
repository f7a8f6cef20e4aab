"""Single-table blackjack engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand, Outcome, compute_score, settle
from blackjack.participant import Participant, Role
from blackjack.rules import TableRules

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "Outcome",
    "compute_score",
    "settle",
    "Participant",
    "Role",
    "TableRules",
]
