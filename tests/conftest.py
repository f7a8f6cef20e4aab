"""Pytest fixtures for blackjack table tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.hand import Hand
from blackjack.participant import Participant, Role
from blackjack.rules import TableRules
from blackjack.game import BlackjackGame


def cards(*codes: str) -> list[Card]:
    """Build cards from strings like 'AS', '10H', 'KC'."""
    return [Card.from_string(s) for s in codes]


def stacked_game(draw_order: list[str], num_players: int = 2, num_rounds: int = 1,
                 rules: TableRules | None = None) -> BlackjackGame:
    """A game whose deck yields exactly draw_order, first card first."""
    game = BlackjackGame(num_players, num_rounds, rules=rules, rng=Random(7))
    game.deck.stack(list(reversed(cards(*draw_order))))
    return game


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.reset_and_shuffle()
    return d


@pytest.fixture
def empty_deck():
    """A deck that was never shuffled."""
    return Deck()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return Hand(cards("AS", "6H"))


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return Hand(cards("10S", "6H"))


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return Hand(cards("10S", "6H", "KC"))


@pytest.fixture
def player():
    """A player with an empty hand."""
    return Participant("Player 1")


@pytest.fixture
def dealer():
    """The dealer with an empty hand."""
    return Participant("Dealer", role=Role.DEALER)


@pytest.fixture
def rules():
    """Default table rules."""
    return TableRules()


@pytest.fixture
def game(rng):
    """A new two-player, three-round game."""
    return BlackjackGame(num_players=2, num_rounds=3, rng=rng)
