"""Read-only views of game state for the presentation layer."""

from dataclasses import dataclass

from blackjack.cards import Card
from blackjack.game.state import Phase
from blackjack.hand import Outcome
from blackjack.participant import Participant


@dataclass(frozen=True)
class ParticipantView:
    """A participant's name, cards and score at one moment."""

    name: str
    cards: tuple[Card, ...]
    score: int
    is_bust: bool

    @classmethod
    def of(cls, participant: Participant) -> "ParticipantView":
        return cls(
            name=participant.name,
            cards=tuple(participant.cards),
            score=participant.get_score(),
            is_bust=participant.is_bust,
        )


@dataclass(frozen=True)
class DealerView(ParticipantView):
    """Dealer view; the hole card stays face down until the dealer's turn."""

    hole_card_hidden: bool = False

    @property
    def visible_cards(self) -> tuple[Card, ...]:
        """Cards the players are allowed to see."""
        if self.hole_card_hidden:
            return self.cards[:1]
        return self.cards

    @property
    def visible_score(self) -> int | None:
        """The dealer's score, or None while the hole card is hidden."""
        if self.hole_card_hidden:
            return None
        return self.score


@dataclass(frozen=True)
class GameSnapshot:
    """Snapshot of game state for rendering."""

    phase: Phase
    current_round: int
    number_of_rounds: int
    current_player_index: int
    dealer: DealerView
    players: tuple[ParticipantView, ...]
    results: tuple[Outcome, ...]
    wins: tuple[int, ...]

    @property
    def current_player(self) -> ParticipantView | None:
        """The player whose turn it is, if any."""
        if self.phase != Phase.PLAYER_TURN:
            return None
        if 0 <= self.current_player_index < len(self.players):
            return self.players[self.current_player_index]
        return None

    @property
    def display_round(self) -> int:
        """Round number clamped to the configured count."""
        return min(self.current_round, self.number_of_rounds)
