"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Card, Deck
from blackjack.game.actions import Action
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.snapshot import DealerView, GameSnapshot, ParticipantView
from blackjack.game.state import Phase
from blackjack.hand import Outcome, settle
from blackjack.participant import Participant, Role
from blackjack.rules import TableRules

logger = logging.getLogger(__name__)


class GameConfigError(ValueError):
    """Raised when a game is created with an unusable player or round count."""


class BlackjackGame:
    """
    Single-table blackjack engine using a state machine.

    This is the core game logic, completely UI-agnostic. The presentation
    layer feeds it one Action at a time through apply() and reads state back
    through snapshot() or events. Actions that do not fit the current phase
    are ignored.
    """

    # State machine states
    STATES = [p.name.lower() for p in Phase]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_turns", "source": "deal", "dest": "player_turn"},
        {"trigger": "player_action", "source": "player_turn", "dest": "player_turn"},
        {"trigger": "player_done", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "round_end"},
        {"trigger": "next_round", "source": "round_end", "dest": "deal"},
        {"trigger": "end_game", "source": "round_end", "dest": "game_over"},
    ]

    def __init__(
        self,
        num_players: int = 2,
        num_rounds: int = 3,
        rules: TableRules | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new game.

        Args:
            num_players: Number of players besides the dealer
            num_rounds: Number of rounds in the session
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games

        Raises:
            GameConfigError: If the player or round count is below 1
        """
        if num_players < 1:
            raise GameConfigError(f"A game needs at least 1 player, got {num_players}")
        if num_rounds < 1:
            raise GameConfigError(f"A game needs at least 1 round, got {num_rounds}")

        self.rules = rules or TableRules()
        self.deck = Deck(rng=rng)
        self.dealer = Participant("Dealer", role=Role.DEALER)
        self.players: tuple[Participant, ...] = tuple(
            Participant(f"Player {i + 1}") for i in range(num_players)
        )
        self.number_of_rounds = num_rounds
        self.current_round = 1
        self.current_player_index = 0
        self.results: list[Outcome] = []
        self.wins: list[int] = [0] * num_players
        self.events = EventEmitter()
        self._quit_requested = False

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="deal",
            auto_transitions=False,
            model_attribute="_machine_state",
            after_state_change="_log_phase",
        )

        self.deck.reset_and_shuffle()
        self.events.emit_new(
            EventType.GAME_STARTED,
            players=num_players,
            rounds=num_rounds,
        )
        logger.info(
            "New game: %d player(s), %d round(s), %s",
            num_players,
            num_rounds,
            self.rules,
        )

    @property
    def phase(self) -> Phase:
        """Get current phase as enum."""
        return Phase[self._machine_state.upper()]  # type: ignore

    @property
    def quit_requested(self) -> bool:
        """Check if a quit action was accepted."""
        return self._quit_requested

    @property
    def is_over(self) -> bool:
        """Check if every round has been played."""
        return self.phase == Phase.GAME_OVER

    @property
    def current_player(self) -> Participant:
        """The player whose turn it is."""
        assert 0 <= self.current_player_index < len(self.players), (
            f"current_player_index {self.current_player_index} out of range"
        )
        return self.players[self.current_player_index]

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def apply(self, action: Action) -> bool:
        """
        Apply one action to the game.

        Returns:
            True if the action changed the game, False if it was ignored
        """
        handlers = {
            Action.HIT: self.hit,
            Action.STAND: self.stand,
            Action.ADVANCE: self.advance,
            Action.QUIT: self.quit,
            Action.TICK: self.tick,
        }
        return handlers[action]()

    def tick(self) -> bool:
        """Run a phase that needs no input: dealing or the dealer's turn."""
        if not self._expect(Action.TICK, Phase.DEAL, Phase.DEALER_TURN):
            return False
        if self.phase == Phase.DEAL:
            return self._deal_initial_cards()
        return self._play_dealer()

    def hit(self) -> bool:
        """Current player takes another card."""
        if not self._expect(Action.HIT, Phase.PLAYER_TURN):
            return False

        player = self.current_player
        card = self._deal_card(player)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            player=player.name,
            card=str(card) if card else None,
            score=player.get_score(),
        )

        if player.is_bust:
            self.events.emit_new(
                EventType.PLAYER_BUSTS,
                player=player.name,
                score=player.get_score(),
            )
            return self._advance_to_next_player()

        self.player_action()  # Stay in player turn
        return True

    def stand(self) -> bool:
        """Current player keeps their hand."""
        if not self._expect(Action.STAND, Phase.PLAYER_TURN):
            return False

        player = self.current_player
        self.events.emit_new(
            EventType.PLAYER_STAND,
            player=player.name,
            score=player.get_score(),
        )
        return self._advance_to_next_player()

    def advance(self) -> bool:
        """Move from the round results to the next round or game over."""
        if not self._expect(Action.ADVANCE, Phase.ROUND_END):
            return False

        self.current_round += 1
        self.current_player_index = 0

        if self.current_round > self.number_of_rounds:
            self.end_game()
            self.events.emit_new(EventType.GAME_ENDED, wins=list(self.wins))
            return True

        self.deck.reset_and_shuffle()
        self.events.emit_new(EventType.DECK_RESHUFFLED, reason="new_round")
        self.next_round()
        return True

    def quit(self) -> bool:
        """Request to leave the game. Honored during player turns and game over."""
        if not self._expect(Action.QUIT, Phase.PLAYER_TURN, Phase.GAME_OVER):
            return False

        self._quit_requested = True
        self.events.emit_new(EventType.QUIT_REQUESTED, phase=self.phase.name)
        logger.info("Quit requested during %s", self.phase)
        return True

    def snapshot(self) -> GameSnapshot:
        """Build a read-only view of the current state."""
        return GameSnapshot(
            phase=self.phase,
            current_round=self.current_round,
            number_of_rounds=self.number_of_rounds,
            current_player_index=self.current_player_index,
            dealer=DealerView(
                name=self.dealer.name,
                cards=tuple(self.dealer.cards),
                score=self.dealer.get_score(),
                is_bust=self.dealer.is_bust,
                hole_card_hidden=self.phase.hides_hole_card,
            ),
            players=tuple(ParticipantView.of(p) for p in self.players),
            results=tuple(self.results),
            wins=tuple(self.wins),
        )

    def _expect(self, action: Action, *phases: Phase) -> bool:
        """Check that an action fits the current phase, reporting it if not."""
        if not self._quit_requested and self.phase in phases:
            return True

        logger.debug("Ignoring %s during %s", action, self.phase)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            action=action.name,
            phase=self.phase.name,
        )
        return False

    def _deal_initial_cards(self) -> bool:
        """Clear every hand and deal the opening cards."""
        for participant in (*self.players, self.dealer):
            participant.clear_hand()
        self.results = []
        self.current_player_index = 0

        for player in self.players:
            for _ in range(self.rules.initial_cards):
                self._deal_card(player)

        # Only the dealer's first card is dealt face up
        for i in range(self.rules.initial_cards):
            self._deal_card(self.dealer, face_up=i == 0)

        self.events.emit_new(EventType.ROUND_STARTED, round=self.current_round)
        self.start_turns()
        return True

    def _deal_card(self, participant: Participant, face_up: bool = True) -> Card | None:
        """
        Deal a card to a participant.

        An empty deck is replaced by a fresh shuffled one when the rules
        allow it. Otherwise the participant gets no card and None is returned.
        """
        card = participant.hit(self.deck)
        if card is None and self.rules.reshuffle_when_empty:
            logger.warning(
                "Deck exhausted in round %d, reshuffling", self.current_round
            )
            self.deck.reset_and_shuffle()
            self.events.emit_new(EventType.DECK_RESHUFFLED, reason="empty")
            card = participant.hit(self.deck)

        if card is None:
            logger.warning("Deck exhausted, %s receives no card", participant.name)
            return None

        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            participant=participant.name,
            score=participant.get_score() if face_up else None,
        )
        return card

    def _advance_to_next_player(self) -> bool:
        """Move to the next player or to the dealer's turn."""
        self.current_player_index += 1

        if self.current_player_index >= len(self.players):
            self.player_done()
            return True

        self.player_action()
        return True

    def _play_dealer(self) -> bool:
        """Dealer draws to the stand threshold, then the round is settled."""
        self.events.emit_new(
            EventType.DEALER_REVEALS,
            cards=[str(c) for c in self.dealer.cards],
            score=self.dealer.get_score(),
        )

        # Dealer hits until 17+, soft or hard
        while self.dealer.get_score() < self.rules.dealer_stands_on:
            if self._deal_card(self.dealer) is None:
                break
            self.events.emit_new(EventType.DEALER_HITS, score=self.dealer.get_score())

        if self.dealer.is_bust:
            self.events.emit_new(EventType.DEALER_BUSTS, score=self.dealer.get_score())
        else:
            self.events.emit_new(EventType.DEALER_STANDS, score=self.dealer.get_score())

        self._settle_round()
        self.dealer_done()
        return True

    def _settle_round(self) -> None:
        """Compare every player's score with the dealer's."""
        dealer_score = self.dealer.get_score()
        self.results = [
            settle(player.get_score(), dealer_score, ties_push=self.rules.ties_push)
            for player in self.players
        ]

        outcome_events = {
            Outcome.WIN: EventType.PLAYER_WINS,
            Outcome.LOSS: EventType.PLAYER_LOSES,
            Outcome.PUSH: EventType.PUSH,
        }
        for i, (player, outcome) in enumerate(zip(self.players, self.results)):
            if outcome == Outcome.WIN:
                self.wins[i] += 1
            self.events.emit_new(
                outcome_events[outcome],
                player=player.name,
                score=player.get_score(),
                dealer_score=dealer_score,
            )
            logger.info(
                "Round %d: %s %s (%d vs %d)",
                self.current_round,
                player.name,
                outcome,
                player.get_score(),
                dealer_score,
            )

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.current_round,
            results=[o.name for o in self.results],
        )

    def _log_phase(self) -> None:
        logger.debug("Phase is now %s", self.phase)
