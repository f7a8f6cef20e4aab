"""Turn game snapshots into styled terminal text."""

from dataclasses import dataclass

from blackjack.cards import Card
from blackjack.game.snapshot import GameSnapshot, ParticipantView
from blackjack.game.state import Phase

CSI = "\033["

NAME_WIDTH = 10
CARD_AREA_WIDTH = 29
SCORE_WIDTH = 12
TABLE_WIDTH = NAME_WIDTH + CARD_AREA_WIDTH + SCORE_WIDTH + 4


@dataclass(frozen=True)
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

    def apply(self, text: str, enabled: bool = True) -> str:
        if not enabled or not self.prefix:
            return text
        return f"{self.prefix}{text}{self.suffix}"


CARD = Style(prefix=CSI + "94m" + CSI + "1m")  # bright blue, bold
RED_CARD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds
HEADER = Style(prefix=CSI + "92m" + CSI + "1m")  # green, bold
BUST = Style(prefix=CSI + "31m")


class TableRenderer:
    """Render the table, prompts and results for one snapshot."""

    def __init__(self, *, color: bool = True, clear_screen: bool = False) -> None:
        self.color = color
        self.clear_screen = clear_screen

    def render(self, snapshot: GameSnapshot) -> str:
        rows = [
            HEADER.apply(
                f"Blackjack - Round {snapshot.display_round}/{snapshot.number_of_rounds}",
                self.color,
            ),
            self._dealer_row(snapshot),
        ]
        rows.extend(self._player_row(player) for player in snapshot.players)

        border = "─" * TABLE_WIDTH
        text = "\n".join([border, *rows, border])
        text += self._prompt(snapshot)

        if self.clear_screen:
            text = CSI + "H" + CSI + "2J" + text
        return text

    def _card(self, card: Card) -> str:
        style = RED_CARD if card.suit.is_red else CARD
        return style.apply(str(card), self.color)

    def _cards(self, cards: tuple[Card, ...]) -> tuple[str, int]:
        """Styled card text plus its printable width."""
        plain = " ".join(str(card) for card in cards)
        return " ".join(self._card(card) for card in cards), len(plain)

    def _row(self, name: str, cards: str, cards_width: int, score: str, score_width: int) -> str:
        """Lay out one row; widths are printable widths without escape codes."""
        card_padding = " " * max(CARD_AREA_WIDTH - cards_width, 0)
        score_padding = " " * max(SCORE_WIDTH - score_width, 0)
        return f"{name + ':':<{NAME_WIDTH}}{cards}{card_padding}{score_padding}{score}"

    def _dealer_row(self, snapshot: GameSnapshot) -> str:
        dealer = snapshot.dealer
        cards, width = self._cards(dealer.visible_cards)
        if dealer.hole_card_hidden and dealer.cards:
            cards += " [Hidden]"
            width += len(" [Hidden]")

        score = dealer.visible_score
        score_text = f"(Score: {score})" if score is not None else ""
        return self._row(dealer.name, cards, width, score_text, len(score_text))

    def _player_row(self, player: ParticipantView) -> str:
        cards, width = self._cards(player.cards)
        score_text = f"(Score: {player.score})"
        score_width = len(score_text)
        if player.is_bust:
            score_text = BUST.apply(score_text, self.color)
        return self._row(player.name, cards, width, score_text, score_width)

    def _prompt(self, snapshot: GameSnapshot) -> str:
        if snapshot.phase == Phase.PLAYER_TURN and snapshot.current_player:
            return (
                f"\n{snapshot.current_player.name}'s turn: "
                "Press 'h' to hit, 's' to stand"
            )

        if snapshot.phase == Phase.DEALER_TURN:
            return "\nDealer's turn"

        if snapshot.phase == Phase.ROUND_END:
            lines = [HEADER.apply("Round Results:", self.color)]
            dealer_score = snapshot.dealer.score
            for player, outcome in zip(snapshot.players, snapshot.results):
                lines.append(
                    f"{player.name} {outcome} "
                    f"(Player: {player.score} vs Dealer: {dealer_score})"
                )
            lines.append("Press Enter or Space to continue")
            return "\n" + "\n".join(lines)

        if snapshot.phase == Phase.GAME_OVER:
            lines = [HEADER.apply("Game Over!", self.color)]
            for player, wins in zip(snapshot.players, snapshot.wins):
                rounds = "round" if wins == 1 else "rounds"
                lines.append(f"{player.name} won {wins} {rounds}")
            lines.append("Press 'q' to quit")
            return "\n" + "\n".join(lines)

        return ""


def render(snapshot: GameSnapshot, color: bool = True) -> str:
    """Render a snapshot without clearing the screen."""
    return TableRenderer(color=color).render(snapshot)
