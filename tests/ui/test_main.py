"""Tests for the terminal game loop and entry point."""

import io
import os
from random import Random
from unittest.mock import patch

import pytest

from blackjack.game import BlackjackGame, Phase
from config import AppConfig
from terminal_ui import main as main_module
from terminal_ui.main import (
    EXIT_FAULT,
    EXIT_OK,
    EXIT_USAGE,
    TerminalTable,
    build_parser,
    main,
)
from terminal_ui.render import TableRenderer


def scripted(*keys: str):
    """A read_key function returning the given keys, then EOF."""
    remaining = list(keys)

    def read_key(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_key


def make_table(game: BlackjackGame, *keys: str) -> tuple[TerminalTable, list[str]]:
    screens: list[str] = []
    table = TerminalTable(
        game,
        TableRenderer(color=False),
        read_key=scripted(*keys),
        write=screens.append,
    )
    return table, screens


class TestTerminalTable:
    """Tests for driving a game from key presses."""

    def test_full_session_then_quit(self):
        game = BlackjackGame(1, 1, rng=Random(5))
        table, screens = make_table(game, "s", "", "q")

        assert table.run() == EXIT_OK
        assert game.is_over
        assert game.quit_requested
        assert "Player 1's turn" in screens[0]
        assert "Round Results:" in screens[1]
        assert "Game Over!" in screens[2]

    def test_deal_and_dealer_turn_run_without_input(self):
        game = BlackjackGame(2, 2, rng=Random(5))
        table, screens = make_table(game, "s", "s")
        table.run()

        assert game.phase == Phase.ROUND_END
        assert len(screens) == 3

    def test_unknown_keys_ignored(self):
        game = BlackjackGame(1, 1, rng=Random(5))
        table, screens = make_table(game, "x", "d", "q")

        assert table.run() == EXIT_OK
        assert game.phase == Phase.PLAYER_TURN
        assert len(screens) == 3

    def test_quit_ignored_at_round_end(self):
        game = BlackjackGame(1, 2, rng=Random(5))
        table, _ = make_table(game, "s", "q")
        table.run()

        assert game.phase == Phase.ROUND_END
        assert not game.quit_requested

    def test_end_of_input_leaves_cleanly(self):
        game = BlackjackGame(1, 3, rng=Random(5))
        table, _ = make_table(game)

        assert table.run() == EXIT_OK

    def test_ctrl_c_leaves_cleanly(self):
        def interrupted(prompt: str) -> str:
            raise KeyboardInterrupt

        game = BlackjackGame(1, 3, rng=Random(5))
        table = TerminalTable(game, TableRenderer(color=False), interrupted, lambda s: None)

        assert table.run() == EXIT_OK


class TestMain:
    """Tests for the command line entry point."""

    def test_plays_from_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("s\n\nq\n"))

        code = main(["--players", "1", "--rounds", "1", "--seed", "9", "--no-color"])

        assert code == EXIT_OK
        out = capsys.readouterr().out
        assert "Blackjack - Round 1/1" in out
        assert "Game Over!" in out

    @pytest.mark.parametrize("args", [["--players", "0"], ["--rounds", "-1"]])
    def test_invalid_configuration(self, args, capsys):
        assert main(args) == EXIT_USAGE
        assert "at least 1" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "name, value, message",
        [
            ("BLACKJACK_PLAYERS", "many", "BLACKJACK_PLAYERS must be an integer"),
            ("BLACKJACK_DEALER_STANDS_ON", "30", "dealer_stands_on"),
        ],
    )
    def test_invalid_environment(self, name, value, message, capsys):
        """A bad environment value is a usage error, not a crash."""
        with patch.dict(os.environ, {name: value}):
            assert main([]) == EXIT_USAGE
        err = capsys.readouterr().err
        assert err.startswith("blackjack: ")
        assert message in err

    def test_unrecovered_fault(self, monkeypatch):
        def boom(self):
            raise RuntimeError("corrupt state")

        monkeypatch.setattr(main_module.TerminalTable, "run", boom)
        assert main(["--players", "1", "--rounds", "1"]) == EXIT_FAULT


class TestBuildParser:
    """Tests for command line defaults and flags."""

    def test_defaults_from_environment(self):
        with patch.dict(os.environ, {"BLACKJACK_PLAYERS": "4", "BLACKJACK_COLOR": "0"}):
            args = build_parser(AppConfig()).parse_args([])

        assert args.players == 4
        assert args.color is False

    def test_ties_push_can_be_turned_off(self):
        with patch.dict(os.environ, {"BLACKJACK_TIES_PUSH": "1"}):
            parser = build_parser(AppConfig())

        assert parser.parse_args([]).ties_push is True
        assert parser.parse_args(["--no-ties-push"]).ties_push is False

    def test_ties_push_can_be_turned_on(self):
        with patch.dict(os.environ, {"BLACKJACK_TIES_PUSH": "0"}):
            parser = build_parser(AppConfig())

        assert parser.parse_args([]).ties_push is False
        assert parser.parse_args(["--ties-push"]).ties_push is True
