"""Tests for the terminal application loop and text rendering."""

import json

from console.display import format_event, format_round, format_setup, format_summary
from console.main import Application, build_parser
from console.prompts import GameSetup, Prompter
from reporting import game_summary_response, round_result_response
from wildcat.game.events import EventType, GameEvent
from wildcat.game.state import GameMode
from wildcat.highscore import HighScoreStore


class FakeTerminal:
    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.printed: list[str] = []

    def input(self, prompt: str) -> str:
        return self.answers.pop(0)

    def output(self, text: str) -> None:
        self.printed.append(text)


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.summary_json is None

    def test_options(self):
        args = build_parser().parse_args(
            ["--seed", "3", "--highscore-file", "hs.txt", "--summary-json", "out.json", "--debug"]
        )
        assert args.seed == 3
        assert args.highscore_file == "hs.txt"
        assert args.summary_json == "out.json"
        assert args.debug


class TestApplication:
    def test_full_session(self, tmp_path):
        highscore = tmp_path / "highscore.txt"
        summary_path = tmp_path / "summary.json"
        args = build_parser().parse_args(
            [
                "--seed", "11",
                "--highscore-file", str(highscore),
                "--summary-json", str(summary_path),
            ]
        )
        # One player, head-to-head, two hands, always stand, then quit
        terminal = FakeTerminal(
            "1", "Alice", "Archer", "alice", "1", "2",
            "s", "s", "s", "s",
            "n",
        )
        app = Application(args, Prompter(terminal.input, terminal.output))

        assert app.run() == 0
        assert "Thanks for playing Wildcat Blackjack!" in terminal.printed
        assert any(line.startswith("Winner: Alice Archer") for line in terminal.printed)
        assert not any(line.startswith("\n") and "Winner" in line for line in terminal.printed)

        report = json.loads(summary_path.read_text())
        assert report["rounds_played"] == 2
        assert len(report["rounds"]) == 2
        assert HighScoreStore(str(highscore)).load().name == "alice"


class TestDisplay:
    def test_setup_lines(self, alice, bob):
        setup = GameSetup(players=[alice, bob], mode=GameMode.HEAD_TO_HEAD, rounds=3)
        lines = format_setup(setup)
        assert "Number of Players: 2" in lines
        assert "1. Alice Archer (Username: alice)" in lines
        assert "2. Bob Baker (Username: bob)" in lines

    def test_round_and_summary_lines(self, alice, bob):
        from random import Random

        from conftest import ScriptedActions
        from wildcat.game.engine import BlackjackGame

        game = BlackjackGame(
            [alice, bob], GameMode.VERSUS_HOUSE, 1, ScriptedActions(), rng=Random(1)
        )
        result = game.play_round()

        round_lines = format_round(round_result_response(result))
        assert round_lines[1].startswith("Dealer: ")
        assert any(line.startswith("alice: ") for line in round_lines)

        summary_lines = format_summary(game_summary_response(game.finish()))
        assert "FINAL RESULTS" in summary_lines
        winner_line = next(line for line in summary_lines if "Winner" in line or "tie" in line)
        assert winner_line.startswith(("Winner: ", "It's a tie! Winners: "))
        assert any(line.startswith("  Short Stop: alice") for line in summary_lines)

    def test_format_event(self):
        event = GameEvent(EventType.PLAYER_BUSTS, {"player": "bob", "hand_value": 24})
        assert format_event(event) == "bob busts with 24."
        assert format_event(GameEvent(EventType.ROUND_STARTED, {"round": 1})) is None

    def test_play_by_play_detached_after_game(self, tmp_path):
        args = build_parser().parse_args(
            ["--seed", "5", "--highscore-file", str(tmp_path / "highscore.txt")]
        )
        terminal = FakeTerminal("1", "Alice", "Archer", "alice", "1", "1", "s", "s")
        app = Application(args, Prompter(terminal.input, terminal.output))

        game = app.play_game()
        printed = len(terminal.printed)
        game.events.emit_new(EventType.PLAYER_BUSTS, player="alice", hand_value=25)

        assert len(terminal.printed) == printed
        assert "alice busts with 25." not in terminal.printed
