"""Main entry point for the terminal game."""

import argparse
import sys
from random import Random

from config import config
from console.actions import ConsoleActionProvider
from console.display import format_event, format_round, format_setup, format_summary
from console.prompts import Prompter, collect_setup
from reporting import game_summary_response, round_result_response
from wildcat.game.engine import BlackjackGame
from wildcat.game.events import GameEvent
from wildcat.highscore import HighScoreStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wildcat",
        description="Multi-player Blackjack with head-to-head and versus-house modes.",
    )
    parser.add_argument("--seed", type=int, default=config.seed, help="Seed for the shuffle")
    parser.add_argument(
        "--highscore-file",
        default=config.storage.highscore_path,
        help="Where the best score is kept (default: %(default)s)",
    )
    parser.add_argument(
        "--summary-json",
        metavar="PATH",
        help="Also write the final summary as JSON",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=config.debug,
        help="Print every engine event",
    )
    return parser


class Application:
    """Ties the prompts, the engine and the printer together."""

    def __init__(self, args: argparse.Namespace, prompter: Prompter | None = None) -> None:
        self.args = args
        self.prompter = prompter or Prompter()
        self.store = HighScoreStore(args.highscore_file)
        self.rng = Random(args.seed)

    def _show(self, lines: list[str]) -> None:
        for line in lines:
            self.prompter.output(line)

    def _on_event(self, event: GameEvent) -> None:
        if self.args.debug:
            self.prompter.output(f"[event] {event}")
            return
        line = format_event(event)
        if line:
            self.prompter.output(line)

    def play_game(self) -> BlackjackGame:
        setup = collect_setup(self.prompter)
        self._show(format_setup(setup))

        game = BlackjackGame(
            players=setup.players,
            mode=setup.mode,
            rounds=setup.rounds,
            provider=ConsoleActionProvider(self.prompter.input, self.prompter.output),
            high_scores=self.store,
            rng=self.rng,
        )
        game.subscribe(self._on_event)

        record = game.high_score
        if record.score:
            self.prompter.output(f"Current high score: {record.name} - {record.score}")

        while not game.is_finished:
            self.prompter.output(f"\n===== Hand {game.rounds_played + 1} of {game.total_rounds} =====")
            result = game.play_round()
            self._show(format_round(round_result_response(result)))

        summary = game.finish()
        game.unsubscribe(self._on_event)
        self._show(format_summary(game_summary_response(summary)))

        if self.args.summary_json:
            report = game_summary_response(summary, include_rounds=True)
            try:
                with open(self.args.summary_json, "w", encoding="utf-8") as f:
                    f.write(report.model_dump_json(indent=2))
            except OSError as exc:
                self.prompter.output(f"Could not write summary: {exc}")
        return game

    def run(self) -> int:
        while True:
            self.play_game()
            if not self.prompter.ask_yes_no("\nPlay again? (Y/N): "):
                self.prompter.output("Thanks for playing Wildcat Blackjack!")
                return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return Application(args).run()
    except (KeyboardInterrupt, EOFError):
        print("\nGoodbye!")
        return 130


if __name__ == "__main__":
    sys.exit(main())
