"""Validated terminal input for the game setup."""

from dataclasses import dataclass
from typing import Callable

from config import config
from wildcat.game.state import GameMode
from wildcat.players import Player, Roster

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

WELCOME_MESSAGES = (
    "Welcome to the table, ",
    "Good luck, ",
    "Thank you for playing, ",
    "We're glad to have you, ",
)


@dataclass
class GameSetup:
    """Everything collected before round 1."""

    players: list[Player]
    mode: GameMode
    rounds: int


class Prompter:
    """Asks questions until it gets an acceptable answer."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
        self.input = input_fn
        self.output = output_fn

    def ask_int(self, prompt: str, minimum: int, maximum: int) -> int:
        """Re-prompt until the answer is an integer within [minimum, maximum]."""
        while True:
            raw = self.input(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                value = None
            if value is not None and minimum <= value <= maximum:
                return value
            self.output(f"Please enter a value between {minimum} and {maximum}.")

    def ask_text(self, prompt: str, field_name: str) -> str:
        """Re-prompt until the answer is not blank."""
        while True:
            value = self.input(prompt).strip()
            if value:
                return value
            self.output(f"{field_name} cannot be empty.")

    def ask_username(self, prompt: str, roster: Roster) -> str:
        """Re-prompt until the username is non-empty and not taken (ignoring case)."""
        while True:
            value = self.ask_text(prompt, "Username")
            if not roster.contains_username(value):
                return value
            self.output(f"The username '{value}' is already taken. Please choose another.")

    def ask_yes_no(self, prompt: str) -> bool:
        while True:
            value = self.input(prompt).strip().lower()
            if value in ("y", "yes"):
                return True
            if value in ("n", "no"):
                return False
            self.output("Please answer Y or N.")


def collect_players(prompter: Prompter, count: int) -> list[Player]:
    """Ask each seat for first name, last name and a unique username."""
    roster = Roster(capacity=count)
    for i in range(count):
        prompter.output(f"\nPlayer {i + 1} information")
        first = prompter.ask_text("Enter your first name: ", "First name")
        last = prompter.ask_text("Enter your last name: ", "Last name")
        username = prompter.ask_username("Enter your username (or create one): ", roster)
        player = Player(first, last, username)
        roster.add(player)
        prompter.output(f"{WELCOME_MESSAGES[i % len(WELCOME_MESSAGES)]}{player.first_name}!\n")
    return roster.players


def collect_setup(prompter: Prompter) -> GameSetup:
    """Run the full pre-game questionnaire."""
    limits = config.game
    prompter.output("Welcome to Wildcat Blackjack!")
    prompter.output(f"Up to {limits.max_players} players can play.\n")

    count = prompter.ask_int(
        f"Enter the number of players ({limits.min_players}-{limits.max_players}): ",
        limits.min_players,
        limits.max_players,
    )
    players = collect_players(prompter, count)

    prompter.output("Choose a game mode:")
    prompter.output(f"1. {GameMode.HEAD_TO_HEAD} (Player vs Player)")
    prompter.output(f"2. Each Player {GameMode.VERSUS_HOUSE}")
    mode = GameMode(prompter.ask_int("Enter your choice (1-2): ", 1, 2))
    prompter.output(f"\nYou selected: {mode}")

    rounds = prompter.ask_int(
        f"Enter how many hands will be played ({limits.min_rounds}-{limits.max_rounds}): ",
        limits.min_rounds,
        limits.max_rounds,
    )
    return GameSetup(players=players, mode=mode, rounds=rounds)
