"""Player identity, lifetime statistics, and the house dealer."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from config import config
from wildcat.cards import Card
from wildcat.errors import InvalidArgumentError
from wildcat.hand import Hand


@dataclass
class PlayerStats:
    """Per-game counters, updated once per round by the scorer."""

    hands_played: int = 0
    wins: int = 0
    losses: int = 0
    pushes: int = 0
    blackjacks: int = 0
    busts: int = 0
    hands_with_21: int = 0
    total_cards_drawn: int = 0
    max_cards_in_one_hand: int = 0
    current_win_streak: int = 0
    best_win_streak: int = 0

    def record_win(self) -> None:
        """Count a win and extend the streak."""
        self.wins += 1
        self.current_win_streak += 1
        if self.current_win_streak > self.best_win_streak:
            self.best_win_streak = self.current_win_streak

    def record_loss(self) -> None:
        """Count a loss and break the streak."""
        self.losses += 1
        self.current_win_streak = 0

    def record_push(self) -> None:
        """Count a push and break the streak."""
        self.pushes += 1
        self.current_win_streak = 0

    def record_cards(self, num_cards: int) -> None:
        """Track the size of a finished hand."""
        self.total_cards_drawn += num_cards
        if num_cards > self.max_cards_in_one_hand:
            self.max_cards_in_one_hand = num_cards

    @property
    def win_rate(self) -> float:
        """Fraction of hands won."""
        if self.hands_played == 0:
            return 0.0
        return self.wins / self.hands_played


@dataclass(eq=False)
class Player:
    """A seated player: identity plus cumulative points and stats."""

    first_name: str
    last_name: str
    username: str
    points: int = 0
    stats: PlayerStats = field(default_factory=PlayerStats)
    hand: Hand = field(default_factory=Hand)

    def __post_init__(self) -> None:
        self.first_name = self.first_name.strip()
        self.last_name = self.last_name.strip()
        self.username = self.username.strip()
        if not self.first_name or not self.last_name:
            raise InvalidArgumentError("Player names must not be empty")
        if not self.username:
            raise InvalidArgumentError("Username must not be empty")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def reset_for_new_game(self) -> None:
        """Zero points and counters before round 1."""
        self.points = 0
        self.stats = PlayerStats()
        self.hand.clear()

    def __str__(self) -> str:
        return f"{self.full_name} (Username: {self.username})"


@dataclass
class Dealer:
    """The house. Holds a hand and nothing else."""

    name: str = "Dealer"
    hand: Hand = field(default_factory=Hand)

    @property
    def upcard(self) -> Card | None:
        """The first dealt card, visible during player turns."""
        return self.hand.cards[0] if self.hand.cards else None


class Roster:
    """Seating order of players with case-insensitive unique usernames."""

    def __init__(self, players: Iterable[Player] = (), capacity: int | None = None) -> None:
        self._capacity = capacity or config.game.max_players
        self._players: list[Player] = []
        for player in players:
            self.add(player)

    def add(self, player: Player) -> None:
        """
        Seat a player.

        Raises:
            InvalidArgumentError: if the table is full or the username is
                already taken (compared case-insensitively).
        """
        if len(self._players) >= self._capacity:
            raise InvalidArgumentError(
                f"A table seats at most {self._capacity} players"
            )
        if self.contains_username(player.username):
            raise InvalidArgumentError(
                f"Username '{player.username}' is already taken"
            )
        self._players.append(player)

    def contains_username(self, username: str) -> bool:
        """Check whether a username is taken, ignoring case."""
        wanted = username.strip().casefold()
        return any(p.username.casefold() == wanted for p in self._players)

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    def __len__(self) -> int:
        return len(self._players)

    def __iter__(self) -> Iterator[Player]:
        return iter(self._players)

    def __getitem__(self, index: int) -> Player:
        return self._players[index]
