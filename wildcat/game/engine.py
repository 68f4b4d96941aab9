"""Blackjack game orchestrator: runs the rounds and sums up the game."""

from dataclasses import dataclass, field
from random import Random
from typing import Callable, Iterable

from config import GameConfig, config
from wildcat.cards import Deck
from wildcat.errors import InvalidArgumentError
from wildcat.game.events import EventEmitter, EventType, GameEvent
from wildcat.game.scoring import GameAggregates, RoundResult, RoundScorer
from wildcat.game.state import GameMode
from wildcat.game.turn import ActionProvider, DealerResolver, TurnResolver, deal_card
from wildcat.highscore import HighScoreRecord, InMemoryHighScoreStore, ScoreStore
from wildcat.players import Dealer, Player, Roster

MARATHONER = "Marathoner"
SHORT_STOP = "Short Stop"
LUCKY = "Lucky Son of a Gun"


@dataclass(frozen=True)
class Recognition:
    """An end-of-game award."""

    title: str
    players: tuple[Player, ...]
    detail: str = ""


@dataclass(frozen=True)
class HighScoreOutcome:
    """Whether this game beat the stored best score."""

    is_new: bool
    record: HighScoreRecord
    previous: HighScoreRecord


@dataclass
class GameSummary:
    """End-of-game data handed to the reporting layer."""

    mode: GameMode
    rounds_played: int
    players: list[Player]
    winners: list[Player]
    winning_score: int
    aggregates: GameAggregates
    recognitions: list[Recognition] = field(default_factory=list)
    high_score: HighScoreOutcome | None = None
    rounds: list[RoundResult] = field(default_factory=list)

    def recognition(self, title: str) -> Recognition | None:
        for item in self.recognitions:
            if item.title == title:
                return item
        return None


class BlackjackGame:
    """
    Runs a fixed number of independent rounds for a roster of players.

    The engine performs no I/O: decisions come from the action provider,
    the best score comes from the score store, and progress is published
    through events and return values only.
    """

    def __init__(
        self,
        players: Iterable[Player],
        mode: GameMode,
        rounds: int,
        provider: ActionProvider,
        high_scores: ScoreStore | None = None,
        rng: Random | None = None,
        settings: GameConfig | None = None,
    ) -> None:
        """
        Set up a game.

        Args:
            players: Seating order; usernames must be unique ignoring case
            mode: Head-to-head or versus the house
            rounds: Number of rounds to play
            provider: Supplies each player's decisions
            high_scores: Store for the best-ever score (in-memory if omitted)
            rng: Random number generator for reproducible games
            settings: Table limits and scoring policy

        Raises:
            InvalidArgumentError: on a player count, round count or username
                outside the table's limits.
        """
        self.settings = settings or config.game
        players = list(players)

        if not self.settings.min_players <= len(players) <= self.settings.max_players:
            raise InvalidArgumentError(
                f"Player count must be between {self.settings.min_players} "
                f"and {self.settings.max_players}"
            )
        if not self.settings.min_rounds <= rounds <= self.settings.max_rounds:
            raise InvalidArgumentError(
                f"Round count must be between {self.settings.min_rounds} "
                f"and {self.settings.max_rounds}"
            )

        self.roster = Roster(players, capacity=self.settings.max_players)
        for player in self.roster:
            player.reset_for_new_game()

        self.mode = mode
        self.total_rounds = rounds
        self.provider = provider
        self.rng = rng or Random(config.seed)
        self.dealer = Dealer() if mode == GameMode.VERSUS_HOUSE else None

        self.events = EventEmitter()
        self.aggregates = GameAggregates()
        self.scorer = RoundScorer(mode, self.aggregates, self.events, self.settings)

        self.high_scores = high_scores or InMemoryHighScoreStore()
        self.high_score = self.high_scores.load()

        self.results: list[RoundResult] = []
        self._summary: GameSummary | None = None

    @property
    def players(self) -> list[Player]:
        return self.roster.players

    @property
    def rounds_played(self) -> int:
        return len(self.results)

    @property
    def is_finished(self) -> bool:
        return self.rounds_played >= self.total_rounds

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def unsubscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        self.events.unsubscribe(handler, event_type)

    def play_round(self) -> RoundResult:
        """Deal, resolve and score the next round."""
        if self.is_finished:
            raise RuntimeError("All rounds have already been played")

        if self.rounds_played == 0:
            self.events.emit_new(
                EventType.GAME_STARTED,
                mode=self.mode.name,
                rounds=self.total_rounds,
                players=[p.username for p in self.roster],
            )

        round_number = self.rounds_played + 1

        # Fresh deck every round
        deck = Deck(rng=self.rng)
        deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, round=round_number)

        self._deal(deck)
        self.events.emit_new(EventType.ROUND_STARTED, round=round_number)

        resolver = TurnResolver(deck, self.mode, self.provider, self.events)
        upcard = self.dealer.upcard if self.dealer else None
        states = [resolver.play(player, round_number, upcard) for player in self.roster]

        if self.dealer is not None:
            DealerResolver(deck, self.events, self.settings.dealer_stands_on).play(
                self.dealer
            )

        result = self.scorer.score(round_number, self.players, states, self.dealer)
        self.results.append(result)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=round_number,
            points={p.username: p.points for p in self.roster},
        )
        return result

    def _deal(self, deck: Deck) -> None:
        """Two cards each, players first, dealer's second card face down."""
        for player in self.roster:
            player.hand.clear()
        if self.dealer is not None:
            self.dealer.hand.clear()

        for pass_number in range(2):
            for player in self.roster:
                deal_card(deck, player.hand, self.events, player.username)
            if self.dealer is not None:
                deal_card(
                    deck,
                    self.dealer.hand,
                    self.events,
                    self.dealer.name,
                    face_up=pass_number == 0,
                )

    def play(self) -> GameSummary:
        """Play every remaining round and return the summary."""
        while not self.is_finished:
            self.play_round()
        return self.finish()

    def finish(self) -> GameSummary:
        """
        Work out winners, recognitions and the high score.

        Safe to call more than once; the store is only written the first time.
        """
        if self._summary is not None:
            return self._summary
        if not self.is_finished:
            raise RuntimeError(
                f"Game has {self.total_rounds - self.rounds_played} rounds left"
            )

        players = self.players
        winning_score = max(p.points for p in players)
        winners = [p for p in players if p.points == winning_score]

        self._summary = GameSummary(
            mode=self.mode,
            rounds_played=self.rounds_played,
            players=players,
            winners=winners,
            winning_score=winning_score,
            aggregates=self.aggregates,
            recognitions=self._recognitions(),
            high_score=self._check_high_score(winners[0], winning_score),
            rounds=list(self.results),
        )

        self.events.emit_new(
            EventType.GAME_ENDED,
            winners=[p.username for p in winners],
            score=winning_score,
        )
        return self._summary

    def _recognitions(self) -> list[Recognition]:
        awards = []
        players = self.players

        if self.aggregates.marathoner is not None:
            awards.append(
                Recognition(
                    MARATHONER,
                    (self.aggregates.marathoner,),
                    f"{self.aggregates.longest_hand} cards in one hand",
                )
            )

        # min() keeps the first player in seating order on ties
        short_stop = min(players, key=lambda p: p.stats.total_cards_drawn)
        awards.append(
            Recognition(
                SHORT_STOP,
                (short_stop,),
                f"{short_stop.stats.total_cards_drawn} cards drawn",
            )
        )

        if self.rounds_played == self.settings.lucky_rounds:
            spotless = tuple(p for p in players if p.stats.busts == 0)
            if spotless:
                awards.append(
                    Recognition(LUCKY, spotless, f"No busts in {self.rounds_played} rounds")
                )

        return awards

    def _check_high_score(self, leader: Player, score: int) -> HighScoreOutcome:
        previous = self.high_score
        if score <= previous.score:
            return HighScoreOutcome(is_new=False, record=previous, previous=previous)

        record = HighScoreRecord(leader.username, score)
        self.high_score = record
        self.high_scores.save(record.name, record.score)
        self.events.emit_new(
            EventType.NEW_HIGH_SCORE,
            name=record.name,
            score=record.score,
            previous_name=previous.name,
            previous_score=previous.score,
        )
        return HighScoreOutcome(is_new=True, record=record, previous=previous)
