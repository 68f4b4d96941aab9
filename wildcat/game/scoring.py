"""Round scoring: outcomes, points, lifetime stats and game aggregates."""

from dataclasses import dataclass, field
from typing import Sequence

from config import GameConfig, config
from wildcat.cards import Card
from wildcat.game.events import EventEmitter, EventType
from wildcat.game.state import GameMode, Outcome, TurnState
from wildcat.hand import hand_value
from wildcat.players import Dealer, Player


@dataclass(frozen=True)
class HandResult:
    """How one player's hand finished in one round."""

    player: Player
    cards: tuple[Card, ...]
    total: int
    terminal_state: TurnState
    outcome: Outcome
    label: str
    points: int
    bonus: int = 0
    rank: int | None = None  # Head-to-head only

    @property
    def is_bust(self) -> bool:
        return self.total > 21

    @property
    def is_blackjack(self) -> bool:
        return self.terminal_state == TurnState.BLACKJACK

    @property
    def round_points(self) -> int:
        """Base points plus the 21 bonus."""
        return self.points + self.bonus


@dataclass(frozen=True)
class RoundResult:
    """Everything that happened in one round, in seating order."""

    round_number: int
    mode: GameMode
    hands: tuple[HandResult, ...]
    dealer_cards: tuple[Card, ...] = ()

    @property
    def dealer_total(self) -> int | None:
        if not self.dealer_cards:
            return None
        return hand_value(self.dealer_cards)

    @property
    def dealer_busted(self) -> bool:
        total = self.dealer_total
        return total is not None and total > 21

    def for_player(self, player: Player) -> HandResult:
        for result in self.hands:
            if result.player is player:
                return result
        raise KeyError(player.username)


@dataclass
class GameAggregates:
    """Cross-round figures scoped to one game."""

    total_distribution: dict[int, int] = field(default_factory=dict)
    total_busts: int = 0
    highest_total: int = 0
    best_round_points: int = 0
    best_round_player: Player | None = None
    longest_hand: int = 0
    marathoner: Player | None = None

    def record(self, result: HandResult) -> None:
        """Fold one scored hand into the running figures."""
        if result.is_bust:
            self.total_busts += 1
        else:
            self.total_distribution[result.total] = (
                self.total_distribution.get(result.total, 0) + 1
            )
            if result.total > self.highest_total:
                self.highest_total = result.total

        if result.round_points > self.best_round_points:
            self.best_round_points = result.round_points
            self.best_round_player = result.player

        num_cards = len(result.cards)
        if num_cards > self.longest_hand:
            self.longest_hand = num_cards
            self.marathoner = result.player

    def sorted_distribution(self) -> list[tuple[int, int]]:
        """(total, count) pairs ordered by total."""
        return sorted(self.total_distribution.items())


class RoundScorer:
    """
    Applies a mode's points policy to finished hands.

    Each call to score() mutates the players' points and counters and the
    shared aggregates exactly once per player.
    """

    def __init__(
        self,
        mode: GameMode,
        aggregates: GameAggregates,
        events: EventEmitter | None = None,
        settings: GameConfig | None = None,
    ) -> None:
        self.mode = mode
        self.aggregates = aggregates
        self.events = events or EventEmitter()
        self.settings = settings or config.game

    def score(
        self,
        round_number: int,
        players: Sequence[Player],
        terminal_states: Sequence[TurnState],
        dealer: Dealer | None = None,
    ) -> RoundResult:
        """Score every player's hand for the round."""
        if len(players) != len(terminal_states):
            raise ValueError("Need one terminal state per player")

        if self.mode == GameMode.VERSUS_HOUSE:
            if dealer is None:
                raise ValueError("Versus-house rounds need the dealer's hand")
            results = [
                self._score_versus_house(player, state, dealer.hand.value)
                for player, state in zip(players, terminal_states)
            ]
            dealer_cards = tuple(dealer.hand.cards)
        else:
            results = self._score_head_to_head(players, terminal_states)
            dealer_cards = ()

        for result in results:
            self._apply(result)

        return RoundResult(
            round_number=round_number,
            mode=self.mode,
            hands=tuple(results),
            dealer_cards=dealer_cards,
        )

    def _bonus(self, total: int) -> int:
        return self.settings.twenty_one_bonus if total == 21 else 0

    def _score_versus_house(
        self, player: Player, state: TurnState, dealer_total: int
    ) -> HandResult:
        total = player.hand.value
        points = 0
        bonus = 0

        if total > 21:
            outcome, label = Outcome.LOSS, "BUST"
        else:
            bonus = self._bonus(total)
            if dealer_total > 21 or total > dealer_total:
                outcome, label = Outcome.WIN, "WIN"
                points = self.settings.win_points
            elif total == dealer_total:
                outcome, label = Outcome.PUSH, "PUSH"
            else:
                outcome, label = Outcome.LOSS, "LOSS"

        return HandResult(
            player=player,
            cards=tuple(player.hand.cards),
            total=total,
            terminal_state=state,
            outcome=outcome,
            label=label,
            points=points,
            bonus=bonus,
        )

    def _score_head_to_head(
        self, players: Sequence[Player], terminal_states: Sequence[TurnState]
    ) -> list[HandResult]:
        totals = [p.hand.value for p in players]
        standing = [t for t in totals if t <= 21]
        results = []

        for player, state, total in zip(players, terminal_states, totals):
            if total > 21:
                # Busts share the worst rank
                results.append(
                    HandResult(
                        player=player,
                        cards=tuple(player.hand.cards),
                        total=total,
                        terminal_state=state,
                        outcome=Outcome.LOSS,
                        label="BUST",
                        points=0,
                        rank=len(players),
                    )
                )
                continue

            rank = 1 + sum(1 for other in standing if other > total)
            if rank == 1:
                outcome, label = Outcome.WIN, "WIN"
                points = self.settings.win_points
            else:
                outcome, label = Outcome.LOSS, f"PLACE {rank}"
                places = self.settings.place_points
                points = places[rank - 2] if rank - 2 < len(places) else 0

            results.append(
                HandResult(
                    player=player,
                    cards=tuple(player.hand.cards),
                    total=total,
                    terminal_state=state,
                    outcome=outcome,
                    label=label,
                    points=points,
                    bonus=self._bonus(total),
                    rank=rank,
                )
            )

        return results

    def _apply(self, result: HandResult) -> None:
        """Update the player's counters and the game aggregates."""
        stats = result.player.stats
        stats.hands_played += 1

        if result.outcome == Outcome.WIN:
            stats.record_win()
        elif result.outcome == Outcome.PUSH:
            stats.record_push()
        else:
            stats.record_loss()

        if result.is_blackjack:
            stats.blackjacks += 1
        if result.is_bust:
            stats.busts += 1
        elif result.total == 21:
            stats.hands_with_21 += 1
        stats.record_cards(len(result.cards))

        result.player.points += result.round_points
        self.aggregates.record(result)

        self.events.emit_new(
            EventType.HAND_SCORED,
            player=result.player.username,
            total=result.total,
            outcome=result.outcome.value,
            label=result.label,
            points=result.round_points,
        )
