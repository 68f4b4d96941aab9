"""Convert engine results into report schemas."""

from wildcat.cards import Card
from wildcat.game.engine import GameSummary, HighScoreOutcome, Recognition
from wildcat.game.scoring import GameAggregates, HandResult, RoundResult
from wildcat.game.state import GameMode, TurnState
from wildcat.players import Player

from reporting.schemas import (
    CardResponse,
    DistributionEntry,
    DistributionResponse,
    GameSummaryResponse,
    HandResultResponse,
    HighScoreResponse,
    PlayerRef,
    PlayerStatsResponse,
    RecognitionResponse,
    RoundResultResponse,
)


def _mode_name(mode: GameMode) -> str:
    return mode.name.lower()


def card_response(card: Card) -> CardResponse:
    return CardResponse(
        rank=card.rank.label,
        suit=str(card.suit),
        name=card.name,
        value=card.value,
    )


def player_ref(player: Player) -> PlayerRef:
    return PlayerRef(username=player.username, full_name=player.full_name)


def hand_result_response(result: HandResult) -> HandResultResponse:
    return HandResultResponse(
        player=player_ref(result.player),
        cards=[card_response(c) for c in result.cards],
        total=result.total,
        is_bust=result.is_bust,
        is_blackjack=result.is_blackjack,
        doubled=result.terminal_state == TurnState.DOUBLE_DOWN,
        outcome=result.outcome.value,
        label=result.label,
        rank=result.rank,
        points=result.points,
        bonus=result.bonus,
        round_points=result.round_points,
    )


def round_result_response(result: RoundResult) -> RoundResultResponse:
    """Build the per-round report."""
    return RoundResultResponse(
        round_number=result.round_number,
        mode=_mode_name(result.mode),
        hands=[hand_result_response(h) for h in result.hands],
        dealer_cards=[card_response(c) for c in result.dealer_cards],
        dealer_total=result.dealer_total,
        dealer_busted=result.dealer_busted,
    )


def player_stats_response(player: Player) -> PlayerStatsResponse:
    stats = player.stats
    return PlayerStatsResponse(
        player=player_ref(player),
        points=player.points,
        hands_played=stats.hands_played,
        wins=stats.wins,
        losses=stats.losses,
        pushes=stats.pushes,
        blackjacks=stats.blackjacks,
        busts=stats.busts,
        hands_with_21=stats.hands_with_21,
        total_cards_drawn=stats.total_cards_drawn,
        max_cards_in_one_hand=stats.max_cards_in_one_hand,
        current_win_streak=stats.current_win_streak,
        best_win_streak=stats.best_win_streak,
        win_rate=stats.win_rate,
    )


def distribution_response(aggregates: GameAggregates) -> DistributionResponse:
    best = aggregates.best_round_player
    return DistributionResponse(
        totals=[
            DistributionEntry(total=total, count=count)
            for total, count in aggregates.sorted_distribution()
        ],
        total_busts=aggregates.total_busts,
        highest_total=aggregates.highest_total,
        best_round_points=aggregates.best_round_points,
        best_round_player=player_ref(best) if best is not None else None,
    )


def recognition_response(recognition: Recognition) -> RecognitionResponse:
    return RecognitionResponse(
        title=recognition.title,
        players=[player_ref(p) for p in recognition.players],
        detail=recognition.detail,
    )


def high_score_response(outcome: HighScoreOutcome) -> HighScoreResponse:
    return HighScoreResponse(
        is_new=outcome.is_new,
        name=outcome.record.name,
        score=outcome.record.score,
        previous_name=outcome.previous.name,
        previous_score=outcome.previous.score,
    )


def game_summary_response(
    summary: GameSummary, include_rounds: bool = False
) -> GameSummaryResponse:
    """
    Build the end-of-game report.

    Args:
        summary: Result of BlackjackGame.finish()
        include_rounds: Also embed every round's hands (used for JSON export)
    """
    return GameSummaryResponse(
        mode=_mode_name(summary.mode),
        rounds_played=summary.rounds_played,
        winners=[player_ref(p) for p in summary.winners],
        winning_score=summary.winning_score,
        players=[player_stats_response(p) for p in summary.players],
        distribution=distribution_response(summary.aggregates),
        recognitions=[recognition_response(r) for r in summary.recognitions],
        high_score=(
            high_score_response(summary.high_score)
            if summary.high_score is not None
            else None
        ),
        rounds=(
            [round_result_response(r) for r in summary.rounds]
            if include_rounds
            else []
        ),
    )
