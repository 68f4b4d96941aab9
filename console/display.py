"""Plain-text rendering of setup, round and game reports."""

from console.prompts import GameSetup
from reporting.schemas import GameSummaryResponse, RoundResultResponse
from wildcat.game.events import EventType, GameEvent

RULE = "=" * 30


def format_setup(setup: GameSetup) -> list[str]:
    lines = [
        f"\n{'=' * 5} GAME SETUP SUMMARY {'=' * 5}",
        f"Number of Players: {len(setup.players)}",
        f"Game Mode: {setup.mode}",
        f"Number of Hands: {setup.rounds}",
        "Players: ",
    ]
    for i, player in enumerate(setup.players, start=1):
        lines.append(f"{i}. {player}")
    return lines


def format_round(report: RoundResultResponse) -> list[str]:
    """One line per hand, plus the dealer when the house played."""
    lines = [f"\n----- Round {report.round_number} results -----"]
    if report.dealer_cards:
        dealer_cards = ", ".join(c.name for c in report.dealer_cards)
        status = "BUST" if report.dealer_busted else str(report.dealer_total)
        lines.append(f"Dealer: {dealer_cards} ({status})")

    for hand in report.hands:
        cards = ", ".join(c.name for c in hand.cards)
        extra = ""
        if hand.is_blackjack:
            extra = " BLACKJACK!"
        elif hand.doubled:
            extra = " (doubled)"
        bonus = f" incl. {hand.bonus} bonus" if hand.bonus else ""
        lines.append(
            f"{hand.player.username}: {cards} = {hand.total}{extra} -> "
            f"{hand.label} (+{hand.round_points}{bonus})"
        )
    return lines


def format_summary(report: GameSummaryResponse) -> list[str]:
    lines = [f"\n{RULE}", "FINAL RESULTS", RULE]

    for stats in sorted(report.players, key=lambda s: s.points, reverse=True):
        lines.append(
            f"{stats.player.full_name} ({stats.player.username}): {stats.points} points | "
            f"W {stats.wins} / L {stats.losses} / P {stats.pushes} | "
            f"BJ {stats.blackjacks} | Bust {stats.busts} | 21s {stats.hands_with_21} | "
            f"Best streak {stats.best_win_streak} | Win rate {stats.win_rate:.0%}"
        )

    dist = report.distribution
    lines.append("\nHand totals:")
    for entry in dist.totals:
        lines.append(f"  {entry.total:>2}: {'#' * entry.count} ({entry.count})")
    lines.append(f"  Busts: {dist.total_busts}")
    lines.append(f"Highest hand: {dist.highest_total}")
    if dist.best_round_player is not None:
        lines.append(
            f"Best single round: {dist.best_round_points} points by "
            f"{dist.best_round_player.username}"
        )

    if report.recognitions:
        lines.append("\nRecognitions:")
        for award in report.recognitions:
            names = ", ".join(p.username for p in award.players)
            lines.append(f"  {award.title}: {names} ({award.detail})")

    names = ", ".join(p.full_name for p in report.winners)
    lines.append("")
    if len(report.winners) > 1:
        lines.append(f"It's a tie! Winners: {names} with {report.winning_score} points")
    else:
        lines.append(f"Winner: {names} with {report.winning_score} points")

    high = report.high_score
    if high is not None:
        if high.is_new:
            lines.append(f"NEW HIGH SCORE! {high.name} - {high.score}")
        else:
            lines.append(f"No new high score. Record: {high.name or '-'} - {high.score}")
    return lines


def format_event(event: GameEvent) -> str | None:
    """Short play-by-play line for the events worth narrating."""
    data = event.data
    if event.event_type == EventType.PLAYER_BLACKJACK:
        return f"{data['player']} has a natural blackjack!"
    if event.event_type == EventType.PLAYER_BUSTS:
        return f"{data['player']} busts with {data['hand_value']}."
    if event.event_type == EventType.DEALER_REVEALS:
        return f"Dealer reveals {data['card']} ({data['hand_value']})."
    if event.event_type == EventType.DEALER_HITS:
        return f"Dealer hits: {data['hand_value']}."
    if event.event_type == EventType.DEALER_BUSTS:
        return f"Dealer busts with {data['hand_value']}!"
    if event.event_type == EventType.DEALER_STANDS:
        return f"Dealer stands on {data['hand_value']}."
    return None
