"""Game engine, turn state machine and scoring."""

from wildcat.game.events import EventEmitter, EventType, GameEvent
from wildcat.game.state import Action, GameMode, Outcome, TurnState
from wildcat.game.turn import ActionProvider, TurnContext, TurnResolver, DealerResolver
from wildcat.game.scoring import GameAggregates, HandResult, RoundResult, RoundScorer
from wildcat.game.engine import BlackjackGame, GameSummary, Recognition, HighScoreOutcome

__all__ = [
    "EventEmitter",
    "EventType",
    "GameEvent",
    "Action",
    "GameMode",
    "Outcome",
    "TurnState",
    "ActionProvider",
    "TurnContext",
    "TurnResolver",
    "DealerResolver",
    "GameAggregates",
    "HandResult",
    "RoundResult",
    "RoundScorer",
    "BlackjackGame",
    "GameSummary",
    "Recognition",
    "HighScoreOutcome",
]
