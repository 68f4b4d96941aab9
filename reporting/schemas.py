"""Pydantic schemas for round results and end-of-game reports."""

from pydantic import BaseModel, ConfigDict, Field
from typing import Literal


class CardResponse(BaseModel):
    """Card representation."""

    model_config = ConfigDict(from_attributes=True)

    rank: str
    suit: str
    name: str
    value: int


class PlayerRef(BaseModel):
    """Who a result belongs to."""

    username: str
    full_name: str


class HandResultResponse(BaseModel):
    """One player's hand in one round."""

    player: PlayerRef
    cards: list[CardResponse]
    total: int
    is_bust: bool
    is_blackjack: bool
    doubled: bool = False
    outcome: Literal["win", "loss", "push"]
    label: str
    rank: int | None = None
    points: int
    bonus: int
    round_points: int


class RoundResultResponse(BaseModel):
    """Round result."""

    round_number: int = Field(..., ge=1)
    mode: Literal["head_to_head", "versus_house"]
    hands: list[HandResultResponse]
    dealer_cards: list[CardResponse] = Field(default_factory=list)
    dealer_total: int | None = None
    dealer_busted: bool = False


class PlayerStatsResponse(BaseModel):
    """Lifetime counters for one game."""

    player: PlayerRef
    points: int
    hands_played: int
    wins: int
    losses: int
    pushes: int
    blackjacks: int
    busts: int
    hands_with_21: int
    total_cards_drawn: int
    max_cards_in_one_hand: int
    current_win_streak: int
    best_win_streak: int
    win_rate: float


class DistributionEntry(BaseModel):
    """How often a non-bust total came up."""

    total: int
    count: int


class DistributionResponse(BaseModel):
    """Hand-total frequency table and related records."""

    totals: list[DistributionEntry]
    total_busts: int
    highest_total: int
    best_round_points: int
    best_round_player: PlayerRef | None = None


class RecognitionResponse(BaseModel):
    """End-of-game award."""

    title: str
    players: list[PlayerRef]
    detail: str = ""


class HighScoreResponse(BaseModel):
    """High-score comparison."""

    is_new: bool
    name: str
    score: int
    previous_name: str
    previous_score: int


class GameSummaryResponse(BaseModel):
    """Everything the reporting layer needs after the last round."""

    mode: Literal["head_to_head", "versus_house"]
    rounds_played: int
    winners: list[PlayerRef]
    winning_score: int
    players: list[PlayerStatsResponse]
    distribution: DistributionResponse
    recognitions: list[RecognitionResponse]
    high_score: HighScoreResponse | None = None
    rounds: list[RoundResultResponse] = Field(default_factory=list)
