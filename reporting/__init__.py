"""Structured reports for round results and game summaries."""

from reporting.builders import game_summary_response, round_result_response
from reporting.schemas import GameSummaryResponse, RoundResultResponse

__all__ = [
    "game_summary_response",
    "round_result_response",
    "GameSummaryResponse",
    "RoundResultResponse",
]
