"""Wildcat Blackjack engine - no terminal or file I/O beyond the score store."""

from wildcat.cards import Card, Deck, Rank, Suit
from wildcat.errors import InvalidArgumentError
from wildcat.hand import Hand, hand_value, is_blackjack
from wildcat.players import Dealer, Player, PlayerStats, Roster

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "Hand",
    "hand_value",
    "is_blackjack",
    "Dealer",
    "Player",
    "PlayerStats",
    "Roster",
    "InvalidArgumentError",
]
