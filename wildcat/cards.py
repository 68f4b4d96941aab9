"""Card and Deck classes - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from typing import Iterator


class Suit(Enum):
    """Card suits, in canonical deck order."""

    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3
    SPADES = 4

    def __str__(self) -> str:
        return self.name.title()


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        return self.label

    @property
    def label(self) -> str:
        """Return the rank as printed on a card name ("7", "Queen")."""
        if self.value <= 10:
            return str(self.value)
        return self.name.title()

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.blackjack_value == 10


_RANK_CODES = {
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "A": Rank.ACE,
}

_SUIT_CODES = {
    "H": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "S": Suit.SPADES,
}


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def name(self) -> str:
        """Readable name, e.g. '10 of Hearts' or 'Ace of Spades'."""
        return f"{self.rank.label} of {self.suit}"

    @property
    def value(self) -> int:
        """Return the nominal blackjack point value."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a short code like 'AS', '10h' or 'Kc'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        if rank_str not in _RANK_CODES:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in _SUIT_CODES:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(_RANK_CODES[rank_str], _SUIT_CODES[suit_str])


class Deck:
    """A standard 52-card deck that never runs dry."""

    def __init__(self, rng: Random | None = None) -> None:
        """Initialize a new deck in canonical order."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Reset deck to all 52 cards in order."""
        self._cards = [Card(rank, suit) for suit in Suit for rank in Rank]

    def shuffle(self) -> None:
        """Shuffle the deck in place (Fisher-Yates)."""
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randint(0, i)
            cards[i], cards[j] = cards[j], cards[i]

    def draw(self) -> Card:
        """
        Draw the front card of the deck.

        An exhausted deck is reset and reshuffled before drawing, so this
        never fails.
        """
        if not self._cards:
            self.reset()
            self.shuffle()
        return self._cards.pop(0)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
