"""Pytest fixtures for Wildcat Blackjack tests."""

import pytest
from random import Random

from wildcat.cards import Card, Deck
from wildcat.game.state import Action
from wildcat.game.turn import TurnContext
from wildcat.hand import Hand
from wildcat.highscore import InMemoryHighScoreStore
from wildcat.players import Player


def make_hand(*codes: str) -> Hand:
    """Build a hand from short card codes: make_hand("AS", "KH")."""
    return Hand(cards=[Card.from_string(code) for code in codes])


class StackedDeck(Deck):
    """Deck that deals the given cards first, in order."""

    def __init__(self, *codes: str) -> None:
        super().__init__(rng=Random(0))
        self._cards = [Card.from_string(code) for code in codes]

    def shuffle(self) -> None:
        # Keep the stacked order
        pass


class ScriptedActions:
    """Action provider that replays a fixed list of decisions per player."""

    def __init__(self, script: dict[str, list[Action]] | None = None, default: Action = Action.STAND):
        self.script = {name: list(actions) for name, actions in (script or {}).items()}
        self.default = default
        self.calls: list[tuple[str, tuple[Action, ...]]] = []

    def choose_action(self, context: TurnContext, legal: tuple[Action, ...]) -> Action:
        self.calls.append((context.player.username, legal))
        queue = self.script.get(context.player.username)
        if queue:
            return queue.pop(0)
        return self.default


class HitUntil:
    """Action provider that hits below a total and stands otherwise."""

    def __init__(self, target: int = 17):
        self.target = target

    def choose_action(self, context: TurnContext, legal: tuple[Action, ...]) -> Action:
        if context.hand.value < self.target:
            return Action.HIT
        return Action.STAND


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def alice():
    return Player("Alice", "Archer", "alice")


@pytest.fixture
def bob():
    return Player("Bob", "Baker", "bob")


@pytest.fixture
def carol():
    return Player("Carol", "Cooper", "carol")


@pytest.fixture
def high_scores():
    """An empty in-memory high-score store."""
    return InMemoryHighScoreStore()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


# Hypothesis strategies for property-based testing
try:
    from hypothesis import strategies as st

    from wildcat.cards import Rank, Suit

    @st.composite
    def card_strategy(draw, ranks=None):
        """Generate a random card."""
        rank = draw(st.sampled_from(ranks or list(Rank)))
        suit = draw(st.sampled_from(list(Suit)))
        return Card(rank, suit)

    @st.composite
    def cards_strategy(draw, min_cards=0, max_cards=8):
        """Generate a random list of cards."""
        return draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))

except ImportError:
    pass  # hypothesis not installed
