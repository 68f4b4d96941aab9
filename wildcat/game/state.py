"""Game, turn and outcome enumerations."""

from enum import Enum, auto


class GameMode(Enum):
    """Competition format, fixed for one game."""

    HEAD_TO_HEAD = 1
    VERSUS_HOUSE = 2

    def __str__(self) -> str:
        return {
            GameMode.HEAD_TO_HEAD: "Head-to-Head",
            GameMode.VERSUS_HOUSE: "Versus the House",
        }[self]


class TurnState(Enum):
    """
    Per-hand decision states.

    Flow: AWAITING_ACTION → (HIT → AWAITING_ACTION)* → STAND | DOUBLE_DOWN | BUST,
    or straight to BLACKJACK on a natural.
    """

    AWAITING_ACTION = auto()
    HIT = auto()
    STAND = auto()
    DOUBLE_DOWN = auto()
    BUST = auto()
    BLACKJACK = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        return self in TERMINAL_STATES


TERMINAL_STATES = frozenset(
    {TurnState.STAND, TurnState.DOUBLE_DOWN, TurnState.BUST, TurnState.BLACKJACK}
)


class Action(Enum):
    """Decisions a player can make on their turn."""

    HIT = "hit"
    STAND = "stand"
    DOUBLE_DOWN = "double"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class Outcome(Enum):
    """Result of a hand for scoring."""

    WIN = "win"
    LOSS = "loss"
    PUSH = "push"
