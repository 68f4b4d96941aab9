"""Per-hand decision loop for players and the fixed dealer routine."""

from dataclasses import dataclass
from typing import Protocol

from transitions import Machine

from config import config
from wildcat.cards import Card, Deck
from wildcat.errors import InvalidArgumentError
from wildcat.game.events import EventEmitter, EventType
from wildcat.game.state import Action, GameMode, TurnState
from wildcat.hand import Hand
from wildcat.players import Dealer, Player


@dataclass(frozen=True)
class TurnContext:
    """What an action provider gets to see when asked for a decision."""

    player: Player
    hand: Hand
    mode: GameMode
    round_number: int
    dealer_upcard: Card | None = None


class ActionProvider(Protocol):
    """Supplies one validated decision per request."""

    def choose_action(self, context: TurnContext, legal: tuple[Action, ...]) -> Action:
        ...


def legal_actions(mode: GameMode, hand: Hand) -> tuple[Action, ...]:
    """Actions on offer for a hand that is still awaiting a decision."""
    if mode == GameMode.VERSUS_HOUSE and hand.can_double:
        return (Action.HIT, Action.STAND, Action.DOUBLE_DOWN)
    return (Action.HIT, Action.STAND)


def deal_card(
    deck: Deck,
    hand: Hand,
    events: EventEmitter,
    owner: str,
    face_up: bool = True,
) -> Card:
    """Draw one card into a hand and announce it."""
    card = deck.draw()
    hand.add_card(card)
    events.emit_new(
        EventType.CARD_DEALT,
        owner=owner,
        card=card.name if face_up else "??",
        hand_value=hand.value if face_up else None,
    )
    return card


class HandTurn:
    """
    State machine for one hand's turn.

    Triggers are only valid from the states listed in TRANSITIONS; anything
    else raises transitions.MachineError.
    """

    STATES = [s.name.lower() for s in TurnState]

    TRANSITIONS = [
        {"trigger": "natural", "source": "awaiting_action", "dest": "blackjack"},
        {"trigger": "hit", "source": "awaiting_action", "dest": "hit"},
        {"trigger": "resume", "source": "hit", "dest": "awaiting_action"},
        {"trigger": "stand", "source": "awaiting_action", "dest": "stand"},
        {"trigger": "double_down", "source": "awaiting_action", "dest": "double_down"},
        {"trigger": "bust", "source": ["awaiting_action", "hit", "double_down"], "dest": "bust"},
    ]

    def __init__(self, hand: Hand) -> None:
        self.hand = hand
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_action",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> TurnState:
        """Current turn state as enum."""
        return TurnState[self._machine_state.upper()]  # type: ignore

    @property
    def is_over(self) -> bool:
        return self.state.is_terminal


class TurnResolver:
    """Drives a player's hand from the deal to a terminal state."""

    def __init__(
        self,
        deck: Deck,
        mode: GameMode,
        provider: ActionProvider,
        events: EventEmitter,
    ) -> None:
        self.deck = deck
        self.mode = mode
        self.provider = provider
        self.events = events

    def play(
        self,
        player: Player,
        round_number: int,
        dealer_upcard: Card | None = None,
    ) -> TurnState:
        """
        Resolve the player's current hand.

        Returns one of BLACKJACK, STAND, BUST or DOUBLE_DOWN. The provider is
        never asked for a decision once the hand is a natural or has busted.

        Raises:
            InvalidArgumentError: if the provider returns an action that was
                not on offer.
        """
        hand = player.hand
        turn = HandTurn(hand)

        if hand.is_blackjack:
            turn.natural()
            self.events.emit_new(EventType.PLAYER_BLACKJACK, player=player.username)
            return turn.state

        while not turn.is_over:
            if hand.is_busted:
                turn.bust()
                break

            legal = legal_actions(self.mode, hand)
            context = TurnContext(
                player=player,
                hand=hand,
                mode=self.mode,
                round_number=round_number,
                dealer_upcard=dealer_upcard,
            )
            action = self.provider.choose_action(context, legal)
            if action not in legal:
                raise InvalidArgumentError(
                    f"{action} is not allowed here; expected one of "
                    + ", ".join(str(a) for a in legal)
                )

            if action == Action.HIT:
                turn.hit()
                deal_card(self.deck, hand, self.events, player.username)
                self.events.emit_new(
                    EventType.PLAYER_HIT, player=player.username, hand_value=hand.value
                )
                if hand.is_busted:
                    turn.bust()
                else:
                    turn.resume()

            elif action == Action.STAND:
                turn.stand()
                self.events.emit_new(
                    EventType.PLAYER_STAND, player=player.username, hand_value=hand.value
                )

            else:
                turn.double_down()
                hand.is_doubled = True
                deal_card(self.deck, hand, self.events, player.username)
                self.events.emit_new(
                    EventType.PLAYER_DOUBLE, player=player.username, hand_value=hand.value
                )
                if hand.is_busted:
                    turn.bust()

        if turn.state == TurnState.BUST:
            self.events.emit_new(
                EventType.PLAYER_BUSTS, player=player.username, hand_value=hand.value
            )
        return turn.state


class DealerResolver:
    """The house draws to a fixed total; no decisions involved."""

    def __init__(
        self,
        deck: Deck,
        events: EventEmitter,
        stands_on: int | None = None,
    ) -> None:
        self.deck = deck
        self.events = events
        self.stands_on = stands_on or config.game.dealer_stands_on

    def play(self, dealer: Dealer) -> TurnState:
        """Reveal the hole card and hit while under the standing total."""
        hand = dealer.hand
        if len(hand.cards) >= 2:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=hand.cards[1].name,
                hand_value=hand.value,
            )

        while hand.value < self.stands_on:
            deal_card(self.deck, hand, self.events, dealer.name)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=hand.value)

        if hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=hand.value)
            return TurnState.BUST

        self.events.emit_new(EventType.DEALER_STANDS, hand_value=hand.value)
        return TurnState.STAND
