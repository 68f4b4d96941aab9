"""Terminal action provider for player turns."""

from console.prompts import InputFn, OutputFn
from wildcat.game.state import Action
from wildcat.game.turn import TurnContext

ACTION_KEYS = {
    Action.HIT: "H",
    Action.STAND: "S",
    Action.DOUBLE_DOWN: "D",
}


class ConsoleActionProvider:
    """Shows the hand and reads H/S/D until a legal choice is made."""

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
        self.input = input_fn
        self.output = output_fn

    def choose_action(self, context: TurnContext, legal: tuple[Action, ...]) -> Action:
        player = context.player
        self.output(f"\n{player.first_name}'s hand: {context.hand}")
        if context.dealer_upcard is not None:
            self.output(f"Dealer shows: {context.dealer_upcard.name}")

        choices = {ACTION_KEYS[a]: a for a in legal}
        menu = ", ".join(f"{ACTION_KEYS[a]}={a}" for a in legal)
        while True:
            raw = self.input(f"Choose an action ({menu}): ").strip().upper()
            if raw in choices:
                return choices[raw]
            self.output("Invalid choice, try again.")
