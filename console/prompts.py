"""Input prompts for the console game."""

from typing import Callable, Literal

Decision = Literal["hit", "stand"]
Choice = Literal["start", "quit"]

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


class Prompter:
    """
    Asks the player for input until a valid answer is given.

    Args:
        input_fn: Reads one line; the argument is the prompt text
        output_fn: Writes one message
    """

    def __init__(self, input_fn: InputFn = input, output_fn: OutputFn = print) -> None:
        self._input = input_fn
        self._output = output_fn

    def _ask(self, message: str) -> str:
        self._output(message)
        return self._input("").strip().lower()

    def start_or_quit(self, first_time: bool = False) -> Choice:
        """Ask whether to start a (new) round or quit."""
        if first_time:
            message = "Enter 's' to start or 'q' to quit the game: "
        else:
            message = "Enter 's' to start a new round or 'q' to quit the game: "
        answer = self._ask(message)
        while True:
            if answer == "s":
                return "start"
            if answer == "q":
                return "quit"
            answer = self._ask(
                "Invalid input, please try again. Enter 's' to start or 'q' to quit the game"
            )

    def hit_or_stand(self) -> Decision:
        answer = self._ask("Enter 'h' to hit or 's' to stand:")
        while True:
            if answer == "h":
                return "hit"
            if answer == "s":
                return "stand"
            answer = self._ask("Invalid input, please try again. Enter 'h' to hit or 's' to stand:")

    def bet_amount(self, min_bet: int) -> str:
        """Raw bet text; validation belongs to the engine."""
        return self._ask(f"Please place your bet (an integer of at least {min_bet}):")

    def say(self, message: str) -> None:
        self._output(message)
