"""Console game loop driving the round engine."""

import logging
import time
from typing import Callable

from console.prompts import Prompter
from console.renderer import ConsoleRenderer, format_money
from core.errors import InvalidBet
from core.game import EventType, GameEvent, RoundEngine

logger = logging.getLogger(__name__)


class ConsoleGame:
    """
    Plays rounds on the console until the player quits or runs out of money.

    Redraws the table after every dealt card and pauses between draws to
    mimic a dealer handing out cards.
    """

    def __init__(
        self,
        engine: RoundEngine,
        prompter: Prompter | None = None,
        renderer: ConsoleRenderer | None = None,
        seconds_between_draws: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.engine = engine
        self.prompter = prompter or Prompter()
        self.renderer = renderer or ConsoleRenderer()
        self.seconds_between_draws = seconds_between_draws
        self._sleep = sleep

        self.engine.subscribe(self._on_card_dealt, EventType.CARD_DEALT)

    def _on_card_dealt(self, event: GameEvent) -> None:
        self.show_table()
        if self.seconds_between_draws > 0:
            self._sleep(self.seconds_between_draws)

    def show_table(self) -> None:
        current = self.engine.round
        if current is None:
            return
        self.prompter.say(
            self.renderer.render_table(
                current.dealer_hand.snapshot(),
                current.player_hand.snapshot(),
                self.engine.bankroll,
                current.bet,
            )
        )

    def run(self) -> None:
        """Show the title, then play rounds until the session is over."""
        self.prompter.say("\nWelcome to:")
        self.prompter.say(self.renderer.render_title())
        self.engine.start()

        choice = self.prompter.start_or_quit(first_time=True)
        while choice == "start":
            self.play_round()
            if self.engine.is_over:
                break
            choice = self.prompter.start_or_quit()

        self.engine.quit()
        self.prompter.say("Thank you for playing Casino++ Blackjack. Goodbye!")

    def play_round(self) -> None:
        """Take a bet, deal, let the player act, then report the result."""
        self._take_bet()
        self.engine.deal_initial()

        while self.engine.can_hit:
            if self.prompter.hit_or_stand() == "hit":
                self.engine.hit()
            else:
                self.engine.stand()

        result = self.engine.get_outcome()
        self.prompter.say(self.renderer.render_result(result))

        if self.engine.is_over:
            self.prompter.say(
                "Oops! It looks like you don't have enough balance to place a bet. "
                "The game is over."
            )

    def _take_bet(self) -> None:
        self.prompter.say("\n" + self.renderer.render_balance(self.engine.bankroll))
        while True:
            amount = self.prompter.bet_amount(self.engine.rules.min_bet)
            try:
                self.engine.place_bet(amount)
                return
            except InvalidBet as exc:
                logger.debug("Bet %r refused: %s", exc.amount, exc.reason)
                self.prompter.say(f"{exc.reason} Please try again.")
