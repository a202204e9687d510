"""Main entry point for the console blackjack game."""

import sys

from config import config
from console.game import ConsoleGame
from core.game import RoundEngine
from core.logging_utils import setup_logging


def main() -> int:
    """Run one console session."""
    setup_logging(config.log_level)
    engine = RoundEngine(
        starting_bankroll=config.game.starting_bankroll,
        rules=config.game.rules,
    )
    game = ConsoleGame(engine, seconds_between_draws=config.game.seconds_between_draws)
    try:
        game.run()
    except (KeyboardInterrupt, EOFError):
        print("\nThank you for playing Casino++ Blackjack. Goodbye!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
