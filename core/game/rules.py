"""House rules for the round engine."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class HouseRules:
    """
    Fixed table rules.

    Cards are drawn with replacement; no splits, doubles or insurance.
    """

    # Smallest bet accepted; the session ends once the bankroll drops below it
    min_bet: int = 1

    # Blackjack pays 3:2 on top of the returned stake
    blackjack_payout: Decimal = Decimal("1.5")

    # Dealer draws while below this total
    dealer_stands_on: int = 17

    def __post_init__(self) -> None:
        """Validate rule values."""
        if self.min_bet < 1:
            raise ValueError("min_bet must be at least 1")
        if self.blackjack_payout < 1:
            raise ValueError("blackjack_payout must be at least 1")
        if not 2 <= self.dealer_stands_on <= 21:
            raise ValueError("dealer_stands_on must be between 2 and 21")
