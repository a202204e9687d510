"""Per-round state and the dealer drawing policy."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Callable

from core.cards import Card
from core.hand import Hand

# Deals one card into the given hand and returns it
DealFn = Callable[[Hand], Card]


@dataclass
class Round:
    """Hands and stake for the round in progress."""

    bet: Decimal
    player_hand: Hand = field(default_factory=Hand)
    dealer_hand: Hand = field(default_factory=Hand)

    @property
    def player_done(self) -> bool:
        """The player cannot act any more once at 21 or bust."""
        return self.player_hand.value >= 21


def play_dealer(dealer_hand: Hand, deal: DealFn, stands_on: int = 17) -> list[Card]:
    """
    Draw for the dealer until the hand reaches `stands_on`.

    Every draw adds at least 1 to the total, so the loop terminates with a
    value of at least `stands_on`.

    Returns:
        The cards drawn, in order
    """
    drawn: list[Card] = []
    while dealer_hand.value < stands_on:
        drawn.append(deal(dealer_hand))
    return drawn
