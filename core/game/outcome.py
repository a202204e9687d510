"""Round outcome decision and payout."""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum, auto

from core.hand import Hand


class Outcome(Enum):
    """The single result of a finished round."""

    PLAYER_BUST = auto()
    DEALER_BUST = auto()
    PLAYER_HIGHER = auto()
    DEALER_HIGHER = auto()
    PLAYER_BLACKJACK = auto()
    DEALER_BLACKJACK = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def player_wins(self) -> bool:
        return self in (Outcome.PLAYER_BLACKJACK, Outcome.PLAYER_HIGHER, Outcome.DEALER_BUST)

    @property
    def dealer_wins(self) -> bool:
        return self in (Outcome.DEALER_BLACKJACK, Outcome.DEALER_HIGHER, Outcome.PLAYER_BUST)


@dataclass(frozen=True)
class RoundResult:
    """Outcome of a resolved round and its effect on the bankroll."""

    outcome: Outcome
    bet: Decimal
    payout: Decimal
    bankroll: Decimal
    player_value: int
    dealer_value: int


def determine_outcome(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare final player and dealer hands.

    A player bust loses even when the dealer also busts. A two-card 21 beats
    any other hand, a dealer bust included; two naturals, or two non-natural
    21s, push.
    """
    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if player_value > 21:
        return Outcome.PLAYER_BUST

    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if dealer_value > 21:
        # A natural is still paid as blackjack
        return Outcome.PLAYER_BLACKJACK if player_bj else Outcome.DEALER_BUST

    if player_value == 21 and dealer_value == 21:
        if player_bj and not dealer_bj:
            return Outcome.PLAYER_BLACKJACK
        if dealer_bj and not player_bj:
            return Outcome.DEALER_BLACKJACK
        return Outcome.PUSH

    if player_value == 21:
        return Outcome.PLAYER_BLACKJACK if player_bj else Outcome.PLAYER_HIGHER
    if dealer_value == 21:
        return Outcome.DEALER_BLACKJACK if dealer_bj else Outcome.DEALER_HIGHER

    if player_value > dealer_value:
        return Outcome.PLAYER_HIGHER
    if dealer_value > player_value:
        return Outcome.DEALER_HIGHER
    return Outcome.PUSH


def payout_for(
    outcome: Outcome,
    bet: Decimal,
    blackjack_payout: Decimal = Decimal("1.5"),
) -> Decimal:
    """
    Amount credited to the bankroll after the stake was already deducted.

    Args:
        outcome: Round outcome
        bet: Stake placed for the round
        blackjack_payout: Winnings multiple for a player blackjack

    Returns:
        Stake plus winnings for a win, the stake for a push, 0 for a loss
    """
    if outcome == Outcome.PLAYER_BLACKJACK:
        return bet * (1 + blackjack_payout)
    if outcome in (Outcome.PLAYER_HIGHER, Outcome.DEALER_BUST):
        return bet * 2
    if outcome == Outcome.PUSH:
        return bet
    return Decimal("0")
