"""Exceptions raised by the blackjack core."""

from decimal import Decimal
from typing import Any


class BlackjackError(Exception):
    """Base class for all blackjack errors."""


class InvalidRank(BlackjackError, ValueError):
    """A card rank outside 2-10, J, Q, K, A."""

    def __init__(self, rank: Any) -> None:
        super().__init__(f"Invalid rank: {rank!r}")
        self.rank = rank


class InvalidSuit(BlackjackError, ValueError):
    """A card suit outside hearts, diamonds, clubs, spades."""

    def __init__(self, suit: Any) -> None:
        super().__init__(f"Invalid suit: {suit!r}")
        self.suit = suit


class InvalidBet(BlackjackError, ValueError):
    """
    A bet that cannot be placed.

    Attributes:
        amount: The rejected input, as given
        reason: Human-readable explanation shown when re-prompting
    """

    NOT_A_NUMBER = "Your input is not a whole number, or contains letters."
    BELOW_MINIMUM = "Sorry, this bet is below the minimum bet of {min_bet}."
    EXCEEDS_BANKROLL = "Sorry, you do not have enough money to place this bet."

    def __init__(self, amount: Any, reason: str) -> None:
        super().__init__(reason)
        self.amount = amount
        self.reason = reason

    @classmethod
    def not_a_number(cls, amount: Any) -> "InvalidBet":
        return cls(amount, cls.NOT_A_NUMBER)

    @classmethod
    def below_minimum(cls, amount: Any, min_bet: Decimal | int) -> "InvalidBet":
        return cls(amount, cls.BELOW_MINIMUM.format(min_bet=min_bet))

    @classmethod
    def exceeds_bankroll(cls, amount: Any) -> "InvalidBet":
        return cls(amount, cls.EXCEEDS_BANKROLL)


class EmptyHand(BlackjackError, IndexError):
    """Removing a card from a hand that holds none."""


class IndexOutOfRange(BlackjackError, IndexError):
    """Card index outside [0, size)."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(f"Card index {index} out of range for hand of {size}")
        self.index = index
        self.size = size


class InvalidAction(BlackjackError):
    """An engine operation called in a state that does not allow it."""
