"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Rank, Suit
from core.errors import (
    BlackjackError,
    EmptyHand,
    IndexOutOfRange,
    InvalidAction,
    InvalidBet,
    InvalidRank,
    InvalidSuit,
)
from core.hand import Hand, HandSnapshot

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "HandSnapshot",
    "BlackjackError",
    "EmptyHand",
    "IndexOutOfRange",
    "InvalidAction",
    "InvalidBet",
    "InvalidRank",
    "InvalidSuit",
]
