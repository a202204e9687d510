"""Card, Rank, and Suit - immutable card representations."""

from dataclasses import dataclass
from enum import Enum
from random import Random

from core.errors import InvalidRank, InvalidSuit


class Suit(Enum):
    """Card suits."""

    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"
    SPADES = "spades"

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]

    @property
    def is_red(self) -> bool:
        """Hearts and diamonds are printed in red."""
        return self in (Suit.HEARTS, Suit.DIAMONDS)

    @classmethod
    def parse(cls, suit: "Suit | str") -> "Suit":
        """
        Resolve a suit from a member, its name, a one-letter code or a symbol.

        Raises:
            InvalidSuit: If the input names none of the four suits
        """
        if isinstance(suit, Suit):
            return suit
        if not isinstance(suit, str):
            raise InvalidSuit(suit)

        key = suit.strip().lower()
        for member in cls:
            if key in (member.value, member.value[0], str(member)):
                return member
        raise InvalidSuit(suit)


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the nominal blackjack value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @classmethod
    def parse(cls, rank: "Rank | str") -> "Rank":
        """
        Resolve a rank from a member or its face label (2-10, J, Q, K, A).

        "T" is accepted as shorthand for 10.

        Raises:
            InvalidRank: If the input is not one of the thirteen ranks
        """
        if isinstance(rank, Rank):
            return rank
        if not isinstance(rank, str):
            raise InvalidRank(rank)

        label = rank.strip().upper()
        if label == "T":
            label = "10"
        for member in cls:
            if str(member) == label:
                return member
        raise InvalidRank(rank)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise InvalidRank(self.rank)
        if not isinstance(self.suit, Suit):
            raise InvalidSuit(self.suit)

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the nominal blackjack value, before any soft-ace adjustment."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_red(self) -> bool:
        """Check if this card has a red suit."""
        return self.suit.is_red

    @classmethod
    def create(cls, rank: Rank | str, suit: Suit | str) -> "Card":
        """
        Create a validated card.

        Args:
            rank: A Rank or a face label such as "10", "J" or "A"
            suit: A Suit or a suit name such as "hearts"

        Raises:
            InvalidRank: If rank is not one of the thirteen ranks
            InvalidSuit: If suit is not one of the four suits
        """
        return cls(Rank.parse(rank), Suit.parse(suit))

    @classmethod
    def random(cls, rng: Random) -> "Card":
        """Draw a card with a uniformly random rank and suit."""
        return cls(rng.choice(_RANKS), rng.choice(_SUITS))

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh', '10d'."""
        s = s.strip()
        if len(s) < 2:
            raise InvalidRank(s)
        return cls.create(s[:-1], s[-1])


_RANKS = tuple(Rank)
_SUITS = tuple(Suit)
