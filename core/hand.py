"""Hand evaluation for blackjack."""

from dataclasses import dataclass, field
from random import Random
from typing import Iterator

from core.cards import Card
from core.errors import EmptyHand, IndexOutOfRange


@dataclass(frozen=True)
class HandSnapshot:
    """Immutable view of a hand, handed to renderers."""

    cards: tuple[Card, ...]
    value: int
    is_blackjack: bool
    is_busted: bool

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)


@dataclass
class Hand:
    """A blackjack hand with value calculation."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the end of the hand."""
        self.cards.append(card)

    def add_random_cards(self, count: int, rng: Random) -> None:
        """Add `count` freshly drawn random cards."""
        if count < 0:
            raise ValueError(f"Cannot add a negative number of cards: {count}")
        for _ in range(count):
            self.cards.append(Card.random(rng))

    def remove_last(self) -> Card:
        """Remove and return the most recently added card."""
        if not self.cards:
            raise EmptyHand("Cannot remove a card from an empty hand")
        return self.cards.pop()

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def card_at(self, index: int) -> Card:
        """Return the card at a 0-based position."""
        if not 0 <= index < len(self.cards):
            raise IndexOutOfRange(index, len(self.cards))
        return self.cards[index]

    @property
    def size(self) -> int:
        """Return the number of cards in the hand."""
        return len(self.cards)

    @property
    def value(self) -> int:
        """
        Calculate the optimal hand value.

        Every Ace starts at 11; while the total is over 21, one Ace at a time
        is revalued to 1. Returns the highest value that doesn't bust, or the
        lowest bust value.
        """
        total = 0
        aces = 0

        for card in self.cards:
            total += card.value
            if card.is_ace:
                aces += 1

        while total > 21 and aces > 0:
            total -= 10
            aces -= 1

        return total

    @property
    def is_soft(self) -> bool:
        """Check if the hand has an ace still counted as 11."""
        if not any(card.is_ace for card in self.cards):
            return False

        total_hard = sum(1 if card.is_ace else card.value for card in self.cards)
        return total_hard + 10 <= 21

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == 21

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > 21

    def snapshot(self) -> HandSnapshot:
        """Return an immutable copy for rendering."""
        return HandSnapshot(
            cards=tuple(self.cards),
            value=self.value,
            is_blackjack=self.is_blackjack,
            is_busted=self.is_busted,
        )

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_soft:
            value_str = f"(soft {self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"
