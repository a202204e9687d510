"""Pytest fixtures for blackjack tests."""

import pytest
from decimal import Decimal
from random import Random

from core.cards import Card
from core.hand import Hand
from core.game import HouseRules, RoundEngine


def make_hand(*cards: str) -> Hand:
    """Build a hand from short card strings like 'AS', '10H'."""
    hand = Hand()
    for card in cards:
        hand.add_card(Card.from_string(card))
    return hand


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def hand_of():
    """Factory for hands built from card strings."""
    return make_hand


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def rules():
    """Default house rules."""
    return HouseRules()


@pytest.fixture
def engine(rng):
    """A new engine dealing random cards."""
    return RoundEngine(starting_bankroll=Decimal("10"), rng=rng)


@pytest.fixture
def stacked_engine():
    """
    Factory for engines that deal a fixed sequence of cards.

    Deal order is dealer, player, player, then hits and dealer draws.
    """

    def factory(*cards: str, bankroll: Decimal | int = Decimal("10")) -> RoundEngine:
        deck = iter([Card.from_string(c) for c in cards])
        return RoundEngine(starting_bankroll=bankroll, card_source=deck.__next__)

    return factory
