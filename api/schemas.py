"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Any, Literal


class BetRequest(BaseModel):
    """Request to place a bet."""

    # Validated by the engine so every refusal carries its reason
    amount: Any = Field(..., description="Bet amount")


class ActionRequest(BaseModel):
    """Request for player action."""

    action: Literal["hit", "stand"]


class CardResponse(BaseModel):
    """Card representation."""

    rank: str
    suit: str
    value: int


class HandResponse(BaseModel):
    """Hand representation."""

    cards: list[CardResponse]
    value: int
    is_blackjack: bool
    is_busted: bool


class GameStateResponse(BaseModel):
    """Current game state."""

    state: str
    player_hand: HandResponse
    dealer_hand: HandResponse
    bankroll: float
    bet: float | None
    can_bet: bool
    can_hit: bool
    can_stand: bool


class RoundResultResponse(BaseModel):
    """Round result."""

    outcome: Literal[
        "PLAYER_BUST",
        "DEALER_BUST",
        "PLAYER_HIGHER",
        "DEALER_HIGHER",
        "PLAYER_BLACKJACK",
        "DEALER_BLACKJACK",
        "PUSH",
    ]
    bet: float
    payout: float
    new_bankroll: float
    player_value: int
    dealer_value: int


class NewGameResponse(BaseModel):
    """Session created for a new game."""

    session_id: str
