"""Round engine and state management."""

from core.game.events import GameEvent, EventType
from core.game.outcome import Outcome, RoundResult, determine_outcome, payout_for
from core.game.round import Round, play_dealer
from core.game.rules import HouseRules
from core.game.state import GameState
from core.game.engine import DealSnapshot, HitResult, RoundEngine

__all__ = [
    "GameEvent",
    "EventType",
    "Outcome",
    "RoundResult",
    "determine_outcome",
    "payout_for",
    "Round",
    "play_dealer",
    "HouseRules",
    "GameState",
    "DealSnapshot",
    "HitResult",
    "RoundEngine",
]
