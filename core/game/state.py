"""Round engine state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Round engine state machine states.

    Flow: AWAITING_BET → DEALING_INITIAL → PLAYER_TURN → DEALER_TURN → RESOLVED
    → AWAITING_BET (or SESSION_OVER)
    """

    # Idle, waiting for the next bet
    AWAITING_BET = auto()

    # Bet accepted, opening cards not yet dealt
    DEALING_INITIAL = auto()

    # Player decides hit or stand
    PLAYER_TURN = auto()

    # Dealer draws to 17
    DEALER_TURN = auto()

    # Outcome computed and paid
    RESOLVED = auto()

    # Bankroll exhausted or player quit
    SESSION_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.AWAITING_BET: [GameState.DEALING_INITIAL, GameState.SESSION_OVER],
    # DEALER_TURN directly when the opening hand is 21
    GameState.DEALING_INITIAL: [GameState.PLAYER_TURN, GameState.DEALER_TURN, GameState.SESSION_OVER],
    GameState.PLAYER_TURN: [GameState.DEALER_TURN, GameState.SESSION_OVER],
    GameState.DEALER_TURN: [GameState.RESOLVED],
    GameState.RESOLVED: [GameState.AWAITING_BET, GameState.SESSION_OVER],
    GameState.SESSION_OVER: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
