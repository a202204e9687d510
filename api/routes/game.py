"""Game API endpoints."""

import logging
from fastapi import APIRouter, HTTPException, Header
from typing import Annotated

from api.schemas import (
    ActionRequest,
    BetRequest,
    CardResponse,
    GameStateResponse,
    HandResponse,
    NewGameResponse,
    RoundResultResponse,
)
from api.session import extract_session_id, get_session_store
from config import config
from core.errors import InvalidAction, InvalidBet
from core.game import RoundEngine, RoundResult
from core.hand import HandSnapshot

logger = logging.getLogger(__name__)

router = APIRouter()

# Session data keys
SESSION_KEY_ENGINE = "engine"

SessionHeader = Annotated[str, Header(alias="X-Session-ID")]


def _new_engine() -> RoundEngine:
    return RoundEngine(
        starting_bankroll=config.game.starting_bankroll,
        rules=config.game.rules,
    )


def _get_engine(session_id: str) -> RoundEngine:
    """Look up the engine for a signed session token."""
    store = get_session_store()
    if extract_session_id(session_id) is None:
        raise HTTPException(status_code=401, detail="Invalid session")

    session_data = store.get(session_id)
    if session_data is None or SESSION_KEY_ENGINE not in session_data:
        raise HTTPException(status_code=404, detail="Session not found")

    # Refresh the idle timeout
    store.set(session_id, session_data)
    return session_data[SESSION_KEY_ENGINE]


def _hand_to_response(hand: HandSnapshot) -> HandResponse:
    """Convert a HandSnapshot to HandResponse."""
    return HandResponse(
        cards=[
            CardResponse(
                rank=str(c.rank),
                suit=c.suit.value,
                value=c.value,
            )
            for c in hand.cards
        ],
        value=hand.value,
        is_blackjack=hand.is_blackjack,
        is_busted=hand.is_busted,
    )


def _game_state_response(engine: RoundEngine) -> GameStateResponse:
    """Convert engine state to response."""
    current = engine.round
    empty = HandSnapshot(cards=(), value=0, is_blackjack=False, is_busted=False)
    return GameStateResponse(
        state=engine.state.name,
        player_hand=_hand_to_response(current.player_hand.snapshot() if current else empty),
        dealer_hand=_hand_to_response(current.dealer_hand.snapshot() if current else empty),
        bankroll=float(engine.bankroll),
        bet=float(current.bet) if current else None,
        can_bet=engine.can_bet,
        can_hit=engine.can_hit,
        can_stand=engine.can_stand,
    )


def _result_response(result: RoundResult) -> RoundResultResponse:
    return RoundResultResponse(
        outcome=result.outcome.name,
        bet=float(result.bet),
        payout=float(result.payout),
        new_bankroll=float(result.bankroll),
        player_value=result.player_value,
        dealer_value=result.dealer_value,
    )


@router.post("/new")
async def new_game() -> NewGameResponse:
    """Create a new game session."""
    store = get_session_store()
    engine = _new_engine()
    session_id = store.create({SESSION_KEY_ENGINE: engine})
    engine.start()
    logger.info("New game session created")
    return NewGameResponse(session_id=session_id)


@router.get("/state")
async def get_state(session_id: SessionHeader) -> GameStateResponse:
    """Get current game state."""
    return _game_state_response(_get_engine(session_id))


@router.post("/bet")
async def place_bet(request: BetRequest, session_id: SessionHeader) -> GameStateResponse:
    """Place a bet and deal the opening cards."""
    engine = _get_engine(session_id)

    try:
        engine.place_bet(request.amount)
    except InvalidBet as exc:
        raise HTTPException(status_code=400, detail=exc.reason) from exc
    except InvalidAction as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    engine.deal_initial()
    return _game_state_response(engine)


@router.post("/action")
async def player_action(request: ActionRequest, session_id: SessionHeader) -> GameStateResponse:
    """Execute a player action."""
    engine = _get_engine(session_id)

    actions = {
        "hit": engine.hit,
        "stand": engine.stand,
    }

    try:
        actions[request.action]()
    except InvalidAction as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc

    return _game_state_response(engine)


@router.get("/outcome")
async def get_outcome(session_id: SessionHeader) -> RoundResultResponse:
    """Get the result of the last resolved round."""
    engine = _get_engine(session_id)
    try:
        result = engine.get_outcome()
    except InvalidAction as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return _result_response(result)


@router.post("/quit")
async def quit_game(session_id: SessionHeader) -> GameStateResponse:
    """End the session."""
    engine = _get_engine(session_id)
    engine.quit()
    return _game_state_response(engine)
