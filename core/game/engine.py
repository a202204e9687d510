"""Blackjack round engine with state machine."""

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from random import Random
from typing import Any, Callable

from transitions import Machine

from core.cards import Card
from core.errors import InvalidAction, InvalidBet
from core.hand import Hand, HandSnapshot
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.outcome import RoundResult, determine_outcome, payout_for
from core.game.round import Round, play_dealer
from core.game.rules import HouseRules
from core.game.state import GameState

logger = logging.getLogger(__name__)

# Produces the next card to deal
CardSource = Callable[[], Card]


@dataclass(frozen=True)
class DealSnapshot:
    """Both hands right after the opening deal."""

    dealer_hand: HandSnapshot
    player_hand: HandSnapshot


@dataclass(frozen=True)
class HitResult:
    """Player hand after a hit."""

    player_hand: HandSnapshot
    # The hit took the hand to 21 or over and ended the player's turn
    busted_automatically: bool


class RoundEngine:
    """
    Single-player blackjack engine using a state machine.

    Owns the bankroll across rounds and the Round in progress. Completely
    UI-agnostic: communication happens through events and return values only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "accept_bet", "source": "awaiting_bet", "dest": "dealing_initial"},
        {"trigger": "begin_player_turn", "source": "dealing_initial", "dest": "player_turn"},
        {"trigger": "skip_player_turn", "source": "dealing_initial", "dest": "dealer_turn"},
        {"trigger": "end_player_turn", "source": "player_turn", "dest": "dealer_turn"},
        {"trigger": "dealer_done", "source": "dealer_turn", "dest": "resolved"},
        {"trigger": "next_round", "source": "resolved", "dest": "awaiting_bet"},
        {"trigger": "end_session", "source": "*", "dest": "session_over"},
    ]

    def __init__(
        self,
        starting_bankroll: Decimal | int = Decimal("10"),
        rules: HouseRules | None = None,
        rng: Random | None = None,
        card_source: CardSource | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            starting_bankroll: Funds available for the first bet
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for reproducible games
            card_source: Overrides random dealing, e.g. to stack cards in tests
        """
        self.rules = rules or HouseRules()
        self._rng = rng or Random()
        self._card_source = card_source or (lambda: Card.random(self._rng))

        self._bankroll = Decimal(str(starting_bankroll))
        self.round: Round | None = None
        self.last_result: RoundResult | None = None
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

        if self._bankroll < self.rules.min_bet:
            self.end_session()

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def bankroll(self) -> Decimal:
        """Funds available, with the current stake already deducted."""
        return self._bankroll

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start(self) -> None:
        """Announce the session to subscribers."""
        self.events.emit_new(EventType.SESSION_STARTED, bankroll=self._bankroll)

    def _require(self, state: GameState, action: str) -> None:
        if self.state != state:
            raise InvalidAction(f"Cannot {action} in state {self.state}")

    def _parse_bet(self, amount: Any) -> Decimal:
        """Validate a bet, raising InvalidBet with the reason it was refused."""
        if isinstance(amount, bool):
            raise InvalidBet.not_a_number(amount)
        try:
            bet = Decimal(amount.strip() if isinstance(amount, str) else str(amount))
        except (InvalidOperation, ValueError):
            raise InvalidBet.not_a_number(amount) from None

        if not bet.is_finite() or bet != bet.to_integral_value():
            raise InvalidBet.not_a_number(amount)
        if bet < self.rules.min_bet:
            raise InvalidBet.below_minimum(amount, self.rules.min_bet)
        if bet > self._bankroll:
            raise InvalidBet.exceeds_bankroll(amount)
        return bet.quantize(Decimal("1"))

    def place_bet(self, amount: Any) -> Decimal:
        """
        Place a bet to start a new round.

        Args:
            amount: Bet amount; ints, Decimals and numeric strings are accepted

        Returns:
            The accepted bet

        Raises:
            InvalidBet: Not a whole number, below the minimum, or above the bankroll
            InvalidAction: Not waiting for a bet
        """
        self._require(GameState.AWAITING_BET, "bet")
        bet = self._parse_bet(amount)

        self._bankroll -= bet
        self.round = Round(bet=bet)
        self.last_result = None

        logger.info("Bet of %s accepted, bankroll now %s", bet, self._bankroll)
        self.events.emit_new(EventType.BET_PLACED, amount=bet, bankroll=self._bankroll)
        self.accept_bet()
        return bet

    def deal_initial(self) -> DealSnapshot:
        """
        Deal the opening cards: one to the dealer, then two to the player.

        An opening 21 skips the player's turn and resolves the round at once.
        """
        self._require(GameState.DEALING_INITIAL, "deal")
        current = self._current_round()

        self.events.emit_new(EventType.ROUND_STARTED, bet=current.bet)
        self._deal_card_to_hand(current.dealer_hand)
        self._deal_card_to_hand(current.player_hand)
        self._deal_card_to_hand(current.player_hand)

        snapshot = DealSnapshot(
            dealer_hand=current.dealer_hand.snapshot(),
            player_hand=current.player_hand.snapshot(),
        )

        if current.player_hand.value == 21:
            self.events.emit_new(EventType.PLAYER_BLACKJACK)
            self.skip_player_turn()
            self._play_dealer()
        else:
            self.begin_player_turn()

        return snapshot

    def hit(self) -> HitResult:
        """Player hits (takes another card)."""
        self._require(GameState.PLAYER_TURN, "hit")
        current = self._current_round()

        self._deal_card_to_hand(current.player_hand)
        self.events.emit_new(EventType.PLAYER_HIT, hand_value=current.player_hand.value)
        snapshot = current.player_hand.snapshot()

        if not current.player_done:
            return HitResult(player_hand=snapshot, busted_automatically=False)

        if current.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=current.player_hand.value)
        self.end_player_turn()
        self._play_dealer()
        return HitResult(player_hand=snapshot, busted_automatically=True)

    def stand(self) -> HandSnapshot:
        """
        Player stands (keeps current hand).

        Returns:
            The dealer's final hand
        """
        self._require(GameState.PLAYER_TURN, "stand")
        current = self._current_round()

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=current.player_hand.value)
        self.end_player_turn()
        self._play_dealer()
        return current.dealer_hand.snapshot()

    def get_outcome(self) -> RoundResult:
        """Return the result of the most recently resolved round."""
        if self.last_result is None:
            raise InvalidAction("No round has been resolved yet")
        return self.last_result

    def quit(self) -> None:
        """End the session; a round in progress is abandoned with its stake."""
        if self.state == GameState.SESSION_OVER:
            return
        if self.state in (GameState.DEALING_INITIAL, GameState.PLAYER_TURN):
            logger.info("Session quit mid-round, stake of %s forfeited", self._current_round().bet)
        self._finish_session("quit")

    def _current_round(self) -> Round:
        if self.round is None:
            raise InvalidAction("No round in progress")
        return self.round

    def _deal_card_to_hand(self, hand: Hand) -> Card:
        """Deal a card to a hand."""
        card = self._card_source()
        hand.add_card(card)
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=card,
            hand="dealer" if hand is self._current_round().dealer_hand else "player",
            hand_value=hand.value,
        )
        return card

    def _deal_dealer_card(self, hand: Hand) -> Card:
        card = self._deal_card_to_hand(hand)
        self.events.emit_new(EventType.DEALER_HITS, hand_value=hand.value)
        return card

    def _play_dealer(self) -> None:
        """Dealer draws to 17, then the round is resolved."""
        dealer_hand = self._current_round().dealer_hand
        play_dealer(dealer_hand, self._deal_dealer_card, self.rules.dealer_stands_on)

        if dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=dealer_hand.value)

        self.dealer_done()
        self._resolve_round()

    def _resolve_round(self) -> None:
        """Decide the outcome and pay out the bet."""
        current = self._current_round()
        outcome = determine_outcome(current.player_hand, current.dealer_hand)
        payout = payout_for(outcome, current.bet, self.rules.blackjack_payout)

        self._bankroll += payout
        self.last_result = RoundResult(
            outcome=outcome,
            bet=current.bet,
            payout=payout,
            bankroll=self._bankroll,
            player_value=current.player_hand.value,
            dealer_value=current.dealer_hand.value,
        )

        logger.info(
            "Round resolved: %s (player %d, dealer %d), payout %s, bankroll %s",
            outcome.name,
            current.player_hand.value,
            current.dealer_hand.value,
            payout,
            self._bankroll,
        )
        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome,
            payout=payout,
            bankroll=self._bankroll,
        )

        if self._bankroll < self.rules.min_bet:
            self._finish_session("bankrupt")
            return

        self.next_round()

    def _finish_session(self, reason: str) -> None:
        logger.info("Session over (%s) with bankroll %s", reason, self._bankroll)
        self.events.emit_new(EventType.SESSION_ENDED, reason=reason, bankroll=self._bankroll)
        self.end_session()

    @property
    def can_bet(self) -> bool:
        """Check if a bet can be placed."""
        return self.state == GameState.AWAITING_BET

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.PLAYER_TURN

    @property
    def is_over(self) -> bool:
        """Check if the session has ended."""
        return self.state == GameState.SESSION_OVER
