"""Text rendering of hands, banners and results for the console game."""

from decimal import Decimal
from typing import Iterable

from core.cards import Card
from core.game.outcome import Outcome, RoundResult
from core.hand import HandSnapshot

CSI = "\033["
RED = CSI + "31m"
RESET = CSI + "0m"

# Cards per printed row before wrapping
MAX_CARDS_PER_ROW = 6
CARD_GAP = "    "

BORDER = "+----------+"
EMPTY_ROW = "|          |"

SEPARATOR = "=" * 67

TITLE = [
    "  ____          _                           ____  _            _     _            _    ",
    " / ___|__ _ ___(_)_ __   ___    _     _    | __ )| | __ _  ___| | __(_) __ _  ___| | __",
    "| |   / _` / __| | '_ \\ / _ \\ _| |_ _| |_  |  _ \\| |/ _` |/ __| |/ /| |/ _` |/ __| |/ /",
    "| |__| (_| \\__ \\ | | | | (_) |_   _|_   _| | |_) | | (_| | (__|   < | | (_| | (__|   < ",
    " \\____\\__,_|___/_|_| |_|\\___/  |_|   |_|   |____/|_|\\__,_|\\___|_|\\_\\/ |\\__,_|\\___|_|\\_\\",
    "                                                                  |__/                 ",
]

YOU_WON = [
    " __   __                                       _ ",
    " \\ \\ / /___   _   _    __      __ ___   _ __  | |",
    "  \\ V // _ \\ | | | |   \\ \\ /\\ / // _ \\ | '_ \\ | |",
    "   | || (_) || |_| |    \\ V  V /| (_) || | | ||_|",
    "   |_| \\___/  \\__,_|     \\_/\\_/  \\___/ |_| |_|(_)",
]

YOU_LOST = [
    " __   __                _              _            ",
    " \\ \\ / /___   _   _    | |  ___   ___ | |_          ",
    "  \\ V // _ \\ | | | |   | | / _ \\ / __|| __|         ",
    "   | || (_) || |_| |   | || (_) |\\__ \\| |_  _  _  _ ",
    "   |_| \\___/  \\__,_|   |_| \\___/ |___/ \\__|(_)(_)(_)",
]


class ConsoleRenderer:
    """
    Formats immutable hand snapshots and round results as console text.

    Every method returns a string; printing is left to the caller.
    """

    def __init__(self, color: bool = True) -> None:
        self.color = color

    def _paint(self, card: Card, text: str) -> str:
        if self.color and card.is_red:
            return f"{RED}{text}{RESET}"
        return text

    def _card_rows(self, cards: list[Card]) -> list[str]:
        """The seven text rows of one row of cards."""

        def row(cells: Iterable[str]) -> str:
            return CARD_GAP.join(cells)

        rank_left = [f"| {self._paint(c, f'{str(c.rank):<2}')}       |" for c in cards]
        suit_left = [f"| {self._paint(c, str(c.suit))}        |" for c in cards]
        suit_right = [f"|        {self._paint(c, str(c.suit))} |" for c in cards]
        rank_right = [f"|       {self._paint(c, f'{str(c.rank):>2}')} |" for c in cards]

        return [
            row(BORDER for _ in cards),
            row(rank_left),
            row(suit_left),
            row(EMPTY_ROW for _ in cards),
            row(suit_right),
            row(rank_right),
            row(BORDER for _ in cards),
        ]

    def render_cards(self, hand: HandSnapshot) -> str:
        """Render a hand as ASCII cards laid out horizontally."""
        cards = list(hand.cards)
        lines: list[str] = []
        for start in range(0, len(cards), MAX_CARDS_PER_ROW):
            lines.extend(self._card_rows(cards[start:start + MAX_CARDS_PER_ROW]))
        return "\n".join(lines)

    def render_balance(self, bankroll: Decimal, bet: Decimal | None = None) -> str:
        if bet is None:
            return f"YOUR BALANCE: {format_money(bankroll)}"
        return f"YOUR BALANCE: {format_money(bankroll)} | YOUR BET: {format_money(bet)}"

    def render_table(
        self,
        dealer_hand: HandSnapshot,
        player_hand: HandSnapshot,
        bankroll: Decimal,
        bet: Decimal,
    ) -> str:
        """Separator, balance line, then the dealer's and the player's hands with totals."""
        parts = [
            SEPARATOR,
            "",
            self.render_balance(bankroll, bet),
            "",
            f"Dealer ({dealer_hand.value}):",
        ]
        if dealer_hand.cards:
            parts.append(self.render_cards(dealer_hand))
        parts.append(f"You ({player_hand.value}):")
        if player_hand.cards:
            parts.append(self.render_cards(player_hand))
        return "\n".join(parts) + "\n"

    def render_title(self) -> str:
        return "\n".join(TITLE)

    def render_result(self, result: RoundResult) -> str:
        """Banner and payout message for a resolved round."""
        balance = format_money(result.bankroll)
        if result.outcome == Outcome.PLAYER_BLACKJACK:
            return "\n".join(
                ["BLACKJACK!", *YOU_WON, "",
                 "Your payout is one and a half times your bet, plus your initial bet! "
                 f"Your balance is now: {balance}"]
            )
        if result.outcome.player_wins:
            return "\n".join(
                [*YOU_WON, "", f"Your bet has been doubled! Your balance is now: {balance}"]
            )
        if result.outcome.dealer_wins:
            lines = ["BLACKJACK!"] if result.outcome == Outcome.DEALER_BLACKJACK else []
            return "\n".join(
                [*lines, *YOU_LOST, "", f"You lost your bet. Your balance is now: {balance}"]
            )
        return (
            "It's a tie. No one won. Your bet has been returned. "
            f"Your balance is now: {balance}"
        )


def format_money(amount: Decimal) -> str:
    """Whole amounts without decimals, others with two."""
    if amount == amount.to_integral_value():
        return str(amount.quantize(Decimal("1")))
    return str(amount.quantize(Decimal("0.01")))
