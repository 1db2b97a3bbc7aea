"""Blackjack engine facade for the presentation layer."""

import logging
from random import Random
from typing import Callable

from config import config
from blackjack.cards import CARD_BACK, Shoe
from blackjack.errors import InvalidBetError
from blackjack.hand import Outcome, evaluate
from blackjack.ledger import SessionLedger, SessionStats
from blackjack.storage import HighScoreStore
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.round import Round, RoundResult
from blackjack.game.state import RoundState

logger = logging.getLogger(__name__)


class BlackjackGame:
    """
    Single-player blackjack session.

    This is the only object a presentation layer talks to. It drives the
    round through start_round, hit, stand and cash_out, and reports back
    through events and read-only queries. Cards are exposed only as
    display references.
    """

    def __init__(
        self,
        starting_balance: int | None = None,
        high_score_store: HighScoreStore | None = None,
        reshuffle_threshold: int | None = None,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            starting_balance: Opening balance (defaults to config)
            high_score_store: High score storage (defaults to the configured file)
            reshuffle_threshold: Shoe low-water mark (defaults to config)
            rng: Random number generator for reproducible games
        """
        if reshuffle_threshold is None:
            reshuffle_threshold = config.game.reshuffle_threshold

        self._starting_balance = starting_balance
        self._store = high_score_store or HighScoreStore(config.persistence.high_score_file)
        self.shoe = Shoe(reshuffle_threshold=reshuffle_threshold, rng=rng)
        self.events = EventEmitter()
        self.final_stats: SessionStats | None = None

        self._open_session()

    def _open_session(self) -> None:
        self.shoe.shuffle()
        self.ledger = SessionLedger(self._starting_balance, self._store)
        self.round = Round(self.shoe, self.ledger, self.events)
        self.final_stats = None
        self.events.emit_new(
            EventType.SESSION_STARTED,
            balance=self.ledger.balance,
            high_score=self.ledger.high_score,
        )

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def start_round(self, bet: int | float | str) -> Outcome | None:
        """
        Place a bet and deal a new round.

        Args:
            bet: Whole-number amount between the minimum bet and the balance.
                Digit strings and integral floats such as 100.0 are accepted

        Returns:
            The outcome if the deal settled the round, otherwise None

        Raises:
            InvalidActionError: If a round is already in progress
            InvalidBetError: If the bet is not acceptable
        """
        self.round.require(RoundState.AWAITING_BET, "start a round")
        amount = self._validate_bet(bet)
        try:
            return self.round.start(amount)
        finally:
            self._check_session_over("bankrupt")

    def hit(self) -> Outcome | None:
        """Player takes another card."""
        try:
            return self.round.hit()
        finally:
            self._check_session_over("bankrupt")

    def stand(self) -> Outcome | None:
        """Player stands; the dealer plays out and the round settles."""
        try:
            return self.round.stand()
        finally:
            self._check_session_over("bankrupt")

    def cash_out(self) -> SessionStats:
        """
        End the session between rounds.

        Raises:
            InvalidActionError: If a round is in progress or the session is over
        """
        self.round.cash_out()
        return self._finish_session("cash_out")

    def new_session(self) -> None:
        """Start a fresh session after the previous one has ended."""
        self.round.require(RoundState.SESSION_OVER, "start a new session")
        self._open_session()

    def _validate_bet(self, bet: int | float | str) -> int:
        if isinstance(bet, bool):
            raise self._bet_error("Bet must be a whole number", bet)
        if isinstance(bet, str):
            try:
                amount = int(bet.strip())
            except ValueError:
                raise self._bet_error("Bet must be a whole number", bet) from None
        elif isinstance(bet, int):
            amount = bet
        elif isinstance(bet, float) and bet.is_integer():
            amount = int(bet)
        else:
            raise self._bet_error("Bet must be a whole number", bet)

        if amount < config.game.min_bet:
            raise self._bet_error(f"Bet must be at least {config.game.min_bet}", bet)
        if amount > self.ledger.balance:
            raise self._bet_error(f"Bet cannot exceed balance of {self.ledger.balance}", bet)
        return amount

    def _bet_error(self, message: str, bet: object) -> InvalidBetError:
        self.events.emit_new(EventType.INVALID_BET, message=message, amount=bet)
        return InvalidBetError(message, bet)

    def _check_session_over(self, reason: str) -> None:
        if self.round.state == RoundState.SESSION_OVER and self.final_stats is None:
            self._finish_session(reason)

    def _finish_session(self, reason: str) -> SessionStats:
        stats = self.ledger.final_stats()
        self.final_stats = stats

        if stats.is_new_high_score:
            self.events.emit_new(
                EventType.HIGH_SCORE_UPDATED,
                high_score=stats.high_score,
                saved=stats.high_score_saved,
            )

        logger.info(
            "Session ended (%s): balance %d, score %d, hands won %d",
            reason, stats.final_balance, stats.current_score, stats.hands_won,
        )
        self.events.emit_new(EventType.SESSION_ENDED, reason=reason, stats=stats)
        return stats

    @property
    def state(self) -> RoundState:
        """Get current round state."""
        return self.round.state

    @property
    def player_hand(self) -> list[str]:
        """Display references of the player's cards."""
        return self.round.player_hand.display_refs

    @property
    def dealer_hand(self) -> list[str]:
        """Display references of the dealer's cards, hole card face down until revealed."""
        cards = self.round.dealer_hand.display_refs
        if self.round.dealer_revealed or len(cards) < 2:
            return cards
        return [cards[0], CARD_BACK, *cards[2:]]

    @property
    def player_value(self) -> int:
        """Point total of the player's hand."""
        return self.round.player_hand.value

    @property
    def dealer_value(self) -> int:
        """Point total of the dealer's visible cards."""
        cards = self.round.dealer_hand.cards
        if self.round.dealer_revealed:
            return evaluate(cards)
        return evaluate(cards[:1])

    @property
    def bet(self) -> int:
        """Amount wagered on the round in progress."""
        return self.round.bet

    @property
    def last_result(self) -> RoundResult | None:
        """The most recently settled round."""
        return self.round.last_result

    @property
    def balance(self) -> int:
        return self.ledger.balance

    @property
    def starting_balance(self) -> int:
        return self.ledger.starting_balance

    @property
    def high_score(self) -> int:
        return self.ledger.high_score

    @property
    def highest_bank(self) -> int:
        return self.ledger.highest_bank

    @property
    def hands_won(self) -> int:
        return self.ledger.hands_won

    @property
    def hands_played(self) -> int:
        return self.ledger.hands_played

    @property
    def current_score(self) -> int:
        return self.ledger.current_score

    @property
    def can_bet(self) -> bool:
        """Check if a new round may be started."""
        return self.state == RoundState.AWAITING_BET

    @property
    def can_hit(self) -> bool:
        """Check if hitting is allowed."""
        return self.state == RoundState.IN_PLAY

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == RoundState.IN_PLAY

    @property
    def can_cash_out(self) -> bool:
        """Check if the session may be ended."""
        return self.state == RoundState.AWAITING_BET
