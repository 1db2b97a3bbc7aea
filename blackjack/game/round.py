"""Single betting round driven by a state machine."""

import logging
from dataclasses import dataclass

from transitions import Machine

from blackjack.cards import CARD_BACK, Card, Shoe
from blackjack.errors import InvalidActionError
from blackjack.hand import Hand, Outcome, resolve_outcome
from blackjack.ledger import SessionLedger
from blackjack.game.events import EventEmitter, EventType
from blackjack.game.state import RoundState

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


@dataclass(frozen=True)
class RoundResult:
    """Snapshot of a settled round, kept after the hands are cleared."""

    outcome: Outcome
    bet: int
    amount: int  # Net change to the balance
    balance: int
    player_cards: tuple[str, ...]
    dealer_cards: tuple[str, ...]
    player_value: int
    dealer_value: int


class Round:
    """
    Plays rounds of blackjack against a dealer who stands on 17.

    The round deals from a shoe shared with the owner, settles outcomes
    into the session ledger and reports progress through events. One
    instance is reused for every round of a session.
    """

    # State machine states
    STATES = [s.name.lower() for s in RoundState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "deal_in", "source": "awaiting_bet", "dest": "in_play"},
        {"trigger": "dealer_turn", "source": "in_play", "dest": "dealer_playing"},
        {"trigger": "settle", "source": ["in_play", "dealer_playing"], "dest": "settled"},
        {"trigger": "next_round", "source": "settled", "dest": "awaiting_bet"},
        {"trigger": "close_session", "source": ["awaiting_bet", "settled"], "dest": "session_over"},
    ]

    def __init__(
        self,
        shoe: Shoe,
        ledger: SessionLedger,
        events: EventEmitter | None = None,
    ) -> None:
        self.shoe = shoe
        self.ledger = ledger
        self.events = events or EventEmitter()

        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self.bet = 0
        self.dealer_played = False
        self.dealer_revealed = False
        self.last_result: RoundResult | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="awaiting_bet",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._machine_state.upper()]  # type: ignore

    def start(self, bet: int) -> Outcome | None:
        """
        Accept a bet and deal two cards each, player first.

        The bet is trusted; validate it against the balance beforehand.

        Returns:
            The outcome if a natural settled the round immediately
        """
        self.require(RoundState.AWAITING_BET, "start a round")

        self.bet = bet
        self.deal_in()
        self.events.emit_new(EventType.ROUND_STARTED, bet=bet)

        self._deal_to_player()
        self._deal_to_dealer()
        self._deal_to_player()
        self._deal_to_dealer(face_up=False)

        return self.resolve()

    def hit(self) -> Outcome | None:
        """Deal the player one more card."""
        self.require(RoundState.IN_PLAY, "hit")
        self._deal_to_player()
        return self.resolve()

    def stand(self) -> Outcome | None:
        """End the player's turn; the dealer draws until reaching 17 or more."""
        self.require(RoundState.IN_PLAY, "stand")
        self.dealer_turn()

        while self.dealer_hand.value < DEALER_STANDS_ON:
            self._deal_to_dealer()

        self.dealer_played = True
        return self.resolve()

    def cash_out(self) -> None:
        """Close the session between rounds."""
        self.require(RoundState.AWAITING_BET, "cash out")
        self.close_session()

    def resolve(self) -> Outcome | None:
        """Settle the round if the hands decide it."""
        outcome = resolve_outcome(self.player_hand, self.dealer_hand, self.dealer_played)
        if outcome is not None:
            self._settle(outcome)
        return outcome

    def require(self, state: RoundState, action: str) -> None:
        """Raise InvalidActionError unless the round is in the given state."""
        if self.state != state:
            self.events.emit_new(
                EventType.INVALID_ACTION,
                message=f"Cannot {action} in current state",
                state=self.state.name,
            )
            raise InvalidActionError(action, self.state.name)

    def _deal_to_player(self) -> Card:
        card = self.shoe.draw()
        self.player_hand.add_card(card)
        logger.debug("Player dealt %s (%d)", card, self.player_hand.value)
        self.events.emit_new(
            EventType.PLAYER_CARD_ADDED,
            card=card.display_ref,
            hand_value=self.player_hand.value,
        )
        return card

    def _deal_to_dealer(self, face_up: bool = True) -> Card:
        card = self.shoe.draw()
        self.dealer_hand.add_card(card)
        logger.debug("Dealer dealt %s", card if face_up else "hole card")
        self.events.emit_new(
            EventType.DEALER_CARD_ADDED,
            card=card.display_ref if face_up else CARD_BACK,
        )
        return card

    def _settle(self, outcome: Outcome) -> None:
        """Pay out, report the result, then reset or end the session.

        The state moves on even if an event handler raises.
        """
        self.settle()
        self.dealer_revealed = True

        previous = self.ledger.balance
        balance = self.ledger.record_outcome(outcome, self.bet)
        amount = balance - previous

        self.last_result = RoundResult(
            outcome=outcome,
            bet=self.bet,
            amount=amount,
            balance=balance,
            player_cards=tuple(self.player_hand.display_refs),
            dealer_cards=tuple(self.dealer_hand.display_refs),
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )
        logger.info(
            "Round settled: %s (player %d, dealer %d, balance %d)",
            outcome, self.player_hand.value, self.dealer_hand.value, balance,
        )

        try:
            self.events.emit_new(
                EventType.DEALER_HAND_REVEALED,
                cards=self.dealer_hand.display_refs,
                hand_value=self.dealer_hand.value,
            )
            if amount:
                self.events.emit_new(EventType.BALANCE_CHANGED, balance=balance)
            self.events.emit_new(
                EventType.ROUND_SETTLED,
                outcome=outcome,
                amount=amount,
                balance=balance,
            )
        finally:
            if outcome is Outcome.DEALER_WIN and balance == 0:
                self.close_session()
            else:
                self._reset()

    def _reset(self) -> None:
        """Clear the table for the next bet, reshuffling a short shoe."""
        shuffled = self.shoe.needs_shuffle
        if shuffled:
            self.shoe.shuffle()

        self.player_hand.clear()
        self.dealer_hand.clear()
        self.bet = 0
        self.dealer_played = False
        self.dealer_revealed = False
        self.next_round()

        if shuffled:
            self.events.emit_new(EventType.SHOE_SHUFFLED)
