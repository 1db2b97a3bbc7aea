"""Round state enumeration."""

from enum import Enum, auto


class RoundState(Enum):
    """
    Round state machine states.

    Flow: AWAITING_BET → IN_PLAY → DEALER_PLAYING → SETTLED → AWAITING_BET
    """

    # Idle, a bet may be placed
    AWAITING_BET = auto()

    # Cards dealt, player may hit or stand
    IN_PLAY = auto()

    # Dealer draws to 17
    DEALER_PLAYING = auto()

    # Outcome decided, balance updated
    SETTLED = auto()

    # Player cashed out or balance reached zero
    SESSION_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[RoundState, list[RoundState]] = {
    RoundState.AWAITING_BET: [RoundState.IN_PLAY, RoundState.SESSION_OVER],
    RoundState.IN_PLAY: [RoundState.DEALER_PLAYING, RoundState.SETTLED],  # SETTLED on natural or bust
    RoundState.DEALER_PLAYING: [RoundState.SETTLED],
    RoundState.SETTLED: [RoundState.AWAITING_BET, RoundState.SESSION_OVER],
    RoundState.SESSION_OVER: [],  # Terminal state
}


def is_valid_transition(from_state: RoundState, to_state: RoundState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
