"""Engine exceptions."""


class BlackjackError(Exception):
    """Base class for all engine errors."""


class InvalidBetError(BlackjackError, ValueError):
    """Bet amount is not a whole number between the minimum bet and the balance."""

    def __init__(self, message: str, amount: object = None) -> None:
        super().__init__(message)
        self.amount = amount


class InvalidActionError(BlackjackError):
    """Action is not allowed in the current round state."""

    def __init__(self, action: str, state: str) -> None:
        super().__init__(f"Cannot {action} in state {state}")
        self.action = action
        self.state = state


class EmptyShoeError(BlackjackError, IndexError):
    """Draw attempted on an empty shoe."""
