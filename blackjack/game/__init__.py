"""Round state machine and engine facade."""

from blackjack.game.events import GameEvent, EventEmitter, EventType
from blackjack.game.state import RoundState
from blackjack.game.round import Round, RoundResult
from blackjack.game.engine import BlackjackGame

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "Round",
    "RoundResult",
    "BlackjackGame",
]
