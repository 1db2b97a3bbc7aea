"""Single-player blackjack rules engine - 100% UI-agnostic."""

from blackjack.cards import CARD_BACK, Card, Rank, Shoe, Suit, build_catalog
from blackjack.errors import (
    BlackjackError,
    EmptyShoeError,
    InvalidActionError,
    InvalidBetError,
)
from blackjack.hand import Hand, Outcome, evaluate
from blackjack.ledger import SessionLedger, SessionStats
from blackjack.storage import HighScoreStore

__all__ = [
    "CARD_BACK",
    "Card",
    "Rank",
    "Shoe",
    "Suit",
    "build_catalog",
    "BlackjackError",
    "EmptyShoeError",
    "InvalidActionError",
    "InvalidBetError",
    "Hand",
    "Outcome",
    "evaluate",
    "SessionLedger",
    "SessionStats",
    "HighScoreStore",
]
