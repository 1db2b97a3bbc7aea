"""Pytest fixtures for blackjack engine tests."""

import pytest
from random import Random

from blackjack.cards import Card, Shoe
from blackjack.hand import Hand
from blackjack.ledger import SessionLedger
from blackjack.storage import HighScoreStore
from blackjack.game import BlackjackGame, EventEmitter, Round


def make_hand(*codes: str) -> Hand:
    """Build a hand from short card codes like 'AS', '10H'."""
    hand = Hand()
    for code in codes:
        hand.add_card(Card.from_string(code))
    return hand


def stack_shoe(shoe: Shoe, *codes: str, remaining: int | None = None) -> None:
    """
    Put the given cards on top of the shoe, first code drawn first.

    Args:
        shoe: Shoe to rearrange (its other cards keep their order)
        codes: Cards in draw order
        remaining: If given, trim the shoe so this many cards remain
    """
    top = [Card.from_string(code) for code in codes]
    rest = [card for card in shoe if card not in top]
    if remaining is not None:
        rest = rest[: remaining - len(top)]
    shoe._cards = rest + list(reversed(top))


def collect(game, event_type):
    """Return the data of every recorded event of one type."""
    return [e.data for e in game.events.history if e.event_type == event_type]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def shoe(rng):
    """A shuffled shoe."""
    s = Shoe(rng=rng)
    s.shuffle()
    return s


@pytest.fixture
def high_score_file(tmp_path):
    """Path to a high score file that does not exist yet."""
    return str(tmp_path / "high_score.txt")


@pytest.fixture
def store(high_score_file):
    """High score store backed by a temporary file."""
    return HighScoreStore(high_score_file)


@pytest.fixture
def ledger(store):
    """A ledger starting at 1000."""
    return SessionLedger(starting_balance=1000, store=store)


@pytest.fixture
def round_(shoe, ledger):
    """A round awaiting a bet."""
    return Round(shoe, ledger, EventEmitter())


@pytest.fixture
def game(rng, store):
    """A new game instance."""
    return BlackjackGame(starting_balance=1000, high_score_store=store, rng=rng)


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    return make_hand("AS", "KH")


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")
