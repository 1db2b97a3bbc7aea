"""Card catalog and the single-deck shoe."""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterator

from blackjack.errors import EmptyShoeError

logger = logging.getLogger(__name__)

# Display reference shown in place of the dealer's hole card
CARD_BACK = "back_of_card"

# Lowest reshuffle threshold that still covers the most cards one round can
# draw (player 12 including a busting card, dealer 5)
MIN_RESHUFFLE_THRESHOLD = 20


class Suit(Enum):
    """Card suits."""

    CLUBS = auto()
    DIAMONDS = auto()
    HEARTS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.CLUBS: "♣",
            Suit.DIAMONDS: "♦",
            Suit.HEARTS: "♥",
            Suit.SPADES: "♠",
        }
        return symbols[self]


class Rank(Enum):
    """Card ranks with blackjack values."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return {
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
            Rank.ACE: "A",
        }[self]

    @property
    def blackjack_value(self) -> int:
        """Return the blackjack point value (Ace = 11, face cards = 10)."""
        if self.value <= 10:
            return self.value
        if self == Rank.ACE:
            return 11
        return 10  # Face cards

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def display_name(self) -> str:
        """Lower-case name used in display references ('10', 'jack', 'ace')."""
        if self.value <= 10:
            return str(self.value)
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        """Return the blackjack point value (soft value for an Ace)."""
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def display_ref(self) -> str:
        """Opaque reference the presentation layer resolves to an image."""
        return f"{self.rank.display_name}_of_{self.suit.name.lower()}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like '2♣', 'AS', 'Kh'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        rank_str = s[:-1]
        suit_str = s[-1]

        rank_map = {str(rank): rank for rank in Rank}
        rank_map["T"] = Rank.TEN

        suit_map = {
            "C": Suit.CLUBS,
            "♣": Suit.CLUBS,
            "D": Suit.DIAMONDS,
            "♦": Suit.DIAMONDS,
            "H": Suit.HEARTS,
            "♥": Suit.HEARTS,
            "S": Suit.SPADES,
            "♠": Suit.SPADES,
        }

        if rank_str not in rank_map:
            raise ValueError(f"Invalid rank: {rank_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(rank_map[rank_str], suit_map[suit_str])


def build_catalog() -> tuple[Card, ...]:
    """Return the 52 distinct cards, ordered by suit then rank."""
    return tuple(Card(rank, suit) for suit in Suit for rank in Rank)


class Shoe:
    """
    The draw pile for a single 52-card deck.

    Cards are drawn from the top only. A drawn card stays out until the
    next shuffle rebuilds the full population in a new random order.
    """

    def __init__(
        self,
        reshuffle_threshold: int = 20,
        rng: Random | None = None,
    ) -> None:
        """
        Initialize an empty shoe; call shuffle() before drawing.

        Args:
            reshuffle_threshold: Remaining-card count below which the shoe
                asks for a reshuffle between rounds (20 to 52)
            rng: Random number generator for shuffling
        """
        if not MIN_RESHUFFLE_THRESHOLD <= reshuffle_threshold <= 52:
            raise ValueError(
                f"Reshuffle threshold must be between {MIN_RESHUFFLE_THRESHOLD} and 52"
            )

        self._catalog = build_catalog()
        self._reshuffle_threshold = reshuffle_threshold
        self._rng = rng or Random()
        self._cards: list[Card] = []

    def shuffle(self) -> None:
        """Discard the current order and refill with all 52 cards, shuffled."""
        self._cards = list(self._catalog)
        self._rng.shuffle(self._cards)
        logger.debug("Shoe shuffled (%d cards)", len(self._cards))

    def draw(self) -> Card:
        """Remove and return the top card."""
        if not self._cards:
            logger.error("Draw attempted on an empty shoe")
            raise EmptyShoeError("Cannot draw from empty shoe")
        return self._cards.pop()

    @property
    def needs_shuffle(self) -> bool:
        """Check if fewer cards remain than the reshuffle threshold."""
        return len(self._cards) < self._reshuffle_threshold

    @property
    def remaining_count(self) -> int:
        """Return the number of undealt cards."""
        return len(self._cards)

    @property
    def reshuffle_threshold(self) -> int:
        """Return the configured low-water mark."""
        return self._reshuffle_threshold

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
