"""Hand evaluation and round outcome rules."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator

from blackjack.cards import Card

BLACKJACK = 21
FIVE_CARD_CHARLIE = 5


def evaluate(cards: Iterable[Card]) -> int:
    """
    Calculate the point total of a hand.

    Every Ace starts at 1 and is raised to 11 while that keeps the total at
    or under 21, so the result does not depend on card order. A hand of
    exactly five cards totalling under 21 scores 21 (Five-Card Charlie).
    """
    cards = list(cards)
    total = 0
    aces = 0

    for card in cards:
        if card.is_ace:
            aces += 1
            total += 1
        else:
            total += card.value

    # Raise aces from 1 to 11 while they fit
    while aces > 0 and total + 10 <= BLACKJACK:
        total += 10
        aces -= 1

    if len(cards) == FIVE_CARD_CHARLIE and total < BLACKJACK:
        return BLACKJACK

    return total


@dataclass
class Hand:
    """Cards held by the player or the dealer for the current round."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    @property
    def value(self) -> int:
        """Return the evaluated point total."""
        return evaluate(self.cards)

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return len(self.cards) == 2 and self.value == BLACKJACK

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (value > 21)."""
        return self.value > BLACKJACK

    @property
    def display_refs(self) -> list[str]:
        """Return the display references of the cards, in deal order."""
        return [card.display_ref for card in self.cards]

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        value_str = f"({self.value})"
        if self.is_blackjack:
            value_str = "(BLACKJACK)"
        if self.is_busted:
            value_str = "(BUST)"
        return f"{cards_str} {value_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


class Outcome(Enum):
    """Settled result of a round."""

    PLAYER_WIN = "player_win"
    DEALER_WIN = "dealer_win"
    TIE = "tie"

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


def resolve_outcome(
    player_hand: Hand,
    dealer_hand: Hand,
    dealer_played: bool,
) -> Outcome | None:
    """
    Decide the round outcome, if any.

    Naturals are checked first. Before the dealer has played only a player
    bust ends the round. After the dealer has played there is always an
    outcome.

    Returns:
        The outcome, or None while the round is still in play
    """
    player_bj = player_hand.is_blackjack
    dealer_bj = dealer_hand.is_blackjack

    if player_bj and dealer_bj:
        return Outcome.TIE
    if player_bj:
        return Outcome.PLAYER_WIN
    if dealer_bj:
        return Outcome.DEALER_WIN

    player_value = player_hand.value
    dealer_value = dealer_hand.value

    if not dealer_played:
        if player_value > BLACKJACK:
            return Outcome.DEALER_WIN
        return None

    if player_value == dealer_value:
        return Outcome.TIE
    if dealer_value > BLACKJACK or player_value > dealer_value:
        return Outcome.PLAYER_WIN
    return Outcome.DEALER_WIN
