"""Session bankroll bookkeeping and the all-time high score."""

import logging
from dataclasses import dataclass

from config import config
from blackjack.hand import Outcome
from blackjack.storage import HighScoreStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionStats:
    """Final figures reported when a session ends."""

    final_balance: int
    current_score: int
    high_score: int
    hands_won: int
    hands_played: int
    highest_bank: int
    is_new_high_score: bool
    high_score_saved: bool = True


class SessionLedger:
    """
    Tracks the balance and statistics of one play session.

    The high score is loaded from storage when the ledger is created and
    written back whenever it is beaten.
    """

    def __init__(
        self,
        starting_balance: int | None = None,
        store: HighScoreStore | None = None,
    ) -> None:
        """
        Initialize a ledger for a new session.

        Args:
            starting_balance: Opening balance (defaults to config)
            store: High score storage (defaults to the configured file)
        """
        if starting_balance is None:
            starting_balance = config.game.starting_balance
        if starting_balance < 0:
            raise ValueError("Starting balance cannot be negative")

        self._starting_balance = starting_balance
        self._store = store or HighScoreStore(config.persistence.high_score_file)
        self._balance = starting_balance
        self._highest_bank = starting_balance
        self._hands_won = 0
        self._hands_played = 0
        self._high_score_saved = True
        self._high_score = self.load_high_score()

    def load_high_score(self) -> int:
        """Reload the high score from storage and return it."""
        self._high_score = self._store.load()
        return self._high_score

    def record_outcome(self, outcome: Outcome, bet: int) -> int:
        """
        Apply a settled round to the balance and statistics.

        Args:
            outcome: Round result
            bet: Amount wagered on the round

        Returns:
            The new balance
        """
        self._hands_played += 1

        if outcome is Outcome.DEALER_WIN:
            self._balance -= bet
        elif outcome is Outcome.PLAYER_WIN:
            self._balance += bet
            self._hands_won += 1
            if self._balance > self._highest_bank:
                self._highest_bank = self._balance

        return self._balance

    def check_and_update_high_score(self, current_score: int | None = None) -> bool:
        """
        Store a new high score if the given score beats it.

        Args:
            current_score: Score to compare (defaults to this session's score)

        Returns:
            True if the high score was raised, even if writing it failed
        """
        if current_score is None:
            current_score = self.current_score
        if current_score <= self._high_score:
            return False

        self._high_score = current_score
        logger.info("New high score: %d", current_score)
        self._high_score_saved = self._store.save(current_score)
        return True

    def final_stats(self) -> SessionStats:
        """Close the books: update the high score and report the session."""
        score = self.current_score
        is_new = self.check_and_update_high_score(score)
        return SessionStats(
            final_balance=self._balance,
            current_score=score,
            high_score=self._high_score,
            hands_won=self._hands_won,
            hands_played=self._hands_played,
            highest_bank=self._highest_bank,
            is_new_high_score=is_new,
            high_score_saved=self._high_score_saved,
        )

    @property
    def current_score(self) -> int:
        """Return the session winnings, floored at 0."""
        return max(0, self._balance - self._starting_balance)

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def starting_balance(self) -> int:
        return self._starting_balance

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def high_score_saved(self) -> bool:
        """False if the last raised high score could not be written."""
        return self._high_score_saved

    @property
    def highest_bank(self) -> int:
        return self._highest_bank

    @property
    def hands_won(self) -> int:
        return self._hands_won

    @property
    def hands_played(self) -> int:
        return self._hands_played
