"""Tests for the session ledger."""

import pytest

from blackjack.hand import Outcome
from blackjack.ledger import SessionLedger
from blackjack.storage import HighScoreStore


class TestSessionLedger:
    """Tests for balance and statistics bookkeeping."""

    def test_initial_state(self, ledger):
        """Test a fresh ledger."""
        assert ledger.balance == 1000
        assert ledger.starting_balance == 1000
        assert ledger.highest_bank == 1000
        assert ledger.hands_won == 0
        assert ledger.hands_played == 0
        assert ledger.high_score == 0
        assert ledger.current_score == 0

    def test_dealer_win_deducts_bet(self, ledger):
        """Test a loss takes the bet."""
        assert ledger.record_outcome(Outcome.DEALER_WIN, 100) == 900
        assert ledger.hands_won == 0
        assert ledger.highest_bank == 1000

    def test_player_win_credits_bet(self, ledger):
        """Test a win pays even money and counts."""
        assert ledger.record_outcome(Outcome.PLAYER_WIN, 100) == 1100
        assert ledger.hands_won == 1
        assert ledger.highest_bank == 1100

    def test_tie_leaves_balance(self, ledger):
        """Test a push changes nothing but the hand count."""
        assert ledger.record_outcome(Outcome.TIE, 100) == 1000
        assert ledger.hands_played == 1
        assert ledger.hands_won == 0

    def test_highest_bank_is_a_peak(self, ledger):
        """Test highest bank keeps the maximum balance seen."""
        ledger.record_outcome(Outcome.PLAYER_WIN, 300)
        ledger.record_outcome(Outcome.DEALER_WIN, 500)
        ledger.record_outcome(Outcome.PLAYER_WIN, 100)
        assert ledger.balance == 900
        assert ledger.highest_bank == 1300

    def test_current_score_floored_at_zero(self, ledger):
        """Test losing sessions score 0."""
        ledger.record_outcome(Outcome.DEALER_WIN, 400)
        assert ledger.current_score == 0

    def test_current_score_uses_starting_balance(self, store):
        """Test the score is measured from this session's starting balance."""
        ledger = SessionLedger(starting_balance=500, store=store)
        ledger.record_outcome(Outcome.PLAYER_WIN, 200)
        assert ledger.current_score == 200

    def test_negative_starting_balance_rejected(self, store):
        """Test a negative opening balance is refused."""
        with pytest.raises(ValueError):
            SessionLedger(starting_balance=-1, store=store)

    def test_loads_high_score_on_creation(self, store):
        """Test the stored high score is read at session start."""
        store.save(300)
        assert SessionLedger(starting_balance=1000, store=store).high_score == 300

    def test_check_and_update_high_score_raises_and_persists(self, ledger, store):
        """Test a better score is kept and written immediately."""
        assert ledger.check_and_update_high_score(150)
        assert ledger.high_score == 150
        assert store.load() == 150

    def test_check_and_update_high_score_ignores_lower(self, ledger, store):
        """Test an equal or lower score leaves the record alone."""
        store.save(200)
        ledger.load_high_score()
        assert not ledger.check_and_update_high_score(200)
        assert not ledger.check_and_update_high_score(50)
        assert ledger.high_score == 200

    def test_check_and_update_defaults_to_current_score(self, ledger, store):
        """Test the session score is used when none is given."""
        ledger.record_outcome(Outcome.PLAYER_WIN, 250)
        assert ledger.check_and_update_high_score()
        assert store.load() == 250

    def test_save_failure_keeps_memory_state(self, tmp_path):
        """Test a failed write still updates the in-memory high score."""
        store = HighScoreStore(str(tmp_path / "missing" / "high_score.txt"))
        ledger = SessionLedger(starting_balance=1000, store=store)
        assert ledger.check_and_update_high_score(40)
        assert ledger.high_score == 40
        assert not ledger.high_score_saved
        assert not ledger.final_stats().high_score_saved

    def test_final_stats(self, ledger):
        """Test the end-of-session report."""
        ledger.record_outcome(Outcome.PLAYER_WIN, 100)
        ledger.record_outcome(Outcome.TIE, 50)
        stats = ledger.final_stats()
        assert stats.final_balance == 1100
        assert stats.current_score == 100
        assert stats.high_score == 100
        assert stats.hands_won == 1
        assert stats.hands_played == 2
        assert stats.highest_bank == 1100
        assert stats.is_new_high_score
        assert stats.high_score_saved

    def test_final_stats_without_record(self, ledger, store):
        """Test a losing session does not beat the stored score."""
        store.save(500)
        ledger.load_high_score()
        ledger.record_outcome(Outcome.DEALER_WIN, 100)
        stats = ledger.final_stats()
        assert stats.current_score == 0
        assert stats.high_score == 500
        assert not stats.is_new_high_score
