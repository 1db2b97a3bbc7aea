"""Tests for configuration classes."""

import dataclasses
import os
from unittest.mock import patch

import pytest


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        """Test default game values."""
        with patch.dict(os.environ, {}, clear=True):
            from config import GameConfig

            config = GameConfig()

            assert config.starting_balance == 1000
            assert config.reshuffle_threshold == 20
            assert config.min_bet == 1

    def test_env_overrides(self):
        """Test values are read from the environment."""
        env = {
            "BLACKJACK_STARTING_BALANCE": "500",
            "BLACKJACK_RESHUFFLE_THRESHOLD": "25",
        }
        with patch.dict(os.environ, env):
            from config import GameConfig

            config = GameConfig()

            assert config.starting_balance == 500
            assert config.reshuffle_threshold == 25

    def test_frozen(self):
        """Test config cannot be modified."""
        from config import GameConfig

        with pytest.raises(dataclasses.FrozenInstanceError):
            GameConfig().min_bet = 5


class TestPersistenceConfig:
    """Tests for PersistenceConfig class."""

    def test_default_file(self):
        """Test the default high score file name."""
        with patch.dict(os.environ, {}, clear=True):
            from config import PersistenceConfig

            assert PersistenceConfig().high_score_file == "high_score.txt"

    def test_env_file(self, tmp_path):
        """Test the file location can be overridden."""
        path = str(tmp_path / "scores.txt")
        with patch.dict(os.environ, {"BLACKJACK_HIGH_SCORE_FILE": path}):
            from config import PersistenceConfig

            assert PersistenceConfig().high_score_file == path


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_nested_sections(self):
        """Test the app config carries both sections."""
        from config import AppConfig, GameConfig, PersistenceConfig

        config = AppConfig()

        assert isinstance(config.game, GameConfig)
        assert isinstance(config.persistence, PersistenceConfig)

    def test_engine_uses_configured_balance(self, tmp_path):
        """Test the engine falls back to the configured starting balance."""
        from blackjack.game import BlackjackGame
        from blackjack.storage import HighScoreStore

        game = BlackjackGame(high_score_store=HighScoreStore(str(tmp_path / "hs.txt")))
        from config import config

        assert game.balance == config.game.starting_balance
        assert game.shoe.reshuffle_threshold == config.game.reshuffle_threshold
