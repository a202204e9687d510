"""Tests for configuration classes."""

import os
import pytest
from decimal import Decimal
from unittest.mock import patch

from config import AppConfig, CORSConfig, GameConfig, SecurityConfig, _parse_cors_origins
from core.game import HouseRules


class TestCORSConfig:
    """Tests for CORSConfig class."""

    def test_cors_default_origins(self):
        """Test that default CORS origins are set correctly."""
        with patch.dict(os.environ, {}, clear=True):
            config = CORSConfig()

            assert config.allowed_origins == ["http://localhost:8000"]

    def test_cors_parses_env_var(self):
        """Test that CORS origins are parsed from environment variable."""
        env_origins = "http://example.com,http://localhost:3000,http://app.test.com"
        with patch.dict(os.environ, {"CORS_ORIGINS": env_origins}):
            origins = _parse_cors_origins()

        assert origins == ["http://example.com", "http://localhost:3000", "http://app.test.com"]

    def test_cors_parses_origins_with_whitespace(self):
        """Test that CORS origins handles whitespace correctly."""
        with patch.dict(os.environ, {"CORS_ORIGINS": "  http://example.com  ,  ,http://localhost:3000  "}):
            origins = _parse_cors_origins()

        assert origins == ["http://example.com", "http://localhost:3000"]

    def test_cors_defaults_allow_all(self):
        """Test that credentials, methods and headers are open by default."""
        config = CORSConfig()

        assert config.allow_credentials is True
        assert "*" in config.allow_methods
        assert "*" in config.allow_headers


class TestSecurityConfig:
    """Tests for SecurityConfig class."""

    def test_secret_key_auto_generates(self):
        """Test that secret key is auto-generated when not in env."""
        with patch.dict(os.environ, {}, clear=True):
            config = SecurityConfig()

        assert config.secret_key

    def test_secret_key_from_env(self):
        """Test that secret key is read from environment."""
        with patch.dict(os.environ, {"SECRET_KEY": "my-super-secret-key-12345"}):
            config = SecurityConfig()

        assert config.secret_key == "my-super-secret-key-12345"


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_game_config_defaults(self):
        """Test default game configuration values."""
        with patch.dict(os.environ, {}, clear=True):
            config = GameConfig()

        assert config.starting_bankroll == Decimal("10")
        assert config.seconds_between_draws == 2.0
        assert config.min_bet == 1
        assert config.blackjack_payout == Decimal("1.5")
        assert config.dealer_stands_on == 17

    def test_game_config_from_env(self):
        """Test bankroll and draw delay from environment."""
        with patch.dict(
            os.environ,
            {"BLACKJACK_STARTING_BANKROLL": "250", "BLACKJACK_DRAW_DELAY": "0"},
        ):
            config = GameConfig()

        assert config.starting_bankroll == Decimal("250")
        assert config.seconds_between_draws == 0.0

    def test_rules(self):
        """Test that the config builds matching house rules."""
        assert GameConfig().rules == HouseRules()

    def test_game_config_frozen(self):
        """Test that GameConfig is frozen (immutable)."""
        config = GameConfig()

        with pytest.raises(Exception):  # dataclasses.FrozenInstanceError
            config.min_bet = 5


class TestHouseRules:
    """Tests for house rule validation."""

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_bet": 0},
            {"blackjack_payout": Decimal("0")},
            {"dealer_stands_on": 22},
        ],
    )
    def test_invalid_rules_rejected(self, kwargs):
        """Test that nonsensical rules are refused."""
        with pytest.raises(ValueError):
            HouseRules(**kwargs)


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_app_config_defaults(self):
        """Test default AppConfig values."""
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

        assert config.debug is False
        assert config.host == "0.0.0.0"
        assert config.port == 8000
        assert config.log_level == "WARNING"
        assert config.session_ttl == 3600

    def test_app_config_from_env(self):
        """Test debug mode and log level from environment."""
        with patch.dict(os.environ, {"DEBUG": "true", "LOG_LEVEL": "debug"}):
            config = AppConfig()

        assert config.debug is True
        assert config.log_level == "DEBUG"

    def test_app_config_has_nested_configs(self):
        """Test that AppConfig has nested configuration objects."""
        config = AppConfig()

        assert isinstance(config.game, GameConfig)
        assert isinstance(config.cors, CORSConfig)
        assert isinstance(config.security, SecurityConfig)
