"""
Test suite for configuration loading.
"""

import dataclasses

import pytest

from gateway.config import DEFAULT_RPC_URL, Config
from gateway.errors import ConfigurationError


class TestConfig:
    """Tests for Config.load."""

    def test_defaults(self, clean_env):
        config = Config.load(env_file=None)

        assert config.rpc_url == DEFAULT_RPC_URL
        assert config.server.port == 3000
        assert config.server.host == "0.0.0.0"
        assert config.solana.cluster == "devnet"
        assert config.solana.explorer_url == "https://explorer.solana.com"
        assert config.settlement.strategy == "fixed"
        assert config.settlement.delay_seconds == 10.0

    def test_environment_overrides(self, clean_env):
        clean_env.setenv("RPC_URL", "http://127.0.0.1:8899")
        clean_env.setenv("PORT", "8080")
        clean_env.setenv("SETTLEMENT_STRATEGY", "POLL")
        clean_env.setenv("SETTLEMENT_DELAY_SECONDS", "30")
        clean_env.setenv("EXPLORER_URL", "https://explorer.example/")

        config = Config.load(env_file=None)

        assert config.rpc_url == "http://127.0.0.1:8899"
        assert config.server.port == 8080
        assert config.settlement.strategy == "poll"
        assert config.settlement.delay_seconds == 30.0
        assert config.solana.explorer_url == "https://explorer.example"

    def test_env_file(self, clean_env, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("RPC_URL=https://rpc.from-file.invalid\n")

        config = Config.load(env_file=env_file)

        assert config.rpc_url == "https://rpc.from-file.invalid"

    def test_config_is_immutable(self, clean_env):
        config = Config.load(env_file=None)

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.solana = None

    @pytest.mark.parametrize("key, value", [
        ("PORT", "http"),
        ("RPC_TIMEOUT_SECONDS", "-1"),
        ("SETTLEMENT_STRATEGY", "forever"),
    ])
    def test_invalid_values(self, clean_env, key, value):
        clean_env.setenv(key, value)

        with pytest.raises(ConfigurationError):
            Config.load(env_file=None)
