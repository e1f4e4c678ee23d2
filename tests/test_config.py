"""
Tests for configuration models and environment loading.
"""

import pytest
from pydantic import ValidationError

from dao_action_builder.config import (
    DEFAULT_ETHERSCAN_API_URL,
    ActionBuilderConfig,
    EtherscanConfig,
    RpcConfig,
    load_config_from_env,
)

ENV_VARS = [
    "ETHERSCAN_API_KEY",
    "ETHERSCAN_API_URL",
    "CHAIN_ID",
    "REQUEST_TIMEOUT_MS",
    "REQUEST_RETRIES",
    "RPC_URL",
]


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


# =============================================================================
# Model Tests
# =============================================================================


class TestEtherscanConfig:
    """Tests for EtherscanConfig."""

    def test_defaults(self) -> None:
        config = EtherscanConfig(api_key="key")

        assert config.api_url == DEFAULT_ETHERSCAN_API_URL
        assert config.chain_id == 1
        assert config.timeout_ms == 10000
        assert config.max_retries == 3

    @pytest.mark.parametrize(
        "overrides",
        [{"chain_id": 0}, {"timeout_ms": 999}, {"max_retries": 0}],
    )
    def test_bounds(self, overrides: dict) -> None:
        with pytest.raises(ValidationError):
            EtherscanConfig(api_key="key", **overrides)

    def test_frozen(self) -> None:
        config = EtherscanConfig(api_key="key")

        with pytest.raises(ValidationError):
            config.chain_id = 10

    def test_rpc_optional(self) -> None:
        config = ActionBuilderConfig(etherscan=EtherscanConfig(api_key="key"))

        assert config.rpc is None


# =============================================================================
# Environment Loading Tests
# =============================================================================


class TestLoadConfigFromEnv:
    """Tests for load_config_from_env."""

    def test_requires_api_key(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ValueError, match="ETHERSCAN_API_KEY"):
            load_config_from_env()

    def test_minimal(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ETHERSCAN_API_KEY", "abc")

        config = load_config_from_env()

        assert config.etherscan.api_key == "abc"
        assert config.etherscan.chain_id == 1
        assert config.rpc is None

    def test_full(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ETHERSCAN_API_KEY", "abc")
        clean_env.setenv("ETHERSCAN_API_URL", "https://explorer.example/api/")
        clean_env.setenv("CHAIN_ID", "11155111")
        clean_env.setenv("REQUEST_TIMEOUT_MS", "5000")
        clean_env.setenv("REQUEST_RETRIES", "5")
        clean_env.setenv("RPC_URL", " https://rpc.example ")

        config = load_config_from_env()

        assert config.etherscan.api_url == "https://explorer.example/api"
        assert config.etherscan.chain_id == 11155111
        assert config.etherscan.timeout_ms == 5000
        assert config.etherscan.max_retries == 5
        assert config.rpc == RpcConfig(url="https://rpc.example")

    def test_bad_number(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("ETHERSCAN_API_KEY", "abc")
        clean_env.setenv("CHAIN_ID", "mainnet")

        with pytest.raises(ValueError):
            load_config_from_env()
