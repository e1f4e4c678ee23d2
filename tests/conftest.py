"""
Shared fixtures and constants for the DAO action builder tests.
"""

from typing import Any, Dict, List

import pytest

from dao_action_builder.config import ActionBuilderConfig, EtherscanConfig, RpcConfig
from dao_action_builder.types import AbiFunction


# =============================================================================
# Test Constants
# =============================================================================

# Valid Ethereum addresses
VALID_CONTRACT = "0x1111111111111111111111111111111111111111"
VALID_RECIPIENT = "0x2222222222222222222222222222222222222222"
VALID_MIXED_CASE = "0xabcdefABCDEFabcdefABCDEFabcdefABCDEFabcd"
IMPLEMENTATION_ADDRESS = "0x3333333333333333333333333333333333333333"

# transfer(VALID_RECIPIENT, 1000)
TRANSFER_CALLDATA = (
    "0xa9059cbb"
    "0000000000000000000000002222222222222222222222222222222222222222"
    "00000000000000000000000000000000000000000000000000000000000003e8"
)

ROLE_HASH = "0x" + "ab" * 32


# =============================================================================
# Fixtures - ABIs
# =============================================================================


def _fn(
    name: str,
    inputs: List[Dict[str, Any]],
    state_mutability: str = "nonpayable",
    outputs: List[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    return {
        "type": "function",
        "name": name,
        "inputs": inputs,
        "outputs": outputs or [],
        "stateMutability": state_mutability,
    }


@pytest.fixture
def erc20_abi() -> List[Dict[str, Any]]:
    """ERC-20 ABI JSON including view functions and an event."""
    return [
        _fn(
            "transfer",
            [{"name": "to", "type": "address"}, {"name": "amount", "type": "uint256"}],
            outputs=[{"name": "", "type": "bool"}],
        ),
        _fn(
            "approve",
            [{"name": "spender", "type": "address"}, {"name": "amount", "type": "uint256"}],
            outputs=[{"name": "", "type": "bool"}],
        ),
        _fn(
            "balanceOf",
            [{"name": "account", "type": "address"}],
            state_mutability="view",
            outputs=[{"name": "", "type": "uint256"}],
        ),
        _fn("decimals", [], state_mutability="pure", outputs=[{"name": "", "type": "uint8"}]),
        {
            "type": "event",
            "name": "Transfer",
            "anonymous": False,
            "inputs": [
                {"name": "from", "type": "address", "indexed": True},
                {"name": "to", "type": "address", "indexed": True},
                {"name": "value", "type": "uint256", "indexed": False},
            ],
        },
    ]


@pytest.fixture
def transfer_function(erc20_abi: List[Dict[str, Any]]) -> AbiFunction:
    return AbiFunction.model_validate(erc20_abi[0])


@pytest.fixture
def composite_abi() -> List[Dict[str, Any]]:
    """Functions exercising nested arrays, structs and struct arrays."""
    order_components = [
        {"name": "maker", "type": "address"},
        {"name": "amount", "type": "uint256"},
    ]
    return [
        _fn("setMatrix", [{"name": "matrix", "type": "uint256[2][3]"}]),
        _fn(
            "submitOrder",
            [{"name": "order", "type": "tuple", "components": order_components}],
        ),
        _fn(
            "submitOrders",
            [{"name": "orders", "type": "tuple[]", "components": order_components}],
        ),
        _fn(
            "configure",
            [
                {
                    "name": "config",
                    "type": "tuple",
                    "components": [
                        {"name": "owners", "type": "address[]"},
                        {"name": "threshold", "type": "uint8"},
                        {"name": "paused", "type": "bool"},
                    ],
                }
            ],
        ),
        _fn(
            "execute",
            [
                {"name": "target", "type": "address"},
                {"name": "data", "type": "bytes"},
                {"name": "salt", "type": "bytes32"},
                {"name": "note", "type": "string"},
                {"name": "delta", "type": "int256"},
            ],
            state_mutability="payable",
        ),
    ]


# =============================================================================
# Fixtures - Configurations
# =============================================================================


@pytest.fixture
def etherscan_config() -> EtherscanConfig:
    return EtherscanConfig(api_key="test-api-key", chain_id=1)


@pytest.fixture
def builder_config(etherscan_config: EtherscanConfig) -> ActionBuilderConfig:
    """Config without RPC (proxy detection disabled)."""
    return ActionBuilderConfig(etherscan=etherscan_config)


@pytest.fixture
def builder_config_with_rpc(etherscan_config: EtherscanConfig) -> ActionBuilderConfig:
    return ActionBuilderConfig(
        etherscan=etherscan_config,
        rpc=RpcConfig(url="http://localhost:8545"),
    )
