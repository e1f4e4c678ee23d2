"""
Configuration for the ABI-loading collaborators.

Only AbiLoader needs configuration; validation, encoding and action
assembly are pure functions and take none.
"""

from __future__ import annotations

import os
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_ETHERSCAN_API_URL = "https://api.etherscan.io/v2/api"


class EtherscanConfig(BaseModel):
    """
    Block-explorer (Etherscan v2 multichain API) settings.

    Example:
        ```python
        config = EtherscanConfig(
            api_key=os.environ["ETHERSCAN_API_KEY"],
            chain_id=11155111,
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    api_key: str = Field(..., description="Etherscan API key")
    api_url: str = Field(
        default=DEFAULT_ETHERSCAN_API_URL,
        description="Explorer API endpoint",
    )
    chain_id: int = Field(default=1, ge=1, description="EVM chain ID")
    timeout_ms: int = Field(
        default=10000,
        ge=1000,
        description="Request timeout in milliseconds",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Attempts per request on transport errors",
    )


class RpcConfig(BaseModel):
    """JSON-RPC endpoint used for proxy-implementation detection."""

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., description="HTTP JSON-RPC URL")


class ActionBuilderConfig(BaseModel):
    """Top-level configuration. Without ``rpc``, proxy detection is skipped."""

    model_config = ConfigDict(frozen=True)

    etherscan: EtherscanConfig
    rpc: Optional[RpcConfig] = None


def load_config_from_env() -> ActionBuilderConfig:
    """
    Load configuration from environment variables.

    ETHERSCAN_API_KEY is required. Optional: ETHERSCAN_API_URL, CHAIN_ID,
    REQUEST_TIMEOUT_MS, REQUEST_RETRIES, RPC_URL.

    Raises:
        ValueError: If ETHERSCAN_API_KEY is missing or a numeric variable
            does not parse.
    """
    api_key = os.getenv("ETHERSCAN_API_KEY")
    if not api_key:
        raise ValueError("ETHERSCAN_API_KEY is required but not set.")

    etherscan = EtherscanConfig(
        api_key=api_key,
        api_url=os.getenv("ETHERSCAN_API_URL", DEFAULT_ETHERSCAN_API_URL).rstrip("/"),
        chain_id=int(os.getenv("CHAIN_ID", "1")),
        timeout_ms=int(os.getenv("REQUEST_TIMEOUT_MS", "10000")),
        max_retries=int(os.getenv("REQUEST_RETRIES", "3")),
    )

    rpc_url = (os.getenv("RPC_URL") or "").strip()
    rpc = RpcConfig(url=rpc_url) if rpc_url else None

    return ActionBuilderConfig(etherscan=etherscan, rpc=rpc)
