"""
ABI loading from a block explorer, with proxy-implementation detection.

Fetches contract ABIs through the Etherscan v2 multichain ``getabi``
endpoint and, when an RPC endpoint is configured, resolves the
implementation behind a proxy so both ABIs can be offered.

Example:
    >>> loader = AbiLoader(load_config_from_env())
    >>> result = await loader.load_abi("0x1234...")
    >>> functions = get_available_functions(result)
"""

from __future__ import annotations

import json
from typing import Any, List, Optional

import httpx
from web3 import AsyncWeb3

from dao_action_builder.config import ActionBuilderConfig
from dao_action_builder.core.abi_cache import AbiCache
from dao_action_builder.core.abi_utils import filter_state_changing_functions, is_valid_address
from dao_action_builder.errors import (
    AbiFetchError,
    ActionBuilderError,
    ContractNotFoundError,
    InvalidAddressError,
    InvalidApiKeyError,
    NetworkError,
    RpcError,
)
from dao_action_builder.types.action import LoadAbiResult
from dao_action_builder.utils.logging import get_logger
from dao_action_builder.utils.retry import RetryConfig, retry_async

_logger = get_logger(__name__)

EIP1967_IMPLEMENTATION_SLOT = (
    "0x360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc"
)
ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"

# Zero-argument views that proxies commonly expose, tried in order.
IMPLEMENTATION_GETTERS = ("implementation", "getImplementation", "logic")

DEPRECATED_API_MESSAGE = "Etherscan API V1 is deprecated. Please use the V2 API."


def _has_getter(abi: List[Any], name: str) -> bool:
    return any(
        isinstance(item, dict)
        and item.get("type") == "function"
        and item.get("name") == name
        and not item.get("inputs")
        for item in abi
    )


def _getter_abi(name: str) -> List[dict]:
    return [
        {
            "type": "function",
            "name": name,
            "inputs": [],
            "outputs": [{"name": "", "type": "address"}],
            "stateMutability": "view",
        }
    ]


class AbiLoader:
    """
    Loads contract ABIs and detects proxy implementations.

    Args:
        config: Explorer (and optional RPC) settings
        cache: ABI cache to read and fill; a private one is created if omitted
        retry_config: Retry policy for explorer requests; defaults to
            ``config.etherscan.max_retries`` attempts on transport errors
    """

    def __init__(
        self,
        config: ActionBuilderConfig,
        cache: Optional[AbiCache] = None,
        retry_config: Optional[RetryConfig] = None,
    ) -> None:
        self._config = config
        self._cache = cache if cache is not None else AbiCache()
        self._retry_config = retry_config or RetryConfig(
            max_attempts=config.etherscan.max_retries,
            base_delay_ms=500,
            max_delay_ms=5000,
            retryable_errors=(httpx.TransportError,),
        )

    @property
    def cache(self) -> AbiCache:
        return self._cache

    async def fetch_abi(self, address: str) -> List[Any]:
        """
        Fetch the raw ABI JSON list of a verified contract.

        Raises:
            NetworkError: On transport failure or a non-2xx status.
            InvalidApiKeyError: If the explorer rejects the API key.
            AbiFetchError: If the returned ABI is not a JSON list.
            ContractNotFoundError: For any other explorer error status.
        """
        cached = self._cache.get(address)
        if cached is not None:
            return cached

        etherscan = self._config.etherscan
        params = {
            "chainid": str(etherscan.chain_id),
            "module": "contract",
            "action": "getabi",
            "address": address,
            "apikey": etherscan.api_key,
        }

        async def do_fetch() -> Any:
            async with httpx.AsyncClient(
                timeout=httpx.Timeout(etherscan.timeout_ms / 1000)
            ) as client:
                response = await client.get(etherscan.api_url, params=params)

                if not 200 <= response.status_code < 300:
                    raise NetworkError(
                        f"HTTP error: {response.status_code}",
                        status_code=response.status_code,
                    )

                try:
                    return response.json()
                except ValueError as e:
                    raise AbiFetchError("Invalid explorer response", cause=e) from e

        _logger.debug("Fetching ABI", extra={"address": address, "chain_id": etherscan.chain_id})
        try:
            data = await retry_async(do_fetch, self._retry_config)
        except httpx.HTTPError as e:
            _logger.warning("ABI fetch failed", extra={"address": address, "error": str(e)})
            raise NetworkError(f"Network error: {e}", cause=e) from e

        abi = self._parse_response(data)
        self._cache.set(address, abi)
        _logger.info("Fetched ABI", extra={"address": address, "entries": len(abi)})
        return abi

    @staticmethod
    def _parse_response(data: Any) -> List[Any]:
        if not isinstance(data, dict):
            raise AbiFetchError("Invalid explorer response")

        message = str(data.get("message") or "")
        result = data.get("result")

        if "Invalid API Key" in message or "Invalid API Key" in str(result or ""):
            raise InvalidApiKeyError()

        if str(data.get("status")) == "1":
            try:
                abi = json.loads(result) if isinstance(result, str) else result
            except ValueError as e:
                raise AbiFetchError(cause=e) from e
            if not isinstance(abi, list):
                raise AbiFetchError()
            return abi

        error_message = message or "Failed to fetch contract ABI"
        if "deprecated" in error_message or "V1 endpoint" in error_message:
            error_message = DEPRECATED_API_MESSAGE
        raise ContractNotFoundError(f"{error_message}: {result or ''}")

    async def detect_proxy_implementation(
        self, address: str, abi: List[Any]
    ) -> Optional[str]:
        """
        Resolve the implementation address behind a proxy.

        Tries the ``implementation()``, ``getImplementation()`` and
        ``logic()`` views when the proxy ABI declares them, then the
        EIP-1967 implementation slot. Returns None without an RPC
        config, when nothing is found, or when the RPC calls fail.
        """
        if self._config.rpc is None or not self._config.rpc.url:
            return None

        try:
            implementation = await self._query_implementation(address, abi)
        except RpcError as e:
            _logger.warning(
                "Proxy detection failed",
                extra={"address": address, "error": e.message},
            )
            return None

        _logger.debug(
            "Proxy detection finished",
            extra={"address": address, "implementation": implementation},
        )
        return implementation

    async def _query_implementation(self, address: str, abi: List[Any]) -> Optional[str]:
        try:
            return await self._read_implementation(address, abi)
        except Exception as e:
            raise RpcError(f"RPC call failed: {e}", cause=e) from e

    async def _read_implementation(self, address: str, abi: List[Any]) -> Optional[str]:
        w3 = AsyncWeb3(AsyncWeb3.AsyncHTTPProvider(self._config.rpc.url))
        checksum = AsyncWeb3.to_checksum_address(address)

        for name in IMPLEMENTATION_GETTERS:
            if not _has_getter(abi, name):
                continue
            contract = w3.eth.contract(address=checksum, abi=_getter_abi(name))
            implementation = await contract.functions[name]().call()
            if implementation and implementation.lower() != ZERO_ADDRESS:
                return implementation

        storage = await w3.eth.get_storage_at(checksum, EIP1967_IMPLEMENTATION_SLOT)
        implementation = "0x" + bytes(storage)[-20:].hex()
        if len(bytes(storage)) >= 20 and implementation != ZERO_ADDRESS:
            return AsyncWeb3.to_checksum_address(implementation)
        return None

    async def load_abi(self, address: str) -> LoadAbiResult:
        """
        Load the state-changing functions of a contract, following proxies.

        Raises:
            InvalidAddressError: If ``address`` is malformed.
            ActionBuilderError: Any fetch error for the contract itself.
                A failed implementation fetch is logged and yields an
                empty ``logic_abi``.
        """
        if not is_valid_address(address):
            raise InvalidAddressError(address, message="Invalid Ethereum address")

        raw_abi = await self.fetch_abi(address)
        proxy_abi = filter_state_changing_functions(raw_abi)

        implementation = await self.detect_proxy_implementation(address, raw_abi)
        if not implementation:
            return LoadAbiResult(proxy_abi=proxy_abi)

        try:
            logic_raw = await self.fetch_abi(implementation)
        except ActionBuilderError as e:
            _logger.warning(
                "Implementation ABI fetch failed",
                extra={"implementation": implementation, "error": e.message},
            )
            return LoadAbiResult(
                proxy_abi=proxy_abi,
                implementation_address=implementation,
                is_proxy=True,
            )

        return LoadAbiResult(
            proxy_abi=proxy_abi,
            logic_abi=filter_state_changing_functions(logic_raw),
            implementation_address=implementation,
            is_proxy=True,
        )
