"""
In-memory ABI cache keyed by contract address.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class AbiCache:
    """
    Raw ABI lists by lowercased address.

    Owned by whoever creates it (usually one AbiLoader). Loads are not
    de-duplicated; the last ``set`` for an address wins.
    """

    def __init__(self) -> None:
        self._memory: Dict[str, List[Any]] = {}

    @staticmethod
    def _key(address: str) -> str:
        return address.lower()

    def get(self, address: str) -> Optional[List[Any]]:
        return self._memory.get(self._key(address))

    def set(self, address: str, abi: List[Any]) -> None:
        self._memory[self._key(address)] = abi

    def clear(self) -> None:
        self._memory.clear()

    def __contains__(self, address: object) -> bool:
        return isinstance(address, str) and self._key(address) in self._memory

    def __len__(self) -> int:
        return len(self._memory)
