"""
Registry of predefined method sets (well-known contract interfaces).
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from dao_action_builder.types.abi import AbiFunction


class PredefinedMethod(BaseModel):
    """
    A named set of functions for a well-known interface (e.g. ERC-20).

    Example:
        ```python
        ownable = PredefinedMethod(
            id="ownable",
            name="Ownable",
            abi=[{"type": "function", "name": "renounceOwnership", "inputs": []}],
        )
        ```
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: Optional[str] = None
    abi: List[AbiFunction] = Field(default_factory=list)


class PredefinedMethodRegistry:
    """Lookup table of PredefinedMethod entries by id. Later registrations replace earlier ones."""

    def __init__(self, methods: Optional[Iterable[PredefinedMethod]] = None) -> None:
        self._methods: Dict[str, PredefinedMethod] = {}
        if methods:
            self.register_all(methods)

    def register(self, method: PredefinedMethod) -> None:
        self._methods[method.id] = method

    def register_all(self, methods: Iterable[PredefinedMethod]) -> None:
        for method in methods:
            self.register(method)

    def unregister(self, method_id: str) -> bool:
        """Remove an entry; returns whether it existed."""
        return self._methods.pop(method_id, None) is not None

    def get(self, method_id: str) -> Optional[PredefinedMethod]:
        return self._methods.get(method_id)

    def has(self, method_id: str) -> bool:
        return method_id in self._methods

    def get_all(self) -> List[PredefinedMethod]:
        return list(self._methods.values())

    def get_ids(self) -> List[str]:
        return list(self._methods)

    def clear(self) -> None:
        self._methods.clear()

    def __len__(self) -> int:
        return len(self._methods)

    def __contains__(self, method_id: object) -> bool:
        return method_id in self._methods
