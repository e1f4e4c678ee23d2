"""
Predefined method sets for well-known contract interfaces.

Example:
    >>> from dao_action_builder.predefined import predefined_method_registry
    >>> predefined_method_registry.get("erc20").abi[0].signature
    'approve(address,uint256)'
"""

from dao_action_builder.predefined.catalog import (
    ACCESS_CONTROL_METHODS,
    BUILTIN_METHODS,
    ERC20_METHODS,
    ERC721_METHODS,
    ERC1155_METHODS,
    OWNABLE_METHODS,
    PAUSABLE_METHODS,
    UUPS_METHODS,
)
from dao_action_builder.predefined.registry import (
    PredefinedMethod,
    PredefinedMethodRegistry,
)


def create_default_registry() -> PredefinedMethodRegistry:
    """A new registry holding the builtin catalog."""
    return PredefinedMethodRegistry(BUILTIN_METHODS)


predefined_method_registry = create_default_registry()
"""Shared registry pre-populated with the builtin catalog."""

__all__ = [
    "PredefinedMethod",
    "PredefinedMethodRegistry",
    "create_default_registry",
    "predefined_method_registry",
    "BUILTIN_METHODS",
    "ERC20_METHODS",
    "ERC721_METHODS",
    "ERC1155_METHODS",
    "OWNABLE_METHODS",
    "ACCESS_CONTROL_METHODS",
    "PAUSABLE_METHODS",
    "UUPS_METHODS",
]
