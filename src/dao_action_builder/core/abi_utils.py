"""
ABI helpers: function filtering, signature building and lookup.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional

from dao_action_builder.types.abi import AbiFunction, FunctionLike, as_function
from dao_action_builder.types.action import LoadAbiResult

ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")


def is_valid_address(address: Any) -> bool:
    """Check for a 0x-prefixed 40-hex-digit address (any letter case)."""
    return isinstance(address, str) and bool(ADDRESS_PATTERN.match(address))


def parse_abi(abi: Iterable[Any]) -> List[AbiFunction]:
    """
    Extract the function entries of an ABI.

    Accepts AbiFunction models and raw ABI JSON entries; events, errors,
    constructors and fallbacks are skipped.
    """
    functions: List[AbiFunction] = []
    for item in abi:
        if isinstance(item, AbiFunction):
            functions.append(item)
        elif isinstance(item, Mapping) and item.get("type") == "function":
            functions.append(AbiFunction.model_validate(item))
    return functions


def filter_state_changing_functions(abi: Iterable[Any]) -> List[AbiFunction]:
    """Keep only functions whose mutability is neither ``view`` nor ``pure``."""
    return [fn for fn in parse_abi(abi) if fn.is_state_changing]


def get_function_signature(function: FunctionLike) -> str:
    """
    Build the lookup signature ``name(type1,type2,...)``.

    Uses each input's literal declared type, so structs appear as ``tuple``
    (or ``tuple[]``), never as their expanded component list.
    """
    return as_function(function).signature


def find_function_by_signature(
    signature: str, abi: Iterable[Any]
) -> Optional[AbiFunction]:
    for fn in parse_abi(abi):
        if fn.signature == signature:
            return fn
    return None


def find_functions_by_name(name: str, abi: Iterable[Any]) -> List[AbiFunction]:
    """All overloads of ``name``, in ABI order."""
    return [fn for fn in parse_abi(abi) if fn.name == name]


def get_available_functions(abi_result: LoadAbiResult) -> List[AbiFunction]:
    """
    Merge implementation and proxy functions into one callable list.

    Implementation functions come first; a proxy function with the same
    signature replaces the implementation entry in place.
    """
    functions: Dict[str, AbiFunction] = {}
    for fn in abi_result.logic_abi:
        functions[fn.signature] = fn
    for fn in abi_result.proxy_abi:
        functions[fn.signature] = fn
    return list(functions.values())
