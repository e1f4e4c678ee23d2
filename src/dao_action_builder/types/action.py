"""
Result types produced by the encoder, decoder, loader and action builder.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from dao_action_builder.types.abi import AbiFunction


@dataclass(frozen=True)
class Action:
    """
    A fully resolved contract call, ready to be attached to a proposal.

    Attributes:
        contract_address: Target contract (lowercase 0x hex)
        function_signature: Canonical ``name(type,...)`` signature
        function_name: Function name
        calldata: 0x-prefixed ABI-encoded calldata
        abi: The single resolved function descriptor
        value: Native currency to send with the call (wei), if any
    """

    contract_address: str
    function_signature: str
    function_name: str
    calldata: str
    abi: AbiFunction
    value: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contractAddress": self.contract_address,
            "functionSignature": self.function_signature,
            "functionName": self.function_name,
            "calldata": self.calldata,
            "abi": [self.abi.to_abi_dict()],
            "value": str(self.value) if self.value is not None else None,
        }


@dataclass(frozen=True)
class EncodeCalldataResult:
    calldata: str
    function_signature: str


@dataclass(frozen=True)
class DecodeCalldataResult:
    """
    Calldata decoded back into display strings.

    ``parameters`` maps each input name to its denormalized text, in
    declaration order; ``parameter_types`` lists the declared types in the
    same order.
    """

    function_name: str
    function_signature: str
    parameters: Dict[str, str]
    parameter_types: List[str]


@dataclass(frozen=True)
class LoadAbiResult:
    """
    ABI loaded for an address, split into proxy and implementation parts.

    Both function lists only hold state-changing functions.
    """

    proxy_abi: List[AbiFunction]
    logic_abi: List[AbiFunction] = field(default_factory=list)
    implementation_address: Optional[str] = None
    is_proxy: bool = False


@dataclass(frozen=True)
class ParameterPresence:
    """Whether every declared input has a value, and which ones do not."""

    valid: bool
    missing: List[str]
