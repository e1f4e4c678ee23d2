"""
ABI descriptor models.

Pydantic models for the subset of the Solidity JSON ABI the action builder
works with: function entries and their (possibly nested) parameters. Models
accept the standard camelCase ABI keys and dump back to them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Mapping, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator


StateMutability = Literal["pure", "view", "nonpayable", "payable"]
"""Function state mutability as declared in the ABI."""


# ============================================================================
# Parameters
# ============================================================================


class AbiParameter(BaseModel):
    """
    A single ABI input/output parameter.

    Tuple parameters carry their fields in ``components``; each component is
    itself an AbiParameter, so nested structs form a tree.

    Example:
        ```python
        param = AbiParameter.model_validate({
            "name": "order",
            "type": "tuple",
            "components": [
                {"name": "maker", "type": "address"},
                {"name": "amount", "type": "uint256"},
            ],
        })
        ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(default="", description="Parameter name (may be empty)")
    type: str = Field(..., description="Solidity type string, e.g. uint256[2][]")
    components: Optional[List[AbiParameter]] = Field(
        default=None,
        description="Tuple fields in declaration order",
    )
    indexed: Optional[bool] = None
    internal_type: Optional[str] = Field(default=None, alias="internalType")

    def to_abi_dict(self) -> Dict[str, Any]:
        """Dump to ABI JSON (camelCase keys, unset fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


# ============================================================================
# Functions
# ============================================================================


class AbiFunction(BaseModel):
    """
    A function entry of a contract ABI.

    Legacy ABIs that predate ``stateMutability`` are accepted: the mutability
    is derived from their ``constant``/``payable`` flags.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    type: Literal["function"] = "function"
    name: str
    inputs: List[AbiParameter] = Field(default_factory=list)
    outputs: List[AbiParameter] = Field(default_factory=list)
    state_mutability: StateMutability = Field(
        default="nonpayable", alias="stateMutability"
    )
    constant: Optional[bool] = None
    payable: Optional[bool] = None

    @model_validator(mode="before")
    @classmethod
    def _derive_state_mutability(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        if "stateMutability" in data or "state_mutability" in data:
            return data
        data = dict(data)
        if data.get("constant"):
            data["stateMutability"] = "view"
        elif data.get("payable"):
            data["stateMutability"] = "payable"
        return data

    @property
    def signature(self) -> str:
        """Canonical lookup key: ``name(type1,type2,...)`` with literal types."""
        return f"{self.name}({','.join(param.type for param in self.inputs)})"

    @property
    def is_state_changing(self) -> bool:
        return self.state_mutability not in ("view", "pure")

    def to_abi_dict(self) -> Dict[str, Any]:
        """Dump to ABI JSON (camelCase keys, unset fields omitted)."""
        return self.model_dump(by_alias=True, exclude_none=True)


AbiParameter.model_rebuild()
AbiFunction.model_rebuild()


ParameterLike = Union[AbiParameter, Mapping[str, Any]]
FunctionLike = Union[AbiFunction, Mapping[str, Any]]


def as_parameters(
    components: Optional[Sequence[ParameterLike]],
) -> Optional[List[AbiParameter]]:
    """Coerce plain ABI dicts into AbiParameter models (None stays None)."""
    if components is None:
        return None
    return [
        item if isinstance(item, AbiParameter) else AbiParameter.model_validate(item)
        for item in components
    ]


def as_function(function: FunctionLike) -> AbiFunction:
    """Coerce a plain ABI dict into an AbiFunction model."""
    if isinstance(function, AbiFunction):
        return function
    return AbiFunction.model_validate(function)
