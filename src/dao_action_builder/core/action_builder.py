"""
Action assembly: turn an address, a signature and named parameter text into
a validated, encoded contract call.

Example:
    >>> action = build_action(
    ...     "0x1111111111111111111111111111111111111111",
    ...     "transfer(address,uint256)",
    ...     {"to": "0x2222222222222222222222222222222222222222", "amount": "1000"},
    ...     ERC20_ABI,
    ... )
    >>> action.calldata[:10]
    '0xa9059cbb'
"""

from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Tuple, Union

from dao_action_builder.core.abi_utils import find_function_by_signature, is_valid_address
from dao_action_builder.core.calldata_encoder import encode_calldata
from dao_action_builder.errors import (
    FunctionNotFoundError,
    InvalidAddressError,
    InvalidParameterError,
)
from dao_action_builder.predefined import PredefinedMethodRegistry, predefined_method_registry
from dao_action_builder.types.action import Action
from dao_action_builder.utils.logging import get_logger
from dao_action_builder.validation.literals import to_text
from dao_action_builder.validation.validators import validate_parameter_type, validate_uint

_logger = get_logger(__name__)

NativeValue = Union[int, str, None]


def _resolve_value(value: NativeValue) -> Optional[int]:
    if value is None:
        return None
    result = validate_uint(to_text(value))
    if not result.is_valid:
        raise InvalidParameterError("value", result.error or "Invalid value")
    return result.normalized_value


def build_action(
    contract_address: str,
    function_signature: str,
    parameters: Mapping[str, Any],
    abi: Iterable[Any],
    value: NativeValue = None,
) -> Action:
    """
    Validate and encode a single contract call.

    Each step is a hard gate and the first failure is raised.

    Args:
        contract_address: Target contract address (any letter case)
        function_signature: Exact ``name(type,...)`` signature in ``abi``
        parameters: Input name to value; text as typed, or structured
            lists/dicts for arrays and tuples
        abi: Functions to resolve against (AbiFunction models or ABI JSON)
        value: Native currency to attach, in wei (int or decimal text)

    Returns:
        The assembled Action.

    Raises:
        InvalidAddressError: If the address is malformed.
        FunctionNotFoundError: If the signature is not in the ABI.
        InvalidParameterError: If an input is missing or invalid, or
            ``value`` is not a uint256.
        EncodingError: If the codec rejects the normalized values.
    """
    if not is_valid_address(contract_address):
        raise InvalidAddressError(contract_address)

    functions = list(abi)
    function = find_function_by_signature(function_signature, functions)
    if function is None:
        raise FunctionNotFoundError(
            f"Function not found: {function_signature}", signature=function_signature
        )

    for param in function.inputs:
        raw = parameters.get(param.name)
        if raw is None:
            raise InvalidParameterError(param.name, "Value is required", missing=True)

        result = validate_parameter_type(to_text(raw), param.type, param.components)
        if not result.is_valid:
            raise InvalidParameterError(param.name, result.error or "Invalid value")

    native_value = _resolve_value(value)
    encoded = encode_calldata([function], function_signature, parameters)

    action = Action(
        contract_address=contract_address.lower(),
        function_signature=encoded.function_signature,
        function_name=function.name,
        calldata=encoded.calldata,
        abi=function,
        value=native_value,
    )
    _logger.debug(
        "Built action",
        extra={"contract": action.contract_address, "signature": action.function_signature},
    )
    return action


def build_action_from_predefined(
    method_id: str,
    contract_address: str,
    function_signature: str,
    parameters: Mapping[str, Any],
    value: NativeValue = None,
    registry: Optional[PredefinedMethodRegistry] = None,
) -> Action:
    """
    Build an action using a predefined method set's ABI (e.g. ``"erc20"``).

    Raises:
        FunctionNotFoundError: If the method set id is not registered.
    """
    registry = registry if registry is not None else predefined_method_registry
    method = registry.get(method_id)
    if method is None:
        raise FunctionNotFoundError(f"Predefined method set not found: {method_id}")
    return build_action(contract_address, function_signature, parameters, method.abi, value)


class ActionBuilder:
    """
    Fluent collector for the ordered actions of one governance proposal.

    Example:
        ```python
        actions = (
            ActionBuilder()
            .add_predefined_action("erc20", token, "transfer(address,uint256)",
                                   {"to": recipient, "amount": "1000"})
            .add_predefined_action("pausable", vault, "pause()", {})
            .build()
        )
        targets, values, calldatas = ActionBuilder.from_actions(actions).to_proposal_arguments()
        ```
    """

    def __init__(self, registry: Optional[PredefinedMethodRegistry] = None) -> None:
        self._registry = registry
        self._actions: List[Action] = []

    @classmethod
    def from_actions(cls, actions: Iterable[Action]) -> "ActionBuilder":
        builder = cls()
        for action in actions:
            builder.add(action)
        return builder

    @property
    def actions(self) -> List[Action]:
        return list(self._actions)

    def __len__(self) -> int:
        return len(self._actions)

    def add(self, action: Action) -> "ActionBuilder":
        """Append an already-built action."""
        self._actions.append(action)
        return self

    def add_action(
        self,
        contract_address: str,
        function_signature: str,
        parameters: Mapping[str, Any],
        abi: Iterable[Any],
        value: NativeValue = None,
    ) -> "ActionBuilder":
        """Build (see build_action) and append an action; errors propagate."""
        return self.add(
            build_action(contract_address, function_signature, parameters, abi, value)
        )

    def add_predefined_action(
        self,
        method_id: str,
        contract_address: str,
        function_signature: str,
        parameters: Mapping[str, Any],
        value: NativeValue = None,
    ) -> "ActionBuilder":
        return self.add(
            build_action_from_predefined(
                method_id,
                contract_address,
                function_signature,
                parameters,
                value,
                self._registry,
            )
        )

    def remove_action(self, index: int) -> Action:
        """Remove and return the action at ``index``; raises IndexError if absent."""
        return self._actions.pop(index)

    def clear(self) -> "ActionBuilder":
        self._actions.clear()
        return self

    def build(self) -> List[Action]:
        """
        Return the collected actions in insertion order.

        Raises:
            ValueError: If no action was added.
        """
        if not self._actions:
            raise ValueError("At least one action is required")
        return list(self._actions)

    def to_proposal_arguments(self) -> Tuple[List[str], List[int], List[str]]:
        """``(targets, values, calldatas)`` as taken by a Governor ``propose`` call."""
        actions = self.build()
        return (
            [action.contract_address for action in actions],
            [action.value or 0 for action in actions],
            [action.calldata for action in actions],
        )
