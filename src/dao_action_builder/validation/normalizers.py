"""
Normalization between user-facing text and codec values.

normalize_parameter_value() turns validated text into the shape the ABI codec
consumes. Tuples become positional lists in component order, and integers
become canonical decimal strings so no precision is lost before the codec
parses them.

denormalize_parameter_value() goes the other way. It renders a decoded codec
value as display text that validates again against the same type.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from dao_action_builder.errors import NormalizationError
from dao_action_builder.types.abi import ParameterLike, as_parameters
from dao_action_builder.validation.literals import (
    dump_json,
    load_json,
    parse_integer_literal,
    to_text,
)
from dao_action_builder.validation.types import parse_type


def _load_composite(value: Any, expected: type, invalid_json: str, wrong_shape: str) -> Any:
    if isinstance(value, str):
        try:
            value = load_json(value)
        except ValueError as e:
            raise NormalizationError(invalid_json, cause=e) from e
    if expected is list and isinstance(value, tuple):
        value = list(value)
    if not isinstance(value, expected):
        raise NormalizationError(wrong_shape)
    return value


def normalize_parameter_value(
    value: Any,
    abi_type: str,
    components: Optional[Sequence[ParameterLike]] = None,
) -> Any:
    """
    Convert a validated value into its codec-ready form.

    Args:
        value: Text (or structured list/dict) that already passed validation
        abi_type: Declared Solidity type
        components: Tuple fields, for tuple types

    Returns:
        str, bool, or nested lists of those.

    Raises:
        NormalizationError: If the value does not have the shape the type
            requires (bad JSON, missing tuple field, non-integer literal).
    """
    parsed = parse_type(abi_type)
    params = as_parameters(components)

    if parsed.is_array:
        items = _load_composite(
            value,
            list,
            f"Invalid JSON array for type {abi_type}",
            f"Expected array for type {abi_type}",
        )
        element_type = parsed.element_type()
        return [
            normalize_parameter_value(to_text(item), element_type, params)
            for item in items
        ]

    if parsed.is_tuple:
        if not params:
            raise NormalizationError("Tuple components are required")
        fields = _load_composite(
            value, Mapping, "Invalid JSON object for tuple", "Expected object for tuple"
        )
        normalized: List[Any] = []
        for component in params:
            if component.name not in fields:
                raise NormalizationError(f"Missing tuple field: {component.name}")
            normalized.append(
                normalize_parameter_value(
                    to_text(fields[component.name]), component.type, component.components
                )
            )
        return normalized

    text = to_text(value)
    base_type = parsed.base_type

    if base_type == "address":
        return text.lower()

    if base_type.startswith("uint") or base_type.startswith("int"):
        number = parse_integer_literal(text)
        if number is None:
            raise NormalizationError(f"Invalid integer for type {abi_type}: {text!r}")
        return str(number)

    if base_type == "bool":
        return text.strip().lower() == "true"

    return text


def denormalize_parameter_value(
    value: Any,
    abi_type: str,
    components: Optional[Sequence[ParameterLike]] = None,
) -> str:
    """
    Render a decoded codec value as display text.

    Arrays become JSON arrays of element strings and tuples become JSON
    objects keyed by component name. Integers are rendered as exact decimal
    text, bytes as 0x hex, addresses in lowercase, and None as "".
    """
    parsed = parse_type(abi_type)
    params = as_parameters(components)

    if parsed.is_array and isinstance(value, (list, tuple)):
        element_type = parsed.element_type()
        return dump_json(
            [denormalize_parameter_value(item, element_type, params) for item in value]
        )

    if parsed.is_tuple and params:
        if isinstance(value, (list, tuple)):
            fields = {
                component.name: denormalize_parameter_value(
                    value[index] if index < len(value) else None,
                    component.type,
                    component.components,
                )
                for index, component in enumerate(params)
            }
            return dump_json(fields)
        if isinstance(value, Mapping):
            return dump_json(
                {
                    component.name: denormalize_parameter_value(
                        value.get(component.name), component.type, component.components
                    )
                    for component in params
                }
            )

    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if parsed.base_type == "address" and not parsed.is_array:
        return str(value).lower()
    return str(value)


def prepare_parameters_for_encoding(
    parameters: Mapping[str, Any],
    inputs: Sequence[ParameterLike],
) -> List[Any]:
    """
    Normalize named parameters into the positional argument list of a call.

    Raises:
        NormalizationError: If an input has no value or fails to normalize.
    """
    arguments: List[Any] = []
    for param in as_parameters(inputs) or []:
        if param.name not in parameters or parameters[param.name] is None:
            raise NormalizationError(f"Missing parameter: {param.name}")
        arguments.append(
            normalize_parameter_value(parameters[param.name], param.type, param.components)
        )
    return arguments
