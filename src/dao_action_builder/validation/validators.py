"""
Parameter validators for Solidity ABI types.

validate_parameter_type() is the entry point: it parses the declared type and
routes the value to a scalar validator (address, uintN, intN, bool, bytes,
bytesN, string) or to a composite validator (arrays as JSON arrays, tuples as
JSON objects). Composite validators recurse back through the dispatcher, so
arbitrarily nested arrays of tuples of arrays are handled by plain function
composition.

Validators never raise. Every failure is reported as a
ParameterValidationResult carrying the first error found.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any, Dict, List, Optional, Sequence

from dao_action_builder.types.abi import (
    FunctionLike,
    ParameterLike,
    as_function,
    as_parameters,
)
from dao_action_builder.utils.logging import get_logger
from dao_action_builder.validation.literals import load_json, parse_integer_literal, to_text
from dao_action_builder.validation.result import ParameterValidationResult
from dao_action_builder.validation.types import parse_type

_logger = get_logger(__name__)

ADDRESS_PATTERN = re.compile(r"^0x[a-f0-9]{40}$")
HEX_STRING_PATTERN = re.compile(r"^0x[0-9a-fA-F]*$")
FIXED_BYTES_PATTERN = re.compile(r"^bytes([0-9]+)$")
_BIT_WIDTH_PATTERN = re.compile(r"[0-9]+")

DEFAULT_BIT_WIDTH = 256
MAX_FIXED_BYTES = 32

_ok = ParameterValidationResult.ok
_fail = ParameterValidationResult.fail


# =============================================================================
# Scalar validators
# =============================================================================


def validate_address(value: str) -> ParameterValidationResult:
    """Validate a 20-byte hex address; normalizes to lowercase."""
    if not value:
        return _fail("Address is required")

    lower_value = value.lower()
    if not ADDRESS_PATTERN.match(lower_value):
        return _fail("Invalid Ethereum address. Must be 40 hex characters starting with 0x")

    return _ok(lower_value)


def validate_uint(value: str, bits: int = DEFAULT_BIT_WIDTH) -> ParameterValidationResult:
    """
    Validate an unsigned integer literal against ``uint<bits>``.

    Literals are taken exactly as typed: surrounding whitespace is an error,
    not something to trim.
    """
    if not value or value.strip() != value:
        return _fail("Invalid number format (no spaces allowed)")

    number = parse_integer_literal(value)
    if number is None:
        return _fail("Invalid number format")
    if number < 0:
        return _fail("Must be a non-negative number")
    if number > 2**bits - 1:
        return _fail(f"Value exceeds uint{bits} max")

    return _ok(number)


def validate_int(value: str, bits: int = DEFAULT_BIT_WIDTH) -> ParameterValidationResult:
    """Validate a signed integer literal against ``int<bits>``."""
    if not value or value.strip() != value:
        return _fail("Invalid number format (no spaces allowed)")

    number = parse_integer_literal(value)
    if number is None:
        return _fail("Invalid number format")

    max_value = 2 ** (bits - 1) - 1
    min_value = -(2 ** (bits - 1))
    if number > max_value or number < min_value:
        return _fail(f"Value out of range for int{bits}")

    return _ok(number)


def validate_bool(value: str) -> ParameterValidationResult:
    normalized = value.strip().lower()
    if normalized == "true":
        return _ok(True)
    if normalized == "false":
        return _ok(False)
    return _fail('Must be "true" or "false"')


def validate_bytes(
    value: str, fixed_length: Optional[int] = None
) -> ParameterValidationResult:
    """
    Validate a 0x-prefixed hex byte string.

    Args:
        value: Hex text; ``0x`` alone is zero-length bytes
        fixed_length: Required byte length for ``bytesN`` (at most 32)
    """
    if not value:
        return _fail("Bytes value is required")
    if not value.startswith("0x"):
        return _fail("Must start with 0x")
    if not HEX_STRING_PATTERN.match(value):
        return _fail("Invalid hex string")

    digits = len(value) - 2
    if digits % 2:
        return _fail("Hex string must have an even number of digits")

    if fixed_length is not None:
        if fixed_length > MAX_FIXED_BYTES:
            return _fail(f"Fixed bytes cannot exceed {MAX_FIXED_BYTES}")
        if digits // 2 != fixed_length:
            return _fail(f"Must be exactly {fixed_length} bytes")

    return _ok(value)


def validate_string(value: str) -> ParameterValidationResult:
    return _ok(value)


# =============================================================================
# Composite validators
# =============================================================================


def validate_array(
    value: Any,
    element_type: str,
    components: Optional[Sequence[ParameterLike]] = None,
    expected_length: Optional[int] = None,
) -> ParameterValidationResult:
    """
    Validate a JSON array literal element by element.

    Args:
        value: JSON array text, or an already-parsed list/tuple
        element_type: Type every element must satisfy (may itself be an array)
        components: Tuple fields, when the elements are tuples
        expected_length: Exact element count for fixed-size arrays
    """
    if isinstance(value, str):
        try:
            parsed = load_json(value)
        except ValueError:
            return _fail("Invalid JSON array format")
    elif isinstance(value, (list, tuple)):
        parsed = list(value)
    else:
        return _fail("Array must be a JSON array string")

    if not isinstance(parsed, list):
        return _fail("Must be a valid JSON array")

    if expected_length is not None and len(parsed) != expected_length:
        return _fail(f"Array must have exactly {expected_length} elements")

    validated: List[Any] = []
    for index, element in enumerate(parsed):
        result = validate_parameter_type(to_text(element), element_type, components)
        if not result.is_valid:
            return _fail(f"Invalid element at index {index}: {result.error}")
        validated.append(result.normalized_value)

    return _ok(validated)


def validate_tuple(
    value: Any,
    components: Sequence[ParameterLike],
) -> ParameterValidationResult:
    """
    Validate a JSON object literal against tuple components.

    Fields are checked in declaration order and the first missing or invalid
    field is reported. Keys not declared by any component are ignored.
    """
    if isinstance(value, str):
        try:
            parsed = load_json(value)
        except ValueError:
            return _fail("Invalid JSON object format")
    elif isinstance(value, Mapping):
        parsed = value
    else:
        return _fail("Tuple must be a JSON object string")

    if not isinstance(parsed, Mapping):
        return _fail("Must be a valid JSON object")

    validated: Dict[str, Any] = {}
    for component in as_parameters(components) or []:
        if component.name not in parsed:
            return _fail(f"Missing required field: {component.name}")

        result = validate_parameter_type(
            to_text(parsed[component.name]), component.type, component.components
        )
        if not result.is_valid:
            return _fail(f'Invalid field "{component.name}": {result.error}')
        validated[component.name] = result.normalized_value

    return _ok(validated)


# =============================================================================
# Dispatch
# =============================================================================


def _bit_width(suffix: str) -> int:
    match = _BIT_WIDTH_PATTERN.match(suffix)
    bits = int(match.group(0)) if match else 0
    return bits or DEFAULT_BIT_WIDTH


def _validate_scalar(value: str, base_type: str) -> ParameterValidationResult:
    if base_type == "address":
        return validate_address(value)
    if base_type.startswith("uint"):
        return validate_uint(value, _bit_width(base_type[4:]))
    if base_type.startswith("int"):
        return validate_int(value, _bit_width(base_type[3:]))
    if base_type == "bool":
        return validate_bool(value)
    if base_type == "bytes":
        return validate_bytes(value)

    fixed = FIXED_BYTES_PATTERN.match(base_type)
    if fixed:
        return validate_bytes(value, int(fixed.group(1)))
    if base_type == "string":
        return validate_string(value)

    _logger.warning(
        "Accepting value for unrecognized ABI type without validation",
        extra={"abi_type": base_type},
    )
    return _ok(value)


def validate_parameter_type(
    value: Any,
    abi_type: str,
    components: Optional[Sequence[ParameterLike]] = None,
) -> ParameterValidationResult:
    """
    Validate a value against any Solidity ABI type.

    Args:
        value: Text as typed by the user (or an already-structured
            list/dict for composite types). None is rejected; an empty
            string is left to the individual validators.
        abi_type: Declared type, e.g. ``address``, ``uint8[3]``, ``tuple[]``
        components: Tuple fields (AbiParameter models or ABI dicts)

    Returns:
        ParameterValidationResult with the normalized value or the first error.

    Example:
        >>> validate_parameter_type('["0x11...11"]', "address[]").is_valid
        True
    """
    if value is None:
        return _fail("Value is required")

    parsed = parse_type(abi_type)
    params = as_parameters(components)

    if parsed.is_array:
        return validate_array(
            value, parsed.element_type(), params, parsed.expected_length
        )

    if parsed.is_tuple:
        if not params:
            return _fail("Tuple components are required")
        return validate_tuple(value, params)

    return _validate_scalar(to_text(value), parsed.base_type)


def validate_function_inputs(
    function: FunctionLike,
    parameters: Mapping[str, Any],
) -> Dict[str, ParameterValidationResult]:
    """
    Validate every declared input of a function.

    Unlike build_action(), this does not stop at the first failure: it
    returns one result per input, keyed by name in declaration order, which
    suits form-style feedback. Missing inputs get the "Value is required"
    result.
    """
    fn = as_function(function)
    results: Dict[str, ParameterValidationResult] = {}
    for param in fn.inputs:
        results[param.name] = validate_parameter_type(
            parameters.get(param.name), param.type, param.components
        )
    return results


def get_parameter_type_error_message(abi_type: str) -> str:
    """User-facing input hint for a type, classified like the dispatcher."""
    parsed = parse_type(abi_type)
    base_type = parsed.base_type

    if parsed.is_array:
        return f"Must be a valid JSON array of {base_type} values"
    if parsed.is_tuple:
        return "Must be a valid JSON object matching the tuple structure"
    if base_type == "address":
        return "Invalid Ethereum address"
    if base_type.startswith("uint"):
        return "Must be a positive number (no spaces allowed)"
    if base_type.startswith("int"):
        return "Must be a valid number (no spaces allowed)"
    if base_type == "bool":
        return "Must be true or false"
    if base_type.startswith("bytes"):
        return "Must be a valid hex string starting with 0x"
    if base_type == "string":
        return "Must be a valid string"
    return "Invalid input"
