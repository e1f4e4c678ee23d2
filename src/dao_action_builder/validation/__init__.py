"""
Type-directed validation and normalization of ABI parameter values.

Example:
    >>> from dao_action_builder.validation import validate_parameter_type
    >>> result = validate_parameter_type('{"to": "0x11...11", "amount": "1000"}', "tuple", [
    ...     {"name": "to", "type": "address"},
    ...     {"name": "amount", "type": "uint256"},
    ... ])
    >>> result.normalized_value
    {'to': '0x11...11', 'amount': 1000}
"""

from dao_action_builder.validation.normalizers import (
    denormalize_parameter_value,
    normalize_parameter_value,
    prepare_parameters_for_encoding,
)
from dao_action_builder.validation.result import ParameterValidationResult
from dao_action_builder.validation.types import TypeDescriptor, format_type, parse_type
from dao_action_builder.validation.validators import (
    get_parameter_type_error_message,
    validate_address,
    validate_array,
    validate_bool,
    validate_bytes,
    validate_function_inputs,
    validate_int,
    validate_parameter_type,
    validate_string,
    validate_tuple,
    validate_uint,
)

__all__ = [
    # Type grammar
    "TypeDescriptor",
    "parse_type",
    "format_type",
    # Validation
    "ParameterValidationResult",
    "validate_parameter_type",
    "validate_function_inputs",
    "validate_address",
    "validate_uint",
    "validate_int",
    "validate_bool",
    "validate_bytes",
    "validate_string",
    "validate_array",
    "validate_tuple",
    "get_parameter_type_error_message",
    # Normalization
    "normalize_parameter_value",
    "denormalize_parameter_value",
    "prepare_parameters_for_encoding",
]
