"""
Core operations: ABI lookup, calldata encoding/decoding, action assembly
and ABI loading.
"""

from dao_action_builder.core.abi_cache import AbiCache
from dao_action_builder.core.abi_loader import AbiLoader
from dao_action_builder.core.abi_utils import (
    filter_state_changing_functions,
    find_function_by_signature,
    find_functions_by_name,
    get_available_functions,
    get_function_signature,
    is_valid_address,
    parse_abi,
)
from dao_action_builder.core.action_builder import (
    ActionBuilder,
    build_action,
    build_action_from_predefined,
)
from dao_action_builder.core.calldata_decoder import (
    decode_calldata,
    decode_calldata_by_signature,
    format_decoded_parameters,
    try_decode_calldata,
)
from dao_action_builder.core.calldata_encoder import (
    encode_calldata,
    encode_calldata_by_name,
    validate_function_parameters,
)
from dao_action_builder.core.codec import function_selector

__all__ = [
    # ABI utilities
    "is_valid_address",
    "parse_abi",
    "filter_state_changing_functions",
    "get_function_signature",
    "find_function_by_signature",
    "find_functions_by_name",
    "get_available_functions",
    "function_selector",
    # Calldata
    "encode_calldata",
    "encode_calldata_by_name",
    "validate_function_parameters",
    "decode_calldata",
    "decode_calldata_by_signature",
    "try_decode_calldata",
    "format_decoded_parameters",
    # Actions
    "build_action",
    "build_action_from_predefined",
    "ActionBuilder",
    # Loading
    "AbiCache",
    "AbiLoader",
]
