"""
DAO Action Builder - build governance proposal actions from contract ABIs.

Validates human-entered parameter text against Solidity ABI types, normalizes
it for the ABI codec and assembles encoded contract calls ready to attach to
a proposal.

Quick Start:
    >>> from dao_action_builder import ActionBuilder
    >>>
    >>> targets, values, calldatas = (
    ...     ActionBuilder()
    ...     .add_predefined_action(
    ...         "erc20",
    ...         "0x1111111111111111111111111111111111111111",
    ...         "transfer(address,uint256)",
    ...         {"to": "0x2222222222222222222222222222222222222222", "amount": "1000"},
    ...     )
    ...     .to_proposal_arguments()
    ... )

Loading ABIs from a block explorer:
    >>> import asyncio
    >>> from dao_action_builder import AbiLoader, get_available_functions, load_config_from_env
    >>>
    >>> async def main():
    ...     loader = AbiLoader(load_config_from_env())
    ...     result = await loader.load_abi("0x1234567890123456789012345678901234567890")
    ...     for fn in get_available_functions(result):
    ...         print(fn.signature)
    ...
    >>> asyncio.run(main())

Modules:
- `validation`: type grammar, validators, normalizer and denormalizer
- `core`: ABI helpers, calldata encoder/decoder, action assembly, ABI loading
- `predefined`: catalog of well-known interfaces (ERC-20, Ownable, ...)
- `errors`: exception hierarchy
- `utils`: logging and retry helpers
"""

from dao_action_builder.version import __version__, __version_info__

# Configuration
from dao_action_builder.config import (
    ActionBuilderConfig,
    EtherscanConfig,
    RpcConfig,
    load_config_from_env,
)

# Core
from dao_action_builder.core import (
    AbiCache,
    AbiLoader,
    ActionBuilder,
    build_action,
    build_action_from_predefined,
    decode_calldata,
    decode_calldata_by_signature,
    encode_calldata,
    encode_calldata_by_name,
    filter_state_changing_functions,
    find_function_by_signature,
    find_functions_by_name,
    format_decoded_parameters,
    get_available_functions,
    get_function_signature,
    is_valid_address,
    parse_abi,
    try_decode_calldata,
    validate_function_parameters,
)

# Errors
from dao_action_builder.errors import (
    AbiFetchError,
    ActionBuilderError,
    ContractNotFoundError,
    DecodingError,
    EncodingError,
    ErrorCode,
    FunctionNotFoundError,
    InvalidAddressError,
    InvalidApiKeyError,
    InvalidParameterError,
    NetworkError,
    NormalizationError,
    RpcError,
)

# Predefined methods
from dao_action_builder.predefined import (
    PredefinedMethod,
    PredefinedMethodRegistry,
    create_default_registry,
    predefined_method_registry,
)

# Types
from dao_action_builder.types import (
    AbiFunction,
    AbiParameter,
    Action,
    DecodeCalldataResult,
    EncodeCalldataResult,
    LoadAbiResult,
    ParameterPresence,
)

# Validation
from dao_action_builder.validation import (
    ParameterValidationResult,
    TypeDescriptor,
    denormalize_parameter_value,
    get_parameter_type_error_message,
    normalize_parameter_value,
    parse_type,
    prepare_parameters_for_encoding,
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
    "__version__",
    "__version_info__",
    # Configuration
    "ActionBuilderConfig",
    "EtherscanConfig",
    "RpcConfig",
    "load_config_from_env",
    # Core
    "AbiCache",
    "AbiLoader",
    "ActionBuilder",
    "build_action",
    "build_action_from_predefined",
    "decode_calldata",
    "decode_calldata_by_signature",
    "encode_calldata",
    "encode_calldata_by_name",
    "filter_state_changing_functions",
    "find_function_by_signature",
    "find_functions_by_name",
    "format_decoded_parameters",
    "get_available_functions",
    "get_function_signature",
    "is_valid_address",
    "parse_abi",
    "try_decode_calldata",
    "validate_function_parameters",
    # Errors
    "AbiFetchError",
    "ActionBuilderError",
    "ContractNotFoundError",
    "DecodingError",
    "EncodingError",
    "ErrorCode",
    "FunctionNotFoundError",
    "InvalidAddressError",
    "InvalidApiKeyError",
    "InvalidParameterError",
    "NetworkError",
    "NormalizationError",
    "RpcError",
    # Predefined methods
    "PredefinedMethod",
    "PredefinedMethodRegistry",
    "create_default_registry",
    "predefined_method_registry",
    # Types
    "AbiFunction",
    "AbiParameter",
    "Action",
    "DecodeCalldataResult",
    "EncodeCalldataResult",
    "LoadAbiResult",
    "ParameterPresence",
    # Validation
    "ParameterValidationResult",
    "TypeDescriptor",
    "denormalize_parameter_value",
    "get_parameter_type_error_message",
    "normalize_parameter_value",
    "parse_type",
    "prepare_parameters_for_encoding",
    "validate_address",
    "validate_array",
    "validate_bool",
    "validate_bytes",
    "validate_function_inputs",
    "validate_int",
    "validate_parameter_type",
    "validate_string",
    "validate_tuple",
    "validate_uint",
]
